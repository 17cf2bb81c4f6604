#!/usr/bin/env python3
"""
Demonstrates pseudo-l10n usage from code.

Usage:
    python scripts/demo.py [output_dir]
"""

import sys
import tempfile
from pathlib import Path

from pseudo_l10n import generate_file, pseudo_localize
from pseudo_l10n.io import write_json

SAMPLE = {
    "app": {
        "title": "My Application",
        "greeting": "Hello, {{name}}! Welcome to our application.",
    },
    "inbox": {
        "summary": "You have {{count}} new messages",
        "empty": "No messages.",
    },
    "menu": ["File", "Edit", "View", "Help"],
    "itemsPerPage": 20,
    "beta": True,
}

# (format, sample)
PLACEHOLDER_FORMATS = [
    ("{{key}}", "Hello {{name}}, you have {{count}} messages"),
    ("{key}", "Hello {name}, you have {count} messages"),
    ("%key%", "Hello %name%, you have %count% messages"),
    ("${key}", "Hello ${name}, you have ${count} messages"),
]


def run(out_dir: Path) -> None:
    print("Example 1: single string")
    original = "Hello, {{name}}! Welcome to our application."
    print("  Original:", original)
    print("  Pseudo:  ", pseudo_localize(original))
    print()

    input_path = write_json(out_dir / "input.json", SAMPLE)

    variants = [
        ("output-default.json", None),
        ("output-custom.json", {"expansion": 30, "startMarker": "« ", "endMarker": " »"}),
        ("output-rtl.json", {"rtl": True}),
        ("output-replace-placeholders.json", {"replacePlaceholders": True}),
    ]
    for i, (name, options) in enumerate(variants, start=2):
        written = generate_file(input_path, out_dir / name, options)
        print(f"Example {i}: {options or 'default options'}")
        print("  Generated:", written)
    print()

    print("Placeholder formats:")
    for fmt, text in PLACEHOLDER_FORMATS:
        print(f"  {fmt:<8} {pseudo_localize(text, {'placeholderFormat': fmt})}")
    print()

    print("RTL placeholders:")
    print("  reversed:", pseudo_localize("Hello {{name}}", {"rtl": True, "reversePlaceholders": True}))
    print("  kept:    ", pseudo_localize("Hello {{name}}", {"rtl": True, "reversePlaceholders": False}))


if __name__ == "__main__":
    if len(sys.argv) > 1:
        target = Path(sys.argv[1])
        target.mkdir(parents=True, exist_ok=True)
        run(target)
    else:
        with tempfile.TemporaryDirectory() as tmp:
            run(Path(tmp))
