from __future__ import annotations

from .fs import read_json, write_json
from .generate import (
    generate_file,
    generate_file_async,
    generate_pseudo_locale,
    generate_pseudo_locale_sync,
)

__all__ = [
    "read_json",
    "write_json",
    "generate_file",
    "generate_file_async",
    "generate_pseudo_locale",
    "generate_pseudo_locale_sync",
]
