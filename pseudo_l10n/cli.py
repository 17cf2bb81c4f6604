from __future__ import annotations

import argparse
import logging
import os
import sys
from pathlib import Path
from typing import Any, Dict, NoReturn

from .config import DEFAULT_CONFIG, PseudoConfig, load_config_file, merge_options
from .errors import ConfigurationError, FileReadError, FileWriteError, UsageError
from .io import generate_file
from .version import tool_version

_LOG = logging.getLogger("pseudo_l10n")


def _setup_logging() -> None:
    if getattr(_setup_logging, "_inited", False):
        return
    _setup_logging._inited = True  # type: ignore[attr-defined]
    level = logging.DEBUG if os.environ.get("PSEUDO_L10N_DEBUG") else logging.WARNING
    _LOG.setLevel(level)
    if not _LOG.handlers:
        h = logging.StreamHandler()
        h.setFormatter(logging.Formatter("[%(levelname)s] %(message)s"))
        _LOG.addHandler(h)


class _ArgumentParser(argparse.ArgumentParser):
    """argparse, который вместо выхода с кодом 2 поднимает UsageError."""

    def error(self, message: str) -> NoReturn:
        raise UsageError(message, usage=self.format_usage())


def _build_parser() -> argparse.ArgumentParser:
    p = _ArgumentParser(
        prog="pseudo-l10n",
        description="Pseudo-locale generator for i18next-style JSON translation files",
        add_help=True,
    )
    p.add_argument("--version", action="version", version=f"%(prog)s {tool_version()}")
    p.add_argument("input", help="исходный JSON-файл с переводами")
    p.add_argument("output", help="куда записать псевдолокаль (каталоги создаются)")
    p.add_argument(
        "--expansion",
        type=int,
        metavar="PERCENT",
        help=f"удлинение текста в процентах (по умолчанию {DEFAULT_CONFIG.expansion})",
    )
    p.add_argument(
        "--replacePlaceholders",
        dest="replace_placeholders",
        action="store_true",
        help="выводить плейсхолдеры как <NAME> вместо {{name}}",
    )
    p.add_argument(
        "--rtl",
        action="store_true",
        help="имитация RTL: U+202E ... U+202C и развёрнутые плейсхолдеры",
    )
    p.add_argument(
        "--placeholderFormat",
        dest="placeholder_format",
        metavar="FORMAT",
        help='формат плейсхолдера с подстрокой "key", например "{key}" или "%%key%%"',
    )
    p.add_argument(
        "--config",
        metavar="FILE",
        help="YAML/JSON файл с опциями; флаги командной строки имеют приоритет",
    )
    return p


def _config(ns: argparse.Namespace) -> PseudoConfig:
    base = load_config_file(Path(ns.config)) if ns.config else DEFAULT_CONFIG

    overrides: Dict[str, Any] = {}
    if ns.expansion is not None:
        overrides["expansion"] = ns.expansion
    if ns.replace_placeholders:
        overrides["replacePlaceholders"] = True
    if ns.rtl:
        overrides["rtl"] = True
    if ns.placeholder_format is not None:
        overrides["placeholderFormat"] = ns.placeholder_format

    return merge_options(base, overrides)


def main(argv: list[str] | None = None) -> int:
    _setup_logging()
    parser = _build_parser()

    try:
        ns = parser.parse_args(argv)
        config = _config(ns)
        output = Path(ns.output).resolve()
        generate_file(Path(ns.input).resolve(), output, config)
    except UsageError as e:
        sys.stderr.write(e.usage or parser.format_usage())
        sys.stderr.write(f"{parser.prog}: error: {e}\n")
        return 1
    except ConfigurationError as e:
        sys.stderr.write(f"Error in configuration: {e}\n")
        return 1
    except FileReadError as e:
        sys.stderr.write(f"Error reading input file: {e}\n")
        return 1
    except FileWriteError as e:
        sys.stderr.write(f"Error writing output file: {e}\n")
        return 1

    sys.stdout.write(f"✅ Pseudo-locale file generated: {output}\n")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
