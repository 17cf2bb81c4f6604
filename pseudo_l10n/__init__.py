"""
pseudo-l10n: генератор псевдолокали для тестирования i18n.

Преобразует файлы переводов так, чтобы на экране сразу были видны
захардкоженные строки, обрезка при удлинении текста и ошибки RTL-вёрстки —
без настоящего перевода.
"""

from __future__ import annotations

from .accents import DEFAULT_ACCENT_MAP, DEFAULT_EXPANSION_CHAR
from .config import DEFAULT_OPTIONS, PseudoConfig, load_config_file
from .engine import PseudoLocalizer, process_tree, pseudo_localize
from .errors import (
    ConfigurationError,
    FileReadError,
    FileWriteError,
    PseudoL10nError,
    UsageError,
)
from .io import (
    generate_file,
    generate_file_async,
    generate_pseudo_locale,
    generate_pseudo_locale_sync,
)
from .placeholders import PlaceholderMatcher, Segment, SegmentKind

# Совместимое имя (processObject)
process_object = process_tree

__all__ = [
    "pseudo_localize",
    "process_tree",
    "process_object",
    "PseudoLocalizer",
    "PseudoConfig",
    "load_config_file",
    "generate_file",
    "generate_file_async",
    "generate_pseudo_locale",
    "generate_pseudo_locale_sync",
    "PlaceholderMatcher",
    "Segment",
    "SegmentKind",
    "DEFAULT_ACCENT_MAP",
    "DEFAULT_EXPANSION_CHAR",
    "DEFAULT_OPTIONS",
    "PseudoL10nError",
    "ConfigurationError",
    "FileReadError",
    "FileWriteError",
    "UsageError",
]
