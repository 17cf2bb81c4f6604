"""
Base exception for user-facing errors.

All expected errors that should be displayed to the user
as clean messages (without stack traces) must inherit from PseudoL10nError.

Programming errors and bugs should NOT inherit from PseudoL10nError —
they will propagate with full tracebacks.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional, Union


class PseudoL10nError(Exception):
    """
    Base class for all user-facing errors in pseudo-l10n.

    These errors indicate problems that the user can fix:
    bad options, missing or malformed files, wrong CLI arguments.
    """
    pass


class ConfigurationError(PseudoL10nError, ValueError):
    """Некорректные опции (формат плейсхолдера без `key`, неверные типы и т.п.)."""
    pass


class _PathError(PseudoL10nError):
    """
    Ошибка, привязанная к конкретному файлу.
    Оригинальная причина доступна через __cause__.
    """

    def __init__(self, path: Union[str, Path], reason: str):
        self.path = Path(path)
        self.reason = reason
        super().__init__(f"{self.path}: {reason}")


class FileReadError(_PathError):
    """Исходный файл отсутствует, не читается или содержит невалидный JSON."""
    pass


class FileWriteError(_PathError):
    """Не удалось создать каталог назначения или записать файл."""
    pass


class UsageError(PseudoL10nError):
    """Неверные аргументы командной строки."""

    def __init__(self, message: str, usage: Optional[str] = None):
        self.usage = usage
        super().__init__(message)


__all__ = [
    "PseudoL10nError",
    "ConfigurationError",
    "FileReadError",
    "FileWriteError",
    "UsageError",
]
