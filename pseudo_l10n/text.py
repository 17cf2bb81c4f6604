"""
Преобразование литерального текста: замена символов и удлинение.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Mapping, Tuple

if TYPE_CHECKING:
    from .config.model import PseudoConfig

# Хвостовые символы, перед которыми вставляется заполнитель (плюс любые пробельные)
TRAILING_PUNCTUATION = frozenset(".,;:!?'\"()[]{}<>-")


def substitute(text: str, accent_map: Mapping[str, str]) -> str:
    """Заменяет символы по таблице; символы вне таблицы остаются как есть."""
    return "".join(accent_map.get(ch, ch) for ch in text)


def expansion_length(text: str, percent: int) -> int:
    """Длина заполнителя: ceil(len(text) * percent / 100) в целочисленной арифметике."""
    return -(-len(text) * percent // 100)


def _is_ascii_alnum(ch: str) -> bool:
    return ch.isascii() and ch.isalnum()


def _is_trailing(ch: str) -> bool:
    return ch.isspace() or ch in TRAILING_PUNCTUATION


def split_trailing(text: str) -> Tuple[str, str]:
    """
    Отделяет хвост из пробелов и знаков препинания.

    >>> split_trailing("Hello!  ")
    ('Hello', '!  ')
    """
    cut = len(text)
    while cut > 0 and _is_trailing(text[cut - 1]):
        cut -= 1
    return text[:cut], text[cut:]


def transform_literal(text: str, config: "PseudoConfig") -> str:
    """
    Псевдолокализует литеральный фрагмент.

    Заполнитель вставляется перед завершающей пунктуацией,
    чтобы "Hello!" превращалось в "Ħëļļõēēē!", а не в "Ħëļļõ!ēēē".
    """
    text = substitute(text, config.accent_map)
    pad = config.expansion_char * expansion_length(text, config.expansion)

    if text and not _is_ascii_alnum(text[-1]):
        head, tail = split_trailing(text)
        return f"{head}{pad}{tail}"

    return f"{text}{pad}"


__all__ = [
    "TRAILING_PUNCTUATION",
    "substitute",
    "expansion_length",
    "split_trailing",
    "transform_literal",
]
