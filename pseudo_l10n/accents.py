"""
Таблица замены символов для псевдолокализации.

Каждой ASCII-букве сопоставлен визуально похожий символ с диакритикой:
текст остаётся читаемым, но непереведённые (захардкоженные) строки
сразу бросаются в глаза.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping

DEFAULT_ACCENT_MAP: Mapping[str, str] = MappingProxyType({
    "a": "à", "b": "ƀ", "c": "ç", "d": "đ", "e": "ë", "f": "ƒ", "g": "ğ",
    "h": "ĥ", "i": "ï", "j": "ĵ", "k": "ķ", "l": "ļ", "m": "ɱ", "n": "ñ",
    "o": "õ", "p": "ƥ", "q": "ɋ", "r": "ř", "s": "š", "t": "ţ", "u": "ü",
    "v": "ṽ", "w": "ŵ", "x": "ẋ", "y": "ý", "z": "ž",
    "A": "À", "B": "ß", "C": "Ç", "D": "Đ", "E": "Ë", "F": "Ƒ", "G": "Ğ",
    "H": "Ħ", "I": "Ï", "J": "Ĵ", "K": "Ķ", "L": "Ļ", "M": "Ṁ", "N": "Ñ",
    "O": "Õ", "P": "Ƥ", "Q": "Ɋ", "R": "Ř", "S": "Š", "T": "Ť", "U": "Ü",
    "V": "Ṽ", "W": "Ŵ", "X": "Ẍ", "Y": "Ŷ", "Z": "Ž",
})

# Символ-заполнитель для имитации удлинения текста
DEFAULT_EXPANSION_CHAR = "ē"

__all__ = ["DEFAULT_ACCENT_MAP", "DEFAULT_EXPANSION_CHAR"]
