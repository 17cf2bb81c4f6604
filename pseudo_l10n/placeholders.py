"""
Разбор строки на литеральный текст и плейсхолдеры.

Формат плейсхолдера задаётся шаблоном с подстрокой "key":
"{{key}}", "{key}", "%key%", "${key}" и т.п. Часть шаблона до "key"
становится префиксом, после — суффиксом. Поиск ведётся обычным
поиском подстрок, поэтому спецсимволы в префиксе/суффиксе не требуют
экранирования.
"""

from __future__ import annotations

import enum
import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, List, Tuple

from .errors import ConfigurationError

if TYPE_CHECKING:
    from .config.model import PseudoConfig

logger = logging.getLogger(__name__)

KEY_MARKER = "key"


class SegmentKind(enum.Enum):
    """Тип фрагмента строки."""
    LITERAL = "LITERAL"
    PLACEHOLDER = "PLACEHOLDER"


@dataclass(frozen=True)
class Segment:
    """
    Фрагмент исходной строки.

    Для LITERAL text — сам текст, для PLACEHOLDER — содержимое
    между префиксом и суффиксом (без них).
    """
    kind: SegmentKind
    text: str

    @property
    def is_placeholder(self) -> bool:
        return self.kind is SegmentKind.PLACEHOLDER


def split_format(fmt: str) -> Tuple[str, str]:
    """
    Делит шаблон плейсхолдера на (prefix, suffix) по первому вхождению "key".

    Raises:
        ConfigurationError: В шаблоне нет "key" или он состоит только из "key"
    """
    index = fmt.find(KEY_MARKER)
    if index == -1:
        raise ConfigurationError(f'Placeholder format must contain "{KEY_MARKER}": {fmt!r}')
    prefix = fmt[:index]
    suffix = fmt[index + len(KEY_MARKER):]
    if not prefix and not suffix:
        # Пустые разделители совпали бы с пустой строкой в каждой позиции
        raise ConfigurationError(
            f'Placeholder format must have a prefix or suffix around "{KEY_MARKER}": {fmt!r} '
            f'(a bare "{KEY_MARKER}" format is not supported because it would match '
            f'an empty placeholder at every position)'
        )
    return prefix, suffix


class PlaceholderMatcher:
    """
    Находит плейсхолдеры вида prefix + <кратчайший текст> + suffix.

    Совпадения ищутся слева направо без перекрытий; в каждой позиции
    побеждает самое левое и самое короткое совпадение.
    """

    def __init__(self, fmt: str):
        self.format = fmt
        self.prefix, self.suffix = split_format(fmt)

    def __repr__(self) -> str:
        return f"PlaceholderMatcher({self.format!r})"

    def split(self, text: str) -> List[Segment]:
        """
        Разбивает строку на упорядоченные фрагменты.

        Результат всегда начинается и заканчивается литералом, литералы
        и плейсхолдеры чередуются (между соседними плейсхолдерами остаётся
        пустой литерал). Склейка литералов и wrap() плейсхолдеров
        в исходном порядке восстанавливает исходную строку.
        """
        segments: List[Segment] = []
        prefix, suffix = self.prefix, self.suffix
        position = 0

        while True:
            start = text.find(prefix, position)
            if start == -1:
                break
            content_start = start + len(prefix)
            end = text.find(suffix, content_start)
            if end == -1:
                # Дальше суффикса нет — совпадений больше не будет
                break
            segments.append(Segment(SegmentKind.LITERAL, text[position:start]))
            segments.append(Segment(SegmentKind.PLACEHOLDER, text[content_start:end]))
            position = end + len(suffix)

        segments.append(Segment(SegmentKind.LITERAL, text[position:]))
        logger.debug("Split %r into %d segment(s) with format %r", text, len(segments), self.format)
        return segments

    def wrap(self, content: str) -> str:
        """Восстанавливает плейсхолдер в исходном формате."""
        return f"{self.prefix}{content}{self.suffix}"


def render_placeholder(content: str, config: "PseudoConfig", matcher: PlaceholderMatcher) -> str:
    """
    Выводит плейсхолдер в псевдолокализованной строке.

    В RTL-режиме содержимое может разворачиваться посимвольно;
    при replace_placeholders плейсхолдер заменяется на <CONTENT>.
    """
    if config.rtl and config.reverse_placeholders:
        content = content[::-1]

    if config.replace_placeholders:
        return f"<{content.upper()}>"

    return matcher.wrap(content)


__all__ = [
    "KEY_MARKER",
    "SegmentKind",
    "Segment",
    "split_format",
    "PlaceholderMatcher",
    "render_placeholder",
]
