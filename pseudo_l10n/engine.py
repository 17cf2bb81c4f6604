"""
Сборка псевдолокализованной строки и обход дерева ресурсов.
"""

from __future__ import annotations

import logging
from typing import Dict, List, Mapping, Union

from .config import Options, PseudoConfig, resolve_config
from .placeholders import PlaceholderMatcher, render_placeholder
from .text import transform_literal

logger = logging.getLogger(__name__)

# Управляющие символы bidi для имитации RTL
RTL_OVERRIDE = "\u202e"
POP_DIRECTIONAL_FORMATTING = "\u202c"

# JSON-подобное дерево ресурсов
JsonScalar = Union[str, int, float, bool, None]
JsonValue = Union[JsonScalar, List["JsonValue"], Dict[str, "JsonValue"]]


class PseudoLocalizer:
    """
    Псевдолокализатор с зафиксированной конфигурацией.

    Матчер плейсхолдеров строится один раз и переиспользуется
    для всех строк; экземпляр не изменяется и безопасен
    для одновременного использования.
    """

    def __init__(self, config: Options = None):
        self.config: PseudoConfig = resolve_config(config)
        self.matcher = PlaceholderMatcher(self.config.placeholder_format)

    def localize(self, text: str) -> str:
        """
        Псевдолокализует одну строку.

        Литеральные фрагменты проходят замену символов и удлинение,
        плейсхолдеры сохраняются (или заменяются на <CONTENT>),
        результат оборачивается маркерами и, в RTL-режиме, символами bidi.
        """
        cfg = self.config
        parts: List[str] = []
        for segment in self.matcher.split(text):
            if segment.is_placeholder:
                parts.append(render_placeholder(segment.text, cfg, self.matcher))
            else:
                parts.append(transform_literal(segment.text, cfg))

        result = f"{cfg.start_marker}{''.join(parts)}{cfg.end_marker}"

        if cfg.rtl:
            result = f"{RTL_OVERRIDE}{result}{POP_DIRECTIONAL_FORMATTING}"

        return result

    def process(self, tree: JsonValue) -> JsonValue:
        """
        Рекурсивно псевдолокализует все строковые листья дерева.

        Форма дерева сохраняется: списки остаются списками, словари —
        словарями с теми же ключами в том же порядке. Ключи не
        преобразуются, нестроковые скаляры возвращаются как есть.
        """
        if isinstance(tree, str):
            return self.localize(tree)
        if isinstance(tree, (list, tuple)):
            return [self.process(item) for item in tree]
        if isinstance(tree, Mapping):
            return {key: self.process(value) for key, value in tree.items()}
        return tree


def pseudo_localize(text: str, options: Options = None) -> str:
    """Псевдолокализует одну строку с заданными опциями."""
    return PseudoLocalizer(options).localize(text)


def process_tree(tree: JsonValue, options: Options = None) -> JsonValue:
    """Псевдолокализует все строки JSON-подобного дерева."""
    localizer = PseudoLocalizer(options)
    logger.debug("Processing resource tree of type %s", type(tree).__name__)
    return localizer.process(tree)


__all__ = [
    "RTL_OVERRIDE",
    "POP_DIRECTIONAL_FORMATTING",
    "JsonValue",
    "PseudoLocalizer",
    "pseudo_localize",
    "process_tree",
]
