"""
Модель конфигурации псевдолокализации.

Неизменяемый набор опций поверх документированных значений по умолчанию.
Корректность проверяется один раз при создании экземпляра.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field, fields, replace
from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional, Union

from ..accents import DEFAULT_ACCENT_MAP, DEFAULT_EXPANSION_CHAR
from ..errors import ConfigurationError
from ..placeholders import split_format

logger = logging.getLogger(__name__)

# Имена опций во внешних конфигах (camelCase) -> поля датакласса
OPTION_ALIASES: Mapping[str, str] = MappingProxyType({
    "expansion": "expansion",
    "placeholderFormat": "placeholder_format",
    "replacePlaceholders": "replace_placeholders",
    "startMarker": "start_marker",
    "endMarker": "end_marker",
    "rtl": "rtl",
    "reversePlaceholders": "reverse_placeholders",
    "accentMap": "accent_map",
    "expansionChar": "expansion_char",
})

_FIELD_TO_OPTION: Mapping[str, str] = MappingProxyType({v: k for k, v in OPTION_ALIASES.items()})


@dataclass(frozen=True)
class PseudoConfig:
    """
    Опции псевдолокализации.

    Attributes:
        expansion: Процент удлинения текста (0 — без удлинения)
        placeholder_format: Шаблон плейсхолдера с подстрокой "key", например "{{key}}"
        replace_placeholders: Выводить плейсхолдеры как <CONTENT> вместо исходного формата
        start_marker: Маркер начала строки
        end_marker: Маркер конца строки
        rtl: Имитация письма справа налево (U+202E ... U+202C)
        reverse_placeholders: Разворачивать содержимое плейсхолдеров в RTL-режиме
        accent_map: Таблица замены символов
        expansion_char: Символ-заполнитель для удлинения
    """
    expansion: int = 40
    placeholder_format: str = "{{key}}"
    replace_placeholders: bool = False
    start_marker: str = "⟦"
    end_marker: str = "⟧"
    rtl: bool = False
    reverse_placeholders: bool = True
    accent_map: Mapping[str, str] = field(default_factory=lambda: DEFAULT_ACCENT_MAP)
    expansion_char: str = DEFAULT_EXPANSION_CHAR

    def __post_init__(self) -> None:
        if isinstance(self.expansion, bool) or not isinstance(self.expansion, int):
            raise ConfigurationError(f"expansion: expected integer, got {self.expansion!r}")
        if self.expansion < 0:
            raise ConfigurationError(f"expansion: must be non-negative, got {self.expansion}")

        for name in ("placeholder_format", "start_marker", "end_marker", "expansion_char"):
            value = getattr(self, name)
            if not isinstance(value, str):
                raise ConfigurationError(f"{_FIELD_TO_OPTION[name]}: expected string, got {value!r}")
        if not self.expansion_char:
            raise ConfigurationError("expansionChar: must be a non-empty string")

        for name in ("replace_placeholders", "rtl", "reverse_placeholders"):
            value = getattr(self, name)
            if not isinstance(value, bool):
                raise ConfigurationError(f"{_FIELD_TO_OPTION[name]}: expected boolean, got {value!r}")

        # Бросает ConfigurationError, если в формате нет "key"
        split_format(self.placeholder_format)

        object.__setattr__(self, "accent_map", _freeze_accent_map(self.accent_map))

    # ---- Конструирование ----

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "PseudoConfig":
        """
        Создание экземпляра из частичного словаря опций (из YAML/JSON или кода).

        Принимаются как camelCase ("placeholderFormat"), так и snake_case
        ("placeholder_format") ключи. Неизвестные ключи игнорируются с предупреждением.
        """
        if not isinstance(data, Mapping):
            raise ConfigurationError(f"Options must be a mapping, got {type(data).__name__}")

        kwargs: Dict[str, Any] = {}
        known = {f.name for f in fields(cls)}
        for key, value in data.items():
            name = OPTION_ALIASES.get(key, key)
            if name not in known:
                logger.warning("Ignoring unknown option '%s'", key)
                continue
            kwargs[name] = value
        return cls(**kwargs)

    def with_overrides(self, **overrides: Any) -> "PseudoConfig":
        """Возвращает копию с заменёнными полями (snake_case имена)."""
        return replace(self, **overrides)

    def to_dict(self) -> Dict[str, Any]:
        """Сериализация в словарь с camelCase ключами."""
        result: Dict[str, Any] = {}
        for f in fields(self):
            value = getattr(self, f.name)
            if f.name == "accent_map":
                value = dict(value)
            result[_FIELD_TO_OPTION[f.name]] = value
        return result


def _freeze_accent_map(raw: Any) -> Mapping[str, str]:
    if raw is DEFAULT_ACCENT_MAP:
        return raw
    if not isinstance(raw, Mapping):
        raise ConfigurationError(f"accentMap: expected mapping, got {type(raw).__name__}")
    frozen: Dict[str, str] = {}
    for src, dst in raw.items():
        if not isinstance(src, str) or len(src) != 1:
            raise ConfigurationError(f"accentMap: keys must be single characters, got {src!r}")
        if not isinstance(dst, str):
            raise ConfigurationError(f"accentMap[{src!r}]: expected string, got {dst!r}")
        frozen[src] = dst
    return MappingProxyType(frozen)


DEFAULT_CONFIG = PseudoConfig()

# Опции по умолчанию в том виде, в каком их видят внешние конфиги
DEFAULT_OPTIONS: Mapping[str, Any] = MappingProxyType(DEFAULT_CONFIG.to_dict())

Options = Union[PseudoConfig, Mapping[str, Any], None]


def resolve_config(options: Options = None) -> PseudoConfig:
    """
    Приводит опции к PseudoConfig.

    None -> значения по умолчанию, словарь -> слияние поверх значений по умолчанию.
    """
    if options is None:
        return DEFAULT_CONFIG
    if isinstance(options, PseudoConfig):
        return options
    return PseudoConfig.from_dict(options)


def merge_options(base: PseudoConfig, overrides: Optional[Mapping[str, Any]]) -> PseudoConfig:
    """Накладывает частичный словарь опций (camelCase или snake_case) поверх base."""
    if not overrides:
        return base
    merged = base.to_dict()
    merged.update(overrides)
    return PseudoConfig.from_dict(merged)
