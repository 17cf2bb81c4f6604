"""
Загрузчик файла опций.

Файл — YAML-мапа (JSON тоже подходит, как подмножество YAML)
с теми же ключами, что и DEFAULT_OPTIONS.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict, Union

from ruamel.yaml import YAML
from ruamel.yaml.error import YAMLError

from ..errors import ConfigurationError
from .model import PseudoConfig

logger = logging.getLogger(__name__)

_yaml = YAML(typ="safe")


def _read_yaml_map(path: Path) -> Dict[str, Any]:
    """Читает YAML файл и возвращает словарь."""
    if not path.is_file():
        raise ConfigurationError(f"Config file not found: {path}")
    try:
        raw = _yaml.load(path.read_text(encoding="utf-8")) or {}
    except (OSError, UnicodeDecodeError) as e:
        raise ConfigurationError(f"Failed to read config file {path}: {e}") from e
    except YAMLError as e:
        raise ConfigurationError(f"Invalid YAML in config file {path}: {e}") from e
    if not isinstance(raw, dict):
        raise ConfigurationError(f"YAML must be a mapping: {path}")
    return raw


def load_config_file(path: Union[str, Path]) -> PseudoConfig:
    """
    Загружает опции из файла и сливает их со значениями по умолчанию.

    Args:
        path: Путь к YAML/JSON файлу опций

    Returns:
        Готовая конфигурация

    Raises:
        ConfigurationError: Файл отсутствует, не парсится или содержит неверные опции
    """
    path = Path(path)
    raw = _read_yaml_map(path)
    logger.debug("Loaded %d option(s) from %s", len(raw), path)
    return PseudoConfig.from_dict(raw)


__all__ = ["load_config_file"]
