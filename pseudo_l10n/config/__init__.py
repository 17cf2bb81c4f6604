from __future__ import annotations

from .load import load_config_file
from .model import (
    DEFAULT_CONFIG,
    DEFAULT_OPTIONS,
    OPTION_ALIASES,
    Options,
    PseudoConfig,
    merge_options,
    resolve_config,
)

__all__ = [
    "PseudoConfig",
    "DEFAULT_CONFIG",
    "DEFAULT_OPTIONS",
    "OPTION_ALIASES",
    "Options",
    "resolve_config",
    "merge_options",
    "load_config_file",
]
