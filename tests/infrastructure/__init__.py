"""
Unified test infrastructure for pseudo-l10n.

This package contains common utilities and helpers
used across all tests to avoid code duplication.

Modules:
- file_utils: Utilities for creating resource and config files
- cli_utils: Utilities for running the CLI in a subprocess
"""

from .file_utils import write, write_json_file
from .cli_utils import run_cli, jload

__all__ = [
    # File utilities
    "write", "write_json_file",

    # CLI utilities
    "run_cli", "jload",
]
