from pathlib import Path

import pytest

from pseudo_l10n import PseudoConfig

# Импорт из унифицированной инфраструктуры
from tests.infrastructure.file_utils import write_json_file


@pytest.fixture
def resources():
    """Типичный файл переводов i18next: вложенные словари, списки и нестроковые значения."""
    return {
        "app": {
            "title": "My Application",
            "greeting": "Hello, {{name}}! Welcome to our application.",
        },
        "inbox": {
            "summary": "You have {{count}} new messages",
            "empty": "No messages.",
        },
        "menu": ["File", "Edit", "View"],
        "itemsPerPage": 20,
        "ratio": 1.5,
        "beta": True,
        "deprecated": None,
    }


@pytest.fixture
def input_file(tmp_path: Path, resources) -> Path:
    return write_json_file(tmp_path / "locales" / "en.json", resources)


@pytest.fixture
def bare():
    """Конфигурация без маркеров: удобно сравнивать результат целиком."""
    return PseudoConfig(start_marker="", end_marker="")
