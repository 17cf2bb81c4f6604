import textwrap
from pathlib import Path

import pytest

from pseudo_l10n import ConfigurationError, PseudoConfig, load_config_file
from tests.infrastructure.file_utils import write


def test_load_yaml(tmp_path: Path):
    p = write(tmp_path / "pseudo.yaml", textwrap.dedent("""
        expansion: 30
        placeholderFormat: "%key%"
        startMarker: "« "
        endMarker: " »"
        rtl: true
        accentMap:
          a: "α"
          b: "β"
    """).lstrip())
    cfg = load_config_file(p)
    assert cfg == PseudoConfig(
        expansion=30,
        placeholder_format="%key%",
        start_marker="« ",
        end_marker=" »",
        rtl=True,
        accent_map={"a": "α", "b": "β"},
    )


def test_load_json(tmp_path: Path):
    p = write(tmp_path / "pseudo.json", '{"replacePlaceholders": true, "expansion": 0}')
    cfg = load_config_file(p)
    assert cfg.replace_placeholders is True
    assert cfg.expansion == 0


def test_empty_file_gives_defaults(tmp_path: Path):
    p = write(tmp_path / "empty.yaml", "")
    assert load_config_file(p) == PseudoConfig()


def test_missing_file(tmp_path: Path):
    with pytest.raises(ConfigurationError, match="not found"):
        load_config_file(tmp_path / "nope.yaml")


def test_not_a_mapping(tmp_path: Path):
    p = write(tmp_path / "list.yaml", "- expansion\n- 40\n")
    with pytest.raises(ConfigurationError, match="mapping"):
        load_config_file(p)


def test_invalid_yaml(tmp_path: Path):
    p = write(tmp_path / "broken.yaml", "expansion: [40\n")
    with pytest.raises(ConfigurationError, match="Invalid YAML"):
        load_config_file(p)


def test_invalid_option_value(tmp_path: Path):
    p = write(tmp_path / "bad.yaml", "placeholderFormat: '[[value]]'\n")
    with pytest.raises(ConfigurationError):
        load_config_file(p)
