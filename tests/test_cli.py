import json
from pathlib import Path

import pytest

from pseudo_l10n import process_tree
from pseudo_l10n.cli import main
from tests.infrastructure.cli_utils import run_cli
from tests.infrastructure.file_utils import write


def _read(p: Path):
    return json.loads(p.read_text(encoding="utf-8"))


class TestCliInProcess:

    def test_success(self, input_file: Path, tmp_path: Path, resources, capsys):
        out = tmp_path / "out" / "pseudo.json"
        assert main([str(input_file), str(out)]) == 0
        captured = capsys.readouterr()
        assert "Pseudo-locale file generated" in captured.out
        assert str(out.resolve()) in captured.out
        assert _read(out) == process_tree(resources)

    def test_flags(self, input_file: Path, tmp_path: Path, resources):
        out = tmp_path / "pseudo.json"
        rc = main([str(input_file), str(out), "--expansion=100", "--replacePlaceholders", "--rtl"])
        assert rc == 0
        expected = process_tree(resources, {"expansion": 100, "replacePlaceholders": True, "rtl": True})
        assert _read(out) == expected

    def test_flags_before_positionals(self, input_file: Path, tmp_path: Path, resources):
        out = tmp_path / "pseudo.json"
        assert main(["--expansion", "0", str(input_file), str(out)]) == 0
        assert _read(out) == process_tree(resources, {"expansion": 0})

    def test_placeholder_format_flag(self, tmp_path: Path):
        src = write(tmp_path / "en.json", '{"x": "Hi %name%"}')
        out = tmp_path / "pseudo.json"
        assert main([str(src), str(out), "--placeholderFormat=%key%", "--expansion=0"]) == 0
        assert _read(out) == {"x": "⟦Ħï %name%⟧"}

    def test_config_file_with_override(self, tmp_path: Path):
        src = write(tmp_path / "en.json", '{"x": "Hi"}')
        cfg = write(tmp_path / "pseudo.yaml", "startMarker: '['\nendMarker: ']'\nexpansion: 100\n")
        out = tmp_path / "pseudo.json"
        assert main([str(src), str(out), "--config", str(cfg), "--expansion=0"]) == 0
        assert _read(out) == {"x": "[Ħï]"}

    def test_missing_arguments(self, input_file: Path, capsys):
        assert main([str(input_file)]) == 1
        err = capsys.readouterr().err
        assert "usage:" in err
        assert "pseudo-l10n" in err

    def test_no_arguments(self, capsys):
        assert main([]) == 1
        assert "usage:" in capsys.readouterr().err

    def test_bad_expansion(self, input_file: Path, tmp_path: Path, capsys):
        assert main([str(input_file), str(tmp_path / "o.json"), "--expansion=abc"]) == 1
        assert "usage:" in capsys.readouterr().err

    def test_negative_expansion(self, input_file: Path, tmp_path: Path, capsys):
        assert main([str(input_file), str(tmp_path / "o.json"), "--expansion=-5"]) == 1
        assert "Error in configuration" in capsys.readouterr().err

    def test_bad_placeholder_format(self, input_file: Path, tmp_path: Path, capsys):
        assert main([str(input_file), str(tmp_path / "o.json"), "--placeholderFormat={name}"]) == 1
        assert "Error in configuration" in capsys.readouterr().err

    def test_missing_input(self, tmp_path: Path, capsys):
        out = tmp_path / "o.json"
        assert main([str(tmp_path / "missing.json"), str(out)]) == 1
        assert "Error reading input file" in capsys.readouterr().err
        assert not out.exists()

    def test_invalid_json(self, tmp_path: Path, capsys):
        src = write(tmp_path / "en.json", "not json")
        assert main([str(src), str(tmp_path / "o.json")]) == 1
        assert "Error reading input file" in capsys.readouterr().err

    def test_unwritable_output(self, input_file: Path, tmp_path: Path, capsys):
        blocker = write(tmp_path / "blocker", "")
        assert main([str(input_file), str(blocker / "o.json")]) == 1
        assert "Error writing output file" in capsys.readouterr().err

    def test_version(self, capsys):
        with pytest.raises(SystemExit) as exc:
            main(["--version"])
        assert exc.value.code == 0
        assert "pseudo-l10n" in capsys.readouterr().out


class TestCliSubprocess:

    def test_module_entry_point(self, input_file: Path, tmp_path: Path, resources):
        cp = run_cli(tmp_path, str(input_file), "out/pseudo.json", "--rtl")
        assert cp.returncode == 0, cp.stderr
        out = tmp_path / "out" / "pseudo.json"
        assert "✅" in cp.stdout
        assert _read(out) == process_tree(resources, {"rtl": True})

    def test_usage_exit_code(self, tmp_path: Path):
        cp = run_cli(tmp_path, "only-one.json")
        assert cp.returncode == 1
        assert "usage:" in cp.stderr
        assert cp.stdout == ""

    def test_read_error_exit_code(self, tmp_path: Path):
        cp = run_cli(tmp_path, "missing.json", "out.json")
        assert cp.returncode == 1
        assert "Error reading input file" in cp.stderr
