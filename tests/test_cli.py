"""
Tests for the command-line interface.
"""

import json
import subprocess
import sys
import pytest
from pathlib import Path

from bauhaus_patterns.cli.generate import main, parse_overrides


def run_cli(*args, cwd=None):
    return subprocess.run(
        [sys.executable, "-m", "bauhaus_patterns.cli.generate", *args],
        capture_output=True,
        text=True,
        cwd=cwd,
    )


class TestCLIEntryPoints:
    """Test that CLI entry points defined in pyproject.toml are importable."""

    def test_entry_point_importable(self):
        """The CLI entry point module and function exist."""
        assert callable(main)

    def test_entry_point_via_subprocess(self):
        """Entry point works when invoked as module."""
        result = run_cli("--help")
        assert result.returncode == 0
        assert "usage" in result.stdout.lower()

    def test_version(self):
        """--version prints the package version."""
        result = run_cli("--version")
        assert result.returncode == 0
        assert "1.0.0" in result.stdout


class TestParseOverrides:
    """Tests for parse_overrides."""

    def test_json_values(self):
        """Values are parsed as JSON where possible."""
        overrides = parse_overrides([
            "ringCount=12",
            "shrinkage=0.1",
            "showOuterBoundary=false",
            'center={"x": 10, "y": 20}',
        ])
        assert overrides == {
            "ringCount": 12,
            "shrinkage": 0.1,
            "showOuterBoundary": False,
            "center": {"x": 10, "y": 20},
        }

    def test_string_values(self):
        """Non-JSON values stay strings."""
        assert parse_overrides(["spacingMode=uniform"]) == {"spacingMode": "uniform"}

    def test_dashes_to_underscores(self):
        """Dashed keys become snake_case."""
        assert parse_overrides(["notches-per-side=2"]) == {"notches_per_side": 2}

    def test_missing_equals(self):
        """Assignments need an equals sign."""
        with pytest.raises(ValueError, match="KEY=VALUE"):
            parse_overrides(["ringCount"])

    def test_none(self):
        """No assignments, no overrides."""
        assert parse_overrides(None) == {}


class TestCLIGeneration:
    """Tests for pattern generation via CLI."""

    def test_default_rings(self, tmp_path):
        """With no arguments a ring pattern is written to bauhaus-rings.svg."""
        result = run_cli(cwd=tmp_path)
        assert result.returncode == 0
        assert "Pattern: rings" in result.stdout
        svg = (tmp_path / "bauhaus-rings.svg").read_text()
        assert svg.startswith("<?xml")
        assert svg.count("<path") == 11

    @pytest.mark.parametrize("pattern", ["squares", "polygons", "spirals"])
    def test_other_families(self, tmp_path, pattern):
        """Every family can be generated."""
        result = run_cli(pattern, cwd=tmp_path)
        assert result.returncode == 0
        assert (tmp_path / f"bauhaus-{pattern}.svg").exists()

    def test_overrides_and_output(self, tmp_path):
        """--set overrides apply and -o names the file."""
        output = tmp_path / "hex.svg"
        result = run_cli(
            "polygons", "--set", "sides=6", "--set", "polygonCount=3", "--set", "showOuterBoundary=false",
            "-o", str(output), "--unit", "mm",
        )
        assert result.returncode == 0
        svg = output.read_text()
        assert svg.count("<path") == 3
        assert 'mm"' in svg

    def test_json_output(self, tmp_path):
        """--json writes the pattern with validation results."""
        json_file = tmp_path / "rings.json"
        result = run_cli("rings", "--set", "ringCount=4", "--json", str(json_file), "--no-save", cwd=tmp_path)
        assert result.returncode == 0
        data = json.loads(json_file.read_text())
        assert len(data["rings"]) == 4
        assert data["validation"]["valid"] is True
        assert not (tmp_path / "bauhaus-rings.svg").exists()

    def test_stroke_color(self, tmp_path):
        """--stroke-color sets the cut color."""
        result = run_cli("rings", "--stroke-color", "#0000FF", cwd=tmp_path)
        assert result.returncode == 0
        assert 'stroke="#0000FF"' in (tmp_path / "bauhaus-rings.svg").read_text()


class TestCLIValidation:
    """Tests for --validate and configuration errors."""

    def test_validate_ok(self, tmp_path):
        """--validate exits 0 for valid configs and writes nothing."""
        result = run_cli("rings", "--validate", cwd=tmp_path)
        assert result.returncode == 0
        assert "Configuration is valid" in result.stdout
        assert list(tmp_path.iterdir()) == []

    def test_validate_errors(self, tmp_path):
        """--validate exits 1 when there are errors."""
        result = run_cli("rings", "--set", "ringCount=0", "--validate", cwd=tmp_path)
        assert result.returncode == 1
        assert "COUNT_NOT_POSITIVE" in result.stderr

    def test_warnings_printed(self, tmp_path):
        """Warnings are shown but generation goes ahead."""
        result = run_cli("rings", "--set", "ringCount=40", "--set", "outerGap=30", "--no-save", cwd=tmp_path)
        assert result.returncode == 0
        assert "SPACING_TRUNCATED" in result.stdout

    def test_invalid_config_not_generated(self, tmp_path):
        """Configs with errors are not generated."""
        result = run_cli("spirals", "--set", "armCount=0", cwd=tmp_path)
        assert result.returncode == 1
        assert not (tmp_path / "bauhaus-spirals.svg").exists()

    def test_bad_override_value(self, tmp_path):
        """Unparseable override values are reported."""
        result = run_cli("squares", "--set", "spacingMode=goldenRatio", cwd=tmp_path)
        assert result.returncode == 1
        assert "Error loading configuration" in result.stderr

    def test_unknown_pattern(self):
        """argparse rejects unknown pattern families."""
        result = run_cli("hexagons")
        assert result.returncode != 0


class TestCLIPresets:
    """Tests for loading and saving presets via CLI."""

    def test_from_preset(self, temp_preset_file, tmp_path):
        """--preset loads the pattern type and config from the file."""
        result = run_cli("--preset", str(temp_preset_file), "--no-save", cwd=tmp_path)
        assert result.returncode == 0
        assert "Elements: 6" in result.stdout

    def test_preset_with_override(self, temp_preset_file, tmp_path):
        """--set applies on top of the preset."""
        result = run_cli("--preset", str(temp_preset_file), "--set", "ringCount=2", "--no-save", cwd=tmp_path)
        assert result.returncode == 0
        assert "Elements: 2" in result.stdout

    def test_preset_type_mismatch(self, temp_preset_file, tmp_path):
        """A pattern argument that contradicts the preset is an error."""
        result = run_cli("squares", "--preset", str(temp_preset_file), cwd=tmp_path)
        assert result.returncode == 1

    def test_missing_preset(self, tmp_path):
        """Missing preset files are reported."""
        result = run_cli("--preset", "nonexistent.json", cwd=tmp_path)
        assert result.returncode != 0
        assert "Error loading configuration" in result.stderr

    def test_invalid_preset_json(self, tmp_path):
        """Malformed preset files are reported."""
        bad = tmp_path / "bad.json"
        bad.write_text("not valid json {")
        result = run_cli("--preset", str(bad), cwd=tmp_path)
        assert result.returncode != 0

    def test_save_preset(self, tmp_path):
        """--save-preset writes a loadable preset."""
        preset_file = tmp_path / "twenty-rings.json"
        result = run_cli(
            "rings", "--set", "ringCount=20", "--save-preset", str(preset_file), "--no-save",
            cwd=tmp_path,
        )
        assert result.returncode == 0
        data = json.loads(Path(preset_file).read_text())
        assert data["name"] == "Twenty Rings"
        assert data["patternType"] == "rings"
        assert data["config"]["ringCount"] == 20

    def test_save_preset_name(self, tmp_path):
        """--name sets the preset name."""
        preset_file = tmp_path / "p.json"
        run_cli("spirals", "--save-preset", str(preset_file), "--name", "Galaxy", "--no-save", cwd=tmp_path)
        assert json.loads(preset_file.read_text())["name"] == "Galaxy"


class TestMainInProcess:
    """Calling main() directly, as the console script does."""

    def test_returns_zero(self, tmp_path, monkeypatch, capsys):
        """main() returns 0 on success and prints the summary."""
        monkeypatch.chdir(tmp_path)
        assert main(["squares", "--set", "squareCount=3", "--no-save"]) == 0
        assert "Elements: 3" in capsys.readouterr().out

    def test_returns_one_on_error(self, tmp_path, monkeypatch):
        """main() returns 1 for invalid configs."""
        monkeypatch.chdir(tmp_path)
        assert main(["polygons", "--set", "sides=2", "--no-save"]) == 1
