"""
Pytest configuration and shared fixtures for bauhaus-patterns tests.
"""

import json
import re
import pytest
from pathlib import Path

from bauhaus_patterns.core.geometry import Point2D


# ─── Geometry fixtures ───────────────────────────────────────────────────


@pytest.fixture
def origin():
    """Pattern center at the origin."""
    return Point2D(0, 0)


@pytest.fixture
def center():
    """Pattern center used by most generator tests."""
    return Point2D(100, 100)


# ─── Raw config dicts (camelCase, as stored in presets) ──────────────────


@pytest.fixture
def ring_config_dict():
    """Small ring config with cuts."""
    return {
        "outerRadius": 200,
        "innerRadius": 20,
        "ringCount": 6,
        "cutCount": 4,
        "gridDivisions": 16,
        "staggerOffset": 1,
        "cutWidth": 8,
        "spacingMode": "shrinkage",
        "outerGap": 18,
        "shrinkage": 0.05,
    }


@pytest.fixture
def square_config_dict():
    """Notched square config."""
    return {
        "outerSize": 200,
        "innerSize": 20,
        "squareCount": 5,
        "notchesPerSide": 2,
        "notchWidth": 8,
        "spacingMode": "uniform",
    }


@pytest.fixture
def polygon_config_dict():
    """Bridged hexagon config."""
    return {
        "sides": 6,
        "outerRadius": 200,
        "innerRadius": 20,
        "polygonCount": 5,
        "bridgeCount": 12,
        "bridgeWidth": 8,
        "spacingMode": "uniform",
    }


@pytest.fixture
def spiral_config_dict():
    """Two-arm archimedean spiral config."""
    return {
        "armCount": 2,
        "outerRadius": 200,
        "innerRadius": 10,
        "turns": 2,
        "spiralType": "archimedean",
    }


# ─── Preset files ────────────────────────────────────────────────────────


@pytest.fixture
def preset_dict(ring_config_dict):
    """Preset record as written by the web editor."""
    return {
        "name": "Dense Rings",
        "description": "Six rings, four cuts",
        "patternType": "rings",
        "config": ring_config_dict,
        "createdAt": "2024-01-15T10:30:00+00:00",
        "tags": ["rings", "test"],
        "schemaVersion": "1.0",
    }


@pytest.fixture
def temp_preset_file(tmp_path, preset_dict):
    """Preset JSON written to a temporary file."""
    preset_file = tmp_path / "dense-rings.json"
    with open(preset_file, 'w') as f:
        json.dump(preset_dict, f)
    return preset_file


@pytest.fixture
def legacy_preset_file(tmp_path):
    """Preset saved before pattern types existed (no patternType field)."""
    preset_file = tmp_path / "legacy.json"
    with open(preset_file, 'w') as f:
        json.dump({
            "name": "Legacy",
            "config": {"ringCount": 4, "cutCount": 6},
            "createdAt": "2023-06-01T00:00:00+00:00",
        }, f)
    return preset_file


# ─── Path helpers ────────────────────────────────────────────────────────


def count_commands(path_data, command):
    """Number of occurrences of a path command letter."""
    return len(re.findall(command, path_data))


def path_points(path_data):
    """End point of every M/L/A/C command in path data, in order."""
    points = []
    for _, args in re.findall(r'([MLAC])([^MLACZ]*)', path_data):
        pairs = re.findall(r'(-?\d+(?:\.\d+)?),(-?\d+(?:\.\d+)?)', args)
        x, y = pairs[-1]
        points.append((float(x), float(y)))
    return points


@pytest.fixture
def project_root():
    """Repository root (for running scripts and reading pyproject.toml)."""
    return Path(__file__).parent.parent
