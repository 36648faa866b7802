#!/usr/bin/env python3
"""
Generate JSON Schemas from Pydantic models.

The config models are the source of truth for preset files and the web
editor's form fields; this writes their schemas to schemas/.

Usage:
    python scripts/generate_schemas.py
"""

import json
import sys
from pathlib import Path

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from bauhaus_patterns.enums import PatternType, SpacingMode, SpiralType, Unit
from bauhaus_patterns.io.schema import SCHEMA_VERSION, get_config_schema, get_preset_schema

SCHEMA_BASE_URL = "https://bauhaus-patterns.dev/schemas"


def _write(output_dir: Path, name: str, schema: dict) -> None:
    schema["$schema"] = "https://json-schema.org/draft/2020-12/schema"
    schema["$id"] = f"{SCHEMA_BASE_URL}/{name}-v{SCHEMA_VERSION}.json"

    schema_file = output_dir / f"{name}-v{SCHEMA_VERSION}.json"
    with open(schema_file, "w") as f:
        json.dump(schema, f, indent=2)
    print(f"  Generated: {schema_file}")


def main():
    output_dir = Path(__file__).parent.parent / "schemas"
    output_dir.mkdir(exist_ok=True)

    print("Generating JSON schemas from Pydantic models...")

    for pattern_type in PatternType:
        _write(output_dir, f"{pattern_type.value}-config", get_config_schema(pattern_type))

    preset_schema = get_preset_schema()
    preset_schema["description"] = "Saved pattern preset"
    _write(output_dir, "preset", preset_schema)

    enums_schema = {
        "title": "BauhausPatternsEnums",
        "description": "Enum definitions for pattern configs",
        "definitions": {
            "SpacingMode": {
                "type": "string",
                "enum": [e.value for e in SpacingMode],
                "description": "Distribution of nested extents (goldenRatio is rings only)"
            },
            "SpiralType": {
                "type": "string",
                "enum": [e.value for e in SpiralType],
                "description": "Radial profile of spiral arms"
            },
            "PatternType": {
                "type": "string",
                "enum": [e.value for e in PatternType],
                "description": "Pattern family"
            },
            "Unit": {
                "type": "string",
                "enum": [e.value for e in Unit],
                "description": "Physical document unit"
            }
        }
    }
    _write(output_dir, "enums", enums_schema)

    print(f"\nAll schemas written to: {output_dir}/")


if __name__ == "__main__":
    main()
