"""
Schema version and JSON schemas for pattern configs and presets.

The schemas are generated from the Pydantic models (the source of truth)
so the web editor and saved presets stay in step with the Python side.
scripts/generate_schemas.py writes them to schemas/.
"""

from typing import Any, Dict, List, Union

from ..enums import PatternType

SCHEMA_VERSION = "1.0"


def get_config_schema(pattern_type: Union[PatternType, str], by_alias: bool = True) -> Dict[str, Any]:
    """
    JSON schema for one pattern family's config.

    Args:
        pattern_type: Pattern family
        by_alias: Use camelCase property names (as stored in presets)
    """
    from .loaders import CONFIG_MODELS, coerce_pattern_type

    model = CONFIG_MODELS[coerce_pattern_type(pattern_type)]
    schema = model.model_json_schema(by_alias=by_alias)
    schema["$comment"] = f"bauhaus-patterns config schema v{SCHEMA_VERSION}"
    return schema


def get_preset_schema(by_alias: bool = True) -> Dict[str, Any]:
    """JSON schema for a preset file"""
    from .loaders import Preset

    return Preset.model_json_schema(by_alias=by_alias)


def get_all_schemas() -> Dict[str, Dict[str, Any]]:
    """All schemas keyed by output file stem"""
    schemas = {f"{p.value}-config": get_config_schema(p) for p in PatternType}
    schemas["preset"] = get_preset_schema()
    return schemas


def validate_preset_fields(data: Dict[str, Any]) -> List[str]:
    """
    Lightweight structural check of a raw preset record.

    Returns a list of problems; empty when the record has the required
    fields with the right JSON types. Full validation happens when the
    record is loaded into a Preset model.
    """
    errors = []

    if not isinstance(data, dict):
        return ["Preset must be a JSON object"]

    if not isinstance(data.get("name"), str) or not data.get("name"):
        errors.append("Missing or empty 'name'")
    if not isinstance(data.get("config", {}), dict):
        errors.append("'config' must be an object")
    if "tags" in data and data["tags"] is not None and not isinstance(data["tags"], list):
        errors.append("'tags' must be a list")

    pattern_type = data.get("patternType", data.get("pattern_type"))
    if pattern_type is not None and str(pattern_type).lower() not in {p.value for p in PatternType}:
        errors.append(f"Unknown patternType '{pattern_type}'")

    return errors
