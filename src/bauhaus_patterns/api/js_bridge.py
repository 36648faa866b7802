"""
JavaScript-Python bridge for Pyodide.

Provides a single entry point for all JS->Python pattern generation
calls. All inputs are validated via Pydantic models before processing.

Usage from JavaScript:
    pyodide.globals.set('input_json', JSON.stringify(inputs));
    const result = await pyodide.runPythonAsync(`
        from bauhaus_patterns.api.js_bridge import generate
        generate(input_json)
    `);
    const output = JSON.parse(result);
"""

import json
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator
from pydantic.alias_generators import to_camel

from ..core.generate import generate_pattern
from ..enums import PatternType, Unit
from ..io.loaders import CONFIG_MODELS, coerce_pattern_type, resolve_config
from ..io.svg import ExportOptions
from .output import to_json, to_summary, to_svg
from .validation import validate_config


# Validation message dictionaries sent to JavaScript:
# {"severity": "error"|"warning"|"info", "code": "CUTS_TOO_WIDE", "message": ..., "suggestion": ...}
ValidationMessageDict = Dict[str, Optional[str]]


# ============================================================================
# Input Models (Pydantic validation for JS inputs)
# ============================================================================

class _BridgeModel(BaseModel):
    model_config = ConfigDict(extra='ignore', populate_by_name=True, alias_generator=to_camel)


class ExportSettings(_BridgeModel):
    """SVG export settings from the UI."""
    unit: Unit = Unit.INCHES
    stroke_color: str = "#FF0000"
    stroke_width: float = 0.001  # inches
    background_color: str = "none"

    @field_validator('unit', mode='before')
    @classmethod
    def normalize_unit(cls, v):
        if isinstance(v, str):
            return v.lower()
        return v

    def to_options(self) -> ExportOptions:
        return ExportOptions(
            unit=self.unit,
            stroke_color=self.stroke_color,
            stroke_width=self.stroke_width,
            background_color=self.background_color,
        )


class GeneratorInputs(_BridgeModel):
    """
    Everything JavaScript sends to Python for one generation.

    `config` is a partial override of the pattern family's defaults and is
    validated against that family's config model.
    """
    pattern_type: PatternType = PatternType.RINGS
    config: Dict[str, Any] = Field(default_factory=dict)
    export: ExportSettings = Field(default_factory=ExportSettings)
    include_svg: bool = True

    @field_validator('pattern_type', mode='before')
    @classmethod
    def normalize_pattern_type(cls, v):
        if isinstance(v, str):
            return coerce_pattern_type(v)
        return v


# ============================================================================
# Output Models
# ============================================================================

class GeneratorOutput(_BridgeModel):
    """Output from generate() - matches what JS expects."""
    success: bool
    error: Optional[str] = None

    # Pattern data (JSON string for JS to parse)
    pattern_json: Optional[str] = None

    # Display formats
    svg: Optional[str] = None
    summary: Optional[str] = None

    # Validation
    valid: bool = True
    messages: List[ValidationMessageDict] = Field(default_factory=list)


# ============================================================================
# Main Entry Point
# ============================================================================

def generate(input_json: str) -> str:
    """
    Single entry point for all pattern generation from JavaScript.

    Args:
        input_json: JSON string with GeneratorInputs structure

    Returns:
        JSON string with GeneratorOutput structure (camelCase keys).
        Invalid input never raises; it is reported with success=false.
    """
    try:
        data = json.loads(input_json)
        inputs = GeneratorInputs.model_validate(data)

        config = resolve_config(CONFIG_MODELS[inputs.pattern_type], inputs.config)
        validation = validate_config(inputs.pattern_type, config)
        pattern = generate_pattern(inputs.pattern_type, config)

        output = GeneratorOutput(
            success=True,
            pattern_json=to_json(pattern),
            svg=to_svg(pattern, inputs.export.to_options()) if inputs.include_svg else None,
            summary=to_summary(pattern),
            valid=validation.valid,
            messages=[
                {
                    'severity': m.severity.value,
                    'message': m.message,
                    'code': m.code,
                    'suggestion': m.suggestion
                }
                for m in validation.messages
            ],
        )

        return output.model_dump_json(by_alias=True)

    except json.JSONDecodeError as e:
        return GeneratorOutput(
            success=False,
            error=f"Invalid JSON: {e}"
        ).model_dump_json(by_alias=True)

    except ValidationError as e:
        return GeneratorOutput(
            success=False,
            error=f"Invalid configuration: {e}"
        ).model_dump_json(by_alias=True)

    except (ValueError, TypeError) as e:
        return GeneratorOutput(
            success=False,
            error=str(e)
        ).model_dump_json(by_alias=True)


def get_defaults(pattern_type: str) -> str:
    """Default config for a pattern family as camelCase JSON (for UI initialisation)."""
    model = CONFIG_MODELS[coerce_pattern_type(pattern_type)]
    return json.dumps(model().model_dump(mode='json', by_alias=True, exclude_none=True))
