"""
Command-line interface for pattern generation.
"""

import argparse
import json
import logging
import sys
from pathlib import Path

from .. import __version__
from ..api.output import to_json, to_summary, to_svg
from ..api.validation import Severity, validate_config
from ..core.generate import generate_pattern
from ..enums import PatternType, Unit
from ..io.loaders import (
    CONFIG_MODELS,
    apply_overrides,
    load_preset_json,
    preset_from_config,
    save_preset_json,
)
from ..io.svg import ExportOptions

_SEVERITY_LABELS = {
    Severity.ERROR: "ERROR",
    Severity.WARNING: "WARNING",
    Severity.INFO: "INFO",
}


def parse_overrides(assignments):
    """
    Parse KEY=VALUE pairs into an override mapping.

    Values are read as JSON where possible (numbers, booleans, objects
    such as center={"x": 10, "y": 10}) and kept as strings otherwise.
    """
    overrides = {}
    for item in assignments or []:
        if "=" not in item:
            raise ValueError(f"Expected KEY=VALUE, got '{item}'")
        key, raw = item.split("=", 1)
        key = key.strip().replace("-", "_")
        try:
            overrides[key] = json.loads(raw)
        except json.JSONDecodeError:
            overrides[key] = raw
    return overrides


def main(argv=None):
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        prog="bauhaus-generate",
        description="Generate laser-cut SVG patterns (rings, squares, polygons, spirals)",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Default ring pattern to bauhaus-rings.svg
  bauhaus-generate rings

  # Twelve rings with six cuts each, uniform spacing
  bauhaus-generate rings --set ringCount=12 --set cutCount=6 --set spacingMode=uniform

  # Hexagons with bridges, sized in millimetres
  bauhaus-generate polygons --set sides=6 --set bridgeCount=12 --unit mm -o hex.svg

  # Notched squares
  bauhaus-generate squares --set notches_per_side=2

  # Four-arm fermat spiral
  bauhaus-generate spirals --set spiralType=fermat --set turns=4

  # Generate from a saved preset, overriding one field
  bauhaus-generate --preset presets/dense-rings.json --set cutWidth=6

  # Save the settings as a preset without writing an SVG
  bauhaus-generate rings --set ringCount=20 --save-preset twenty.json --no-save

  # Only check a configuration
  bauhaus-generate rings --set outerGap=80 --validate
        """
    )

    parser.add_argument(
        'pattern',
        nargs='?',
        choices=[p.value for p in PatternType],
        help='Pattern family (default: rings, or the preset\'s type)'
    )

    parser.add_argument(
        '--preset',
        type=str,
        default=None,
        help='Preset JSON file to start from'
    )

    parser.add_argument(
        '--set',
        dest='overrides',
        action='append',
        metavar='KEY=VALUE',
        help='Override a config field (camelCase or snake_case), repeatable'
    )

    parser.add_argument(
        '-o', '--output',
        type=str,
        default=None,
        help='SVG output file (default: bauhaus-<pattern>.svg)'
    )

    parser.add_argument(
        '--unit',
        choices=[Unit.INCHES.value, Unit.MM.value],
        default=Unit.INCHES.value,
        help='Physical unit for the document size (default: inches)'
    )

    parser.add_argument(
        '--stroke-color',
        type=str,
        default='#FF0000',
        help='Cut line color (default: #FF0000)'
    )

    parser.add_argument(
        '--json',
        type=str,
        default=None,
        metavar='FILE',
        help='Also write the generated pattern as JSON'
    )

    parser.add_argument(
        '--save-preset',
        type=str,
        default=None,
        metavar='FILE',
        help='Save the final configuration as a preset'
    )

    parser.add_argument(
        '--name',
        type=str,
        default=None,
        help='Preset name for --save-preset (default: derived from the file name)'
    )

    parser.add_argument(
        '--no-save',
        action='store_true',
        help='Do not write the SVG file'
    )

    parser.add_argument(
        '--validate',
        action='store_true',
        help='Validate the configuration and exit'
    )

    parser.add_argument(
        '-v', '--verbose',
        action='store_true',
        help='Enable debug logging'
    )

    parser.add_argument(
        '--version',
        action='version',
        version=f'%(prog)s {__version__}'
    )

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format='%(levelname)s %(name)s: %(message)s'
    )

    # Resolve configuration
    try:
        if args.preset:
            print(f"Loading preset from {args.preset}...")
            preset = load_preset_json(args.preset)
            if args.pattern and args.pattern != preset.pattern_type.value:
                print(
                    f"Error: preset is a {preset.pattern_type.value} preset, not {args.pattern}",
                    file=sys.stderr
                )
                return 1
            pattern_type = preset.pattern_type
            config = preset.to_config()
        else:
            pattern_type = PatternType(args.pattern or PatternType.RINGS.value)
            config = CONFIG_MODELS[pattern_type]()

        config = apply_overrides(config, parse_overrides(args.overrides))
    except Exception as e:
        print(f"Error loading configuration: {e}", file=sys.stderr)
        return 1

    # Validate
    validation = validate_config(pattern_type, config)
    for msg in validation.messages:
        stream = sys.stderr if msg.severity == Severity.ERROR else sys.stdout
        print(f"  {_SEVERITY_LABELS[msg.severity]} [{msg.code}] {msg.message}", file=stream)
        if msg.suggestion:
            print(f"      -> {msg.suggestion}", file=stream)

    if args.validate:
        print("Configuration is valid" if validation.valid else "Configuration has errors")
        return 0 if validation.valid else 1

    if not validation.valid:
        print("Not generating: configuration has errors", file=sys.stderr)
        return 1

    # Generate
    print(f"\nGenerating {pattern_type.value} pattern...")
    pattern = generate_pattern(pattern_type, config)
    print(to_summary(pattern))

    if not args.no_save:
        output_file = Path(args.output or f"bauhaus-{pattern_type.value}.svg")
        options = ExportOptions(unit=Unit(args.unit), stroke_color=args.stroke_color)
        output_file.write_text(to_svg(pattern, options))
        print(f"  Saved: {output_file}")

    if args.json:
        json_file = Path(args.json)
        json_file.write_text(to_json(pattern, validation))
        print(f"  Saved: {json_file}")

    if args.save_preset:
        preset_file = Path(args.save_preset)
        name = args.name or preset_file.stem.replace("-", " ").replace("_", " ").title()
        save_preset_json(preset_from_config(name, config), preset_file)
        print(f"  Saved preset: {preset_file}")

    return 0


if __name__ == '__main__':
    sys.exit(main())
