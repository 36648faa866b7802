"""
Generate one sheet of every pattern family in millimetres.

Notched squares, bridged hexagons and a four-arm spiral, plus a ring
pattern loaded through a preset round trip.
"""

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'src'))

from bauhaus_patterns.core import generate_pattern
from bauhaus_patterns.core.units import mm_to_pixels
from bauhaus_patterns.api import to_svg, to_summary
from bauhaus_patterns.io import (
    ExportOptions,
    RingPatternConfig,
    load_preset_json,
    preset_from_config,
    save_preset_json,
)

# 100mm outer extent for every sheet
outer = mm_to_pixels(100)
options = ExportOptions(unit="mm")

sheets = {
    "squares": {"outerSize": outer, "squareCount": 8, "notchesPerSide": 2, "notchWidth": 6},
    "polygons": {"outerRadius": outer, "sides": 6, "polygonCount": 8, "bridgeCount": 12},
    "spirals": {"outerRadius": outer, "armCount": 4, "turns": 2.5, "spiralType": "fermat"},
}

for pattern_type, config in sheets.items():
    pattern = generate_pattern(pattern_type, config)
    print(to_summary(pattern))

    filename = f"sampler-{pattern_type}.svg"
    with open(filename, "w") as f:
        f.write(to_svg(pattern, options))
    print(f"  Saved: {filename}")
    print()

# Preset round trip
rings = RingPatternConfig(outer_radius=outer, ring_count=10, cut_count=6)
save_preset_json(preset_from_config("Sampler rings", rings, tags=["sampler"]), "sampler-rings.json")
preset = load_preset_json("sampler-rings.json")
pattern = generate_pattern(preset.pattern_type, preset.to_config())
print(to_summary(pattern))

with open("sampler-rings.svg", "w") as f:
    f.write(to_svg(pattern, options))
print("  Saved: sampler-rings.svg")
