"""
Generate an expandable ring mesh and compare spacing modes.

Writes one SVG per spacing mode so the gap progressions can be compared
side by side in a viewer or laser software.
"""

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'src'))

from bauhaus_patterns.core import generate_ring_pattern
from bauhaus_patterns.api import to_svg, validate_config
from bauhaus_patterns.enums import SpacingMode

print("="*70)
print("EXPANDABLE RING MESH - SPACING MODE COMPARISON")
print("="*70)
print()

# 5in outer radius at 72 DPI, 8 cuts per ring staggered on a 16-step grid
base = {
    "outerRadius": 360,
    "innerRadius": 36,
    "ringCount": 14,
    "cutCount": 8,
    "gridDivisions": 16,
    "staggerOffset": 1,
    "cutWidth": 8,
}

for mode in SpacingMode:
    config = dict(base, spacingMode=mode.value)

    validation = validate_config("rings", config)
    pattern = generate_ring_pattern(config)

    gaps = [a - b for a, b in zip(pattern.radii, pattern.radii[1:])]
    print(f"{mode.value}:")
    print(f"  Rings: {len(pattern.rings)}")
    print(f"  Radii: {pattern.radii[0]:.1f} -> {pattern.radii[-1]:.1f} px")
    if gaps:
        print(f"  Gaps:  {gaps[0]:.1f} -> {gaps[-1]:.1f} px")
    for msg in validation.messages:
        print(f"  {msg.severity.value.upper()}: {msg.message}")

    filename = f"rings-{mode.value}.svg"
    with open(filename, "w") as f:
        f.write(to_svg(pattern))
    print(f"  Saved: {filename}")
    print()
