#!/usr/bin/env python3
"""
SHOW_CATALOG: Print the Fractal Catalog and Export It
=====================================================

This demo walks the catalog the way a renderer would:
1. List the registered fractals and their enum values
2. Print each fractal's controls in menu order
3. Seed a session store and tweak a few values
4. Build the starting pixel grid from the default viewport
5. Export the catalog as JSON and CSV

Run with:
    python demos/show_catalog.py
    python demos/show_catalog.py --fractal "box thing" --width 8 --height 6

Outputs:
    artifacts/fractal_catalog.json  - Menu, defaults and enum tables
    artifacts/fractal_controls.csv  - One row per fractal parameter
"""

import argparse
import json
import os
import sys
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))
sys.path.insert(0, str(Path(__file__).parent.parent / "app"))

from fractal_catalog import (
    DEFAULT_FRACTAL,
    RangeControl,
    SessionStore,
    get_defaults,
    get_enum_value,
    get_menu_config,
    list_fractal_names,
)
from services.export_service import ExportService


def print_header(text: str):
    """Print a formatted section header."""
    print("\n" + "=" * 70)
    print(f"  {text}")
    print("=" * 70)


def describe_fractal(name: str):
    definition = get_menu_config(name)
    config = get_defaults(name).config
    print(f"\n  [{get_enum_value(name)}] {name}")
    for param, spec in definition.ordered_controls():
        if isinstance(spec, RangeControl):
            kind = f"range [{spec.min:.4g}, {spec.max:.4g}]"
        else:
            kind = "select " + ", ".join(spec.labels())
        default = config.get(param, "-")
        print(f"      {param:<14} {kind:<36} default={default}")


def main():
    parser = argparse.ArgumentParser(description='Print the fractal catalog and export it')
    parser.add_argument('--fractal', default=DEFAULT_FRACTAL, choices=list_fractal_names(),
                        help='Fractal to seed the session with')
    parser.add_argument('--width', type=int, default=6, help='Pixel grid width')
    parser.add_argument('--height', type=int, default=4, help='Pixel grid height')
    parser.add_argument('--outdir', default='artifacts', help='Export directory')
    args = parser.parse_args()

    print_header("REGISTERED FRACTALS")
    for name in list_fractal_names():
        describe_fractal(name)

    print_header(f"SESSION: {args.fractal}")
    store = SessionStore(args.fractal)
    definition = get_menu_config(args.fractal)
    first_param, first_spec = next(definition.ordered_controls())
    if isinstance(first_spec, RangeControl):
        # Deliberately out of range to show clamping
        stored = store.set(first_param, first_spec.max * 2)
        print(f"  set {first_param} = {first_spec.max * 2:.4g} -> stored {stored:.4g}")
    print(f"  modified: {store.is_modified()}")
    print("  " + json.dumps(store.snapshot()))

    print_header(f"PIXEL GRID ({args.width}x{args.height})")
    grid = store.viewport.pixel_grid(args.width, args.height)
    print(f"  bounds: {store.viewport.bounds()}")
    print(f"  top-left: {grid[0, 0]:.4g}   bottom-right: {grid[-1, -1]:.4g}")

    print_header("EXPORT")
    os.makedirs(args.outdir, exist_ok=True)
    json_path = os.path.join(args.outdir, 'fractal_catalog.json')
    csv_path = os.path.join(args.outdir, 'fractal_controls.csv')
    with open(json_path, 'w') as f:
        f.write(ExportService.generate_catalog_json())
    with open(csv_path, 'w') as f:
        f.write(ExportService.generate_controls_csv())
    print(f"  ✓ {json_path}")
    print(f"  ✓ {csv_path}")


if __name__ == "__main__":
    main()
