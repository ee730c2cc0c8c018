# fractal_catalog/tables.py
"""
Tabular views of the catalog (for display and CSV export).
"""

import pandas as pd

from .catalog import (
    get_defaults,
    get_enum_value,
    get_menu_config,
    list_fractal_names,
)
from .controls import RangeControl


CONTROL_COLUMNS = [
    'fractal', 'enum', 'position', 'parameter', 'type',
    'min', 'max', 'options', 'default',
]


def controls_frame() -> pd.DataFrame:
    """
    One row per (fractal, parameter), in enum then menu order.

    ``min``/``max`` are NaN for selects, ``options`` is None for ranges,
    ``default`` is NaN where the default store leaves a parameter unset.
    """
    rows = []
    for name in list_fractal_names():
        definition = get_menu_config(name)
        config = get_defaults(name).config
        for position, (param, spec) in enumerate(definition.ordered_controls()):
            is_range = isinstance(spec, RangeControl)
            rows.append({
                'fractal': name,
                'enum': get_enum_value(name),
                'position': position,
                'parameter': param,
                'type': spec.type,
                'min': spec.min if is_range else float('nan'),
                'max': spec.max if is_range else float('nan'),
                'options': None if is_range else ', '.join(spec.labels()),
                'default': config.get(param),
            })
    return pd.DataFrame(rows, columns=CONTROL_COLUMNS)


def defaults_frame() -> pd.DataFrame:
    """One row per fractal: enum, viewport centre/range and parameter count."""
    rows = []
    for name in list_fractal_names():
        entry = get_defaults(name)
        vp = entry.viewport
        rows.append({
            'fractal': name,
            'enum': get_enum_value(name),
            'center_x': vp.center.x,
            'center_y': vp.center.y,
            'range_x': vp.range.x,
            'range_y': vp.range.y,
            'n_params': len(get_menu_config(name).menu_order),
        })
    return pd.DataFrame(rows).set_index('fractal')
