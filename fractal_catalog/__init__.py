# fractal_catalog - Fractal menu schemas, defaults and ids
"""
FRACTAL CATALOG: STATIC CONFIGURATION FOR THE FRACTAL RENDERER
==============================================================

This package provides:
- UI control schemas per fractal (sliders and dropdowns, in menu order)
- Default parameter values and initial viewports
- A stable name -> integer enum used as a compact discriminator
- A per-session store seeded from the defaults

ARCHITECTURE:
-------------
    controls.py     Range/select control specs, FractalDefinition
    defaults.py     Point, Viewport, DefaultStoreEntry
    catalog.py      The three tables and their accessors
    validate.py     Cross-table consistency checks (run at import)
    store.py        Copy-on-write session store
    tables.py       pandas views for display and export
"""

from .catalog import (
    DEFAULT_FRACTAL,
    DEFAULT_MENU_CONFIG,
    DEFAULT_STORE,
    FRACTAL_ENUM,
    UnknownFractal,
    get_defaults,
    get_enum_value,
    get_fractal_name,
    get_menu_config,
    list_fractal_names,
)
from .controls import (
    FractalDefinition,
    IndexedOptions,
    KeyedOptions,
    RangeControl,
    SelectControl,
    control_from_dict,
)
from .defaults import DefaultStoreEntry, Point, Viewport
from .store import SessionStore, UnknownParameter
from .validate import CatalogInvariantError

__version__ = "0.1.0"

__all__ = [
    'DEFAULT_FRACTAL',
    'DEFAULT_MENU_CONFIG',
    'DEFAULT_STORE',
    'FRACTAL_ENUM',
    'UnknownFractal',
    'get_defaults',
    'get_enum_value',
    'get_fractal_name',
    'get_menu_config',
    'list_fractal_names',
    'FractalDefinition',
    'IndexedOptions',
    'KeyedOptions',
    'RangeControl',
    'SelectControl',
    'control_from_dict',
    'DefaultStoreEntry',
    'Point',
    'Viewport',
    'SessionStore',
    'UnknownParameter',
    'CatalogInvariantError',
]
