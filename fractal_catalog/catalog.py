# fractal_catalog/catalog.py
"""
CATALOG: FRACTAL MENUS, DEFAULTS AND IDS
========================================

PURPOSE:
--------
Three lookup tables, keyed by fractal name, shared by the renderer and the UI:

1. **DEFAULT_MENU_CONFIG**: which controls a fractal exposes and the order
   the menu shows them in.

2. **DEFAULT_STORE**: the starting value of every parameter and the initial
   viewport.

3. **FRACTAL_ENUM**: a small stable integer per fractal. The renderer uses it
   as a compact discriminator instead of passing names around.

The tables are built once at import and never change. Everything exposed here
is a frozen dataclass or a read-only mapping. A UI that lets users tweak values
must copy into its own store (see ``fractal_catalog.store``).

ADDING A FRACTAL:
-----------------
Add an entry to all three tables. The import-time check in
``fractal_catalog.validate`` fails loudly if the tables disagree or a default
falls outside its control's bounds.
"""

import math
from types import MappingProxyType
from typing import Mapping, Tuple

from .controls import FractalDefinition, RangeControl, select
from .defaults import DefaultStoreEntry, Point, Viewport
from .validate import check_catalog


class UnknownFractal(LookupError):
    """Raised when a lookup uses a name (or enum value) that is not registered."""

    def __init__(self, name):
        self.name = name
        super().__init__(f"Unknown fractal: {name!r}. Known: {', '.join(_NAMES)}")


# ============================================================================
# SHARED CONTROLS
# ============================================================================

BRIGHTNESS = RangeControl(min=1, max=8)
EXPONENT = RangeControl(min=0, max=10)
COLORSET = select(['linear', 'squared periodic'])
SUPERSAMPLES = select({1: '1x', 4: '4x', 16: '16x'})

# Julia, Mandelbrot and Burning Ship start from the same window
ESCAPE_TIME_VIEWPORT = Viewport(center=Point(0, 0), range=Point(4, 4))


# ============================================================================
# MENU CONFIG
# ============================================================================

DEFAULT_MENU_CONFIG: Mapping[str, FractalDefinition] = MappingProxyType({
    'julia set': FractalDefinition(
        menu_order=('colorset', 'brightness', 'speed', 'exponent', 'supersamples'),
        controls={
            'brightness': BRIGHTNESS,
            'colorset': COLORSET,
            'exponent': EXPONENT,
            'speed': RangeControl(min=0, max=320),
            'supersamples': SUPERSAMPLES,
        },
    ),
    'mandelbrot set': FractalDefinition(
        menu_order=('colorset', 'brightness', 'exponent', 'supersamples'),
        controls={
            'brightness': BRIGHTNESS,
            'exponent': EXPONENT,
            'colorset': COLORSET,
            'supersamples': SUPERSAMPLES,
        },
    ),
    'burning ship': FractalDefinition(
        menu_order=('colorset', 'brightness', 'exponent', 'supersamples'),
        controls={
            'brightness': BRIGHTNESS,
            'exponent': EXPONENT,
            'colorset': COLORSET,
            'supersamples': SUPERSAMPLES,
        },
    ),
    'modified collatz': FractalDefinition(
        menu_order=('depth', 'constant_1', 'angle1', 'angle2', 'supersamples'),
        controls={
            'depth': RangeControl(min=1, max=800),
            'constant_1': RangeControl(min=1, max=10),
            'angle1': RangeControl(min=0, max=2 * math.pi),
            'angle2': RangeControl(min=0, max=2 * math.pi),
            'supersamples': SUPERSAMPLES,
        },
    ),
    'box thing': FractalDefinition(
        menu_order=('rotation',),
        controls={
            'rotation': RangeControl(min=0, max=3 * math.pi),
        },
    ),
})


# ============================================================================
# DEFAULT STORE
# ============================================================================

DEFAULT_STORE: Mapping[str, DefaultStoreEntry] = MappingProxyType({
    'julia set': DefaultStoreEntry(
        config={
            'brightness': 4,
            'colorset': 0,
            'exponent': 2,
            'speed': 16,
            'supersamples': 1,
        },
        viewport=ESCAPE_TIME_VIEWPORT,
    ),
    'mandelbrot set': DefaultStoreEntry(
        config={
            'brightness': 4,
            'colorset': 0,
            'exponent': 2,
            'supersamples': 1,
        },
        viewport=ESCAPE_TIME_VIEWPORT,
    ),
    'burning ship': DefaultStoreEntry(
        config={
            'brightness': 4,
            'colorset': 0,
            'exponent': 2,
            'supersamples': 1,
        },
        viewport=ESCAPE_TIME_VIEWPORT,
    ),
    # No supersamples default: the renderer falls back to 1x
    'modified collatz': DefaultStoreEntry(
        config={
            'depth': 200,
            'constant_1': 4,
            'angle1': math.pi,
            'angle2': math.pi,
        },
        viewport=Viewport(center=Point(0, 0), range=Point(100, 100)),
    ),
    'box thing': DefaultStoreEntry(
        config={
            'rotation': 0,
        },
        viewport=Viewport(center=Point(0.25, 0.25), range=Point(1, 1)),
    ),
})


# ============================================================================
# ENUM
# ============================================================================

FRACTAL_ENUM: Mapping[str, int] = MappingProxyType({
    'julia set': 0,
    'mandelbrot set': 1,
    'burning ship': 2,
    'modified collatz': 3,
    'box thing': 4,
})

_NAMES: Tuple[str, ...] = tuple(DEFAULT_MENU_CONFIG)
_BY_ENUM: Mapping[int, str] = MappingProxyType({v: k for k, v in FRACTAL_ENUM.items()})

DEFAULT_FRACTAL = _NAMES[0]

check_catalog(DEFAULT_MENU_CONFIG, DEFAULT_STORE, FRACTAL_ENUM)


# ============================================================================
# ACCESSORS
# ============================================================================

def list_fractal_names() -> Tuple[str, ...]:
    """All registered fractal names, in declaration order."""
    return _NAMES


def get_menu_config(name: str) -> FractalDefinition:
    """
    Menu order and control specs for ``name``.

    Raises:
        UnknownFractal: if ``name`` is not registered
    """
    try:
        return DEFAULT_MENU_CONFIG[name]
    except (KeyError, TypeError):
        raise UnknownFractal(name) from None


def get_defaults(name: str) -> DefaultStoreEntry:
    """
    Default parameter values and viewport for ``name``.

    Raises:
        UnknownFractal: if ``name`` is not registered
    """
    try:
        return DEFAULT_STORE[name]
    except (KeyError, TypeError):
        raise UnknownFractal(name) from None


def get_enum_value(name: str) -> int:
    """
    Stable integer id for ``name``.

    Raises:
        UnknownFractal: if ``name`` is not registered
    """
    try:
        return FRACTAL_ENUM[name]
    except (KeyError, TypeError):
        raise UnknownFractal(name) from None


def get_fractal_name(value: int) -> str:
    """Reverse of ``get_enum_value``. Only plain ints are accepted."""
    if isinstance(value, bool) or not isinstance(value, int):
        raise UnknownFractal(value)
    try:
        return _BY_ENUM[value]
    except KeyError:
        raise UnknownFractal(value) from None
