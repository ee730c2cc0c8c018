"""
Cross-table invariants of the catalog, and the checks that enforce them.
"""

import pytest

from fractal_catalog import (
    DEFAULT_MENU_CONFIG,
    DEFAULT_STORE,
    FRACTAL_ENUM,
    CatalogInvariantError,
    DefaultStoreEntry,
    FractalDefinition,
    Point,
    RangeControl,
    SelectControl,
    Viewport,
    list_fractal_names,
)
from fractal_catalog.controls import select
from fractal_catalog.validate import (
    check_catalog,
    find_catalog_problems,
    find_config_problems,
)


def test_same_names_in_all_tables():
    names = set(list_fractal_names())
    assert set(DEFAULT_MENU_CONFIG) == names
    assert set(DEFAULT_STORE) == names
    assert set(FRACTAL_ENUM) == names
    assert len(names) == 5


def test_menu_order_matches_controls():
    """
    WHAT IS THIS TEST?
    ==================
    menuOrder drives which widgets the UI draws. A control missing from it
    would never be shown; a name in it without a control would crash the UI.
    """
    for name, definition in DEFAULT_MENU_CONFIG.items():
        assert set(definition.menu_order) == set(definition.controls), name
        assert len(definition.menu_order) == len(definition.controls), name


def test_default_keys_are_controls():
    for name, entry in DEFAULT_STORE.items():
        controls = DEFAULT_MENU_CONFIG[name].controls
        for param in entry.config:
            assert param in controls, f"{name}: {param} has no control"


def test_range_defaults_within_bounds():
    for name, entry in DEFAULT_STORE.items():
        controls = DEFAULT_MENU_CONFIG[name].controls
        for param, value in entry.config.items():
            spec = controls[param]
            if isinstance(spec, RangeControl):
                assert spec.min <= value <= spec.max, f"{name}.{param}={value}"

    # Example from the julia set
    brightness = DEFAULT_MENU_CONFIG['julia set'].controls['brightness']
    assert brightness.min <= DEFAULT_STORE['julia set'].config['brightness'] <= brightness.max
    assert (brightness.min, brightness.max) == (1, 8)


def test_select_defaults_are_valid_options():
    for name, entry in DEFAULT_STORE.items():
        controls = DEFAULT_MENU_CONFIG[name].controls
        for param, value in entry.config.items():
            spec = controls[param]
            if isinstance(spec, SelectControl):
                assert value in spec.values(), f"{name}.{param}={value}"

    supersamples = DEFAULT_MENU_CONFIG['julia set'].controls['supersamples']
    assert supersamples.is_keyed
    assert DEFAULT_STORE['julia set'].config['supersamples'] in {1, 4, 16}


def test_enum_values_distinct_ints():
    values = list(FRACTAL_ENUM.values())
    assert len(values) == len(set(values))
    assert all(isinstance(v, int) and v >= 0 for v in values)


def test_shipped_catalog_is_clean():
    assert find_catalog_problems(DEFAULT_MENU_CONFIG, DEFAULT_STORE, FRACTAL_ENUM) == []
    check_catalog(DEFAULT_MENU_CONFIG, DEFAULT_STORE, FRACTAL_ENUM)


# ============================================================================
# Injected defects
# ============================================================================

def _tiny_catalog():
    """A one-fractal catalog that passes every check."""
    menu = {
        'spiral': FractalDefinition(
            menu_order=('turns', 'palette'),
            controls={
                'turns': RangeControl(min=1, max=5),
                'palette': select(['fire', 'ice']),
            },
        ),
    }
    store = {
        'spiral': DefaultStoreEntry(
            config={'turns': 2, 'palette': 1},
            viewport=Viewport(center=Point(0, 0), range=Point(2, 2)),
        ),
    }
    enum = {'spiral': 0}
    return menu, store, enum


def test_tiny_catalog_is_clean():
    assert find_catalog_problems(*_tiny_catalog()) == []


def test_detects_missing_store_entry():
    menu, store, enum = _tiny_catalog()
    del store['spiral']
    problems = find_catalog_problems(menu, store, enum)
    assert len(problems) == 1
    assert 'default store' in problems[0]


def test_detects_enum_mismatch_and_duplicates():
    menu, store, enum = _tiny_catalog()
    menu['spiral2'] = menu['spiral']
    store['spiral2'] = store['spiral']
    enum['spiral2'] = 0
    problems = find_catalog_problems(menu, store, enum)
    assert any('already used' in p for p in problems)

    enum = {'spiral': -1, 'spiral2': 1}
    problems = find_catalog_problems(menu, store, enum)
    assert any('non-negative' in p for p in problems)


def test_detects_menu_order_drift():
    menu, store, enum = _tiny_catalog()
    menu['spiral'] = FractalDefinition(
        menu_order=('turns', 'turns', 'speed'),
        controls=menu['spiral'].controls,
    )
    problems = find_catalog_problems(menu, store, enum)
    assert any('duplicate' in p for p in problems)
    assert any("['palette'] missing" in p for p in problems)
    assert any("['speed'] have no control" in p for p in problems)


def test_detects_bad_defaults():
    menu, store, enum = _tiny_catalog()
    store['spiral'] = DefaultStoreEntry(
        config={'turns': 9, 'palette': 2, 'glow': 1},
        viewport=store['spiral'].viewport,
    )
    problems = find_catalog_problems(menu, store, enum)
    assert len(problems) == 3
    assert any('outside [1, 5]' in p for p in problems)
    assert any("'palette'=2" in p for p in problems)
    assert any("'glow' has a value but no control" in p for p in problems)


def test_check_catalog_raises_with_all_problems():
    menu, store, enum = _tiny_catalog()
    enum['spiral'] = 'zero'
    del store['spiral']

    with pytest.raises(CatalogInvariantError) as excinfo:
        check_catalog(menu, store, enum)

    assert len(excinfo.value.problems) == 2
    assert isinstance(excinfo.value, ValueError)
    assert '2 catalog problem(s)' in str(excinfo.value)


def test_find_config_problems_on_session_values():
    definition = DEFAULT_MENU_CONFIG['mandelbrot set']
    assert find_config_problems('mandelbrot set', definition, {'brightness': 8, 'supersamples': 16}) == []

    problems = find_config_problems(
        'mandelbrot set', definition, {'brightness': 0.5, 'supersamples': 2, 'colorset': 'linear'},
    )
    assert len(problems) == 3
