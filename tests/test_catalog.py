# File: tests/test_catalog.py
"""
Test the catalog.py module: the three tables and their accessors.
"""

import math

import pytest

from fractal_catalog import (
    DEFAULT_FRACTAL,
    DEFAULT_MENU_CONFIG,
    DEFAULT_STORE,
    FRACTAL_ENUM,
    DefaultStoreEntry,
    FractalDefinition,
    Point,
    UnknownFractal,
    get_defaults,
    get_enum_value,
    get_fractal_name,
    get_menu_config,
    list_fractal_names,
)


EXPECTED_NAMES = (
    'julia set',
    'mandelbrot set',
    'burning ship',
    'modified collatz',
    'box thing',
)


def test_list_fractal_names_declaration_order():
    """Names come back in declaration order, the same on every call."""
    assert list_fractal_names() == EXPECTED_NAMES
    assert list_fractal_names() == list_fractal_names()
    assert DEFAULT_FRACTAL == 'julia set'


def test_enum_values():
    """Enum matches the declaration order 0..4."""
    for i, name in enumerate(EXPECTED_NAMES):
        assert get_enum_value(name) == i
    assert get_enum_value('mandelbrot set') == 1


def test_get_fractal_name_reverses_enum():
    for name in list_fractal_names():
        assert get_fractal_name(get_enum_value(name)) == name

    with pytest.raises(UnknownFractal):
        get_fractal_name(99)


def test_box_thing_viewport_center():
    vp = get_defaults('box thing').viewport
    assert vp.center == Point(0.25, 0.25)
    assert vp.center.to_dict() == {'x': 0.25, 'y': 0.25}
    assert vp.range == Point(1, 1)


def test_modified_collatz_angle_bounds():
    controls = get_menu_config('modified collatz').controls
    assert controls['angle1'].max == pytest.approx(2 * math.pi)
    assert controls['angle2'].max == pytest.approx(2 * math.pi)
    assert controls['angle1'].min == 0


def test_box_thing_rotation_bound():
    assert get_menu_config('box thing').controls['rotation'].max == pytest.approx(3 * math.pi)


def test_julia_set_table_contents():
    """Spot-check the julia set entry against the known values."""
    definition = get_menu_config('julia set')
    assert definition.menu_order == ('colorset', 'brightness', 'speed', 'exponent', 'supersamples')
    assert definition.controls['speed'].max == 320
    assert definition.controls['colorset'].labels() == ['linear', 'squared periodic']
    assert definition.controls['supersamples'].values() == [1, 4, 16]

    defaults = get_defaults('julia set')
    assert dict(defaults.config) == {
        'brightness': 4, 'colorset': 0, 'exponent': 2, 'speed': 16, 'supersamples': 1,
    }
    assert defaults.viewport.range == Point(4, 4)


def test_modified_collatz_defaults():
    defaults = get_defaults('modified collatz')
    assert defaults.config['depth'] == 200
    assert defaults.config['angle1'] == pytest.approx(math.pi)
    assert 'supersamples' not in defaults.config
    assert defaults.viewport.range == Point(100, 100)


@pytest.mark.parametrize('accessor', [get_menu_config, get_defaults, get_enum_value])
@pytest.mark.parametrize('bad_name', ['nonexistent', '', 'Julia Set', None, ['julia set']])
def test_unknown_fractal(accessor, bad_name):
    with pytest.raises(UnknownFractal) as excinfo:
        accessor(bad_name)
    assert excinfo.value.name == bad_name


def test_unknown_fractal_message_lists_known_names():
    with pytest.raises(UnknownFractal) as excinfo:
        get_enum_value('nonexistent')
    message = str(excinfo.value)
    assert 'nonexistent' in message
    assert 'box thing' in message

    # Callers can treat it as an ordinary lookup failure
    assert isinstance(excinfo.value, LookupError)


def test_accessor_types():
    for name in list_fractal_names():
        assert isinstance(get_menu_config(name), FractalDefinition)
        assert isinstance(get_defaults(name), DefaultStoreEntry)
        assert isinstance(get_enum_value(name), int)


def test_tables_are_read_only():
    """
    WHY THIS MATTERS:
    The tables are shared by every consumer. Per-session edits must go to a
    separate store, never into the catalog.
    """
    with pytest.raises(TypeError):
        FRACTAL_ENUM['new fractal'] = 5
    with pytest.raises(TypeError):
        DEFAULT_MENU_CONFIG['julia set'] = None
    with pytest.raises(TypeError):
        DEFAULT_STORE['julia set'].config['brightness'] = 8
    with pytest.raises(TypeError):
        get_menu_config('julia set').controls['speed'] = None
    with pytest.raises(Exception):  # dataclasses.FrozenInstanceError
        get_defaults('julia set').viewport.center.x = 1.0

    assert get_defaults('julia set').config['brightness'] == 4


def test_accessors_return_shared_instances():
    """Lookups hand out the same immutable objects, nothing is rebuilt per call."""
    assert get_menu_config('burning ship') is get_menu_config('burning ship')
    assert get_defaults('burning ship') is DEFAULT_STORE['burning ship']


@pytest.mark.parametrize('bad_value', [True, False, 1.0, '1', None])
def test_get_fractal_name_only_takes_ints(bad_value):
    """True and 1.0 hash like 1 but are not enum values."""
    with pytest.raises(UnknownFractal):
        get_fractal_name(bad_value)
    assert get_fractal_name(1) == 'mandelbrot set'
