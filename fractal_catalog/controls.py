# fractal_catalog/controls.py
"""
CONTROLS: UI SCHEMAS FOR FRACTAL PARAMETERS
===========================================

Every tunable parameter of a fractal is described by a control spec. The UI
turns each spec into a widget, the renderer only cares about the value.

There are two kinds of control:

- **range**:  a slider between ``min`` and ``max``
- **select**: a dropdown. Its options come in two shapes:
    - ``IndexedOptions``: ordered labels, the stored value is the position
      (``['linear', 'squared periodic']`` -> 0 or 1)
    - ``KeyedOptions``: integer value -> label
      (``{1: '1x', 4: '4x', 16: '16x'}`` -> 1, 4 or 16)

The plain-mapping shape produced by ``to_dict()`` is the one the front end
reads, so keyed options are written with stringified integer keys.
"""

import math
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Dict, Iterator, List, Mapping, Tuple, Union


@dataclass(frozen=True)
class IndexedOptions:
    """Ordered labels. The value of an option is its index."""
    labels: Tuple[str, ...]

    def values(self) -> List[int]:
        return list(range(len(self.labels)))

    def label_for(self, value: int) -> str:
        return self.labels[value]

    def to_plain(self) -> List[str]:
        return list(self.labels)


@dataclass(frozen=True)
class KeyedOptions:
    """Integer value -> display label, kept in declaration order."""
    mapping: Mapping[int, str]

    def __post_init__(self):
        # Freeze whatever dict we were handed
        object.__setattr__(self, 'mapping', MappingProxyType(dict(self.mapping)))

    def __hash__(self):
        return hash(tuple(self.mapping.items()))

    def __eq__(self, other):
        if not isinstance(other, KeyedOptions):
            return NotImplemented
        return dict(self.mapping) == dict(other.mapping)

    def values(self) -> List[int]:
        return list(self.mapping.keys())

    def label_for(self, value: int) -> str:
        return self.mapping[value]

    def to_plain(self) -> Dict[str, str]:
        return {str(k): v for k, v in self.mapping.items()}


Options = Union[IndexedOptions, KeyedOptions]


@dataclass(frozen=True)
class RangeControl:
    """Slider bounded by ``[min, max]`` (inclusive)."""
    min: float
    max: float

    type = 'range'

    def __post_init__(self):
        if self.min > self.max:
            raise ValueError(f"Range min {self.min} is greater than max {self.max}")

    def contains(self, value: float) -> bool:
        return self.min <= value <= self.max

    def clamp(self, value: float) -> float:
        """
        Pull ``value`` into ``[min, max]``.

        Raises:
            ValueError: for bools, non-numbers and NaN/inf
        """
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise ValueError(f"Range value must be a number, got {value!r}")
        if not math.isfinite(value):
            raise ValueError(f"Range value must be finite, got {value!r}")
        return min(max(value, self.min), self.max)

    def to_dict(self) -> Dict[str, Any]:
        return {'type': self.type, 'min': self.min, 'max': self.max}


@dataclass(frozen=True)
class SelectControl:
    """Dropdown over a fixed set of options."""
    options: Options

    type = 'select'

    def values(self) -> List[int]:
        """Allowed values, in display order."""
        return self.options.values()

    def labels(self) -> List[str]:
        return [self.options.label_for(v) for v in self.values()]

    def label_for(self, value: int) -> str:
        if not self.contains(value):
            raise ValueError(f"{value!r} is not one of {self.values()}")
        return self.options.label_for(int(value))

    def contains(self, value: Any) -> bool:
        # bool is an int subclass but never a meaningful option
        if isinstance(value, bool):
            return False
        if isinstance(value, float) and value.is_integer():
            value = int(value)
        return isinstance(value, int) and value in self.values()

    @property
    def is_keyed(self) -> bool:
        return isinstance(self.options, KeyedOptions)

    def to_dict(self) -> Dict[str, Any]:
        return {'type': self.type, 'options': self.options.to_plain()}


ControlSpec = Union[RangeControl, SelectControl]


def select(options) -> SelectControl:
    """
    Build a select control from either a list of labels or a value -> label dict.

    Dict keys may be ints or stringified ints (as they arrive from JSON).
    """
    if isinstance(options, Mapping):
        return SelectControl(KeyedOptions({int(k): v for k, v in options.items()}))
    return SelectControl(IndexedOptions(tuple(options)))


def control_from_dict(data: Mapping[str, Any]) -> ControlSpec:
    """Inverse of ``ControlSpec.to_dict()``."""
    kind = data.get('type')
    if kind == 'range':
        return RangeControl(min=data['min'], max=data['max'])
    if kind == 'select':
        return select(data['options'])
    raise ValueError(f"Unknown control type: {kind!r}")


@dataclass(frozen=True)
class FractalDefinition:
    """
    UI schema for one fractal: which parameters exist and in what order
    the menu shows them.

    ``menu_order`` must be a permutation of the ``controls`` keys. That is
    checked once for the whole catalog by ``fractal_catalog.validate``.
    """
    menu_order: Tuple[str, ...]
    controls: Mapping[str, ControlSpec]

    def __post_init__(self):
        object.__setattr__(self, 'menu_order', tuple(self.menu_order))
        object.__setattr__(self, 'controls', MappingProxyType(dict(self.controls)))

    def __hash__(self):
        return hash((self.menu_order, tuple(self.controls.items())))

    def __eq__(self, other):
        if not isinstance(other, FractalDefinition):
            return NotImplemented
        return self.menu_order == other.menu_order and dict(self.controls) == dict(other.controls)

    def ordered_controls(self) -> Iterator[Tuple[str, ControlSpec]]:
        """Yield ``(name, spec)`` pairs in menu order."""
        for name in self.menu_order:
            yield name, self.controls[name]

    def to_dict(self) -> Dict[str, Any]:
        return {
            'menuOrder': list(self.menu_order),
            'controls': {name: spec.to_dict() for name, spec in self.controls.items()},
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> 'FractalDefinition':
        return cls(
            menu_order=tuple(data['menuOrder']),
            controls={name: control_from_dict(spec) for name, spec in data['controls'].items()},
        )
