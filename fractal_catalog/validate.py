# fractal_catalog/validate.py
"""
Consistency checks across the menu catalog, the default store and the enum.

The three tables are written by hand, so nothing stops them drifting apart.
``check_catalog`` runs once when ``fractal_catalog.catalog`` is imported and
refuses to load a catalog that disagrees with itself.
"""

import logging
from typing import List, Mapping

from .controls import FractalDefinition, RangeControl, SelectControl
from .defaults import DefaultStoreEntry

logger = logging.getLogger(__name__)


class CatalogInvariantError(ValueError):
    """Raised when the catalog tables are inconsistent."""

    def __init__(self, problems: List[str]):
        self.problems = list(problems)
        super().__init__(
            f"{len(self.problems)} catalog problem(s):\n  " + "\n  ".join(self.problems)
        )


def find_config_problems(name: str, definition: FractalDefinition,
                         config: Mapping[str, float]) -> List[str]:
    """Check a set of parameter values against a fractal's controls."""
    problems = []
    for param, value in config.items():
        spec = definition.controls.get(param)
        if spec is None:
            problems.append(f"{name}: '{param}' has a value but no control")
        elif isinstance(spec, RangeControl):
            if isinstance(value, bool) or not isinstance(value, (int, float)):
                problems.append(f"{name}: '{param}' must be a number, got {value!r}")
            elif not spec.contains(value):
                problems.append(
                    f"{name}: '{param}'={value} outside [{spec.min}, {spec.max}]"
                )
        elif isinstance(spec, SelectControl):
            if not spec.contains(value):
                problems.append(
                    f"{name}: '{param}'={value!r} not one of {spec.values()}"
                )
    return problems


def find_catalog_problems(menu: Mapping[str, FractalDefinition],
                          store: Mapping[str, DefaultStoreEntry],
                          enum: Mapping[str, int]) -> List[str]:
    """Return every invariant violation as a readable message (empty if clean)."""
    problems = []

    # Same fractal names everywhere
    names = set(menu)
    if set(store) != names:
        problems.append(
            f"default store names {sorted(store)} differ from menu names {sorted(names)}"
        )
    if set(enum) != names:
        problems.append(
            f"enum names {sorted(enum)} differ from menu names {sorted(names)}"
        )

    # Enum values: unique non-negative ints
    seen = {}
    for name, value in enum.items():
        if isinstance(value, bool) or not isinstance(value, int) or value < 0:
            problems.append(f"{name}: enum value {value!r} is not a non-negative int")
            continue
        if value in seen:
            problems.append(f"{name}: enum value {value} already used by '{seen[value]}'")
        seen[value] = name

    for name, definition in menu.items():
        order = list(definition.menu_order)
        if len(order) != len(set(order)):
            problems.append(f"{name}: menuOrder has duplicate entries {order}")
        missing = set(definition.controls) - set(order)
        extra = set(order) - set(definition.controls)
        if missing:
            problems.append(f"{name}: controls {sorted(missing)} missing from menuOrder")
        if extra:
            problems.append(f"{name}: menuOrder entries {sorted(extra)} have no control")

        entry = store.get(name)
        if entry is not None:
            problems.extend(find_config_problems(name, definition, entry.config))

    return problems


def check_catalog(menu: Mapping[str, FractalDefinition],
                  store: Mapping[str, DefaultStoreEntry],
                  enum: Mapping[str, int]) -> None:
    """
    Raise ``CatalogInvariantError`` if the tables disagree.

    Raises:
        CatalogInvariantError: with the full list of problems
    """
    problems = find_catalog_problems(menu, store, enum)
    if problems:
        raise CatalogInvariantError(problems)
    logger.debug("Catalog OK: %d fractals", len(menu))
