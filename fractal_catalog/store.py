# fractal_catalog/store.py
"""
Per-session parameter store.

The catalog is shared and read-only. A user session needs somewhere to keep
its own slider positions, so ``SessionStore`` copies the defaults the first
time a fractal is touched and edits only that copy.
"""

import logging
from typing import Any, Dict, Optional

from .catalog import (
    DEFAULT_FRACTAL,
    get_defaults,
    get_enum_value,
    get_menu_config,
)
from .controls import RangeControl
from .defaults import Viewport

logger = logging.getLogger(__name__)


class UnknownParameter(KeyError):
    """Raised when a fractal has no control with the requested name."""

    def __init__(self, fractal: str, param: str):
        self.fractal = fractal
        self.param = param
        super().__init__(f"{fractal!r} has no parameter {param!r}")

    def __str__(self):
        return self.args[0]


class SessionStore:
    """
    Mutable copy-on-write view over the default store.

    Each fractal gets its own config dict and viewport the first time it is
    selected. Switching away and back keeps the edits; ``reset`` drops them.

    Example:
        >>> store = SessionStore('mandelbrot set')
        >>> store.set('brightness', 6)
        6
        >>> store.snapshot()['enum']
        1
    """

    def __init__(self, fractal: str = DEFAULT_FRACTAL):
        self._configs: Dict[str, Dict[str, Any]] = {}
        self._viewports: Dict[str, Viewport] = {}
        self._fractal = None
        self.select_fractal(fractal)

    @property
    def fractal(self) -> str:
        return self._fractal

    def select_fractal(self, name: str) -> None:
        """Make ``name`` the active fractal, seeding it from the defaults if new."""
        entry = get_defaults(name)
        if name not in self._configs:
            self._configs[name] = entry.copy_config()
            self._viewports[name] = entry.viewport
            logger.debug("Seeded session values for %s", name)
        self._fractal = name

    @property
    def config(self) -> Dict[str, Any]:
        """Copy of the active fractal's current values."""
        return dict(self._configs[self._fractal])

    @property
    def viewport(self) -> Viewport:
        return self._viewports[self._fractal]

    def get(self, param: str, default: Any = None) -> Any:
        """
        Current value of ``param``.

        ``default`` is only used for controls the defaults leave unset
        (e.g. supersamples on the modified collatz).
        """
        definition = get_menu_config(self._fractal)
        if param not in definition.controls:
            raise UnknownParameter(self._fractal, param)
        return self._configs[self._fractal].get(param, default)

    def set(self, param: str, value: Any) -> Any:
        """
        Set ``param`` on the active fractal and return the value stored.

        Range values are clamped into bounds. Select values must be one of
        the control's options.

        Raises:
            UnknownParameter: if the fractal has no such control
            ValueError: for a select value that is not an option, or a range
                value that is not a finite number
        """
        definition = get_menu_config(self._fractal)
        spec = definition.controls.get(param)
        if spec is None:
            raise UnknownParameter(self._fractal, param)

        if isinstance(spec, RangeControl):
            stored = spec.clamp(value)
            if stored != value:
                logger.debug("Clamped %s.%s from %s to %s", self._fractal, param, value, stored)
        else:
            if not spec.contains(value):
                raise ValueError(
                    f"{self._fractal}: {param}={value!r} is not one of {spec.values()}"
                )
            stored = int(value)

        self._configs[self._fractal][param] = stored
        return stored

    def update(self, **values) -> Dict[str, Any]:
        """Set several parameters at once. Returns the new config."""
        for param, value in values.items():
            self.set(param, value)
        return self.config

    def set_viewport(self, viewport: Viewport) -> None:
        self._viewports[self._fractal] = viewport

    def reset(self, name: Optional[str] = None) -> None:
        """Throw away edits for ``name`` (default: the active fractal)."""
        name = self._fractal if name is None else name
        entry = get_defaults(name)
        if name in self._configs:
            self._configs[name] = entry.copy_config()
            self._viewports[name] = entry.viewport
            logger.debug("Reset session values for %s", name)

    def is_modified(self, name: Optional[str] = None) -> bool:
        name = self._fractal if name is None else name
        entry = get_defaults(name)
        if name not in self._configs:
            return False
        return self._configs[name] != dict(entry.config) or self._viewports[name] != entry.viewport

    def snapshot(self) -> Dict[str, Any]:
        """Plain-dict state of the active fractal, ready to hand to a renderer."""
        return {
            'fractal': self._fractal,
            'enum': get_enum_value(self._fractal),
            'config': self.config,
            'viewport': self.viewport.to_dict(),
        }


