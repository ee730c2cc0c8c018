# fractal_catalog/defaults.py
"""Default parameter values and initial viewports for each fractal."""

from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional, Tuple

import numpy as np


@dataclass(frozen=True)
class Point:
    x: float
    y: float

    def to_dict(self) -> Dict[str, float]:
        return {'x': self.x, 'y': self.y}

    @classmethod
    def from_dict(cls, data: Mapping[str, float]) -> 'Point':
        return cls(x=data['x'], y=data['y'])


@dataclass(frozen=True)
class Viewport:
    """
    Visible window of the complex plane.

    ``center`` is the middle of the window, ``range`` its full width (x)
    and height (y). A viewport with range (4, 4) around the origin spans
    [-2, 2] on both axes.
    """
    center: Point
    range: Point

    def bounds(self) -> Tuple[float, float, float, float]:
        """Return ``(x_min, x_max, y_min, y_max)``."""
        hx = self.range.x / 2
        hy = self.range.y / 2
        return (self.center.x - hx, self.center.x + hx,
                self.center.y - hy, self.center.y + hy)

    def zoom(self, factor: float, about: Optional[Point] = None) -> 'Viewport':
        """
        Zoom in by ``factor`` (2.0 halves the range, 0.5 doubles it).

        If ``about`` is given, that point keeps its position on screen.
        """
        if factor <= 0:
            raise ValueError(f"Zoom factor must be positive, got {factor}")
        new_range = Point(self.range.x / factor, self.range.y / factor)
        if about is None:
            return Viewport(center=self.center, range=new_range)
        cx = about.x + (self.center.x - about.x) / factor
        cy = about.y + (self.center.y - about.y) / factor
        return Viewport(center=Point(cx, cy), range=new_range)

    def pan(self, dx: float, dy: float) -> 'Viewport':
        return Viewport(center=Point(self.center.x + dx, self.center.y + dy), range=self.range)

    def pixel_grid(self, width: int, height: int) -> np.ndarray:
        """
        Complex coordinate of every pixel centre, shape ``(height, width)``.

        Row 0 is the top of the image (largest y), matching canvas layout.
        """
        if width <= 0 or height <= 0:
            raise ValueError(f"Grid size must be positive, got {width}x{height}")
        x_min, x_max, y_min, y_max = self.bounds()
        # Pixel centres, not edges
        dx = (x_max - x_min) / width
        dy = (y_max - y_min) / height
        xs = np.linspace(x_min + dx / 2, x_max - dx / 2, width)
        ys = np.linspace(y_max - dy / 2, y_min + dy / 2, height)
        return xs[np.newaxis, :] + 1j * ys[:, np.newaxis]

    def to_dict(self) -> Dict[str, Dict[str, float]]:
        return {'center': self.center.to_dict(), 'range': self.range.to_dict()}

    @classmethod
    def from_dict(cls, data: Mapping[str, Mapping[str, float]]) -> 'Viewport':
        return cls(center=Point.from_dict(data['center']), range=Point.from_dict(data['range']))


@dataclass(frozen=True)
class DefaultStoreEntry:
    """Initial parameter values and viewport for one fractal."""
    config: Mapping[str, float]
    viewport: Viewport

    def __post_init__(self):
        object.__setattr__(self, 'config', MappingProxyType(dict(self.config)))

    def __hash__(self):
        return hash((tuple(self.config.items()), self.viewport))

    def __eq__(self, other):
        if not isinstance(other, DefaultStoreEntry):
            return NotImplemented
        return dict(self.config) == dict(other.config) and self.viewport == other.viewport

    def copy_config(self) -> Dict[str, float]:
        """Mutable copy of the defaults, for seeding a session."""
        return dict(self.config)

    def to_dict(self) -> Dict[str, Any]:
        return {'config': dict(self.config), 'viewport': self.viewport.to_dict()}

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> 'DefaultStoreEntry':
        return cls(config=dict(data['config']), viewport=Viewport.from_dict(data['viewport']))
