# app/components/parameter_inputs.py
"""
Parameter input components: one widget per fractal control, in menu order.
"""

import streamlit as st
from typing import Any, Dict, Optional, Union
import sys
from pathlib import Path

# Add app directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))
sys.path.insert(0, str(Path(__file__).parent.parent.parent))

from config import CONFIG
from state import widget_key
from fractal_catalog import FractalDefinition, RangeControl, SelectControl


def is_integer_range(spec: RangeControl) -> bool:
    """True when both bounds are whole numbers (depth, brightness, ...)."""
    return all(float(v).is_integer() for v in (spec.min, spec.max))


def slider_step(spec: RangeControl, steps: int = None) -> Union[int, float]:
    """Whole-number ranges step by 1, others get roughly ``steps`` positions."""
    if is_integer_range(spec):
        return 1
    steps = steps or CONFIG.slider_steps
    return (spec.max - spec.min) / steps


def format_label(param: str) -> str:
    """'constant_1' -> 'Constant 1'"""
    return param.replace('_', ' ').capitalize()


def render_range_input(
    param: str,
    spec: RangeControl,
    current: Optional[float],
    key: str,
) -> Union[int, float]:
    """Render a slider for a range control."""
    if is_integer_range(spec):
        lo, hi = int(spec.min), int(spec.max)
        value = int(round(spec.clamp(current if current is not None else lo)))
    else:
        lo, hi = float(spec.min), float(spec.max)
        value = float(spec.clamp(current if current is not None else lo))

    return st.slider(
        format_label(param),
        min_value=lo,
        max_value=hi,
        value=value,
        step=slider_step(spec),
        key=key,
    )


def render_select_input(
    param: str,
    spec: SelectControl,
    current: Optional[int],
    key: str,
) -> Optional[int]:
    """
    Render a selectbox for a select control. Returns the option value, not the label.

    A parameter the defaults leave unset shows a placeholder and returns None
    until the user picks an option.
    """
    values = spec.values()
    if current is None:
        index = None
    else:
        index = values.index(current) if current in values else 0

    return st.selectbox(
        format_label(param),
        options=values,
        index=index,
        format_func=spec.label_for,
        placeholder="Renderer default",
        key=key,
    )


def render_fractal_inputs(
    fractal: str,
    definition: FractalDefinition,
    current: Dict[str, Any],
) -> Dict[str, Any]:
    """
    Render every control of ``definition`` in menu order.

    Returns dict of parameter -> widget value. Selects still on their
    placeholder are left out, so unset parameters stay unset.
    """
    values = {}
    for param, spec in definition.ordered_controls():
        key = widget_key(fractal, param)
        if isinstance(spec, RangeControl):
            values[param] = render_range_input(param, spec, current.get(param), key)
        else:
            value = render_select_input(param, spec, current.get(param), key)
            if value is not None:
                values[param] = value
    return values
