# app/components - Reusable UI components
from .parameter_inputs import (
    render_fractal_inputs,
    render_range_input,
    render_select_input,
    slider_step,
)
from .viewport_panel import render_viewport_panel

__all__ = [
    'render_fractal_inputs',
    'render_range_input',
    'render_select_input',
    'slider_step',
    'render_viewport_panel',
]
