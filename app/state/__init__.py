# app/state - Session state management
from .session import (
    get_store,
    select_fractal,
    update_params,
    set_viewport,
    reset_fractal,
    widget_key,
)

__all__ = [
    'get_store',
    'select_fractal',
    'update_params',
    'set_viewport',
    'reset_fractal',
    'widget_key',
]
