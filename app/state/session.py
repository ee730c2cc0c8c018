# app/state/session.py
"""
Session state management for Streamlit.

Provides typed accessors for session state to avoid
scattered st.session_state['key'] calls throughout the app.
"""

import streamlit as st
import sys
from pathlib import Path
from typing import Any, Dict

sys.path.insert(0, str(Path(__file__).parent.parent.parent))

from fractal_catalog import SessionStore, Viewport, get_menu_config


# ============================================================================
# Store State
# ============================================================================

def get_store() -> SessionStore:
    """Get this session's parameter store, creating it on first use."""
    if 'store' not in st.session_state:
        from config import CONFIG
        st.session_state.store = SessionStore(CONFIG.default_fractal)
    return st.session_state.store


def select_fractal(name: str) -> SessionStore:
    """Switch the active fractal (edits to the others are kept)."""
    store = get_store()
    if store.fractal != name:
        store.select_fractal(name)
    return store


def update_params(**kwargs) -> Dict[str, Any]:
    """Update specific parameters of the active fractal."""
    return get_store().update(**kwargs)


def set_viewport(viewport: Viewport) -> None:
    get_store().set_viewport(viewport)


def reset_fractal() -> None:
    """Restore the active fractal's defaults and drop its widget state."""
    store = get_store()
    for param in get_menu_config(store.fractal).menu_order:
        key = widget_key(store.fractal, param)
        if key in st.session_state:
            del st.session_state[key]
    store.reset()


def widget_key(fractal: str, param: str) -> str:
    """Streamlit widget key for one parameter of one fractal."""
    return f"{fractal}:{param}"

