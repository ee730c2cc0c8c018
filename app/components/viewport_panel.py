# app/components/viewport_panel.py
"""
Viewport display and navigation component.
"""

import streamlit as st
from typing import Optional
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent.parent))

from fractal_catalog import Viewport


def render_viewport_panel(viewport: Viewport, zoom_factor: float = 2.0) -> Optional[Viewport]:
    """
    Show the current window and zoom/pan buttons.

    Returns the new viewport if a button was pressed, None otherwise.
    """
    x_min, x_max, y_min, y_max = viewport.bounds()

    cols = st.columns(4)
    with cols[0]:
        st.metric("Center X", f"{viewport.center.x:.4g}")
    with cols[1]:
        st.metric("Center Y", f"{viewport.center.y:.4g}")
    with cols[2]:
        st.metric("Range X", f"{viewport.range.x:.4g}")
    with cols[3]:
        st.metric("Range Y", f"{viewport.range.y:.4g}")

    st.caption(f"x ∈ [{x_min:.4g}, {x_max:.4g}], y ∈ [{y_min:.4g}, {y_max:.4g}]")

    # Pan by a quarter of the visible window
    step_x = viewport.range.x / 4
    step_y = viewport.range.y / 4

    cols = st.columns(6)
    if cols[0].button("Zoom in", use_container_width=True):
        return viewport.zoom(zoom_factor)
    if cols[1].button("Zoom out", use_container_width=True):
        return viewport.zoom(1 / zoom_factor)
    if cols[2].button("←", use_container_width=True):
        return viewport.pan(-step_x, 0)
    if cols[3].button("→", use_container_width=True):
        return viewport.pan(step_x, 0)
    if cols[4].button("↑", use_container_width=True):
        return viewport.pan(0, step_y)
    if cols[5].button("↓", use_container_width=True):
        return viewport.pan(0, -step_y)
    return None
