# app/main.py
"""
Fractal Explorer - Parameter Control Panel

Pick a fractal, tune its parameters and move the viewport. The values
live in a per-session store seeded from the catalog defaults; the
renderer reads the snapshot shown on the right.

Run with:
    streamlit run app/main.py
"""

import streamlit as st
import sys
from pathlib import Path

# Add app directory to path
sys.path.insert(0, str(Path(__file__).parent))
sys.path.insert(0, str(Path(__file__).parent.parent))

from config import CONFIG
from state import get_store, select_fractal, update_params, set_viewport, reset_fractal
from services import ExportService
from components import render_fractal_inputs, render_viewport_panel
from fractal_catalog import get_enum_value, get_menu_config, list_fractal_names
from fractal_catalog.tables import controls_frame, defaults_frame

# Page configuration - must be first Streamlit command
st.set_page_config(
    page_title=CONFIG.app_name,
    page_icon="🌀",
    layout="wide",
    initial_sidebar_state="expanded",
)


# =============================================================================
# SIDEBAR - Fractal and Parameter Controls
# =============================================================================

store = get_store()
names = list(list_fractal_names())

with st.sidebar:
    st.title(f"🌀 {CONFIG.app_name}")
    st.caption(CONFIG.app_subtitle)

    st.divider()

    fractal = st.selectbox(
        "Fractal",
        options=names,
        index=names.index(store.fractal),
        key="fractal",
    )
    store = select_fractal(fractal)

    st.divider()

    values = render_fractal_inputs(fractal, get_menu_config(fractal), store.config)
    update_params(**values)

    st.divider()

    if st.button("↺ Reset to defaults", use_container_width=True, disabled=not store.is_modified()):
        reset_fractal()
        st.rerun()


# =============================================================================
# MAIN - Viewport, Snapshot, Catalog
# =============================================================================

st.header(fractal.title())
st.caption(f"Enum value: {get_enum_value(fractal)}")

st.subheader("Viewport")
new_viewport = render_viewport_panel(store.viewport, CONFIG.zoom_factor)
if new_viewport is not None:
    set_viewport(new_viewport)
    st.rerun()

col_left, col_right = st.columns([1, 1])

with col_left:
    st.subheader("Renderer Snapshot")
    st.json(store.snapshot())
    st.download_button(
        "Download session JSON",
        data=ExportService.generate_session_json(store),
        file_name=f"{fractal.replace(' ', '_')}_session.json",
        mime="application/json",
    )

with col_right:
    st.subheader("Defaults")
    st.dataframe(defaults_frame(), use_container_width=True)

with st.expander("Full control catalog", expanded=False):
    st.dataframe(controls_frame(), use_container_width=True, hide_index=True)

    col1, col2 = st.columns(2)
    with col1:
        st.download_button(
            "Download catalog JSON",
            data=ExportService.generate_catalog_json(),
            file_name="fractal_catalog.json",
            mime="application/json",
        )
    with col2:
        st.download_button(
            "Download controls CSV",
            data=ExportService.generate_controls_csv(),
            file_name="fractal_controls.csv",
            mime="text/csv",
        )
