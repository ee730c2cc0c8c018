# app/services/export_service.py
"""
Export service: catalog and session downloads (JSON, CSV).
"""

import json
from typing import Any, Dict
from pathlib import Path
import sys

sys.path.insert(0, str(Path(__file__).parent.parent.parent))

from fractal_catalog import (
    SessionStore,
    get_defaults,
    get_enum_value,
    get_menu_config,
    list_fractal_names,
)
from fractal_catalog.tables import controls_frame


class ExportService:
    """Service for exporting catalog and session data to various formats."""

    @staticmethod
    def catalog_dict() -> Dict[str, Any]:
        """
        The three catalog tables as plain mappings, in the shape the
        front end reads (``menuOrder``, ``controls``, ``config``, ``viewport``).
        """
        names = list_fractal_names()
        return {
            'menu': {name: get_menu_config(name).to_dict() for name in names},
            'defaults': {name: get_defaults(name).to_dict() for name in names},
            'enum': {name: get_enum_value(name) for name in names},
        }

    @staticmethod
    def generate_catalog_json() -> str:
        """Returns JSON content as a string."""
        return json.dumps(ExportService.catalog_dict(), indent=2)

    @staticmethod
    def generate_controls_csv() -> str:
        """One row per fractal parameter. Returns CSV content as a string."""
        return controls_frame().to_csv(index=False)

    @staticmethod
    def generate_session_json(store: SessionStore) -> str:
        """Current session state of the active fractal."""
        return json.dumps(store.snapshot(), indent=2)
