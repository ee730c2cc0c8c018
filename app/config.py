# app/config.py
"""
Application configuration and defaults.
"""

from dataclasses import dataclass


@dataclass
class AppConfig:
    """Global application configuration."""

    # App metadata
    app_name: str = "Fractal Explorer"
    app_subtitle: str = "Fractal parameter control panel"
    version: str = "0.1.0"

    # Fractal shown on first load
    default_fractal: str = "julia set"

    # Number of slider steps across a range control
    slider_steps: int = 100

    # Zoom step for the viewport buttons
    zoom_factor: float = 2.0


# Global config instance
CONFIG = AppConfig()
