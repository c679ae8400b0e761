"""Public configuration API."""

from .config import (  # noqa: F401
    DEFAULT_THEME,
    DEFAULT_TOOLS,
    FigspecSettings,
    FigureOptionsBuilder,
    configure,
    get_settings,
    load_settings,
    reset_settings,
)

__all__ = [
    "DEFAULT_THEME",
    "DEFAULT_TOOLS",
    "FigspecSettings",
    "FigureOptionsBuilder",
    "configure",
    "get_settings",
    "load_settings",
    "reset_settings",
]
