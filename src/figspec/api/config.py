"""Configuration primitives for figspec.

:class:`FigspecSettings` holds the process-wide defaults that ``figure()``
reads at creation time (the default theme, strict parameter handling and
the default tool list). Settings are resolved from environment variables,
then ``[tool.figspec]`` in ``pyproject.toml``, then the built-in defaults.
Callers may also inject an explicit settings object per call.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field, replace
from typing import Any, Mapping, Sequence

from ..core.config_helpers import (
    coerce_bool,
    coerce_string_tuple,
    read_pyproject_section,
    split_csv,
)
from ..utils.exceptions import ConfigurationError

DEFAULT_TOOLS: tuple[str, ...] = ("pan", "wheel_zoom", "box_zoom", "resize", "reset", "save")
DEFAULT_THEME = "tableau"

_ENV_THEME = "FIGSPEC_THEME"
_ENV_STRICT = "FIGSPEC_STRICT_PARAMS"
_ENV_TOOLS = "FIGSPEC_DEFAULT_TOOLS"


@dataclass(frozen=True)
class FigspecSettings:
    """Process-wide defaults consulted by ``figure()``.

    Notes
    -----
    - ``theme`` is the theme reference stored on figures that do not pass one.
    - ``strict_params`` turns invalid style parameters into a raised
      :class:`~figspec.utils.exceptions.ValidationError` instead of a warning.
    """

    theme: str | Mapping[str, Any] | None = DEFAULT_THEME
    strict_params: bool = False
    default_tools: tuple[str, ...] = field(default=DEFAULT_TOOLS)


def _settings_from_mapping(base: FigspecSettings, values: Mapping[str, Any], *, source: str) -> FigspecSettings:
    updates: dict[str, Any] = {}
    if "theme" in values:
        theme = values["theme"]
        if theme is not None and not isinstance(theme, (str, Mapping)):
            raise ConfigurationError(
                f"theme from {source} must be a string or table",
                details={"source": source, "key": "theme", "actual_type": type(theme).__name__},
            )
        updates["theme"] = theme or None
    if "strict_params" in values:
        updates["strict_params"] = coerce_bool(values["strict_params"])
    if "default_tools" in values:
        raw = values["default_tools"]
        tools = split_csv(raw) if isinstance(raw, str) else coerce_string_tuple(raw)
        updates["default_tools"] = tools
    return replace(base, **updates) if updates else base


def load_settings(env: Mapping[str, str] | None = None) -> FigspecSettings:
    """Resolve settings from the environment, pyproject.toml and defaults.

    Environment variables take precedence over ``[tool.figspec]``.
    """
    environ = os.environ if env is None else env
    settings = FigspecSettings()
    settings = _settings_from_mapping(
        settings, read_pyproject_section(("tool", "figspec")), source="pyproject.toml"
    )

    env_values: dict[str, Any] = {}
    if _ENV_THEME in environ:
        env_values["theme"] = environ[_ENV_THEME]
    if _ENV_STRICT in environ:
        env_values["strict_params"] = environ[_ENV_STRICT]
    if _ENV_TOOLS in environ:
        env_values["default_tools"] = environ[_ENV_TOOLS]
    return _settings_from_mapping(settings, env_values, source="environment")


_SETTINGS: FigspecSettings | None = None


def get_settings() -> FigspecSettings:
    """Return the process default settings, loading them on first use."""
    global _SETTINGS
    if _SETTINGS is None:
        _SETTINGS = load_settings()
    return _SETTINGS


def configure(**overrides: Any) -> FigspecSettings:
    """Override fields of the process default settings and return them."""
    global _SETTINGS
    unknown = sorted(set(overrides) - set(FigspecSettings.__dataclass_fields__))
    if unknown:
        raise ConfigurationError(
            f"unknown settings: {', '.join(unknown)}",
            details={"unknown": unknown},
        )
    if "default_tools" in overrides:
        overrides["default_tools"] = coerce_string_tuple(overrides["default_tools"])
    _SETTINGS = replace(get_settings(), **overrides)
    return _SETTINGS


def reset_settings() -> None:
    """Forget cached settings so the next lookup reloads them."""
    global _SETTINGS
    _SETTINGS = None


class FigureOptionsBuilder:
    """Fluent helper to assemble keyword options for ``figure()``.

    ``build()`` returns the options as a dict; ``create()`` passes them to
    :func:`figspec.spec.builder.figure`.
    """

    def __init__(self, *, width: int = 480, height: int = 520) -> None:
        self._opts: dict[str, Any] = {"width": width, "height": height}

    def size(self, width: int, height: int) -> FigureOptionsBuilder:
        """Set the intrinsic plot area size in pixels."""
        self._opts["width"] = width
        self._opts["height"] = height
        return self

    def outer_size(self, plot_width: int | None, plot_height: int | None) -> FigureOptionsBuilder:
        """Set the overall size including border space."""
        self._opts["plot_width"] = plot_width
        self._opts["plot_height"] = plot_height
        return self

    def title(self, title: str | None) -> FigureOptionsBuilder:
        self._opts["title"] = title
        return self

    def labels(self, xlab: str | None = None, ylab: str | None = None) -> FigureOptionsBuilder:
        """Set axis labels; ``None`` suppresses the label."""
        self._opts["xlab"] = xlab
        self._opts["ylab"] = ylab
        return self

    def limits(
        self,
        xlim: Sequence[Any] | None = None,
        ylim: Sequence[Any] | None = None,
        *,
        padding_factor: float | None = None,
    ) -> FigureOptionsBuilder:
        """Set explicit axis extents and the padding used when they are computed."""
        if xlim is not None:
            self._opts["xlim"] = xlim
        if ylim is not None:
            self._opts["ylim"] = ylim
        if padding_factor is not None:
            self._opts["padding_factor"] = padding_factor
        return self

    def axes(
        self,
        *,
        xgrid: bool = True,
        ygrid: bool = True,
        xaxes: str | bool = "below",
        yaxes: str | bool = "left",
    ) -> FigureOptionsBuilder:
        self._opts.update(xgrid=xgrid, ygrid=ygrid, xaxes=xaxes, yaxes=yaxes)
        return self

    def tools(self, tools: Sequence[str] | None) -> FigureOptionsBuilder:
        """Request tools by name; ``None`` disables the toolbar."""
        self._opts["tools"] = None if tools is None else tuple(tools)
        return self

    def theme(self, theme: str | Mapping[str, Any] | None) -> FigureOptionsBuilder:
        self._opts["theme"] = theme
        return self

    def params(self, **params: Any) -> FigureOptionsBuilder:
        """Add extra style parameters (validated by ``figure()``)."""
        self._opts.update(params)
        return self

    def build(self) -> dict[str, Any]:
        """Return the assembled options (no side effects)."""
        return dict(self._opts)

    def create(self, *, settings: FigspecSettings | None = None):
        """Create the figure described by the assembled options."""
        from ..spec.builder import figure

        return figure(settings=settings, **self.build())


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
