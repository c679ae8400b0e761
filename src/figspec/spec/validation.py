"""Validation of extra style parameters passed to ``figure()``.

Each recognised parameter name maps to a value kind in
:data:`FIGURE_PAR_VALIDATOR_MAP`. :func:`validate_params` checks every
entry against its kind, normalising values the renderer accepts in more
than one spelling. Unknown names are dropped; an invalid value fails only
its own entry and is reported as a :class:`ParameterProblem`.
"""

from __future__ import annotations

import logging
import math
import re
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Callable, Dict, Mapping, Sequence, Tuple

import numpy as np
import pandas as pd
from matplotlib import colors as mcolors

from ..utils.exceptions import ValidationError

_LOGGER = logging.getLogger(__name__)

FIGURE_PAR_VALIDATOR_MAP: Mapping[str, str] = MappingProxyType(
    {
        "background_fill": "color",
        "border_fill": "color",
        "outline_line_color": "color",
        "title_text_color": "color",
        "min_border": "int",
        "min_border_bottom": "int",
        "min_border_left": "int",
        "min_border_right": "int",
        "min_border_top": "int",
        "outline_line_dash_offset": "int",
        "plot_width": "int",
        "outline_line_alpha": "num_data_spec",
        "title_text_alpha": "num_data_spec",
        "outline_line_width": "num_data_spec",
        "title_text_font": "string",
        "title_text_font_size": "font_size_string",
        "outline_line_cap": "line_cap",
        "outline_line_dash": "line_dash",
        "outline_line_join": "line_join",
        "title_text_align": "text_align",
        "title_text_baseline": "text_baseline",
        "title_text_font_style": "font_style",
        "toolbar_location": "toolbar_location",
        "logo": "logo",
        "h_symmetry": "logical",
        "v_symmetry": "logical",
    }
)

TOOLBAR_NONE = "none"

LINE_CAPS = ("butt", "round", "square")
LINE_DASHES = ("solid", "dashed", "dotted", "dotdash", "dashdot")
LINE_JOINS = ("miter", "round", "bevel")
TEXT_ALIGNS = ("left", "right", "center")
TEXT_BASELINES = ("top", "middle", "bottom", "alphabetic", "hanging")
FONT_STYLES = ("normal", "italic", "bold")
TOOLBAR_LOCATIONS = ("above", "below", "left", "right", TOOLBAR_NONE)
LOGOS = ("normal", "grey")

_FONT_SIZE_RE = re.compile(r"^\d+(\.\d+)?(pt|px|em)$")
_DASH_PATTERN_RE = re.compile(r"^\d+( +\d+)*$")
# matplotlib-only colour spellings the renderer does not understand
_MPL_ONLY_COLOR_RE = re.compile(r"^(C\d+|[0-9.]+|(tab|xkcd):.*)$")


@dataclass(frozen=True)
class ParameterProblem:
    """One extra parameter whose value did not match its expected kind."""

    key: str
    kind: str
    value: Any
    message: str

    def as_dict(self) -> Dict[str, Any]:
        return {"key": self.key, "kind": self.kind, "value": self.value, "message": self.message}

    def to_error(self) -> ValidationError:
        """Return the problem as a raisable :class:`ValidationError`."""
        return ValidationError(
            f"invalid value for {self.key!r} (expected {self.kind}): {self.message}",
            details={"key": self.key, "expected_kind": self.kind, "value": self.value},
        )


@dataclass
class ValidationResult:
    """Validated parameter values plus the per-entry problems found."""

    values: Dict[str, Any] = field(default_factory=dict)
    problems: Tuple[ParameterProblem, ...] = ()

    def __bool__(self) -> bool:
        return bool(self.values)

    def raise_for_problems(self) -> None:
        """Raise one :class:`ValidationError` covering every problem, if any."""
        if not self.problems:
            return
        keys = ", ".join(p.key for p in self.problems)
        raise ValidationError(
            f"invalid figure parameters: {keys}",
            details={"problems": [p.as_dict() for p in self.problems]},
        )


def _is_bool(value: Any) -> bool:
    return isinstance(value, (bool, np.bool_))


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float, np.integer, np.floating)) and not _is_bool(value)


def _choice(name: str, options: Sequence[str]) -> Callable[[Any], str]:
    def check(value: Any) -> str:
        if isinstance(value, str) and value in options:
            return value
        raise ValueError(f"{name} must be one of {', '.join(options)}")

    return check


def _check_color(value: Any) -> str | None:
    if value is None:
        return None
    if isinstance(value, str):
        if _MPL_ONLY_COLOR_RE.match(value) or not mcolors.is_color_like(value):
            raise ValueError(f"{value!r} is not a colour name or hex string")
        rgba = mcolors.to_rgba(value)
        return mcolors.to_hex(rgba, keep_alpha=rgba[3] < 1.0)
    if isinstance(value, (tuple, list, np.ndarray)) and len(value) in (3, 4):
        if not all(_is_number(v) for v in value):
            raise ValueError("colour tuples must hold numbers")
        channels = [float(v) for v in value]
        if any(v > 1.0 for v in channels[:3]):
            channels[:3] = [v / 255.0 for v in channels[:3]]
        if len(channels) == 4 and channels[3] > 1.0:
            channels[3] = channels[3] / 255.0
        if not all(0.0 <= v <= 1.0 for v in channels):
            raise ValueError("colour channels must lie in 0-1 or 0-255")
        return mcolors.to_hex(channels, keep_alpha=len(channels) == 4 and channels[3] < 1.0)
    raise ValueError(f"cannot interpret {type(value).__name__} as a colour")


def _check_int(value: Any) -> int:
    if isinstance(value, (int, np.integer)) and not _is_bool(value):
        result = int(value)
    elif isinstance(value, (float, np.floating)) and math.isfinite(value) and float(value).is_integer():
        result = int(value)
    else:
        raise ValueError("expected an integer")
    if result < 0:
        raise ValueError("expected a non-negative integer")
    return result


def _check_num_data_spec(value: Any) -> Any:
    if _is_number(value):
        if not math.isfinite(float(value)):
            raise ValueError("numeric value must be finite")
        return value.item() if isinstance(value, np.generic) else value
    if isinstance(value, str):
        if not value:
            raise ValueError("field name must not be empty")
        return {"field": value}
    if isinstance(value, Mapping):
        if set(value) == {"field"} and isinstance(value["field"], str) and value["field"]:
            return {"field": value["field"]}
        if set(value) == {"value"} and _is_number(value["value"]):
            return {"value": float(value["value"])}
        raise ValueError("spec mappings need exactly one of 'field' (str) or 'value' (number)")
    if isinstance(value, (np.ndarray, pd.Series, list, tuple)):
        if isinstance(value, pd.Series) and not pd.api.types.is_numeric_dtype(value.dtype):
            raise ValueError("per-datum values must be numeric")
        arr = np.asarray(value, dtype=np.float64)
        if arr.ndim != 1:
            raise ValueError("per-datum values must be one-dimensional")
        return arr.tolist()
    raise ValueError("expected a number, a field name or per-datum numbers")


def _check_string(value: Any) -> str:
    if isinstance(value, str):
        return value
    raise ValueError("expected a string")


def _check_font_size(value: Any) -> str:
    if isinstance(value, str) and _FONT_SIZE_RE.match(value):
        return value
    if _is_number(value) and math.isfinite(float(value)) and float(value) > 0:
        return f"{float(value):g}pt"
    raise ValueError("font size must look like '12pt', '10px' or '1.2em'")


def _check_line_dash(value: Any) -> str | list[int]:
    if isinstance(value, str):
        if value in LINE_DASHES:
            return value
        if _DASH_PATTERN_RE.match(value.strip()):
            return [int(v) for v in value.split()]
        raise ValueError(f"line dash must be one of {', '.join(LINE_DASHES)} or a dash pattern")
    if isinstance(value, (list, tuple, np.ndarray)) and len(value) > 0:
        pattern = []
        for item in value:
            if not (isinstance(item, (int, np.integer)) and not _is_bool(item)) or item < 0:
                raise ValueError("dash patterns must hold non-negative integers")
            pattern.append(int(item))
        return pattern
    raise ValueError("expected a dash name or a dash pattern")


def _check_toolbar_location(value: Any) -> str:
    if value is None:
        return TOOLBAR_NONE
    if isinstance(value, str) and value.lower() in TOOLBAR_LOCATIONS:
        return value.lower()
    raise ValueError(f"toolbar location must be one of {', '.join(TOOLBAR_LOCATIONS)}")


def _check_logo(value: Any) -> str | None:
    if value is None or (isinstance(value, str) and value in LOGOS):
        return value
    raise ValueError(f"logo must be one of {', '.join(LOGOS)} or None")


def _check_logical(value: Any) -> bool:
    if _is_bool(value):
        return bool(value)
    raise ValueError("expected True or False")


KIND_VALIDATORS: Mapping[str, Callable[[Any], Any]] = MappingProxyType(
    {
        "color": _check_color,
        "int": _check_int,
        "num_data_spec": _check_num_data_spec,
        "string": _check_string,
        "font_size_string": _check_font_size,
        "line_cap": _choice("line cap", LINE_CAPS),
        "line_dash": _check_line_dash,
        "line_join": _choice("line join", LINE_JOINS),
        "text_align": _choice("text align", TEXT_ALIGNS),
        "text_baseline": _choice("text baseline", TEXT_BASELINES),
        "font_style": _choice("font style", FONT_STYLES),
        "toolbar_location": _check_toolbar_location,
        "logo": _check_logo,
        "logical": _check_logical,
    }
)


def validate_param(key: str, value: Any, kind: str) -> Any:
    """Return ``value`` normalised for ``kind`` or raise :class:`ValidationError`."""
    try:
        check = KIND_VALIDATORS[kind]
    except KeyError:
        raise ValidationError(
            f"unknown parameter kind {kind!r}",
            details={"key": key, "kind": kind, "known_kinds": sorted(KIND_VALIDATORS)},
        ) from None
    try:
        return check(value)
    except (ValueError, TypeError) as exc:
        raise ParameterProblem(key, kind, value, str(exc)).to_error() from exc


def validate_params(
    raw: Mapping[str, Any],
    schema: Mapping[str, str] = FIGURE_PAR_VALIDATOR_MAP,
) -> ValidationResult:
    """Validate ``raw`` against ``schema``.

    Entries are kept in their original order. Names not in ``schema`` are
    dropped. An entry whose value does not match its kind is left out of
    the result and recorded in ``problems``; the remaining entries are
    still validated.
    """
    values: Dict[str, Any] = {}
    problems: list[ParameterProblem] = []
    for key, value in raw.items():
        kind = schema.get(key)
        if kind is None:
            _LOGGER.debug("Dropping unrecognised figure parameter %r", key)
            continue
        try:
            values[key] = validate_param(key, value, kind)
        except ValidationError as exc:
            details = exc.details or {}
            message = str(exc.__cause__) if exc.__cause__ is not None else str(exc)
            problems.append(ParameterProblem(key, details.get("expected_kind", kind), value, message))
    return ValidationResult(values=values, problems=tuple(problems))


__all__ = [
    "FIGURE_PAR_VALIDATOR_MAP",
    "KIND_VALIDATORS",
    "ParameterProblem",
    "TOOLBAR_NONE",
    "ValidationResult",
    "validate_param",
    "validate_params",
]
