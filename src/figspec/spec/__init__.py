"""Figure specification: state, skeleton, parameter validation and construction."""

from .skeleton import FIGURE_SUBTYPE, GMAP_TYPE, build_skeleton  # noqa: F401
from .validation import (  # noqa: F401
    FIGURE_PAR_VALIDATOR_MAP,
    TOOLBAR_NONE,
    ParameterProblem,
    ValidationResult,
    validate_param,
    validate_params,
)
from .figure import Figure, FigureDocument, ModelRef  # noqa: F401
from .ranges import axis_range, check_limits, register_layer, resolve_limits  # noqa: F401
from .builder import figure, gmap  # noqa: F401

__all__ = [
    "FIGURE_PAR_VALIDATOR_MAP",
    "FIGURE_SUBTYPE",
    "GMAP_TYPE",
    "TOOLBAR_NONE",
    "Figure",
    "FigureDocument",
    "ModelRef",
    "ParameterProblem",
    "ValidationResult",
    "axis_range",
    "build_skeleton",
    "check_limits",
    "figure",
    "gmap",
    "register_layer",
    "resolve_limits",
    "validate_param",
    "validate_params",
]
