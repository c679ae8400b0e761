"""
figspec.

Builds declarative figure specifications for a JavaScript plotting
renderer. ``figure()`` returns a :class:`Figure` whose ``model`` is the
scene-graph document; :func:`document_to_dict` exports it.
"""

import logging as _logging

# Provide a default no-op handler to avoid "No handler" warnings for library users.
_logging.getLogger(__name__).addHandler(_logging.NullHandler())

__version__ = "0.1.0"

from .api.config import (  # noqa: E402
    FigspecSettings,
    FigureOptionsBuilder,
    configure,
    get_settings,
    load_settings,
)
from .serializers import document_to_dict, figure_to_dict, figure_to_json  # noqa: E402
from .spec import (  # noqa: E402
    Figure,
    FigureDocument,
    ModelRef,
    ParameterProblem,
    figure,
    gmap,
    register_layer,
    resolve_limits,
)
from .tools import Tool, attach_tools  # noqa: E402
from .utils.exceptions import (  # noqa: E402
    ConfigurationError,
    FigspecError,
    SerializationError,
    ToolAttachError,
    ValidationError,
)

__all__ = [
    "ConfigurationError",
    "FigspecError",
    "FigspecSettings",
    "Figure",
    "FigureDocument",
    "FigureOptionsBuilder",
    "ModelRef",
    "ParameterProblem",
    "SerializationError",
    "Tool",
    "ToolAttachError",
    "ValidationError",
    "attach_tools",
    "configure",
    "document_to_dict",
    "figure",
    "figure_to_dict",
    "figure_to_json",
    "get_settings",
    "gmap",
    "load_settings",
    "register_layer",
    "resolve_limits",
]
