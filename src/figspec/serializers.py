"""Figure document serialization.

Turns a :class:`~figspec.spec.figure.FigureDocument` into the plain,
JSON-serializable envelope the renderer consumes. Empty keyed
collections stay ``{}`` and empty sequences stay ``[]`` so that no key
disappears from the output.
"""

from __future__ import annotations

import json
import math
from collections.abc import Mapping
from datetime import date, datetime
from enum import Enum
from typing import Any, Dict

import numpy as np
import pandas as pd

from .spec.figure import Figure, FigureDocument, ModelRef
from .spec.ranges import CATEGORICAL, resolve_limits
from .utils.exceptions import SerializationError

DOCUMENT_VERSION = "1.0.0"

_SPEC_FIELDS = (
    "width",
    "height",
    "title",
    "xlab",
    "ylab",
    "xlim",
    "ylim",
    "padding_factor",
    "plot_width",
    "plot_height",
    "xgrid",
    "ygrid",
    "xaxes",
    "yaxes",
    "tools",
    "theme",
    "model",
    "ref",
    "time",
    "glyph_defer",
    "layers",
    "data_sigs",
    "glyph_x_ranges",
    "glyph_y_ranges",
    "x_axis_type",
    "y_axis_type",
    "has_x_axis",
    "has_y_axis",
    "has_x_range",
    "has_y_range",
)


def to_jsonable(value: Any, *, path: str = "$") -> Any:
    """Convert ``value`` to JSON-compatible builtins.

    Raises :class:`SerializationError` for values with no JSON form.
    """
    if value is None or isinstance(value, (str, bool)):
        return value
    if isinstance(value, Enum):
        return to_jsonable(value.value, path=path)
    if isinstance(value, (int, np.integer)):
        return int(value)
    if isinstance(value, (float, np.floating)):
        number = float(value)
        return number if math.isfinite(number) else None
    if isinstance(value, np.bool_):
        return bool(value)
    if isinstance(value, (datetime, date)):
        return value.isoformat()
    if isinstance(value, ModelRef):
        return value.as_dict()
    if isinstance(value, (np.ndarray, pd.Series)):
        return [to_jsonable(v, path=f"{path}[{i}]") for i, v in enumerate(np.asarray(value).tolist())]
    if isinstance(value, Mapping):
        return {str(k): to_jsonable(v, path=f"{path}.{k}") for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [to_jsonable(v, path=f"{path}[{i}]") for i, v in enumerate(value)]
    raise SerializationError(
        f"cannot serialize {type(value).__name__} at {path}",
        details={"path": path, "actual_type": type(value).__name__},
    )


def _range_node(limits: list[Any], axis_type: str | None) -> Dict[str, Any]:
    if axis_type == CATEGORICAL or all(isinstance(v, str) for v in limits):
        return {"type": "FactorRange", "factors": list(limits)}
    return {"type": "Range1d", "start": limits[0], "end": limits[1]}


def prerender_model(fig: Figure) -> Dict[str, Any]:
    """Return a copy of ``fig.model`` with axis ranges filled in.

    The figure itself is left untouched.
    """
    model = to_jsonable(fig.model, path="$.model")
    attributes = model["plot"]["attributes"]
    xlim, ylim = resolve_limits(fig)
    if xlim is not None and not attributes.get("x_range"):
        attributes["x_range"] = _range_node(xlim, fig.x_axis_type)
    if ylim is not None and not attributes.get("y_range"):
        attributes["y_range"] = _range_node(ylim, fig.y_axis_type)
    return model


def figure_to_dict(fig: Figure) -> Dict[str, Any]:
    """Serialize the figure state, including its prerendered model."""
    payload: Dict[str, Any] = {}
    for name in _SPEC_FIELDS:
        if name == "model":
            payload["model"] = prerender_model(fig)
        else:
            payload[name] = to_jsonable(getattr(fig, name), path=f"$.{name}")
    payload["param_problems"] = [
        {"key": p.key, "kind": p.kind, "value": repr(p.value), "message": p.message}
        for p in fig.param_problems
    ]
    return payload


def document_to_dict(doc: FigureDocument | Figure) -> Dict[str, Any]:
    """Serialize the export container handed to the renderer."""
    if isinstance(doc, Figure):
        doc = doc.document()
    return {
        "version": DOCUMENT_VERSION,
        "spec": figure_to_dict(doc.spec),
        "elementid": doc.elementid,
        "modeltype": doc.modeltype,
        "modelid": doc.modelid,
    }


def figure_to_json(fig: Figure, **json_kwargs: Any) -> str:
    """Return the exported document of ``fig`` as a JSON string."""
    return json.dumps(document_to_dict(fig), **json_kwargs)


__all__ = [
    "DOCUMENT_VERSION",
    "document_to_dict",
    "figure_to_dict",
    "figure_to_json",
    "prerender_model",
    "to_jsonable",
]
