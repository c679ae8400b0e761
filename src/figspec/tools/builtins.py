"""Built-in tool attachment routines.

Each ``tool_*`` function adds one tool node to the figure document, points
it at the plot and lists its reference in the plot's ``tools`` attribute.
Attaching a tool that is already present replaces the earlier node.
"""

from __future__ import annotations

from typing import Any, Callable, Dict, Mapping, Sequence

from ..spec.figure import Figure
from ..utils.exceptions import ValidationError
from ..utils.ids import gen_id
from .registry import Tool

_DIMENSIONS = ("width", "height")

TOOL_MODEL_TYPES: Mapping[Tool, str] = {
    Tool.PAN: "PanTool",
    Tool.WHEEL_ZOOM: "WheelZoomTool",
    Tool.BOX_ZOOM: "BoxZoomTool",
    Tool.RESIZE: "ResizeTool",
    Tool.CROSSHAIR: "CrosshairTool",
    Tool.BOX_SELECT: "BoxSelectTool",
    Tool.LASSO_SELECT: "LassoSelectTool",
    Tool.RESET: "ResetTool",
    Tool.SAVE: "PreviewSaveTool",
}


def _check_dimensions(dimensions: Sequence[str]) -> list[str]:
    dims = [dimensions] if isinstance(dimensions, str) else list(dimensions)
    if not dims or any(d not in _DIMENSIONS for d in dims):
        raise ValidationError(
            "dimensions must be a non-empty subset of ('width', 'height')",
            details={"param": "dimensions", "value": dimensions},
        )
    return list(dict.fromkeys(dims))


def update_tool(fig: Figure, tool: Tool, attributes: Dict[str, Any] | None = None) -> Figure:
    """Add (or replace) the node for ``tool`` on ``fig``."""
    model_type = TOOL_MODEL_TYPES[tool]
    tool_refs = fig.attributes["tools"]
    for existing in [ref for ref in tool_refs if ref["type"] == model_type]:
        tool_refs.remove(existing)
        fig.remove_model(existing["id"])

    tool_id = gen_id({"figure": fig.id}, model_type)
    node = {
        "type": model_type,
        "id": tool_id,
        "attributes": {
            "id": tool_id,
            "plot": fig.ref.as_dict(),
            "tags": [],
            "doc": None,
            **(attributes or {}),
        },
    }
    tool_refs.append(fig.add_model(node).as_dict())
    return fig


def tool_pan(fig: Figure, dimensions: Sequence[str] = _DIMENSIONS) -> Figure:
    """Drag to pan along ``dimensions``."""
    return update_tool(fig, Tool.PAN, {"dimensions": _check_dimensions(dimensions)})


def tool_wheel_zoom(fig: Figure, dimensions: Sequence[str] = _DIMENSIONS) -> Figure:
    """Scroll to zoom along ``dimensions``."""
    return update_tool(fig, Tool.WHEEL_ZOOM, {"dimensions": _check_dimensions(dimensions)})


def tool_box_zoom(fig: Figure) -> Figure:
    return update_tool(fig, Tool.BOX_ZOOM)


def tool_resize(fig: Figure) -> Figure:
    return update_tool(fig, Tool.RESIZE)


def tool_crosshair(fig: Figure) -> Figure:
    return update_tool(fig, Tool.CROSSHAIR)


def tool_box_select(fig: Figure, select_every_mousemove: bool = True) -> Figure:
    """Select glyphs inside a dragged box.

    ``renderers`` stays empty until layers register selectable renderers.
    """
    return update_tool(
        fig,
        Tool.BOX_SELECT,
        {"select_every_mousemove": bool(select_every_mousemove), "renderers": []},
    )


def tool_lasso_select(fig: Figure, select_every_mousemove: bool = True) -> Figure:
    return update_tool(
        fig,
        Tool.LASSO_SELECT,
        {"select_every_mousemove": bool(select_every_mousemove), "renderers": []},
    )


def tool_reset(fig: Figure) -> Figure:
    return update_tool(fig, Tool.RESET)


def tool_save(fig: Figure) -> Figure:
    return update_tool(fig, Tool.SAVE)


BUILTIN_TOOL_ATTACHERS: Mapping[Tool, Callable[[Figure], Figure]] = {
    Tool.PAN: tool_pan,
    Tool.WHEEL_ZOOM: tool_wheel_zoom,
    Tool.BOX_ZOOM: tool_box_zoom,
    Tool.RESIZE: tool_resize,
    Tool.CROSSHAIR: tool_crosshair,
    Tool.BOX_SELECT: tool_box_select,
    Tool.LASSO_SELECT: tool_lasso_select,
    Tool.RESET: tool_reset,
    Tool.SAVE: tool_save,
}

__all__ = [
    "BUILTIN_TOOL_ATTACHERS",
    "TOOL_MODEL_TYPES",
    "tool_box_select",
    "tool_box_zoom",
    "tool_crosshair",
    "tool_lasso_select",
    "tool_pan",
    "tool_reset",
    "tool_resize",
    "tool_save",
    "tool_wheel_zoom",
    "update_tool",
]
