"""Tool dispatch and the built-in tool attachment routines."""

from .registry import (  # noqa: F401
    Tool,
    ToolAttacher,
    attach_tools,
    clear_tool_attachers,
    ensure_builtin_tools,
    find_tool_attacher,
    partition_tools,
    register_tool_attacher,
    supported_tools,
)
from .builtins import (  # noqa: F401
    tool_box_select,
    tool_box_zoom,
    tool_crosshair,
    tool_lasso_select,
    tool_pan,
    tool_reset,
    tool_resize,
    tool_save,
    tool_wheel_zoom,
    update_tool,
)

__all__ = [
    "Tool",
    "ToolAttacher",
    "attach_tools",
    "clear_tool_attachers",
    "ensure_builtin_tools",
    "find_tool_attacher",
    "partition_tools",
    "register_tool_attacher",
    "supported_tools",
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
