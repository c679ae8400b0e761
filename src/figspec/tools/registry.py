"""Tool attachment dispatch.

Supported tools form the :class:`Tool` enum. Each member maps to one
attachment routine (``Figure -> Figure``) in an in-process table.
:func:`attach_tools` filters a requested name list against the enum, warns
about names it cannot honour and folds the routines over the figure in the
requested order.
"""

from __future__ import annotations

import logging
import warnings
from enum import Enum
from typing import Callable, Dict, Iterable, Tuple

from ..logging import logging_context
from ..spec.figure import Figure
from ..utils.exceptions import ToolAttachError, ValidationError

_LOGGER = logging.getLogger(__name__)


class Tool(str, Enum):
    """Interactive tools a figure toolbar can carry."""

    PAN = "pan"
    WHEEL_ZOOM = "wheel_zoom"
    BOX_ZOOM = "box_zoom"
    RESIZE = "resize"
    CROSSHAIR = "crosshair"
    BOX_SELECT = "box_select"
    LASSO_SELECT = "lasso_select"
    RESET = "reset"
    SAVE = "save"


ToolAttacher = Callable[[Figure], Figure]

_TOOL_ATTACHERS: Dict[Tool, ToolAttacher] = {}


def supported_tools() -> Tuple[str, ...]:
    """Return the supported tool names in declaration order."""
    return tuple(tool.value for tool in Tool)


def _coerce_tool(tool: Tool | str) -> Tool:
    try:
        return Tool(tool)
    except ValueError:
        raise ValidationError(
            f"unsupported tool: {tool!r}",
            details={"param": "tool", "value": tool, "supported": list(supported_tools())},
        ) from None


def register_tool_attacher(tool: Tool | str, routine: ToolAttacher) -> None:
    """Register ``routine`` as the attachment routine for ``tool``."""
    if not callable(routine):
        raise ValidationError(
            "tool attachment routine must be callable",
            details={"param": "routine", "actual_type": type(routine).__name__},
        )
    _TOOL_ATTACHERS[_coerce_tool(tool)] = routine


def find_tool_attacher(tool: Tool | str) -> ToolAttacher | None:
    """Return the routine registered for ``tool``, if any."""
    return _TOOL_ATTACHERS.get(_coerce_tool(tool))


def clear_tool_attachers() -> None:
    """Remove every registered routine (testing helper)."""
    _TOOL_ATTACHERS.clear()


def ensure_builtin_tools() -> None:
    """Register the built-in routine for each tool that has none."""
    from .builtins import BUILTIN_TOOL_ATTACHERS

    for tool, routine in BUILTIN_TOOL_ATTACHERS.items():
        _TOOL_ATTACHERS.setdefault(tool, routine)


def partition_tools(names: str | Iterable[str]) -> Tuple[Tuple[Tool, ...], Tuple[str, ...]]:
    """Split requested names into supported tools and unsupported names.

    Order follows ``names``; repeated names are kept once. A single string is
    one name. Empty strings request a toolbar without tools and are ignored.
    """
    if isinstance(names, str):
        names = (names,)
    accepted: list[Tool] = []
    rejected: list[str] = []
    for name in names:
        if name == "":
            continue
        try:
            tool = Tool(name)
        except ValueError:
            if name not in rejected:
                rejected.append(name)
            continue
        if tool not in accepted:
            accepted.append(tool)
    return tuple(accepted), tuple(rejected)


def attach_tools(fig: Figure, names: str | Iterable[str], *, stacklevel: int = 2) -> Figure:
    """Attach the requested tools to ``fig`` in order and return the figure.

    ``stacklevel`` is passed to :func:`warnings.warn` for the note about
    unsupported names; wrappers add one per frame they put in between.
    """
    accepted, rejected = partition_tools(names)
    if rejected:
        warnings.warn(
            "Note: tools not used: %s" % ", ".join(str(name) for name in rejected),
            UserWarning,
            stacklevel=stacklevel,
        )
    ensure_builtin_tools()
    for tool in accepted:
        routine = _TOOL_ATTACHERS[tool]
        with logging_context(figure_id=fig.id, tool=tool.value):
            _LOGGER.debug("Attaching tool %s to figure %s", tool.value, fig.id)
            result = routine(fig)
        if not isinstance(result, Figure):
            raise ToolAttachError(
                f"tool routine for {tool.value!r} must return a Figure",
                details={"tool": tool.value, "actual_type": type(result).__name__},
            )
        fig = result
    return fig


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
]
