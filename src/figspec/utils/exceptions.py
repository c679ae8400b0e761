"""Custom exception hierarchy for figspec.

All exceptions inherit from :class:`FigspecError` and carry an optional
structured ``details`` payload so callers can report which key, kind or
value triggered the failure without parsing the message.
"""

from __future__ import annotations

from typing import Any

__all__ = [
    "FigspecError",
    "ValidationError",
    "ConfigurationError",
    "SerializationError",
    "ToolAttachError",
    "explain_exception",
]


class FigspecError(Exception):
    """Base class for library-specific errors."""

    def __init__(self, message: str, *, details: dict[str, Any] | None = None) -> None:
        """Attach structured error details alongside the user-facing message."""
        super().__init__(message)
        self.details: dict[str, Any] | None = details

    def __repr__(self) -> str:
        """Return the exception representation with the message payload."""
        cls = self.__class__.__name__
        return f"{cls}({super().__str__()!r})"


class ValidationError(FigspecError):
    """A parameter value or layer data failed validation."""


class ConfigurationError(FigspecError):
    """Invalid settings, environment values or conflicting options."""


class SerializationError(FigspecError):
    """A figure document could not be serialized."""


class ToolAttachError(FigspecError):
    """A tool attachment routine is missing or returned something unusable."""


def explain_exception(e: Exception) -> str:
    """Return a human-readable multi-line description of an exception.

    Examples
    --------
    >>> from figspec.utils.exceptions import ValidationError, explain_exception
    >>> e = ValidationError("bad value", details={"key": "min_border", "kind": "int"})
    >>> print(explain_exception(e))
    ValidationError: bad value
      Details: {'key': 'min_border', 'kind': 'int'}
    """
    if isinstance(e, FigspecError):
        lines = [f"{e.__class__.__name__}: {str(e)}"]
        if e.details is not None:
            lines.append(f"  Details: {e.details}")
        return "\n".join(lines)
    return str(e)
