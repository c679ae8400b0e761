"""Shared utilities: identifiers and the exception hierarchy."""

from .exceptions import (  # noqa: F401
    ConfigurationError,
    FigspecError,
    SerializationError,
    ToolAttachError,
    ValidationError,
    explain_exception,
)
from .ids import digest, gen_element_id, gen_id, hash_part  # noqa: F401

__all__ = [
    "ConfigurationError",
    "FigspecError",
    "SerializationError",
    "ToolAttachError",
    "ValidationError",
    "digest",
    "explain_exception",
    "gen_element_id",
    "gen_id",
    "hash_part",
]
