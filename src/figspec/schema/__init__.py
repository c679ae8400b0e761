"""Schema validation helpers for exported figure documents."""

from .validation import SCHEMA_FILE, schema_json, validate_document  # noqa: F401

__all__ = ["SCHEMA_FILE", "schema_json", "validate_document"]
