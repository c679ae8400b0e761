"""Structural validation of exported figure documents.

Checks a serialized document against the bundled JSON Schema
(``figure_document_v1.json``) with ``jsonschema``. Semantic checks such
as parameter kinds happen when the figure is built, not here.
"""

from __future__ import annotations

import json
from functools import lru_cache
from importlib import resources
from typing import Any, Mapping

import jsonschema

from ..utils.exceptions import ValidationError

SCHEMA_FILE = "figure_document_v1.json"


@lru_cache(maxsize=1)
def schema_json() -> dict[str, Any]:
    """Load the bundled figure document schema."""
    with resources.files("figspec.schemas").joinpath(SCHEMA_FILE).open("r", encoding="utf-8") as f:
        return json.load(f)


def validate_document(obj: Mapping[str, Any]) -> None:
    """Validate a serialized figure document.

    Raises
    ------
    ValidationError
        If the document does not conform to the schema. ``details`` carries
        the JSON path and the failing schema keyword.
    """
    try:
        jsonschema.validate(instance=obj, schema=schema_json())
    except jsonschema.ValidationError as exc:
        path = "$" + "".join(f"[{p!r}]" if isinstance(p, int) else f".{p}" for p in exc.absolute_path)
        raise ValidationError(
            f"figure document failed schema validation at {path}: {exc.message}",
            details={"path": path, "validator": exc.validator, "schema_file": SCHEMA_FILE},
        ) from exc


__all__ = ["SCHEMA_FILE", "schema_json", "validate_document"]
