"""Configuration parsing and coercion utilities.

Helpers for reading external configuration sources such as
``pyproject.toml`` and environment variables.
"""

from __future__ import annotations

import tomllib
from pathlib import Path
from typing import Any, Dict, Iterable, Sequence, Tuple


def read_pyproject_section(path: Sequence[str], *, root: Path | None = None) -> Dict[str, Any]:
    """Return a mapping from the requested ``pyproject.toml`` section.

    Parameters
    ----------
    path : Sequence[str]
        Nested keys to traverse in the pyproject.toml structure.
        For example, ``("tool", "figspec")`` navigates to ``[tool.figspec]``.
    root : Path, optional
        Directory holding ``pyproject.toml``. Defaults to the working directory.

    Returns
    -------
    Dict[str, Any]
        The requested section, or an empty dict if the file is missing,
        unreadable or lacks the section.
    """
    candidate = (root or Path.cwd()) / "pyproject.toml"
    if not candidate.exists():
        return {}
    try:
        with candidate.open("rb") as fh:
            data = tomllib.load(fh)
    except (OSError, tomllib.TOMLDecodeError):
        return {}

    cursor: Any = data
    for key in path:
        if isinstance(cursor, dict) and key in cursor:
            cursor = cursor[key]
        else:
            return {}
    if isinstance(cursor, dict):
        return dict(cursor)
    return {}


def split_csv(value: str | None) -> Tuple[str, ...]:
    """Split a comma-separated environment variable into a tuple of strings.

    Examples
    --------
    >>> split_csv("pan, save , reset")
    ('pan', 'save', 'reset')

    >>> split_csv(None)
    ()
    """
    if not value:
        return ()
    entries = [item.strip() for item in value.split(",") if item.strip()]
    return tuple(entries)


def coerce_string_tuple(value: Any) -> Tuple[str, ...]:
    """Coerce a configuration value into a tuple of strings.

    - ``None`` → empty tuple
    - ``str`` → tuple with single entry (if non-empty)
    - ``Iterable[str]`` → tuple of non-empty entries
    - Other types → empty tuple

    Examples
    --------
    >>> coerce_string_tuple("pan")
    ('pan',)

    >>> coerce_string_tuple(["pan", "", "save"])
    ('pan', 'save')
    """
    if value is None:
        return ()
    if isinstance(value, str):
        return (value,) if value else ()
    if isinstance(value, Iterable):
        result: list[str] = []
        for item in value:
            if isinstance(item, str) and item:
                result.append(item)
        return tuple(result)
    return ()


def coerce_bool(value: str | bool | None) -> bool:
    """Interpret environment-style truthy strings."""
    if isinstance(value, bool):
        return value
    if value is None:
        return False
    return str(value).strip().lower() in {"1", "true", "yes", "on", "enable"}


__all__ = ["coerce_bool", "coerce_string_tuple", "read_pyproject_section", "split_csv"]
