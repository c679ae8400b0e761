"""Low-level helpers shared by the configuration layer."""

from .config_helpers import (  # noqa: F401
    coerce_bool,
    coerce_string_tuple,
    read_pyproject_section,
    split_csv,
)

__all__ = ["coerce_bool", "coerce_string_tuple", "read_pyproject_section", "split_csv"]
