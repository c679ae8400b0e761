"""Shared pytest fixtures for figspec tests."""

from __future__ import annotations

import pytest

from figspec.api.config import reset_settings
from figspec.spec.builder import figure
from figspec.tools.registry import clear_tool_attachers, ensure_builtin_tools

_SETTINGS_ENV = ("FIGSPEC_THEME", "FIGSPEC_STRICT_PARAMS", "FIGSPEC_DEFAULT_TOOLS")


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch, tmp_path):
    """Run every test with default settings and no pyproject.toml in reach."""
    for name in _SETTINGS_ENV:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)
    reset_settings()
    yield
    reset_settings()


@pytest.fixture(autouse=True)
def builtin_tools():
    """Restore the built-in tool routines around every test."""
    clear_tool_attachers()
    ensure_builtin_tools()
    yield
    clear_tool_attachers()
    ensure_builtin_tools()


@pytest.fixture
def bare_figure():
    """A figure with no tools and no extra parameters."""
    return figure(tools="")
