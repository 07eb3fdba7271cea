"""Shared test fixtures."""

from __future__ import annotations

import pytest

from cssglue.ui.console import Console, set_console


@pytest.fixture(autouse=True)
def quiet_console():
    """Fresh global console per test (the CLI replaces it)."""
    console = Console()
    set_console(console)
    return console


@pytest.fixture()
def temp_dir(tmp_path) -> str:
    return str(tmp_path / "glue-tmp")
