"""Shared test fixtures for grid-arbiter tests."""

from __future__ import annotations

from pathlib import Path

import pytest

from grid_arbiter.config import reset_settings
from grid_arbiter.layout.item import GridItem


@pytest.fixture(autouse=True)
def _reset_settings(monkeypatch: pytest.MonkeyPatch):
    """Reset settings singleton and grid env vars between tests."""
    for name in (
        "GRID_ARBITER_COLS",
        "GRID_ARBITER_VERTICAL_COMPACT",
        "GRID_ARBITER_PREVENT_COLLISION",
        "GRID_ARBITER_IS_DRAGGABLE",
        "GRID_ARBITER_IS_RESIZABLE",
        "GRID_ARBITER_LOG_LEVEL",
    ):
        monkeypatch.delenv(name, raising=False)
    reset_settings()
    yield
    reset_settings()


@pytest.fixture
def stacked_layout() -> list[GridItem]:
    """Two items in one column with a gap between them."""
    return [
        GridItem(i="a", x=0, y=0, w=2, h=2),
        GridItem(i="b", x=0, y=5, w=2, h=2),
    ]


@pytest.fixture
def dashboard_layout() -> list[GridItem]:
    """A small dashboard: two KPIs over a wide chart, with a pinned header."""
    return [
        GridItem(i="header", x=0, y=0, w=12, h=1, static=True),
        GridItem(i="kpi1", x=0, y=1, w=6, h=2),
        GridItem(i="kpi2", x=6, y=1, w=6, h=2),
        GridItem(i="chart", x=0, y=3, w=12, h=4),
    ]


@pytest.fixture
def layout_yaml(tmp_path: Path) -> Path:
    """Write a layout YAML file for CLI tests."""
    content = """layout:
  - i: a
    x: 0
    y: 0
    w: 2
    h: 2
  - i: b
    x: 0
    y: 5
    w: 2
    h: 2
  - i: t
    x: 4
    y: 0
    w: 4
    h: 4
"""
    path = tmp_path / "layout.yml"
    path.write_text(content)
    return path
