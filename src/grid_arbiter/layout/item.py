"""Core data models for grid layouts.

A layout is a plain ``list[GridItem]``. Items are mutable pydantic models:
the compaction, bounds and move passes update them in place, while the drop
resolver works on clones.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator


class DropPosition(str, Enum):
    """Where a dragged item lands relative to the item under the pointer."""

    TOP = "top"
    BOTTOM = "bottom"
    LEFT = "left"
    RIGHT = "right"
    CENTER = "center"


EDGE_POSITIONS = frozenset({
    DropPosition.TOP,
    DropPosition.BOTTOM,
    DropPosition.LEFT,
    DropPosition.RIGHT,
})


class GridItem(BaseModel):
    """A single panel on the grid, in grid units."""

    model_config = ConfigDict(populate_by_name=True)

    i: str
    x: int = 0  # Column of the left edge
    y: int = 0  # Row of the top edge
    w: int = 1  # Width in columns
    h: int = 1  # Height in rows

    min_w: int | None = Field(default=None, alias="minW")
    min_h: int | None = Field(default=None, alias="minH")
    max_w: int | None = Field(default=None, alias="maxW")
    max_h: int | None = Field(default=None, alias="maxH")

    static: bool = False
    moved: bool = False  # Transient: set while a move pass is running

    # Unset means "use the layout-wide default"
    is_draggable: bool | None = Field(default=None, alias="isDraggable")
    is_resizable: bool | None = Field(default=None, alias="isResizable")

    @field_validator("i", mode="before")
    @classmethod
    def coerce_id(cls, v: object) -> object:
        """Numeric ids are accepted and stored as strings."""
        if isinstance(v, int) and not isinstance(v, bool):
            return str(v)
        return v

    @property
    def right(self) -> int:
        return self.x + self.w

    @property
    def bottom(self) -> int:
        return self.y + self.h

    def region(self) -> tuple[int, int, int, int]:
        return (self.x, self.y, self.w, self.h)


Layout = list[GridItem]


class Pointer(BaseModel):
    """Pointer position already converted to grid units."""

    x: float
    y: float


class Placeholder(BaseModel):
    """Candidate drop region computed while a drag is in progress."""

    i: str
    x: int
    y: int
    w: int
    h: int
    pos: DropPosition
    drop_item: GridItem

    def region(self) -> tuple[int, int, int, int]:
        return (self.x, self.y, self.w, self.h)
