"""Grid layout engine: collisions, compaction, bounds, moves and drops."""

from grid_arbiter.layout.arbiter import GridArbiter
from grid_arbiter.layout.bounds import correct_bounds
from grid_arbiter.layout.compaction import compact, compact_item
from grid_arbiter.layout.geometry import (
    collides,
    get_all_collisions,
    get_first_collision,
    get_statics,
)
from grid_arbiter.layout.item import DropPosition, GridItem, Layout, Placeholder, Pointer
from grid_arbiter.layout.mover import move_element, move_element_away_from_collision
from grid_arbiter.layout.placement import drop_element, get_mouse_placeholder, judge_drag_position

__all__ = [
    "DropPosition",
    "GridArbiter",
    "GridItem",
    "Layout",
    "Placeholder",
    "Pointer",
    "collides",
    "compact",
    "compact_item",
    "correct_bounds",
    "drop_element",
    "get_all_collisions",
    "get_first_collision",
    "get_mouse_placeholder",
    "get_statics",
    "judge_drag_position",
    "move_element",
    "move_element_away_from_collision",
]
