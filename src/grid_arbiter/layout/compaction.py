"""Compaction: remove vertical gaps with a row-major sweep.

Statics are seeded into the comparison set so other items flow around them.
Each settled item joins the set, so later items in the sweep only collide with
items processed before them.
"""

from __future__ import annotations

from grid_arbiter.layout.geometry import (
    get_first_collision,
    get_statics,
    index_of,
    sort_layout_items_by_row_col,
)
from grid_arbiter.layout.item import GridItem, Layout


def compact(layout: Layout, vertical_compact: bool) -> Layout:
    """Compact the layout, updating items in place.

    The returned list holds the same items in the same slots as ``layout``.
    """
    compare_with = get_statics(layout)
    out: list[GridItem | None] = [None] * len(layout)

    for item in sort_layout_items_by_row_col(layout):
        if not item.static:
            compact_item(compare_with, item, vertical_compact)
            compare_with.append(item)

        out[index_of(layout, item)] = item
        item.moved = False

    return out  # type: ignore[return-value]


def compact_item(compare_with: Layout, item: GridItem, vertical_compact: bool) -> GridItem:
    """Settle a single item against ``compare_with``."""
    if vertical_compact:
        # Pull up until the item hits something or the top edge
        while item.y > 0 and get_first_collision(compare_with, item) is None:
            item.y = max(item.y - 1, 0)

    # Push down past whatever it still overlaps
    collision = get_first_collision(compare_with, item)
    while collision is not None:
        item.y = collision.y + collision.h
        collision = get_first_collision(compare_with, item)
    return item
