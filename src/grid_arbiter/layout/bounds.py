"""Bounds correction: keep every item inside a fixed column count."""

from __future__ import annotations

import logging

from grid_arbiter.layout.geometry import get_first_collision, get_statics
from grid_arbiter.layout.item import Layout

logger = logging.getLogger(__name__)


def correct_bounds(layout: Layout, cols: int) -> Layout:
    """Clamp items into ``cols`` columns, in place.

    An item hanging off the right edge is shifted left. An item starting left
    of column 0 is reset to column 0 and stretched to the full grid width.
    Static items that end up overlapping anything already placed are nudged
    down one row at a time.
    """
    collides_with = get_statics(layout)
    for item in layout:
        if item.x + item.w > cols:
            item.x = cols - item.w
        if item.x < 0:
            item.x = 0
            item.w = cols

        if not item.static:
            collides_with.append(item)
            continue

        start_y = item.y
        while get_first_collision(collides_with, item) is not None:
            item.y += 1
        if item.y != start_y:
            logger.warning(
                "Static item %s overlapped another item; moved from row %d to %d",
                item.i, start_y, item.y,
            )
    return layout
