"""Cascading move resolver.

Moving an item displaces every item it newly overlaps, which may in turn
displace others. Pending displacements are kept on an explicit stack of
frames and processed depth-first: a frame holds the item that was just placed
and the collisions computed at the moment it was placed. The ``moved`` flag
stops an item from being displaced twice in one pass, which bounds the
cascade.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from dataclasses import dataclass

from grid_arbiter.exceptions import CascadeLimitError
from grid_arbiter.layout.geometry import (
    bottom,
    get_all_collisions,
    get_first_collision,
    sort_layout_items_by_row_col,
)
from grid_arbiter.layout.item import GridItem, Layout

logger = logging.getLogger(__name__)

# Id given to the throwaway trial item used when trying to slot an item above
TRIAL_ID = "-1"


@dataclass
class _Frame:
    """An item that was just placed, with the collisions still to resolve."""

    item: GridItem
    pending: Iterator[GridItem]
    is_user_action: bool = False


def move_element(
    layout: Layout,
    item: GridItem,
    x: int | None = None,
    y: int | None = None,
    is_user_action: bool = False,
    prevent_collision: bool = False,
    max_steps: int | None = None,
) -> Layout:
    """Move ``item`` to ``(x, y)`` and push colliding items out of the way.

    ``x`` or ``y`` left as None keep the current coordinate. With
    ``prevent_collision`` a move that would overlap anything is rolled back
    and the layout is returned untouched.
    """
    if item.static:
        return layout

    old_x, old_y = item.x, item.y
    collisions = _place(layout, item, x, y)

    if prevent_collision and collisions:
        item.x, item.y = old_x, old_y
        item.moved = False
        logger.debug(
            "Rejected move of %s to (%s, %s): collides with %s",
            item.i, x, y, [c.i for c in collisions],
        )
        return layout

    if max_steps is None:
        max_steps = (len(layout) + 1) * (bottom(layout) + 2)

    stack = [_Frame(item, iter(collisions), is_user_action)]
    steps = 0
    while stack:
        frame = stack[-1]
        collision = next(frame.pending, None)
        if collision is None:
            stack.pop()
            continue

        moving = frame.item
        # Already displaced in this pass
        if collision.moved:
            continue

        # Wait a little before swapping when the item is only just dipping
        # into the bottom of the obstacle
        if moving.y > collision.y and moving.y - collision.y > collision.h / 4:
            logger.debug("Ignoring near miss between %s and %s", moving.i, collision.i)
            continue

        if collision.static:
            # Statics never move; the moving item has to get out of the way
            collides_with, item_to_move = collision, moving
        else:
            collides_with, item_to_move = moving, collision

        steps += 1
        if steps > max_steps:
            raise CascadeLimitError(item.i, max_steps)

        new_y = _away_from_collision_y(layout, collides_with, item_to_move, frame.is_user_action)
        logger.debug("Displacing %s from row %d to %d", item_to_move.i, item_to_move.y, new_y)
        child_collisions = _place(layout, item_to_move, None, new_y)
        stack.append(_Frame(item_to_move, iter(child_collisions)))

    return layout


def move_element_away_from_collision(
    layout: Layout,
    collides_with: GridItem,
    item_to_move: GridItem,
    is_user_action: bool = False,
) -> Layout:
    """Resolve one collision by moving ``item_to_move`` away from ``collides_with``.

    On a direct user action the item is slotted straight above the obstacle
    when there is room; otherwise, and in cascades, it moves down one row and
    further collisions are resolved by the resulting cascade.
    """
    new_y = _away_from_collision_y(layout, collides_with, item_to_move, is_user_action)
    return move_element(layout, item_to_move, None, new_y, False, False)


def _away_from_collision_y(
    layout: Layout,
    collides_with: GridItem,
    item_to_move: GridItem,
    is_user_action: bool,
) -> int:
    """Pick the row ``item_to_move`` should be displaced to."""
    if is_user_action:
        # Only tried on the main collision; in cascades it causes odd swaps
        trial = GridItem(
            i=TRIAL_ID,
            x=item_to_move.x,
            y=max(collides_with.y - item_to_move.h, 0),
            w=item_to_move.w,
            h=item_to_move.h,
        )
        if get_first_collision(layout, trial) is None:
            return trial.y

    # Jumping straight below the obstacle can leapfrog other items and
    # reverse their order, so only step one row
    return item_to_move.y + 1


def _place(layout: Layout, item: GridItem, x: int | None, y: int | None) -> list[GridItem]:
    """Apply a position to ``item`` and return what it now collides with.

    Collisions are ordered nearest-first along the direction of travel.
    """
    moving_up = y is not None and item.y > y
    if x is not None:
        item.x = x
    if y is not None:
        item.y = y
    item.moved = True

    ordered = sort_layout_items_by_row_col(layout)
    if moving_up:
        ordered.reverse()
    return get_all_collisions(ordered, item)


def resize_element(
    layout: Layout,
    item: GridItem,
    w: int,
    h: int,
    cols: int | None = None,
    prevent_collision: bool = False,
) -> Layout:
    """Resize ``item`` in place, honouring its min/max bounds.

    The host compacts afterwards to push overlapped items down. Statics are
    never resized.
    """
    if item.static:
        return layout

    w, h = clamp_size(item, w, h, cols)
    old_w, old_h = item.w, item.h
    item.w, item.h = w, h

    if prevent_collision:
        hits = get_all_collisions(layout, item)
        if hits:
            item.w, item.h = old_w, old_h
            logger.debug(
                "Rejected resize of %s to %dx%d: collides with %s",
                item.i, w, h, [c.i for c in hits],
            )
    return layout


def clamp_size(item: GridItem, w: int, h: int, cols: int | None = None) -> tuple[int, int]:
    """Clamp a requested size into the item's bounds and the grid."""
    if item.max_w is not None:
        w = min(w, item.max_w)
    if item.max_h is not None:
        h = min(h, item.max_h)
    if cols is not None:
        w = min(w, cols - item.x)
    if item.min_w is not None:
        w = max(w, item.min_w)
    if item.min_h is not None:
        h = max(h, item.min_h)
    return max(w, 1), max(h, 1)
