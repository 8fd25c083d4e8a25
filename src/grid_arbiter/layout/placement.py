"""Drag-drop placement resolver.

While a panel is dragged, the pointer position over another panel is
classified into a drop intent: ``center`` swaps the two panels, an edge
splits the target in half and gives the dragged panel the half nearer that
edge. Before a split, the panels flush against the dragged panel's old
border grow to fill the space it leaves behind.

Pointer coordinates inside the target are measured from its bottom-left
corner, so ``dy`` grows upward.
"""

from __future__ import annotations

import logging
from typing import Any

from grid_arbiter.layout.geometry import LayoutIndex, clone_layout
from grid_arbiter.layout.item import (
    EDGE_POSITIONS,
    DropPosition,
    GridItem,
    Layout,
    Placeholder,
    Pointer,
)

logger = logging.getLogger(__name__)


def get_mouse_placeholder(
    layout: Layout,
    pointer: Pointer,
    dragged: GridItem,
) -> Placeholder | None:
    """Classify the pointer against the first item that contains it.

    Items are checked in layout order, edges inclusive. When that item is the
    dragged item itself or a static item there is no placeholder.
    """
    for target in layout:
        if target.w <= 0 or target.h <= 0:
            continue  # no area to drop on
        if not (
            target.x <= pointer.x <= target.x + target.w
            and target.y <= pointer.y <= target.y + target.h
        ):
            continue
        if target.i == dragged.i or target.static:
            return None

        dx = pointer.x - target.x
        dy = target.h - (pointer.y - target.y)
        pos = judge_drag_position(target.w, target.h, dx, dy, dragged, target)
        pos = handle_boundary_conditions(pos, target.w, target.h)
        return get_placeholder_position(pos, target)
    return None


def border_fit(l1: GridItem, l2: GridItem) -> bool:
    """True if ``l1`` sits on one of ``l2``'s borders with equal length."""
    if l1 is l2:
        return False
    if l1.y == l2.y + l2.h and l1.w == l2.w and l1.x == l2.x:
        return True  # below l2
    if l1.y + l1.h == l2.y and l1.w == l2.w and l1.x == l2.x:
        return True  # above l2
    if l1.x == l2.x + l2.w and l1.h == l2.h and l1.y == l2.y:
        return True  # right of l2
    if l1.x + l1.w == l2.x and l1.h == l2.h and l1.y == l2.y:
        return True  # left of l2
    return False


def judge_drag_position(
    w: float,
    h: float,
    x: float,
    y: float,
    dragged: GridItem,
    target: GridItem,
) -> DropPosition:
    """Classify a point ``(x, y)`` inside a ``w`` x ``h`` target.

    Same-size or border-fit pairs get a 3x3 partition where the middle cell
    is ``center``. Otherwise only the two diagonals are used and ``center``
    is never returned.
    """
    slope = h / w
    rising = slope * x  # y = (h/w) x
    falling = h - slope * x  # y = h - (h/w) x

    if (w == dragged.w and h == dragged.h) or border_fit(dragged, target):
        if x < w / 3:
            if y <= rising:
                return DropPosition.BOTTOM
            if y >= falling:
                return DropPosition.TOP
            return DropPosition.LEFT
        if x <= w * 2 / 3:
            if y <= h / 3:
                return DropPosition.BOTTOM
            if y >= h * 2 / 3:
                return DropPosition.TOP
            return DropPosition.CENTER
        if y >= rising:
            return DropPosition.TOP
        if y <= falling:
            return DropPosition.BOTTOM
        return DropPosition.RIGHT

    if y <= rising:
        return DropPosition.RIGHT if y >= falling else DropPosition.BOTTOM
    return DropPosition.TOP if y >= falling else DropPosition.LEFT


def handle_boundary_conditions(pos: DropPosition, w: int, h: int) -> DropPosition | None:
    """Veto placements the target is too small to honour.

    A one-row target cannot be split top/bottom, a one-column target cannot
    be split left/right, and a 1x1 target only accepts a swap.
    """
    if w > 1 and h > 1:
        return pos
    if w > 1:
        return None if pos in (DropPosition.TOP, DropPosition.BOTTOM) else pos
    if h > 1:
        return None if pos in (DropPosition.LEFT, DropPosition.RIGHT) else pos
    return pos if pos is DropPosition.CENTER else None


def split_sizes(length: int) -> tuple[int, int]:
    """Split ``length`` into (dragged share, target share)."""
    dragged = length // 2
    return dragged, length - dragged


def get_placeholder_position(pos: DropPosition | None, drop_item: GridItem) -> Placeholder | None:
    """Region the dragged item would occupy for ``pos`` on ``drop_item``."""
    if pos is None:
        return None

    x, y, w, h = drop_item.region()
    if pos is DropPosition.TOP:
        h = split_sizes(drop_item.h)[0]
    elif pos is DropPosition.BOTTOM:
        h, kept = split_sizes(drop_item.h)
        y = drop_item.y + kept
    elif pos is DropPosition.LEFT:
        w = split_sizes(drop_item.w)[0]
    elif pos is DropPosition.RIGHT:
        w, kept = split_sizes(drop_item.w)
        x = drop_item.x + kept

    return Placeholder(i=drop_item.i, x=x, y=y, w=w, h=h, pos=pos, drop_item=drop_item)


def drop_element(layout: Layout, dragged: GridItem, placeholder: Placeholder | None) -> Layout:
    """Apply a drop and return a new layout; ``layout`` is left untouched.

    Drops involving a static item leave the copy unchanged.
    """
    copy = clone_layout(layout)
    if placeholder is None:
        return copy
    if dragged.static or placeholder.drop_item.static:
        logger.debug("Ignoring drop of %s on %s: static item", dragged.i, placeholder.drop_item.i)
        return copy

    if placeholder.pos is DropPosition.CENTER:
        exchange_layout(copy, dragged, placeholder.drop_item)
    else:
        fill_gap(copy, get_align_items(layout, dragged))
        split_drop_item(copy, dragged, placeholder.drop_item, placeholder.pos)

    logger.info(
        "Dropped %s on %s (%s)", dragged.i, placeholder.drop_item.i, placeholder.pos.value
    )
    return copy


def exchange_layout(layout: Layout, l1: GridItem, l2: GridItem) -> Layout:
    """Swap dragged ``l1`` and target ``l2``, keeping the trailing edge flush."""
    index = LayoutIndex(layout)
    moving = layout[index.slot(l1.i)]
    target = layout[index.slot(l2.i)]
    if l2.x > l1.x:
        index.replace(moving.model_copy(update={"x": l2.x + (l2.w - l1.w), "y": l2.y}))
        index.replace(target.model_copy(update={"x": l1.x, "y": l1.y}))
    else:
        index.replace(moving.model_copy(update={"x": l2.x, "y": l2.y}))
        index.replace(target.model_copy(update={"x": l1.x + (l1.w - l2.w), "y": l1.y}))
    return layout


def split_drop_item(layout: Layout, l1: GridItem, l2: GridItem, pos: DropPosition) -> Layout:
    """Give dragged ``l1`` the half of target ``l2`` nearer ``pos``.

    The split is taken from ``l2``'s rectangle as it was before any gap fill.
    """
    if pos not in EDGE_POSITIONS:
        return layout

    index = LayoutIndex(layout)
    moving = layout[index.slot(l1.i)]
    x, y, w, h = l2.region()
    half_w, rest_w = split_sizes(w)
    half_h, rest_h = split_sizes(h)

    if pos is DropPosition.TOP:
        dragged = {"x": x, "y": y, "w": w, "h": half_h}
        target = {"y": y + half_h, "h": rest_h}
    elif pos is DropPosition.BOTTOM:
        dragged = {"x": x, "y": y + rest_h, "w": w, "h": half_h}
        target = {"h": rest_h}
    elif pos is DropPosition.LEFT:
        dragged = {"x": x, "y": y, "w": half_w, "h": h}
        target = {"x": x + half_w, "w": rest_w}
    else:
        dragged = {"x": x + rest_w, "y": y, "w": half_w, "h": h}
        target = {"w": rest_w}

    index.replace(moving.model_copy(update=dragged))
    index.replace(l2.model_copy(update=target))
    return layout


def get_align_items(layout: Layout, dragged: GridItem) -> list[dict[str, Any]]:
    """Find the items flush against one full border of ``dragged``.

    Borders are tried bottom, top, left, right; the first border whose
    neighbours exactly cover it wins. Returns one delta record per neighbour
    (``i`` plus any of ``x``, ``y``, ``w``, ``h``) that grows it over the
    vacated rectangle. Static neighbours never grow, so a border they touch
    is not covered.
    """
    l = dragged
    movable = [it for it in layout if not it.static]

    below = _covering(
        [it for it in movable if it.y == l.y + l.h and it.x >= l.x and it.x + it.w <= l.x + l.w],
        axis="x", start=l.x, end=l.x + l.w,
    )
    if below:
        return [{"i": it.i, "y": -l.h, "h": l.h} for it in below]

    above = _covering(
        [it for it in movable if l.y == it.y + it.h and it.x >= l.x and it.x + it.w <= l.x + l.w],
        axis="x", start=l.x, end=l.x + l.w,
    )
    if above:
        return [{"i": it.i, "h": l.h} for it in above]

    left = _covering(
        [it for it in movable if l.x == it.x + it.w and it.y >= l.y and it.y + it.h <= l.y + l.h],
        axis="y", start=l.y, end=l.y + l.h,
    )
    if left:
        return [{"i": it.i, "w": l.w} for it in left]

    right = _covering(
        [it for it in movable if it.x == l.x + l.w and it.y >= l.y and it.y + it.h <= l.y + l.h],
        axis="y", start=l.y, end=l.y + l.h,
    )
    if right:
        return [{"i": it.i, "x": -l.w, "w": l.w} for it in right]

    return []


def _covering(items: list[GridItem], axis: str, start: int, end: int) -> list[GridItem]:
    """Return ``items`` sorted along ``axis`` if their span is exactly [start, end)."""
    if not items:
        return []
    size = "w" if axis == "x" else "h"
    items = sorted(items, key=lambda it: getattr(it, axis))
    first, last = items[0], items[-1]
    if getattr(first, axis) == start and getattr(last, axis) + getattr(last, size) == end:
        return items
    return []


def fill_gap(layout: Layout, change_list: list[dict[str, Any]]) -> Layout:
    """Apply the deltas produced by :func:`get_align_items`."""
    index = LayoutIndex(layout)
    for change in change_list:
        item = layout[index.slot(change["i"])]
        index.replace(item.model_copy(update={
            "x": item.x + change.get("x", 0),
            "y": item.y + change.get("y", 0),
            "w": item.w + change.get("w", 0),
            "h": item.h + change.get("h", 0),
        }))
    return layout
