"""Geometry primitives and query helpers over a layout.

Items occupy the half-open rectangle ``[x, x + w) x [y, y + h)``, so two
items that only share an edge do not collide.
"""

from __future__ import annotations

from grid_arbiter.exceptions import ItemNotFoundError
from grid_arbiter.layout.item import GridItem, Layout


def collides(l1: GridItem, l2: GridItem) -> bool:
    """Return True if the two items overlap with positive area."""
    if l1 is l2:
        return False
    if l1.x + l1.w <= l2.x:
        return False  # l1 is left of l2
    if l1.x >= l2.x + l2.w:
        return False  # l1 is right of l2
    if l1.y + l1.h <= l2.y:
        return False  # l1 is above l2
    if l1.y >= l2.y + l2.h:
        return False  # l1 is below l2
    return True


def get_first_collision(layout: Layout, item: GridItem) -> GridItem | None:
    """Return the first item in ``layout`` order that collides with ``item``.

    Callers pick the winner by pre-sorting ``layout``.
    """
    for other in layout:
        if collides(other, item):
            return other
    return None


def get_all_collisions(layout: Layout, item: GridItem) -> list[GridItem]:
    """Return every item colliding with ``item``, in ``layout`` order."""
    return [other for other in layout if collides(other, item)]


def get_statics(layout: Layout) -> list[GridItem]:
    return [item for item in layout if item.static]


def bottom(layout: Layout) -> int:
    """Return the bottom coordinate of the layout (0 when empty)."""
    return max((item.y + item.h for item in layout), default=0)


def sort_layout_items_by_row_col(layout: Layout) -> Layout:
    """Return a new list sorted top-to-bottom, then left-to-right."""
    return sorted(layout, key=lambda item: (item.y, item.x))


def index_of(layout: Layout, item: GridItem) -> int:
    """Position of ``item`` in ``layout`` by identity, or -1."""
    for idx, other in enumerate(layout):
        if other is item:
            return idx
    return -1


def clone_item(item: GridItem) -> GridItem:
    return item.model_copy(deep=True)


def clone_layout(layout: Layout) -> Layout:
    return [clone_item(item) for item in layout]


class LayoutIndex:
    """Id to slot map kept alongside a layout list for O(1) lookups.

    The index does not track external mutation of the list; rebuild it
    after inserting or removing items.
    """

    def __init__(self, layout: Layout):
        self._layout = layout
        self._slots: dict[str, int] = {item.i: idx for idx, item in enumerate(layout)}

    @property
    def ids(self) -> list[str]:
        return list(self._slots)

    def slot(self, item_id: str) -> int:
        if item_id not in self._slots:
            raise ItemNotFoundError(item_id, self.ids)
        return self._slots[item_id]

    def get(self, item_id: str) -> GridItem | None:
        idx = self._slots.get(item_id)
        return None if idx is None else self._layout[idx]

    def replace(self, item: GridItem) -> None:
        """Swap in ``item`` at the slot of the item with the same id."""
        self._layout[self.slot(item.i)] = item
