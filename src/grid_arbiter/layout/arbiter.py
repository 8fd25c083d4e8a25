"""High-level arbiter that drives the engine the way a grid front end does.

Every call works on a fresh copy of the current layout and then adopts the
result, so layouts handed out earlier are never changed behind the caller's
back.
"""

from __future__ import annotations

import logging

from grid_arbiter.config import GridArbiterSettings, get_settings
from grid_arbiter.exceptions import ItemNotFoundError
from grid_arbiter.layout.bounds import correct_bounds
from grid_arbiter.layout.compaction import compact
from grid_arbiter.layout.geometry import LayoutIndex, clone_layout, get_all_collisions
from grid_arbiter.layout.item import GridItem, Layout, Placeholder, Pointer
from grid_arbiter.layout.mover import move_element, resize_element
from grid_arbiter.layout.placement import drop_element, get_mouse_placeholder
from grid_arbiter.layout.validator import check_unique_ids

logger = logging.getLogger(__name__)


class GridArbiter:
    """Own a working layout and apply drags, resizes and drops to it.

    Usage:
        arbiter = GridArbiter(layout, cols=12)
        arbiter.drag("chart-1", x=0, y=0)
        placeholder = arbiter.placeholder("chart-1", Pointer(x=7.5, y=1.0))
        arbiter.drop("chart-1", placeholder)
        result = arbiter.layout
    """

    def __init__(
        self,
        layout: Layout,
        cols: int | None = None,
        vertical_compact: bool | None = None,
        prevent_collision: bool | None = None,
        settings: GridArbiterSettings | None = None,
    ):
        settings = settings or get_settings()
        check_unique_ids(layout)
        self._settings = settings
        self.cols = settings.require_cols(cols)
        self.vertical_compact = (
            settings.grid_arbiter_vertical_compact if vertical_compact is None else vertical_compact
        )
        self.prevent_collision = (
            settings.grid_arbiter_prevent_collision if prevent_collision is None else prevent_collision
        )
        self._layout = clone_layout(layout)
        self._index = LayoutIndex(self._layout)

    @property
    def layout(self) -> Layout:
        """A copy of the current layout."""
        return clone_layout(self._layout)

    def item(self, item_id: str) -> GridItem:
        item = self._index.get(item_id)
        if item is None:
            raise ItemNotFoundError(item_id, self._index.ids)
        return item

    def can_drag(self, item_id: str) -> bool:
        item = self.item(item_id)
        if item.static:
            return False
        if item.is_draggable is None:
            return self._settings.grid_arbiter_is_draggable
        return item.is_draggable

    def can_resize(self, item_id: str) -> bool:
        item = self.item(item_id)
        if item.static:
            return False
        if item.is_resizable is None:
            return self._settings.grid_arbiter_is_resizable
        return item.is_resizable

    def collisions(self) -> list[tuple[str, str]]:
        """All overlapping id pairs, each reported once."""
        pairs = []
        for idx, item in enumerate(self._layout):
            for other in get_all_collisions(self._layout[idx + 1:], item):
                pairs.append((item.i, other.i))
        return pairs

    def settle(self) -> Layout:
        """Correct bounds for the column count, then compact."""
        working = clone_layout(self._layout)
        correct_bounds(working, self.cols)
        return self._adopt(compact(working, self.vertical_compact))

    def compact(self) -> Layout:
        working = clone_layout(self._layout)
        return self._adopt(compact(working, self.vertical_compact))

    def set_cols(self, cols: int) -> Layout:
        """Change the column count and reflow into it."""
        self.cols = self._settings.require_cols(cols)
        return self.settle()

    def drag(self, item_id: str, x: int | None = None, y: int | None = None) -> Layout:
        """Move an item as a user drag, cascade collisions, then compact."""
        self.item(item_id)
        if not self.can_drag(item_id):
            logger.debug("Item %s is not draggable", item_id)
            return self.layout

        working = clone_layout(self._layout)
        target = LayoutIndex(working).get(item_id)
        move_element(working, target, x, y, True, self.prevent_collision)
        return self._adopt(compact(working, self.vertical_compact))

    def resize(self, item_id: str, w: int, h: int) -> Layout:
        """Resize an item within its bounds, then compact around it."""
        self.item(item_id)
        if not self.can_resize(item_id):
            logger.debug("Item %s is not resizable", item_id)
            return self.layout

        working = clone_layout(self._layout)
        target = LayoutIndex(working).get(item_id)
        resize_element(working, target, w, h, self.cols, self.prevent_collision)
        return self._adopt(compact(working, self.vertical_compact))

    def placeholder(self, item_id: str, pointer: Pointer) -> Placeholder | None:
        """Preview where ``item_id`` would land if dropped at ``pointer``."""
        return get_mouse_placeholder(self._layout, pointer, self.item(item_id))

    def drop(self, item_id: str, placeholder: Placeholder | None) -> Layout:
        """Commit a drop previewed by :meth:`placeholder`."""
        if placeholder is None:
            return self.layout
        if not self.can_drag(item_id):
            logger.debug("Item %s is not draggable", item_id)
            return self.layout
        return self._adopt(drop_element(self._layout, self.item(item_id), placeholder))

    def drop_at(self, item_id: str, pointer: Pointer) -> Layout:
        return self.drop(item_id, self.placeholder(item_id, pointer))

    def _adopt(self, layout: Layout) -> Layout:
        self._layout = layout
        self._index = LayoutIndex(self._layout)
        return self.layout
