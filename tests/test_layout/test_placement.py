"""Tests for grid_arbiter.layout.placement: drop classification, swap and split."""

from __future__ import annotations

import pytest

from grid_arbiter.exceptions import ItemNotFoundError
from grid_arbiter.layout.item import DropPosition, GridItem, Placeholder, Pointer
from grid_arbiter.layout.placement import (
    border_fit,
    drop_element,
    exchange_layout,
    fill_gap,
    get_align_items,
    get_mouse_placeholder,
    get_placeholder_position,
    handle_boundary_conditions,
    judge_drag_position,
    split_sizes,
)


def _item(i: str, x: int, y: int, w: int = 2, h: int = 2, **kwargs) -> GridItem:
    return GridItem(i=i, x=x, y=y, w=w, h=h, **kwargs)


def _regions(layout):
    return {it.i: it.region() for it in layout}


def _placeholder(pos: DropPosition, target: GridItem) -> Placeholder:
    placeholder = get_placeholder_position(pos, target)
    assert placeholder is not None
    return placeholder


class TestBorderFit:
    def test_above(self):
        assert border_fit(_item("a", 0, 0), _item("b", 0, 2)) is True

    def test_below(self):
        assert border_fit(_item("a", 0, 4), _item("b", 0, 2)) is True

    def test_left_and_right(self):
        assert border_fit(_item("a", 0, 0), _item("b", 2, 0)) is True
        assert border_fit(_item("a", 4, 0), _item("b", 2, 0)) is True

    def test_unequal_border(self):
        assert border_fit(_item("a", 0, 0, w=2), _item("b", 0, 2, w=4)) is False

    def test_not_adjacent(self):
        assert border_fit(_item("a", 0, 0), _item("b", 5, 5)) is False

    def test_same_object(self):
        a = _item("a", 0, 0)
        assert border_fit(a, a) is False


class TestJudgeSymmetric:
    """Same-size target: thirds plus diagonals, center in the middle."""

    dragged = GridItem(i="d", x=20, y=20, w=3, h=3)
    target = GridItem(i="t", x=0, y=0, w=3, h=3)

    @pytest.mark.parametrize(
        ("x", "y", "expected"),
        [
            (1.5, 1.5, DropPosition.CENTER),
            (0.2, 1.5, DropPosition.LEFT),
            (2.8, 1.5, DropPosition.RIGHT),
            (1.5, 0.2, DropPosition.BOTTOM),
            (1.5, 2.9, DropPosition.TOP),
            (0.5, 0.1, DropPosition.BOTTOM),
            (0.5, 2.9, DropPosition.TOP),
            (2.9, 2.95, DropPosition.TOP),
            (2.9, 0.05, DropPosition.BOTTOM),
        ],
    )
    def test_regions(self, x, y, expected):
        assert judge_drag_position(3, 3, x, y, self.dragged, self.target) is expected

    def test_border_fit_enables_center(self):
        dragged = _item("d", 0, 0, 2, 2)
        target = _item("t", 0, 2, 2, 4)
        assert judge_drag_position(2, 4, 1, 2, dragged, target) is DropPosition.CENTER


class TestJudgeAsymmetric:
    dragged = GridItem(i="d", x=20, y=20, w=2, h=2)
    target = GridItem(i="t", x=0, y=0, w=4, h=4)

    @pytest.mark.parametrize(
        ("x", "y", "expected"),
        [
            (3.5, 2, DropPosition.RIGHT),
            (0.5, 2, DropPosition.LEFT),
            (2, 3.8, DropPosition.TOP),
            (2, 0.2, DropPosition.BOTTOM),
        ],
    )
    def test_diagonal_regions(self, x, y, expected):
        assert judge_drag_position(4, 4, x, y, self.dragged, self.target) is expected

    def test_never_center(self):
        for step_x in range(1, 40):
            for step_y in range(1, 40):
                pos = judge_drag_position(4, 4, step_x / 10, step_y / 10, self.dragged, self.target)
                assert pos is not DropPosition.CENTER


class TestClassificationTotality:
    @pytest.mark.parametrize(("w", "h"), [(1, 1), (1, 3), (3, 1), (2, 2), (4, 4), (6, 3), (5, 7)])
    def test_every_inner_point_classifies(self, w, h):
        target = _item("t", 0, 0, w, h)
        for dragged in (_item("same", 30, 30, w, h), _item("other", 30, 30, 9, 9)):
            for sx in range(1, 10):
                for sy in range(1, 10):
                    pos = judge_drag_position(w, h, w * sx / 10, h * sy / 10, dragged, target)
                    assert isinstance(pos, DropPosition)


class TestBoundaryConditions:
    def test_large_target_accepts_all(self):
        for pos in DropPosition:
            assert handle_boundary_conditions(pos, 2, 2) is pos

    def test_one_row_rejects_top_bottom(self):
        assert handle_boundary_conditions(DropPosition.TOP, 4, 1) is None
        assert handle_boundary_conditions(DropPosition.BOTTOM, 4, 1) is None
        assert handle_boundary_conditions(DropPosition.LEFT, 4, 1) is DropPosition.LEFT
        assert handle_boundary_conditions(DropPosition.CENTER, 4, 1) is DropPosition.CENTER

    def test_one_column_rejects_left_right(self):
        assert handle_boundary_conditions(DropPosition.LEFT, 1, 4) is None
        assert handle_boundary_conditions(DropPosition.RIGHT, 1, 4) is None
        assert handle_boundary_conditions(DropPosition.TOP, 1, 4) is DropPosition.TOP

    def test_single_cell_only_center(self):
        assert handle_boundary_conditions(DropPosition.CENTER, 1, 1) is DropPosition.CENTER
        for pos in (DropPosition.TOP, DropPosition.BOTTOM, DropPosition.LEFT, DropPosition.RIGHT):
            assert handle_boundary_conditions(pos, 1, 1) is None


class TestMousePlaceholder:
    def test_pointer_outside_every_item(self):
        a = _item("a", 0, 0)
        assert get_mouse_placeholder([a, _item("b", 4, 0)], Pointer(x=10, y=10), a) is None

    def test_pointer_over_dragged_item(self):
        a = _item("a", 0, 0)
        assert get_mouse_placeholder([a, _item("b", 4, 0)], Pointer(x=1, y=1), a) is None

    def test_right_half_of_larger_target(self):
        a = _item("a", 0, 0)
        b = _item("b", 4, 0, 4, 4)
        placeholder = get_mouse_placeholder([a, b], Pointer(x=7.5, y=2), a)
        assert placeholder is not None
        assert placeholder.pos is DropPosition.RIGHT
        assert placeholder.region() == (6, 0, 2, 4)
        assert placeholder.drop_item is b
        assert placeholder.i == "b"

    def test_top_of_larger_target(self):
        a = _item("a", 0, 0)
        b = _item("b", 4, 0, 4, 4)
        placeholder = get_mouse_placeholder([a, b], Pointer(x=6, y=0.2), a)
        assert placeholder.pos is DropPosition.TOP
        assert placeholder.region() == (4, 0, 4, 2)

    def test_center_of_same_size_target(self):
        a = _item("a", 0, 0)
        b = _item("b", 4, 0)
        placeholder = get_mouse_placeholder([a, b], Pointer(x=5, y=1), a)
        assert placeholder.pos is DropPosition.CENTER
        assert placeholder.region() == (4, 0, 2, 2)

    def test_one_row_target_never_splits_vertically(self):
        a = _item("a", 0, 0)
        strip = _item("strip", 4, 0, 4, 1)
        for sx in range(1, 40):
            for sy in range(1, 10):
                placeholder = get_mouse_placeholder([a, strip], Pointer(x=4 + sx / 10, y=sy / 10), a)
                if placeholder is not None:
                    assert placeholder.pos not in (DropPosition.TOP, DropPosition.BOTTOM)

    def test_vetoed_classification_gives_none(self):
        a = _item("a", 0, 0)
        strip = _item("strip", 4, 0, 4, 1)
        assert get_mouse_placeholder([a, strip], Pointer(x=6, y=0.9), a) is None

    def test_first_match_in_layout_order(self):
        a = _item("a", 0, 0)
        under = _item("under", 4, 0, 4, 4)
        over = _item("over", 4, 0, 2, 2)
        placeholder = get_mouse_placeholder([a, under, over], Pointer(x=5, y=1), a)
        assert placeholder.i == "under"
        placeholder = get_mouse_placeholder([a, over, under], Pointer(x=5, y=1), a)
        assert placeholder.i == "over"

    def test_static_target_gives_none(self):
        a = _item("a", 0, 0)
        pinned = _item("pinned", 4, 0, 4, 4, static=True)
        assert get_mouse_placeholder([a, pinned], Pointer(x=7.5, y=2), a) is None


class TestPlaceholderPosition:
    def test_none_passthrough(self):
        assert get_placeholder_position(None, _item("t", 0, 0)) is None

    def test_odd_height_bottom(self):
        placeholder = get_placeholder_position(DropPosition.BOTTOM, _item("t", 0, 0, 4, 5))
        assert placeholder.region() == (0, 3, 4, 2)

    def test_odd_width_left(self):
        placeholder = get_placeholder_position(DropPosition.LEFT, _item("t", 2, 0, 3, 4))
        assert placeholder.region() == (2, 0, 1, 4)

    def test_split_sizes(self):
        assert split_sizes(4) == (2, 2)
        assert split_sizes(5) == (2, 3)
        assert split_sizes(1) == (0, 1)


class TestDropCenter:
    def test_same_size_swap(self):
        a = _item("a", 0, 0)
        b = _item("b", 2, 0)
        layout = [a, b]
        result = drop_element(layout, a, _placeholder(DropPosition.CENTER, b))
        assert _regions(result) == {"a": (2, 0, 2, 2), "b": (0, 0, 2, 2)}

    def test_input_untouched(self):
        a = _item("a", 0, 0)
        b = _item("b", 2, 3)
        layout = [a, b]
        drop_element(layout, a, _placeholder(DropPosition.CENTER, b))
        assert _regions(layout) == {"a": (0, 0, 2, 2), "b": (2, 3, 2, 2)}

    def test_wider_target_on_the_right_keeps_edges_flush(self):
        a = _item("a", 0, 0, 2, 2)
        b = _item("b", 2, 0, 4, 2)
        result = exchange_layout([a, b], a, b)
        assert _regions(result) == {"a": (4, 0, 2, 2), "b": (0, 0, 4, 2)}

    def test_narrower_target_on_the_left(self):
        a = _item("a", 2, 0, 4, 2)
        b = _item("b", 0, 0, 2, 2)
        result = exchange_layout([a, b], a, b)
        assert _regions(result) == {"a": (0, 0, 4, 2), "b": (4, 0, 2, 2)}

    def test_vertical_swap(self):
        a = _item("a", 0, 0)
        b = _item("b", 0, 2)
        result = drop_element([a, b], a, _placeholder(DropPosition.CENTER, b))
        assert _regions(result) == {"a": (0, 2, 2, 2), "b": (0, 0, 2, 2)}


class TestDropSplit:
    @pytest.mark.parametrize(
        ("pos", "expected_a", "expected_b"),
        [
            (DropPosition.RIGHT, (6, 0, 2, 4), (4, 0, 2, 4)),
            (DropPosition.LEFT, (4, 0, 2, 4), (6, 0, 2, 4)),
            (DropPosition.TOP, (4, 0, 4, 2), (4, 2, 4, 2)),
            (DropPosition.BOTTOM, (4, 2, 4, 2), (4, 0, 4, 2)),
        ],
    )
    def test_split_each_edge(self, pos, expected_a, expected_b):
        a = _item("a", 0, 0, 2, 2)
        b = _item("b", 4, 0, 4, 4)
        result = drop_element([a, b], a, _placeholder(pos, b))
        assert _regions(result) == {"a": expected_a, "b": expected_b}

    def test_odd_width_split_tiles_target(self):
        a = _item("a", 0, 0, 2, 2)
        b = _item("b", 4, 0, 3, 4)
        result = drop_element([a, b], a, _placeholder(DropPosition.RIGHT, b))
        assert _regions(result) == {"a": (6, 0, 1, 4), "b": (4, 0, 2, 4)}

    def test_neighbour_below_fills_gap(self):
        a = _item("a", 0, 0, 2, 2)
        c = _item("c", 0, 2, 2, 3)
        b = _item("b", 4, 0, 4, 4)
        result = drop_element([a, c, b], a, _placeholder(DropPosition.RIGHT, b))
        assert _regions(result)["c"] == (0, 0, 2, 5)

    def test_ids_and_count_preserved(self):
        a = _item("a", 0, 0, 2, 2)
        c = _item("c", 0, 2, 2, 3)
        b = _item("b", 4, 0, 4, 4)
        result = drop_element([a, c, b], a, _placeholder(DropPosition.TOP, b))
        assert [it.i for it in result] == ["a", "c", "b"]

    def test_static_neighbour_keeps_its_size(self):
        a = _item("a", 0, 0, 2, 2)
        pinned = _item("pinned", 0, 2, 2, 2, static=True)
        b = _item("b", 4, 0, 4, 4)
        result = drop_element([a, pinned, b], a, _placeholder(DropPosition.RIGHT, b))
        assert _regions(result) == {"a": (6, 0, 2, 4), "pinned": (0, 2, 2, 2), "b": (4, 0, 2, 4)}

    def test_static_target_is_not_split(self):
        a = _item("a", 0, 0, 2, 2)
        pinned = _item("pinned", 4, 0, 4, 4, static=True)
        layout = [a, pinned]
        result = drop_element(layout, a, _placeholder(DropPosition.RIGHT, pinned))
        assert _regions(result) == _regions(layout)

    def test_static_dragged_item_stays(self):
        pinned = _item("pinned", 0, 0, 2, 2, static=True)
        b = _item("b", 4, 0, 4, 4)
        layout = [pinned, b]
        result = drop_element(layout, pinned, _placeholder(DropPosition.LEFT, b))
        assert _regions(result) == _regions(layout)

    def test_target_from_another_layout(self):
        a = _item("a", 0, 0)
        elsewhere = _item("elsewhere", 4, 0, 4, 4)
        with pytest.raises(ItemNotFoundError, match="elsewhere"):
            drop_element([a, _item("b", 4, 0, 4, 4)], a, _placeholder(DropPosition.RIGHT, elsewhere))
        with pytest.raises(ItemNotFoundError):
            drop_element([a, _item("b", 4, 0, 4, 4)], a, _placeholder(DropPosition.CENTER, elsewhere))

    def test_none_placeholder_returns_copy(self):
        a = _item("a", 0, 0)
        layout = [a, _item("b", 4, 0)]
        result = drop_element(layout, a, None)
        assert _regions(result) == _regions(layout)
        assert result[0] is not a


class TestAlignItems:
    def test_two_neighbours_below(self):
        a = _item("a", 0, 0, 2, 2)
        layout = [a, _item("c1", 0, 2, 1, 2), _item("c2", 1, 2, 1, 2)]
        changes = get_align_items(layout, a)
        assert changes == [
            {"i": "c1", "y": -2, "h": 2},
            {"i": "c2", "y": -2, "h": 2},
        ]

    def test_neighbour_above(self):
        a = _item("a", 0, 2, 2, 2)
        layout = [a, _item("c", 0, 0, 2, 2)]
        assert get_align_items(layout, a) == [{"i": "c", "h": 2}]

    def test_neighbour_left(self):
        a = _item("a", 2, 0, 2, 2)
        layout = [a, _item("c", 0, 0, 2, 2)]
        assert get_align_items(layout, a) == [{"i": "c", "w": 2}]

    def test_neighbour_right(self):
        a = _item("a", 0, 0, 2, 2)
        layout = [a, _item("d", 2, 0, 2, 2)]
        assert get_align_items(layout, a) == [{"i": "d", "x": -2, "w": 2}]

    def test_below_wins_over_right(self):
        a = _item("a", 0, 0, 2, 2)
        layout = [a, _item("d", 2, 0, 2, 2), _item("c", 0, 2, 2, 2)]
        assert get_align_items(layout, a) == [{"i": "c", "y": -2, "h": 2}]

    def test_partial_cover_is_ignored(self):
        a = _item("a", 0, 0, 2, 2)
        layout = [a, _item("c", 0, 2, 1, 2)]
        assert get_align_items(layout, a) == []

    def test_static_neighbour_is_skipped(self):
        a = _item("a", 0, 0, 2, 2)
        layout = [a, _item("pinned", 0, 2, 2, 2, static=True)]
        assert get_align_items(layout, a) == []

    def test_static_neighbour_breaks_cover(self):
        a = _item("a", 0, 0, 2, 2)
        layout = [a, _item("c", 0, 2, 1, 2), _item("pinned", 1, 2, 1, 2, static=True), _item("d", 2, 0, 2, 2)]
        assert get_align_items(layout, a) == [{"i": "d", "x": -2, "w": 2}]

    def test_fill_gap_applies_deltas(self):
        layout = [_item("c", 0, 2, 2, 3)]
        fill_gap(layout, [{"i": "c", "y": -2, "h": 2}])
        assert layout[0].region() == (0, 0, 2, 5)
