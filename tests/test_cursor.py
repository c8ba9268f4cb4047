import pytest

from cicero.preview.cursor import CursorState, SelectionCursor


def test_empty_cursor_cannot_move() -> None:
    cursor: SelectionCursor[int] = SelectionCursor([])
    assert cursor.state is CursorState.EMPTY
    assert not cursor.has_previous()
    assert not cursor.has_next()
    cursor.select_next()
    cursor.select_previous()
    assert cursor.current_item() is None
    assert cursor.state is CursorState.EMPTY


@pytest.mark.parametrize("initial_index", [None, -1, 3, 10])
def test_out_of_range_initial_index_is_unselected(initial_index: int | None) -> None:
    cursor = SelectionCursor(["a", "b", "c"], initial_index)
    assert cursor.state is CursorState.UNSELECTED
    assert cursor.index is None
    assert cursor.current_item() is None


def test_unselected_cursor_enters_from_outside() -> None:
    forward = SelectionCursor(["a", "b", "c"])
    assert forward.has_next()
    forward.select_next()
    assert forward.current_item() == "a"

    backward = SelectionCursor(["a", "b", "c"])
    assert backward.has_previous()
    backward.select_previous()
    assert backward.current_item() == "c"


@pytest.mark.parametrize("start", [0, 1, 2, 3])
def test_select_next_reaches_last_item_then_stops(start: int) -> None:
    items = [10, 20, 30, 40]
    cursor = SelectionCursor(items, start)
    for _ in range(len(items) - 1 - start):
        assert cursor.has_next()
        cursor.select_next()
    assert cursor.index == len(items) - 1
    assert not cursor.has_next()
    cursor.select_next()
    assert cursor.index == len(items) - 1


@pytest.mark.parametrize("start", [0, 1, 2, 3])
def test_select_previous_reaches_first_item_then_stops(start: int) -> None:
    cursor = SelectionCursor([10, 20, 30, 40], start)
    for _ in range(start):
        cursor.select_previous()
    assert cursor.index == 0
    assert not cursor.has_previous()
    cursor.select_previous()
    assert cursor.current_item() == 10


def test_select_if_found_moves_to_first_match() -> None:
    cursor = SelectionCursor(["a", "b", "a"], 2)
    assert cursor.select_if_found("a")
    assert cursor.index == 0


def test_select_if_found_keeps_state_when_missing() -> None:
    cursor = SelectionCursor(["a", "b", "c"], 1)
    assert not cursor.select_if_found("z")
    assert cursor.state is CursorState.SELECTED
    assert cursor.index == 1

    unselected = SelectionCursor(["a"])
    assert not unselected.select_if_found("z")
    assert unselected.state is CursorState.UNSELECTED


def test_items_are_snapshotted() -> None:
    source = ["a", "b"]
    cursor = SelectionCursor(source, 0)
    source.append("c")
    assert len(cursor) == 2
    assert cursor.items == ("a", "b")
