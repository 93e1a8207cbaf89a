import pytest

from dispatch import Direction, DirectionSet, RequestBoard


@pytest.fixture
def board():
    return RequestBoard(5)


def test_starts_empty(board):
    assert len(board) == 5
    assert not board.any_pending()
    assert all(cell.is_empty() for cell in board.contents())


@pytest.mark.parametrize("floor", range(5))
@pytest.mark.parametrize("direction", list(Direction))
def test_request_marks_floor_pending(board, floor, direction):
    board.request_service(floor, direction)
    assert board.has_pending(floor)

    before = board.contents()
    board.request_service(floor, direction)
    assert board.contents() == before


def test_clear_removes_only_that_direction(board):
    board.request_service(2, Direction.UP)
    board.request_service(2, Direction.DOWN)
    board.clear(2, Direction.UP)
    assert board.pending_at(2) == DirectionSet.of(Direction.DOWN)
    board.clear(2, Direction.DOWN)
    assert not board.has_pending(2)


def test_clear_of_absent_direction_is_noop(board):
    board.clear(1, Direction.UP)
    assert not board.has_pending(1)


def test_look_ahead_is_strict_and_counts_either_direction(board):
    board.request_service(3, Direction.DOWN)
    assert board.any_above(0)
    assert board.any_above(2)
    assert not board.any_above(3)
    assert board.any_below(4)
    assert not board.any_below(3)


def test_look_ahead_at_edges(board):
    assert not board.any_below(0)
    assert not board.any_above(4)


@pytest.mark.parametrize("floor", [-1, 5, 100])
def test_out_of_range_floor_fails_fast(board, floor):
    with pytest.raises(ValueError):
        board.request_service(floor, Direction.UP)
    with pytest.raises(ValueError):
        board.clear(floor, Direction.UP)
    with pytest.raises(ValueError):
        board.has_pending(floor)


def test_non_integer_floor_is_rejected(board):
    with pytest.raises(TypeError):
        board.request_service(1.0, Direction.UP)
    with pytest.raises(TypeError):
        board.request_service(True, Direction.UP)


def test_malformed_direction_is_rejected(board):
    with pytest.raises(TypeError):
        board.request_service(1, "up")
    with pytest.raises(TypeError):
        board.clear(1, DirectionSet.BOTH)
    assert not board.has_pending(1)


def test_board_needs_two_floors():
    with pytest.raises(ValueError):
        RequestBoard(1)
