import dataclasses

import pytest

from board import GOAL, INVERSE_MOVES, ORDERED_GOAL, Board, InvalidBoardError, as_board


def test_rows_signature_and_blank():
    assert GOAL.rows == ((1, 2, 3), (8, 0, 4), (7, 6, 5))
    assert GOAL.signature == "1,2,3,8,0,4,7,6,5"
    assert GOAL.blank_position == (1, 1)
    assert ORDERED_GOAL.blank_position == (2, 2)


def test_constructors_agree():
    flat = Board((1, 2, 3, 8, 0, 4, 7, 6, 5))
    assert Board.from_rows([[1, 2, 3], [8, 0, 4], [7, 6, 5]]) == flat
    assert Board.parse("1 2 3 8 0 4 7 6 5") == flat
    assert Board.parse("1,2,3, 8,0,4, 7,6,5") == flat
    assert Board([1, 2, 3, 8, 0, 4, 7, 6, 5]) == flat
    assert as_board(flat) is flat
    assert as_board([[1, 2, 3], [8, 0, 4], [7, 6, 5]]) == flat
    assert as_board([1, 2, 3, 8, 0, 4, 7, 6, 5]) == flat
    assert len({flat, GOAL}) == 1


@pytest.mark.parametrize("cells", [
    (1, 2, 3, 4, 5, 6, 7, 8),
    (1, 2, 3, 4, 5, 6, 7, 8, 0, 9),
    (1, 1, 3, 4, 5, 6, 7, 8, 0),
    (1, 2, 3, 4, 5, 6, 7, 8, 9),
    (1, 2, 3, 4, 5, 6, 7, 8, 8),
    (1.0, 2, 3, 4, 5, 6, 7, 8, 0),
])
def test_invalid_cells_rejected(cells):
    with pytest.raises(InvalidBoardError):
        Board(cells)


def test_invalid_shapes_rejected():
    with pytest.raises(InvalidBoardError):
        Board.from_rows([[1, 2, 3], [4, 5, 6, 7, 8, 0]])
    with pytest.raises(InvalidBoardError):
        Board.from_rows([[1, 2, 3], [4, 5, 6], [7, 8, 0], []])
    with pytest.raises(InvalidBoardError):
        Board.parse("1 2 3 x 5 6 7 8 0")
    # still a ValueError for callers that only know the builtin
    with pytest.raises(ValueError):
        Board.parse("0 0 0 0 0 0 0 0 0")


def test_non_iterable_input_rejected():
    with pytest.raises(InvalidBoardError):
        Board(5)
    with pytest.raises(InvalidBoardError):
        as_board(None)
    with pytest.raises(InvalidBoardError):
        as_board(7)
    with pytest.raises(InvalidBoardError):
        Board.from_rows([1, 2, 3])
    with pytest.raises(InvalidBoardError):
        Board.from_rows(None)


def test_board_is_immutable():
    with pytest.raises(dataclasses.FrozenInstanceError):
        GOAL.cells = (0, 1, 2, 3, 4, 5, 6, 7, 8)
    assert isinstance(GOAL.cells, tuple)


def test_manhattan_distance():
    assert GOAL.manhattan_distance(GOAL) == 0
    assert ORDERED_GOAL.manhattan_distance(ORDERED_GOAL) == 0
    one_off = Board.from_rows([[1, 2, 3], [8, 4, 0], [7, 6, 5]])
    assert one_off.manhattan_distance(GOAL) == 1
    assert ORDERED_GOAL.manhattan_distance(GOAL) == 8
    assert GOAL.manhattan_distance(ORDERED_GOAL) == 8


def test_possible_moves_order_and_labels():
    moves = GOAL.possible_moves()
    assert [label for _, label in moves] == ["Down", "Up", "Right", "Left"]
    assert [b.cells for b, _ in moves] == [
        (1, 2, 3, 8, 6, 4, 7, 0, 5),
        (1, 0, 3, 8, 2, 4, 7, 6, 5),
        (1, 2, 3, 8, 4, 0, 7, 6, 5),
        (1, 2, 3, 0, 8, 4, 7, 6, 5),
    ]
    # corner blank only has two neighbors
    assert [label for _, label in ORDERED_GOAL.possible_moves()] == ["Up", "Left"]
    # source board untouched
    assert GOAL.cells == (1, 2, 3, 8, 0, 4, 7, 6, 5)


def test_move_matches_possible_moves():
    for board in (GOAL, ORDERED_GOAL):
        for neighbor, label in board.possible_moves():
            assert board.move(label) == neighbor


def test_moves_are_reversible():
    boards = [GOAL, ORDERED_GOAL, Board((0, 1, 2, 3, 4, 5, 6, 7, 8)), Board((4, 1, 0, 3, 2, 5, 6, 7, 8))]
    for board in boards:
        for neighbor, label in board.possible_moves():
            assert neighbor.move(INVERSE_MOVES[label]) == board


def test_illegal_moves_raise():
    with pytest.raises(ValueError):
        ORDERED_GOAL.move("Down")
    with pytest.raises(ValueError):
        ORDERED_GOAL.move("Right")
    with pytest.raises(ValueError):
        GOAL.move("Diagonal")


def test_apply_moves():
    assert GOAL.apply_moves([]) == GOAL
    assert GOAL.apply_moves(["Up", "Left"]) == Board((0, 1, 3, 8, 2, 4, 7, 6, 5))
    assert GOAL.apply_moves(["Up", "Down", "Left", "Right"]) == GOAL
