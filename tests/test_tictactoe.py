import pytest

from negamax import canonicalize
from negamax.games import TicTacToe
from negamax.games.tictactoe import changed_cell


def test_empty_board() -> None:
    state = TicTacToe()
    assert state.cells == [0] * 9
    assert state.legal_moves() == list(range(9))
    assert not state.is_over()
    assert state.value() == 0


def test_from_string() -> None:
    state = TicTacToe.from_string("x.o\n.x.\no..")
    assert state.cells == [1, 0, -1, 0, 1, 0, -1, 0, 0]


@pytest.mark.parametrize("board", ["x.o", "x.o.x.o..x", "x.o.z.o.."])
def test_from_string_rejects_bad_boards(board: str) -> None:
    with pytest.raises(ValueError):
        TicTacToe.from_string(board)


def test_win_and_value() -> None:
    state = TicTacToe.from_string("xxx oo. ...")
    assert state.win(1)
    assert not state.win(-1)
    assert state.value() == 1
    assert state.winner() == 1
    assert state.is_over()

    diagonal = TicTacToe.from_string("x.o .o. o.x")
    assert diagonal.win(-1)
    assert diagonal.value() == -1


def test_possibilities() -> None:
    state = TicTacToe.from_string("x.. .o. ...")
    children = state.possibilities(1)
    assert len(children) == 7
    assert children[0] == TicTacToe.from_string("xx. .o. ...")
    # parent is untouched
    assert state == TicTacToe.from_string("x.. .o. ...")


def test_full_board_passes() -> None:
    state = TicTacToe.from_string("xox xoo oxx")
    assert state.is_full()
    assert state.possibilities(-1) == [state]


def test_swap() -> None:
    state = TicTacToe.from_string("x.. .o. ..x")
    state.swap()
    assert state == TicTacToe.from_string("o.. .x. ..o")
    assert state.win(1) == TicTacToe.from_string("x.. .o. ..x").win(-1)
    state.swap()
    assert state == TicTacToe.from_string("x.. .o. ..x")


def test_symmetries() -> None:
    state = TicTacToe.from_string("xo. ... ...")
    symmetries = state.symmetries()
    assert len(symmetries) == 8
    assert state in symmetries
    assert len(set(symmetries)) == 8

    # the empty board is its own symmetry class
    assert set(TicTacToe().symmetries()) == {TicTacToe()}


def test_corners_share_canonical_state() -> None:
    corners = [TicTacToe().play(cell, 1) for cell in (0, 2, 6, 8)]
    canonical = {canonicalize(state) for state in corners}
    assert len(canonical) == 1
    assert canonicalize(TicTacToe().play(4, 1)) not in canonical


def test_ordering_and_hash() -> None:
    a = TicTacToe.from_string("o.. ... ...")
    b = TicTacToe.from_string("x.. ... ...")
    assert a < b
    assert hash(a) == hash(a.copy())
    assert a.copy() == a
    assert a.copy() is not a


def test_changed_cell() -> None:
    state = TicTacToe.from_string("x.. ... ...")
    assert changed_cell(state, state.play(4, -1)) == 4
    assert changed_cell(state, state.copy()) is None
