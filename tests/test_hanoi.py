import pytest

from algokit.hanoi import Move, hanoi_moves


def _play(discs, moves, pegs=("s", "d", "a")):
    state = {peg: [] for peg in pegs}
    state[pegs[0]] = list(range(discs, 0, -1))
    for move in moves:
        top = state[move.source].pop()
        assert top == move.disc
        assert not state[move.target] or state[move.target][-1] > top
        state[move.target].append(top)
    return state


def test_zero_discs():
    assert list(hanoi_moves(0)) == []


def test_negative_discs():
    assert list(hanoi_moves(-3)) == []


def test_one_disc():
    assert list(hanoi_moves(1)) == [Move(1, "s", "d")]


def test_two_discs():
    assert list(hanoi_moves(2)) == [
        Move(1, "s", "a"),
        Move(2, "s", "d"),
        Move(1, "a", "d"),
    ]


@pytest.mark.parametrize("discs", [1, 2, 3, 5, 7])
def test_move_count_is_minimal(discs):
    assert len(list(hanoi_moves(discs))) == 2**discs - 1


@pytest.mark.parametrize("discs", [1, 3, 4, 6])
def test_moves_are_legal_and_complete(discs):
    state = _play(discs, hanoi_moves(discs))
    assert state["d"] == list(range(discs, 0, -1))
    assert state["s"] == []
    assert state["a"] == []


def test_custom_peg_names():
    moves = list(hanoi_moves(3, "A", "C", "B"))
    state = _play(3, moves, pegs=("A", "C", "B"))
    assert state["C"] == [3, 2, 1]


def test_largest_disc_moves_once_in_the_middle():
    moves = list(hanoi_moves(4))
    largest = [index for index, move in enumerate(moves) if move.disc == 4]
    assert largest == [len(moves) // 2]


def test_move_text():
    assert str(Move(3, "s", "d")) == "move disc 3 from s to d"