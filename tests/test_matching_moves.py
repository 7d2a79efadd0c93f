import random
from collections import Counter

from match3.components.board import Board
from match3.components.matches import BoardMove
from match3.systems.matcher import find_matches
from tests.helpers import numbered_rows


def test_board_move_is_unordered():
    a, b = (1, 2), (1, 3)
    assert BoardMove(a, b) == BoardMove(b, a)
    assert hash(BoardMove(a, b)) == hash(BoardMove(b, a))
    assert len({BoardMove(a, b), BoardMove(b, a)}) == 1
    assert BoardMove(b, a).positions == (a, b)
    assert BoardMove(a, b) != BoardMove(a, (2, 2))


def test_single_matching_move_found():
    board = Board.from_rows([
        [50, 50, 51, 50, 52],
        [53, 54, 55, 56, 57],
        [58, 59, 60, 61, 62],
    ])

    moves = board.get_matching_moves()

    assert moves == {BoardMove((3, 0), (2, 0))}
    # Hints are computed on a scratch copy.
    assert board.get((2, 0)) == 51
    assert board.get((3, 0)) == 50


def test_distinct_board_has_no_moves():
    board = Board.from_rows(numbered_rows())
    assert board.get_matching_moves() == set()


def test_diagonal_pattern_is_deadlocked():
    rows = [[(x + y) % 3 for x in range(5)] for y in range(5)]
    board = Board.from_rows(rows)

    assert find_matches(board).is_empty(), "Setup should not contain initial matches"
    assert board.get_matching_moves() == set(), "Pattern should eliminate all valid moves"


def test_shuffle_keeps_gems_and_reports_moves():
    rows = [[(x + y) % 3 for x in range(5)] for y in range(5)]
    board = Board.from_rows(rows, rng=random.Random(42))
    before = board.copy()

    moves = board.shuffle()

    assert Counter(gem for _, gem in board) == Counter(gem for _, gem in before)
    sources = [src for src, _ in moves]
    targets = [dst for _, dst in moves]
    assert len(set(sources)) == len(sources)
    assert set(sources) == set(targets)
    for src, dst in moves:
        assert src != dst
        assert board.get(dst) == before.get(src)
    moved = set(targets)
    for pos, gem in before:
        if pos not in moved:
            assert board.get(pos) == gem
