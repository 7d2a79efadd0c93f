from __future__ import annotations

from typing import TYPE_CHECKING, List, Optional

from match3.components.matches import Match, MatchDirection, Matches, Position
from match3.constants import MIN_MATCH_LENGTH

if TYPE_CHECKING:
    from match3.components.board import Board


def find_matches(board: "Board") -> Matches:
    """Detect all contiguous horizontal and vertical runs of length >= 3.

    Rows are scanned first (x ascending within each y), then columns (y
    ascending within each x), so the result order is reproducible. A gem
    sitting where a horizontal and a vertical run cross is reported in both.
    """
    matches = _straight_matches(board, MatchDirection.HORIZONTAL)
    matches.extend(_straight_matches(board, MatchDirection.VERTICAL))
    return matches


def has_matches(board: "Board") -> bool:
    return not find_matches(board).is_empty()


def _straight_matches(board: "Board", direction: MatchDirection) -> Matches:
    matches = Matches()
    if direction is MatchDirection.HORIZONTAL:
        lines = [[(x, y) for x in range(board.width)] for y in range(board.height)]
    else:
        lines = [[(x, y) for y in range(board.height)] for x in range(board.width)]
    for line in lines:
        run: List[Position] = []
        last_type: Optional[int] = None
        for pos in line:
            tval = board.get(pos)
            if tval is not None and tval == last_type:
                run.append(pos)
                continue
            _emit_run(matches, run, direction)
            # Empty cells break a run and never start one.
            run = [pos] if tval is not None else []
            last_type = tval
        _emit_run(matches, run, direction)
    return matches


def _emit_run(matches: Matches, run: List[Position], direction: MatchDirection) -> None:
    if len(run) >= MIN_MATCH_LENGTH:
        matches.add(Match(positions=frozenset(run), direction=direction))
