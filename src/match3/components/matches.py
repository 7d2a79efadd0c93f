from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import FrozenSet, Iterator, List, Set, Tuple

Position = Tuple[int, int]


class MatchDirection(Enum):
    HORIZONTAL = "horizontal"
    VERTICAL = "vertical"


@dataclass(frozen=True, slots=True)
class Match:
    """A straight run of three or more gems of one type."""
    positions: FrozenSet[Position]
    direction: MatchDirection

    def __len__(self) -> int:
        return len(self.positions)

    def __contains__(self, position: object) -> bool:
        return position in self.positions


@dataclass(slots=True)
class Matches:
    """Matches found by one detection pass, in scan order."""
    matches: List[Match] = field(default_factory=list)

    def add(self, mat: Match) -> None:
        self.matches.append(mat)

    def extend(self, other: "Matches") -> None:
        self.matches.extend(other.matches)

    def without_duplicates(self) -> Set[Position]:
        """Return every matched position once, even where runs intersect."""
        return {pos for mat in self.matches for pos in mat.positions}

    def is_empty(self) -> bool:
        return not self.matches

    def __len__(self) -> int:
        return len(self.matches)

    def __iter__(self) -> Iterator[Match]:
        return iter(self.matches)

    def __bool__(self) -> bool:
        return bool(self.matches)


class BoardMove:
    """Unordered pair of adjacent positions that can be swapped."""

    __slots__ = ("_pair",)

    def __init__(self, a: Position, b: Position):
        self._pair: FrozenSet[Position] = frozenset((tuple(a), tuple(b)))

    @property
    def positions(self) -> Tuple[Position, Position]:
        ordered = sorted(self._pair)
        if len(ordered) == 1:
            return ordered[0], ordered[0]
        return ordered[0], ordered[1]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BoardMove):
            return NotImplemented
        return self._pair == other._pair

    def __hash__(self) -> int:
        return hash(self._pair)

    def __repr__(self) -> str:
        a, b = self.positions
        return f"BoardMove({a}, {b})"


@dataclass(frozen=True, slots=True)
class Drop:
    """A gem falling from ``source`` to ``target`` within one column.

    Drops sort by source row from the bottom up (highest ``y`` first) so a
    renderer can animate lower gems before the ones stacked above them.
    """
    source: Position
    target: Position

    def sort_key(self) -> Tuple[int, int, int, int]:
        sx, sy = self.source
        tx, ty = self.target
        return (-sy, sx, -ty, tx)

    def __lt__(self, other: "Drop") -> bool:
        if not isinstance(other, Drop):
            return NotImplemented
        return self.sort_key() < other.sort_key()
