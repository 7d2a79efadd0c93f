from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple, Union

from match3.components.fifo import Fifo
from match3.components.matches import Position


@dataclass(frozen=True, slots=True)
class Swap:
    pos1: Position
    pos2: Position

    def __post_init__(self) -> None:
        object.__setattr__(self, "pos1", tuple(self.pos1))
        object.__setattr__(self, "pos2", tuple(self.pos2))

    @property
    def positions(self) -> Tuple[Position, ...]:
        return (self.pos1, self.pos2)

    def max_events(self) -> int:
        # Swapped + Matched, or a single FailedSwap.
        return 2


@dataclass(frozen=True, slots=True)
class Pop:
    positions: Tuple[Position, ...]

    def __post_init__(self) -> None:
        object.__setattr__(self, "positions", tuple(tuple(pos) for pos in self.positions))

    def max_events(self) -> int:
        # One Popped per position, then Dropped and Spawned.
        return len(self.positions) + 2


@dataclass(frozen=True, slots=True)
class Shuffle:
    @property
    def positions(self) -> Tuple[Position, ...]:
        return ()

    def max_events(self) -> int:
        return 1


BoardCommand = Union[Swap, Pop, Shuffle]


class BoardCommands(Fifo[BoardCommand]):
    """Inbound queue of commands waiting for the board command system."""
