from __future__ import annotations

from dataclasses import dataclass, fields
from typing import Any, ClassVar, Dict, List, Tuple, Union

from match3.components.fifo import Fifo
from match3.components.matches import Drop, Matches, Position
from match3.events.bus import (
    EVENT_BOARD_SHUFFLED,
    EVENT_GEM_POPPED,
    EVENT_GEMS_DROPPED,
    EVENT_GEMS_SPAWNED,
    EVENT_GEMS_SWAPPED,
    EVENT_MATCHES_FOUND,
    EVENT_SWAP_FAILED,
)


class _BoardEvent:
    """Shared helpers; ``name`` is the bus event the outcome is mirrored to."""
    __slots__ = ()
    name: ClassVar[str]

    def payload(self) -> Dict[str, Any]:
        return {f.name: getattr(self, f.name) for f in fields(self)}


@dataclass(frozen=True, slots=True)
class Swapped(_BoardEvent):
    name: ClassVar[str] = EVENT_GEMS_SWAPPED
    pos1: Position
    pos2: Position


@dataclass(frozen=True, slots=True)
class FailedSwap(_BoardEvent):
    name: ClassVar[str] = EVENT_SWAP_FAILED
    pos1: Position
    pos2: Position


@dataclass(frozen=True, slots=True)
class Popped(_BoardEvent):
    name: ClassVar[str] = EVENT_GEM_POPPED
    position: Position


@dataclass(frozen=True, slots=True)
class Dropped(_BoardEvent):
    name: ClassVar[str] = EVENT_GEMS_DROPPED
    drops: List[Drop]


@dataclass(frozen=True, slots=True)
class Spawned(_BoardEvent):
    name: ClassVar[str] = EVENT_GEMS_SPAWNED
    spawns: List[Tuple[Position, int]]


@dataclass(frozen=True, slots=True)
class Matched(_BoardEvent):
    name: ClassVar[str] = EVENT_MATCHES_FOUND
    matches: Matches


@dataclass(frozen=True, slots=True)
class Shuffled(_BoardEvent):
    name: ClassVar[str] = EVENT_BOARD_SHUFFLED
    moves: List[Tuple[Position, Position]]


BoardEvent = Union[Swapped, FailedSwap, Popped, Dropped, Spawned, Matched, Shuffled]


class BoardEvents(Fifo[BoardEvent]):
    """Outbound queue of board outcomes, consumed by the renderer or game logic."""
