"""Logical core of a match-three puzzle.

Expose a small, stable API so callers can ``from match3 import create_world, Swap``.
"""

from match3.components.board import Board
from match3.components.board_events import (
    BoardEvents,
    Dropped,
    FailedSwap,
    Matched,
    Popped,
    Shuffled,
    Spawned,
    Swapped,
)
from match3.components.commands import BoardCommands, Pop, Shuffle, Swap
from match3.components.matches import BoardMove, Drop, Match, MatchDirection, Matches
from match3.config import Match3Config
from match3.errors import (
    ConfigurationError,
    Match3Error,
    NoGem,
    NoMatches,
    PositionOutOfBounds,
    ProcessorReentryError,
    QueueEmpty,
    QueueFull,
    SwapError,
)
from match3.events.bus import EventBus
from match3.systems.board_command_system import BoardCommandSystem
from match3.systems.matcher import find_matches, has_matches
from match3.world import create_world, drain_events, get_board, pop_event, push_command

__all__ = [
    "Board",
    "BoardCommandSystem",
    "BoardCommands",
    "BoardEvents",
    "BoardMove",
    "ConfigurationError",
    "Drop",
    "Dropped",
    "EventBus",
    "FailedSwap",
    "Match",
    "Match3Config",
    "Match3Error",
    "MatchDirection",
    "Matched",
    "Matches",
    "NoGem",
    "NoMatches",
    "Pop",
    "Popped",
    "PositionOutOfBounds",
    "ProcessorReentryError",
    "QueueEmpty",
    "QueueFull",
    "Shuffle",
    "Shuffled",
    "Spawned",
    "Swap",
    "SwapError",
    "Swapped",
    "create_world",
    "drain_events",
    "find_matches",
    "get_board",
    "has_matches",
    "pop_event",
    "push_command",
]
