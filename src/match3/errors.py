from __future__ import annotations

from typing import Tuple

Position = Tuple[int, int]


class Match3Error(Exception):
    """Base class for every error raised by the board engine."""


class ConfigurationError(Match3Error, ValueError):
    """Board settings that must stop construction (e.g. fewer than 3 gem types)."""


class PositionOutOfBounds(Match3Error, IndexError):
    def __init__(self, position: Position, width: int, height: int):
        self.position = position
        self.width = width
        self.height = height
        super().__init__(f"Position {position} outside of {width}x{height} board")


class SwapError(Match3Error):
    """A swap the board refused to commit."""


class NoGem(SwapError):
    def __init__(self, position: Position):
        self.position = position
        super().__init__(f"No gem at position {position}")


class NoMatches(SwapError):
    def __init__(self, pos1: Position, pos2: Position):
        self.pos1 = pos1
        self.pos2 = pos2
        super().__init__(f"Swapping {pos1} and {pos2} resulted in no matches")


class QueueError(Match3Error):
    pass


class QueueEmpty(QueueError):
    pass


class QueueFull(QueueError):
    pass


class ProcessorReentryError(Match3Error, RuntimeError):
    """Raised when a board command system is asked to drain while already draining."""
