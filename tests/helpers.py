from __future__ import annotations

import random
from typing import List, Sequence

from esper import World

from match3.components.board import Board
from match3.config import Match3Config
from match3.events.bus import EventBus, EVENT_TICK
from match3.world import create_world


def numbered_rows(width: int = 5, height: int = 7) -> List[List[int]]:
    """Rows 0..width*height-1 in reading order; no two cells share a type."""
    return [[y * width + x for x in range(width)] for y in range(height)]


def make_world(rows: Sequence[Sequence[int]], *, seed: int = 1234, **config) -> tuple[EventBus, World, Board]:
    bus = EventBus()
    rng = random.Random(seed)
    board = Board.from_rows(rows, rng=rng)
    cfg = Match3Config(width=board.width, height=board.height, **config)
    world = create_world(bus, cfg, rng=rng, board=board)
    return bus, world, board


def drive_ticks(bus: EventBus, count: int = 1, dt: float = 0.02) -> None:
    for _ in range(count):
        bus.emit(EVENT_TICK, dt=dt)
