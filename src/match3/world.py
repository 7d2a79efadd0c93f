from __future__ import annotations

import random
from typing import List, Optional

from esper import World

from match3.components.board import Board
from match3.components.board_events import BoardEvent, BoardEvents
from match3.components.commands import BoardCommand, BoardCommands
from match3.config import Match3Config
from match3.errors import ConfigurationError, QueueEmpty, QueueFull
from match3.events.bus import EventBus
from match3.systems.board_command_system import BoardCommandSystem
from match3.systems.board_ops import get_board, get_board_entity


def create_world(
    event_bus: EventBus,
    config: Optional[Match3Config] = None,
    *,
    rng: random.Random | None = None,
    board: Board | None = None,
) -> World:
    """Build a world holding one settled board plus its command/event queues.

    ``board`` replaces the generated board, which lets tests start from a
    hand-written layout; its dimensions must agree with ``config``.
    """
    config = config or Match3Config()
    if board is not None and board.dimensions != (config.width, config.height):
        raise ConfigurationError(
            f"Board is {board.width}x{board.height} but config expects {config.width}x{config.height}"
        )
    world = World()
    rng = rng or random.Random(config.seed)
    setattr(world, "random", rng)

    if board is None:
        board = Board.generate(config.width, config.height, config.palette, rng=rng)
    board_entity = world.create_entity(
        board,
        BoardCommands(capacity=config.command_capacity),
        BoardEvents(capacity=config.event_capacity),
    )
    system = BoardCommandSystem(world, event_bus, board_entity=board_entity)
    setattr(world, "board_command_system", system)
    return world


def push_command(world: World, command: BoardCommand) -> None:
    """Queue a command, rejecting positions outside the board and commands
    whose events could never fit in the event queue.
    """
    entity = get_board_entity(world)
    board = world.component_for_entity(entity, Board)
    for pos in command.positions:
        board.require_position(pos)
    events = world.component_for_entity(entity, BoardEvents)
    if events.capacity is not None and command.max_events() > events.capacity:
        raise QueueFull(
            f"{command!r} produces up to {command.max_events()} events "
            f"but the event queue holds {events.capacity}"
        )
    world.component_for_entity(entity, BoardCommands).push(command)


def pop_event(world: World) -> BoardEvent:
    return world.component_for_entity(get_board_entity(world), BoardEvents).pop()


def drain_events(world: World) -> List[BoardEvent]:
    drained: List[BoardEvent] = []
    while True:
        try:
            drained.append(pop_event(world))
        except QueueEmpty:
            return drained
