from __future__ import annotations

import logging
from enum import Enum
from typing import Optional

from esper import World

from match3.components.board import Board
from match3.components.board_events import (
    BoardEvent,
    BoardEvents,
    Dropped,
    FailedSwap,
    Matched,
    Popped,
    Shuffled,
    Spawned,
    Swapped,
)
from match3.components.commands import BoardCommand, BoardCommands, Pop, Shuffle, Swap
from match3.errors import NoGem, NoMatches, ProcessorReentryError
from match3.events.bus import EVENT_TICK, EventBus
from match3.systems.board_ops import get_board_entity
from match3.systems.matcher import find_matches

logger = logging.getLogger(__name__)


class ProcessorState(Enum):
    IDLE = "idle"
    DRAINING = "draining"


class BoardCommandSystem:
    """Turns queued board commands into board mutations and ordered events.

    Runs once per ``tick`` on the event bus (or whenever ``process`` is called)
    and drains every command that fits. Each outcome is pushed onto the
    ``BoardEvents`` queue and mirrored on the bus under the event's name.
    Exactly one system may drive a given board.
    """

    def __init__(self, world: World, event_bus: EventBus, board_entity: Optional[int] = None):
        self.world = world
        self.event_bus = event_bus
        self.board_entity = board_entity if board_entity is not None else get_board_entity(world)
        self.state = ProcessorState.IDLE
        self.event_bus.subscribe(EVENT_TICK, self.on_tick)

    def on_tick(self, sender, **kwargs):
        self.process()

    def process(self) -> int:
        """Drain pending commands; returns how many were handled."""
        if self.state is ProcessorState.DRAINING:
            raise ProcessorReentryError("Board command system is already draining")
        board = self.world.component_for_entity(self.board_entity, Board)
        commands = self.world.component_for_entity(self.board_entity, BoardCommands)
        events = self.world.component_for_entity(self.board_entity, BoardEvents)
        handled = 0
        self.state = ProcessorState.DRAINING
        try:
            while commands:
                command = commands.peek()
                room = events.free_capacity()
                # push_command guarantees the command fits an empty event queue.
                if room is not None and command.max_events() > room:
                    logger.debug("Event queue has room for %d events, holding %r", room, command)
                    break
                commands.pop()
                self._apply(board, command, events)
                handled += 1
        finally:
            self.state = ProcessorState.IDLE
        return handled

    def _apply(self, board: Board, command: BoardCommand, events: BoardEvents) -> None:
        logger.debug("Applying %r", command)
        if isinstance(command, Swap):
            self._swap(board, command, events)
        elif isinstance(command, Pop):
            self._pop(board, command, events)
        elif isinstance(command, Shuffle):
            self._shuffle(board, events)
        else:
            raise TypeError(f"Unknown board command: {command!r}")

    def _swap(self, board: Board, command: Swap, events: BoardEvents) -> None:
        pos1, pos2 = command.pos1, command.pos2
        try:
            board.swap(pos1, pos2)
        except NoMatches:
            logger.debug("Swap %s <-> %s rejected: no matches", pos1, pos2)
            self._emit(events, FailedSwap(pos1=pos1, pos2=pos2))
            return
        except NoGem as exc:
            logger.error("Swap %s <-> %s on an incomplete board: %s", pos1, pos2, exc)
            self._emit(events, FailedSwap(pos1=pos1, pos2=pos2))
            return
        self._emit(events, Swapped(pos1=pos1, pos2=pos2))
        # Whole-board scan: may include matches left over from an unresolved cascade.
        self._emit(events, Matched(matches=find_matches(board)))

    def _pop(self, board: Board, command: Pop, events: BoardEvents) -> None:
        for pos in command.positions:
            board.remove(pos)
            self._emit(events, Popped(position=pos))
        drops = sorted(board.drop())
        self._emit(events, Dropped(drops=drops))
        spawns = sorted(board.fill(), key=lambda spawn: (spawn[0][1], spawn[0][0]))
        self._emit(events, Spawned(spawns=spawns))

    def _shuffle(self, board: Board, events: BoardEvents) -> None:
        self._emit(events, Shuffled(moves=board.shuffle()))

    def _emit(self, events: BoardEvents, event: BoardEvent) -> None:
        events.push(event)
        self.event_bus.emit(event.name, **event.payload())
