from __future__ import annotations

from esper import World

from match3.components.board import Board


def get_board_entity(world: World) -> int:
    for entity, _ in world.get_component(Board):
        return entity
    raise RuntimeError("Board component not found")


def get_board(world: World) -> Board:
    return world.component_for_entity(get_board_entity(world), Board)
