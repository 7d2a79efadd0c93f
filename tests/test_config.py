import random

import pytest

from match3.components.board import Board
from match3.config import Match3Config
from match3.errors import ConfigurationError
from match3.events.bus import EventBus
from match3.systems.matcher import find_matches
from match3.world import create_world, get_board


def test_default_config():
    config = Match3Config()
    assert (config.width, config.height) == (10, 10)
    assert config.palette == [0, 1, 2, 3, 4]
    assert config.command_capacity is None
    assert config.event_capacity is None


@pytest.mark.parametrize("kwargs", [
    {"gem_types": 2},
    {"gem_types": 0},
    {"width": 0},
    {"height": -3},
    {"command_capacity": 0},
    {"event_capacity": -1},
    {"event_capacity": 2},
])
def test_invalid_config_is_refused(kwargs):
    with pytest.raises(ConfigurationError):
        Match3Config(**kwargs)


def test_config_from_mapping():
    config = Match3Config.from_mapping({"width": 6, "height": 4, "gem_types": 3, "seed": 9})
    assert config == Match3Config(width=6, height=4, gem_types=3, seed=9)


def test_config_from_mapping_rejects_unknown_keys():
    with pytest.raises(ConfigurationError, match="board_size"):
        Match3Config.from_mapping({"board_size": 8})


def test_create_world_builds_settled_board():
    world = create_world(EventBus(), Match3Config(width=7, height=9, gem_types=4, seed=11))
    board = get_board(world)
    assert board.dimensions == (7, 9)
    assert board.types == [0, 1, 2, 3]
    assert board.is_full()
    assert find_matches(board).is_empty()


def test_same_seed_same_board():
    config = Match3Config(width=6, height=6, seed=2024)
    first = get_board(create_world(EventBus(), config))
    second = get_board(create_world(EventBus(), config))
    assert first == second


def test_create_world_uses_given_rng():
    world = create_world(EventBus(), Match3Config(width=5, height=5), rng=random.Random(3))
    expected = Board.generate(5, 5, range(5), rng=random.Random(3))
    assert get_board(world) == expected


def test_smallest_event_queue_accepted():
    assert Match3Config(event_capacity=3).event_capacity == 3


def test_create_world_rejects_board_of_other_size():
    board = Board.from_rows([[0, 1, 2], [1, 2, 0]])
    with pytest.raises(ConfigurationError, match="3x2"):
        create_world(EventBus(), Match3Config(width=5, height=5), board=board)
