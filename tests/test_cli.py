import pytest

from match3.__main__ import main
from match3.config import Match3Config
from match3.events.bus import EventBus
from match3.world import create_world, get_board


def test_cli_prints_board_rows(capsys):
    assert main(['--width', '4', '--height', '3', '--seed', '5']) == 0
    lines = capsys.readouterr().out.strip().splitlines()
    assert len(lines) == 3
    assert all(line.startswith('[') and line.count(',') == 3 for line in lines)


def test_cli_lists_hints(capsys):
    assert main(['--width', '6', '--height', '6', '--seed', '8', '--hints']) == 0
    out = capsys.readouterr().out.strip().splitlines()

    board = get_board(create_world(EventBus(), Match3Config(width=6, height=6, seed=8)))
    assert out[:6] == str(board).splitlines()
    expected = sorted(move.positions for move in board.get_matching_moves())
    if expected:
        assert out[6:] == [f'{a} <-> {b}' for a, b in expected]
    else:
        assert out[6:] == ['No moves available; the board needs a shuffle.']


def test_cli_refuses_small_palette(capsys):
    with pytest.raises(SystemExit) as excinfo:
        main(['--gem-types', '2'])
    assert excinfo.value.code == 2
    assert 'fewer than 3' in capsys.readouterr().err
