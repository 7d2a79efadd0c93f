"""Print a freshly generated board and the moves available on it."""
from __future__ import annotations

import argparse
import logging
from typing import List, Optional

from match3.config import Match3Config
from match3.constants import DEFAULT_BOARD_HEIGHT, DEFAULT_BOARD_WIDTH, DEFAULT_GEM_TYPES
from match3.errors import ConfigurationError
from match3.events.bus import EventBus
from match3.world import create_world, get_board


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(prog="match3", description="Generate a settled match-three board")
    parser.add_argument('--width', type=int, default=DEFAULT_BOARD_WIDTH, help='Board width in cells')
    parser.add_argument('--height', type=int, default=DEFAULT_BOARD_HEIGHT, help='Board height in cells')
    parser.add_argument('--gem-types', type=int, default=DEFAULT_GEM_TYPES, help='Number of gem types (>= 3)')
    parser.add_argument('--seed', type=int, default=None, help='RNG seed for the board')
    parser.add_argument('--hints', action='store_true', help='List the swaps that would make a match')
    parser.add_argument('--verbose', action='store_true', help='Enable debug logging')
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)

    try:
        config = Match3Config(width=args.width, height=args.height, gem_types=args.gem_types, seed=args.seed)
    except ConfigurationError as exc:
        parser.error(str(exc))

    world = create_world(EventBus(), config)
    board = get_board(world)
    print(board)
    if args.hints:
        moves = sorted(move.positions for move in board.get_matching_moves())
        if not moves:
            print('No moves available; the board needs a shuffle.')
        for a, b in moves:
            print(f'{a} <-> {b}')
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
