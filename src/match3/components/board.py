from __future__ import annotations

import logging
import random
from dataclasses import dataclass, field
from typing import Dict, Iterable, Iterator, List, Optional, Sequence, Set, Tuple

from match3.components.matches import BoardMove, Drop, Position
from match3.constants import MIN_GEM_TYPES, NEIGHBOUR_OFFSETS
from match3.errors import ConfigurationError, NoGem, NoMatches, PositionOutOfBounds
from match3.systems.matcher import find_matches, has_matches

logger = logging.getLogger(__name__)

Spawn = Tuple[Position, int]
ShuffleMove = Tuple[Position, Position]


@dataclass(slots=True)
class Board:
    """Grid of gem types keyed by ``(x, y)``; ``y == 0`` is the top row.

    A missing key is an empty cell. Empty cells only exist between a pop and
    the following ``drop``/``fill``.
    """
    width: int
    height: int
    gems: Dict[Position, int] = field(default_factory=dict)
    types: List[int] = field(default_factory=list)
    rng: random.Random = field(default_factory=random.Random, compare=False, repr=False)

    @classmethod
    def from_rows(
        cls,
        rows: Sequence[Sequence[int]],
        types: Optional[Iterable[int]] = None,
        rng: Optional[random.Random] = None,
    ) -> "Board":
        """Build a board from rows listed top to bottom.

        The palette defaults to the distinct values found in ``rows``.
        """
        height = len(rows)
        width = len(rows[0]) if rows else 0
        gems: Dict[Position, int] = {}
        for y, row in enumerate(rows):
            if len(row) != width:
                raise ConfigurationError(f"Row {y} has {len(row)} gems, expected {width}")
            for x, gem in enumerate(row):
                gems[(x, y)] = gem
        palette = sorted(set(types)) if types is not None else sorted(set(gems.values()))
        return cls(width=width, height=height, gems=gems, types=palette, rng=rng or random.Random())

    @classmethod
    def generate(
        cls,
        width: int,
        height: int,
        types: Iterable[int],
        rng: Optional[random.Random] = None,
    ) -> "Board":
        """Fill a new board at random and settle it so it starts without matches."""
        palette = sorted(set(types))
        if len(palette) < MIN_GEM_TYPES:
            raise ConfigurationError(
                f"Cannot generate board with fewer than {MIN_GEM_TYPES} different gem types"
            )
        if width < 1 or height < 1:
            raise ConfigurationError(f"Board dimensions must be positive, got {width}x{height}")
        board = cls(width=width, height=height, types=palette, rng=rng or random.Random())
        board.fill()
        board.clear_matches()
        return board

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------
    @property
    def dimensions(self) -> Tuple[int, int]:
        return self.width, self.height

    def contains(self, pos: Position) -> bool:
        x, y = pos
        return 0 <= x < self.width and 0 <= y < self.height

    def require_position(self, pos: Position) -> None:
        if not self.contains(pos):
            raise PositionOutOfBounds(tuple(pos), self.width, self.height)

    def get(self, pos: Position) -> Optional[int]:
        return self.gems.get(tuple(pos))

    def iter(self) -> Iterator[Tuple[Position, int]]:
        for y in range(self.height):
            for x in range(self.width):
                gem = self.gems.get((x, y))
                if gem is not None:
                    yield (x, y), gem

    def __iter__(self) -> Iterator[Tuple[Position, int]]:
        return self.iter()

    def positions(self) -> List[Position]:
        return [(x, y) for y in range(self.height) for x in range(self.width)]

    def empty_positions(self) -> List[Position]:
        return [pos for pos in self.positions() if pos not in self.gems]

    def is_full(self) -> bool:
        return len(self.gems) == self.width * self.height

    def copy(self) -> "Board":
        return Board(
            width=self.width,
            height=self.height,
            gems=dict(self.gems),
            types=list(self.types),
            rng=self.rng,
        )

    def __str__(self) -> str:
        lines = []
        for y in range(self.height):
            lines.append(repr([self.gems.get((x, y)) for x in range(self.width)]))
        return "\n".join(lines)

    # ------------------------------------------------------------------
    # Mutations
    # ------------------------------------------------------------------
    def remove(self, pos: Position) -> Optional[int]:
        self.require_position(pos)
        return self.gems.pop(tuple(pos), None)

    def swap(self, pos1: Position, pos2: Position) -> None:
        """Swap two gems, keeping the change only if it creates a match.

        Raises ``NoGem`` when either cell is empty and ``NoMatches`` (after
        restoring both gems) when the swap leaves the board without matches.
        """
        self.require_position(pos1)
        self.require_position(pos2)
        pos1, pos2 = tuple(pos1), tuple(pos2)
        gem1 = self.gems.get(pos1)
        if gem1 is None:
            raise NoGem(pos1)
        gem2 = self.gems.get(pos2)
        if gem2 is None:
            raise NoGem(pos2)
        self.gems[pos1], self.gems[pos2] = gem2, gem1
        if not has_matches(self):
            self.gems[pos1], self.gems[pos2] = gem1, gem2
            raise NoMatches(pos1, pos2)

    def drop(self) -> Set[Drop]:
        """Let gems fall into the empty cells below them, column by column."""
        moves: Set[Drop] = set()
        for x in range(self.width):
            target = self.height - 1
            for y in range(self.height - 1, -1, -1):
                gem = self.gems.get((x, y))
                if gem is None:
                    continue
                if y != target:
                    del self.gems[(x, y)]
                    self.gems[(x, target)] = gem
                    moves.add(Drop(source=(x, y), target=(x, target)))
                target -= 1
        return moves

    def fill(self) -> Set[Spawn]:
        """Give every empty cell a random gem from the palette."""
        spawned: Set[Spawn] = set()
        if not self.types:
            raise ConfigurationError("Cannot fill a board with an empty palette")
        for pos in self.empty_positions():
            gem = self.rng.choice(self.types)
            self.gems[pos] = gem
            spawned.add((pos, gem))
        return spawned

    def clear_matches(self) -> int:
        """Remove, drop and refill until no matches remain.

        Only meant for settling a freshly generated board; during play each
        cascade step goes through the command system instead. Returns the
        number of rounds it took.
        """
        if len(set(self.types)) < MIN_GEM_TYPES:
            raise ConfigurationError(
                f"Cannot settle a board with fewer than {MIN_GEM_TYPES} different gem types"
            )
        rounds = 0
        while True:
            matches = find_matches(self)
            if matches.is_empty():
                break
            rounds += 1
            for pos in matches.without_duplicates():
                self.gems.pop(pos, None)
            self.drop()
            self.fill()
        logger.debug("Board settled after %d round(s)", rounds)
        return rounds

    def shuffle(self) -> List[ShuffleMove]:
        """Randomly redistribute the existing gems over the occupied cells.

        Returns the ``(from, to)`` pairs of every gem that changed cell; a gem
        may land back where it started, in which case it is not listed.
        """
        sources = [pos for pos, _ in self.iter()]
        targets = list(sources)
        self.rng.shuffle(targets)
        previous = dict(self.gems)
        moves: List[ShuffleMove] = []
        for source, target in zip(sources, targets):
            self.gems[target] = previous[source]
            if source != target:
                moves.append((source, target))
        return moves

    def get_matching_moves(self) -> Set[BoardMove]:
        """Enumerate adjacent swaps that would produce a match.

        An empty result means the board is deadlocked and should be shuffled.
        """
        scratch = self.copy()
        grid = scratch.gems
        moves: Set[BoardMove] = set()
        for pos in self.positions():
            if pos not in grid:
                continue
            x, y = pos
            for dx, dy in NEIGHBOUR_OFFSETS:
                other = (x + dx, y + dy)
                if not scratch.contains(other) or other not in grid:
                    continue
                move = BoardMove(pos, other)
                if move in moves:
                    continue
                grid[pos], grid[other] = grid[other], grid[pos]
                if has_matches(scratch):
                    moves.add(move)
                grid[pos], grid[other] = grid[other], grid[pos]
        return moves
