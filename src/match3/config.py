from __future__ import annotations

from dataclasses import dataclass, fields
from typing import Any, List, Mapping, Optional

from match3.constants import (
    DEFAULT_BOARD_HEIGHT,
    DEFAULT_BOARD_WIDTH,
    DEFAULT_COMMAND_CAPACITY,
    DEFAULT_EVENT_CAPACITY,
    DEFAULT_GEM_TYPES,
    MIN_EVENT_CAPACITY,
    MIN_GEM_TYPES,
)
from match3.errors import ConfigurationError


@dataclass(frozen=True, slots=True)
class Match3Config:
    """Settings used to build a board world.

    Validated on creation so an unusable board is refused before anything
    is generated.
    """
    width: int = DEFAULT_BOARD_WIDTH
    height: int = DEFAULT_BOARD_HEIGHT
    gem_types: int = DEFAULT_GEM_TYPES
    command_capacity: Optional[int] = DEFAULT_COMMAND_CAPACITY
    event_capacity: Optional[int] = DEFAULT_EVENT_CAPACITY
    seed: Optional[int] = None

    def __post_init__(self) -> None:
        if self.width < 1 or self.height < 1:
            raise ConfigurationError(
                f"Board dimensions must be positive, got {self.width}x{self.height}"
            )
        if self.gem_types < MIN_GEM_TYPES:
            raise ConfigurationError(
                f"Cannot generate board with fewer than {MIN_GEM_TYPES} different gem types "
                f"(got {self.gem_types})"
            )
        for name in ("command_capacity", "event_capacity"):
            capacity = getattr(self, name)
            if capacity is not None and capacity < 1:
                raise ConfigurationError(f"{name} must be positive or None, got {capacity}")
        if self.event_capacity is not None and self.event_capacity < MIN_EVENT_CAPACITY:
            raise ConfigurationError(
                f"event_capacity must be at least {MIN_EVENT_CAPACITY} to hold a pop, got {self.event_capacity}"
            )

    @property
    def palette(self) -> List[int]:
        return list(range(self.gem_types))

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "Match3Config":
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            raise ConfigurationError(f"Unknown config keys: {', '.join(unknown)}")
        return cls(**dict(data))
