DEFAULT_BOARD_WIDTH = 10
DEFAULT_BOARD_HEIGHT = 10
DEFAULT_GEM_TYPES = 5

# A palette smaller than this cannot be filled without forced matches.
MIN_GEM_TYPES = 3
MIN_MATCH_LENGTH = 3

# None means unbounded.
DEFAULT_COMMAND_CAPACITY = None
DEFAULT_EVENT_CAPACITY = None

# Cardinal neighbour offsets as (dx, dy).
NEIGHBOUR_OFFSETS = ((1, 0), (-1, 0), (0, 1), (0, -1))

# Popped + Dropped + Spawned for a single-gem pop.
MIN_EVENT_CAPACITY = 3
