from blinker import Signal
from typing import Dict

class EventBus:
    """Simple event bus leveraging blinker Signal objects."""
    def __init__(self):
        self._signals: Dict[str, Signal] = {}

    def subscribe(self, name: str, fn):
        sig = self._signals.setdefault(name, Signal(name))
        # Use weak=False to retain strong reference to bound methods so systems not kept in a variable still receive events.
        sig.connect(fn, weak=False)

    def unsubscribe(self, name: str, fn):
        sig = self._signals.get(name)
        if sig:
            sig.disconnect(fn)

    def emit(self, name: str, **payload):
        sig = self._signals.get(name)
        if sig:
            sig.send(self, **payload)


# ============================================================================
# SYSTEM & TIMING
# ============================================================================
EVENT_TICK = "tick"                                # payload: dt=float


# ============================================================================
# BOARD OUTCOMES (mirrors of the BoardEvents queue)
# ============================================================================
EVENT_GEMS_SWAPPED = "gems_swapped"        # payload: pos1=(x,y), pos2=(x,y)
EVENT_SWAP_FAILED = "swap_failed"          # payload: pos1=(x,y), pos2=(x,y)
EVENT_GEM_POPPED = "gem_popped"            # payload: position=(x,y)
EVENT_GEMS_DROPPED = "gems_dropped"        # payload: drops=list[Drop]
EVENT_GEMS_SPAWNED = "gems_spawned"        # payload: spawns=list[((x,y), type)]
EVENT_MATCHES_FOUND = "matches_found"      # payload: matches=Matches
EVENT_BOARD_SHUFFLED = "board_shuffled"    # payload: moves=list[((x,y), (x,y))]
