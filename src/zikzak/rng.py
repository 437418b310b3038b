"""
Seeded 64-bit linear congruential generator.

The opponent's moves are derived from this generator both during a live
game and when a transcript is replayed, so every step must wrap modulo
2**64 exactly.
"""

import time

MULTIPLIER = 6364136223846793005
INCREMENT = 1442695040888963407
MASK64 = (1 << 64) - 1


class SimpleRNG:
    """LCG over unsigned 64-bit state."""

    def __init__(self, seed: int):
        if not 0 <= seed <= MASK64:
            raise ValueError(f"seed must fit in 64 unsigned bits, got {seed}")
        self.seed = seed
        self.state = seed

    @classmethod
    def from_clock(cls) -> "SimpleRNG":
        """Seed from wall-clock seconds since the epoch."""
        return cls(int(time.time()) & MASK64)

    def draw(self) -> int:
        """Advance the state and return it."""
        self.state = (self.state * MULTIPLIER + INCREMENT) & MASK64
        return self.state

    def pick_in_range(self, lo: int, hi: int) -> int:
        """Value in [lo, hi] (inclusive)."""
        if hi < lo:
            raise ValueError(f"empty range [{lo}, {hi}]")
        return lo + self.draw() % (hi - lo + 1)
