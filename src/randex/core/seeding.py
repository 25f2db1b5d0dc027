from __future__ import annotations

import threading
import time

MASK32 = (1 << 32) - 1
MASK64 = (1 << 64) - 1
AMBIENT_WINDOW_NS = 1_000_000_000


def _splitmix64(x: int) -> int:
    x = (x + 0x9E3779B97F4A7C15) & MASK64
    z = x
    z = (z ^ (z >> 30)) * 0xBF58476D1CE4E5B9 & MASK64
    z = (z ^ (z >> 27)) * 0x94D049BB133111EB & MASK64
    return z ^ (z >> 31)


def generate_seed(context_id: int | None = None) -> int:
    """Pack wall-clock nanoseconds and a monotonic tick into one 64-bit seed.

    The high half carries the wall clock, the low half the monotonic counter
    mixed with the context identity, so two contexts started in the same
    instant still get different seeds.
    """
    if context_id is None:
        context_id = threading.get_ident()
    wall = time.time_ns() & MASK32
    tick = (time.monotonic_ns() ^ context_id) & MASK32
    return ((wall << 32) | tick) & MASK64


def ambient_increment(context_id: int | None = None) -> int:
    """Odd increment from the context identity and the current wall-clock window.

    Reseeds that land in the same window reuse the increment, so repeating
    ``seed(s)`` right away repeats the draws that follow it.
    """
    if context_id is None:
        context_id = threading.get_ident()
    window = (time.time_ns() // AMBIENT_WINDOW_NS) & MASK32
    return _splitmix64((window << 32) ^ (context_id & MASK64)) | 1


def seeded_increment(seed: int) -> int:
    return _splitmix64(seed & MASK64) | 1
