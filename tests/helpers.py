from __future__ import annotations

from typing import Callable, Iterable

from randex.core import PcgEngine
from randex.distributions import Sampler

MASK64 = (1 << 64) - 1
STAT_SEEDS = (11, 23, 37, 41, 59)


class ScriptedEngine:
    """Engine stand-in that replays a fixed list of 64-bit words."""

    def __init__(self, words: Iterable[int], bits: Iterable[int] = ()) -> None:
        self._words = list(words)
        self._bits = list(bits)
        self.steps = 0

    def next(self) -> int:
        self.steps += 1
        return self._bits.pop(0)

    def next_u64(self) -> int:
        self.steps += 2
        return self._words.pop(0)

    def remaining(self) -> int:
        return len(self._words)


class ConstantEngine:
    def __init__(self, word: int) -> None:
        self.word = word
        self.steps = 0

    def next(self) -> int:
        self.steps += 1
        return self.word & 0xFFFFFFFF

    def next_u64(self) -> int:
        self.steps += 2
        return self.word


def pinned_sampler(state: int, increment: int) -> Sampler:
    return Sampler(PcgEngine(state=state, increment=increment))


def seeded_sampler(seed: int) -> Sampler:
    sampler = Sampler()
    sampler.set_seed(seed)
    return sampler


def passes_for_most_seeds(check: Callable[[Sampler], bool], seeds: Iterable[int] = STAT_SEEDS) -> bool:
    """A sound 0.05-level test still fails for one seed in twenty; require a clear majority."""
    results = [check(seeded_sampler(seed)) for seed in seeds]
    return sum(results) >= len(results) - 2
