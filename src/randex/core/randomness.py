from __future__ import annotations

import hashlib
from typing import Any, MutableSequence, Sequence

from randex.contracts import GeneratorConfig, RandomSource
from randex.core.engine import PcgEngine
from randex.core.errors import InvalidArgumentError
from randex.distributions.sampler import Sampler


class PcgRandomSource(RandomSource):
    """Injectable randomness source backed by a private PCG sampler."""

    def __init__(self, seed: int | None = None, config: GeneratorConfig | None = None) -> None:
        self._seed = seed
        self._config = config or GeneratorConfig()
        self._sampler = Sampler(PcgEngine(policy=self._config.increment_policy), config=self._config)
        if seed is not None:
            self._sampler.set_seed(seed)

    @property
    def sampler(self) -> Sampler:
        return self._sampler

    def rand(self) -> float:
        return self._sampler.next_double()

    def randint(self, a: int, b: int) -> int:
        if a > b:
            raise InvalidArgumentError("a", f"{a} must not exceed {b}")
        return self._sampler.next_int(a, b + 1)

    def choice(self, items: Sequence[Any]) -> Any:
        return self._sampler.next_element(items)

    def shuffle(self, items: MutableSequence[Any]) -> None:
        self._sampler.shuffle(items)

    def gauss(self, mu: float = 0.0, sigma: float = 1.0) -> float:
        return mu + sigma * self._sampler.next_gaussian()

    def spawn(self, substream_id: str) -> RandomSource:
        seed = self._seed
        if seed is None:
            return PcgRandomSource(seed=None, config=self._config)
        digest = hashlib.sha256(f"{seed}:{substream_id}".encode("utf-8")).hexdigest()
        # keep the child seed positive and inside the signed 63-bit range
        child_seed = (int(digest[:16], 16) >> 1) or 1
        return PcgRandomSource(seed=child_seed, config=self._config)


def ambient_random(config: GeneratorConfig | None = None) -> PcgRandomSource:
    return PcgRandomSource(seed=None, config=config)


def seeded_random(seed: int, config: GeneratorConfig | None = None) -> PcgRandomSource:
    return PcgRandomSource(seed=seed, config=config)
