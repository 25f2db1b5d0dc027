from __future__ import annotations

import logging

from randex.contracts import GeneratorState, IncrementPolicy
from randex.core.errors import InvalidArgumentError, require_positive
from randex.core.seeding import MASK32, MASK64, ambient_increment, generate_seed, seeded_increment

logger = logging.getLogger(__name__)

MULTIPLIER = 6364136223846793005


def rotate_right32(value: int, count: int) -> int:
    count &= 31
    value &= MASK32
    return ((value >> count) | (value << ((32 - count) & 31))) & MASK32


class PcgEngine:
    """PCG-XSH-RR bit generator owned by a single execution context.

    The 64-bit LCG state advances once per ``next()`` call; the emitted word is
    the xorshifted high bits of the *previous* state rotated by its top five
    bits, which yields 32 well-mixed output bits per step.
    """

    __slots__ = ("_state", "_increment", "_policy", "_context_id", "steps")

    def __init__(
        self,
        state: int | None = None,
        increment: int | None = None,
        *,
        policy: IncrementPolicy = IncrementPolicy.SEEDED,
        context_id: int | None = None,
    ) -> None:
        self._context_id = context_id
        self._policy = policy
        self._state = (generate_seed(context_id) if state is None else state) & MASK64
        if increment is None:
            increment = ambient_increment(context_id)
        self._increment = (increment | 1) & MASK64
        self.steps = 0

    @classmethod
    def from_stream(cls, initstate: int, initseq: int) -> PcgEngine:
        engine = cls(state=0, increment=((initseq & MASK64) << 1) | 1)
        engine.next()
        engine._state = (engine._state + (initstate & MASK64)) & MASK64
        engine.next()
        engine.steps = 0
        return engine

    @property
    def policy(self) -> IncrementPolicy:
        return self._policy

    @property
    def state(self) -> int:
        return self._state

    def next(self) -> int:
        old = self._state
        self._state = (old * MULTIPLIER + self._increment) & MASK64
        self.steps += 1
        xorshifted = ((old ^ (old >> 18)) >> 27) & MASK32
        return rotate_right32(xorshifted, old >> 59)

    def next_u64(self) -> int:
        high = self.next()
        return (high << 32) | self.next()

    def seed(self, seed: int) -> None:
        require_positive("seed", seed)
        if self._policy is IncrementPolicy.SEEDED:
            increment = seeded_increment(seed)
        elif self._policy is IncrementPolicy.AMBIENT:
            increment = ambient_increment(self._context_id)
        else:
            raise InvalidArgumentError("policy", f"unknown increment policy {self._policy!r}")
        self._state = (seed * MULTIPLIER) & MASK64
        self._increment = increment
        logger.debug("engine reseeded seed=%d policy=%s", seed, self._policy.value)

    def snapshot(self) -> GeneratorState:
        return GeneratorState(state=self._state, increment=self._increment)

    def restore(self, snapshot: GeneratorState) -> None:
        if snapshot.increment % 2 == 0:
            raise InvalidArgumentError("increment", "stream increment must be odd")
        self._state = snapshot.state & MASK64
        self._increment = snapshot.increment & MASK64
