from __future__ import annotations

import math
import sys
from collections.abc import MutableSequence, Sequence
from typing import Any, TypeVar

from randex.contracts import GaussianCache, GeneratorConfig, StringOptions
from randex.core.engine import PcgEngine
from randex.core.errors import InvalidArgumentError, NullReferenceError, require_ordered, require_positive
from randex.core.seeding import MASK64
from randex.distributions.charsets import character_pool

T = TypeVar("T")

MAX_FLOAT = sys.float_info.max
DOUBLE_MASK = (1 << 53) - 1
DOUBLE_SCALE = 1.0 / (1 << 53)
WORD_SPAN = 1 << 64


def _require_int(argument: str, value: Any) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidArgumentError(argument, f"expected an integer, got {type(value).__name__}")
    return value


def _require_char(argument: str, value: Any) -> str:
    if not isinstance(value, str) or len(value) != 1:
        raise InvalidArgumentError(argument, f"expected a single character, got {value!r}")
    return value


class Sampler:
    """Derives distributions from the raw words of one ``PcgEngine``.

    Every operation validates its arguments before touching the engine, so a
    rejected call never advances the stream.
    """

    def __init__(self, engine: PcgEngine | None = None, config: GeneratorConfig | None = None) -> None:
        self.config = config or GeneratorConfig()
        self.engine = engine or PcgEngine(policy=self.config.increment_policy)
        self.gaussian = GaussianCache()

    def set_seed(self, seed: int) -> None:
        self.engine.seed(seed)
        self.gaussian.clear()

    def next_int(self, min_value: int = 0, max_value: int | None = None) -> int:
        if max_value is None:
            max_value = self.config.max_int
        _require_int("min_value", min_value)
        _require_int("max_value", max_value)
        require_ordered("min_value", min_value, max_value)
        span = max_value - min_value
        if span > WORD_SPAN:
            raise InvalidArgumentError("max_value", f"range {span} exceeds a 64-bit word")

        if span & (span - 1) == 0:
            return min_value + (self.engine.next_u64() & (span - 1))

        while True:
            bits = self.engine.next_u64()
            result = bits % span
            if bits - result + (span - 1) <= MASK64:
                return min_value + result

    def next_double(self) -> float:
        return (self.engine.next_u64() & DOUBLE_MASK) * DOUBLE_SCALE

    def next_float(self, min_value: float = 0.0, max_value: float = MAX_FLOAT) -> float:
        require_ordered("min_value", min_value, max_value)
        return min_value + self.next_double() * (max_value - min_value)

    def next_gaussian(self) -> float:
        if self.gaussian.has_spare:
            spare = self.gaussian.spare
            self.gaussian.clear()
            return spare

        u1 = self.next_double()
        u2 = self.next_double()
        while u1 <= 0.0:
            u1 = self.next_double()
            u2 = self.next_double()

        radius = math.sqrt(-2.0 * math.log(u1))
        theta = 2.0 * math.pi * u2
        self.gaussian.has_spare = True
        self.gaussian.spare = radius * math.sin(theta)
        return radius * math.cos(theta)

    def next_bool(self) -> bool:
        return (self.engine.next() & 1) != 0

    def next_byte(self) -> int:
        return self.next_int(0, 256)

    def next_bytes(self, length: int) -> bytes:
        require_positive("length", length)
        buffer = bytearray()
        for offset in range(0, length, 8):
            word = self.engine.next_u64()
            buffer += word.to_bytes(8, "little")[: length - offset]
        return bytes(buffer)

    def next_char(self, min_char: str = " ", max_char: str = "~") -> str:
        _require_char("min_char", min_char)
        _require_char("max_char", max_char)
        require_ordered("min_char", min_char, max_char)
        return chr(self.next_int(ord(min_char), ord(max_char) + 1))

    def next_string(self, length: int, options: StringOptions | int | None = None) -> str:
        require_positive("length", length)
        if options is None:
            options = self.config.default_string_options
        pool = character_pool(StringOptions(options))
        if not pool:
            raise InvalidArgumentError("options", "no character sets selected")
        return "".join(pool[self.next_int(0, len(pool))] for _ in range(length))

    def next_element(self, items: Sequence[T] | None) -> T:
        if items is None:
            raise NullReferenceError("items")
        if not isinstance(items, Sequence):
            raise InvalidArgumentError("items", f"expected an indexable sequence, got {type(items).__name__}")
        if len(items) == 0:
            raise InvalidArgumentError("items", "sequence must not be empty")
        return items[self.next_int(0, len(items))]

    def shuffle(self, items: MutableSequence[Any] | None) -> None:
        if items is None:
            raise NullReferenceError("items")
        if not isinstance(items, MutableSequence):
            raise InvalidArgumentError("items", f"expected a mutable sequence, got {type(items).__name__}")
        for i in range(len(items) - 1, 0, -1):
            j = self.next_int(0, i + 1)
            if i != j:
                items[i], items[j] = items[j], items[i]
