"""Module-level draws bound to the calling context's sampler.

Each thread gets its own engine on first use; ``set_seed`` only affects the
thread that calls it.
"""

from __future__ import annotations

from datetime import datetime
from enum import Enum
from typing import Any, MutableSequence, Sequence, TypeVar

from randex.contracts import StringOptions
from randex.core.context import current_sampler
from randex.distributions import derived
from randex.distributions.sampler import MAX_FLOAT

T = TypeVar("T")
E = TypeVar("E", bound=Enum)


def set_seed(seed: int) -> None:
    current_sampler().set_seed(seed)


def next_int(min_value: int = 0, max_value: int | None = None) -> int:
    return current_sampler().next_int(min_value, max_value)


def next_float(min_value: float = 0.0, max_value: float = MAX_FLOAT) -> float:
    return current_sampler().next_float(min_value, max_value)


def next_double() -> float:
    return current_sampler().next_double()


def next_gaussian() -> float:
    return current_sampler().next_gaussian()


def next_bool() -> bool:
    return current_sampler().next_bool()


def next_byte() -> int:
    return current_sampler().next_byte()


def next_bytes(length: int) -> bytes:
    return current_sampler().next_bytes(length)


def next_char(min_char: str = " ", max_char: str = "~") -> str:
    return current_sampler().next_char(min_char, max_char)


def next_string(length: int, options: StringOptions | int | None = None) -> str:
    return current_sampler().next_string(length, options)


def next_element(items: Sequence[T] | None) -> T:
    return current_sampler().next_element(items)


def shuffle(items: MutableSequence[Any] | None) -> None:
    current_sampler().shuffle(items)


def byte_color() -> tuple[int, int, int]:
    return derived.byte_color(current_sampler())


def hex_color() -> str:
    return derived.hex_color(current_sampler())


def geo_coordinate() -> tuple[float, float]:
    return derived.geo_coordinate(current_sampler())


def date_time(min_date: datetime | None = None, max_date: datetime | None = None) -> datetime:
    return derived.date_time(current_sampler(), min_date, max_date)


def enum_member(enum_cls: type[E]) -> E:
    return derived.enum_member(current_sampler(), enum_cls)
