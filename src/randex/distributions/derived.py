from __future__ import annotations

from datetime import datetime, timedelta
from enum import Enum
from typing import TypeVar

from randex.core.errors import InvalidArgumentError, require_ordered
from randex.distributions.sampler import Sampler

E = TypeVar("E", bound=Enum)

_MICROSECOND = timedelta(microseconds=1)


def byte_color(sampler: Sampler) -> tuple[int, int, int]:
    return sampler.next_byte(), sampler.next_byte(), sampler.next_byte()


def hex_color(sampler: Sampler) -> str:
    red, green, blue = (sampler.next_int(0, 256) for _ in range(3))
    return f"#{red:02X}{green:02X}{blue:02X}"


def geo_coordinate(sampler: Sampler) -> tuple[float, float]:
    latitude = sampler.next_double() * 180.0 - 90.0
    longitude = sampler.next_double() * 360.0 - 180.0
    return round(latitude, 6), round(longitude, 6)


def date_time(sampler: Sampler, min_date: datetime | None = None, max_date: datetime | None = None) -> datetime:
    """Uniform instant in ``[min_date, max_date)`` at microsecond resolution."""
    if min_date is None:
        min_date = datetime.min
    if max_date is None:
        max_date = datetime.max
    require_ordered("min_date", min_date, max_date)
    span = (max_date - min_date) // _MICROSECOND
    # double rounding can land on span itself for spans wider than 2**53 microseconds
    offset = min(int(sampler.next_double() * span), span - 1)
    return min_date + timedelta(microseconds=offset)


def enum_member(sampler: Sampler, enum_cls: type[E]) -> E:
    members = list(enum_cls)
    if not members:
        raise InvalidArgumentError("enum_cls", f"{enum_cls.__name__} has no members")
    return sampler.next_element(members)
