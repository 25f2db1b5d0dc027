from __future__ import annotations

import re
from datetime import datetime
from enum import Enum

import pytest

import randex
from randex.core import InvalidArgumentError, NullReferenceError, default_config, default_registry


class Suit(Enum):
    CLUBS = "clubs"
    DIAMONDS = "diamonds"
    HEARTS = "hearts"
    SPADES = "spades"


class Nothing(Enum):
    pass


@pytest.fixture(autouse=True)
def fresh_context():
    registry = default_registry()
    registry.configure(default_config())
    registry.discard()
    yield
    registry.discard()


@pytest.mark.parametrize("seed", [1, 10, 100, 1000, 10000, 100000])
def test_set_seed_reproduces_draws(seed):
    randex.set_seed(seed)
    first = randex.next_int()

    randex.set_seed(seed)
    second = randex.next_int()

    randex.set_seed(seed + 1)
    third = randex.next_int()

    assert first == second
    assert second != third


@pytest.mark.parametrize("seed", [0, -1])
def test_set_seed_rejects_non_positive(seed):
    with pytest.raises(InvalidArgumentError):
        randex.set_seed(seed)


def test_facade_draws():
    randex.set_seed(42)

    assert 0 <= randex.next_int(0, 10) < 10
    assert 0.0 <= randex.next_double() < 1.0
    assert 1.0 <= randex.next_float(1.0, 2.0) < 2.0
    assert isinstance(randex.next_gaussian(), float)
    assert isinstance(randex.next_bool(), bool)
    assert 0 <= randex.next_byte() < 256
    assert len(randex.next_bytes(13)) == 13
    assert "a" <= randex.next_char("a", "f") <= "f"
    assert len(randex.next_string(9, randex.StringOptions.NUMBERS)) == 9
    assert randex.next_element(["x", "y"]) in {"x", "y"}


def test_facade_shuffle_and_errors():
    items = list(range(10))
    randex.shuffle(items)
    assert sorted(items) == list(range(10))

    with pytest.raises(NullReferenceError):
        randex.shuffle(None)
    with pytest.raises(InvalidArgumentError):
        randex.next_element([])
    with pytest.raises(InvalidArgumentError):
        randex.next_int(10, 3)


def test_byte_color_components():
    colors = [randex.byte_color() for _ in range(2000)]
    assert all(0 <= c < 256 for color in colors for c in color)
    assert len(set(colors)) > 100


def test_hex_color_format():
    colors = [randex.hex_color() for _ in range(2000)]
    assert all(re.fullmatch(r"#[0-9A-F]{6}", color) for color in colors)
    assert len(set(colors)) > 100


def test_geo_coordinate_bounds():
    for _ in range(2000):
        latitude, longitude = randex.geo_coordinate()
        assert -90.0 <= latitude <= 90.0
        assert -180.0 <= longitude <= 180.0
        assert round(latitude, 6) == latitude


def test_date_time_between_bounds():
    low = datetime(2020, 1, 1)
    high = datetime(2020, 12, 31)
    values = [randex.date_time(low, high) for _ in range(500)]

    assert all(low <= value < high for value in values)
    assert len(set(values)) > 100


def test_date_time_defaults_and_rejection():
    assert datetime.min <= randex.date_time() < datetime.max
    with pytest.raises(InvalidArgumentError):
        randex.date_time(datetime(2020, 1, 1), datetime(2020, 1, 1))


def test_enum_member_selection():
    picked = {randex.enum_member(Suit) for _ in range(500)}
    assert picked == set(Suit)
    with pytest.raises(InvalidArgumentError):
        randex.enum_member(Nothing)
