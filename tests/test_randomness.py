from __future__ import annotations

import pytest

from randex.contracts import RandomSource
from randex.core import InvalidArgumentError, PcgRandomSource, ambient_random, seeded_random


def _draws(source: RandomSource) -> list[float]:
    return [source.rand() for _ in range(5)]


def test_seeded_sources_are_reproducible():
    assert _draws(seeded_random(7)) == _draws(seeded_random(7))
    assert _draws(seeded_random(7)) != _draws(seeded_random(8))


def test_randint_is_inclusive():
    source = seeded_random(3)
    values = {source.randint(1, 6) for _ in range(600)}
    assert values == {1, 2, 3, 4, 5, 6}
    assert source.randint(4, 4) == 4


def test_randint_rejects_reversed_bounds():
    with pytest.raises(InvalidArgumentError):
        seeded_random(3).randint(6, 1)


def test_choice_and_shuffle():
    source = seeded_random(3)
    assert source.choice(["a", "b", "c"]) in {"a", "b", "c"}
    with pytest.raises(ValueError):
        source.choice([])

    items = list(range(12))
    source.shuffle(items)
    assert sorted(items) == list(range(12))


def test_gauss_scales_standard_normal():
    a = seeded_random(9)
    b = seeded_random(9)
    assert a.gauss(10.0, 2.0) == pytest.approx(10.0 + 2.0 * b.sampler.next_gaussian())


def test_spawn_is_deterministic_per_substream():
    parent = seeded_random(123)
    assert _draws(parent.spawn("session")) == _draws(seeded_random(123).spawn("session"))
    assert _draws(parent.spawn("session")) != _draws(parent.spawn("injury"))


def test_spawn_of_unseeded_source_is_unseeded():
    child = ambient_random().spawn("anything")
    assert isinstance(child, PcgRandomSource)
    assert 0.0 <= child.rand() < 1.0
