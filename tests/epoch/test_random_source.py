"""Unit tests for random source adapters."""

import random

import pytest

from epoch.interfaces import RandomSource
from epoch.random_source import StdRandomSource, as_random_source


def test_std_source_samples_half_open_range():
    source = StdRandomSource(seed=3)

    samples = {source.sample_index(0, 4) for _ in range(200)}

    assert samples == {0, 1, 2, 3}


def test_std_source_single_value_range():
    source = StdRandomSource(seed=3)

    assert all(source.sample_index(0, 1) == 0 for _ in range(10))


def test_std_source_rejects_rng_and_seed():
    with pytest.raises(ValueError):
        StdRandomSource(rng=random.Random(), seed=1)


def test_as_random_source_passthrough():
    source = StdRandomSource()

    assert as_random_source(source) is source


def test_as_random_source_wraps_generator():
    rng = random.Random(5)

    source = as_random_source(rng)

    assert isinstance(source, StdRandomSource)
    assert source.rng is rng


def test_as_random_source_seed_is_reproducible():
    first = as_random_source(17)
    second = as_random_source(17)

    assert [first.sample_index(0, 100) for _ in range(10)] == [
        second.sample_index(0, 100) for _ in range(10)
    ]


def test_as_random_source_none():
    assert isinstance(as_random_source(None), RandomSource)


@pytest.mark.parametrize("value", ["seed", 1.5, True])
def test_as_random_source_rejects_other_types(value):
    with pytest.raises(TypeError):
        as_random_source(value)
