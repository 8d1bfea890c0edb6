"""
Unit tests for LazyUnit.
Tests read-through fitness memoization with counting stub units.
"""

import logging
import math

import pytest

from epoch.interfaces import Unit
from epoch.lazy import LazyUnit, wrap_all


class CountingUnit(Unit):
    """Stub unit that records how often its fitness is computed"""

    def __init__(self, fitness: float):
        self.fitness = fitness
        self.evaluations = 0

    def evaluate_fitness(self) -> float:
        self.evaluations += 1
        return self.fitness

    def breed(self, other: "CountingUnit") -> "CountingUnit":
        return CountingUnit((self.fitness + other.fitness) / 2)


def test_fitness_evaluated_once():
    """Repeated access triggers a single underlying evaluation"""
    unit = CountingUnit(3.5)
    lazy = LazyUnit(unit)

    values = [lazy.fitness_lazy() for _ in range(5)]

    assert values == [3.5] * 5
    assert unit.evaluations == 1


def test_starts_unevaluated():
    """A fresh wrapper has an empty cache and does not evaluate eagerly"""
    unit = CountingUnit(1.0)
    lazy = LazyUnit.from_unit(unit)

    assert not lazy.is_evaluated
    assert lazy.cached_fitness is None
    assert unit.evaluations == 0

    lazy.fitness_lazy()

    assert lazy.is_evaluated
    assert lazy.cached_fitness == 1.0


def test_nan_fitness_is_cached():
    """NaN is a valid cached value, not a missing one"""
    unit = CountingUnit(float("nan"))
    lazy = LazyUnit(unit)

    assert math.isnan(lazy.fitness_lazy())
    assert math.isnan(lazy.fitness_lazy())
    assert unit.evaluations == 1
    assert lazy.is_evaluated


def test_integer_fitness_is_coerced_to_float():
    """Units may report integral scores"""
    unit = CountingUnit(7)
    lazy = LazyUnit(unit)

    assert isinstance(lazy.fitness_lazy(), float)
    assert lazy.fitness_lazy() == 7.0


def test_evaluation_error_propagates_and_leaves_cache_empty():
    """A failing fitness function is the caller's concern"""

    class FailingUnit(CountingUnit):
        def evaluate_fitness(self) -> float:
            raise RuntimeError("simulation crashed")

    lazy = LazyUnit(FailingUnit(0.0))

    with pytest.raises(RuntimeError, match="simulation crashed"):
        lazy.fitness_lazy()
    assert not lazy.is_evaluated


def test_wrap_all():
    """Seeding a population wraps every unit with an empty cache"""
    units = [CountingUnit(float(i)) for i in range(4)]

    population = wrap_all(units)

    assert len(population) == 4
    assert [member.unit for member in population] == units
    assert not any(member.is_evaluated for member in population)


def test_evaluation_logged_at_debug(caplog):
    """Each real evaluation produces one debug record"""
    lazy = LazyUnit(CountingUnit(2.0))

    with caplog.at_level(logging.DEBUG, logger="epoch"):
        lazy.fitness_lazy()
        lazy.fitness_lazy()

    records = [r for r in caplog.records if r.getMessage() == "Evaluated unit"]
    assert len(records) == 1
    assert records[0].fitness == 2.0
    assert records[0].event_type == "unit_evaluated"
