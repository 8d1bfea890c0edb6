"""
Lazy fitness wrapper for population members.
Each unit's fitness is computed at most once and then served from cache.
"""

import time
from typing import Generic, Iterable, List, Optional, TypeVar

from epoch.interfaces import Unit
from epoch.logging_config import get_logger

logger = get_logger(__name__)

U = TypeVar("U", bound=Unit)


class LazyUnit(Generic[U]):
    """
    Wraps a unit and memoizes its fitness on first access.

    Fitness is assumed invariant for the unit's lifetime, so the cached
    score is never recomputed. Not thread-safe: a population buffer is
    owned by a single epoch at a time.
    """

    __slots__ = ("unit", "_fitness")

    def __init__(self, unit: U):
        self.unit = unit
        self._fitness: Optional[float] = None

    @classmethod
    def from_unit(cls, unit: U) -> "LazyUnit[U]":
        return cls(unit)

    @property
    def is_evaluated(self) -> bool:
        return self._fitness is not None

    @property
    def cached_fitness(self) -> Optional[float]:
        return self._fitness

    def fitness_lazy(self) -> float:
        """Return the cached fitness, evaluating the unit on first call."""
        if self._fitness is None:
            start = time.perf_counter()
            self._fitness = float(self.unit.evaluate_fitness())
            logger.unit_evaluated(
                self._fitness, int((time.perf_counter() - start) * 1000)
            )
        return self._fitness

    def __repr__(self) -> str:
        return f"LazyUnit({self.unit!r}, fitness={self._fitness!r})"


def wrap_all(units: Iterable[U]) -> List[LazyUnit[U]]:
    """Seed a population buffer from raw units."""
    return [LazyUnit(unit) for unit in units]
