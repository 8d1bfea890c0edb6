"""
Epoch strategy implementation for Epoch Breeder.
Selects breeders from a population, keeps the strongest and refills the
buffer with offspring.
"""

import math
import time
from dataclasses import dataclass, field
from datetime import datetime
from functools import cmp_to_key
from typing import Any, Callable, Dict, List, Optional, Tuple

from epoch.errors import (
    EmptyPopulationError,
    InvalidConfigError,
    InvalidTargetSizeError,
)
from epoch.interfaces import (
    DEFAULT_BREED_FACTOR,
    DEFAULT_SURVIVAL_FACTOR,
    Epoch,
    ValidationResult,
)
from epoch.lazy import LazyUnit
from epoch.logging_config import get_logger
from epoch.random_source import as_random_source

logger = get_logger(__name__)


@dataclass(frozen=True)
class EpochConfig:
    """Configuration for the default epoch strategy"""

    breed_factor: float = DEFAULT_BREED_FACTOR
    survival_factor: float = DEFAULT_SURVIVAL_FACTOR

    def validate(self) -> ValidationResult:
        """Check both factors lie in (0, 1]."""
        errors = []
        for name in ("breed_factor", "survival_factor"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, (int, float)):
                errors.append(f"{name} must be a number, got {value!r}")
            elif not 0 < value <= 1:
                errors.append(f"{name} must be in (0, 1], got {value!r}")
        return ValidationResult(is_valid=not errors, errors=errors)


@dataclass
class EpochReport:
    """Summary of a completed epoch"""

    population_size: int
    target_size: int
    breeders: int
    survivors: int
    offspring: int
    evaluations: int
    best_fitness: float
    worst_fitness: float
    duration_seconds: float
    timestamp: datetime = field(default_factory=datetime.now)


def _compare_fitness(a: LazyUnit, b: LazyUnit) -> int:
    """Order by fitness ascending; incomparable values (NaN) tie."""
    fa = a.fitness_lazy()
    fb = b.fitness_lazy()
    if fa < fb:
        return -1
    if fa > fb:
        return 1
    return 0


class DefaultEpoch(Epoch):
    """
    Epoch that lets units breed without harsh culling.

    The top ``breed_factor`` share of the population breeds, and the
    strongest ``survival_factor`` share of those breeders is carried into
    the next generation unchanged. Weaker breeders still pass on their
    genes, which helps the population escape local peaks.
    """

    def __init__(
        self,
        breed_factor: float = DEFAULT_BREED_FACTOR,
        survival_factor: float = DEFAULT_SURVIVAL_FACTOR,
        config: Optional[EpochConfig] = None,
    ):
        self.config = config or EpochConfig(breed_factor, survival_factor)

        result = self.config.validate()
        if not result.is_valid:
            raise InvalidConfigError(result.errors)

        self.event_listeners: List[Tuple[str, Callable]] = []

    @property
    def breed_factor(self) -> float:
        return self.config.breed_factor

    @property
    def survival_factor(self) -> float:
        return self.config.survival_factor

    def breeder_count(self, population_size: int) -> int:
        """Number of breeders drawn from a population of this size.

        When ``breed_factor`` rounds down to no breeders, the whole
        population breeds.
        """
        if population_size <= 0:
            return 0
        breed_up_to = int(self.breed_factor * population_size)
        if breed_up_to == 0:
            return population_size
        return min(population_size, breed_up_to)

    def survivor_count(self, breeder_count: int) -> int:
        """Number of breeders carried over unchanged. Always at least one."""
        if breeder_count <= 0:
            return 0
        surviving = math.ceil(self.survival_factor * breeder_count)
        return min(breeder_count, max(1, surviving))

    def run_epoch(
        self,
        population: List[LazyUnit],
        target_size: Optional[int] = None,
        rng: Any = None,
    ) -> bool:
        """
        Replace ``population`` in place with the next generation.

        Steps:
        1. Sort by fitness, strongest last
        2. Take the strongest units as breeders
        3. Breed offspring until the target size less survivors is reached
        4. Append the surviving breeders after the offspring

        The next generation is assembled separately and swapped in at the
        end, so a failing ``breed`` leaves the sorted current generation in
        the buffer.
        """
        if not population:
            raise EmptyPopulationError()

        population_size = len(population)
        if target_size is None:
            target_size = population_size

        breed_up_to = self.breeder_count(population_size)
        surviving_parents = self.survivor_count(breed_up_to)
        if isinstance(target_size, bool) or not isinstance(target_size, int):
            raise InvalidTargetSizeError(
                target_size,
                surviving_parents,
                reason=f"Target size must be an integer, got {target_size!r}",
            )
        if target_size < surviving_parents:
            raise InvalidTargetSizeError(target_size, surviving_parents)

        source = as_random_source(rng)
        start_time = time.perf_counter()

        logger.epoch_started(population_size, target_size)
        self._emit_event(
            "epoch_started",
            {"population_size": population_size, "target_size": target_size},
        )

        evaluations = sum(1 for member in population if not member.is_evaluated)
        population.sort(key=cmp_to_key(_compare_fitness))
        worst_fitness = population[0].fitness_lazy()

        # Strongest first
        breeders = list(reversed(population[population_size - breed_up_to :]))

        next_generation: List[LazyUnit] = []
        for i in range(target_size - surviving_parents):
            mate = breeders[source.sample_index(0, len(breeders))]
            child = breeders[i % len(breeders)].unit.breed(mate.unit)
            next_generation.append(LazyUnit(child))

        # Move our survivors into the new generation
        next_generation.extend(breeders[:surviving_parents])

        population[:] = next_generation

        duration = time.perf_counter() - start_time
        report = EpochReport(
            population_size=population_size,
            target_size=target_size,
            breeders=len(breeders),
            survivors=surviving_parents,
            offspring=target_size - surviving_parents,
            evaluations=evaluations,
            best_fitness=breeders[0].fitness_lazy(),
            worst_fitness=worst_fitness,
            duration_seconds=duration,
        )

        logger.epoch_complete(
            population_size=population_size,
            breeders=report.breeders,
            survivors=report.survivors,
            offspring=report.offspring,
            best_fitness=report.best_fitness,
            duration_ms=int(duration * 1000),
        )
        self._emit_event("epoch_completed", {"report": report})

        return True

    def add_event_listener(self, event_type: str, callback: Callable):
        """Add event listener for epoch events"""
        self.event_listeners.append((event_type, callback))

    def _emit_event(self, event_type: str, data: Dict[str, Any]):
        """Emit event to all registered listeners"""
        for listener_type, callback in self.event_listeners:
            if listener_type == event_type:
                try:
                    callback(data)
                except Exception as e:
                    logger.error(f"Event listener error: {e}")

    def __repr__(self) -> str:
        return (
            f"DefaultEpoch(breed_factor={self.breed_factor}, "
            f"survival_factor={self.survival_factor})"
        )
