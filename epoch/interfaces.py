"""Epoch Breeder: Core Interface Definitions"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, List, Optional

# Data Classes (Essentials)


@dataclass
class ValidationResult:
    """Validation output."""

    is_valid: bool
    errors: List[str] = field(default_factory=list)


# Core Interfaces (Simplified Abstracts)


class Unit(ABC):
    """Candidate solution; fitness and crossover supplied by the caller."""

    @abstractmethod
    def evaluate_fitness(self) -> float:
        pass

    @abstractmethod
    def breed(self, other: "Unit") -> "Unit":
        pass


class RandomSource(ABC):
    """Uniform integer sampling over a half-open range."""

    @abstractmethod
    def sample_index(self, start: int, stop: int) -> int:
        pass


class Epoch(ABC):
    """One generational replacement step over a population buffer."""

    @abstractmethod
    def run_epoch(
        self,
        population: List[Any],
        target_size: Optional[int] = None,
        rng: Any = None,
    ) -> bool:
        pass


# Constants (Defaults)

DEFAULT_BREED_FACTOR = 0.2
DEFAULT_SURVIVAL_FACTOR = 0.5
