"""
Epoch module for Epoch Breeder.
Provides one generational selection and breeding step over a population.
"""

from .engine import DefaultEpoch, EpochConfig, EpochReport
from .errors import (
    EmptyPopulationError,
    EpochError,
    InvalidConfigError,
    InvalidTargetSizeError,
)
from .interfaces import Epoch, RandomSource, Unit, ValidationResult
from .lazy import LazyUnit, wrap_all
from .random_source import StdRandomSource, as_random_source

__all__ = [
    "DefaultEpoch",
    "EpochConfig",
    "EpochReport",
    "Epoch",
    "Unit",
    "RandomSource",
    "ValidationResult",
    "LazyUnit",
    "wrap_all",
    "StdRandomSource",
    "as_random_source",
    "EpochError",
    "EmptyPopulationError",
    "InvalidConfigError",
    "InvalidTargetSizeError",
]
