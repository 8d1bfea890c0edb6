"""
epoch-breeder - single-step generational replacement for evolutionary search.
"""

from epoch import (
    DefaultEpoch,
    Epoch,
    EpochConfig,
    EpochReport,
    LazyUnit,
    RandomSource,
    Unit,
)
from epoch_core.config import Config, EpochSettings, LoggingSettings, get_config

__version__ = "0.1.0"

__all__ = [
    "DefaultEpoch",
    "Epoch",
    "EpochConfig",
    "EpochReport",
    "LazyUnit",
    "RandomSource",
    "Unit",
    "Config",
    "EpochSettings",
    "LoggingSettings",
    "get_config",
]
