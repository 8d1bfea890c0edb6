"""
Pydantic schemas for configuration input.
Provides type validation and documentation for every configurable setting.
"""

from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from epoch.interfaces import DEFAULT_BREED_FACTOR, DEFAULT_SURVIVAL_FACTOR

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class EpochSettingsInput(BaseModel):
    """Input for the epoch strategy settings."""

    model_config = ConfigDict(extra="forbid")

    breed_factor: float = Field(
        default=DEFAULT_BREED_FACTOR,
        gt=0,
        le=1,
        description="Fraction of the sorted population eligible to breed",
    )
    survival_factor: float = Field(
        default=DEFAULT_SURVIVAL_FACTOR,
        gt=0,
        le=1,
        description="Fraction of breeders carried over unchanged",
    )
    target_size: Optional[int] = Field(
        default=None,
        ge=1,
        description="Size of each next generation; None keeps the current size",
    )
    seed: Optional[int] = Field(
        default=None, description="Random seed for reproducible breeding"
    )


class LoggingSettingsInput(BaseModel):
    """Input for logging settings."""

    model_config = ConfigDict(extra="forbid")

    level: LogLevel = Field(default="INFO", description="Log level name")
    json_output: bool = Field(default=False, description="Emit JSON log lines")
    use_colors: bool = Field(default=True, description="Colour console output")
    log_file: Optional[str] = Field(
        default=None, description="Optional JSON log file path"
    )

    @field_validator("level", mode="before")
    @classmethod
    def _upper_level(cls, value):
        if isinstance(value, str):
            return value.upper()
        return value
