"""
Centralized configuration management for epoch-breeder.
"""

import json
import logging
import os
from dataclasses import asdict, dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional

from pydantic import ValidationError

from epoch import DefaultEpoch, InvalidConfigError, RandomSource, as_random_source
from epoch.interfaces import DEFAULT_BREED_FACTOR, DEFAULT_SURVIVAL_FACTOR
from epoch.logging_config import configure_logging
from epoch_core.schemas import EpochSettingsInput, LoggingSettingsInput

logger = logging.getLogger(__name__)

DEFAULT_STATE_DIR = ".epoch-breeder"


@dataclass
class EpochSettings:
    """Selection and breeding settings."""

    breed_factor: float = DEFAULT_BREED_FACTOR
    survival_factor: float = DEFAULT_SURVIVAL_FACTOR
    target_size: Optional[int] = None
    seed: Optional[int] = None


@dataclass
class LoggingSettings:
    """Logging configuration."""

    level: str = "INFO"
    json_output: bool = False
    use_colors: bool = True
    log_file: Optional[str] = None


@dataclass
class Config:
    """Main configuration container."""

    epoch: EpochSettings = field(default_factory=EpochSettings)
    logging: LoggingSettings = field(default_factory=LoggingSettings)
    state_dir: str = DEFAULT_STATE_DIR

    def to_dict(self) -> Dict[str, Any]:
        """Convert config to dictionary."""
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Config":
        """Create config from dictionary, validating every section."""
        try:
            epoch_input = EpochSettingsInput(**data.get("epoch", {}))
            logging_input = LoggingSettingsInput(**data.get("logging", {}))
        except ValidationError as e:
            raise InvalidConfigError(_format_errors(e)) from e

        return cls(
            epoch=EpochSettings(**epoch_input.model_dump()),
            logging=LoggingSettings(**logging_input.model_dump()),
            state_dir=data.get("state_dir", DEFAULT_STATE_DIR),
        )

    def validate(self) -> "Config":
        """Re-validate the current values, returning a normalized copy."""
        return Config.from_dict(self.to_dict())

    def save(self, path: Optional[Path] = None) -> None:
        """Save config to file."""
        if path is None:
            path = Path(self.state_dir) / "config.json"
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, "w") as f:
            json.dump(self.to_dict(), f, indent=2)

    @classmethod
    def load(cls, path: Path) -> "Config":
        """Load config from file."""
        with open(path) as f:
            data = json.load(f)
        return cls.from_dict(data)

    def build_strategy(self) -> DefaultEpoch:
        """Create the epoch strategy described by this config."""
        return DefaultEpoch(
            breed_factor=self.epoch.breed_factor,
            survival_factor=self.epoch.survival_factor,
        )

    def build_random_source(self) -> RandomSource:
        """Create a random source, seeded when a seed is configured."""
        return as_random_source(self.epoch.seed)

    def apply_logging(self) -> None:
        """Configure the kernel's loggers from the logging section."""
        configure_logging(
            level=self.logging.level,
            json_output=self.logging.json_output,
            log_file=Path(self.logging.log_file) if self.logging.log_file else None,
            use_colors=self.logging.use_colors,
        )


def _format_errors(error: ValidationError) -> List[str]:
    return [
        f"{'.'.join(str(part) for part in err['loc'])}: {err['msg']}"
        for err in error.errors()
    ]


def get_config(
    config_path: Optional[Path] = None,
    state_dir: Optional[Path] = None,
) -> Config:
    """Get configuration, loading from file if available.

    Priority:
    1. Explicit config_path
    2. Config in state_dir
    3. Config in current directory
    4. Defaults

    Environment variables override whichever source was used.
    """
    paths_to_try = []

    if config_path:
        paths_to_try.append(config_path)
    if state_dir:
        paths_to_try.append(state_dir / "config.json")
    paths_to_try.extend(
        [
            Path(DEFAULT_STATE_DIR) / "config.json",
            Path("epoch-breeder.json"),
        ]
    )

    config = Config()
    for path in paths_to_try:
        if path.exists():
            config = Config.load(path)
            break

    _apply_env_overrides(config)
    return config.validate()


def _parse_optional_int(value: str) -> Optional[int]:
    if value.strip().lower() in ("", "none"):
        return None
    return int(value)


def _apply_env_overrides(config: Config) -> None:
    """Apply environment variable overrides to config."""
    env_mappings: Dict[str, tuple] = {
        "EPOCH_BREED_FACTOR": ("epoch", "breed_factor", float),
        "EPOCH_SURVIVAL_FACTOR": ("epoch", "survival_factor", float),
        "EPOCH_TARGET_SIZE": ("epoch", "target_size", _parse_optional_int),
        "EPOCH_SEED": ("epoch", "seed", _parse_optional_int),
        "EPOCH_LOG_LEVEL": ("logging", "level", str),
        "EPOCH_LOG_JSON": (
            "logging",
            "json_output",
            lambda x: x.lower() == "true",
        ),
        "EPOCH_STATE_DIR": (None, "state_dir", str),
    }

    for env_var, (section, key, converter) in env_mappings.items():
        value = os.environ.get(env_var)
        if value is not None:
            try:
                converted = converter(value)  # type: ignore[operator]
            except (ValueError, TypeError):
                logger.warning(f"Ignoring invalid value for {env_var}: {value!r}")
                continue
            if section:
                setattr(getattr(config, section), key, converted)
            else:
                setattr(config, key, converted)
