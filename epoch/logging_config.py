"""
Structured logging configuration for Epoch Breeder.
Provides consistent logging across the kernel with JSON output support.
"""

import json
import logging
import sys
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, Optional

_CONTEXT_FIELDS = (
    "event_type",
    "population_size",
    "target_size",
    "breeders",
    "survivors",
    "offspring",
    "evaluations",
    "fitness",
    "worst_fitness",
    "duration_ms",
)


class StructuredFormatter(logging.Formatter):
    """JSON-formatted log output for structured logging."""

    def format(self, record: logging.LogRecord) -> str:
        log_data: Dict[str, Any] = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        for name in _CONTEXT_FIELDS:
            if hasattr(record, name):
                log_data[name] = getattr(record, name)

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        return json.dumps(log_data)


class HumanFormatter(logging.Formatter):
    """Human-readable log format for console output."""

    COLORS = {
        "DEBUG": "\033[36m",  # Cyan
        "INFO": "\033[32m",  # Green
        "WARNING": "\033[33m",  # Yellow
        "ERROR": "\033[31m",  # Red
        "CRITICAL": "\033[35m",  # Magenta
    }
    RESET = "\033[0m"

    def __init__(self, use_colors: bool = True):
        super().__init__()
        self.use_colors = use_colors

    def format(self, record: logging.LogRecord) -> str:
        ts = datetime.now(timezone.utc).strftime("%H:%M:%S")
        level = record.levelname[:4]

        if self.use_colors:
            color = self.COLORS.get(record.levelname, "")
            level = f"{color}{level}{self.RESET}"

        msg = record.getMessage()

        extras = []
        if hasattr(record, "population_size"):
            extras.append(f"size={record.population_size}")
        if hasattr(record, "breeders"):
            extras.append(f"breeders={record.breeders}")
        if hasattr(record, "survivors"):
            extras.append(f"survivors={record.survivors}")
        if hasattr(record, "fitness"):
            extras.append(f"fitness={record.fitness:.4f}")
        if hasattr(record, "duration_ms"):
            extras.append(f"took={record.duration_ms}ms")

        extra_str = f" [{', '.join(extras)}]" if extras else ""

        return f"{ts} {level} {record.name}: {msg}{extra_str}"


class EpochLogger:
    """Logger for epoch events with structured context."""

    def __init__(self, name: str = "epoch"):
        self.logger = logging.getLogger(name)
        self._context: Dict[str, Any] = {}

    def set_context(self, **kwargs) -> None:
        """Set persistent context for all log messages."""
        self._context.update(kwargs)

    def clear_context(self) -> None:
        self._context.clear()

    def _log(self, level: int, msg: str, **kwargs) -> None:
        if not self.logger.isEnabledFor(level):
            return
        extra = {**self._context, **kwargs}
        self.logger.log(level, msg, extra=extra)

    def debug(self, msg: str, **kwargs) -> None:
        self._log(logging.DEBUG, msg, **kwargs)

    def info(self, msg: str, **kwargs) -> None:
        self._log(logging.INFO, msg, **kwargs)

    def warning(self, msg: str, **kwargs) -> None:
        self._log(logging.WARNING, msg, **kwargs)

    def error(self, msg: str, **kwargs) -> None:
        self._log(logging.ERROR, msg, **kwargs)

    # Epoch-specific logging methods
    def epoch_started(self, population_size: int, target_size: int) -> None:
        self.debug(
            "Starting epoch",
            event_type="epoch_started",
            population_size=population_size,
            target_size=target_size,
        )

    def epoch_complete(
        self,
        population_size: int,
        breeders: int,
        survivors: int,
        offspring: int,
        best_fitness: float,
        duration_ms: int,
    ) -> None:
        self.info(
            f"Epoch complete, bred {offspring} offspring",
            event_type="epoch_complete",
            population_size=population_size,
            breeders=breeders,
            survivors=survivors,
            offspring=offspring,
            fitness=best_fitness,
            duration_ms=duration_ms,
        )

    def unit_evaluated(self, fitness: float, duration_ms: int) -> None:
        self.debug(
            "Evaluated unit",
            event_type="unit_evaluated",
            fitness=fitness,
            duration_ms=duration_ms,
        )


def configure_logging(
    level: str = "INFO",
    json_output: bool = False,
    log_file: Optional[Path] = None,
    use_colors: bool = True,
) -> None:
    """Configure logging for the kernel.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        json_output: Use JSON format for console output
        log_file: Optional file path for log output
        use_colors: Use colors in console output (ignored if json_output=True)
    """
    root_logger = logging.getLogger("epoch")
    root_logger.setLevel(getattr(logging, level.upper()))

    root_logger.handlers.clear()

    console_handler = logging.StreamHandler(sys.stderr)
    if json_output:
        console_handler.setFormatter(StructuredFormatter())
    else:
        console_handler.setFormatter(HumanFormatter(use_colors=use_colors))
    root_logger.addHandler(console_handler)

    # File handler (always JSON for machine parsing)
    if log_file:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file)
        file_handler.setFormatter(StructuredFormatter())
        root_logger.addHandler(file_handler)

    logging.getLogger("epoch_core").setLevel(getattr(logging, level.upper()))


def get_logger(name: str) -> EpochLogger:
    """Get a structured logger instance."""
    return EpochLogger(name)
