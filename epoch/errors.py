"""
Error types for the epoch kernel.
Structured errors carry a stable code and a details mapping.
"""

from typing import Any, Dict, List, Optional


class EpochError(Exception):
    """Base exception for epoch errors."""

    def __init__(
        self,
        message: str,
        code: str,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.code = code
        self.details = details or {}

    def to_dict(self) -> Dict[str, Any]:
        """Convert to a plain error payload."""
        return {
            "error": {
                "code": self.code,
                "message": str(self),
                "details": self.details,
            }
        }


class EmptyPopulationError(EpochError):
    """Raised when an epoch is run over an empty population."""

    def __init__(self):
        super().__init__(
            "Cannot run an epoch on an empty population",
            "EMPTY_POPULATION",
        )


class InvalidConfigError(EpochError):
    """Raised when configuration is invalid."""

    def __init__(self, errors: List[str]):
        super().__init__(
            "Invalid configuration: " + "; ".join(errors),
            "INVALID_CONFIG",
            {"errors": list(errors)},
        )


class InvalidTargetSizeError(EpochError):
    """Raised when the target size is not an integer or cannot hold the survivors."""

    def __init__(self, target_size: Any, survivors: int, reason: Optional[str] = None):
        super().__init__(
            reason
            or f"Target size {target_size} is smaller than survivor count {survivors}",
            "INVALID_TARGET_SIZE",
            {"target_size": target_size, "survivors": survivors},
        )
