"""callstats Exception Hierarchy.

Scoring itself is plain float arithmetic and never raises for in-range input.
These exceptions cover configuration and programmer errors at the edges.

Hierarchy:
    CallStatsError (base)
    ├── ConfigurationError
    │   └── InvalidConfigError
    └── ScoringError
        └── InvalidResolutionError
"""

from typing import Any


class CallStatsError(Exception):
    """Base exception for all callstats errors.

    Attributes:
        message: Human-readable error description
        details: Additional context about the error
        recoverable: Whether the error can be recovered from
    """

    def __init__(
        self,
        message: str,
        details: dict[str, Any] | None = None,
        recoverable: bool = False,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.details = details or {}
        self.recoverable = recoverable

    def __str__(self) -> str:
        if self.details:
            return f"{self.message} ({self.details})"
        return self.message

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to dictionary for logging/serialization."""
        return {
            "type": self.__class__.__name__,
            "message": self.message,
            "details": self.details,
            "recoverable": self.recoverable,
        }


# =============================================================================
# Configuration Errors
# =============================================================================


class ConfigurationError(CallStatsError):
    """Base exception for configuration errors."""

    pass


class InvalidConfigError(ConfigurationError):
    """Raised when a configuration value is invalid."""

    def __init__(
        self,
        config_key: str,
        value: Any,
        reason: str,
    ) -> None:
        super().__init__(
            message=f"Invalid configuration for {config_key}: {reason}",
            details={"config_key": config_key, "value": value, "reason": reason},
            recoverable=False,
        )
        self.config_key = config_key
        self.value = value


# =============================================================================
# Scoring Errors
# =============================================================================


class ScoringError(CallStatsError):
    """Base exception for scoring errors."""

    pass


class InvalidResolutionError(ScoringError):
    """Raised when a target bitrate is requested for a non-positive pixel count."""

    def __init__(self, pixel_count: float) -> None:
        super().__init__(
            message=f"Pixel count must be positive, got {pixel_count}",
            details={"pixel_count": pixel_count},
            recoverable=False,
        )
        self.pixel_count = pixel_count
