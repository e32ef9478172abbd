"""callstats - Perceptual quality scores for real-time call streams."""

__version__ = "1.0.0"

# Export exception hierarchy for easy importing
from callstats.exceptions import (
    CallStatsError,
    ConfigurationError,
    InvalidConfigError,
    ScoringError,
    InvalidResolutionError,
)

__all__ = [
    "__version__",
    # Base
    "CallStatsError",
    # Configuration
    "ConfigurationError",
    "InvalidConfigError",
    # Scoring
    "ScoringError",
    "InvalidResolutionError",
]
