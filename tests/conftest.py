"""Pytest configuration and shared fixtures."""

import os

import pytest

# Set test environment variables before importing settings
os.environ.update({
    "ENVIRONMENT": "development",
    "LOG_LEVEL": "DEBUG",
    "LOG_JSON": "false",
})
for key in ("VIDEO_WIDTH", "VIDEO_HEIGHT", "STATS_INTERVAL_MS"):
    os.environ.pop(key, None)


@pytest.fixture
def constants():
    """Provide the default quality constants."""
    from callstats.config.constants import QUALITY
    return QUALITY


@pytest.fixture
def scorer():
    """Provide a scorer that does not touch the metrics registry."""
    from callstats.scoring.scorer import QualityScorer
    return QualityScorer(record_metrics=False)


@pytest.fixture
def target_bitrate():
    """Target bitrate for the default 640x480 resolution."""
    from callstats.scoring.bitrate import compute_target_bitrate
    return compute_target_bitrate()


@pytest.fixture(autouse=True)
def debug_logging():
    """Reset structlog to DEBUG so every event is visible to capture_logs."""
    from callstats.observability.logging import configure_logging
    configure_logging(level="DEBUG", json_format=False)
