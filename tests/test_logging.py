"""Tests for Structured Logging.

Tests cover:
- configure_logging with JSON and console formats
- get_logger function
- bind_stream and unbind_stream
- ScoreLogger events
- SampleLogger events
"""

import pytest

import structlog
from structlog.testing import capture_logs

from callstats.observability.logging import (
    configure_logging,
    get_logger,
    bind_stream,
    unbind_stream,
    ScoreLogger,
    SampleLogger,
)


class TestConfigureLogging:
    """Tests for configure_logging function."""

    def test_configure_json_format(self):
        """Configure logging with JSON format."""
        configure_logging(level="INFO", json_format=True)

    def test_configure_console_format(self):
        """Configure logging with console format."""
        configure_logging(level="DEBUG", json_format=False)

    def test_configure_different_levels(self):
        """Configure logging with different levels."""
        configure_logging(level="WARNING")
        configure_logging(level="ERROR")
        configure_logging(level="DEBUG")


class TestGetLogger:
    """Tests for get_logger function."""

    def test_get_logger_with_name(self):
        """Get logger with specific name."""
        assert get_logger("test_module") is not None

    def test_get_logger_returns_bound_logger(self):
        """get_logger returns a logger with bind."""
        assert hasattr(get_logger("test"), "bind")


class TestBindStream:
    """Tests for bind_stream and unbind_stream."""

    def test_bind_adds_stream_id(self):
        """Bound stream_id appears in context."""
        bind_stream("audio-1")
        try:
            assert structlog.contextvars.get_contextvars()["stream_id"] == "audio-1"
        finally:
            unbind_stream()
        assert "stream_id" not in structlog.contextvars.get_contextvars()


class TestScoreLogger:
    """Tests for ScoreLogger events."""

    @pytest.fixture
    def logger(self):
        return ScoreLogger("test")

    def test_audio_scored(self, logger):
        """Audio score event carries R and MOS."""
        with capture_logs() as logs:
            logger.audio_scored(r_factor=93.72, mos=4.42)
        assert logs[0]["event"] == "audio_scored"
        assert logs[0]["event_type"] == "score.audio"
        assert logs[0]["r_factor"] == 93.72

    def test_video_scored(self, logger):
        """Video score event carries bitrates."""
        with capture_logs() as logs:
            logger.video_scored(bitrate_bps=500000, target_bitrate_bps=997600, mos=4.0)
        assert logs[0]["event_type"] == "score.video"
        assert logs[0]["target_bitrate_bps"] == 997600

    def test_video_below_floor(self, logger):
        """Below-floor event is info level."""
        with capture_logs() as logs:
            logger.video_below_floor(bitrate_bps=1000, floor_bps=30000)
        assert logs[0]["log_level"] == "info"

    def test_degenerate_target(self, logger):
        """Degenerate target is a warning."""
        with capture_logs() as logs:
            logger.degenerate_target(target_bitrate_bps=1.0, floor_bps=30000)
        assert logs[0]["log_level"] == "warning"
        assert logs[0]["event"] == "degenerate_target"


class TestSampleLogger:
    """Tests for SampleLogger events."""

    def test_malformed_metric(self):
        """Malformed metric logs the raw value."""
        with capture_logs() as logs:
            SampleLogger().malformed_metric("avg_loss", "abc")
        assert logs[0]["event_type"] == "qos.malformed_metric"
        assert logs[0]["value"] == "'abc'"

    def test_negative_metric(self):
        """Negative metric is a warning."""
        with capture_logs() as logs:
            SampleLogger().negative_metric("latency", -5.0)
        assert logs[0]["log_level"] == "warning"
        assert logs[0]["field"] == "latency"
