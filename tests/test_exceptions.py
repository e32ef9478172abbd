"""Tests for Exception Hierarchy."""

import pytest

from callstats.exceptions import (
    CallStatsError,
    ConfigurationError,
    InvalidConfigError,
    ScoringError,
    InvalidResolutionError,
)


class TestCallStatsError:
    """Tests for CallStatsError base class."""

    def test_basic_creation(self):
        """Create basic error with message."""
        error = CallStatsError("Something went wrong")
        assert str(error) == "Something went wrong"
        assert error.message == "Something went wrong"
        assert error.details == {}
        assert error.recoverable is False

    def test_with_details(self):
        """Details are included in the string form."""
        error = CallStatsError("Scoring failed", details={"stream": "video"})
        assert "stream" in str(error)
        assert error.details["stream"] == "video"

    def test_to_dict(self):
        """Errors serialize for logging."""
        error = CallStatsError("Boom", details={"a": 1}, recoverable=True)
        assert error.to_dict() == {
            "type": "CallStatsError",
            "message": "Boom",
            "details": {"a": 1},
            "recoverable": True,
        }

    def test_can_be_caught_as_exception(self):
        """Base error is a plain Exception."""
        with pytest.raises(Exception):
            raise CallStatsError("x")


class TestConfigurationErrors:
    """Tests for configuration exceptions."""

    def test_invalid_config(self):
        """InvalidConfigError carries key and value."""
        error = InvalidConfigError("video_width", 0, "must be positive")
        assert isinstance(error, ConfigurationError)
        assert isinstance(error, CallStatsError)
        assert error.config_key == "video_width"
        assert error.value == 0
        assert "video_width" in error.message
        assert error.recoverable is False


class TestScoringErrors:
    """Tests for scoring exceptions."""

    def test_invalid_resolution(self):
        """InvalidResolutionError carries the pixel count."""
        error = InvalidResolutionError(0)
        assert isinstance(error, ScoringError)
        assert error.pixel_count == 0
        assert error.details == {"pixel_count": 0}
        assert "positive" in str(error)
