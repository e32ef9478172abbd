"""Structured Logging - JSON logs with stream correlation.

Provides structured logging for:
- Audio and video scores
- Video samples below the bitrate floor
- Degenerate target-bitrate configuration
- Malformed or out-of-domain QoS metrics

Logs emitted while a stream is bound include stream_id for correlation.
"""

import logging
import sys

import structlog


def configure_logging(
    level: str = "INFO",
    json_format: bool = True,
) -> None:
    """Configure structured logging.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR)
        json_format: If True, output JSON; else human-readable
    """
    processors = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]

    if json_format:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=True))

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(
            getattr(logging, level.upper())
        ),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=True,
    )

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stderr,
        level=getattr(logging, level.upper()),
    )


def get_logger(name: str | None = None) -> structlog.BoundLogger:
    """Get a structured logger.

    Args:
        name: Logger name (usually __name__)

    Returns:
        Bound structlog logger
    """
    return structlog.get_logger(name)


def bind_stream(stream_id: str) -> None:
    """Bind stream_id to all logs in current context."""
    structlog.contextvars.bind_contextvars(stream_id=stream_id)


def unbind_stream() -> None:
    """Remove stream_id from log context."""
    structlog.contextvars.unbind_contextvars("stream_id")


class ScoreLogger:
    """Logger for scoring events."""

    def __init__(self, name: str = "scoring") -> None:
        self._log = get_logger(name)

    def audio_scored(self, r_factor: float, mos: float) -> None:
        """Log an audio score."""
        self._log.debug(
            "audio_scored",
            event_type="score.audio",
            r_factor=r_factor,
            mos=mos,
        )

    def video_scored(self, bitrate_bps: float, target_bitrate_bps: float, mos: float) -> None:
        """Log a video score."""
        self._log.debug(
            "video_scored",
            event_type="score.video",
            bitrate_bps=bitrate_bps,
            target_bitrate_bps=target_bitrate_bps,
            mos=mos,
        )

    def video_below_floor(self, bitrate_bps: float, floor_bps: float) -> None:
        """Log a video sample judged unusable."""
        self._log.info(
            "video_below_floor",
            event_type="score.video_below_floor",
            bitrate_bps=bitrate_bps,
            floor_bps=floor_bps,
        )

    def degenerate_target(self, target_bitrate_bps: float, floor_bps: float) -> None:
        """Log a target bitrate that leaves no room above the floor."""
        self._log.warning(
            "degenerate_target",
            event_type="score.degenerate_target",
            target_bitrate_bps=target_bitrate_bps,
            floor_bps=floor_bps,
        )


class SampleLogger:
    """Logger for QoS ingestion events."""

    def __init__(self) -> None:
        self._log = get_logger("qos")

    def malformed_metric(self, field: str, value: object) -> None:
        """Log a metric that could not be parsed as a number."""
        self._log.warning(
            "malformed_metric",
            event_type="qos.malformed_metric",
            field=field,
            value=repr(value),
        )

    def negative_metric(self, field: str, value: float) -> None:
        """Log a negative metric clamped to zero."""
        self._log.warning(
            "negative_metric",
            event_type="qos.negative_metric",
            field=field,
            value=value,
        )
