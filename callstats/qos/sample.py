"""QoS Sample - one stream's metrics snapshot and its ingestion boundary.

QoS reports arrive from the monitor once per stats interval, with numeric
fields often encoded as strings (``{"avg_loss": "0.02", "latency": 120,
"bitrate": 480000}``). Parsing happens here so the scorers only ever see
floats.

Ingestion rules:
- Unparsable values become NaN and are logged. NaN propagates through the
  scorers unchanged.
- Negative values are clamped to 0.0 and logged.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, Mapping

from callstats.config.constants import QUALITY, QualityConstants
from callstats.observability.logging import SampleLogger
from callstats.observability.metrics import record_invalid_metric

_sample_log = SampleLogger()

# Report keys used by the QoS monitor
REPORT_LOSS_KEY = "avg_loss"
REPORT_LATENCY_KEY = "latency"
REPORT_BITRATE_KEY = "bitrate"
REPORT_JITTER_KEY = "jitter"


def parse_metric(value: Any, field: str = "metric") -> float:
    """Parse a string or numeric metric as float.

    Args:
        value: Raw metric value from a QoS report
        field: Field name for logging

    Returns:
        Parsed value, or NaN if it is not a number
    """
    try:
        parsed = float(value)
    except (TypeError, ValueError):
        _sample_log.malformed_metric(field, value)
        record_invalid_metric("malformed")
        return math.nan

    if parsed < 0:
        _sample_log.negative_metric(field, parsed)
        record_invalid_metric("negative")
        return 0.0
    return parsed


def _report_metric(report: Mapping[str, Any], key: str) -> float:
    value = report.get(key)
    if value is None:
        return math.nan
    return parse_metric(value, key)


@dataclass(frozen=True)
class QoSSample:
    """Per-stream QoS snapshot.

    Attributes:
        average_loss_fraction: Packet loss as a fraction (0.02 = 2%)
        latency_ms: Round-trip time in milliseconds
        bitrate_bps: Achieved bitrate in bits per second
        jitter_ms: Jitter in milliseconds, if reported
    """

    average_loss_fraction: float = 0.0
    latency_ms: float = 0.0
    bitrate_bps: float = 0.0
    jitter_ms: float | None = None

    @classmethod
    def from_report(cls, report: Mapping[str, Any]) -> QoSSample:
        """Build a sample from a QoS monitor report.

        Absent fields are NaN (jitter: None) without being logged as malformed.
        """
        jitter = report.get(REPORT_JITTER_KEY)
        return cls(
            average_loss_fraction=_report_metric(report, REPORT_LOSS_KEY),
            latency_ms=_report_metric(report, REPORT_LATENCY_KEY),
            bitrate_bps=_report_metric(report, REPORT_BITRATE_KEY),
            jitter_ms=None if jitter is None else parse_metric(jitter, REPORT_JITTER_KEY),
        )

    def exceeds_thresholds(self, constants: QualityConstants = QUALITY) -> list[str]:
        """Names of the downstream thresholds this sample breaches.

        Returns a subset of ``["rtt", "jitter", "packet_loss"]``.
        """
        breached = []
        if self.latency_ms > constants.RTT_THRESHOLD_MS:
            breached.append("rtt")
        if self.jitter_ms is not None and self.jitter_ms > constants.JITTER_THRESHOLD_MS:
            breached.append("jitter")
        if self.average_loss_fraction * 100 > constants.PACKET_LOSS_THRESHOLD_PCT:
            breached.append("packet_loss")
        return breached
