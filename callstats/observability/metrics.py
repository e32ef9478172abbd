"""Prometheus Metrics - score observability.

Exports:
- Audio and video MOS distributions
- Samples scored per stream
- Scores under the MOS threshold per stream
- Malformed or out-of-domain metrics
"""

import math

from prometheus_client import Counter, Histogram, Info

# -----------------------------------------------------------------------------
# Score Histograms
# -----------------------------------------------------------------------------

MOS_BUCKETS = [1.0, 1.5, 2.0, 2.5, 3.0, 3.5, 4.0, 4.5, 5.0]

AUDIO_MOS = Histogram(
    "callstats_audio_mos",
    "Audio mean opinion score per sample",
    buckets=MOS_BUCKETS,
)

# Video samples below the bitrate floor land in the lowest bucket (score 0)
VIDEO_MOS = Histogram(
    "callstats_video_mos",
    "Video mean opinion score per sample",
    buckets=[0.0] + MOS_BUCKETS,
)

# -----------------------------------------------------------------------------
# Counters
# -----------------------------------------------------------------------------

SAMPLES_SCORED = Counter(
    "callstats_samples_scored_total",
    "QoS samples scored",
    ["stream"],  # audio, video
)

SCORES_BELOW_THRESHOLD = Counter(
    "callstats_scores_below_threshold_total",
    "Scores under the MOS threshold",
    ["stream"],
)

INVALID_METRICS = Counter(
    "callstats_invalid_metrics_total",
    "QoS metrics that were malformed or out of domain",
    ["reason"],  # malformed, negative, nan_score
)

# -----------------------------------------------------------------------------
# Info
# -----------------------------------------------------------------------------

BUILD_INFO = Info(
    "callstats_build",
    "Build information",
)


# -----------------------------------------------------------------------------
# Helper functions
# -----------------------------------------------------------------------------


def _record_score(histogram: Histogram, stream: str, mos: float, threshold: float) -> None:
    # NaN would stick in the histogram sum for the life of the process
    if math.isnan(mos):
        record_invalid_metric("nan_score")
        return
    histogram.observe(mos)
    SAMPLES_SCORED.labels(stream=stream).inc()
    if mos < threshold:
        SCORES_BELOW_THRESHOLD.labels(stream=stream).inc()


def record_audio_score(mos: float, threshold: float) -> None:
    """Record an audio score. NaN scores are counted as invalid only."""
    _record_score(AUDIO_MOS, "audio", mos, threshold)


def record_video_score(mos: float, threshold: float) -> None:
    """Record a video score. NaN scores are counted as invalid only."""
    _record_score(VIDEO_MOS, "video", mos, threshold)


def record_invalid_metric(reason: str) -> None:
    """Record a malformed or out-of-domain metric."""
    INVALID_METRICS.labels(reason=reason).inc()


def set_build_info(version: str) -> None:
    """Set build information."""
    BUILD_INFO.info({"version": version})
