"""Quality Constants - Tuning values for the audio and video scorers.

Values match the reference WebRTC call-stats deployment so that scores stay
comparable across implementations. The downstream thresholds are read by
consumers deciding whether to alert; the scoring formulas never use them.

All timing values in milliseconds, all bitrates in bits per second.
"""

from dataclasses import dataclass, replace
from typing import Final


@dataclass(frozen=True)
class QualityConstants:
    """Immutable scoring constants."""

    # Video resolution used for the target bitrate (replace with client resolution)
    VIDEO_WIDTH: Final[int] = 640
    VIDEO_HEIGHT: Final[int] = 480

    # QoS reporting
    STATS_INTERVAL_MS: Final[int] = 1000  # Nominal sampling interval
    MIN_VIDEO_BITRATE_BPS: Final[int] = 30000  # Video unusable below this
    LOCAL_AUDIO_DELAY_MS: Final[int] = 20  # Typical frame duration
    DEFAULT_AUDIO_BITRATE_BPS: Final[int] = 48000

    # E-model (ITU-T G.107 simplified)
    R_BASE: Final[float] = 94.2  # Ro - Is with default factors, A = 0
    ENCODING_IMPAIRMENT: Final[float] = 0.0  # Opus/CELT; iLBC would be 10
    LOSS_IMPAIRMENT_B: Final[float] = 19.8  # CELT/CELP loss constants
    LOSS_IMPAIRMENT_C: Final[float] = 29.7
    DELAY_BUDGET_MS: Final[float] = 177.3  # VOIP mouth-to-ear budget
    DELAY_CODEC_FACTOR: Final[float] = 0.024
    DELAY_NETWORK_FACTOR: Final[float] = 0.11

    # Opinion score range
    MOS_FLOOR: Final[float] = 1.0
    AUDIO_MOS_CEILING: Final[float] = 4.5
    VIDEO_MOS_CEILING: Final[float] = 5.0

    # Downstream thresholds
    JITTER_THRESHOLD_MS: Final[int] = 30
    RTT_THRESHOLD_MS: Final[int] = 400
    MOS_THRESHOLD: Final[float] = 3.5
    PACKET_LOSS_THRESHOLD_PCT: Final[float] = 1  # Percent, not fraction

    # QoS collaborator
    MAX_RETRIES: Final[int] = 3
    MAX_AUDIO_LEVEL_COUNT: Final[int] = 20

    @property
    def pixel_count(self) -> int:
        """Pixels per frame at the configured resolution."""
        return self.VIDEO_WIDTH * self.VIDEO_HEIGHT

    def with_resolution(self, width: int, height: int) -> "QualityConstants":
        """Return a copy with a different video resolution."""
        return replace(self, VIDEO_WIDTH=width, VIDEO_HEIGHT=height)


# Singleton instance for import convenience
QUALITY = QualityConstants()
