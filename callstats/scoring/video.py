"""Video Scoring - achieved bitrate against a resolution target.

Ro for video is simply the achieved bitrate compared to the expected bitrate.
The ratio is taken on a log scale between the minimum usable bitrate (0) and
the target bitrate (1), then stretched linearly onto 1-5.
"""

import math

from callstats.config.constants import QUALITY, QualityConstants
from callstats.observability.logging import ScoreLogger
from callstats.qos.sample import QoSSample
from callstats.scoring.bitrate import compute_target_bitrate

# Returned below the bitrate floor and for a degenerate target.
# Off the 1-5 scale on purpose: consumers read 0 as "no usable video".
VIDEO_SCORE_UNUSABLE = 0.0

_score_log = ScoreLogger("scoring.video")


def compute_video_quality_ratio(
    bitrate_bps: float,
    target_bitrate_bps: float,
    constants: QualityConstants = QUALITY,
) -> float | None:
    """Log-scale position of the achieved bitrate between floor and target.

    Bitrate above target earns no extra credit, so the ratio never exceeds 1.

    Returns:
        Ratio in [0, 1] for bitrates between floor and target, or None when
        the target does not exceed the floor
    """
    floor = constants.MIN_VIDEO_BITRATE_BPS
    if target_bitrate_bps <= floor:
        return None
    used_bitrate = min(bitrate_bps, target_bitrate_bps)
    return math.log(used_bitrate / floor) / math.log(target_bitrate_bps / floor)


def compute_video_opinion_score(ratio: float) -> float:
    """Stretch a quality ratio onto the 1-5 MOS scale."""
    return ratio * 4 + 1


def calculate_video_score(
    sample: QoSSample,
    constants: QualityConstants = QUALITY,
) -> float:
    """Video MOS for one QoS sample.

    Returns VIDEO_SCORE_UNUSABLE when the bitrate is below the floor or the
    configured resolution leaves no room between floor and target.
    """
    bitrate = sample.bitrate_bps
    if bitrate < constants.MIN_VIDEO_BITRATE_BPS:
        _score_log.video_below_floor(bitrate, constants.MIN_VIDEO_BITRATE_BPS)
        return VIDEO_SCORE_UNUSABLE

    target_bitrate = compute_target_bitrate(constants=constants)
    ratio = compute_video_quality_ratio(bitrate, target_bitrate, constants)
    if ratio is None:
        _score_log.degenerate_target(target_bitrate, constants.MIN_VIDEO_BITRATE_BPS)
        return VIDEO_SCORE_UNUSABLE

    return compute_video_opinion_score(ratio)
