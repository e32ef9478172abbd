"""Audio and video opinion scoring."""

from callstats.scoring.audio import (
    calculate_audio_score,
    compute_audio_opinion_score,
    compute_audio_rating,
    compute_delay_impairment,
    compute_loss_impairment,
    compute_r_factor,
)
from callstats.scoring.bitrate import compute_target_bitrate
from callstats.scoring.scorer import QualityScorer, QualityScores
from callstats.scoring.video import (
    VIDEO_SCORE_UNUSABLE,
    calculate_video_score,
    compute_video_opinion_score,
    compute_video_quality_ratio,
)

__all__ = [
    "calculate_audio_score",
    "compute_audio_opinion_score",
    "compute_audio_rating",
    "compute_delay_impairment",
    "compute_loss_impairment",
    "compute_r_factor",
    "compute_target_bitrate",
    "QualityScorer",
    "QualityScores",
    "VIDEO_SCORE_UNUSABLE",
    "calculate_video_score",
    "compute_video_opinion_score",
    "compute_video_quality_ratio",
]
