"""Quality Scorer - audio and video scoring behind one object.

Wraps the free scoring functions with a fixed set of constants, structured
logging and Prometheus metrics. Holds no per-sample state: any number of
threads or tasks may share one scorer.

Usage:
    scorer = QualityScorer(get_settings().quality_constants())
    scores = scorer.score(
        audio=QoSSample.from_report(audio_report),
        video=QoSSample.from_report(video_report),
    )
    if scores.below_threshold():
        ...
"""

from __future__ import annotations

from dataclasses import dataclass

from callstats.config.constants import QUALITY, QualityConstants
from callstats.observability.logging import ScoreLogger
from callstats.observability.metrics import record_audio_score, record_video_score
from callstats.qos.sample import QoSSample
from callstats.scoring.audio import compute_audio_rating
from callstats.scoring.bitrate import compute_target_bitrate
from callstats.scoring.video import calculate_video_score


@dataclass(frozen=True)
class QualityScores:
    """Scores for one reporting interval. A stream not sampled is None."""

    audio_mos: float | None = None
    video_mos: float | None = None

    def below_threshold(self, constants: QualityConstants = QUALITY) -> list[str]:
        """Streams whose score is under the MOS threshold."""
        streams = []
        if self.audio_mos is not None and self.audio_mos < constants.MOS_THRESHOLD:
            streams.append("audio")
        if self.video_mos is not None and self.video_mos < constants.MOS_THRESHOLD:
            streams.append("video")
        return streams


class QualityScorer:
    """Scores QoS samples with a fixed set of constants."""

    def __init__(
        self,
        constants: QualityConstants = QUALITY,
        record_metrics: bool = True,
    ) -> None:
        self._constants = constants
        self._record_metrics = record_metrics
        self._log = ScoreLogger()
        # Constant for the scorer's lifetime
        self._target_bitrate = compute_target_bitrate(constants=constants)

    @property
    def constants(self) -> QualityConstants:
        return self._constants

    @property
    def target_bitrate(self) -> float:
        """Target video bitrate (bps) for the configured resolution."""
        return self._target_bitrate

    def score_audio(self, sample: QoSSample) -> float:
        """Audio MOS in [1.0, 4.5]."""
        r_factor, mos = compute_audio_rating(sample, self._constants)
        self._log.audio_scored(r_factor, mos)
        if self._record_metrics:
            record_audio_score(mos, self._constants.MOS_THRESHOLD)
        return mos

    def score_video(self, sample: QoSSample) -> float:
        """Video MOS in [1.0, 5.0], or 0.0 when video is unusable."""
        mos = calculate_video_score(sample, self._constants)
        self._log.video_scored(sample.bitrate_bps, self._target_bitrate, mos)
        if self._record_metrics:
            record_video_score(mos, self._constants.MOS_THRESHOLD)
        return mos

    def score(
        self,
        audio: QoSSample | None = None,
        video: QoSSample | None = None,
    ) -> QualityScores:
        """Score whichever streams were sampled this interval."""
        return QualityScores(
            audio_mos=None if audio is None else self.score_audio(audio),
            video_mos=None if video is None else self.score_video(video),
        )
