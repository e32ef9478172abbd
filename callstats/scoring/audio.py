"""Audio Scoring - simplified ITU-T E-model.

    R = Ro - Is - Id - Ie + A

    Ro  signal to noise ratio
    Is  simultaneous impairments (distortion, noise)
    Id  delay impairment (echo, one-way delay)
    Ie  equipment impairment (codec, packet loss)
    A   advantage factor (wireless vs wired)

With default values for Ro and Is and A = 0 this reduces to

    R = 94.2 - Id - Ie

and R is mapped onto the MOS scale with the G.107 cubic. MOS lower limits:
4.34 very satisfied, 4.03 satisfied, 3.60 some dissatisfied, 3.10 many
dissatisfied, 2.58 nearly all dissatisfied.

Reference: http://www.itu.int/ITU-T/studygroups/com12/emodelv1/tut.htm
"""

import math

from callstats.config.constants import QUALITY, QualityConstants
from callstats.qos.sample import QoSSample


def compute_delay_impairment(
    latency_ms: float,
    constants: QualityConstants = QUALITY,
) -> float:
    """Id from round-trip latency plus the local frame delay."""
    delay = latency_ms + constants.LOCAL_AUDIO_DELAY_MS
    network_excess = max(0.0, delay - constants.DELAY_BUDGET_MS)
    return (
        constants.DELAY_CODEC_FACTOR * delay
        + constants.DELAY_NETWORK_FACTOR * network_excess
    )


def compute_loss_impairment(
    average_loss_fraction: float,
    constants: QualityConstants = QUALITY,
) -> float:
    """Ie from the packet loss fraction (mono streams)."""
    return constants.ENCODING_IMPAIRMENT + constants.LOSS_IMPAIRMENT_B * math.log(
        1 + constants.LOSS_IMPAIRMENT_C * average_loss_fraction
    )


def compute_r_factor(
    average_loss_fraction: float,
    latency_ms: float,
    constants: QualityConstants = QUALITY,
) -> float:
    """Transmission rating R for one audio sample."""
    return (
        constants.R_BASE
        - compute_delay_impairment(latency_ms, constants)
        - compute_loss_impairment(average_loss_fraction, constants)
    )


def compute_audio_opinion_score(
    r_factor: float,
    constants: QualityConstants = QUALITY,
) -> float:
    """Map an R-factor onto the 1.0-4.5 MOS scale.

    R < 0        -> 1.0
    0 <= R <= 100 -> 1 + 0.035 R + 7.10e-6 R (R - 60) (100 - R)
    R > 100      -> 4.5

    The cubic dips slightly below 1.0 for R in (0, ~7); that dip is floored
    so scores stay within 1.0-4.5. Implementations that return the raw cubic
    give about 0.987 at R = 3.5, so scores there differ by up to 0.013.
    NaN input returns NaN.
    """
    if r_factor < 0:
        return constants.MOS_FLOOR
    if r_factor > 100:
        return constants.AUDIO_MOS_CEILING
    mos = 1 + 0.035 * r_factor + 7.10e-6 * r_factor * (r_factor - 60) * (100 - r_factor)
    if mos < constants.MOS_FLOOR:
        return constants.MOS_FLOOR
    return mos


def compute_audio_rating(
    sample: QoSSample,
    constants: QualityConstants = QUALITY,
) -> tuple[float, float]:
    """R-factor and MOS for one QoS sample."""
    r_factor = compute_r_factor(
        sample.average_loss_fraction, sample.latency_ms, constants
    )
    return r_factor, compute_audio_opinion_score(r_factor, constants)


def calculate_audio_score(
    sample: QoSSample,
    constants: QualityConstants = QUALITY,
) -> float:
    """Audio MOS for one QoS sample."""
    return compute_audio_rating(sample, constants)[1]
