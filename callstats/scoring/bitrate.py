"""Target-Bitrate Model - expected encoder bitrate for a resolution.

Power-law fit over reference encoder configurations (r^2 = 0.98). Frame rate
is not a parameter: the fit assumes 30 fps.
"""

import math

from callstats.config.constants import QUALITY, QualityConstants
from callstats.exceptions import InvalidResolutionError

TARGET_BITRATE_SCALE = 2.069924867
TARGET_BITRATE_EXPONENT = 0.6250223771


def compute_target_bitrate(
    pixel_count: float | None = None,
    constants: QualityConstants = QUALITY,
) -> float:
    """Target bitrate in bits per second for a frame of ``pixel_count`` pixels.

    Args:
        pixel_count: Pixels per frame; defaults to the configured resolution
        constants: Scoring constants supplying the default resolution

    Returns:
        Target bitrate (bps)

    Raises:
        InvalidResolutionError: If pixel_count is not positive
    """
    if pixel_count is None:
        pixel_count = constants.pixel_count
    if pixel_count <= 0:
        raise InvalidResolutionError(pixel_count)

    # Sub-pixel counts would raise a negative log10 to a fractional power
    log_pixels = max(math.log10(pixel_count), 0.0)
    exponent = TARGET_BITRATE_SCALE * math.pow(log_pixels, TARGET_BITRATE_EXPONENT)
    return math.pow(10, exponent)
