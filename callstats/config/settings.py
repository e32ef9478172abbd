"""Application Settings - Environment-based configuration.

Uses Pydantic Settings for validation and type coercion. Only deployment
knobs live here; scoring constants stay in ``callstats.config.constants``
and are derived from these settings through ``quality_constants()``.
"""

from dataclasses import replace
from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from callstats.config.constants import QUALITY, QualityConstants
from callstats.exceptions import InvalidConfigError


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    environment: Literal["development", "staging", "production"] = Field(
        default="development", description="Environment name"
    )
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(
        default="INFO", description="Logging level"
    )
    log_json: bool = Field(default=True, description="Render logs as JSON")

    # Observability
    metrics_enabled: bool = Field(default=True, description="Record Prometheus metrics")

    # Video
    video_width: int = Field(
        default=QUALITY.VIDEO_WIDTH,
        ge=1,
        le=7680,
        description="Client video width in pixels",
    )
    video_height: int = Field(
        default=QUALITY.VIDEO_HEIGHT,
        ge=1,
        le=4320,
        description="Client video height in pixels",
    )

    # QoS reporting
    stats_interval_ms: int = Field(
        default=QUALITY.STATS_INTERVAL_MS,
        ge=100,
        le=60000,
        description="QoS sampling interval in milliseconds",
    )

    def model_post_init(self, __context) -> None:
        """Reject resolutions whose target bitrate collapses onto the video floor."""
        from callstats.scoring.bitrate import compute_target_bitrate

        pixel_count = self.video_width * self.video_height
        if compute_target_bitrate(pixel_count) <= QUALITY.MIN_VIDEO_BITRATE_BPS:
            raise InvalidConfigError(
                "video_resolution",
                f"{self.video_width}x{self.video_height}",
                "target bitrate at or below the minimum video bitrate",
            )

    def quality_constants(self) -> QualityConstants:
        """Build scoring constants for the configured deployment."""
        return replace(
            QUALITY.with_resolution(self.video_width, self.video_height),
            STATS_INTERVAL_MS=self.stats_interval_ms,
        )


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
