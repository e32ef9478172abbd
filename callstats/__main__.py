"""Score a single QoS sample from the command line.

Usage:
    python -m callstats --loss 0.02 --latency 120 --bitrate 480000
    python -m callstats --loss 0.02 --latency 120 --width 1280 --height 720
"""

import argparse
import json
import sys

from callstats import __version__
from callstats.config.settings import Settings
from callstats.exceptions import CallStatsError, ConfigurationError
from callstats.observability.logging import configure_logging
from callstats.observability.metrics import set_build_info
from callstats.qos.sample import QoSSample
from callstats.scoring.scorer import QualityScorer


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="callstats",
        description="Compute audio and video MOS for one QoS sample",
    )
    parser.add_argument("--loss", default="0", help="Average packet loss fraction")
    parser.add_argument("--latency", default="0", help="Round-trip latency (ms)")
    parser.add_argument("--bitrate", default=None, help="Video bitrate (bps); omit to skip video")
    parser.add_argument("--jitter", default=None, help="Jitter (ms)")
    parser.add_argument("--width", type=int, default=None, help="Video width override")
    parser.add_argument("--height", type=int, default=None, help="Video height override")
    parser.add_argument("--log-level", default=None, help="Log level override")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    overrides = {}
    if args.width is not None:
        overrides["video_width"] = args.width
    if args.height is not None:
        overrides["video_height"] = args.height
    if args.log_level is not None:
        overrides["log_level"] = args.log_level.upper()

    try:
        settings = Settings(**overrides)
    except (ValueError, ConfigurationError) as e:
        print(f"Invalid settings: {e}", file=sys.stderr)
        return 2

    configure_logging(level=settings.log_level, json_format=settings.log_json)
    set_build_info(__version__)

    report = {"avg_loss": args.loss, "latency": args.latency, "jitter": args.jitter}
    audio = QoSSample.from_report(report)
    video = None
    if args.bitrate is not None:
        video = QoSSample.from_report({**report, "bitrate": args.bitrate})

    constants = settings.quality_constants()
    try:
        scorer = QualityScorer(constants, record_metrics=settings.metrics_enabled)
    except CallStatsError as e:
        print(f"Scoring failed: {e}", file=sys.stderr)
        return 1

    scores = scorer.score(audio=audio, video=video)
    print(json.dumps({
        "audio_mos": scores.audio_mos,
        "video_mos": scores.video_mos,
        "target_bitrate_bps": scorer.target_bitrate,
        "thresholds_exceeded": audio.exceeds_thresholds(constants),
        "below_mos_threshold": scores.below_threshold(constants),
    }, indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main())
