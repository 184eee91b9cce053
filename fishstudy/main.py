"""Fish study — main entry point.

Builds the demo field study, prints its report and species trends.
This is the only file that knows about configuration and output.

Usage:
    fishstudy
    fishstudy --locale fr
    fishstudy --config config.yaml --no-trends
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from datetime import datetime
from typing import Sequence

import structlog

from fishstudy.config import TRENDS_FORMATS, AppConfig, load_config
from fishstudy.core.labels import available_locales, get_labels
from fishstudy.core.models import FishSample, Location, Observation, SoundRecording
from fishstudy.core.study import FishStudy

log = structlog.get_logger()


def _setup_logging(config: AppConfig) -> None:
    """Configure structlog based on the logging config. Logs go to stderr."""
    processors = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
    ]

    if config.logging.format == "json":
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer())

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(
            logging.getLevelName(config.logging.level.upper()),
        ),
        logger_factory=structlog.PrintLoggerFactory(sys.stderr),
    )


def build_demo_study(now: datetime | None = None) -> FishStudy:
    """The Torul Dam scenario: one observation, one trout, one recording."""
    now = now or datetime.now()

    study = FishStudy(
        "Torul Dam Study",
        datetime(2024, 1, 1, 0, 0),
        datetime(2024, 12, 31, 23, 59),
    )

    location = Location("Point A", 40.5678, 39.8765, 15.5)

    observation = Observation(
        date=now,
        weather="Sunny",
        water_temp=18.5,
        observer="Dr. Smith",
        location=location,
    )
    observation.record_data(FishSample("Trout", 25.5, 500, "Active swimming"))
    observation.add_sound_recording(SoundRecording(now, "WAV", 120))

    study.add_observation(observation)
    return study


def format_trends(trends: dict, fmt: str) -> str:
    fmt = fmt.lower()
    if fmt == "json":
        return json.dumps(trends, ensure_ascii=False)
    if fmt == "repr":
        return repr(trends)
    raise ValueError(f"Unknown trends format {fmt!r}, expected one of: {', '.join(TRENDS_FORMATS)}")


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Fish study demo report")
    parser.add_argument("-c", "--config", default=None,
                        help="Path to YAML config file (default: config.yaml)")
    parser.add_argument("--locale", choices=available_locales(), default=None,
                        help="Report label language (overrides config)")
    parser.add_argument("--no-trends", action="store_true",
                        help="Print only the report, not the species trends")
    return parser.parse_args(argv)


def main(argv: Sequence[str] | None = None) -> int:
    args = parse_args(argv)

    config = load_config(args.config)

    # Apply CLI overrides
    if args.locale:
        config.report.locale = args.locale
    if args.no_trends:
        config.report.show_trends = False

    _setup_logging(config)
    log.info("demo_started", locale=config.report.locale)

    labels = get_labels(config.report.locale, config.report.labels)
    study = build_demo_study()

    print(study.generate_report(labels))
    if config.report.show_trends:
        print(format_trends(study.analyze_trends(), config.report.trends_format))

    return 0


if __name__ == "__main__":
    sys.exit(main())
