"""Fish study configuration.

Loads from config.yaml if present, with environment variable overrides.
Environment variables use the pattern: FISHSTUDY_<SECTION>_<KEY> (uppercase).
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path

import yaml

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}

TRENDS_FORMATS = ("repr", "json")


@dataclass
class ReportConfig:
    locale: str = "en"  # "en" or "fr"
    labels: dict[str, str] = field(default_factory=dict)  # per-label overrides
    show_trends: bool = True
    trends_format: str = "repr"  # "repr" or "json"


@dataclass
class LoggingConfig:
    level: str = "info"
    format: str = "console"  # "console" or "json"


@dataclass
class AppConfig:
    report: ReportConfig = field(default_factory=ReportConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)


def _parse_bool(value: str) -> bool:
    lowered = value.strip().lower()
    if lowered in _TRUE_VALUES:
        return True
    if lowered in _FALSE_VALUES:
        return False
    raise ValueError(f"Invalid boolean value: {value!r}")


def _apply_env_overrides(config: AppConfig) -> None:
    """Override config values from environment variables."""
    mapping = {
        "FISHSTUDY_REPORT_LOCALE": lambda v: setattr(config.report, "locale", v),
        "FISHSTUDY_REPORT_SHOW_TRENDS": lambda v: setattr(config.report, "show_trends", _parse_bool(v)),
        "FISHSTUDY_REPORT_TRENDS_FORMAT": lambda v: setattr(config.report, "trends_format", v),
        "FISHSTUDY_LOG_LEVEL": lambda v: setattr(config.logging, "level", v),
        "FISHSTUDY_LOG_FORMAT": lambda v: setattr(config.logging, "format", v),
    }
    for env_key, setter in mapping.items():
        val = os.environ.get(env_key)
        if val is not None:
            setter(val)


def load_config(config_path: str | Path | None = None) -> AppConfig:
    """Load configuration from YAML file + environment overrides."""
    config = AppConfig()

    # Try to load YAML
    if config_path is None:
        config_path = Path("config.yaml")
    else:
        config_path = Path(config_path)

    if config_path.exists():
        with open(config_path, encoding="utf-8") as f:
            raw = yaml.safe_load(f) or {}

        # An empty section ("report:" with no body) loads as None
        for k, v in (raw.get("report") or {}).items():
            if hasattr(config.report, k):
                setattr(config.report, k, v)
        for k, v in (raw.get("logging") or {}).items():
            if hasattr(config.logging, k):
                setattr(config.logging, k, v)

    # Environment overrides always win
    _apply_env_overrides(config)

    fmt = str(config.report.trends_format).lower()
    if fmt not in TRENDS_FORMATS:
        raise ValueError(
            f"Invalid trends_format {config.report.trends_format!r}, expected one of: {', '.join(TRENDS_FORMATS)}"
        )
    config.report.trends_format = fmt
    return config
