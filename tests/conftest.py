"""Shared test fixtures."""

from __future__ import annotations

from datetime import datetime

import pytest
import structlog

from fishstudy.core.models import FishSample, Location, Observation, SoundRecording
from fishstudy.core.study import FishStudy


@pytest.fixture(autouse=True)
def _reset_structlog():
    """main() points structlog at the captured stderr; undo that after each test."""
    yield
    structlog.reset_defaults()


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    for key in (
        "FISHSTUDY_REPORT_LOCALE",
        "FISHSTUDY_REPORT_SHOW_TRENDS",
        "FISHSTUDY_REPORT_TRENDS_FORMAT",
        "FISHSTUDY_LOG_LEVEL",
        "FISHSTUDY_LOG_FORMAT",
    ):
        monkeypatch.delenv(key, raising=False)


@pytest.fixture
def location() -> Location:
    return Location("Point A", 40.5678, 39.8765, 15.5)


def make_observation(location: Location, species: list[str] | None = None,
                     recordings: int = 0) -> Observation:
    """Helper to create an Observation with the given samples and recordings."""
    obs = Observation(
        date=datetime(2024, 6, 1, 9, 30),
        weather="Cloudy",
        water_temp=16.0,
        observer="Dr. Smith",
        location=location,
    )
    for name in species or []:
        obs.record_data(FishSample(name, 20.0, 150.0, "Resting"))
    for i in range(recordings):
        obs.add_sound_recording(SoundRecording(datetime(2024, 6, 1, 10, i), "WAV", 60))
    return obs


@pytest.fixture
def study() -> FishStudy:
    return FishStudy(
        "Torul Dam Study",
        datetime(2024, 1, 1, 0, 0),
        datetime(2024, 12, 31, 23, 59),
    )
