"""Fish study — core field data models.

These are plain dataclasses with no framework dependencies. Values are built
bottom-up (Location → Observation) and aggregated by FishStudy.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timedelta
from enum import Enum

import structlog

log = structlog.get_logger()

# Size category thresholds (cm), lower bound inclusive.
MEDIUM_MIN_LENGTH_CM = 10.0
LARGE_MIN_LENGTH_CM = 30.0


class SizeCategory(str, Enum):
    SMALL = "small"
    MEDIUM = "medium"
    LARGE = "large"


@dataclass
class Location:
    name: str
    latitude: float
    longitude: float
    depth: float

    def get_coordinates(self) -> tuple[float, float]:
        return self.latitude, self.longitude

    def update_location(self, latitude: float, longitude: float, depth: float) -> None:
        self.latitude = latitude
        self.longitude = longitude
        self.depth = depth


@dataclass(frozen=True)
class FishSample:
    """A captured fish. Length in cm, weight in g."""
    species: str
    length: float
    weight: float
    behavior: str = ""

    def calculate_metrics(self) -> dict:
        ratio = self.length / self.weight if self.weight != 0 else 0.0
        if self.length < MEDIUM_MIN_LENGTH_CM:
            category = SizeCategory.SMALL
        elif self.length < LARGE_MIN_LENGTH_CM:
            category = SizeCategory.MEDIUM
        else:
            category = SizeCategory.LARGE
        return {
            "length_weight_ratio": ratio,
            "size_category": category,
        }

    def classify_species(self) -> str:
        return (f"Classification for {self.species} based on "
                f"L:{self.length:.2f}cm, W:{self.weight:.2f}g")


@dataclass
class SoundRecording:
    timestamp: datetime
    file_format: str
    duration: int             # seconds
    analyzed: bool = False

    def analyze_sound(self) -> dict:
        """Mark the recording as analyzed and return its basic properties."""
        self.analyzed = True
        return {"duration": self.duration, "format": self.file_format}

    def export_data(self) -> str:
        return f"Recording from {self.timestamp.isoformat()} - Duration: {self.duration}s"


@dataclass
class TrapData:
    trap_type: str
    set_time: datetime
    check_time: datetime | None = None
    catch_count: int = 0

    def record_catch(self, count: int, check_time: datetime) -> None:
        """Record a trap check. Replaces any earlier count and check time."""
        self.catch_count = count
        self.check_time = check_time
        log.debug("catch_recorded", trap=self.trap_type, count=count)

    def hours_deployed(self) -> int:
        """Whole hours between set and check, truncated toward zero."""
        if self.check_time is None:
            return 0
        delta = self.check_time - self.set_time
        hours = abs(delta) // timedelta(hours=1)
        return hours if delta >= timedelta(0) else -hours

    def calculate_efficiency(self) -> float:
        """Catches per hour deployed. 0.0 if unchecked or deployed under an hour."""
        hours = self.hours_deployed()
        if hours <= 0:
            return 0.0
        return self.catch_count / hours


@dataclass
class Observation:
    """One field visit at a location.

    Samples, recordings and photos are append-only; the accessors return
    tuple snapshots so callers cannot modify the observation's lists.
    """
    date: datetime
    weather: str
    water_temp: float         # °C
    observer: str
    location: Location
    trap_data: TrapData | None = None

    _fish_samples: list[FishSample] = field(default_factory=list, init=False, repr=False)
    _sound_recordings: list[SoundRecording] = field(default_factory=list, init=False, repr=False)
    _photo_paths: list[str] = field(default_factory=list, init=False, repr=False)

    def record_data(self, fish_sample: FishSample) -> None:
        self._fish_samples.append(fish_sample)

    def add_sound_recording(self, recording: SoundRecording) -> None:
        self._sound_recordings.append(recording)

    def attach_photos(self, photo_paths: list[str]) -> str:
        """Store photo paths and return a printable listing of this batch."""
        paths = list(photo_paths)
        self._photo_paths.extend(paths)
        log.info("photos_attached", observer=self.observer, count=len(paths))
        return "Photos attached: " + ", ".join(paths)

    @property
    def fish_samples(self) -> tuple[FishSample, ...]:
        return tuple(self._fish_samples)

    @property
    def sound_recordings(self) -> tuple[SoundRecording, ...]:
        return tuple(self._sound_recordings)

    @property
    def photo_paths(self) -> tuple[str, ...]:
        return tuple(self._photo_paths)
