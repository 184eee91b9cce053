"""Study-level aggregation and reporting.

Everything here is derived on demand from the observations; nothing is
cached. No framework dependencies beyond logging.
"""

from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING

import structlog

from fishstudy.core.labels import ENGLISH, ReportLabels

if TYPE_CHECKING:
    from fishstudy.core.models import Observation

log = structlog.get_logger()


class FishStudy:
    """A named project collecting observations over a date range."""

    def __init__(self, project_name: str, start_date: datetime, end_date: datetime) -> None:
        self.project_name = project_name
        self.start_date = start_date
        self.end_date = end_date
        self._observations: list[Observation] = []

    def add_observation(self, observation: Observation) -> None:
        self._observations.append(observation)
        log.debug("observation_added", study=self.project_name,
                  observer=observation.observer,
                  location=observation.location.name)

    @property
    def observations(self) -> tuple[Observation, ...]:
        return tuple(self._observations)

    def total_samples(self) -> int:
        return sum(len(obs.fish_samples) for obs in self._observations)

    def total_recordings(self) -> int:
        return sum(len(obs.sound_recordings) for obs in self._observations)

    def generate_report(self, labels: ReportLabels | None = None) -> str:
        """Render the five-line summary report.

        ``labels`` selects the display strings; the layout is the same for
        every locale. Dates are printed as YYYY-MM-DD.
        """
        labels = labels or ENGLISH
        observation_count = len(self._observations)
        total_samples = self.total_samples()
        total_recordings = self.total_recordings()

        log.info("report_generated", study=self.project_name,
                 observations=observation_count,
                 samples=total_samples,
                 recordings=total_recordings)

        return "\n".join([
            f"{labels.report_title}: {self.project_name}",
            f"{labels.period}: {self.start_date.date().isoformat()} - {self.end_date.date().isoformat()}",
            f"{labels.total_observations}: {observation_count}",
            f"{labels.total_samples}: {total_samples}",
            f"{labels.total_recordings}: {total_recordings}",
        ])

    def analyze_trends(self) -> dict:
        """Species occurrence counts across all observations.

        Species appear in the order they were first recorded.
        """
        species_count: dict[str, int] = {}
        for obs in self._observations:
            for sample in obs.fish_samples:
                species_count[sample.species] = species_count.get(sample.species, 0) + 1

        return {
            "species_distribution": species_count,
            "observation_count": len(self._observations),
        }
