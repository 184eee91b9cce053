"""Display labels for the study report.

One report layout, several label tables. Add a locale by adding an entry to
``_TABLES``.
"""

from __future__ import annotations

from dataclasses import dataclass, fields, replace


@dataclass(frozen=True)
class ReportLabels:
    report_title: str
    period: str
    total_observations: str
    total_samples: str
    total_recordings: str


ENGLISH = ReportLabels(
    report_title="Study Report",
    period="Period",
    total_observations="Total observations",
    total_samples="Total samples",
    total_recordings="Total recordings",
)

FRENCH = ReportLabels(
    report_title="Rapport d'étude",
    period="Période",
    total_observations="Nombre total d'observations",
    total_samples="Nombre total d'échantillons",
    total_recordings="Nombre total d'enregistrements",
)

_TABLES: dict[str, ReportLabels] = {
    "en": ENGLISH,
    "fr": FRENCH,
}


def available_locales() -> list[str]:
    return sorted(_TABLES)


def get_labels(locale: str, overrides: dict[str, str] | None = None) -> ReportLabels:
    """Return the label table for ``locale`` with optional per-key overrides."""
    try:
        labels = _TABLES[locale.lower()]
    except KeyError as exc:
        raise KeyError(
            f"Unknown locale '{locale}'. Available: {', '.join(available_locales())}"
        ) from exc

    if not overrides:
        return labels

    known = {f.name for f in fields(ReportLabels)}
    unknown = sorted(set(overrides) - known)
    if unknown:
        raise KeyError(f"Unknown report label(s): {', '.join(unknown)}")
    return replace(labels, **overrides)
