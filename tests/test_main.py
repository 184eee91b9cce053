"""Tests for the command line entry point."""

from __future__ import annotations

import json
from datetime import datetime

import pytest

from fishstudy.main import build_demo_study, format_trends, main


def test_demo_study_contents():
    study = build_demo_study(now=datetime(2024, 6, 1, 12, 0))
    assert study.project_name == "Torul Dam Study"
    assert len(study.observations) == 1
    obs = study.observations[0]
    assert obs.location.get_coordinates() == (40.5678, 39.8765)
    assert obs.fish_samples[0].species == "Trout"
    assert obs.sound_recordings[0].file_format == "WAV"
    assert obs.sound_recordings[0].duration == 120


def test_main_prints_report_and_trends(tmp_path, capsys):
    rc = main(["--config", str(tmp_path / "missing.yaml")])
    assert rc == 0

    out = capsys.readouterr().out.splitlines()
    assert out == [
        "Study Report: Torul Dam Study",
        "Period: 2024-01-01 - 2024-12-31",
        "Total observations: 1",
        "Total samples: 1",
        "Total recordings: 1",
        "{'species_distribution': {'Trout': 1}, 'observation_count': 1}",
    ]


def test_main_french_without_trends(tmp_path, capsys):
    rc = main(["--config", str(tmp_path / "missing.yaml"), "--locale", "fr", "--no-trends"])
    assert rc == 0

    out = capsys.readouterr().out.splitlines()
    assert out[0] == "Rapport d'étude: Torul Dam Study"
    assert len(out) == 5


def test_main_json_trends_and_logs_on_stderr(tmp_path, capsys):
    path = tmp_path / "config.yaml"
    path.write_text(
        "report:\n  trends_format: json\nlogging:\n  format: json\n",
        encoding="utf-8",
    )
    main(["--config", str(path)])

    captured = capsys.readouterr()
    trends = json.loads(captured.out.splitlines()[-1])
    assert trends == {"species_distribution": {"Trout": 1}, "observation_count": 1}

    events = [json.loads(line)["event"] for line in captured.err.splitlines()]
    assert "demo_started" in events
    assert "report_generated" in events


def test_main_warning_level_silences_info_logs(tmp_path, capsys, monkeypatch):
    monkeypatch.setenv("FISHSTUDY_LOG_LEVEL", "warning")
    main(["--config", str(tmp_path / "missing.yaml")])

    captured = capsys.readouterr()
    assert captured.err == ""
    assert captured.out.startswith("Study Report: Torul Dam Study")


def test_main_applies_label_overrides_from_config(tmp_path, capsys):
    path = tmp_path / "config.yaml"
    path.write_text("report:\n  labels:\n    report_title: Bilan\n", encoding="utf-8")
    main(["--config", str(path)])

    out = capsys.readouterr().out.splitlines()
    assert out[0] == "Bilan: Torul Dam Study"
    assert out[1] == "Period: 2024-01-01 - 2024-12-31"


def test_main_uppercase_json_format(tmp_path, capsys):
    path = tmp_path / "config.yaml"
    path.write_text("report:\n  trends_format: JSON\n", encoding="utf-8")
    main(["--config", str(path)])

    last = capsys.readouterr().out.splitlines()[-1]
    assert json.loads(last) == {"species_distribution": {"Trout": 1}, "observation_count": 1}


def test_format_trends_rejects_unknown_format():
    with pytest.raises(ValueError, match="yaml"):
        format_trends({"observation_count": 0}, "yaml")
