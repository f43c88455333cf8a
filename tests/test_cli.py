import json
from pathlib import Path

import pytest

from rosterbench.cli import main


def _write_inputs(tmp_path: Path) -> tuple[Path, Path]:
    entries = tmp_path / "entries.csv"
    entries.write_text(
        "player_id,metric_type,value,entry_date\n"
        "p1,30yd_dash,4.5,2025-03-01\n"
        "p2,30yd_dash,4.8,2025-03-01\n"
        "p3,30yd_dash,5.1,2025-03-01\n"
        "p3,vertical_jump,58,2025-03-01\n"
        "p4,30yd_dash,n/a,2025-03-01\n",
        encoding="utf-8",
    )
    positions = tmp_path / "positions.csv"
    positions.write_text("player_id,position\np1,QB\np2,DB\np3,B\n", encoding="utf-8")
    return entries, positions


@pytest.fixture
def db(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> Path:
    entries, positions = _write_inputs(tmp_path)
    db_path = tmp_path / "cli.sqlite"
    main(["--db", str(db_path), "import-entries", str(entries)])
    main(["--db", str(db_path), "import-positions", str(positions)])
    return db_path


def _json_output(capsys: pytest.CaptureFixture[str]):
    return json.loads(capsys.readouterr().out)


def test_import_entries_reports_counts(tmp_path: Path, capsys: pytest.CaptureFixture[str]):
    entries, _ = _write_inputs(tmp_path)

    main(["--db", str(tmp_path / "x.sqlite"), "import-entries", str(entries)])

    out = capsys.readouterr().out
    assert "Imported 4/5 entries" in out
    assert "Skipped rows: line 6:" in out


def test_import_entries_dry_run_and_profile(tmp_path: Path, capsys: pytest.CaptureFixture[str]):
    csv_path = tmp_path / "export.csv"
    csv_path.write_text("Athlete,metric_type,value,entry_date\np7,vertical_jump,50,2025-03-01\n", encoding="utf-8")
    db_path = tmp_path / "dry.sqlite"
    profile = tmp_path / "profile.json"

    main(
        [
            "--db",
            str(db_path),
            "import-entries",
            str(csv_path),
            "--column",
            "player_id=Athlete",
            "--save-profile",
            str(profile),
            "--dry-run",
        ]
    )
    assert "Imported 1/1 entries" in capsys.readouterr().out
    assert json.loads(profile.read_text())["entry_mapping"] == {"player_id": "Athlete"}

    main(["--db", str(db_path), "averages"])
    assert _json_output(capsys)["all"] == []

    main(["--db", str(db_path), "import-entries", str(csv_path), "--load-profile", str(profile)])
    capsys.readouterr()
    main(["--db", str(db_path), "averages"])
    assert _json_output(capsys)["all"][0]["players"] == 1


def test_import_positions(db: Path, capsys: pytest.CaptureFixture[str]):
    assert "Assigned 3 positions" in capsys.readouterr().out


def test_benchmarks_command(db: Path, capsys: pytest.CaptureFixture[str]):
    capsys.readouterr()
    main(["--db", str(db), "benchmarks", "--mode", "defense"])

    data = _json_output(capsys)
    assert data["label"] == "Best Defense"
    assert data["benchmarks"]["30yd_dash"] == pytest.approx(4.8)
    assert data["benchmarks"]["vertical_jump"] == pytest.approx(58)
    assert data["benchmarks"]["jump_gather"] is None


def test_position_mode_without_position_exits(db: Path):
    with pytest.raises(SystemExit):
        main(["--db", str(db), "benchmarks", "--mode", "position"])


def test_compare_command(db: Path, capsys: pytest.CaptureFixture[str]):
    capsys.readouterr()
    main(["--db", str(db), "compare", "p3", "--mode", "position", "--position", "B"])

    data = _json_output(capsys)
    assert data["label"] == "Best B"
    assert {metric["metric_type"]: metric["score"] for metric in data["metrics"]} == {
        "vertical_jump": 100,
        "30yd_dash": 100,
    }


def test_neighborhood_command(db: Path, capsys: pytest.CaptureFixture[str]):
    capsys.readouterr()
    main(["--db", str(db), "neighborhood", "p3"])

    dash = next(item for item in _json_output(capsys) if item["metric_type"] == "30yd_dash")
    assert dash["percentile"] == 0
    assert dash["next_best_value"] == pytest.approx(4.8)


def test_dashboard_command(db: Path, capsys: pytest.CaptureFixture[str]):
    capsys.readouterr()
    main(["--db", str(db), "dashboard", "p1", "--as-of", "2025-03-15"])

    data = _json_output(capsys)
    assert data["as_of"] == "2025-03-15"
    assert data["total_players"] == 3
    assert data["player_recent_entries"] == 1
