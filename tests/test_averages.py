from datetime import date

import pytest

from rosterbench.benchmark import cohort_averages
from rosterbench.models import PerformanceEntry


def _entry(player_id, metric_type, value, entry_date=date(2025, 3, 1)):
    return PerformanceEntry(player_id=player_id, metric_type=metric_type, value=value, entry_date=entry_date)


POSITIONS = {"qb1": "QB", "wr1": "WR", "db1": "DB", "b1": "B"}


def _entries() -> list[PerformanceEntry]:
    return [
        _entry("qb1", "vertical_jump", 50),
        _entry("wr1", "vertical_jump", 60),
        _entry("db1", "vertical_jump", 70),
        _entry("b1", "vertical_jump", 40),
        _entry("qb1", "30yd_dash", 4.8),
        _entry("wr1", "30yd_dash", 4.4),
    ]


def test_roster_averages_cover_metrics_with_data():
    result = cohort_averages(_entries(), POSITIONS)

    by_metric = {average.metric_type: average for average in result.all}
    assert list(by_metric) == ["vertical_jump", "30yd_dash"]
    assert by_metric["vertical_jump"].average_value == pytest.approx(55.0)
    assert by_metric["vertical_jump"].players == 4
    assert by_metric["vertical_jump"].unit == "cm"
    assert by_metric["30yd_dash"].average_value == pytest.approx(4.6)
    assert result.position == []
    assert result.unit == []


def test_position_and_unit_breakdowns():
    result = cohort_averages(_entries(), POSITIONS, position="QB", unit="defense")

    assert [(avg.metric_type, avg.average_value) for avg in result.position] == [
        ("vertical_jump", 50.0),
        ("30yd_dash", 4.8),
    ]
    assert len(result.unit) == 1
    assert result.unit[0].average_value == pytest.approx(55.0)
    assert result.unit[0].players == 2


def test_averages_use_latest_entry_per_player():
    entries = [
        _entry("qb1", "pushups_1min", 20, entry_date=date(2025, 1, 1)),
        _entry("qb1", "pushups_1min", 30, entry_date=date(2025, 3, 1)),
        _entry("wr1", "pushups_1min", 40, entry_date=date(2025, 2, 1)),
    ]

    result = cohort_averages(entries, POSITIONS)

    assert result.all[0].average_value == pytest.approx(35.0)
    assert result.all[0].players == 2


def test_unassigned_players_only_count_in_roster_average():
    entries = _entries() + [_entry("free", "vertical_jump", 100)]
    positions = dict(POSITIONS, free="unassigned")

    result = cohort_averages(entries, positions, unit="offense")

    assert result.all[0].players == 5
    assert result.unit[0].average_value == pytest.approx(55.0)
