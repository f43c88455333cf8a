from datetime import date, datetime, timezone

from rosterbench.benchmark import best_daily_entries, latest_entries
from rosterbench.models import PerformanceEntry

DAY = date(2025, 3, 1)


def _entry(player_id, metric_type, value, entry_date=DAY, created_at=None, entry_id=None):
    return PerformanceEntry(
        entry_id=entry_id,
        player_id=player_id,
        metric_type=metric_type,
        value=value,
        entry_date=entry_date,
        created_at=created_at,
    )


def _at(hour: int) -> datetime:
    return datetime(2025, 3, 1, hour, tzinfo=timezone.utc)


def test_best_daily_picks_fastest_time():
    entries = [_entry("p1", "30yd_dash", value) for value in (5.2, 4.9, 5.0)]

    winners = best_daily_entries(entries)

    assert list(winners) == [("p1", "30yd_dash", DAY)]
    assert winners[("p1", "30yd_dash", DAY)].value == 4.9


def test_best_daily_picks_most_reps():
    entries = [_entry("p1", "pushups_1min", value) for value in (20, 35, 28)]

    winners = best_daily_entries(entries)

    assert winners[("p1", "pushups_1min", DAY)].value == 35


def test_best_daily_keeps_separate_days_and_players():
    entries = [
        _entry("p1", "vertical_jump", 50),
        _entry("p1", "vertical_jump", 52, entry_date=date(2025, 3, 2)),
        _entry("p2", "vertical_jump", 48),
        _entry("p1", "jump_gather", 60),
    ]

    winners = best_daily_entries(entries)

    assert len(winners) == 4


def test_best_daily_is_idempotent():
    entries = [
        _entry("p1", "30yd_dash", 5.2),
        _entry("p1", "30yd_dash", 4.9),
        _entry("p2", "30yd_dash", 5.5),
        _entry("p2", "vertical_jump", 44),
        _entry("p2", "vertical_jump", 47, entry_date=date(2025, 2, 1)),
    ]

    reduced = best_daily_entries(entries)
    again = best_daily_entries(reduced.values())

    assert again == reduced


def test_best_daily_tie_prefers_earliest_created_at():
    later = _entry("p1", "shuttle_5_10_5", 4.8, created_at=_at(15), entry_id="later")
    earlier = _entry("p1", "shuttle_5_10_5", 4.8, created_at=_at(9), entry_id="earlier")
    untimed = _entry("p1", "shuttle_5_10_5", 4.8, entry_id="untimed")

    winners = best_daily_entries([untimed, later, earlier])

    assert winners[("p1", "shuttle_5_10_5", DAY)].entry_id == "earlier"


def test_best_daily_tie_without_timestamps_keeps_first_seen():
    first = _entry("p1", "vertical_jump", 50, entry_id="first")
    second = _entry("p1", "vertical_jump", 50, entry_id="second")

    winners = best_daily_entries([first, second])

    assert winners[("p1", "vertical_jump", DAY)].entry_id == "first"


def test_latest_entries_prefers_recent_date_over_better_value():
    entries = [
        _entry("p1", "30yd_dash", 4.5, entry_date=date(2025, 1, 10)),
        _entry("p1", "30yd_dash", 4.9, entry_date=date(2025, 3, 10)),
        _entry("p1", "30yd_dash", 5.1, entry_date=date(2025, 3, 10)),
    ]

    latest = latest_entries(entries)

    assert latest[("p1", "30yd_dash")].value == 4.9
    assert latest[("p1", "30yd_dash")].entry_date == date(2025, 3, 10)


def test_latest_entries_matches_on_raw_and_reduced_input():
    entries = [
        _entry("p1", "pushups_1min", 30, entry_date=date(2025, 3, 1)),
        _entry("p1", "pushups_1min", 34, entry_date=date(2025, 3, 1)),
        _entry("p2", "pushups_1min", 25, entry_date=date(2025, 2, 1)),
    ]

    assert latest_entries(entries) == latest_entries(best_daily_entries(entries).values())


def test_best_daily_tie_mixes_naive_and_aware_timestamps():
    naive = _entry("p1", "30yd_dash", 4.8, created_at=datetime(2025, 3, 1, 9), entry_id="naive")
    aware = _entry("p1", "30yd_dash", 4.8, created_at=_at(8), entry_id="aware")

    winners = best_daily_entries([naive, aware])

    assert winners[("p1", "30yd_dash", DAY)].entry_id == "aware"
    assert latest_entries([aware, naive])[("p1", "30yd_dash")].entry_id == "aware"
