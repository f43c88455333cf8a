import sqlite3
from datetime import date, datetime, timezone
from pathlib import Path

import pytest
from pydantic import ValidationError

from rosterbench.models import PerformanceEntry
from rosterbench.persistence import EntryStore


def _entry(player_id, metric_type, value, entry_date=date(2025, 3, 1), **kwargs):
    return PerformanceEntry(
        player_id=player_id,
        metric_type=metric_type,
        value=value,
        entry_date=entry_date,
        **kwargs,
    )


@pytest.fixture
def store(tmp_path: Path) -> EntryStore:
    return EntryStore(tmp_path / "nested" / "entries.sqlite")


def test_add_entry_fills_defaults(store: EntryStore):
    stored = store.add_entry(_entry("p1", "vertical_jump", 55))

    assert stored.entry_id
    assert stored.unit == "cm"
    assert stored.created_at is not None

    [loaded] = store.list_entries()
    assert loaded == stored


def test_add_entries_keeps_given_fields(store: EntryStore):
    created = datetime(2025, 3, 1, 9, 30, tzinfo=timezone.utc)
    [stored] = store.add_entries(
        [_entry("p1", "30yd_dash", 4.7, entry_id="abc", created_at=created, created_by="coach")]
    )

    assert stored.entry_id == "abc"
    assert stored.created_at == created
    assert store.list_entries()[0].created_by == "coach"


def test_list_entries_filters_and_orders(store: EntryStore):
    store.add_entries(
        [
            _entry("p1", "vertical_jump", 50, entry_date=date(2025, 1, 5)),
            _entry("p1", "vertical_jump", 54, entry_date=date(2025, 3, 5)),
            _entry("p1", "30yd_dash", 4.8, entry_date=date(2025, 2, 5)),
            _entry("p2", "vertical_jump", 60, entry_date=date(2025, 2, 5)),
        ]
    )

    p1_entries = store.list_entries(player_id="p1")
    assert [entry.entry_date for entry in p1_entries] == [
        date(2025, 3, 5),
        date(2025, 2, 5),
        date(2025, 1, 5),
    ]
    assert len(store.list_entries(metric_type="vertical_jump")) == 3
    assert len(store.list_entries(since=date(2025, 2, 1))) == 3
    assert store.list_entries(player_id="p3") == []


def test_positions_upsert(store: EntryStore):
    store.set_position("p1", "QB")
    store.set_position("p2", "DB")
    store.set_position("p1", "WR")

    assert store.get_position("p1") == "WR"
    assert store.get_position("missing") is None
    assert store.position_map() == {"p1": "WR", "p2": "DB"}


def test_set_position_rejects_unknown_codes(store: EntryStore):
    with pytest.raises(ValidationError):
        store.set_position("p1", "TE")


def test_store_uses_env_path(tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
    db_path = tmp_path / "from-env.sqlite"
    monkeypatch.setenv("ROSTERBENCH_DB_PATH", str(db_path))

    store = EntryStore()

    assert store.db_path == db_path
    assert db_path.exists()


def test_connections_are_closed_after_each_call(store: EntryStore, monkeypatch: pytest.MonkeyPatch):
    opened: list[sqlite3.Connection] = []
    connect = store._connect

    def _tracking_connect() -> sqlite3.Connection:
        conn = connect()
        opened.append(conn)
        return conn

    monkeypatch.setattr(store, "_connect", _tracking_connect)
    store.add_entry(_entry("p1", "vertical_jump", 55))
    store.list_entries()
    store.set_position("p1", "QB")
    store.position_map()

    assert len(opened) == 4
    for conn in opened:
        with pytest.raises(sqlite3.ProgrammingError):
            conn.execute("SELECT 1")
