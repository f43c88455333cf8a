"""Persistence layer for performance entries and player positions."""

from __future__ import annotations

import logging
import os
import sqlite3
import tempfile
from contextlib import closing
from datetime import date, datetime, timezone
from pathlib import Path
from typing import Dict, Iterable, List, Optional
from uuid import uuid4

from rosterbench.config.settings import DB_PATH_ENV
from rosterbench.models import PerformanceEntry, PlayerPosition

logger = logging.getLogger(__name__)


class EntryStore:
    """Simple SQLite-backed store for performance entries."""

    def __init__(self, db_path: Path | str | None = None):
        self._use_uri = False
        env_db = os.getenv(DB_PATH_ENV)
        if db_path is not None:
            self.db_path = Path(db_path)
        elif env_db:
            if env_db.startswith('file:'):
                self.db_path = env_db
                self._use_uri = True
            else:
                self.db_path = Path(env_db)
        else:
            self.db_path = Path.cwd() / 'rosterbench.sqlite'
        self._ensure_schema()

    def _connect(self) -> sqlite3.Connection:
        try:
            if isinstance(self.db_path, Path):
                self.db_path.parent.mkdir(parents=True, exist_ok=True)
                conn = sqlite3.connect(self.db_path)
            else:
                conn = sqlite3.connect(self.db_path, uri=self._use_uri)
        except sqlite3.OperationalError:
            fallback_dir = Path(tempfile.gettempdir()) / 'rosterbench-runtime'
            fallback_dir.mkdir(parents=True, exist_ok=True)
            fallback = fallback_dir / 'rosterbench.sqlite'
            logger.warning("Could not open %s; falling back to %s", self.db_path, fallback)
            conn = sqlite3.connect(fallback)
            self.db_path = fallback
            self._use_uri = False
            self._create_schema(conn)
        conn.row_factory = sqlite3.Row
        return conn

    def _ensure_schema(self) -> None:
        with closing(self._connect()) as conn:
            self._create_schema(conn)

    def _create_schema(self, conn: sqlite3.Connection) -> None:
        conn.execute(
            """
            CREATE TABLE IF NOT EXISTS performance_entries (
                id TEXT PRIMARY KEY,
                player_id TEXT NOT NULL,
                metric_type TEXT NOT NULL,
                value REAL NOT NULL,
                unit TEXT,
                entry_date TEXT NOT NULL,
                created_by TEXT,
                created_at TEXT NOT NULL
            )
            """
        )
        conn.execute(
            """
            CREATE INDEX IF NOT EXISTS idx_entries_player_metric
            ON performance_entries (player_id, metric_type, entry_date)
            """
        )
        conn.execute(
            """
            CREATE TABLE IF NOT EXISTS player_positions (
                player_id TEXT PRIMARY KEY,
                position TEXT NOT NULL,
                updated_at TEXT NOT NULL
            )
            """
        )
        conn.commit()

    def add_entry(self, entry: PerformanceEntry) -> PerformanceEntry:
        return self.add_entries([entry])[0]

    def add_entries(self, entries: Iterable[PerformanceEntry]) -> List[PerformanceEntry]:
        """Insert entries, filling in missing ids, units and timestamps."""

        now = datetime.now(timezone.utc)
        stored: List[PerformanceEntry] = []
        for entry in entries:
            stored.append(
                entry.model_copy(
                    update={
                        "entry_id": entry.entry_id or uuid4().hex,
                        "unit": entry.display_unit,
                        "created_at": entry.created_at or now,
                    }
                )
            )
        with closing(self._connect()) as conn:
            conn.executemany(
                """
                INSERT INTO performance_entries (
                    id, player_id, metric_type, value, unit, entry_date, created_by, created_at
                ) VALUES (?, ?, ?, ?, ?, ?, ?, ?)
                """,
                [
                    (
                        entry.entry_id,
                        entry.player_id,
                        entry.metric_type,
                        entry.value,
                        entry.unit,
                        entry.entry_date.isoformat(),
                        entry.created_by,
                        entry.created_at.isoformat(),
                    )
                    for entry in stored
                ],
            )
            conn.commit()
        logger.debug("Stored %s performance entries", len(stored))
        return stored

    def list_entries(
        self,
        *,
        player_id: Optional[str] = None,
        metric_type: Optional[str] = None,
        since: Optional[date] = None,
    ) -> List[PerformanceEntry]:
        clauses: List[str] = []
        params: List[str] = []
        if player_id is not None:
            clauses.append("player_id = ?")
            params.append(player_id)
        if metric_type is not None:
            clauses.append("metric_type = ?")
            params.append(metric_type)
        if since is not None:
            clauses.append("entry_date >= ?")
            params.append(since.isoformat())
        where = f"WHERE {' AND '.join(clauses)}" if clauses else ""
        with closing(self._connect()) as conn:
            rows = conn.execute(
                f"SELECT * FROM performance_entries {where} ORDER BY entry_date DESC, created_at ASC",
                params,
            ).fetchall()
        return [self._row_to_entry(row) for row in rows]

    def set_position(self, player_id: str, position: str) -> PlayerPosition:
        record = PlayerPosition(player_id=player_id, position=position)
        with closing(self._connect()) as conn:
            conn.execute(
                """
                INSERT INTO player_positions (player_id, position, updated_at)
                VALUES (?, ?, ?)
                ON CONFLICT(player_id) DO UPDATE SET
                    position = excluded.position,
                    updated_at = excluded.updated_at
                """,
                (record.player_id, record.position, datetime.now(timezone.utc).isoformat()),
            )
            conn.commit()
        return record

    def get_position(self, player_id: str) -> Optional[str]:
        with closing(self._connect()) as conn:
            row = conn.execute(
                "SELECT position FROM player_positions WHERE player_id = ?",
                (player_id,),
            ).fetchone()
        return row["position"] if row is not None else None

    def position_map(self) -> Dict[str, str]:
        with closing(self._connect()) as conn:
            rows = conn.execute("SELECT player_id, position FROM player_positions").fetchall()
        return {row["player_id"]: row["position"] for row in rows}

    @staticmethod
    def _row_to_entry(row: sqlite3.Row) -> PerformanceEntry:
        return PerformanceEntry(
            entry_id=row["id"],
            player_id=row["player_id"],
            metric_type=row["metric_type"],
            value=row["value"],
            unit=row["unit"],
            entry_date=date.fromisoformat(row["entry_date"]),
            created_by=row["created_by"],
            created_at=datetime.fromisoformat(row["created_at"]),
        )


__all__ = ["EntryStore"]
