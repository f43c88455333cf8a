"""Input adapters that normalize raw performance data."""

from .entries import (
    DEFAULT_ENTRY_MAPPING,
    EntryRow,
    ImportReport,
    load_entries_csv,
    load_positions_csv,
    row_to_entry,
)

__all__ = [
    "DEFAULT_ENTRY_MAPPING",
    "EntryRow",
    "ImportReport",
    "load_entries_csv",
    "load_positions_csv",
    "row_to_entry",
]
