"""Football positions and their offense/defense grouping."""

from __future__ import annotations

from typing import Dict, Literal, Optional, Tuple

Position = Literal["QB", "WR", "C", "DB", "B", "unassigned"]
Unit = Literal["offense", "defense"]

POSITION_LABELS: Dict[str, str] = {
    "QB": "Quarterback",
    "WR": "Wide Receiver",
    "C": "Center",
    "DB": "Defensive Back",
    "B": "Linebacker",
    "unassigned": "Unassigned",
}

POSITIONS: Tuple[str, ...] = tuple(POSITION_LABELS)

_POSITION_UNITS: Dict[str, str] = {
    "QB": "offense",
    "WR": "offense",
    "C": "offense",
    "DB": "defense",
    "B": "defense",
}

UNITS: Tuple[str, ...] = ("offense", "defense")


def get_position_unit(position: str) -> Optional[str]:
    """Return ``offense``/``defense`` for a position, or None when unassigned."""

    if position not in POSITION_LABELS:
        raise KeyError(f"Unknown position {position!r}")
    return _POSITION_UNITS.get(position)


def positions_for_unit(unit: str) -> Tuple[str, ...]:
    if unit not in UNITS:
        raise KeyError(f"Unknown unit {unit!r}")
    return tuple(pos for pos in POSITIONS if _POSITION_UNITS.get(pos) == unit)
