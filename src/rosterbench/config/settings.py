"""Environment-driven runtime settings."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass

logger = logging.getLogger(__name__)

DB_PATH_ENV = "ROSTERBENCH_DB_PATH"
_RECENT_DAYS_ENV = "ROSTERBENCH_RECENT_DAYS"
_TREND_MONTHS_ENV = "ROSTERBENCH_TREND_MONTHS"
_OUTDATED_MONTHS_ENV = "ROSTERBENCH_OUTDATED_MONTHS"

_RECENT_DAYS_DEFAULT = 30
_TREND_MONTHS_DEFAULT = 6
_OUTDATED_MONTHS_DEFAULT = 3


def _env_int(name: str, default: int, *, min_value: int | None = None) -> int:
    raw = os.getenv(name)
    if raw is None:
        return default
    try:
        value = int(raw)
    except ValueError:
        logger.warning("Invalid int for %s: %s; using default %d", name, raw, default)
        return default
    if min_value is not None:
        value = max(min_value, value)
    return value


@dataclass(frozen=True)
class Settings:
    recent_days: int = _RECENT_DAYS_DEFAULT
    trend_months: int = _TREND_MONTHS_DEFAULT
    outdated_months: int = _OUTDATED_MONTHS_DEFAULT

    @classmethod
    def from_env(cls) -> "Settings":
        return cls(
            recent_days=_env_int(_RECENT_DAYS_ENV, _RECENT_DAYS_DEFAULT, min_value=1),
            trend_months=_env_int(_TREND_MONTHS_ENV, _TREND_MONTHS_DEFAULT, min_value=1),
            outdated_months=_env_int(_OUTDATED_MONTHS_ENV, _OUTDATED_MONTHS_DEFAULT, min_value=1),
        )
