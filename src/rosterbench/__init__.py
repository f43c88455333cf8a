"""Roster performance tracking: best-entry reduction, cohorts and 0-100 benchmarks."""

__version__ = "0.1.0"
