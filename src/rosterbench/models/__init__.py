from .entry import PerformanceEntry, PlayerPosition

__all__ = ["PerformanceEntry", "PlayerPosition"]
