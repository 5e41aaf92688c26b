"""
Process-wide TTL cache of holiday dates keyed by (year, state).

Dependencies: lexoffice.configs
System role: Avoids reloading holiday sets on every deadline calculation
"""

import threading
import time
from datetime import date

from lexoffice.configs import get_settings


class HolidayCache:
    """
    In-memory cache of frozen holiday sets with per-entry expiry.

    Keys are (year, state) where state is None for national-only sets.
    """

    def __init__(self, ttl_s: float = 300.0) -> None:
        self.ttl_s = ttl_s
        self._data: dict[tuple[int, str | None], tuple[float, frozenset[date]]] = {}
        self._lock = threading.Lock()

    def get(self, year: int, state: str | None) -> frozenset[date] | None:
        key = (year, state)
        with self._lock:
            entry = self._data.get(key)
            if entry is None:
                return None
            expires_at, holidays = entry
            if expires_at < time.monotonic():
                del self._data[key]
                return None
            return holidays

    def set(self, year: int, state: str | None, holidays: frozenset[date]) -> None:
        with self._lock:
            self._data[(year, state)] = (time.monotonic() + self.ttl_s, holidays)

    def clear(self) -> None:
        with self._lock:
            self._data.clear()


_cache: HolidayCache | None = None


def get_holiday_cache() -> HolidayCache:
    """Shared cache sized from settings on first use."""
    global _cache
    if _cache is None:
        _cache = HolidayCache(ttl_s=get_settings().holiday_cache_ttl_seconds)
    return _cache
