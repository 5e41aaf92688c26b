"""
Date windows for the deadline dashboard counters.

Dependencies: None (pure domain layer)
System role: Deadline statistics boundaries
"""

from dataclasses import dataclass
from datetime import date, timedelta


@dataclass(frozen=True)
class DeadlineWindows:
    """
    Inclusive date windows relative to a reference day.

    Attributes:
        today: Reference day
        tomorrow: Reference day + 1
        week_start: Day after tomorrow
        week_end: Sunday of the reference day's week
        next30_end: Reference day + 30
    """

    today: date
    tomorrow: date
    week_start: date
    week_end: date
    next30_end: date

    @classmethod
    def for_day(cls, today: date) -> "DeadlineWindows":
        return cls(
            today=today,
            tomorrow=today + timedelta(days=1),
            week_start=today + timedelta(days=2),
            week_end=today + timedelta(days=6 - today.weekday()),
            next30_end=today + timedelta(days=30),
        )

    @property
    def upcoming_end(self) -> date:
        """Last day of the seven-day "upcoming" window."""
        return self.today + timedelta(days=7)
