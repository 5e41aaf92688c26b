"""
Business-day calculator for procedural deadlines.

Implements CPC art. 219 counting: Saturdays, Sundays and holidays are not
business days, the start day is excluded and the end day is included.

Dependencies: None (pure domain layer)
System role: Deadline due-date computation
"""

from datetime import date, timedelta
from typing import Iterable

# Saturday=5, Sunday=6 in date.weekday()
WEEKEND_DAYS = frozenset({5, 6})


def years_spanned(start: date, business_days: int) -> list[int]:
    """
    Return the calendar years a count of business days can reach from start.

    A year holds fewer than 260 business days, so two calendar days per
    business day plus two spare weeks bounds the reach.

    Args:
        start: First reference date
        business_days: Number of business days to count (negative counts back)

    Returns:
        list[int]: Ascending list of years to preload holidays for
    """
    padding = 14 if business_days >= 0 else -14
    reach = start + timedelta(days=business_days * 2 + padding)
    return years_between(start, reach)


def years_between(first: date, second: date) -> list[int]:
    """Ascending list of every year touched between two dates (either order)."""
    low, high = sorted((first, second))
    return list(range(low.year, high.year + 1))


class BusinessDayCalculator:
    """
    Counts business days against a fixed holiday set.

    The holiday set must already contain the national holidays and, when a
    state is involved, that state's holidays for every year the calculation
    can touch.
    """

    def __init__(self, holidays: Iterable[date] = ()) -> None:
        self.holidays = frozenset(holidays)

    def is_business_day(self, day: date) -> bool:
        """True when day is neither a weekend day nor a holiday."""
        return day.weekday() not in WEEKEND_DAYS and day not in self.holidays

    def add_business_days(self, start: date, days: int) -> date:
        """
        Compute the due date that is `days` business days after start.

        The start day itself is never counted. If the last counted day is not
        a business day it rolls forward to the next one.

        Args:
            start: Intimation/publication date
            days: Business days to add (>= 0)

        Returns:
            date: Due date

        Raises:
            ValueError: If days is negative
        """
        if days < 0:
            raise ValueError("days must be zero or positive")

        current = start
        counted = 0
        while counted < days:
            current += timedelta(days=1)
            if self.is_business_day(current):
                counted += 1

        return self.next_business_day(current)

    def business_days_until(self, end: date, today: date) -> int:
        """
        Count business days between today (exclusive) and end (inclusive).

        Returns a negative count when end is before today and zero when they
        are the same day.
        """
        if end == today:
            return 0

        forward = end > today
        low, high = (today, end) if forward else (end, today)

        count = 0
        cursor = low + timedelta(days=1)
        while cursor <= high:
            if self.is_business_day(cursor):
                count += 1
            cursor += timedelta(days=1)

        return count if forward else -count

    def next_business_day(self, day: date) -> date:
        """Return day itself if it is a business day, else the next one."""
        while not self.is_business_day(day):
            day += timedelta(days=1)
        return day
