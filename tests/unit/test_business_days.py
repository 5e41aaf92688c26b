"""
Unit tests for business-day counting and dashboard windows.

System role: Verification of deadline arithmetic
"""

from datetime import date

import pytest

from lexoffice.core.deadlines import BusinessDayCalculator, DeadlineWindows, years_between, years_spanned

FRIDAY = date(2024, 1, 5)
SATURDAY = date(2024, 1, 6)
MONDAY = date(2024, 1, 8)


class TestIsBusinessDay:
    def test_weekdays_are_business_days(self) -> None:
        calc = BusinessDayCalculator()

        assert calc.is_business_day(FRIDAY)
        assert calc.is_business_day(MONDAY)

    def test_weekend_is_not_business_day(self) -> None:
        calc = BusinessDayCalculator()

        assert not calc.is_business_day(SATURDAY)
        assert not calc.is_business_day(date(2024, 1, 7))

    def test_holiday_is_not_business_day(self) -> None:
        calc = BusinessDayCalculator({MONDAY})

        assert not calc.is_business_day(MONDAY)


class TestAddBusinessDays:
    def test_start_day_is_excluded(self) -> None:
        # Arrange
        calc = BusinessDayCalculator()

        # Act
        due = calc.add_business_days(date(2024, 1, 2), 1)

        # Assert
        assert due == date(2024, 1, 3)

    def test_skips_weekend(self) -> None:
        calc = BusinessDayCalculator()

        assert calc.add_business_days(FRIDAY, 1) == MONDAY

    def test_skips_holidays(self) -> None:
        calc = BusinessDayCalculator({MONDAY})

        assert calc.add_business_days(FRIDAY, 1) == date(2024, 1, 9)

    def test_fifteen_day_deadline(self) -> None:
        # Carnival 2024: Feb 12-13
        calc = BusinessDayCalculator({date(2024, 2, 12), date(2024, 2, 13)})

        due = calc.add_business_days(date(2024, 2, 1), 15)

        assert due == date(2024, 2, 26)

    def test_zero_days_rolls_to_next_business_day(self) -> None:
        calc = BusinessDayCalculator()

        assert calc.add_business_days(SATURDAY, 0) == MONDAY
        assert calc.add_business_days(FRIDAY, 0) == FRIDAY

    def test_negative_days_raise(self) -> None:
        calc = BusinessDayCalculator()

        with pytest.raises(ValueError):
            calc.add_business_days(FRIDAY, -1)


class TestBusinessDaysUntil:
    def test_same_day_is_zero(self) -> None:
        assert BusinessDayCalculator().business_days_until(FRIDAY, FRIDAY) == 0

    def test_future_date_counts_forward(self) -> None:
        calc = BusinessDayCalculator()

        # Sat, Sun skipped; Mon counted
        assert calc.business_days_until(MONDAY, FRIDAY) == 1

    def test_past_date_is_negative(self) -> None:
        calc = BusinessDayCalculator()

        assert calc.business_days_until(FRIDAY, date(2024, 1, 10)) == -3

    def test_holidays_are_not_counted(self) -> None:
        calc = BusinessDayCalculator({date(2024, 1, 9)})

        assert calc.business_days_until(date(2024, 1, 10), MONDAY) == 1


class TestYearsSpanned:
    def test_single_year(self) -> None:
        assert years_spanned(date(2024, 3, 1), 10) == [2024]

    def test_crosses_year_end(self) -> None:
        assert years_spanned(date(2024, 12, 20), 15) == [2024, 2025]

    def test_years_between_accepts_any_order(self) -> None:
        assert years_between(date(2026, 1, 1), date(2024, 6, 1)) == [2024, 2025, 2026]


class TestDeadlineWindows:
    def test_windows_for_wednesday(self) -> None:
        # Act
        windows = DeadlineWindows.for_day(date(2024, 1, 3))

        # Assert
        assert windows.tomorrow == date(2024, 1, 4)
        assert windows.week_start == date(2024, 1, 5)
        assert windows.week_end == date(2024, 1, 7)
        assert windows.next30_end == date(2024, 2, 2)
        assert windows.upcoming_end == date(2024, 1, 10)

    def test_week_ends_on_sunday_itself(self) -> None:
        windows = DeadlineWindows.for_day(date(2024, 1, 7))

        assert windows.week_end == date(2024, 1, 7)
