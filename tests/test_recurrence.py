"""
Tests for the recurrence engines.
"""

import pytest
from datetime import date, timedelta

from svoz.recurrence import next_fixed_interval_date, next_seasonal_date, next_switch_policy_date

FRIDAY = 4
MONDAY = 0
SEASON_START = (3, 1)
SEASON_END = (11, 30)


def days_between(start, end):
    """Yield every date from start to end inclusive."""
    d = start
    while d <= end:
        yield d
        d += timedelta(days=1)


def next_bio(today):
    return next_seasonal_date(today, FRIDAY, SEASON_START, SEASON_END, 21)


def next_komunal(today):
    return next_switch_policy_date(today, MONDAY, date(2025, 9, 29), 14)


class TestFixedInterval:
    PAPIR_ANCHOR = date(2025, 10, 15)

    def test_anchor_day_returns_anchor(self):
        assert next_fixed_interval_date(self.PAPIR_ANCHOR, 28, self.PAPIR_ANCHOR) == self.PAPIR_ANCHOR

    def test_before_anchor_returns_anchor(self):
        assert next_fixed_interval_date(self.PAPIR_ANCHOR, 28, date(2025, 10, 1)) == self.PAPIR_ANCHOR

    def test_advances_one_cycle(self):
        assert next_fixed_interval_date(self.PAPIR_ANCHOR, 28, date(2025, 10, 20)) == date(2025, 11, 12)

    def test_cycle_day_is_inclusive(self):
        assert next_fixed_interval_date(self.PAPIR_ANCHOR, 28, date(2025, 11, 12)) == date(2025, 11, 12)

    def test_day_after_cycle_day_moves_to_next(self):
        assert next_fixed_interval_date(self.PAPIR_ANCHOR, 28, date(2025, 11, 13)) == date(2025, 12, 10)

    def test_plasty_schedule(self):
        anchor = date(2025, 10, 6)
        assert next_fixed_interval_date(anchor, 21, date(2025, 10, 15)) == date(2025, 10, 27)

    def test_result_is_on_cycle_and_not_in_past(self):
        anchor = date(2025, 10, 6)
        for today in days_between(date(2025, 9, 1), date(2027, 1, 31)):
            result = next_fixed_interval_date(anchor, 21, today)
            assert result >= today
            assert result >= anchor
            assert (result - anchor).days % 21 == 0
            if today > anchor:
                assert (result - today).days < 21

    def test_rejects_non_positive_interval(self):
        with pytest.raises(ValueError):
            next_fixed_interval_date(self.PAPIR_ANCHOR, 0, date(2025, 10, 20))


class TestSeasonalInSeason:
    def test_friday_returns_today(self):
        assert next_bio(date(2025, 10, 17)) == date(2025, 10, 17)

    def test_wednesday_returns_coming_friday(self):
        assert next_bio(date(2025, 10, 15)) == date(2025, 10, 17)

    def test_season_start_is_in_season(self):
        # Mar 1, 2026 is a Sunday
        assert next_bio(date(2026, 3, 1)) == date(2026, 3, 6)

    def test_in_season_results_are_weekly_fridays(self):
        previous = None
        for today in days_between(date(2025, 3, 1), date(2025, 11, 21)):
            result = next_bio(today)
            assert result >= today
            assert result.weekday() == FRIDAY
            assert (result - today).days < 7
            if previous is not None and result != previous:
                assert (result - previous).days == 7
            previous = result


class TestSeasonalOffSeason:
    LAST_IN_SEASON = date(2025, 11, 28)

    def test_first_off_season_day(self):
        # Last Friday on or before Nov 30 is Nov 28, plus 21 days
        assert next_bio(date(2025, 12, 1)) == date(2025, 12, 19)

    def test_collection_day_is_inclusive(self):
        assert next_bio(date(2025, 12, 19)) == date(2025, 12, 19)

    def test_january_uses_previous_year_season(self):
        assert next_bio(date(2026, 1, 5)) == date(2026, 1, 9)

    def test_february_uses_previous_year_season(self):
        assert next_bio(date(2026, 2, 2)) == date(2026, 2, 20)

    def test_off_season_phase_follows_last_in_season_friday(self):
        for today in days_between(date(2025, 12, 1), date(2026, 2, 28)):
            result = next_bio(today)
            assert result >= today
            assert result.weekday() == FRIDAY
            assert (result - self.LAST_IN_SEASON).days % 21 == 0
            assert (result - today).days < 21

    def test_season_end_already_friday(self):
        # Nov 30, 2029 is a Friday, so the off-season cycle starts on it
        assert next_bio(date(2029, 12, 1)) == date(2029, 12, 21)

    def test_custom_season_window(self):
        # Season Apr 1 - Oct 31; Oct 31, 2025 is a Friday
        result = next_seasonal_date(date(2025, 11, 3), FRIDAY, (4, 1), (10, 31), 14)
        assert result == date(2025, 11, 14)

    def test_leap_day_season_start_in_common_year(self):
        from svoz.rules import _parse_month_day
        leap_start = _parse_month_day('02-29')
        # Feb 29 falls back to Feb 28 in 2025; Jun 1, 2025 is a Sunday
        assert next_seasonal_date(date(2025, 6, 1), FRIDAY, leap_start, SEASON_END, 21) == date(2025, 6, 6)
        assert next_seasonal_date(date(2025, 2, 28), FRIDAY, leap_start, SEASON_END, 21) == date(2025, 2, 28)

    def test_leap_day_season_start_in_leap_year(self):
        # Feb 29, 2024 is a Thursday and already in season
        result = next_seasonal_date(date(2024, 2, 29), FRIDAY, (2, 29), SEASON_END, 21)
        assert result == date(2024, 3, 1)

    def test_rejects_inverted_season(self):
        with pytest.raises(ValueError):
            next_seasonal_date(date(2025, 6, 1), FRIDAY, (11, 30), (3, 1), 21)


class TestSwitchPolicy:
    SWITCH = date(2025, 9, 29)

    def test_weekly_before_switch(self):
        # Sep 1, 2025 is a Monday
        assert next_komunal(date(2025, 9, 1)) == date(2025, 9, 1)

    def test_weekly_next_monday_before_switch(self):
        assert next_komunal(date(2025, 9, 2)) == date(2025, 9, 8)

    def test_next_monday_on_switch_date_is_switch_date(self):
        assert next_komunal(date(2025, 9, 23)) == self.SWITCH

    def test_switch_date_itself(self):
        assert next_komunal(self.SWITCH) == self.SWITCH

    def test_biweekly_after_switch(self):
        assert next_komunal(date(2025, 10, 6)) == date(2025, 10, 13)

    def test_biweekly_skips_off_week_monday(self):
        assert next_komunal(date(2025, 10, 20)) == date(2025, 10, 27)

    def test_before_switch_lands_on_monday_within_a_week_of_switch(self):
        for today in days_between(date(2025, 8, 1), self.SWITCH - timedelta(days=1)):
            result = next_komunal(today)
            assert result >= today
            assert result.weekday() == MONDAY
            assert result < self.SWITCH + timedelta(days=7)

    def test_after_switch_gaps_are_fourteen_days(self):
        today = self.SWITCH
        previous = next_komunal(today)
        for _ in range(30):
            today += timedelta(days=14)
            result = next_komunal(today)
            assert (result - previous).days == 14
            previous = result

    def test_after_switch_results_stay_on_cycle(self):
        for today in days_between(self.SWITCH, date(2026, 12, 31)):
            result = next_komunal(today)
            assert result >= today
            assert result.weekday() == MONDAY
            assert (result - self.SWITCH).days % 14 == 0
