"""
Recurrence Engines

Pure functions mapping "today" to the next collection day under each
stream's policy. All inputs and outputs are plain dates at local-day
granularity; nothing is mutated.
"""

import calendar
from datetime import date, timedelta
from typing import Tuple

from svoz.calendar_utils import next_weekday_on_or_after, last_weekday_on_or_before

MonthDay = Tuple[int, int]


def next_fixed_interval_date(anchor: date, interval_days: int, today: date) -> date:
    """
    Get the first date on or after today reachable from anchor in whole intervals.

    Args:
        anchor: First occurrence of the cycle
        interval_days: Days between occurrences, must be positive
        today: The reference day

    Returns:
        anchor + k * interval_days for the smallest k >= 0 not before today
    """
    if interval_days <= 0:
        raise ValueError(f"Interval must be positive, got {interval_days}")

    elapsed = (today - anchor).days
    if elapsed <= 0:
        return anchor

    cycles = -(-elapsed // interval_days)  # ceiling division
    return anchor + timedelta(days=cycles * interval_days)


def _month_day_in_year(year: int, month_day: MonthDay) -> date:
    """Anchor a (month, day) pair to a year; Feb 29 becomes Feb 28 outside leap years."""
    month, day = month_day
    return date(year, month, min(day, calendar.monthrange(year, month)[1]))


def _season_bounds(year: int, season_start: MonthDay, season_end: MonthDay) -> Tuple[date, date]:
    start = _month_day_in_year(year, season_start)
    end = _month_day_in_year(year, season_end)
    if start > end:
        raise ValueError(f"Season start {season_start} is after season end {season_end}")
    return start, end


def next_seasonal_date(
    today: date,
    weekday: int,
    season_start: MonthDay,
    season_end: MonthDay,
    off_season_interval_days: int
) -> date:
    """
    Weekly collection in season, every off_season_interval_days outside it.

    In season the next matching weekday is returned (today included).
    Out of season the cycle is anchored on the last collection weekday on or
    before the season end of the season that just finished, which keeps the
    weekday and phase continuous across the boundary.

    Args:
        today: The reference day
        weekday: Collection weekday (Monday=0)
        season_start: (month, day) of the first in-season day
        season_end: (month, day) of the last in-season day
        off_season_interval_days: Step between off-season collections

    Returns:
        The next collection date on or after today
    """
    start, end = _season_bounds(today.year, season_start, season_end)

    if start <= today <= end:
        return next_weekday_on_or_after(today, weekday)

    # Before this year's season the relevant season ended last year
    if today < start:
        _, end = _season_bounds(today.year - 1, season_start, season_end)

    last_in_season = last_weekday_on_or_before(end, weekday)
    return next_fixed_interval_date(last_in_season, off_season_interval_days, today)


def next_switch_policy_date(
    today: date,
    weekday: int,
    switch_date: date,
    post_switch_interval_days: int
) -> date:
    """
    Weekly collection before switch_date, every post_switch_interval_days from it.

    The switch date is the first occurrence of the new cycle, so a weekly
    occurrence landing exactly on it already belongs to the new cycle.
    """
    next_weekday = next_weekday_on_or_after(today, weekday)
    if next_weekday < switch_date:
        return next_weekday

    return next_fixed_interval_date(switch_date, post_switch_interval_days, today)
