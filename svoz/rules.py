"""
Collection rule values passed into the schedule evaluator.
"""

from dataclasses import dataclass
from datetime import date
from typing import Tuple

from svoz.calendar_utils import parse_weekday


def _parse_month_day(value: str) -> Tuple[int, int]:
    """Parse 'MM-DD' into a (month, day) pair."""
    month, day = value.split('-')
    # Validate against a leap year so 02-29 is accepted
    date(2024, int(month), int(day))
    return int(month), int(day)


@dataclass(frozen=True)
class CollectionRules:
    papir_anchor: date
    papir_interval_days: int
    plasty_anchor: date
    plasty_interval_days: int
    bio_weekday: int
    bio_season_start: Tuple[int, int]
    bio_season_end: Tuple[int, int]
    bio_off_season_interval_days: int
    komunal_weekday: int
    komunal_switch_date: date
    komunal_post_switch_interval_days: int

    @classmethod
    def from_config(cls, config) -> 'CollectionRules':
        """Build rules from a Config-like object holding string constants."""
        return cls(
            papir_anchor=date.fromisoformat(config.PAPIR_ANCHOR),
            papir_interval_days=int(config.PAPIR_INTERVAL_DAYS),
            plasty_anchor=date.fromisoformat(config.PLASTY_ANCHOR),
            plasty_interval_days=int(config.PLASTY_INTERVAL_DAYS),
            bio_weekday=parse_weekday(config.BIO_WEEKDAY),
            bio_season_start=_parse_month_day(config.BIO_SEASON_START),
            bio_season_end=_parse_month_day(config.BIO_SEASON_END),
            bio_off_season_interval_days=int(config.BIO_OFF_SEASON_INTERVAL_DAYS),
            komunal_weekday=parse_weekday(config.KOMUNAL_WEEKDAY),
            komunal_switch_date=date.fromisoformat(config.KOMUNAL_SWITCH_DATE),
            komunal_post_switch_interval_days=int(config.KOMUNAL_POST_SWITCH_INTERVAL_DAYS),
        )
