"""
Waste Collection Service

Evaluates the next collection date of every waste stream, persists the
result set and notifies about collections happening today.
"""

import logging
from datetime import date, datetime
from typing import Optional, Dict, Any, List, Tuple

from config import Config
from svoz.calendar_utils import to_local_midnight, format_display_date
from svoz.recurrence import next_fixed_interval_date, next_seasonal_date, next_switch_policy_date
from svoz.rules import CollectionRules

logger = logging.getLogger(__name__)

# Stream key to display name, in evaluation order
WASTE_NAMES = {
    'papir': 'Papír',
    'plasty': 'Plasty, drobné kovy, nápojové kartony',
    'bio': 'Bioodpad',
    'komunal': 'Komunální odpad',
}

STREAM_KEYS = tuple(WASTE_NAMES)


def get_default_rules() -> CollectionRules:
    """Build the collection rules from the application config."""
    return CollectionRules.from_config(Config)


def compute_next_dates(today: date, rules: CollectionRules) -> Dict[str, date]:
    """
    Run every recurrence engine for the given day.

    Args:
        today: The reference day (local calendar date)
        rules: Anchors, intervals and policy dates for each stream

    Returns:
        Dict mapping each stream key to its next collection date
    """
    return {
        'papir': next_fixed_interval_date(rules.papir_anchor, rules.papir_interval_days, today),
        'plasty': next_fixed_interval_date(rules.plasty_anchor, rules.plasty_interval_days, today),
        'bio': next_seasonal_date(
            today,
            rules.bio_weekday,
            rules.bio_season_start,
            rules.bio_season_end,
            rules.bio_off_season_interval_days
        ),
        'komunal': next_switch_policy_date(
            today,
            rules.komunal_weekday,
            rules.komunal_switch_date,
            rules.komunal_post_switch_interval_days
        ),
    }


def build_collection_records(
    now: datetime,
    rules: CollectionRules
) -> Tuple[Dict[str, Dict[str, Any]], List[str]]:
    """
    Build one collection record per stream and the set of streams collected today.

    Any engine failure propagates so that a partial record set is never built.

    Args:
        now: Timestamp of the run, stored as the records' update time
        rules: Collection rules

    Returns:
        (records, alerts) where records maps stream key to a dict with
        'last_updated', 'collection_date' and 'display_date', and alerts
        lists the stream keys whose collection date is today
    """
    today = to_local_midnight(now)
    next_dates = compute_next_dates(today, rules)

    records = {}
    alerts = []
    for key in STREAM_KEYS:
        collection_date = next_dates[key]
        records[key] = {
            'last_updated': now,
            'collection_date': collection_date,
            'display_date': format_display_date(collection_date),
        }
        if collection_date == today:
            alerts.append(key)

    return records, alerts


def format_alert_lines(records: Dict[str, Dict[str, Any]], alerts: List[str]) -> List[str]:
    """Format alerts as 'Papír: 15.10.2025 (St)' lines."""
    return [f"{WASTE_NAMES[key]}: {records[key]['display_date']}" for key in alerts]


def _notify(lines: List[str]) -> bool:
    """
    Hand today's alert lines to the email sink. Never raises.

    Returns:
        True if the email was sent
    """
    from svoz.email_service import send_collection_alert

    try:
        if send_collection_alert(lines):
            return True
        logger.error("Failed to send collection alert")
    except Exception as e:
        logger.error(f"Error sending collection alert: {e}")
    return False


def update_collection_schedule(
    now: Optional[datetime] = None,
    rules: Optional[CollectionRules] = None
) -> Dict[str, Any]:
    """
    Recompute all collection dates, persist them and notify about today's collections.

    Persistence errors propagate; notification errors are logged only and
    never undo the persisted record set.

    Args:
        now: Timestamp of the run (defaults to now)
        rules: Collection rules (defaults to the application config)

    Returns:
        Dict with today, streams_updated, alerts and notified
    """
    from svoz.database import replace_records

    if now is None:
        now = datetime.now()
    if rules is None:
        rules = get_default_rules()

    records, alerts = build_collection_records(now, rules)
    replace_records(records)
    logger.info("Stored collection dates: " + ", ".join(
        f"{key}={record['display_date']}" for key, record in records.items()
    ))

    notified = False
    if alerts:
        lines = format_alert_lines(records, alerts)
        logger.info(f"ALERT: Today is collection day for: {', '.join(lines)}")
        notified = _notify(lines)
    else:
        logger.info("No collection today.")

    return {
        'today': to_local_midnight(now).isoformat(),
        'streams_updated': len(records),
        'alerts': alerts,
        'notified': notified
    }
