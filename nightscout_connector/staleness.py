import datetime

from nightscout_connector.helper import get_datetime_now
from nightscout_data import Entry

STALE_THRESHOLD_MINUTES = 15


def minutes_ago(entry: Entry, now: datetime.datetime = None) -> int:
    if now is None:
        now = get_datetime_now()
    return int((now - entry.time).total_seconds() / 60)


def is_stale(entry: Entry, threshold_minutes: int = STALE_THRESHOLD_MINUTES,
             now: datetime.datetime = None) -> bool:
    # whole minutes only, a reading 15:59 old is not stale at a threshold of 15
    return minutes_ago(entry, now) > threshold_minutes
