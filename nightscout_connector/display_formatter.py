import datetime
import logging
from typing import List, Optional, Sequence

from nightscout_connector.staleness import minutes_ago
from nightscout_data import DisplayPreferences, Entry, OtherInfo, UNITS_MMOL

logger = logging.getLogger('app')

UNKNOWN = "???"

TREND_SUFFIXES = {
    "": "",
    "NONE": " →",
    "Flat": " →",
    "FortyFiveDown": " ➘",
    "FortyFiveUp": " ➚",
    "SingleUp": " ↑",
    "DoubleUp": " ↑↑",
    "SingleDown": " ↓",
    "DoubleDown": " ↓↓",
}
UNKNOWN_TREND_SUFFIX = " *"


def trend_suffix(direction: str) -> str:
    if direction in TREND_SUFFIXES:
        return TREND_SUFFIXES[direction]
    logger.warning("Unknown direction: {0}".format(direction))
    return UNKNOWN_TREND_SUFFIX


def format_value(entry: Entry, units: str) -> str:
    if units == UNITS_MMOL:
        return "{0:.1f}".format(entry.value_mmol)
    return str(entry.value_mgdl)


def format_delta(newest: Entry, previous: Entry, units: str) -> str:
    # newest minus previous, a falling glucose shows a negative delta
    if units == UNITS_MMOL:
        return "{0:.1f}".format(round(newest.value_mmol - previous.value_mmol, 1))
    return str(newest.value_mgdl - previous.value_mgdl)


def format_history_row(entry: Optional[Entry], prefs: DisplayPreferences) -> str:
    if entry is None:
        return UNKNOWN
    return format_value(entry, prefs.units) + trend_suffix(entry.direction)


def format_status(entries: Optional[Sequence[Entry]], prefs: DisplayPreferences,
                  now: datetime.datetime = None) -> str:
    """Short menu bar text for the newest reading.

    Delta and age suffixes are appended only when enabled in ``prefs``; the
    delta needs at least two readings and is silently left out otherwise.
    """
    if not entries:
        return UNKNOWN

    newest = entries[0]
    status = format_history_row(newest, prefs)

    if prefs.show_delta and len(entries) >= 2:
        status += " " + format_delta(newest, entries[1], prefs.units)

    if prefs.show_update_time:
        status += " {0} m".format(minutes_ago(newest, now))

    return status


def format_other_info(other_info: OtherInfo) -> List[str]:
    return [
        "IOB: " + (other_info.iob or UNKNOWN),
        "COB: " + (other_info.cob or UNKNOWN),
        "Pump: " + (other_info.pump_clock or UNKNOWN),
        "Battery: " + (other_info.pump_battery or UNKNOWN),
        "Reservoir: " + (other_info.pump_reservoir or UNKNOWN),
    ]
