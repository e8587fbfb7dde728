from .nightscout_connector import NightscoutConnector, NetworkFailure
from .entry_parser import MalformedEntry, parse_entry, parse_entries
from .staleness import is_stale, minutes_ago, STALE_THRESHOLD_MINUTES
from .display_formatter import format_status, format_history_row, format_other_info, trend_suffix
from .properties_parser import parse_properties

__all__ = ["NightscoutConnector", "NetworkFailure", "MalformedEntry", "parse_entry", "parse_entries", "is_stale",
           "minutes_ago", "STALE_THRESHOLD_MINUTES", "format_status", "format_history_row", "format_other_info",
           "trend_suffix", "parse_properties"]
