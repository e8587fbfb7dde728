import logging
from typing import List, Tuple

import requests

from nightscout_connector.display_formatter import UNKNOWN, format_history_row, format_other_info, format_status
from nightscout_connector.entry_parser import parse_entries
from nightscout_connector.properties_parser import parse_properties
from nightscout_connector.staleness import STALE_THRESHOLD_MINUTES, is_stale
from nightscout_data import Entry, OtherInfo, Settings

logger = logging.getLogger('app')

ENTRY_COUNT = 60
REQUEST_TIMEOUT_IN_SECONDS = 10


class NetworkFailure(Exception):
    def __init__(self, reason: str):
        super().__init__(reason)
        self.reason = reason


class NightscoutConnector:
    def __init__(self, uploader, settings: Settings, session: requests.Session = None):
        self._uploader = uploader
        self._settings = settings
        self._session = session if session is not None else requests.Session()

        self._entries: List[Entry] = []
        self._other_info = OtherInfo()
        self._update_in_progress = False

    @property
    def entries(self) -> Tuple[Entry, ...]:
        return tuple(self._entries)

    @property
    def other_info(self) -> OtherInfo:
        return self._other_info

    def update(self) -> None:
        if self._update_in_progress:
            logger.info("Previous update still running, skipping this one.")
            return

        self._update_in_progress = True
        try:
            self._update()
        except Exception:
            logger.error("Unexpected error while updating data", exc_info=True)
        finally:
            self._update_in_progress = False

    def _update(self) -> None:
        if not self._entries:
            self._uploader.update_display("[loading]", "Getting initial entries...")

        try:
            self._entries = self._fetch_entries()
            if not self._entries:
                raise NetworkFailure("no valid data")
        except NetworkFailure as failure:
            self._handle_network_fail(failure.reason)
            return

        self._populate_history()

        if self._settings.show_loop_data:
            self._update_other_info()

        self._show_latest_entry()

    def _show_latest_entry(self) -> None:
        if is_stale(self._entries[0], STALE_THRESHOLD_MINUTES):
            self._uploader.update_display("???", "No recent readings from CGM")
            return

        message = format_status(self._entries, self._settings.display_preferences())
        if self._settings.show_loop_data:
            message += " | IOB: " + (self._other_info.iob or UNKNOWN)
        self._uploader.update_display(message, None)

    def _update_other_info(self) -> None:
        try:
            properties = self._get_json("/pebble", {})
        except NetworkFailure as failure:
            logger.warning("Network error getting other info: {0}".format(failure.reason))
            return

        self._other_info = parse_properties(properties)
        self._uploader.update_other_info(format_other_info(self._other_info))

    def _fetch_entries(self) -> List[Entry]:
        records = self._get_json("/sgv.json", {"count": ENTRY_COUNT})
        if not isinstance(records, list):
            logger.warning("Entries response is not a list")
            return []
        return parse_entries(records)

    def _get_json(self, path: str, params: dict):
        if not self._settings.nightscout_url:
            raise NetworkFailure("Add your Nightscout URL in Preferences")

        if self._settings.access_token:
            params = dict(params, token=self._settings.access_token)

        try:
            response = self._session.get(self._settings.nightscout_url + path, params=params,
                                         timeout=REQUEST_TIMEOUT_IN_SECONDS)
        except (requests.exceptions.MissingSchema, requests.exceptions.InvalidSchema,
                requests.exceptions.InvalidURL):
            raise NetworkFailure("invalid URL")
        except requests.exceptions.Timeout:
            raise NetworkFailure("request timed out")
        except requests.exceptions.ConnectionError:
            raise NetworkFailure("No network")
        except requests.exceptions.RequestException as ex:
            logger.warning("Request error: {0}".format(ex))
            raise NetworkFailure("request failed")

        if response.status_code != 200:
            raise NetworkFailure("response code was {0}".format(response.status_code))

        try:
            return response.json()
        except ValueError:
            logger.warning("Failed to parse JSON from {0}".format(path))
            return None

    def _populate_history(self) -> None:
        prefs = self._settings.display_preferences()
        self._uploader.populate_history([(entry.time, format_history_row(entry, prefs)) for entry in self._entries])

    def _handle_network_fail(self, reason: str) -> None:
        logger.warning("Network error source: {0}".format(reason))

        if not self._entries or is_stale(self._entries[0], STALE_THRESHOLD_MINUTES):
            self._entries = []
            self._uploader.empty_history()
            self._uploader.update_display("[network]", reason)
        else:
            self._populate_history()
            message = format_status(self._entries, self._settings.display_preferences())
            self._uploader.update_display(message + "!", "Temporary network failure")
