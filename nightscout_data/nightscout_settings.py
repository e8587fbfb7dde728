import logging
from dataclasses import dataclass
from typing import Mapping

logger = logging.getLogger('app')

UNITS_MGDL = "mgdl"
UNITS_MMOL = "mmol"

_TRUE_VALUES = ("1", "true", "yes", "on")


@dataclass
class DisplayPreferences:
    units: str = UNITS_MGDL
    show_delta: bool = False
    show_update_time: bool = False


@dataclass
class Settings:
    nightscout_url: str = ""
    access_token: str = ""
    units: str = UNITS_MGDL
    show_loop_data: bool = False
    show_update_time: bool = False
    show_delta: bool = False
    use_legacy_status_item: bool = False

    @classmethod
    def from_environ(cls, environ: Mapping[str, str]) -> "Settings":
        units = environ.get("NIGHTSCOUT_UNITS", UNITS_MGDL).strip().lower()
        if units not in (UNITS_MGDL, UNITS_MMOL):
            logger.warning("Unknown unit preference {0}, falling back to {1}".format(units, UNITS_MGDL))
            units = UNITS_MGDL

        return cls(
            nightscout_url=environ.get("NIGHTSCOUT_URL", "").strip().rstrip("/"),
            access_token=environ.get("NIGHTSCOUT_TOKEN", "").strip(),
            units=units,
            show_loop_data=_as_bool(environ.get("NIGHTSCOUT_SHOW_LOOP_DATA")),
            show_update_time=_as_bool(environ.get("NIGHTSCOUT_SHOW_UPDATE_TIME")),
            show_delta=_as_bool(environ.get("NIGHTSCOUT_SHOW_DELTA")),
            use_legacy_status_item=_as_bool(environ.get("NIGHTSCOUT_LEGACY_STATUS_ITEM")),
        )

    def display_preferences(self) -> DisplayPreferences:
        return DisplayPreferences(units=self.units,
                                  show_delta=self.show_delta,
                                  show_update_time=self.show_update_time)


def _as_bool(value) -> bool:
    if value is None:
        return False
    return value.strip().lower() in _TRUE_VALUES
