import logging

from nightscout_data import OtherInfo

logger = logging.getLogger('app')


def parse_properties(properties) -> OtherInfo:
    """Build a telemetry snapshot from a ``/pebble`` response.

    Every field is looked up on its own; a missing or mistyped value leaves
    that field unknown and never stops the others from being read.
    """
    other_info = OtherInfo()

    if not isinstance(properties, dict):
        properties = {}

    other_info.iob = _get_iob(properties)
    other_info.cob = _get_cob(properties)

    pump_data = _get_object(_get_object(properties, "pump"), "data")
    other_info.pump_clock = _get_display_string(pump_data, "clock")
    other_info.pump_battery = _get_display_string(pump_data, "battery")
    other_info.pump_reservoir = _get_display_string(pump_data, "reservoir")

    missing = other_info.missing_fields()
    if missing:
        logger.info("Unable to get all loop properties, missing: {0}".format(", ".join(missing)))

    return other_info


def _get_object(parent: dict, key: str) -> dict:
    value = parent.get(key)
    return value if isinstance(value, dict) else {}


def _get_iob(properties: dict) -> str:
    bgs = properties.get("bgs")
    if not isinstance(bgs, list) or not bgs or not isinstance(bgs[0], dict):
        return ""
    iob = bgs[0].get("iob")
    return iob if isinstance(iob, str) else ""


def _get_cob(properties: dict) -> str:
    display = _get_object(properties, "cob").get("display")
    if isinstance(display, bool):
        return ""
    if isinstance(display, (int, float, str)):
        return str(display)
    return ""


def _get_display_string(pump_data: dict, key: str) -> str:
    display = _get_object(pump_data, key).get("display")
    return display if isinstance(display, str) else ""
