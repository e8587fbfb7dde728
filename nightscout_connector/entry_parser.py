import datetime
import logging
from typing import Iterable, List, Union

from pydantic import BaseModel, ConfigDict, StrictFloat, StrictInt, StrictStr, ValidationError

from nightscout_data import Entry

logger = logging.getLogger('app')


class MalformedEntry(ValueError):
    pass


class RawEntry(BaseModel):
    """Fields of a Nightscout ``sgv.json`` record the menu bar needs."""

    model_config = ConfigDict(extra="ignore")

    sgv: StrictInt
    date: Union[StrictInt, StrictFloat]
    direction: StrictStr


def parse_entry(raw: dict) -> Entry:
    try:
        record = RawEntry.model_validate(raw)
    except ValidationError as ex:
        raise MalformedEntry(f"Invalid entry {raw!r}: {ex.error_count()} field error(s)") from ex

    try:
        time = datetime.datetime.fromtimestamp(record.date / 1000.0, tz=datetime.timezone.utc)
    except (OverflowError, OSError, ValueError) as ex:
        raise MalformedEntry(f"Invalid entry date {record.date!r}") from ex

    return Entry(time=time, value_mgdl=record.sgv, direction=record.direction)


def parse_entries(records: Iterable) -> List[Entry]:
    """Parse a batch of raw records, newest first.

    A bad record is logged and skipped, the rest of the batch is still parsed.
    """
    entries = []
    for raw in records:
        if not isinstance(raw, dict):
            logger.warning("Skipping entry that is not an object: {0!r}".format(raw))
            continue
        try:
            entries.append(parse_entry(raw))
        except MalformedEntry as ex:
            logger.warning("Skipping malformed entry. {0}".format(ex))

    entries.sort(key=lambda entry: entry.time, reverse=True)
    return entries
