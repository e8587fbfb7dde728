from dataclasses import dataclass, fields
from datetime import datetime

MGDL_PER_MMOL = 18.0182


def mgdl_to_mmol(value_mgdl: float) -> float:
    return value_mgdl / MGDL_PER_MMOL


@dataclass(frozen=True)
class Entry:
    time: datetime
    value_mgdl: int
    direction: str = ""

    @property
    def value_mmol(self) -> float:
        return mgdl_to_mmol(self.value_mgdl)


@dataclass
class OtherInfo:
    iob: str = ""
    cob: str = ""
    pump_clock: str = ""
    pump_battery: str = ""
    pump_reservoir: str = ""

    def missing_fields(self) -> list:
        return [field.name for field in fields(self) if not getattr(self, field.name)]

    def is_complete(self) -> bool:
        return not self.missing_fields()
