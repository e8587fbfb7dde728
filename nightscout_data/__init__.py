from nightscout_data.nightscout_entry import Entry, OtherInfo, MGDL_PER_MMOL, mgdl_to_mmol
from nightscout_data.nightscout_settings import Settings, DisplayPreferences, UNITS_MGDL, UNITS_MMOL

__all__ = ["Entry", "OtherInfo", "MGDL_PER_MMOL", "mgdl_to_mmol", "Settings", "DisplayPreferences",
           "UNITS_MGDL", "UNITS_MMOL"]
