import pytest
import datetime

from nightscout_connector import format_history_row, format_other_info, format_status, trend_suffix
from nightscout_data import DisplayPreferences, Entry, OtherInfo

READING_TIME = datetime.datetime(2023, 11, 14, 22, 13, 20, tzinfo=datetime.timezone.utc)


def create_entry(value_mgdl: int, direction: str = "Flat", minutes_before: int = 0) -> Entry:
    return Entry(time=READING_TIME - datetime.timedelta(minutes=minutes_before), value_mgdl=value_mgdl,
                 direction=direction)


@pytest.fixture
def entries():
    return [create_entry(130), create_entry(120, "FortyFiveUp", minutes_before=5)]


class TestDisplayFormatter:

    def mock_dependencies(self, mocker):
        # pylint: disable=attribute-defined-outside-init
        self.mock_logger = mocker.patch("nightscout_connector.display_formatter.logger")
        # pylint: enable=attribute-defined-outside-init

    def test_format_status_mgdl(self):
        assert format_status([create_entry(120)], DisplayPreferences(units="mgdl")) == "120 →"

    def test_format_status_mmol(self):
        assert format_status([create_entry(120)], DisplayPreferences(units="mmol")) == "6.7 →"

    @pytest.mark.parametrize("direction, suffix", [
        ("", ""),
        ("NONE", " →"),
        ("Flat", " →"),
        ("FortyFiveDown", " ➘"),
        ("FortyFiveUp", " ➚"),
        ("SingleUp", " ↑"),
        ("DoubleUp", " ↑↑"),
        ("SingleDown", " ↓"),
        ("DoubleDown", " ↓↓"),
    ])
    def test_trend_suffix(self, mocker, direction, suffix):
        self.mock_dependencies(mocker)

        assert trend_suffix(direction) == suffix
        assert self.mock_logger.warning.call_count == 0

    def test_trend_suffix_unknown_direction(self, mocker):
        self.mock_dependencies(mocker)

        assert trend_suffix("banana") == " *"
        self.mock_logger.warning.assert_called_once_with("Unknown direction: banana")
        assert self.mock_logger.error.call_count == 0

    def test_format_status_delta_mgdl(self, entries):
        status = format_status(entries, DisplayPreferences(units="mgdl", show_delta=True))

        assert status == "130 → 10"

    def test_format_status_delta_falling(self):
        status = format_status([create_entry(110, "SingleDown"), create_entry(125, minutes_before=5)],
                               DisplayPreferences(show_delta=True))

        assert status == "110 ↓ -15"

    def test_format_status_delta_mmol(self, entries):
        status = format_status(entries, DisplayPreferences(units="mmol", show_delta=True))

        assert status == "7.2 → 0.6"

    def test_format_status_delta_needs_two_entries(self):
        status = format_status([create_entry(130)], DisplayPreferences(show_delta=True))

        assert status == "130 →"

    def test_format_status_update_time(self, entries):
        status = format_status(entries, DisplayPreferences(show_update_time=True),
                               now=READING_TIME + datetime.timedelta(minutes=4, seconds=30))

        assert status == "130 → 4 m"

    def test_format_status_delta_and_update_time(self, entries):
        status = format_status(entries, DisplayPreferences(show_delta=True, show_update_time=True),
                               now=READING_TIME + datetime.timedelta(minutes=1))

        assert status == "130 → 10 1 m"

    def test_format_status_update_time_uses_current_time(self, mocker, entries):
        mock_get_datetime_now = mocker.patch("nightscout_connector.staleness.get_datetime_now")
        mock_get_datetime_now.return_value = READING_TIME + datetime.timedelta(minutes=2)

        assert format_status(entries, DisplayPreferences(show_update_time=True)) == "130 → 2 m"

    @pytest.mark.parametrize("entries_value", [[], None])
    def test_format_status_without_entries(self, entries_value):
        prefs = DisplayPreferences(show_delta=True, show_update_time=True)

        assert format_status(entries_value, prefs) == "???"

    def test_format_history_row_ignores_delta_and_update_time(self, entries):
        prefs = DisplayPreferences(units="mgdl", show_delta=True, show_update_time=True)

        assert [format_history_row(entry, prefs) for entry in entries] == ["130 →", "120 ➚"]

    def test_format_history_row_mmol(self):
        assert format_history_row(create_entry(180, "DoubleUp"), DisplayPreferences(units="mmol")) == "10.0 ↑↑"

    def test_format_history_row_without_entry(self):
        assert format_history_row(None, DisplayPreferences()) == "???"

    def test_format_other_info(self):
        rows = format_other_info(OtherInfo(iob="0.85U", cob="12", pump_battery="75%"))

        assert rows == ["IOB: 0.85U", "COB: 12", "Pump: ???", "Battery: 75%", "Reservoir: ???"]
