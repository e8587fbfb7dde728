import datetime
import webbrowser
from typing import Callable, List, Optional, Sequence, Tuple

import rumps


class MenuBarUploader:
    def __init__(self, name: str, nightscout_url: str, use_legacy_status_item: bool = False):
        self._nightscout_url = nightscout_url
        self._use_legacy_status_item = use_legacy_status_item
        self._refresh_callback: Optional[Callable[[], None]] = None

        self._message = "[loading]"
        self._extra_message: Optional[str] = None
        self._history_rows: List[str] = []
        self._other_info_rows: List[str] = []

        self._app = rumps.App(name, title=self._message, quit_button=None)
        self._rebuild_menu()

    def set_refresh_callback(self, callback: Callable[[], None]) -> None:
        self._refresh_callback = callback

    def update_display(self, message: str, extra_message: Optional[str] = None) -> None:
        self._message = message
        self._extra_message = extra_message
        self._render_title()
        self._rebuild_menu()

    def populate_history(self, rows: Sequence[Tuple[datetime.datetime, str]]) -> None:
        self._history_rows = ["{0}  {1}".format(time.astimezone().strftime("%H:%M"), row) for time, row in rows]
        self._rebuild_menu()

    def empty_history(self) -> None:
        self._history_rows = []
        self._rebuild_menu()

    def update_other_info(self, rows: Sequence[str]) -> None:
        self._other_info_rows = list(rows)
        self._rebuild_menu()

    def run(self) -> None:
        self._app.run()

    def _render_title(self) -> None:
        if self._use_legacy_status_item and self._extra_message:
            self._app.title = "{0} ({1})".format(self._message, self._extra_message)
        else:
            self._app.title = self._message

    def _rebuild_menu(self) -> None:
        items = []
        if self._extra_message and not self._use_legacy_status_item:
            items.append(rumps.MenuItem(self._extra_message))
            items.append(rumps.separator)

        if self._other_info_rows:
            items.extend(rumps.MenuItem(row) for row in self._other_info_rows)
            items.append(rumps.separator)

        history = rumps.MenuItem("History")
        for row in self._history_rows:
            history.add(rumps.MenuItem(row))
        items.append(history)
        items.append(rumps.separator)

        items.append(rumps.MenuItem("Refresh now", callback=self._on_refresh))
        items.append(rumps.MenuItem("Open Nightscout", callback=self._on_open_nightscout))
        items.append(rumps.MenuItem("Quit", callback=rumps.quit_application))

        self._app.menu.clear()
        self._app.menu = items

    def _on_refresh(self, _sender) -> None:
        if self._refresh_callback is not None:
            self._refresh_callback()

    def _on_open_nightscout(self, _sender) -> None:
        if self._nightscout_url:
            webbrowser.open_new_tab(self._nightscout_url)
