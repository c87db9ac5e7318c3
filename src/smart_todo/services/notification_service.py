"""Console delivery of aggregate deadline alerts."""

from __future__ import annotations

import datetime as dt
import logging

from rich.console import Console
from rich.panel import Panel

from smart_todo.repositories import PreferenceRepository

logger = logging.getLogger(__name__)

ALERT_TITLE = "Task deadline warning ⏰"


def alert_message(count: int) -> str:
    noun = "task is" if count == 1 else "tasks are"
    return f"{count} {noun} near the deadline or overdue. Check your list soon!"


class ConsoleNotifier:
    """Notifier that prints a rich panel and rings the terminal bell.

    Permission is the user's stored notification preference. At most one
    alert is delivered per calendar day; the day of the last alert is kept
    in the preference repository.
    """

    def __init__(
        self,
        preferences: PreferenceRepository,
        console: Console,
        *,
        sound: bool = True,
        today: dt.date | None = None,
    ):
        self.preferences = preferences
        self.console = console
        self.sound = sound
        self._today = today

    @property
    def today(self) -> dt.date:
        return self._today or dt.date.today()

    @property
    def is_enabled(self) -> bool:
        return self.preferences.load_notif_pref()

    def is_permission_granted(self) -> bool:
        return self.is_enabled

    def already_alerted(self) -> bool:
        return self.preferences.load_last_alert() == self.today

    def toggle(self) -> bool:
        """Flip the notification preference and return the new value."""
        enabled = not self.is_enabled
        self.set_enabled(enabled)
        return enabled

    def set_enabled(self, enabled: bool) -> None:
        self.preferences.save_notif_pref(enabled)
        logger.info("Deadline notifications %s", "enabled" if enabled else "disabled")

    def chime(self) -> None:
        if self.sound:
            self.console.bell()

    def deliver(self, count: int) -> None:
        """Show one alert covering *count* urgent tasks and mark the day."""
        self.chime()
        self.console.print(
            Panel(
                alert_message(count),
                title=ALERT_TITLE,
                border_style="bold yellow",
                expand=False,
            )
        )
        self.preferences.save_last_alert(self.today)
