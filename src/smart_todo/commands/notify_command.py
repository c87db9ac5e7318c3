"""Deadline notification commands."""

import typer

from smart_todo.services.deadline import scan_deadlines
from smart_todo.utils.typer_helpers import SuggestingGroup
from smart_todo.utils.ui.console import get_console
from smart_todo.utils.ui.formatters import format_info, format_success

from .decorators import command_wrapper
from .utils import get_notifier, get_task_store

app = typer.Typer(cls=SuggestingGroup, help="Deadline notification commands")
console = get_console()


def _report(enabled: bool) -> None:
    if enabled:
        format_success("Deadline notifications enabled")
    else:
        format_info("Deadline notifications disabled")


def _after_enable(notifier) -> None:
    notifier.chime()
    scan_deadlines(get_task_store().get_all(), notifier)


@app.command("on")
@command_wrapper
def notify_on() -> None:
    """Enable deadline notifications."""
    notifier = get_notifier()
    notifier.set_enabled(True)
    _report(True)
    _after_enable(notifier)


@app.command("off")
@command_wrapper
def notify_off() -> None:
    """Disable deadline notifications."""
    notifier = get_notifier()
    notifier.set_enabled(False)
    _report(False)


@app.command("toggle")
@command_wrapper
def notify_toggle() -> None:
    """Flip deadline notifications on or off."""
    notifier = get_notifier()
    enabled = notifier.toggle()
    _report(enabled)
    if enabled:
        _after_enable(notifier)


@app.command("status")
@command_wrapper
def notify_status() -> None:
    """Show whether deadline notifications are enabled."""
    notifier = get_notifier()
    state = "[green]on[/green]" if notifier.is_enabled else "[yellow]off[/yellow]"
    console.print(f"Deadline notifications: {state}")
    console.print(f"Sound: {'on' if notifier.sound else 'off'}", style="dim")
