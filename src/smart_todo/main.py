"""Main entry point for Smart To-Do."""

import typer

from smart_todo import __version__
from smart_todo.commands import (
    add_command,
    chat_command,
    check_command,
    config_command,
    delete_command,
    edit_command,
    list_command,
    notify_command,
    show_command,
    stats_command,
    theme_command,
    toggle_command,
)
from smart_todo.utils.typer_helpers import SuggestingGroup
from smart_todo.utils.ui.console import get_console

# Create main app with custom group class
app = typer.Typer(
    name="smart-todo",
    cls=SuggestingGroup,
    help="A smart to-do list with deadline alerts and an AI assistant",
    no_args_is_help=True,
)

# Add subcommand groups
app.add_typer(config_command.app, name="config", help="Configuration management")
app.add_typer(notify_command.app, name="notify", help="Deadline notifications")

# Add top-level commands
app.command("add")(add_command.add_task)
app.command("list")(list_command.list_tasks)
app.command("ls", hidden=True)(list_command.list_tasks)
app.command("done")(toggle_command.toggle_task)
app.command("toggle")(toggle_command.toggle_task)
app.command("edit")(edit_command.edit_task)
app.command("delete")(delete_command.delete_task)
app.command("show")(show_command.show_task)
app.command("stats")(stats_command.show_stats)
app.command("check")(check_command.check_deadlines)
app.command("theme")(theme_command.set_theme)
app.command("chat")(chat_command.chat)


@app.command()
def version() -> None:
    """Show version information."""
    get_console().print(f"[bold]Smart To-Do[/bold] version [cyan]{__version__}[/cyan]")


# Main entry point
def main():
    """Main entry point."""
    app()


if __name__ == "__main__":
    main()
