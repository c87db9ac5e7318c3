"""Configuration management commands."""

from typing import Annotated, Any

import typer

from smart_todo.services.config_service import API_KEY_ENV, get_config_service
from smart_todo.utils import exit_codes
from smart_todo.utils.logger import log_file_path
from smart_todo.utils.typer_helpers import SuggestingGroup
from smart_todo.utils.ui.console import get_console
from smart_todo.utils.ui.formatters import (
    format_info,
    format_output,
    format_success,
    format_warning,
)

from .decorators import AppError, command_wrapper

app = typer.Typer(cls=SuggestingGroup, help="Configuration management commands")
console = get_console()


def parse_value(value: str) -> Any:
    """Convert a command-line string to bool, int, float or None where it looks like one."""
    lowered = value.lower()
    if lowered in ("true", "false"):
        return lowered == "true"
    if lowered in ("null", "none"):
        return None
    if value.isdigit():
        return int(value)
    if value.replace(".", "", 1).isdigit():
        return float(value)
    return value


def _has_key(config_dict: dict, key: str) -> bool:
    current: Any = config_dict
    for part in key.split("."):
        if not isinstance(current, dict) or part not in current:
            return False
        current = current[part]
    return True


@app.command("view")
@command_wrapper
def view_config(
    output: Annotated[
        str, typer.Option("--output", "-o", help="Output format")
    ] = "table",
) -> None:
    """View current configuration."""
    config_service = get_config_service()
    config_dict = config_service.config.model_dump()
    config_dict["ai"]["api_key"] = "set" if config_service.load_api_key() else "not set"
    config_dict["paths"] = {
        "storage": str(config_service.storage_path),
        "log_file": str(log_file_path()),
    }
    format_output(config_dict, output)


@app.command("get")
@command_wrapper
def get_config(
    key: Annotated[str, typer.Argument(help="Configuration key (e.g., ai.model)")],
) -> None:
    """Get a configuration value."""
    config_service = get_config_service()
    value = config_service.get(key)
    if value is None and not _has_key(config_service.config.model_dump(), key):
        raise AppError(f"Configuration key '{key}' not found", exit_codes.ERROR_NOT_FOUND)
    console.print(value)


@app.command("set")
@command_wrapper
def set_config(
    key: Annotated[str, typer.Argument(help="Configuration key (e.g., ui.default_sort)")],
    value: Annotated[str, typer.Argument(help="Configuration value")],
) -> None:
    """Set a configuration value."""
    parsed_value = parse_value(value)
    try:
        get_config_service().set(key, parsed_value)
    except KeyError as e:
        raise AppError(
            f"Unknown configuration key '{key}'", exit_codes.ERROR_INVALID_ARGS
        ) from e
    format_success(f"Configuration '{key}' set to '{parsed_value}'")


@app.command("reset")
@command_wrapper
def reset_config(
    key: Annotated[
        str | None, typer.Argument(help="Configuration key to reset")
    ] = None,
    yes: Annotated[bool, typer.Option("--yes", "-y", help="Skip confirmation")] = False,
) -> None:
    """Reset configuration to defaults."""
    if not yes:
        msg = "entire configuration" if not key else f"'{key}'"
        confirm = typer.confirm(f"Are you sure you want to reset {msg}?")
        if not confirm:
            format_info("Cancelled")
            raise typer.Exit(0)

    try:
        get_config_service().reset(key)
    except KeyError as e:
        raise AppError(
            f"Unknown configuration key '{key}'", exit_codes.ERROR_INVALID_ARGS
        ) from e

    if key:
        format_success(f"Configuration '{key}' reset to default")
    else:
        format_success("Configuration reset to defaults")


@app.command("set-key")
@command_wrapper
def set_api_key(
    api_key: Annotated[
        str,
        typer.Option(
            "--api-key",
            prompt="AI API key",
            hide_input=True,
            help="API key for the AI assistant",
        ),
    ],
) -> None:
    """Store the AI API key in a private credentials file."""
    api_key = api_key.strip()
    if not api_key:
        raise AppError("API key cannot be empty", exit_codes.ERROR_INVALID_ARGS)
    get_config_service().save_api_key(api_key)
    format_success("AI API key saved")


@app.command("clear-key")
@command_wrapper
def clear_api_key() -> None:
    """Remove the stored AI API key."""
    get_config_service().clear_api_key()
    format_success("AI API key removed")
    if get_config_service().load_api_key():
        format_warning(f"{API_KEY_ENV} is still set in the environment")
