"""Decorators for command functions."""

import asyncio
import functools
import inspect
import time
import traceback
from collections.abc import Callable

import typer
from pydantic import ValidationError

from smart_todo.exceptions import (
    AIAuthError,
    AIClientError,
    AIConfigError,
    AmbiguousTaskIdError,
    AttachmentError,
    SmartTodoError,
    TaskNotFoundError,
)
from smart_todo.utils import exit_codes
from smart_todo.utils.logger import get_logger
from smart_todo.utils.ui.formatters import format_error


class AppError(Exception):
    """Custom application error with exit code."""

    def __init__(self, message: str, exit_code: int = exit_codes.ERROR_GENERAL):
        super().__init__(message)
        self.exit_code = exit_code


def exit_code_for(error: SmartTodoError) -> int:
    """Map a domain error to a semantic exit code."""
    if isinstance(error, (TaskNotFoundError, AmbiguousTaskIdError)):
        return exit_codes.ERROR_NOT_FOUND
    if isinstance(error, AttachmentError):
        return exit_codes.ERROR_ATTACHMENT
    if isinstance(error, (AIConfigError, AIAuthError)):
        return exit_codes.ERROR_AUTH_FAILURE
    if isinstance(error, AIClientError):
        return exit_codes.ERROR_NETWORK
    return exit_codes.ERROR_GENERAL


def format_validation_error(error: ValidationError) -> str:
    parts = []
    for err in error.errors():
        location = ".".join(str(loc) for loc in err["loc"]) or "value"
        parts.append(f"{location}: {err['msg']}")
    return "; ".join(parts)


def command_wrapper(_func: Callable | None = None):
    """Decorator to wrap command functions with logging and error handling."""

    def decorator(func: Callable):
        @functools.wraps(func)
        def wrapper(*args, **kwargs):
            logger = get_logger()
            cmd = func.__name__
            start = time.monotonic()
            logger.info("command started: %s", cmd)
            try:
                if inspect.iscoroutinefunction(func):
                    result = asyncio.run(func(*args, **kwargs))
                else:
                    result = func(*args, **kwargs)

                elapsed = time.monotonic() - start
                logger.info("command completed: %s (%.3fs)", cmd, elapsed)
                return result

            except (AppError, SmartTodoError, ValidationError) as e:
                elapsed = time.monotonic() - start
                if isinstance(e, AppError):
                    code, message = e.exit_code, str(e)
                elif isinstance(e, ValidationError):
                    code, message = exit_codes.ERROR_INVALID_ARGS, format_validation_error(e)
                else:
                    code, message = exit_code_for(e), str(e)
                logger.error(
                    "command failed: %s (%.3fs) - %s",
                    cmd,
                    elapsed,
                    message,
                )
                format_error(message)
                raise typer.Exit(code=code) from e

            except typer.Exit:
                # Re-raise Typer's own exits (like --help or explicit Exit(0))
                raise

            except Exception as e:
                elapsed = time.monotonic() - start
                logger.error(
                    "command failed: %s (%.3fs) - %s\n%s",
                    cmd,
                    elapsed,
                    str(e),
                    traceback.format_exc(),
                )
                # Generic fallback for unexpected crashes
                format_error(f"An unexpected error occurred: {str(e)}")
                raise typer.Exit(code=exit_codes.ERROR_GENERAL) from e

        return wrapper

    if _func is None:
        return decorator
    return decorator(_func)
