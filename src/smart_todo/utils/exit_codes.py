"""
Exit codes for Smart To-Do.

Semantic exit codes so scripts wrapping the CLI can tell what happened.
"""

# Success
SUCCESS = 0

# General error (unspecified)
ERROR_GENERAL = 1

# Invalid arguments or validation error
ERROR_INVALID_ARGS = 2

# AI provider rejected the credentials or none are configured
ERROR_AUTH_FAILURE = 3

# Network or AI provider error (unreachable, timeout, 5xx after retries)
ERROR_NETWORK = 4

# Task not found
ERROR_NOT_FOUND = 5

# Attachment rejected (too large or unreadable)
ERROR_ATTACHMENT = 6


def get_exit_code_name(code: int) -> str:
    """Get the name of an exit code for display purposes."""
    code_names = {
        SUCCESS: "SUCCESS",
        ERROR_GENERAL: "ERROR_GENERAL",
        ERROR_INVALID_ARGS: "ERROR_INVALID_ARGS",
        ERROR_AUTH_FAILURE: "ERROR_AUTH_FAILURE",
        ERROR_NETWORK: "ERROR_NETWORK",
        ERROR_NOT_FOUND: "ERROR_NOT_FOUND",
        ERROR_ATTACHMENT: "ERROR_ATTACHMENT",
    }
    return code_names.get(code, f"UNKNOWN({code})")


def get_exit_code_description(code: int) -> str:
    """Get a human-readable description of an exit code."""
    descriptions = {
        SUCCESS: "Command executed successfully",
        ERROR_GENERAL: "A general error occurred",
        ERROR_INVALID_ARGS: "Invalid arguments or validation error",
        ERROR_AUTH_FAILURE: "AI credentials missing or rejected",
        ERROR_NETWORK: "Network or AI provider error - check connection",
        ERROR_NOT_FOUND: "Task not found",
        ERROR_ATTACHMENT: "Attachment rejected",
    }
    return descriptions.get(code, "Unknown error")
