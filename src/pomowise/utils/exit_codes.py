"""
Exit codes for pomowise.

Scripts wrapping the CLI can rely on these to tell failures apart.
"""

# Success
SUCCESS = 0

# General error (unspecified)
ERROR_GENERAL = 1

# Invalid arguments or validation error
ERROR_INVALID_ARGS = 2

# Resource not found (unknown theme, font, config key, no status file)
ERROR_NOT_FOUND = 5

# Terminal could not be set up or restored
ERROR_TERMINAL = 7


def get_exit_code_name(code: int) -> str:
    """Get the name of an exit code for display purposes."""
    code_names = {
        SUCCESS: "SUCCESS",
        ERROR_GENERAL: "ERROR_GENERAL",
        ERROR_INVALID_ARGS: "ERROR_INVALID_ARGS",
        ERROR_NOT_FOUND: "ERROR_NOT_FOUND",
        ERROR_TERMINAL: "ERROR_TERMINAL",
    }
    return code_names.get(code, f"UNKNOWN({code})")


def get_exit_code_description(code: int) -> str:
    """Get a human-readable description of an exit code."""
    descriptions = {
        SUCCESS: "Command executed successfully",
        ERROR_GENERAL: "A general error occurred",
        ERROR_INVALID_ARGS: "Invalid arguments or validation error",
        ERROR_NOT_FOUND: "Resource not found",
        ERROR_TERMINAL: "Terminal setup or teardown failed - is this a TTY?",
    }
    return descriptions.get(code, "Unknown error")
