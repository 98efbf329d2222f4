"""
Exit codes for Pomodoro CLI.

Quitting the timer normally is a success; everything that stops the timer
from starting or keeps it from drawing gets its own code.
"""

# Success (normal quit)
SUCCESS = 0

# Malformed preset list or config file
ERROR_CONFIG = 2

# Terminal could not be initialised or written to
ERROR_TERMINAL = 3


def get_exit_code_name(code: int) -> str:
    """Get the name of an exit code for log records."""
    code_names = {
        SUCCESS: "SUCCESS",
        ERROR_CONFIG: "ERROR_CONFIG",
        ERROR_TERMINAL: "ERROR_TERMINAL",
    }
    return code_names.get(code, f"UNKNOWN({code})")
