"""Runtime configuration for the date planner.

Settings are read from environment variables, falling back to the module
defaults below.
"""

import os

# Default configuration (can be overridden via environment variables)
DEFAULT_LOG_LEVEL = "WARNING"
DEFAULT_PLANNER = "optimal"


def get_log_level() -> str:
    """Get configured log level name from environment."""
    return os.environ.get("DATEPLAN_LOG_LEVEL", DEFAULT_LOG_LEVEL).upper()


def get_default_planner() -> str:
    """Get the planner used when none is named explicitly."""
    return os.environ.get("DATEPLAN_DEFAULT_PLANNER", DEFAULT_PLANNER)
