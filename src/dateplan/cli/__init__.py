"""Command-line harness for the date planner.

Usage:
    dateplan demo
    dateplan scenario --time 14 --budget 8000 --mood 7 --weather sunny
    dateplan batch --planners optimal,safe
"""

from .app import main, run_demo

__all__ = ["main", "run_demo"]
