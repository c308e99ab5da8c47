"""Interactive menu wrapped around the advisor core."""

from .app import AdvisorConsole

__all__ = ["AdvisorConsole"]
