"""Zero-based budgeting engine: budget rollups, recurring schedules and trends."""

__version__ = "0.1.0"
