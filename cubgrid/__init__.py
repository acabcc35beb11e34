"""Top-down grid map viewer with a movable player, and C-style string helpers."""

__version__ = "0.1.0"