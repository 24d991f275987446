"""Interactive runner for shell command templates."""

__version__ = "0.1.0"
