"""Terminal budget tracker: load, report on, sort, filter and edit income and expense entries."""

__version__ = "0.1.0"
__all__ = ["records", "ordering", "budget", "cli"]