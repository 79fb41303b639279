"""Deadline-governed batch updater for tool download URLs."""

__version__ = "0.1.0"
