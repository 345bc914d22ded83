"""Decides whether a user-activity event should trigger a notification."""

__version__ = "1.0.0"
