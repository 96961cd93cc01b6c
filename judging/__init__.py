"""Judging administration service: CRUD API over judging-event metadata."""

__version__ = "1.0.0"
