"""Taskboard - week-day selector and daily task list"""

__version__ = "0.1.0"
