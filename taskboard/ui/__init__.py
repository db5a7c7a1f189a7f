"""UI layer - PySide6 GUI components"""

from .task_screen import TaskScreen

__all__ = ["TaskScreen"]
