"""Services layer - Business logic"""

from .calendar_service import CalendarService
from .task_view_model import TaskViewModel

__all__ = ["CalendarService", "TaskViewModel"]
