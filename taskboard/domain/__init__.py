"""Domain layer - Pure business entities and logic"""

from .models import FilterPhase, Task, UserPreferences
from .seed import seed_tasks

__all__ = ["FilterPhase", "Task", "UserPreferences", "seed_tasks"]
