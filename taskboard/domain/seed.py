"""
Example tasks shown when the screen opens.

Titles and descriptions are kept exactly as the app has always shipped
them, typos included.
"""

from datetime import datetime, timedelta, tzinfo
from typing import List, Optional

from .models import Task


# (title, description, epoch seconds)
FIXED_TASKS = [
    ("Meeting", "Discuss team task for the day", 1738377994),
    ("Icon set", "Edit icons for team tast for next week", 1738389600),
    ("Prototype", "make and send prototype", 1738411200),
    ("Check asset", "start checking the assets", 1738423800),
    ("Team party", "make fun with team mates", 1735743300),
]

# (title, description, seconds from now)
UPCOMING_TASKS = [
    ("Client meeting", "Explain project to client", 7),
    ("Next Project", "discuss the project with the team", 6),
    ("App Proposal", "Meet client for next App Proposal", 5),
]


def seed_tasks(now: datetime, tz: Optional[tzinfo] = None) -> List[Task]:
    """
    Build the example task list.

    Args:
        now: Reference time for the upcoming tasks
        tz: Zone the fixed timestamps are expressed in (system zone if None)

    Returns:
        Fresh Task instances, each with a new id
    """
    tasks = [
        Task(title=title, description=description,
             date=datetime.fromtimestamp(epoch, tz=tz) if tz else datetime.fromtimestamp(epoch).astimezone())
        for title, description, epoch in FIXED_TASKS
    ]
    tasks.extend(
        Task(title=title, description=description, date=now + timedelta(seconds=offset))
        for title, description, offset in UPCOMING_TASKS
    )
    return tasks
