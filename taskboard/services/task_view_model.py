"""
Task View Model - Holds the task list and the state of the task screen.

Architecture Decision: Observer Pattern (Qt Signals)
The view model emits signals when state changes, keeping it decoupled from UI.
Screens connect to the signals and call set_current_day(); they never own
the view model.
"""

import datetime
import logging
from typing import Dict, Iterable, List, Optional

from PySide6.QtCore import QObject, QRunnable, QThreadPool, Signal, Slot

from taskboard.domain.models import FilterPhase, Task
from taskboard.domain.seed import seed_tasks
from taskboard.services.calendar_service import CalendarService, DateLike

logger = logging.getLogger(__name__)


def tasks_on_day(tasks: Iterable[Task], day: DateLike, calendar: CalendarService) -> List[Task]:
    """Tasks whose date falls on the same calendar day as `day`, in list order"""
    target = calendar.day_of(day)
    return [task for task in tasks if calendar.day_of(task.date) == target]


class FilterSignals(QObject):
    """Signals of a background filter job"""
    finished = Signal(int, object)  # (generation, filtered tasks)


class FilterJob(QRunnable):
    """
    Scans a task snapshot on a worker thread.
    The result travels back through a queued signal to the view model's thread.
    """

    def __init__(self, generation: int, tasks: tuple, day: DateLike, calendar: CalendarService):
        super().__init__()
        self.generation = generation
        self.tasks = tasks
        self.day = day
        self.calendar = calendar
        self.signals = FilterSignals()
        # Kept alive by the view model until the result is delivered
        self.setAutoDelete(False)

    def run(self):
        result = tasks_on_day(self.tasks, self.day, self.calendar)
        self.signals.finished.emit(self.generation, result)


class TaskViewModel(QObject):
    """
    In-memory task store plus the state of the week strip and daily list.

    filtered_tasks is None while a filter pass is pending (UNRESOLVED) and the
    matching tasks once it completes (RESOLVED). Every filter request carries a
    generation number; only the most recent request may publish its result.
    """

    # Signals
    current_day_changed = Signal(object)  # datetime
    current_week_changed = Signal(object)  # list of datetimes
    filtered_tasks_changed = Signal(object)  # list of Task, or None while unresolved

    def __init__(self, calendar: CalendarService, tasks: Optional[Iterable[Task]] = None,
                 background: bool = False, thread_pool: Optional[QThreadPool] = None,
                 parent: Optional[QObject] = None):
        """
        Args:
            calendar: Calendar defining "now", day boundaries and formatting
            tasks: Task collection; the example tasks if None
            background: Run filter passes on the thread pool instead of inline
            thread_pool: Pool for background passes; the global pool if None
            parent: Qt parent object
        """
        super().__init__(parent)
        self.calendar = calendar
        self.background = background
        self.thread_pool = thread_pool if thread_pool is not None else QThreadPool.globalInstance()

        now = calendar.now()
        if tasks is None:
            tasks = seed_tasks(now, calendar.tz)
        self._tasks = tuple(tasks)

        self._current_day: datetime.datetime = now
        self._current_week: List[datetime.datetime] = []
        self._filtered_tasks: Optional[List[Task]] = None

        self._generation = 0
        self._pending_jobs: Dict[int, FilterJob] = {}

        self.compute_week()
        self.filter_tasks()

    @property
    def tasks(self) -> tuple:
        return self._tasks

    @property
    def current_day(self) -> datetime.datetime:
        return self._current_day

    @property
    def current_week(self) -> List[datetime.datetime]:
        return list(self._current_week)

    @property
    def filtered_tasks(self) -> Optional[List[Task]]:
        if self._filtered_tasks is None:
            return None
        return list(self._filtered_tasks)

    @property
    def phase(self) -> FilterPhase:
        if self._filtered_tasks is None:
            return FilterPhase.UNRESOLVED
        return FilterPhase.RESOLVED

    def compute_week(self) -> List[datetime.datetime]:
        """
        Recompute the week strip for the week containing now.

        Returns:
            The seven displayed days (empty if the week could not be computed)
        """
        self._current_week = self.calendar.current_week()
        self.current_week_changed.emit(self.current_week)
        return self.current_week

    def set_current_day(self, day: DateLike):
        """
        Select a day and refilter the task list for it.
        The list is unresolved until the new filter pass completes.
        """
        if not isinstance(day, datetime.datetime):
            day = self.calendar.start_of_day(day)
        self._current_day = day
        self.current_day_changed.emit(day)

        self._filtered_tasks = None
        self.filtered_tasks_changed.emit(None)

        self.filter_tasks()

    def filter_tasks(self):
        """
        Filter the task collection down to the current day.

        Runs inline, or on the thread pool when the view model was created
        with background=True. In the latter case the result is published
        once control returns to this object's event loop.
        """
        self._generation += 1
        generation = self._generation

        if not self.background:
            self._on_filter_finished(generation, tasks_on_day(self._tasks, self._current_day, self.calendar))
            return

        job = FilterJob(generation, self._tasks, self._current_day, self.calendar)
        job.signals.finished.connect(self._on_filter_finished)
        self._pending_jobs[generation] = job
        self.thread_pool.start(job)

    @Slot(int, object)
    def _on_filter_finished(self, generation: int, result: List[Task]):
        """Publish a filter result unless a newer request superseded it"""
        self._pending_jobs.pop(generation, None)
        if generation != self._generation:
            logger.debug(f"Discarding stale filter result (generation {generation}, latest {self._generation})")
            return

        self._filtered_tasks = list(result)
        self.filtered_tasks_changed.emit(self.filtered_tasks)

    def is_same_day(self, day: DateLike) -> bool:
        """Check if a day is the currently selected day"""
        return self.calendar.is_same_day(day, self._current_day)

    def is_current_hour(self, timestamp: datetime.datetime) -> bool:
        """
        Check if a timestamp's hour-of-day equals the current hour.

        Only the hour is compared; the date is ignored, so a task from any
        day at 14:xx matches while the clock reads 14:xx.
        """
        return self.calendar.hour_of(timestamp) == self.calendar.hour_of(self.calendar.now())

    def format_date(self, value: DateLike, pattern: str) -> str:
        """Render a date with a Qt format pattern (e.g. 'dd', 'ddd')"""
        return self.calendar.format_date(value, pattern)

    def holiday_name(self, day: DateLike) -> str:
        """Holiday name for a day of the week strip, or empty string"""
        return self.calendar.holiday_name(day)
