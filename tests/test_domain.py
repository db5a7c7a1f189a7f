"""
Tests for the domain models and the example task list.
"""

import datetime
import pytest
from pydantic import ValidationError
from taskboard.domain import FilterPhase, Task, UserPreferences, seed_tasks
from tests.conftest import FIXED_NOW, PACIFIC


class TestTask:

    def test_ids_are_unique(self):
        tasks = [Task(title="Meeting", date=FIXED_NOW) for _ in range(50)]
        assert len({task.id for task in tasks}) == 50

    def test_task_is_immutable(self):
        task = Task(title="Meeting", description="Discuss", date=FIXED_NOW)
        with pytest.raises(ValidationError):
            task.title = "Other"

    def test_description_defaults_to_empty(self):
        assert Task(title="Meeting", date=FIXED_NOW).description == ""

    def test_title_is_not_validated(self):
        assert Task(title="", date=FIXED_NOW).title == ""


class TestSeedTasks:

    def test_example_tasks_in_order(self):
        tasks = seed_tasks(FIXED_NOW, PACIFIC)
        assert [t.title for t in tasks] == [
            "Meeting", "Icon set", "Prototype", "Check asset", "Team party",
            "Client meeting", "Next Project", "App Proposal",
        ]

    def test_descriptions_are_verbatim(self):
        tasks = seed_tasks(FIXED_NOW, PACIFIC)
        assert tasks[0].description == "Discuss team task for the day"
        assert tasks[1].description == "Edit icons for team tast for next week"
        assert tasks[7].description == "Meet client for next App Proposal"

    def test_fixed_timestamps(self):
        tasks = seed_tasks(FIXED_NOW, PACIFIC)
        assert tasks[0].date.timestamp() == 1738377994
        assert tasks[0].date == datetime.datetime(2025, 1, 31, 18, 46, 34, tzinfo=PACIFIC)
        assert tasks[4].date.timestamp() == 1735743300

    def test_upcoming_tasks_are_relative_to_now(self):
        tasks = seed_tasks(FIXED_NOW, PACIFIC)
        offsets = [(t.date - FIXED_NOW).total_seconds() for t in tasks[5:]]
        assert offsets == [7, 6, 5]

    def test_each_call_creates_new_ids(self):
        first = {t.id for t in seed_tasks(FIXED_NOW, PACIFIC)}
        second = {t.id for t in seed_tasks(FIXED_NOW, PACIFIC)}
        assert len(first) == 8
        assert first.isdisjoint(second)

    def test_system_zone_when_unset(self):
        tasks = seed_tasks(FIXED_NOW)
        assert tasks[0].date.tzinfo is not None
        assert tasks[0].date.timestamp() == 1738377994


class TestUserPreferences:

    def test_defaults(self):
        prefs = UserPreferences()
        assert prefs.background_filtering is True
        assert prefs.first_weekday is None
        assert prefs.day_format == "dd"

    @pytest.mark.parametrize("value", [0, 8])
    def test_first_weekday_range(self, value):
        with pytest.raises(ValidationError):
            UserPreferences(first_weekday=value)

    def test_filter_phase_values(self):
        assert FilterPhase.UNRESOLVED.value == "unresolved"
        assert FilterPhase.RESOLVED.value == "resolved"
