"""
Tests for the task screen: rendering view model state and switching language.
"""

import pytest
from taskboard.i18n import set_language, remove_language_callback
from taskboard.services import TaskViewModel
from taskboard.ui import TaskScreen


@pytest.fixture
def make_screen(qt_app):
    """Build screens in English and unregister their language callbacks afterwards"""
    set_language("en")
    screens = []

    def _make(view_model):
        screen = TaskScreen(view_model)
        screens.append(screen)
        return screen

    yield _make

    for screen in screens:
        remove_language_callback(screen.retranslate)
    set_language("en")


def test_week_strip_has_seven_days(make_screen, view_model):
    screen = make_screen(view_model)
    assert len(screen.day_buttons) == 7
    checked = [day.date() for day, button in screen.day_buttons if button.isChecked()]
    assert checked == [view_model.current_day.date()]


def test_empty_day_message(make_screen, qt_app, calendar):
    screen = make_screen(TaskViewModel(calendar, tasks=[]))
    assert screen.status_label.text() == "No tasks found!"


def test_language_change_retranslates(make_screen, qt_app, calendar):
    screen = make_screen(TaskViewModel(calendar, tasks=[]))
    assert screen.title_label.text() == "Today"

    set_language("de")

    assert screen.title_label.text() == "Heute"
    assert screen.status_label.text() == "Keine Aufgaben gefunden!"
    assert len(screen.day_buttons) == 7


def test_day_button_selects_day(make_screen, view_model):
    screen = make_screen(view_model)
    day, button = screen.day_buttons[0]

    button.click()

    assert view_model.current_day == day
    assert button.isChecked()
