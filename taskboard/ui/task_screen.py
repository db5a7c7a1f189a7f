"""
Task Screen - Week strip and daily task list.

Architecture Decision: Presentation Layer
The screen only renders what the view model publishes and forwards day
selection back to it. All date logic lives in the view model.
"""

import datetime
from typing import List, Optional, Tuple
from PySide6.QtWidgets import (
    QWidget, QVBoxLayout, QHBoxLayout, QLabel, QPushButton, QFrame, QScrollArea
)
from PySide6.QtCore import Qt
from PySide6.QtGui import QFont

from taskboard.domain.models import Task, UserPreferences
from taskboard.services import TaskViewModel
from taskboard.i18n import tr, on_language_changed, remove_language_callback


class TaskScreen(QWidget):
    """
    Single screen: header, selectable week strip, task cards for the selected day.
    """

    def __init__(self, view_model: TaskViewModel, preferences: Optional[UserPreferences] = None,
                 parent=None):
        super().__init__(parent)
        self.view_model = view_model
        self.preferences = preferences or UserPreferences()
        self.day_buttons: List[Tuple[datetime.datetime, QPushButton]] = []
        self.status_label: Optional[QLabel] = None

        self.setWindowTitle(tr("app.name"))
        self._setup_ui()
        self._connect_signals()

        self._rebuild_week(self.view_model.current_week)
        self._render_tasks(self.view_model.filtered_tasks)

        on_language_changed(self.retranslate)
        self.destroyed.connect(lambda: remove_language_callback(self.retranslate))

    def _setup_ui(self):
        layout = QVBoxLayout(self)

        # Header: today's date and title
        header = QVBoxLayout()
        self.date_label = QLabel(self.view_model.format_date(
            self.view_model.calendar.now(), self.preferences.header_date_format
        ))
        self.date_label.setStyleSheet("color: gray;")
        self.title_label = QLabel(tr("header.today"))
        title_font = QFont()
        title_font.setPointSize(24)
        title_font.setBold(True)
        self.title_label.setFont(title_font)
        header.addWidget(self.date_label)
        header.addWidget(self.title_label)
        layout.addLayout(header)

        # Week strip
        self.week_layout = QHBoxLayout()
        layout.addLayout(self.week_layout)

        # Task list
        scroll = QScrollArea()
        scroll.setWidgetResizable(True)
        scroll.setFrameShape(QFrame.NoFrame)
        self.tasks_container = QWidget()
        self.tasks_layout = QVBoxLayout(self.tasks_container)
        self.tasks_layout.setAlignment(Qt.AlignTop)
        scroll.setWidget(self.tasks_container)
        layout.addWidget(scroll, 1)

    def retranslate(self, lang: str = None):
        """Re-apply translated texts after a language change"""
        self.setWindowTitle(tr("app.name"))
        self.title_label.setText(tr("header.today"))
        self._rebuild_week(self.view_model.current_week)
        self._render_tasks(self.view_model.filtered_tasks)

    def _connect_signals(self):
        self.view_model.current_week_changed.connect(self._rebuild_week)
        self.view_model.current_day_changed.connect(self._update_day_highlight)
        self.view_model.filtered_tasks_changed.connect(self._render_tasks)

    def _rebuild_week(self, week):
        for _, button in self.day_buttons:
            self.week_layout.removeWidget(button)
            button.deleteLater()
        self.day_buttons = []

        for day in week:
            text = "{}\n{}".format(
                self.view_model.format_date(day, self.preferences.day_format),
                self.view_model.format_date(day, self.preferences.weekday_format),
            )
            button = QPushButton(text)
            button.setCheckable(True)
            button.setFixedSize(45, 90)
            holiday = self.view_model.holiday_name(day)
            if holiday:
                button.setToolTip(tr("week.holiday", name=holiday))
            button.clicked.connect(lambda checked=False, d=day: self.view_model.set_current_day(d))
            self.week_layout.addWidget(button)
            self.day_buttons.append((day, button))

        self._update_day_highlight()

    def _update_day_highlight(self, *_):
        for day, button in self.day_buttons:
            button.setChecked(self.view_model.is_same_day(day))

    def _clear_tasks(self):
        while self.tasks_layout.count():
            item = self.tasks_layout.takeAt(0)
            if item.widget():
                item.widget().deleteLater()

    def _render_tasks(self, tasks: Optional[List[Task]]):
        self._clear_tasks()
        self.status_label = None

        if tasks is None:
            self.status_label = QLabel(tr("tasks.loading"))
        elif not tasks:
            self.status_label = QLabel(tr("tasks.empty"))
        if self.status_label is not None:
            self.tasks_layout.addWidget(self.status_label)
            return

        for task in tasks:
            self.tasks_layout.addWidget(self._task_card(task))

    def _task_card(self, task: Task) -> QFrame:
        """Card with title, description and time; current-hour tasks are inverted"""
        card = QFrame()
        layout = QHBoxLayout(card)

        text = QVBoxLayout()
        title = QLabel(task.title)
        title_font = QFont()
        title_font.setBold(True)
        title_font.setPointSize(16)
        title.setFont(title_font)
        text.addWidget(title)
        text.addWidget(QLabel(task.description))
        layout.addLayout(text, 1)

        layout.addWidget(QLabel(self.view_model.format_date(task.date, self.preferences.time_format)))

        if self.view_model.is_current_hour(task.date):
            card.setStyleSheet("QFrame { background: black; border-radius: 25px; } QLabel { color: white; }")
            card.setToolTip(tr("tasks.current_hour"))
        return card
