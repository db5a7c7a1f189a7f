"""
Pytest configuration and fixtures.
"""

import os
import sys
import datetime
from pathlib import Path
import pytest
from PySide6.QtCore import QCoreApplication, QThreadPool
from PySide6.QtWidgets import QApplication

# Widgets are created without a display
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

# Add project root
sys.path.insert(0, str(Path(__file__).parent.parent))

from taskboard.services import CalendarService, TaskViewModel

# Fixed UTC-8 offset so the epoch seed tasks fall on known calendar days
PACIFIC = datetime.timezone(datetime.timedelta(hours=-8))

# Wednesday afternoon
FIXED_NOW = datetime.datetime(2026, 10, 14, 14, 30, tzinfo=PACIFIC)


@pytest.fixture(scope="session")
def qt_app():
    """Application instance so queued signals are delivered and widgets can be built"""
    app = QApplication.instance() or QApplication([])
    yield app


@pytest.fixture
def calendar():
    """US-style calendar (weeks start on Sunday) with a frozen clock"""
    return CalendarService(
        locale_name="en_US",
        first_weekday=7,
        tz=PACIFIC,
        clock=lambda: FIXED_NOW,
    )


@pytest.fixture
def view_model(qt_app, calendar):
    """View model filtering inline, seeded with the example tasks"""
    return TaskViewModel(calendar)


@pytest.fixture
def thread_pool(qt_app):
    pool = QThreadPool()
    yield pool
    pool.waitForDone()


@pytest.fixture
def drain():
    """Wait for worker jobs and deliver their queued results"""
    def _drain(pool: QThreadPool):
        pool.waitForDone()
        QCoreApplication.processEvents()
    return _drain
