#!/usr/bin/env python

"""
Taskboard - Main Entry Point

A single-screen task planner: pick a day of the current week and see the
tasks scheduled for it.

Usage:
    python main.py

Requirements:
    - Python 3.11+
    - See pyproject.toml for dependencies
"""

import logging
import sys
from pathlib import Path

from PySide6.QtWidgets import QApplication

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent))

from taskboard.i18n import set_language
from taskboard.infra.config import get_settings
from taskboard.services import CalendarService, TaskViewModel
from taskboard.ui import TaskScreen


def main():
    """Main entry point"""
    settings = get_settings()
    prefs = settings.preferences

    logging.basicConfig(
        level=prefs.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s"
    )

    app = QApplication(sys.argv)
    set_language(prefs.language)

    calendar = CalendarService.from_preferences(prefs)
    view_model = TaskViewModel(calendar, background=prefs.background_filtering)

    screen = TaskScreen(view_model, prefs)
    screen.resize(420, 720)
    screen.show()
    return app.exec()


if __name__ == "__main__":
    sys.exit(main())
