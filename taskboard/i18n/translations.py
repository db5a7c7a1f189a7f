# -*- coding: utf-8 -*-
"""
Translation dictionaries for German and English.

This module contains all translatable strings for the Taskboard screen.
"""

TRANSLATIONS = {
    "en": {
        # Application
        "app.name": "Taskboard",

        # Header
        "header.today": "Today",

        # Task list
        "tasks.empty": "No tasks found!",
        "tasks.loading": "Loading...",
        "tasks.current_hour": "Now",

        # Week strip
        "week.holiday": "Holiday: {name}",
    },
    "de": {
        # Application
        "app.name": "Taskboard",

        # Header
        "header.today": "Heute",

        # Task list
        "tasks.empty": "Keine Aufgaben gefunden!",
        "tasks.loading": "Wird geladen...",
        "tasks.current_hour": "Jetzt",

        # Week strip
        "week.holiday": "Feiertag: {name}",
    },
}
