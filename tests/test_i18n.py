"""
Tests for translations and language switching.
"""

import pytest
from PySide6.QtCore import QLocale
from taskboard import i18n
from taskboard.i18n import tr, set_language, get_language, on_language_changed, remove_language_callback


@pytest.fixture(autouse=True)
def restore_language():
    yield
    set_language("en")


def test_english_strings():
    set_language("en")
    assert tr("header.today") == "Today"
    assert tr("tasks.empty") == "No tasks found!"


def test_german_strings():
    set_language("de")
    assert get_language() == "de"
    assert tr("header.today") == "Heute"
    assert QLocale().name() == "de_DE"


def test_unknown_language_falls_back_to_english():
    set_language("fr")
    assert get_language() == "en"
    assert tr("tasks.loading") == "Loading..."


def test_auto_uses_system_language(monkeypatch):
    monkeypatch.setattr(i18n, "detect_system_language", lambda: "de")
    set_language("auto")
    assert get_language() == "de"


def test_missing_key_returns_key():
    assert tr("does.not.exist") == "does.not.exist"


def test_format_arguments():
    set_language("en")
    assert tr("week.holiday", name="Christmas Day") == "Holiday: Christmas Day"


def test_language_callbacks():
    received = []
    on_language_changed(received.append)
    try:
        set_language("de")
        set_language("en")
    finally:
        remove_language_callback(received.append)
    set_language("de")
    assert received == ["de", "en"]


def test_failing_callback_does_not_stop_others():
    received = []

    def broken(lang):
        raise RuntimeError("boom")

    on_language_changed(broken)
    on_language_changed(received.append)
    try:
        set_language("de")
    finally:
        remove_language_callback(broken)
        remove_language_callback(received.append)
    assert received == ["de"]
