# -*- coding: utf-8 -*-
"""
Internationalization (i18n) module for Taskboard.

This module provides translation functions and language management.
Supports English and German with automatic system locale detection.
"""

import locale
import logging
from typing import Callable, List
from PySide6.QtCore import QLocale

from taskboard.i18n.translations import TRANSLATIONS

logger = logging.getLogger(__name__)

# Supported languages
SUPPORTED_LANGUAGES = ["en", "de"]

# Qt locale used for each UI language
LANGUAGE_LOCALES = {
    "en": "en_US",
    "de": "de_DE",
}

# Current language (default to English)
_current_language = "en"

# Callbacks to notify when language changes
_language_changed_callbacks: List[Callable[[str], None]] = []


def detect_system_language() -> str:
    """
    Detect the system language and return a supported language code.

    Returns:
        'de' if German is detected, 'en' otherwise.
    """
    system_locale = locale.getlocale()[0]
    if system_locale and system_locale.startswith('de'):
        return 'de'
    return 'en'


def get_language() -> str:
    """Get the current language code."""
    return _current_language


def get_locale_name(lang: str = None) -> str:
    """Qt locale name for a UI language (current language if omitted)."""
    return LANGUAGE_LOCALES.get(lang or _current_language, LANGUAGE_LOCALES['en'])


def set_language(lang: str) -> None:
    """
    Set the current UI language.

    Args:
        lang: Language code ('en', 'de' or 'auto')
    """
    global _current_language
    if lang == 'auto':
        lang = detect_system_language()
    if lang not in SUPPORTED_LANGUAGES:
        lang = 'en'
    _current_language = lang

    # Update Qt Locale for dates and standard widgets
    QLocale.setDefault(QLocale(get_locale_name(lang)))

    # Notify all registered callbacks
    for callback in list(_language_changed_callbacks):
        try:
            callback(lang)
        except Exception:
            logger.exception(f"Language change callback failed: {callback!r}")


def tr(key: str, **kwargs) -> str:
    """
    Get the translated string for the given key.

    Args:
        key: Translation key (e.g., 'header.today')
        **kwargs: Format arguments for string interpolation

    Returns:
        Translated string, or the key itself if not found.
    """
    translations = TRANSLATIONS.get(_current_language, TRANSLATIONS.get('en', {}))
    text = translations.get(key, key)

    # Apply format arguments if provided
    if kwargs:
        try:
            text = text.format(**kwargs)
        except (KeyError, ValueError):
            pass

    return text


def on_language_changed(callback: Callable[[str], None]) -> None:
    """
    Register a callback to be notified when language changes.

    Args:
        callback: Function that takes the new language code as argument.
    """
    if callback not in _language_changed_callbacks:
        _language_changed_callbacks.append(callback)


def remove_language_callback(callback: Callable[[str], None]) -> None:
    """Remove a previously registered language change callback."""
    if callback in _language_changed_callbacks:
        _language_changed_callbacks.remove(callback)
