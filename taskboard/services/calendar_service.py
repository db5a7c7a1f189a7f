"""
Calendar Service - Handles day boundaries, week layout and date formatting.

Architecture Decision: Explicit calendar
Locale, first weekday, timezone and clock are injected instead of being read
from ambient defaults, so week layout and day boundaries are reproducible in
tests.
"""

import datetime
import logging
from typing import Callable, List, Optional, Union
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

import holidays
from PySide6.QtCore import QDate, QDateTime, QLocale, QTime, QTimeZone

from taskboard.domain.models import UserPreferences
from taskboard.i18n import get_locale_name

logger = logging.getLogger(__name__)

DateLike = Union[datetime.date, datetime.datetime]


class CalendarService:
    """
    Calendar arithmetic for the task screen.
    Everything that depends on "which day is it" goes through here.
    """

    def __init__(self, locale_name: str = "en_US", first_weekday: Optional[int] = None,
                 tz: Optional[datetime.tzinfo] = None,
                 clock: Optional[Callable[[], datetime.datetime]] = None,
                 holiday_country: Optional[str] = None, holiday_subdiv: Optional[str] = None):
        """
        Initialize the calendar.

        Args:
            locale_name: Qt locale name used for formatting and week start (e.g. 'de_DE')
            first_weekday: ISO weekday the week starts on (1=Monday .. 7=Sunday);
                the locale's first day of week if None
            tz: Timezone defining day boundaries; the system zone if None
            clock: Callable returning the current time; wall clock if None
            holiday_country: Country code for holiday lookup; no holidays if None
            holiday_subdiv: Optional subdivision (state) code for holiday lookup
        """
        self.locale = QLocale(locale_name)
        if first_weekday is None:
            first_weekday = self.locale.firstDayOfWeek().value
        if not 1 <= first_weekday <= 7:
            raise ValueError(f"first_weekday must be between 1 and 7, got {first_weekday}")
        self.first_weekday = first_weekday
        self.tz = tz
        self._clock = clock

        self._holidays = None
        if holiday_country:
            self._holidays = holidays.country_holidays(holiday_country, subdiv=holiday_subdiv)

    @classmethod
    def from_preferences(cls, prefs: UserPreferences,
                         clock: Optional[Callable[[], datetime.datetime]] = None) -> "CalendarService":
        """Build a calendar from user preferences."""
        tz = None
        if prefs.timezone:
            try:
                tz = ZoneInfo(prefs.timezone)
            except ZoneInfoNotFoundError as e:
                raise ValueError(f"Unknown timezone: {prefs.timezone}") from e

        return cls(
            locale_name=prefs.locale_name or get_locale_name(),
            first_weekday=prefs.first_weekday,
            tz=tz,
            clock=clock,
            holiday_country=prefs.holiday_country,
            holiday_subdiv=prefs.holiday_subdiv,
        )

    def now(self) -> datetime.datetime:
        """Current time as an aware datetime in the calendar's zone"""
        if self._clock is not None:
            return self._localize(self._clock())
        return self._localize(datetime.datetime.now(self.tz))

    def _localize(self, value: datetime.datetime) -> datetime.datetime:
        # Naive values are taken to be wall time in the calendar's zone
        if value.tzinfo is None:
            return value.replace(tzinfo=self.tz) if self.tz else value.astimezone()
        return value.astimezone(self.tz)

    def day_of(self, value: DateLike) -> datetime.date:
        """Calendar day of a date or datetime"""
        if isinstance(value, datetime.datetime):
            return self._localize(value).date()
        return value

    def hour_of(self, value: datetime.datetime) -> int:
        """Hour-of-day of a timestamp in the calendar's zone"""
        return self._localize(value).hour

    def is_same_day(self, first: DateLike, second: DateLike) -> bool:
        """Check if two values fall on the same calendar day"""
        return self.day_of(first) == self.day_of(second)

    def start_of_day(self, value: DateLike) -> datetime.datetime:
        """Midnight of the given day as an aware datetime"""
        midnight = datetime.datetime.combine(self.day_of(value), datetime.time())
        return self._localize(midnight)

    def week_start(self, reference: DateLike) -> datetime.datetime:
        """
        First day of the week containing the reference.

        Raises:
            OverflowError: If the week starts before the first representable date
        """
        day = self.day_of(reference)
        offset = (day.isoweekday() - self.first_weekday) % 7
        return self.start_of_day(day - datetime.timedelta(days=offset))

    def current_week(self, reference: Optional[DateLike] = None) -> List[datetime.datetime]:
        """
        The seven days shown in the week strip.

        Days run from one day after the week start up to and including the
        first day of the following week.

        Args:
            reference: Any moment inside the week; now if None

        Returns:
            Seven midnights in ascending order, or an empty list if the week
            boundary cannot be computed
        """
        if reference is None:
            reference = self.now()

        try:
            first_day = self.week_start(reference).date()
            return [
                self.start_of_day(first_day + datetime.timedelta(days=offset))
                for offset in range(1, 8)
            ]
        except OverflowError:
            logger.warning(f"Could not determine the week containing {reference!r}")
            return []

    def format_date(self, value: DateLike, pattern: str) -> str:
        """
        Render a date with a Qt date format pattern in the calendar's locale.

        Args:
            value: Date or datetime to render
            pattern: Qt format, e.g. 'dd' (day of month), 'ddd' (weekday abbreviation)

        Returns:
            Formatted string
        """
        if isinstance(value, datetime.datetime):
            local = self._localize(value)
            # Wall time is already in the calendar zone; UTC keeps Qt from
            # shifting it through the system zone
            qvalue = QDateTime(
                QDate(local.year, local.month, local.day),
                QTime(local.hour, local.minute, local.second),
                QTimeZone.utc()
            )
        else:
            qvalue = QDate(value.year, value.month, value.day)
        return self.locale.toString(qvalue, pattern)

    def holiday_name(self, value: DateLike) -> str:
        """
        Get the name of the holiday for a given day.

        Returns:
            Holiday name or empty string if not a holiday (or no country configured)
        """
        if self._holidays is None:
            return ""
        return self._holidays.get(self.day_of(value), "")

    def is_holiday(self, value: DateLike) -> bool:
        """Check if a day is a public holiday"""
        return self._holidays is not None and self.day_of(value) in self._holidays
