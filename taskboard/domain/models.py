"""
Domain Models using Pydantic for validation.

Architecture Decision: Why Pydantic?
Tasks are value objects that must not change after construction; a frozen
model gives us that for free. Preferences are loaded from YAML and environment
variables, so they need runtime validation.
"""

import uuid
from datetime import datetime
from enum import Enum
from typing import Optional
from pydantic import BaseModel, Field, ConfigDict


class Task(BaseModel):
    """
    Represents a scheduled task shown in the daily list.

    Examples: "Meeting", "Prototype", "Client meeting"
    """
    model_config = ConfigDict(frozen=True)

    id: str = Field(default_factory=lambda: str(uuid.uuid4()))
    title: str
    description: str = ""
    date: datetime


class FilterPhase(str, Enum):
    """Lifecycle of the filtered task list"""
    UNRESOLVED = "unresolved"
    RESOLVED = "resolved"


class UserPreferences(BaseModel):
    """
    User configuration and preferences.

    This allows users to customize behavior without touching code.
    """

    # Locale settings
    language: str = Field(default="auto", description="UI language: 'en', 'de', or 'auto' (detect from system)")
    locale_name: Optional[str] = Field(
        default=None,
        description="Qt locale used for dates, e.g. 'de_DE'. Defaults to the UI language"
    )
    first_weekday: Optional[int] = Field(
        default=None, ge=1, le=7,
        description="First day of the week (1=Monday .. 7=Sunday). Defaults to the locale's"
    )
    timezone: Optional[str] = Field(default=None, description="IANA timezone name, system zone if unset")

    # Holidays shown in the week strip
    holiday_country: Optional[str] = Field(default=None, description="Two-letter country code, e.g. 'DE'")
    holiday_subdiv: Optional[str] = Field(default=None, description="Subdivision code, e.g. 'BY'")

    # Filtering
    background_filtering: bool = Field(default=True, description="Filter tasks on a worker thread")

    # Display formats (Qt date format syntax)
    day_format: str = "dd"
    weekday_format: str = "ddd"
    time_format: str = "hh:mm AP"
    header_date_format: str = "d MMM yyyy"

    log_level: str = Field(default="INFO", description="Root logging level")
