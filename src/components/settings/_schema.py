"""
Settings schema - canonical shape, defaults and closed enumerations.

Shared by the sanitizer and the visibility engine so both agree on field
names and default values.
"""

from __future__ import annotations

from src.domain.entities import ButtonSettings

OPTION_KEY = "chat_button_settings"

POSITIONS: tuple[str, ...] = ("left", "right")
DEFAULT_POSITION = "right"

VALID_WEEKDAYS: tuple[int, ...] = (1, 2, 3, 4, 5, 6, 7)  # ISO, 1 = Monday

SPECIAL_PAGES: tuple[str, ...] = ("front_page", "posts_page", "archive", "search", "404")

# Used when the schedule tab is submitted without time fields.
# Record-level defaults ("09:00"/"17:00") live on ButtonSettings.
SUBMITTED_TIME_FROM = "00:00"
SUBMITTED_TIME_TO = "23:59"

# Sentinel field names carried by the schedule and visibility tabs.
SCHEDULE_SENTINEL = "_schedule_submitted"
VISIBILITY_SENTINEL = "_visibility_submitted"


def get_default_settings() -> ButtonSettings:
    """
    Get fallback default settings.

    Used when the store holds no record yet.
    """
    return ButtonSettings()
