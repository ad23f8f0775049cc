"""
Admin component - settings page support logic.

Tab selection, the list of excludable post types and the status badge.
Form markup itself belongs to the host.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from src.domain.entities import ButtonSettings
from src.domain.sanitize import sanitize_key

from .models import (
    DEFAULT_INTERNAL_POST_TYPES,
    DEFAULT_TAB,
    DEFAULT_TABS,
    ButtonStatus,
    PostTypeOption,
)


def resolve_tab(
    requested: str | None,
    tabs: Sequence[str] = DEFAULT_TABS,
    default: str = DEFAULT_TAB,
) -> str:
    """Return the requested tab if it is a known one, else the default tab."""
    if requested is None:
        return default
    tab = sanitize_key(requested)
    return tab if tab in tabs else default


def selectable_post_types(
    available: Iterable[PostTypeOption],
    internal: Iterable[str] = DEFAULT_INTERNAL_POST_TYPES,
) -> list[PostTypeOption]:
    """Filter host-internal types out of the post types offered for exclusion."""
    hidden = set(internal)
    return [option for option in available if option.name not in hidden]


def button_status(settings: ButtonSettings) -> ButtonStatus:
    """
    Status badge shown above the tabs.

    Active only when the toggle is on and a phone is configured; schedule
    and page rules are not considered.
    """
    if settings.enabled and settings.phone:
        return "active"
    return "inactive"
