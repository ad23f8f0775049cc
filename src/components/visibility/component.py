"""
Visibility component - decides whether the chat button is shown on a page view.

Decision order (first failing check hides the button):
1. Toggle enabled
2. Phone configured
3. Schedule window (fails open when the clock cannot be resolved)
4. Page exclusions: special pages first, then post type / page id on singular pages

Invariants:
- I1: A disabled toggle or an empty phone always hides, whatever else is set
- I2: An empty active_days list disables the schedule check
- I3: Special-page exclusions take precedence over post type / id exclusions
- I4: A verdict carries a link if and only if it shows the button
"""

from __future__ import annotations

import logging
from urllib.parse import quote

from src.components.settings import (
    DEFAULT_POSITION,
    SUBMITTED_TIME_FROM,
    SUBMITTED_TIME_TO,
    SettingsStorePort,
    get_default_settings,
)
from src.domain.entities import ButtonSettings, PageContext

from .models import (
    DEFAULT_BASE_URL,
    ButtonView,
    ClockError,
    ClockResult,
    HideReason,
    ShouldShowInput,
    Verdict,
)
from .ports import ClockPort, PageContextPort

logger = logging.getLogger(__name__)

# (page flag, excludable value, reason) in evaluation order
_SPECIAL_CHECKS: tuple[tuple[str, str, HideReason], ...] = (
    ("is_front_page", "front_page", "excluded_front_page"),
    ("is_posts_index", "posts_page", "excluded_posts_page"),
    ("is_archive", "archive", "excluded_archive"),
    ("is_search", "search", "excluded_search"),
    ("is_not_found", "404", "excluded_404"),
)


# --- Checks ---


def check_schedule(settings: ButtonSettings, now: ClockResult) -> HideReason | None:
    """
    Check the active-days / active-hours window.

    Returns None when the button may show, otherwise the hide reason.
    Times compare as strings; both sides are zero-padded 24h "HH:MM".
    """
    if not settings.active_days:
        return None

    if isinstance(now, ClockError):
        logger.debug("Clock unavailable (%s), schedule check passes", now.code)
        return None

    if now.isoweekday() not in settings.active_days:
        return "outside_days"

    current = now.strftime("%H:%M")
    time_from = settings.time_from or SUBMITTED_TIME_FROM
    time_to = settings.time_to or SUBMITTED_TIME_TO
    if not (time_from <= current <= time_to):
        return "outside_hours"
    return None


def check_page(settings: ButtonSettings, page: PageContext) -> HideReason | None:
    """
    Check page-level exclusions.

    Returns None when the button may show, otherwise the hide reason.
    """
    excluded_special = set(settings.exclude_special)
    for flag, value, reason in _SPECIAL_CHECKS:
        if getattr(page, flag) and value in excluded_special:
            return reason

    if not page.is_singular:
        return None

    if page.post_type is not None and page.post_type in settings.exclude_post_types:
        return "excluded_post_type"
    if page.post_id is not None and page.post_id in settings.exclude_page_ids:
        return "excluded_page_id"
    return None


def build_link(settings: ButtonSettings, base_url: str = DEFAULT_BASE_URL) -> str:
    """
    Build the chat deep link.

    The phone becomes a percent-encoded path segment; a non-empty default
    message is added as the text query parameter.
    """
    link = base_url + quote(settings.phone, safe="")
    if settings.default_message:
        link += "?text=" + quote(settings.default_message, safe="")
    return link


# --- Decision ---


def should_show(
    settings: ButtonSettings,
    now: ClockResult,
    page: PageContext,
    base_url: str = DEFAULT_BASE_URL,
) -> Verdict:
    """
    Decide whether the button is shown for this page view.

    Args:
        settings: Stored button settings
        now: Local datetime, or ClockError when the timezone could not be resolved
        page: Current page classification
        base_url: Deep link base URL

    Returns:
        Verdict with show=True and a link, or show=False and the hide reason
    """
    reason: HideReason | None
    if not settings.enabled:
        reason = "disabled"
    elif not settings.phone:
        reason = "no_phone"
    else:
        reason = check_schedule(settings, now) or check_page(settings, page)

    if reason is not None:
        logger.debug("Chat button hidden: %s", reason)
        return Verdict(show=False, reason=reason)

    return Verdict(show=True, link=build_link(settings, base_url))


def build_button_view(settings: ButtonSettings, verdict: Verdict) -> ButtonView:
    """Combine a verdict with display settings for the rendering surface."""
    if not verdict.show:
        return ButtonView(show=False)

    position = "left" if settings.position == "left" else DEFAULT_POSITION
    return ButtonView(
        show=True,
        link=verdict.link,
        label=settings.label,
        has_label=settings.label != "",
        position=position,
    )


# --- Component Entry Points ---


def run(inp: ShouldShowInput) -> Verdict:
    """Main entry point for the visibility component."""
    return should_show(inp.settings, inp.now, inp.page, inp.base_url)


def run_page_view(
    *,
    store: SettingsStorePort,
    clock: ClockPort,
    pages: PageContextPort,
    base_url: str = DEFAULT_BASE_URL,
) -> ButtonView:
    """
    Evaluate the current page view end to end.

    Settings are read fresh from the store (defaults when absent).
    """
    settings = store.load()
    if settings is None:
        settings = get_default_settings()

    verdict = should_show(settings, clock.now_local(), pages.current_page(), base_url)
    return build_button_view(settings, verdict)
