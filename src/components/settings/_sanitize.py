"""
SettingsSanitizer - merges a partial submission into stored settings.

Key behaviors:
- Merge, not replace: fields absent from the submission keep their previous value
- The enabled toggle is present on every tab, so its absence means "off"
- Schedule and visibility groups are only touched when their sentinel was submitted
- Invalid values are coerced or dropped, never raised
"""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable
from typing import Any

from src.domain.entities import ButtonSettings
from src.domain.sanitize import (
    sanitize_key,
    sanitize_phone,
    sanitize_text,
    sanitize_textarea,
    to_int,
)

from ._schema import (
    DEFAULT_POSITION,
    POSITIONS,
    SCHEDULE_SENTINEL,
    SPECIAL_PAGES,
    SUBMITTED_TIME_FROM,
    SUBMITTED_TIME_TO,
    VALID_WEEKDAYS,
    VISIBILITY_SENTINEL,
    get_default_settings,
)
from .models import GroupFlags

logger = logging.getLogger(__name__)

_TIME_RE = re.compile(r"^([0-9]{1,2}):([0-9]{2})$")
_WEEKDAY_RE = re.compile(r"0*([1-7])")


# --- Helpers ---


def _is_set(incoming: dict[str, Any], key: str) -> bool:
    return incoming.get(key) is not None


def _as_list(value: Any) -> list[Any]:
    if value is None:
        return []
    if isinstance(value, (list, tuple, set, frozenset)):
        return list(value)
    return [value]


def _dedupe(values: Iterable[Any]) -> list[Any]:
    seen: set[Any] = set()
    out: list[Any] = []
    for value in values:
        if value in seen:
            continue
        seen.add(value)
        out.append(value)
    return out


def _weekday(value: Any) -> int | None:
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value if value in VALID_WEEKDAYS else None
    if isinstance(value, str):
        match = _WEEKDAY_RE.fullmatch(value.strip())
        if match:
            return int(match.group(1))
    return None


def normalize_time(value: Any, fallback: str) -> str:
    """
    Normalize a submitted time to zero-padded "HH:MM".

    Unparseable or out-of-range values yield the fallback.
    """
    match = _TIME_RE.match(sanitize_text(value))
    if not match:
        return fallback
    hours, minutes = int(match.group(1)), int(match.group(2))
    if hours > 23 or minutes > 59:
        return fallback
    return f"{hours:02d}:{minutes:02d}"


def flags_from_payload(payload: dict[str, Any]) -> GroupFlags:
    """Read the per-tab sentinels out of a raw form payload."""
    return GroupFlags(
        schedule_submitted=_is_set(payload, SCHEDULE_SENTINEL),
        visibility_submitted=_is_set(payload, VISIBILITY_SENTINEL),
    )


# --- Field Groups ---


def sanitize_active_days(values: Any) -> list[int]:
    days: list[int] = []
    for raw in _as_list(values):
        code = _weekday(raw)
        if code is None:
            logger.debug("Dropping unknown weekday code %r", raw)
            continue
        days.append(code)
    return _dedupe(days)


def sanitize_post_types(values: Any) -> list[str]:
    keys = [sanitize_key(raw) for raw in _as_list(values)]
    return _dedupe(key for key in keys if key)


def sanitize_page_ids(values: Any) -> list[int]:
    ids: list[int] = []
    for raw in _as_list(values):
        page_id = to_int(raw)
        if page_id <= 0:
            logger.debug("Dropping page id %r", raw)
            continue
        ids.append(page_id)
    return _dedupe(ids)


def sanitize_special(values: Any) -> list[str]:
    kept: list[str] = []
    for raw in _as_list(values):
        value = str(raw)
        if value not in SPECIAL_PAGES:
            logger.debug("Dropping unknown special page %r", raw)
            continue
        kept.append(value)
    return _dedupe(kept)


# --- Merge ---


def sanitize_settings(
    previous: ButtonSettings | None,
    incoming: dict[str, Any] | None,
    flags: GroupFlags,
) -> ButtonSettings:
    """
    Merge a partial submission into the previous record.

    Args:
        previous: Stored settings, or None on first save (defaults are used)
        incoming: Raw submitted fields
        flags: Which optional groups were part of this submission

    Returns:
        A fully populated ButtonSettings. Never raises on bad input.
    """
    base = previous if previous is not None else get_default_settings()
    incoming = incoming if isinstance(incoming, dict) else {}
    merged = base.model_dump()

    # Toggle: present on every submission surface
    merged["enabled"] = _is_set(incoming, "enabled") and incoming["enabled"] is not False

    # General tab
    if _is_set(incoming, "phone"):
        merged["phone"] = sanitize_phone(incoming["phone"])
    if _is_set(incoming, "position"):
        position = incoming["position"]
        merged["position"] = position if position in POSITIONS else DEFAULT_POSITION
    if _is_set(incoming, "label"):
        merged["label"] = sanitize_text(incoming["label"])

    # Messages tab
    if _is_set(incoming, "default_message"):
        merged["default_message"] = sanitize_textarea(incoming["default_message"])

    # Schedule tab
    if flags.schedule_submitted:
        merged["active_days"] = sanitize_active_days(incoming.get("active_days"))
        merged["time_from"] = (
            normalize_time(incoming["time_from"], SUBMITTED_TIME_FROM)
            if _is_set(incoming, "time_from")
            else SUBMITTED_TIME_FROM
        )
        merged["time_to"] = (
            normalize_time(incoming["time_to"], SUBMITTED_TIME_TO)
            if _is_set(incoming, "time_to")
            else SUBMITTED_TIME_TO
        )

    # Visibility tab
    if flags.visibility_submitted:
        merged["exclude_post_types"] = sanitize_post_types(incoming.get("exclude_post_types"))
        merged["exclude_page_ids"] = sanitize_page_ids(incoming.get("exclude_page_ids"))
        merged["exclude_special"] = sanitize_special(incoming.get("exclude_special"))

    return ButtonSettings(**merged)
