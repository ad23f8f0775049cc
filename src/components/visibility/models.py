"""
Visibility component input/output models.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Literal

from src.domain.entities import ButtonSettings, PageContext

DEFAULT_BASE_URL = "https://wa.me/"


# --- Clock Result ---


@dataclass(frozen=True)
class ClockError:
    """Current local time could not be resolved."""

    code: str
    message: str


ClockResult = datetime | ClockError


# --- Hide Reasons ---


HideReason = Literal[
    "disabled",
    "no_phone",
    "outside_days",
    "outside_hours",
    "excluded_front_page",
    "excluded_posts_page",
    "excluded_archive",
    "excluded_search",
    "excluded_404",
    "excluded_post_type",
    "excluded_page_id",
]


# --- Verdict ---


@dataclass(frozen=True)
class Verdict:
    """
    Outcome of a visibility decision.

    link is set if and only if show is True.
    """

    show: bool
    link: str | None = None
    reason: HideReason | None = None


@dataclass(frozen=True)
class ButtonView:
    """Payload handed to the rendering surface."""

    show: bool
    link: str | None = None
    label: str = ""
    has_label: bool = False
    position: Literal["left", "right"] = "right"


# --- Input Models ---


@dataclass(frozen=True)
class ShouldShowInput:
    """Input for evaluating a single page view."""

    settings: ButtonSettings
    now: ClockResult
    page: PageContext = field(default_factory=PageContext)
    base_url: str = DEFAULT_BASE_URL
