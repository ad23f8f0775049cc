"""
Visibility component port definitions.
"""

from __future__ import annotations

from typing import Protocol

from src.domain.entities import PageContext

from .models import ClockResult


class ClockPort(Protocol):
    """Local time in the site's configured timezone."""

    def now_local(self) -> ClockResult:
        """Current local datetime, or a ClockError if it cannot be resolved."""
        ...


class PageContextPort(Protocol):
    """Host-side classification of the current page."""

    def current_page(self) -> PageContext:
        """Describe the page being rendered."""
        ...
