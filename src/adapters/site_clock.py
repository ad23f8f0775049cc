"""
Site Clock Adapter.

Implements the ClockPort interface for the site's configured timezone.

Key behaviors:
- now_local: current time in the configured IANA zone
- An unknown or malformed zone name yields a ClockError instead of raising,
  so the schedule check can fail open
"""

from __future__ import annotations

import logging
from datetime import UTC, datetime
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from src.components.visibility import ClockError, ClockResult

logger = logging.getLogger(__name__)


def _resolve_zone(tz_name: str) -> ZoneInfo | ClockError:
    try:
        return ZoneInfo(tz_name)
    except (ZoneInfoNotFoundError, ValueError) as e:
        logger.warning("Cannot resolve timezone %r: %s", tz_name, e)
        return ClockError(code="unknown_timezone", message=f"Unknown timezone: {tz_name}")


class SiteClock:
    """
    Clock for the site's display timezone.

    The zone is resolved once, at construction.
    """

    def __init__(self, tz_name: str = "UTC") -> None:
        """
        Initialize with specified timezone.

        Args:
            tz_name: IANA timezone name (default: UTC)
        """
        self._tz = _resolve_zone(tz_name)

    def now_local(self) -> ClockResult:
        """Get current time in the site timezone, or the resolution error."""
        if isinstance(self._tz, ClockError):
            return self._tz
        return datetime.now(self._tz)


class FrozenClock:
    """
    Clock that returns a fixed time.

    Useful for deterministic testing.
    """

    def __init__(self, frozen_utc: datetime, tz_name: str = "UTC") -> None:
        """
        Initialize with frozen time.

        Args:
            frozen_utc: The instant to report; naive values are read as UTC
            tz_name: IANA timezone name for local conversion
        """
        if frozen_utc.tzinfo is None:
            frozen_utc = frozen_utc.replace(tzinfo=UTC)
        self._frozen_utc = frozen_utc.astimezone(UTC)
        self._tz = _resolve_zone(tz_name)

    def now_local(self) -> ClockResult:
        """Get frozen time in the configured timezone."""
        if isinstance(self._tz, ClockError):
            return self._tz
        return self._frozen_utc.astimezone(self._tz)


def create_site_clock(tz_name: str = "UTC") -> SiteClock:
    """Factory function to create a site clock."""
    return SiteClock(tz_name)
