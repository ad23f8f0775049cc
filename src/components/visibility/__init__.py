"""
Visibility component - chat button show/hide decision and link building.
"""

from .component import (
    build_button_view,
    build_link,
    check_page,
    check_schedule,
    run,
    run_page_view,
    should_show,
)
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

__all__ = [
    # Component entry points
    "run",
    "run_page_view",
    # Functions
    "should_show",
    "check_schedule",
    "check_page",
    "build_link",
    "build_button_view",
    # Models
    "ShouldShowInput",
    "Verdict",
    "ButtonView",
    "ClockError",
    "ClockResult",
    "HideReason",
    # Ports
    "ClockPort",
    "PageContextPort",
    # Constants
    "DEFAULT_BASE_URL",
]
