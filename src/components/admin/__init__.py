"""
Admin component - settings page support logic.
"""

from .component import button_status, resolve_tab, selectable_post_types
from .models import (
    DEFAULT_INTERNAL_POST_TYPES,
    DEFAULT_TAB,
    DEFAULT_TABS,
    ButtonStatus,
    PostTypeOption,
)

__all__ = [
    # Functions
    "resolve_tab",
    "selectable_post_types",
    "button_status",
    # Models
    "ButtonStatus",
    "PostTypeOption",
    # Constants
    "DEFAULT_TABS",
    "DEFAULT_TAB",
    "DEFAULT_INTERNAL_POST_TYPES",
]
