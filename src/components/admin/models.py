"""
Admin component models.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

ButtonStatus = Literal["active", "inactive"]

DEFAULT_TABS: tuple[str, ...] = ("general", "messages", "schedule", "visibility")
DEFAULT_TAB = "general"

# Host content types that never make sense as exclusion targets.
DEFAULT_INTERNAL_POST_TYPES: tuple[str, ...] = (
    "attachment",
    "revision",
    "nav_menu_item",
    "custom_css",
    "customize_changeset",
    "oembed_cache",
    "user_request",
    "wp_block",
    "wp_template",
    "wp_template_part",
    "wp_global_styles",
    "wp_navigation",
    "wp_font_face",
    "wp_font_family",
)


@dataclass(frozen=True)
class PostTypeOption:
    """A content type offered in the visibility tab."""

    name: str
    label: str
