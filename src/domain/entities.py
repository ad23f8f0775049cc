from typing import Literal

from pydantic import BaseModel, Field

Position = Literal["left", "right"]
SpecialPage = Literal["front_page", "posts_page", "archive", "search", "404"]


# --- Config ---

class ButtonSettings(BaseModel):
    enabled: bool = False
    phone: str = ""
    position: Position = "right"
    label: str = ""
    default_message: str = ""
    active_days: list[int] = Field(default_factory=lambda: [1, 2, 3, 4, 5])
    time_from: str = "09:00"
    time_to: str = "17:00"
    exclude_post_types: list[str] = Field(default_factory=list)
    exclude_page_ids: list[int] = Field(default_factory=list)
    exclude_special: list[SpecialPage] = Field(default_factory=list)


# --- Page View ---

class PageContext(BaseModel):
    """
    Classification of the page being viewed, as reported by the host.

    post_type and post_id are only meaningful when is_singular is set.
    """

    is_front_page: bool = False
    is_posts_index: bool = False
    is_archive: bool = False
    is_search: bool = False
    is_not_found: bool = False
    is_singular: bool = False
    post_type: str | None = None
    post_id: int | None = None
