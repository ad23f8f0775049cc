from pydantic import BaseModel, Field

from src.components.admin import DEFAULT_INTERNAL_POST_TYPES, DEFAULT_TAB, DEFAULT_TABS
from src.components.settings import OPTION_KEY
from src.components.visibility import DEFAULT_BASE_URL


class SiteRules(BaseModel):
    timezone: str = "UTC"
    option_key: str = OPTION_KEY

class ButtonRules(BaseModel):
    base_url: str = DEFAULT_BASE_URL

class AdminRules(BaseModel):
    tabs: list[str] = Field(default_factory=lambda: list(DEFAULT_TABS))
    default_tab: str = DEFAULT_TAB
    internal_post_types: list[str] = Field(
        default_factory=lambda: list(DEFAULT_INTERNAL_POST_TYPES)
    )

class Rules(BaseModel):
    site: SiteRules = Field(default_factory=SiteRules)
    button: ButtonRules = Field(default_factory=ButtonRules)
    admin: AdminRules = Field(default_factory=AdminRules)
