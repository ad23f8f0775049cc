"""Public endpoint deciding whether the chat button is drawn on a page."""

from fastapi import APIRouter, Depends
from pydantic import BaseModel

from src.adapters.site_clock import SiteClock
from src.api.deps import get_clock, get_option_store, get_rules
from src.components.settings import SettingsStorePort
from src.components.visibility import run_page_view
from src.domain.entities import PageContext
from src.rules.models import Rules

router = APIRouter()


class ButtonResponse(BaseModel):
    """What the rendering layer needs; everything but show is empty when hidden."""

    show: bool
    link: str | None = None
    label: str = ""
    has_label: bool = False
    position: str = "right"


class QueryPageContext:
    """PageContextPort backed by the request's query parameters."""

    def __init__(self, page: PageContext) -> None:
        self._page = page

    def current_page(self) -> PageContext:
        return self._page


@router.get("/button", response_model=ButtonResponse)
def get_button(
    is_front_page: bool = False,
    is_posts_index: bool = False,
    is_archive: bool = False,
    is_search: bool = False,
    is_not_found: bool = False,
    is_singular: bool = False,
    post_type: str | None = None,
    post_id: int | None = None,
    store: SettingsStorePort = Depends(get_option_store),
    clock: SiteClock = Depends(get_clock),
    rules: Rules = Depends(get_rules),
) -> ButtonResponse:
    """
    Evaluate the button for the described page.

    The host passes the page classification as query flags; post_type and
    post_id are only consulted on singular pages.
    """
    page = PageContext(
        is_front_page=is_front_page,
        is_posts_index=is_posts_index,
        is_archive=is_archive,
        is_search=is_search,
        is_not_found=is_not_found,
        is_singular=is_singular,
        post_type=post_type,
        post_id=post_id,
    )
    view = run_page_view(
        store=store,
        clock=clock,
        pages=QueryPageContext(page),
        base_url=rules.button.base_url,
    )
    return ButtonResponse(
        show=view.show,
        link=view.link,
        label=view.label,
        has_label=view.has_label,
        position=view.position,
    )
