import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, Request
from slowapi import Limiter
from slowapi.util import get_remote_address

from flatdocs.config import get_config
from flatdocs.models.category import CategoryModel
from flatdocs.models.config import EngineConfig
from flatdocs.models.page import PageModel
from flatdocs.services.engine import get_page, get_pages

logger = logging.getLogger(__name__)

limiter = Limiter(key_func=get_remote_address)
router = APIRouter(prefix="/pages", tags=["Pages"])


@router.get(
    "",
    response_model=List[CategoryModel],
    summary="List all categories and pages",
    description=(
        "Walks the content directory and returns the navigation tree.  The "
        "first category is the index category holding root-level pages.  Pass "
        "`active` to mark the page with that slug (and the categories leading "
        "to it) as active."
    ),
)
@limiter.limit("60/minute")
def list_pages(
    request: Request,
    active: Optional[str] = Query(default=None, description="Slug of the current page."),
    config: EngineConfig = Depends(get_config),
) -> List[CategoryModel]:
    logger.info("Page tree requested", extra={"active": active})
    return get_pages(config, active)


@router.get("/{path:path}", response_model=PageModel, summary="Fetch a single page")
@limiter.limit("60/minute")
def read_page(
    request: Request,
    path: str,
    config: EngineConfig = Depends(get_config),
) -> PageModel:
    """Return the page stored at *path* (relative to the content directory)."""
    page = get_page(path, config)
    if page is None:
        raise HTTPException(status_code=404, detail=f"No page found at '{path}'.")
    return page
