import logging

from fastapi import APIRouter, Depends, Query, Request

from flatdocs.config import get_config
from flatdocs.models.config import EngineConfig
from flatdocs.models.search import SearchResponse
from flatdocs.routers.pages import limiter
from flatdocs.services.engine import do_search

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get(
    "/search",
    response_model=SearchResponse,
    summary="Search page titles and bodies",
    description=(
        "Case-insensitive substring search over every page.  Results keep the "
        "navigation order and carry the text surrounding the first match."
    ),
)
@limiter.limit("30/minute")
def search_pages(
    request: Request,
    q: str = Query(default="", max_length=200, description="Search term."),
    config: EngineConfig = Depends(get_config),
) -> SearchResponse:
    logger.info("Search request received", extra={"query": q})
    results = do_search(q, config)
    return SearchResponse(query=q, total=len(results), results=results)
