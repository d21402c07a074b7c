"""Keyword search over the content tree, computed on demand."""

import logging
import re
from typing import List, Optional

from flatdocs.models.config import EngineConfig
from flatdocs.models.page import PageModel
from flatdocs.models.search import SearchHit
from flatdocs.services.excerpt import context_window
from flatdocs.services.tree import build_tree, iter_pages

logger = logging.getLogger(__name__)


def _hit_for(page: PageModel, pattern: "re.Pattern[str]", config: EngineConfig) -> Optional[SearchHit]:
    """Return a hit when *pattern* occurs in the page's body or title."""
    match = pattern.search(page.body)
    if match is not None:
        excerpt = context_window(
            page.body, match.start(), match.end() - match.start(), config.search_context
        )
    elif pattern.search(page.title):
        excerpt = page.excerpt
    else:
        return None
    return SearchHit(slug=page.slug, title=page.title, excerpt=excerpt)


def search(config: EngineConfig, query: str) -> List[SearchHit]:
    """Return one hit per page whose title or body contains *query*.

    Matching is a case-insensitive substring test.  Hits keep the tree's
    traversal order; there is no ranking beyond match / no match.  The query
    is matched as given, surrounding whitespace included; an empty or
    whitespace-only query returns no hits.
    """
    if not query.strip():
        return []
    pattern = re.compile(re.escape(query), re.IGNORECASE)

    hits: List[SearchHit] = []
    for page in iter_pages(build_tree(config)):
        hit = _hit_for(page, pattern, config)
        if hit is not None:
            hits.append(hit)

    logger.info("Search completed", extra={"query": query, "hits": len(hits)})
    return hits
