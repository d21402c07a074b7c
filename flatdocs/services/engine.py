"""Query interface used by the API layer and other collaborators.

Each call is independent: the content directory is scanned afresh using the
:class:`~flatdocs.models.config.EngineConfig` passed in.
"""

import logging
from pathlib import Path
from typing import List, Optional, Union

from flatdocs.models.category import CategoryModel
from flatdocs.models.config import EngineConfig
from flatdocs.models.page import PageModel
from flatdocs.models.search import SearchHit
from flatdocs.services.loader import load_page, resolve_page_path
from flatdocs.services.meta import process_meta, strip_meta
from flatdocs.services.search import search
from flatdocs.services.slugs import clean_string, slug_to_title
from flatdocs.services.tree import build_tree
from flatdocs.services.variables import process_vars

__all__ = [
    "clean_string",
    "do_search",
    "get_page",
    "get_pages",
    "process_meta",
    "process_vars",
    "slug_to_title",
    "strip_meta",
]

logger = logging.getLogger(__name__)


def get_page(path: Union[str, Path], config: EngineConfig) -> Optional[PageModel]:
    """Return the page for *path*, or *None* when there is no such document.

    *path* is either an absolute filesystem path to a document or a request
    path relative to the content root (``sub/example-page``).
    """
    file_path = Path(path)
    if not (file_path.is_absolute() and file_path.exists()):
        resolved = resolve_page_path(str(path), config)
        if resolved is None:
            logger.info("Page not found: %s", path)
            return None
        file_path = resolved
    return load_page(file_path, config)


def get_pages(config: EngineConfig, active_slug: Optional[str] = None) -> List[CategoryModel]:
    """Return the category tree, marking *active_slug* as the current page."""
    return build_tree(config, active_slug)


def do_search(query: str, config: EngineConfig) -> List[SearchHit]:
    """Return search hits for *query* in tree order."""
    return search(config, query)
