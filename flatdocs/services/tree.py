"""Building the navigation tree of categories and pages from the content directory.

Every call walks the filesystem afresh; nothing is cached between calls.  The
first category of the result is a synthetic *index* category holding the
documents that sit directly in the content root, followed by one category per
top-level directory, each nesting its own sub-directories.
"""

import logging
import math
import re
from pathlib import Path
from typing import Dict, Iterator, List, Optional, Tuple

from flatdocs.models.category import CategoryModel
from flatdocs.models.config import EngineConfig
from flatdocs.models.page import PageModel
from flatdocs.services.loader import is_document, load_page
from flatdocs.services.slugs import clean_string, slug_to_title

logger = logging.getLogger(__name__)

_INFINITY = float("inf")


def _sort_value(meta: Dict[str, str]) -> float:
    """Numeric ``sort`` metadata, or infinity when missing or unparseable."""
    try:
        value = float(meta["sort"])
    except (KeyError, ValueError):
        return _INFINITY
    return value if math.isfinite(value) else _INFINITY


def _sort_key(meta: Dict[str, str], title: str) -> Tuple[float, str]:
    return _sort_value(meta), title.casefold()


def _is_ignored(entry: Path, ignore: Optional["re.Pattern[str]"]) -> bool:
    if entry.name.startswith("."):
        return True
    return bool(ignore and ignore.search(entry.name))


def _has_documents(category: CategoryModel) -> bool:
    return bool(category.files) or any(_has_documents(c) for c in category.categories)


class _TreeWalk:
    """State of one :func:`build_tree` call; discarded when the call returns."""

    def __init__(self, config: EngineConfig, active_slug: Optional[str]) -> None:
        self.config = config
        self.root = config.content_dir
        self.active = clean_string(active_slug) if active_slug else None
        self.ignore = re.compile(config.ignore_pattern) if config.ignore_pattern else None

    def _load(self, path: Path) -> Optional[PageModel]:
        try:
            page = load_page(path, self.config)
        except UnicodeDecodeError as exc:
            logger.warning("Skipping undecodable document %s: %s", path, exc)
            return None
        if page is not None and self.active is not None and page.slug == self.active:
            page = page.model_copy(update={"active": True})
        return page

    def _index_meta(self, pages: List[PageModel]) -> Dict[str, str]:
        """Metadata of the directory's index document, if it has one."""
        for page in pages:
            if Path(page.path).stem.lower() == self.config.index_name.lower():
                return page.meta
        return {}

    def category(self, directory: Path, depth: int, is_index: bool = False) -> CategoryModel:
        """Build the category for *directory* and, recursively, its sub-directories."""
        files: List[PageModel] = []
        categories: List[CategoryModel] = []

        for entry in sorted(directory.iterdir(), key=lambda p: p.name):
            if _is_ignored(entry, self.ignore):
                continue
            if entry.is_dir():
                if is_index:
                    # Root sub-directories are returned next to the index category
                    continue
                child = self.subdirectory(entry, depth + 1)
                if child is not None:
                    categories.append(child)
            elif entry.is_file() and is_document(entry, self.config):
                page = self._load(entry)
                if page is not None:
                    files.append(page)

        files.sort(key=lambda p: _sort_key(p.meta, p.title))
        categories.sort(key=lambda c: _sort_key(c.meta, c.title))

        meta = self._index_meta(files)
        if is_index:
            slug, title = "", meta.get("title", "")
        else:
            relative = directory.relative_to(self.root).as_posix()
            slug = clean_string(relative)
            title = meta.get("title") or slug_to_title(directory.name)

        return CategoryModel(
            slug=slug,
            title=title,
            is_index=is_index,
            active=any(p.active for p in files) or any(c.active for c in categories),
            meta=meta,
            files=files,
            categories=categories,
        )

    def subdirectory(self, directory: Path, depth: int) -> Optional[CategoryModel]:
        if depth > self.config.max_depth:
            logger.warning(
                "Skipping %s: deeper than max_depth", directory,
                extra={"max_depth": self.config.max_depth},
            )
            return None
        category = self.category(directory, depth)
        if not self.config.keep_empty_categories and not _has_documents(category):
            logger.debug("Dropping empty category %s", category.slug)
            return None
        return category

    def top_level(self) -> List[CategoryModel]:
        categories = [
            child
            for child in (
                self.subdirectory(entry, 1)
                for entry in self.root.iterdir()
                if entry.is_dir() and not _is_ignored(entry, self.ignore)
            )
            if child is not None
        ]
        categories.sort(key=lambda c: _sort_key(c.meta, c.title))
        return categories


def build_tree(config: EngineConfig, active_slug: Optional[str] = None) -> List[CategoryModel]:
    """Return the content tree as an ordered list of categories.

    The first entry is always the index category (``is_index=True``, empty
    slug) holding the root-level documents.  Documents and categories are
    ordered by their numeric ``sort`` metadata, entries without one last, ties
    broken by case-insensitive title.

    When *active_slug* is given, the page with that slug is marked ``active``
    along with every category on the path to it.

    A missing content directory yields just an empty index category.
    """
    if not config.content_dir.is_dir():
        logger.warning("Content directory %s does not exist", config.content_dir)
        return [CategoryModel(slug="", title="", is_index=True)]

    walk = _TreeWalk(config, active_slug)
    index = walk.category(config.content_dir, depth=0, is_index=True)
    return [index] + walk.top_level()


def iter_pages(categories: List[CategoryModel]) -> Iterator[PageModel]:
    """Yield every page depth-first: a category's files, then its sub-categories."""
    for category in categories:
        yield from category.files
        yield from iter_pages(category.categories)
