"""Reading single documents from the content directory."""

import logging
import os
from pathlib import Path, PurePosixPath
from typing import Optional, Union

from flatdocs.models.config import EngineConfig
from flatdocs.models.page import PageModel
from flatdocs.services.excerpt import make_excerpt
from flatdocs.services.meta import process_meta, strip_meta
from flatdocs.services.slugs import clean_string, slug_to_title
from flatdocs.services.variables import process_vars

logger = logging.getLogger(__name__)


def _relative_to_root(path: Path, root: Path) -> Optional[PurePosixPath]:
    """Return *path* relative to *root*, or *None* if it lies outside of it.

    Containment is checked on the resolved paths, but the returned path is the
    one *path* was reached by, so a document under a symlinked directory keeps
    the symlink's name.
    """
    try:
        resolved = path.resolve().relative_to(root.resolve())
    except ValueError:
        return None

    walked = Path(os.path.normpath(path.absolute()))
    base = Path(os.path.normpath(root.absolute()))
    try:
        return PurePosixPath(walked.relative_to(base).as_posix())
    except ValueError:
        # Reached through a different spelling of the root (e.g. the root is a symlink)
        return PurePosixPath(resolved.as_posix())


def is_document(path: Path, config: EngineConfig) -> bool:
    """Return True when *path*'s name looks like a content document."""
    return not path.name.startswith(".") and path.suffix.lower() in config.document_extensions


def page_slug(relative: PurePosixPath) -> str:
    """Slug of a document from its root-relative path, extension removed."""
    return clean_string(str(relative.with_suffix("")))


def load_page(file_path: Union[str, Path], config: EngineConfig) -> Optional[PageModel]:
    """Read the document at *file_path* and assemble a :class:`PageModel`.

    Returns *None* when there is no such document: the file is missing, is not
    a regular file, sits outside ``config.content_dir`` or does not carry one of
    ``config.document_extensions``.

    Raises:
        OSError: when the file exists but cannot be read.
        UnicodeDecodeError: when the file is not valid UTF-8.
    """
    path = Path(file_path)
    if not path.is_file() or not is_document(path, config):
        return None

    relative = _relative_to_root(path, config.content_dir)
    if relative is None:
        logger.warning("Refusing to load %s: outside the content directory", path)
        return None

    raw = path.read_text(encoding="utf-8-sig")

    meta = process_meta(raw)
    body = process_vars(strip_meta(raw), config.substitution_variables())
    slug = page_slug(relative)

    return PageModel(
        slug=slug,
        title=meta.get("title") or slug_to_title(relative.name),
        path=str(relative),
        body=body,
        excerpt=make_excerpt(body, config.excerpt_length, config.excerpt_strip_markup),
        meta=meta,
    )


def resolve_page_path(slug_path: str, config: EngineConfig) -> Optional[Path]:
    """Map a request path such as ``sub/example-page`` onto a document file.

    The path may carry a leading ``/`` and may or may not include the document
    extension.  Paths escaping the content directory resolve to *None*.
    """
    parts = [part for part in slug_path.replace("\\", "/").split("/") if part]
    if not parts or any(part in (".", "..") or part.startswith(".") for part in parts):
        return None

    candidate = config.content_dir.joinpath(*parts)
    candidates = [candidate] if candidate.suffix.lower() in config.document_extensions else []
    candidates += [candidate.with_name(candidate.name + ext) for ext in config.document_extensions]

    for path in candidates:
        if path.is_file() and _relative_to_root(path, config.content_dir) is not None:
            return path
    return None
