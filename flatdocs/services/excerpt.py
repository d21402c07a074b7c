"""Plain-text previews of page bodies."""

import re

from bs4 import BeautifulSoup

_WHITESPACE_RE = re.compile(r"\s+")


def strip_markup(text: str) -> str:
    """Return the visible text of *text* with HTML tags and entities resolved."""
    soup = BeautifulSoup(text, "lxml")
    return _WHITESPACE_RE.sub(" ", soup.get_text(" ")).strip()


def make_excerpt(body: str, length: int, strip_tags: bool = False) -> str:
    """Return the first *length* characters of *body*.

    Markdown syntax is kept as written, so the excerpt is a preview rather than
    guaranteed prose.  With *strip_tags* any embedded HTML is removed first.
    """
    text = strip_markup(body) if strip_tags else body.strip()
    return text[:length].rstrip()


def context_window(text: str, position: int, match_length: int, radius: int) -> str:
    """Return the text around ``text[position:position + match_length]``.

    Up to *radius* characters are kept on each side of the match; runs of
    whitespace (including newlines) are collapsed to single spaces.
    """
    start = max(0, position - radius)
    end = min(len(text), position + match_length + radius)
    return _WHITESPACE_RE.sub(" ", text[start:end]).strip()
