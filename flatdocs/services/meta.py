"""Metadata block parsing.

A document may open with a comment block carrying ``Key: Value`` lines::

    /*
    Title: Getting Started
    Sort: 2
    */
    Body text...

Parsing is line oriented and forgiving: lines that do not look like
``Key: Value`` are skipped, and a block that never closes is treated as if it
were not there at all.  Only the first block, at the very start of the text,
is metadata; anything that looks like a block later on is plain content.
"""

import re
from typing import Dict, List, Optional, Tuple

OPEN_MARKER = "/*"
CLOSE_MARKER = "*/"

_META_LINE_RE = re.compile(r"^\s*([^:]*?[^:\s])\s*:(.*)$")
_KEY_WHITESPACE_RE = re.compile(r"\s+")


def _read_block(raw: str) -> Optional[Tuple[List[str], int]]:
    """Scan the leading metadata block of *raw*.

    Returns the block's inner lines and the offset just past the close marker,
    or *None* when *raw* does not start with a complete block.
    """
    if not raw.startswith(OPEN_MARKER):
        return None

    lines: List[str] = []
    offset = len(OPEN_MARKER)
    while offset <= len(raw):
        newline = raw.find("\n", offset)
        line_end = len(raw) if newline == -1 else newline
        line = raw[offset:line_end]

        close = line.find(CLOSE_MARKER)
        if close != -1:
            lines.append(line[:close])
            return lines, offset + close + len(CLOSE_MARKER)

        lines.append(line)
        if newline == -1:
            break
        offset = newline + 1

    # Reached the end of the text without a close marker
    return None


def _normalise_key(key: str) -> str:
    return _KEY_WHITESPACE_RE.sub("_", key.strip().lower())


def process_meta(raw: str) -> Dict[str, str]:
    """Return the metadata of *raw* as a ``{key: value}`` mapping.

    Keys are lower-cased with whitespace replaced by ``_``
    (``"Multi word"`` → ``"multi_word"``); values are trimmed.  When a key is
    repeated the first occurrence wins.
    """
    block = _read_block(raw)
    if block is None:
        return {}

    meta: Dict[str, str] = {}
    for line in block[0]:
        match = _META_LINE_RE.match(line)
        if not match:
            continue
        key = _normalise_key(match.group(1))
        if key not in meta:
            meta[key] = match.group(2).strip()
    return meta


def strip_meta(raw: str) -> str:
    """Remove the leading metadata block (and the whitespace after it) from *raw*."""
    block = _read_block(raw)
    if block is None:
        return raw
    return raw[block[1]:].lstrip()
