"""Slug utilities: converting titles and content paths to slugs and back."""

import re

# Runs of whitespace, path separators and slug separators collapse to one separator
_SEPARATOR_RUN_RE = re.compile(r"[\s/\\_-]+")

_WORD_SEPARATOR_RE = re.compile(r"[-_\s]+")


def clean_string(text: str, use_underscore: bool = False) -> str:
    """Return the slug for *text*.

    The slug is lowercased and uses ``-`` (or ``_`` when *use_underscore* is set)
    as its only separator, with no leading, trailing or doubled separators::

        >>> clean_string("/some/path-example/hello/")
        'some-path-example-hello'
        >>> clean_string("also does underscores", use_underscore=True)
        'also_does_underscores'

    Applying it to its own output returns the same string.
    """
    separator = "_" if use_underscore else "-"
    slug = _SEPARATOR_RUN_RE.sub(separator, text.strip().lower())
    return slug.strip(separator)


def slug_to_title(path_or_slug: str) -> str:
    """Turn a slug or content path into a display title.

    Only the last path segment is used, its file extension is dropped and each
    word gets an upper-case first letter (the rest of the word is untouched).
    """
    segment = re.split(r"[/\\]", path_or_slug.strip())[-1]
    # Remove file extension from the segment, but keep dot-files intact
    segment = re.sub(r"(?<=.)\.[^.]*$", "", segment)

    words = [word for word in _WORD_SEPARATOR_RE.split(segment) if word]
    return " ".join(word[0].upper() + word[1:] for word in words)
