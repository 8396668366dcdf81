"""Free-text content grammar.

Todoist content and section names carry a small inline grammar::

    {Tag} label (https://example.com) - YouTube

A leading ``{tag}`` becomes the lowercased tag, a hypertext suffix becomes the
link and a trailing ``- YouTube`` decoration is dropped from the display text.
"""

from __future__ import annotations

import re
from datetime import date

from todogist.contracts.task import ParsedContent

PLAYLIST_TAG = "playlist"
# U+2716 HEAVY MULTIPLICATION X
IGNORE_MARK = "✖"

_TAG_RE = re.compile(r"^\{([^}]+)\}\s+(.+)")
_PLAYLIST_RE = re.compile(r"\bplaylist\b")
_YOUTUBE_SUFFIX_RE = re.compile(r"\s*-\s*YouTube\Z")
# label (url)
_HYPERTEXT_RE = re.compile(r"^([^(\s]+)\s+(?:\s*\((.+)\))\B")
# [label](url)
_BRACKET_HYPERTEXT_RE = re.compile(r"^\[([^(\s]+)\](?:\s*\((.+)\))\B")
_DATE_RE = re.compile(r"^(\d{4})-(\d{2})-(\d{2})")


def strip_youtube_suffix(text: str) -> str:
    return _YOUTUBE_SUFFIX_RE.sub("", text, count=1)


def parse_content(content: str) -> ParsedContent:
    """Parse a content string into text, tag and link.

    Raises:
        TypeError: If *content* is not a string.
    """
    if not isinstance(content, str):
        raise TypeError(f"content is not a string ({type(content).__name__})")

    tag: str | None = None
    link: str | None = None

    tag_match = _TAG_RE.match(content)
    if tag_match:
        tag, content = tag_match.group(1), tag_match.group(2)
    elif _PLAYLIST_RE.search(content):
        tag = PLAYLIST_TAG

    # `content` no longer starts with a tag
    hypertext_match = _HYPERTEXT_RE.match(content)
    if hypertext_match:
        link = hypertext_match.group(2)
        content = hypertext_match.group(1) + content[hypertext_match.end() :]
    else:
        bracket_match = _BRACKET_HYPERTEXT_RE.match(content)
        if bracket_match:
            content, link = bracket_match.group(1), bracket_match.group(2)

    return _build_parsed_content(
        text=strip_youtube_suffix(content),
        tag=tag.lower() if tag else None,
        link=link,
    )


def _build_parsed_content(*, text: str | None, tag: str | None, link: str | None) -> ParsedContent:
    parsed = ParsedContent()
    if text:
        parsed.text = text
    if tag:
        parsed.tag = tag
    if link:
        parsed.link = link
    return parsed


def format_date(value: str) -> str:
    """Format a ``YYYY-MM-DD...`` stamp as ``"Month D, YYYY"``.

    Raises:
        TypeError: If *value* is not a string.
        ValueError: If *value* does not start with a calendar date.
    """
    if not isinstance(value, str):
        raise TypeError(f"date is not a string ({type(value).__name__})")

    match = _DATE_RE.match(value)
    if not match:
        raise ValueError(f"Invalid date stamp: {value!r}")
    parsed = date(int(match.group(1)), int(match.group(2)), int(match.group(3)))
    return f"{parsed:%B} {parsed.day}, {parsed.year}"
