"""Markup stripping and allow-list shaping for identifiers and names."""

import re
from typing import AbstractSet
import unicodedata

_TAG_RE = re.compile(r"<[^>]+>")
_WHITESPACE_RUN_RE = re.compile(r"\s+")
_UNDERSCORE_RUN_RE = re.compile(r"_{2,}")
_HYPHEN_RUN_RE = re.compile(r"-{2,}")

_NAME_PUNCTUATION = frozenset("'- ")


def strip_tags(text: str) -> str:
    """Strip basic HTML tags from input text."""

    return _TAG_RE.sub("", text)


def _is_word_char(ch: str) -> bool:
    """Letters, combining marks and numbers."""

    return unicodedata.category(ch)[0] in "LMN"


def shape_username(text: str) -> str:
    """Keep letters, digits and underscores, with whitespace runs as one underscore."""

    text = _WHITESPACE_RUN_RE.sub("_", text)
    text = "".join(ch for ch in text if ch == "_" or _is_word_char(ch))
    text = _UNDERSCORE_RUN_RE.sub("_", text)
    return text.strip("_")


def shape_slug(text: str) -> str:
    """Build a URL slug of letters, digits and single hyphens.

    A slug never starts with a digit: the leading run of digits and
    hyphens is dropped.
    """

    pieces = []
    in_gap = False
    for ch in text:
        if ch == "-" or _is_word_char(ch):
            pieces.append(ch)
            in_gap = False
        elif not in_gap:
            pieces.append("-")
            in_gap = True
    slug = _HYPHEN_RUN_RE.sub("-", "".join(pieces))
    start = 0
    while start < len(slug) and (slug[start] == "-" or unicodedata.category(slug[start]) == "Nd"):
        start += 1
    return slug[start:].rstrip("-")


def shape_person_name(text: str, preserve: AbstractSet[str] = frozenset()) -> str:
    """Keep letters, spaces, apostrophes and hyphens (plus preserved joiners)."""

    return "".join(
        ch
        for ch in text
        if ch in _NAME_PUNCTUATION
        or ch in preserve
        or unicodedata.category(ch)[0] in "LM"
    )


def keep_ascii_digits(text: str) -> str:
    """Drop everything but 0-9."""

    return "".join(ch for ch in text if "0" <= ch <= "9")


ALLOW_LISTS = frozenset({"username", "slug", "person_name", "numeric"})
