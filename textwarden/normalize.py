"""Unicode normalization and structural character filtering."""

import re
from typing import AbstractSet
import unicodedata

ZWNJ = "\u200c"
ZWJ = "\u200d"
JOINERS = frozenset({ZWNJ, ZWJ})

BIDI_CHARS = frozenset("\u202a\u202b\u202c\u202d\u202e\u2066\u2067\u2068\u2069")
# Removed by the structural filter no matter what a profile preserves.
ALWAYS_STRIPPED = BIDI_CHARS | {"\x00"}

ASCII_WHITESPACE = " \t\n\r"

_WHITESPACE_RUN_RE = re.compile(r"\s+")


def normalize_nfkc(text: str) -> str:
    """Return the NFKC form of text, skipping work when already normalized."""

    if unicodedata.is_normalized("NFKC", text):
        return text
    return unicodedata.normalize("NFKC", text)


def trim_ascii_whitespace(text: str) -> str:
    """Strip leading and trailing space, tab, newline and carriage return."""

    return text.strip(ASCII_WHITESPACE)


def collapse_whitespace(text: str) -> str:
    """Replace every run of Unicode whitespace with a single space."""

    return _WHITESPACE_RUN_RE.sub(" ", text)


def is_other(ch: str) -> bool:
    """True for general category C: controls, format, surrogates, private use, unassigned."""

    return unicodedata.category(ch)[0] == "C"


def strip_control_and_bidi(text: str, preserve: AbstractSet[str] = frozenset()) -> str:
    """Remove category C code points except those in ``preserve``.

    NUL and the bidi embedding, override and isolate controls are removed
    even when listed in ``preserve``.
    """

    keep = frozenset(preserve) - ALWAYS_STRIPPED
    return "".join(ch for ch in text if ch in keep or not is_other(ch))
