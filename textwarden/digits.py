"""Fold decimal digits from other numbering systems to ASCII."""

from functools import lru_cache
from typing import Dict, FrozenSet, Iterable
import unicodedata

ALL_SCRIPTS = "all"

# Code point of the digit zero; each script's ten digits are contiguous.
_SCRIPT_ZEROS = {
    "persian": 0x06F0,
    "arabic": 0x0660,
    "devanagari": 0x0966,
    "bengali": 0x09E6,
    "gurmukhi": 0x0A66,
    "gujarati": 0x0AE6,
    "oriya": 0x0B66,
    "tamil": 0x0BE6,
    "telugu": 0x0C66,
    "kannada": 0x0CE6,
    "malayalam": 0x0D66,
    "thai": 0x0E50,
    "lao": 0x0ED0,
    "tibetan": 0x0F20,
    "myanmar": 0x1040,
    "mongolian": 0x1810,
}

SCRIPT_DIGITS: Dict[str, Dict[str, str]] = {
    script: {chr(zero + value): str(value) for value in range(10)}
    for script, zero in _SCRIPT_ZEROS.items()
}

SUPPORTED_SCRIPTS = frozenset(SCRIPT_DIGITS)
DEFAULT_SCRIPTS = frozenset({"persian", "arabic"})


def resolve_scripts(scripts: Iterable[str]) -> FrozenSet[str]:
    """Validate script names and return them as a frozen set."""

    if isinstance(scripts, str):
        scripts = [scripts]
    resolved = frozenset(scripts)
    unknown = resolved - SUPPORTED_SCRIPTS - {ALL_SCRIPTS}
    if unknown:
        raise ValueError(f"unknown digit script: {', '.join(sorted(unknown))}")
    return resolved


@lru_cache(maxsize=64)
def _translation_table(scripts: FrozenSet[str]) -> Dict[int, str]:
    selected = SUPPORTED_SCRIPTS if ALL_SCRIPTS in scripts else scripts
    table: Dict[str, str] = {}
    for script in sorted(selected):
        table.update(SCRIPT_DIGITS[script])
    return str.maketrans(table)


def _fold_any_decimal(text: str) -> str:
    """Fold any remaining Nd code point by its decimal value."""

    if text.isascii():
        return text
    folded = []
    for ch in text:
        if ch > "\x7f" and unicodedata.category(ch) == "Nd":
            folded.append(str(unicodedata.decimal(ch)))
        else:
            folded.append(ch)
    return "".join(folded)


def fold_digits(text: str, scripts: Iterable[str] = DEFAULT_SCRIPTS) -> str:
    """Replace digits of the selected scripts with ASCII digits.

    ``scripts`` holds script names from ``SUPPORTED_SCRIPTS``. Including
    ``"all"`` folds every mapped script and then any other Unicode decimal
    digit through its numeric value.
    """

    resolved = resolve_scripts(scripts)
    folded = text.translate(_translation_table(resolved))
    if ALL_SCRIPTS in resolved:
        folded = _fold_any_decimal(folded)
    return folded
