"""Persian and Arabic letter romanization for ASCII identifiers."""

_LETTERS = {
    "ا": "a",
    "آ": "a",
    "أ": "a",
    "إ": "e",
    "ٱ": "a",
    "ء": "",
    "ئ": "y",
    "ؤ": "v",
    "ب": "b",
    "پ": "p",
    "ت": "t",
    "ث": "s",
    "ج": "j",
    "چ": "ch",
    "ح": "h",
    "خ": "kh",
    "د": "d",
    "ذ": "z",
    "ر": "r",
    "ز": "z",
    "ژ": "zh",
    "س": "s",
    "ش": "sh",
    "ص": "s",
    "ض": "z",
    "ط": "t",
    "ظ": "z",
    "ع": "a",
    "غ": "gh",
    "ف": "f",
    "ق": "gh",
    "ک": "k",
    "ك": "k",
    "گ": "g",
    "ل": "l",
    "م": "m",
    "ن": "n",
    "و": "v",
    "ه": "h",
    "ة": "h",
    "ی": "i",
    "ي": "i",
    "ى": "a",
    # Short vowel marks; the rest of the harakat and tatweel are dropped.
    "\u064e": "a",
    "\u0650": "e",
    "\u064f": "o",
    "\u064b": "",
    "\u064c": "",
    "\u064d": "",
    "\u0651": "",
    "\u0652": "",
    "\u0640": "",
}

_TABLE = str.maketrans(_LETTERS)


def romanize_persian(text: str) -> str:
    """Transliterate Persian/Arabic letters to Latin, leaving everything else alone.

    Expects NFKC input so presentation forms are already base letters.
    """

    return text.translate(_TABLE)
