"""Approximate string comparison over code point sequences.

All functions are total: empty inputs have defined results and nothing
raises. Inputs are compared as given; canonicalize them first when the
comparison should ignore case, digit script or compatibility forms.
"""

from decimal import ROUND_HALF_UP, Decimal
from typing import List, Tuple

WINKLER_PREFIX_LIMIT = 4
WINKLER_SCALING = 0.1


def edit_distance(a: str, b: str) -> int:
    """Levenshtein distance: single code point insertions, deletions and substitutions."""

    if a == b:
        return 0
    if not a:
        return len(b)
    if not b:
        return len(a)

    previous = list(range(len(b) + 1))
    for i, ch_a in enumerate(a, start=1):
        current = [i]
        for j, ch_b in enumerate(b, start=1):
            cost = 0 if ch_a == ch_b else 1
            current.append(
                min(
                    previous[j] + 1,
                    current[j - 1] + 1,
                    previous[j - 1] + cost,
                )
            )
        previous = current
    return previous[-1]


def _first_longest_run(a: str, b: str) -> Tuple[int, int, int]:
    """Return (start_a, start_b, length) of the first longest common run."""

    best_a = best_b = best_len = 0
    for i in range(len(a)):
        if len(a) - i <= best_len:
            break
        for j in range(len(b)):
            if len(b) - j <= best_len:
                break
            k = 0
            while i + k < len(a) and j + k < len(b) and a[i + k] == b[j + k]:
                k += 1
            if k > best_len:
                best_a, best_b, best_len = i, j, k
    return best_a, best_b, best_len


def _matched_chars(a: str, b: str) -> int:
    """Sum of common run lengths, matching the longest run then both sides of it."""

    total = 0
    pending: List[Tuple[str, str]] = [(a, b)]
    while pending:
        left, right = pending.pop()
        if not left or not right:
            continue
        start_l, start_r, length = _first_longest_run(left, right)
        if not length:
            continue
        total += length
        pending.append((left[:start_l], right[:start_r]))
        pending.append((left[start_l + length:], right[start_r + length:]))
    return total


def similarity_ratio(a: str, b: str) -> float:
    """Percentage of matching characters in [0, 100], rounded to one decimal.

    Returns 0.0 when either string is empty.
    """

    if not a or not b:
        return 0.0
    percent = _matched_chars(a, b) * 2 * 100 / (len(a) + len(b))
    return float(Decimal(repr(percent)).quantize(Decimal("0.1"), rounding=ROUND_HALF_UP))


def _jaro(a: str, b: str) -> float:
    window = max(0, max(len(a), len(b)) // 2 - 1)
    a_matched = [False] * len(a)
    b_matched = [False] * len(b)

    matches = 0
    for i, ch in enumerate(a):
        low = max(0, i - window)
        high = min(len(b), i + window + 1)
        for j in range(low, high):
            if not b_matched[j] and b[j] == ch:
                a_matched[i] = b_matched[j] = True
                matches += 1
                break
    if not matches:
        return 0.0

    transpositions = 0
    j = 0
    for i, ch in enumerate(a):
        if not a_matched[i]:
            continue
        while not b_matched[j]:
            j += 1
        if ch != b[j]:
            transpositions += 1
        j += 1

    return (
        matches / len(a)
        + matches / len(b)
        + (matches - transpositions / 2) / matches
    ) / 3


def jaro_winkler(a: str, b: str) -> float:
    """Jaro similarity boosted by the shared prefix, in [0, 1]."""

    if not a and not b:
        return 1.0
    if not a or not b:
        return 0.0
    if a == b:
        return 1.0

    jaro = _jaro(a, b)
    prefix = 0
    for ch_a, ch_b in zip(a[:WINKLER_PREFIX_LIMIT], b[:WINKLER_PREFIX_LIMIT]):
        if ch_a != ch_b:
            break
        prefix += 1
    score = jaro + prefix * WINKLER_SCALING * (1.0 - jaro)
    return min(1.0, max(0.0, score))


def longest_common_substring(a: str, b: str) -> str:
    """Longest contiguous run shared by both strings.

    Ties go to the run that starts first in ``a``.
    """

    start, _, length = _first_longest_run(a, b)
    return a[start:start + length]
