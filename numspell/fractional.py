"""
Digits after the decimal separator, read one by one.

    (4, 5, 6) → "four five six"
    (5, 0)    → "five"           (trailing zeros dropped)
    (0, 5)    → "zero five"      (interior zeros kept)
"""

from __future__ import annotations

from collections.abc import Sequence

from .exceptions import InternalRangeViolation
from .models import GrammarProfile


def render_fractional(digits: Sequence[int], separator_word: str, profile: GrammarProfile) -> str:
    """Render the fractional part including its separator word.

    Args:
        digits: fractional digits as supplied, e.g. (5, 0)
        separator_word: e.g. "point", "Komma"
        profile: supplies the bare 0..9 digit words

    Returns:
        "point five", or "" when every digit is zero.
    """
    kept = list(digits)
    if not any(kept):
        return ""  # 1.0 and 1.000 read as plain integers in every language
    if not profile.keep_trailing_zeros:
        while kept[-1] == 0:
            kept.pop()

    words = []
    for digit in kept:
        if not 0 <= digit <= 9:
            raise InternalRangeViolation(f"Fractional digit out of range: {digit}")
        words.append(profile.digit_words[digit])
    return f"{separator_word} {' '.join(words)}"
