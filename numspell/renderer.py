"""
Render one digit group (0..999) into words from a GrammarProfile's tables.

A chunk of zero renders as "", because a zero group contributes nothing
inside a larger number. The facade owns the "whole number is zero" case.

`terminal` tells the renderer whether the group is the last thing before a
noun or the end of the number. Some forms only exist in that position:
French "quatre-vingts" / "deux cents" versus "quatre-vingt-un" / "deux cent
mille".
"""

from __future__ import annotations

from typing import Optional

from .chunks import split_vigesimal
from .exceptions import InternalRangeViolation
from .models import Gender, GrammarProfile, GroupingScheme


# ─── 0..99 ───────────────────────────────────────────────────────────


def render_below_hundred(
    n: int,
    gender: Optional[Gender],
    profile: GrammarProfile,
    terminal: bool = True,
) -> str:
    """Render 0..99. Lookups run from most to least specific.

    Order:
        1. gendered variant (одна, две, eine)
        2. terminal-only form (quatre-vingts)
        3. irregular table (Hindi 20..99, French 71, Spanish veintiuno)
        4. digit table for 0..19
        5. vigesimal stem + joiner + 0..19 (ოცდაერთი)
        6. tens + joiner + unit, or unit + joiner + tens (einundzwanzig)
    """
    if not 0 <= n <= 99:
        raise InternalRangeViolation(f"{profile.code}: expected 0..99, got {n}")
    if n == 0:
        return ""

    if gender is not None:
        gendered = profile.gendered_forms.get(gender, {})
        if n in gendered:
            return gendered[n]
    if terminal and n in profile.terminal_forms:
        return profile.terminal_forms[n]
    if n in profile.below_hundred:
        return profile.below_hundred[n]
    if n < 20:
        return profile.digit_words[n]

    if profile.grouping == GroupingScheme.VIGESIMAL:
        base, rest = split_vigesimal(n)
        if rest == 0:
            return profile.tens_words[base // 10]
        tail = render_below_hundred(rest, gender, profile, terminal)
        return f"{profile.tens_stems[base // 10]}{profile.tens_joiner}{tail}"

    tens, unit = divmod(n, 10)
    tens_word = profile.tens_words[tens]
    if unit == 0:
        return tens_word

    unit_word = profile.combining_forms.get(unit) or render_below_hundred(
        unit, gender, profile, terminal
    )
    joiner = profile.tens_joiner
    if unit == 1 and profile.unit_one_joiner is not None:
        joiner = profile.unit_one_joiner
    if profile.units_first:
        return f"{unit_word}{joiner}{tens_word}"
    return f"{tens_word}{joiner}{unit_word}"


# ─── Hundreds ────────────────────────────────────────────────────────


def _render_hundreds(digit: int, rest: int, profile: GrammarProfile, terminal: bool) -> str:
    # Construct form when something follows: Georgian ას ოცი, not ასი ოცი
    if rest and digit in profile.hundreds_stems:
        return profile.hundreds_stems[digit]
    if digit in profile.hundreds_words:
        return profile.hundreds_words[digit]

    if profile.hundred_word is None:
        raise InternalRangeViolation(f"{profile.code}: no way to render {digit} hundred(s)")
    word = profile.hundred_word
    if profile.hundred_plural and digit > 1 and rest == 0 and terminal:
        word = profile.hundred_plural
    if digit == 1 and profile.omit_one_before_hundred:
        return word

    count = profile.combining_forms.get(digit) or profile.digit_words[digit]
    return f"{count}{profile.hundred_digit_joiner}{word}"


# ─── Public API ──────────────────────────────────────────────────────


def render_chunk(
    value: int,
    gender: Optional[Gender],
    profile: GrammarProfile,
    terminal: bool = True,
) -> str:
    """Render a single 0..999 group.

    Args:
        value: the group value, e.g. 121
        gender: gender the group must agree with (None = profile default)
        profile: the language's grammar tables
        terminal: whether the group ends the number or precedes a noun

    Returns:
        e.g. "сто двадцать одна" for (121, FEMININE, ru); "" for 0.

    Raises:
        InternalRangeViolation: If value is outside 0..999.
    """
    if not 0 <= value <= 999:
        raise InternalRangeViolation(f"{profile.code}: chunk value {value} outside 0..999")
    if value == 0:
        return ""
    if value in profile.special_cases:
        return profile.special_cases[value]

    hundreds, rest = divmod(value, 100)
    if not hundreds:
        return render_below_hundred(rest, gender, profile, terminal)

    head = _render_hundreds(hundreds, rest, profile, terminal)
    if not rest:
        return head

    tail = render_below_hundred(rest, gender, profile, terminal)
    connector = profile.connectors.intra_group
    if connector.applies(rest):
        tail = f"{connector.word} {tail}"
    return f"{head}{profile.hundreds_joiner}{tail}"
