"""
Year readings and era suffixes.

Strategies, chosen per year by the profile's `year_readings`:
    CARDINAL   2005 → "two thousand five"
    CENTURY    1984 → "nineteen eighty-four", 1900 → "nineteen hundred",
               1905 → "nineteen hundred five",
               1984 → "neunzehnhundertvierundachtzig" (keeps the hundred)
    PAIRED     2024 → "twenty twenty-four" (falls back to CENTURY below x10)

Profiles with `year_drops_leading_one` read 1000 as the bare scale word
("тисяча дев'ятсот").

Profiles with `year_final_word_forms` turn the last word of a year that does
not end in 00 into an ordinal ("du tūkstančiai dvidešimt penkti").

The sign of a year is only ever expressed through the era suffix.
"""

from __future__ import annotations

from .assembler import integer_to_words
from .models import GrammarProfile, YearStyle
from .renderer import render_chunk


def _century(year: int, profile: GrammarProfile) -> str:
    high, low = divmod(year, 100)
    if profile.hundred_word is None:
        return integer_to_words(year, profile, profile.default_gender)

    head = integer_to_words(high, profile, profile.default_gender)
    hundred = f"{head}{profile.hundred_digit_joiner}{profile.hundred_word}"
    if low == 0:
        return hundred

    tail = render_chunk(low, profile.default_gender, profile)
    if profile.century_keeps_hundred or low < 10:
        connector = profile.connectors.intra_group
        if connector.applies(low):
            tail = f"{connector.word} {tail}"
        return f"{hundred}{profile.hundreds_joiner}{tail}"
    return f"{head}{profile.year_pair_joiner}{tail}"


def _paired(year: int, profile: GrammarProfile) -> str:
    high, low = divmod(year, 100)
    if low < 10:
        return _century(year, profile)
    head = integer_to_words(high, profile, profile.default_gender)
    tail = render_chunk(low, profile.default_gender, profile)
    return f"{head}{profile.year_pair_joiner}{tail}"


def _ordinal_ending(text: str, forms: dict[str, str]) -> str:
    head, _, last = text.rpartition(" ")
    ordinal = forms.get(last)
    if ordinal is None:
        return text
    return f"{head} {ordinal}" if head else ordinal


def render_year(year: int, profile: GrammarProfile, include_era_suffix: bool = False) -> str:
    """Render a calendar year.

    Args:
        year: signed year; negative means BC
        profile: supplies readings, era words and the number tables
        include_era_suffix: append the AD word to positive years; year 0
            belongs to neither era and gets no suffix

    Returns:
        e.g. "nineteen eighty-four", "one hundred BC"

    Raises:
        ScaleOverflowError: If the year exceeds the largest scale.
    """
    magnitude = abs(year)
    style = profile.year_style_for(magnitude)
    if magnitude == 0:
        text = profile.zero
    elif style == YearStyle.CENTURY:
        text = _century(magnitude, profile)
    elif style == YearStyle.PAIRED:
        text = _paired(magnitude, profile)
    else:
        text = integer_to_words(magnitude, profile, profile.default_gender, profile.year_drops_leading_one)

    if profile.year_final_word_forms and magnitude % 100:
        text = _ordinal_ending(text, profile.year_final_word_forms)

    if year < 0:
        return f"{text} {profile.era_bc}"
    if include_era_suffix and year > 0:
        return f"{text} {profile.era_ad}"
    return text
