"""
Combine rendered groups with their scale words.

For every non-zero chunk, highest scale first:
  - the count agrees with the scale word's gender (Russian "одна тысяча"),
  - the scale word takes the plural form selected by the count
    ("две тысячи", "пять тысяч"),
  - a count of exactly one is dropped where the scale says the bare word
    suffices ("mille", "mil", "ათასი"), per scale, never globally,
  - the construct stem replaces the full form when a lower group follows
    ("ათას ერთი").
Groups are glued by the upper scale's trailing joiner, plus an optional
connector before a small final group ("one thousand and five").
"""

from __future__ import annotations

import logging
from typing import Optional

from .chunks import decompose
from .models import Chunk, Gender, GrammarProfile
from .plurals import resolve_form
from .renderer import render_chunk

logger = logging.getLogger(__name__)


# ─── Group Rendering ─────────────────────────────────────────────────


def _render_count(value: int, gender: Optional[Gender], profile: GrammarProfile, terminal: bool) -> str:
    """Render the count in front of a scale word.

    Counts above 999 only occur with custom scale lists, where a group can
    span several lower scales ("mil quinientos millones").
    """
    if value <= 999:
        return render_chunk(value, gender, profile, terminal)
    return assemble(decompose(value, profile), profile, gender)


def _render_group(
    chunk: Chunk,
    profile: GrammarProfile,
    gender: Optional[Gender],
    lower_follows: bool,
    bare_one: bool = False,
) -> str:
    if chunk.scale_index == 0:
        return render_chunk(chunk.value, gender, profile)

    scale = profile.scale_for(chunk.scale_index)
    if scale.stem and lower_follows:
        word = scale.stem
    else:
        word = resolve_form(chunk.value, scale.forms, profile.scale_rule)

    if chunk.value == 1 and (scale.omit_one or bare_one):
        return word

    count_gender = scale.gender or profile.default_gender
    count = _render_count(chunk.value, count_gender, profile, scale.is_noun)
    return f"{count}{scale.joiner}{word}"


# ─── Public API ──────────────────────────────────────────────────────


def assemble(
    chunks: list[Chunk],
    profile: GrammarProfile,
    gender: Optional[Gender] = None,
    drop_leading_one: bool = False,
) -> str:
    """Join decomposed chunks into words.

    Args:
        chunks: least-significant first, as produced by decompose()
        profile: the language's grammar tables
        gender: gender for the units group (scale groups use their own)
        drop_leading_one: say the highest scale word alone when its count is
            one ("тисяча", not "одна тисяча"); lower groups are unaffected

    Returns:
        The rendered integer, or "" if every chunk is zero.
    """
    groups = [chunk for chunk in reversed(chunks) if chunk.value]
    if not groups:
        return ""

    before_last = profile.connectors.before_last_small_group
    result = ""
    for position, chunk in enumerate(groups):
        lower_follows = position < len(groups) - 1
        text = _render_group(chunk, profile, gender, lower_follows, drop_leading_one and position == 0)
        if position == 0:
            result = text
            continue

        upper = profile.scale_for(groups[position - 1].scale_index)
        joiner = upper.trailing_joiner
        if joiner is None:
            joiner = profile.connectors.inter_group
        if chunk.scale_index == 0 and before_last.applies(chunk.value):
            joiner = f"{joiner}{before_last.word} "
        result = f"{result}{joiner}{text}"
    return result


def integer_to_words(
    magnitude: int,
    profile: GrammarProfile,
    gender: Optional[Gender] = None,
    drop_leading_one: bool = False,
) -> str:
    """Render a non-negative integer, returning the zero word for 0.

    Raises:
        ScaleOverflowError: If the magnitude exceeds the largest scale.
    """
    if magnitude == 0:
        return profile.zero
    chunks = decompose(magnitude, profile)
    logger.debug("%s: %d -> %d chunk(s)", profile.code, magnitude, len(chunks))
    return assemble(chunks, profile, gender, drop_leading_one)
