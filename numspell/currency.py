"""
Money amounts: main units and sub-units, each with an agreeing noun.

    1.50  USD → "one dollar and fifty cents"
    22.05 RUB → "двадцать два рубля пять копеек"
    0.5   GEL → "ორმოცდაათი თეთრი"
    0     EUR → "zero euros"
"""

from __future__ import annotations

import logging
from decimal import ROUND_DOWN, ROUND_HALF_UP, Decimal, localcontext

from .assembler import integer_to_words
from .chunks import decompose
from .models import CurrencyInfo, Gender, GrammarProfile, NormalizedNumber
from .plurals import resolve_form

logger = logging.getLogger(__name__)


def split_amount(magnitude: Decimal, divisor: int, round_subunits: bool = True) -> tuple[int, int]:
    """Split a non-negative amount into (main units, sub-units).

    Sub-units are rounded half-up to 1/divisor when `round_subunits` is set
    and truncated otherwise. A rounded carry moves into the main unit:
    0.999 -> (1, 0).
    """
    mode = ROUND_HALF_UP if round_subunits else ROUND_DOWN
    with localcontext() as ctx:
        _, digits, exponent = magnitude.as_tuple()
        # Exact product and quantize, however many digits the amount has
        ctx.prec = max(ctx.prec, len(digits) + max(exponent, 0) + len(str(divisor)) + 2)
        total = (magnitude * divisor).quantize(Decimal(1), rounding=mode)
    main, sub = divmod(int(total), divisor)
    return main, sub


def ends_with_noun_scale(amount: int, profile: GrammarProfile) -> bool:
    """Whether the last word of `amount` is a noun scale word (millions, not mille)."""
    lowest = next(chunk for chunk in decompose(amount, profile) if chunk.value)
    return lowest.scale_index > 0 and profile.scale_for(lowest.scale_index).is_noun


def _unit_phrase(
    amount: int,
    forms: dict[str, str],
    gender: Gender | None,
    profile: GrammarProfile,
    partitive: str | None = None,
) -> str:
    words = integer_to_words(amount, profile, gender)
    if partitive and ends_with_noun_scale(amount, profile):
        return f"{words} {partitive}"
    noun = resolve_form(amount, forms, profile.plural_rule)
    return f"{words} {noun}"


def render_currency(
    number: NormalizedNumber,
    currency_info: CurrencyInfo,
    profile: GrammarProfile,
    round_subunits: bool = True,
) -> str:
    """Render the magnitude of `number` as a currency amount.

    The sign is not rendered here; the facade prefixes it.

    Args:
        number: normalized input (only its magnitude is used)
        currency_info: unit names, divisor and optional separator
        profile: the language rendering the amounts
        round_subunits: half-up rounding (True) or truncation (False)

    Returns:
        e.g. "one hundred five dollars"

    Raises:
        ScaleOverflowError: If either amount exceeds the largest scale.
    """
    info = currency_info
    if info.sub_unit_forms is None:
        # No sub-unit to show: round (or cut) straight to whole units
        main, sub = split_amount(number.magnitude, 1, round_subunits)
    else:
        main, sub = split_amount(number.magnitude, info.subunit_divisor, round_subunits)
    logger.debug("%s currency split: %s -> main=%d sub=%d", profile.code, number.magnitude, main, sub)

    main_gender = info.main_gender or profile.default_gender
    if main == 0 and sub == 0:
        unit = resolve_form(0, info.main_unit_forms, profile.plural_rule)
        return f"{profile.zero} {unit}"

    parts: list[str] = []
    if main:
        parts.append(_unit_phrase(main, info.main_unit_forms, main_gender, profile, info.partitive_form))
    if sub and info.sub_unit_forms is not None:
        sub_gender = info.sub_gender or profile.default_gender
        parts.append(_unit_phrase(sub, info.sub_unit_forms, sub_gender, profile))

    separator = info.separator or profile.connectors.currency_unit
    joiner = f" {separator} " if separator else " "
    return joiner.join(parts)
