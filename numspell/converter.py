"""
NumberToWords facade: normalize → special values → dispatch → sign → cleanup.

    ┌──────────┐
    │  Input   │   int / float / Decimal / str
    └────┬─────┘
    ┌────▼─────┐
    │Normalizer│   NaN / ±Infinity short-circuit to literals
    └────┬─────┘
   ┌─────┼──────────┐
   │     │          │
 Year  Currency   Plain    ← ConversionOptions picks one
   │     │          │
   └─────┼──────────┘
    ┌────▼─────┐
    │  Sign    │   never for years (era suffix instead)
    └────┬─────┘
    ┌────▼─────┐
    │ Cleanup  │   single spaces, trimmed
    └──────────┘

User-input failures never escape convert(); they become fallback strings.
InternalRangeViolation is not caught here.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable
from concurrent.futures import ThreadPoolExecutor
from typing import Optional

from .assembler import integer_to_words
from .currency import render_currency
from .exceptions import (
    NaNInputError,
    NumberConversionError,
    ScaleOverflowError,
    UnsupportedLanguageError,
)
from .fractional import render_fractional
from .languages import default_language, get_profile
from .models import ConversionOptions, Gender, GrammarProfile, NormalizedNumber, NumberFormat
from .normalizer import normalize
from .years import render_year

logger = logging.getLogger(__name__)

_WHITESPACE = re.compile(r"\s+")

DEFAULT_OPTIONS = ConversionOptions()


class NumberToWords:
    """Converts numbers to words for one language.

    Usage:
        converter = NumberToWords.for_language("en")
        converter.convert(1984, ConversionOptions(format=NumberFormat.YEAR))
        # "nineteen eighty-four"

    Instances hold nothing but an immutable profile, so one converter can be
    shared across threads.
    """

    def __init__(self, profile: GrammarProfile):
        self.profile = profile

    @classmethod
    def for_language(cls, code: str, fallback_to_default: bool = False) -> NumberToWords:
        """Build a converter from the language registry.

        Raises:
            UnsupportedLanguageError: If `code` is unknown and
                `fallback_to_default` is False.
        """
        try:
            return cls(get_profile(code))
        except UnsupportedLanguageError:
            if not fallback_to_default:
                raise
            fallback = default_language()
            logger.warning("Unknown language %r, falling back to %r", code, fallback)
            return cls(get_profile(fallback))

    # ─── Conversion ─────────────────────────────────────────────────

    def convert(self, number: object, options: Optional[ConversionOptions] = None) -> str:
        """Convert one number to words.

        Args:
            number: int, float, Decimal or numeric string
            options: per-call settings; defaults apply when omitted

        Returns:
            Trimmed, single-spaced words, or a fallback literal for input
            that cannot be converted.
        """
        options = options or DEFAULT_OPTIONS
        profile = self.profile
        try:
            normalized = normalize(number)
            if normalized.is_nan:
                raise NaNInputError("NaN has no spoken form", details={"input": repr(number)})
            text = self._dispatch(normalized, options)
        except NumberConversionError as exc:
            logger.info(
                "%s: conversion of %s input recovered (%s): %s",
                profile.code,
                type(number).__name__,
                exc.code,
                exc,
            )
            return self._fallback(exc, options)
        return _WHITESPACE.sub(" ", text).strip()

    __call__ = convert

    def convert_many(
        self,
        numbers: Iterable[object],
        options: Optional[ConversionOptions] = None,
        max_workers: Optional[int] = None,
    ) -> list[str]:
        """Convert independent numbers on a thread pool, preserving order."""
        items = list(numbers)
        if not items:
            return []
        with ThreadPoolExecutor(max_workers=max_workers) as pool:
            return list(pool.map(lambda n: self.convert(n, options), items))

    # ─── Dispatch ────────────────────────────────────────────────────

    def _dispatch(self, number: NormalizedNumber, options: ConversionOptions) -> str:
        profile = self.profile
        prefix = options.negative_prefix or profile.negative_prefix

        if number.is_infinite:
            if not number.is_negative:
                return profile.infinity
            return profile.negative_infinity or f"{prefix} {profile.infinity}"

        if options.format == NumberFormat.YEAR:
            logger.debug("%s: year path for %s", profile.code, number.integer_magnitude)
            year = -number.integer_magnitude if number.is_negative else number.integer_magnitude
            return render_year(year, profile, options.include_era_suffix)

        if options.currency:
            logger.debug("%s: currency path for %s", profile.code, number.magnitude)
            info = options.currency_info or profile.currency
            text = render_currency(number, info, profile, options.round)
        else:
            text = self._plain(number, options)

        if number.is_negative:
            text = f"{prefix} {text}"
        return text

    def _plain(self, number: NormalizedNumber, options: ConversionOptions) -> str:
        profile = self.profile
        text = integer_to_words(number.integer_magnitude, profile, self._gender(options))

        separator = options.decimal_separator or profile.default_separator
        fraction = render_fractional(number.fractional_digits, profile.separator_words[separator], profile)
        if fraction:
            text = f"{text} {fraction}"
        return text

    def _gender(self, options: ConversionOptions) -> Optional[Gender]:
        if options.gender is not None and self.profile.gender_sensitive:
            return options.gender
        return self.profile.default_gender

    # ─── Fallbacks ───────────────────────────────────────────────────

    def _fallback(self, exc: NumberConversionError, options: ConversionOptions) -> str:
        if options.fallback_on_error is not None:
            return options.fallback_on_error
        if isinstance(exc, NaNInputError):
            return self.profile.nan_literal
        if isinstance(exc, ScaleOverflowError):
            return self.profile.too_large_literal
        return self.profile.not_numeric_literal


def convert(
    number: object,
    language: str | None = None,
    options: Optional[ConversionOptions] = None,
) -> str:
    """One-shot helper; `language` defaults to NUMSPELL_DEFAULT_LANGUAGE."""
    return NumberToWords.for_language(language or default_language()).convert(number, options)
