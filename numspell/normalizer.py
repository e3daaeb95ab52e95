"""
Coerce heterogeneous numeric input into a canonical NormalizedNumber.

Supported inputs:
    12                 → integer_magnitude=12
    -3.14              → NEGATIVE, 3, (1, 4)
    Decimal("1.050")   → 1, (0, 5, 0)    (digits kept exactly as supplied)
    " 1e3 "            → 1000
    float("nan")       → is_nan
    "-Infinity"        → NEGATIVE, is_infinite

Floats are read through repr() so 0.1 stays 0.1 instead of the binary
expansion 0.1000000000000000055511151231257827...

Magnitudes are capped before any digit is expanded: at most
MAX_INTEGER_DIGITS digits before the point and MAX_FRACTION_DIGITS after
it. "1e20000000" or "1e-1000000000" fail fast with ScaleOverflowError.
"""

from __future__ import annotations

import logging
from decimal import Decimal, InvalidOperation

from .exceptions import NotNumericError, ScaleOverflowError
from .models import NormalizedNumber, Sign

logger = logging.getLogger(__name__)

_SUPPORTED_TYPES = (int, float, Decimal, str)

MAX_INTEGER_DIGITS = 1000
MAX_FRACTION_DIGITS = 1000

_INTEGER_CEILING = 10**MAX_INTEGER_DIGITS


# ─── Coercion ────────────────────────────────────────────────────────


def _to_decimal(value: object) -> Decimal:
    """Turn one accepted input into a Decimal, preserving its precision.

    Raises:
        NotNumericError: For bool, None, empty or unparsable strings, and
            any other type.
        ScaleOverflowError: For an int with more than MAX_INTEGER_DIGITS
            digits.
    """
    # bool is an int subclass, but True is not a number anyone means to spell
    if isinstance(value, bool) or not isinstance(value, _SUPPORTED_TYPES):
        raise NotNumericError(
            f"Unsupported input type: {type(value).__name__}",
            details={"type": type(value).__name__},
        )

    if isinstance(value, Decimal):
        return value
    if isinstance(value, int):
        if abs(value) >= _INTEGER_CEILING:
            raise _too_many_digits("integer", value.bit_length())
        return Decimal(value)
    if isinstance(value, float):
        return Decimal(repr(value))

    text = value.strip().replace("_", "")
    if not text:
        raise NotNumericError("Empty string is not a number", details={"input": value})
    try:
        return Decimal(text)
    except InvalidOperation:
        raise NotNumericError(
            f"Could not parse a number from {value[:64]!r}", details={"input": value[:64]}
        ) from None


def _too_many_digits(part: str, size: int) -> ScaleOverflowError:
    limit = MAX_INTEGER_DIGITS if part == "integer" else MAX_FRACTION_DIGITS
    return ScaleOverflowError(
        f"Input {part} part exceeds {limit} digits",
        details={"part": part, "limit": limit, "size": size},
    )


# ─── Public API ──────────────────────────────────────────────────────


def normalize(value: object) -> NormalizedNumber:
    """Normalize any supported numeric input.

    Args:
        value: int, float, Decimal or numeric string.

    Returns:
        NormalizedNumber with a separate sign and non-negative magnitudes.

    Raises:
        NotNumericError: If the input cannot be read as a number.
        ScaleOverflowError: If either side of the point is too long to
            expand.
    """
    number = _to_decimal(value)
    sign = Sign.NEGATIVE if number.is_signed() else Sign.POSITIVE

    if number.is_nan():
        return NormalizedNumber(is_nan=True)
    if number.is_infinite():
        return NormalizedNumber(sign=sign, is_infinite=True)

    magnitude = number.copy_abs()  # exact, unlike abs()
    _, digits, exponent = magnitude.as_tuple()

    # adjusted() is the exponent of the leading digit, read without expanding
    if magnitude and magnitude.adjusted() >= MAX_INTEGER_DIGITS:
        raise _too_many_digits("integer", magnitude.adjusted() + 1)
    if exponent < -MAX_FRACTION_DIGITS:
        raise _too_many_digits("fraction", -exponent)

    integer_part = int(magnitude)

    # Digits after the point, exactly as written: 1.050 -> (0, 5, 0)
    fractional: tuple[int, ...] = ()
    if exponent < 0:
        scale = -exponent
        padded = (0,) * max(0, scale - len(digits)) + tuple(digits)
        fractional = padded[-scale:]

    is_zero = magnitude == 0
    if is_zero:
        sign = Sign.POSITIVE  # -0 and -0.0 read as plain zero

    normalized = NormalizedNumber(
        sign=sign,
        integer_magnitude=integer_part,
        fractional_digits=fractional,
        magnitude=magnitude,
        is_zero=is_zero,
    )
    logger.debug(
        "Normalized %s input: %d integer digit(s), %d fractional digit(s)",
        type(value).__name__,
        magnitude.adjusted() + 1 if integer_part else 0,
        len(fractional),
    )
    return normalized
