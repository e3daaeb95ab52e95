"""
Custom exception hierarchy for number-to-words conversion.

Each user-facing exception type maps to a specific category of input failure,
so the facade can turn it into the right fallback literal. Engine invariant
violations are not part of that hierarchy: they signal a broken
grammar profile or decomposer and must surface loudly.
"""

from __future__ import annotations


class NumberConversionError(Exception):
    """Base exception for all recoverable conversion failures."""

    def __init__(self, code: str, message: str, details: dict | None = None):
        self.code = code
        self.details = details or {}
        super().__init__(message)


class NotNumericError(NumberConversionError):
    """The input is not a number: unparsable string or unsupported type."""

    def __init__(self, message: str, details: dict | None = None):
        super().__init__("NOT_NUMERIC", message, details)


class NaNInputError(NumberConversionError):
    """The input is a NaN value."""

    def __init__(self, message: str, details: dict | None = None):
        super().__init__("NAN_INPUT", message, details)


class ScaleOverflowError(NumberConversionError):
    """The input is too large to spell out.

    Raised past the largest scale word a language defines, and by the
    normalizer for inputs with too many digits on either side of the point.
    """

    def __init__(self, message: str, details: dict | None = None):
        super().__init__("SCALE_OVERFLOW", message, details)


class UnsupportedLanguageError(NumberConversionError):
    """No grammar profile is registered for the requested language code."""

    def __init__(self, message: str, details: dict | None = None):
        super().__init__("UNSUPPORTED_LANGUAGE", message, details)


class InternalRangeViolation(AssertionError):
    """A chunk value or scale index fell outside what the profile supports.

    This is a programming error (inconsistent profile or decomposer bug),
    never a user error, so it is not a NumberConversionError and the facade
    does not catch it.
    """
