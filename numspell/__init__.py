"""
numspell: data-driven number-to-words conversion.

Architecture: Normalizer → Decomposer → Assembler → Renderer, all driven by
one immutable GrammarProfile per language.
Philosophy:   One engine. Languages are data.
"""

from .converter import NumberToWords, convert
from .exceptions import (
    InternalRangeViolation,
    NaNInputError,
    NotNumericError,
    NumberConversionError,
    ScaleOverflowError,
    UnsupportedLanguageError,
)
from .languages import available_languages, get_profile
from .models import ConversionOptions, CurrencyInfo, DecimalSeparator, Gender, NumberFormat

__version__ = "1.0.0"

__all__ = [
    "ConversionOptions",
    "CurrencyInfo",
    "DecimalSeparator",
    "Gender",
    "InternalRangeViolation",
    "NaNInputError",
    "NotNumericError",
    "NumberConversionError",
    "NumberFormat",
    "NumberToWords",
    "ScaleOverflowError",
    "UnsupportedLanguageError",
    "available_languages",
    "convert",
    "get_profile",
]
