"""English (US) and English (UK) grammar profiles."""

from __future__ import annotations

from ..models import (
    ConnectorPolicy,
    ConnectorRule,
    Connectors,
    CurrencyInfo,
    DecimalSeparator,
    GrammarProfile,
    ScaleEntry,
    YearReading,
    YearStyle,
)
from ..plurals import ONE, ONE_OTHER, OTHER

_SCALE_WORDS = [
    "thousand",
    "million",
    "billion",
    "trillion",
    "quadrillion",
    "quintillion",
    "sextillion",
    "septillion",
    "octillion",
    "nonillion",
    "decillion",
]

USD = CurrencyInfo(
    main_unit_forms={ONE: "dollar", OTHER: "dollars"},
    sub_unit_forms={ONE: "cent", OTHER: "cents"},
    separator="and",
)

GBP = CurrencyInfo(
    main_unit_forms={ONE: "pound", OTHER: "pounds"},
    sub_unit_forms={ONE: "penny", OTHER: "pence"},
    separator="and",
)

PROFILE = GrammarProfile(
    code="en",
    name="English",
    zero="zero",
    digit_words=(
        "zero", "one", "two", "three", "four",
        "five", "six", "seven", "eight", "nine",
        "ten", "eleven", "twelve", "thirteen", "fourteen",
        "fifteen", "sixteen", "seventeen", "eighteen", "nineteen",
    ),
    tens_words={
        2: "twenty", 3: "thirty", 4: "forty", 5: "fifty",
        6: "sixty", 7: "seventy", 8: "eighty", 9: "ninety",
    },
    tens_joiner="-",
    hundred_word="hundred",
    scale_table=tuple(
        ScaleEntry(magnitude=1000 ** power, forms={ONE: word})
        for power, word in enumerate(_SCALE_WORDS, start=1)
    ),
    plural_rule=ONE_OTHER,
    separator_words={DecimalSeparator.POINT: "point", DecimalSeparator.COMMA: "comma"},
    negative_prefix="negative",
    era_bc="BC",
    era_ad="AD",
    year_readings=(
        YearReading(start=1100, end=1999, style=YearStyle.CENTURY),
        YearReading(start=2010, end=2099, style=YearStyle.PAIRED),
    ),
    infinity="Infinity",
    negative_infinity="Negative Infinity",
    nan_literal="Not a Number",
    not_numeric_literal="Not a Number",
    too_large_literal="Number too large",
    currency=USD,
)

# British usage: "one hundred and five", "one thousand and five", pounds
PROFILE_GB = PROFILE.model_copy(
    update={
        "code": "en-gb",
        "name": "English (UK)",
        "negative_prefix": "minus",
        "connectors": Connectors(
            intra_group=ConnectorRule(word="and", policy=ConnectorPolicy.ALWAYS),
            before_last_small_group=ConnectorRule(
                word="and", policy=ConnectorPolicy.ONLY_IF_UNDER_100
            ),
        ),
        "currency": GBP,
    }
)
