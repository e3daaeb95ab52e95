"""German grammar profile.

Everything below a million is written as one word ("zweitausendvierhundert-
achtundsechzig"); million and above are feminine nouns with a plural
("eine Million", "zwei Millionen").
"""

from __future__ import annotations

from ..models import (
    CurrencyInfo,
    DecimalSeparator,
    Gender,
    GrammarProfile,
    ScaleEntry,
    YearReading,
    YearStyle,
)
from ..plurals import ONE, ONE_OTHER, OTHER

_LARGE_SCALES = [
    ("Million", "Millionen"),
    ("Milliarde", "Milliarden"),
    ("Billion", "Billionen"),
    ("Billiarde", "Billiarden"),
    ("Trillion", "Trillionen"),
    ("Trilliarde", "Trilliarden"),
    ("Quadrillion", "Quadrillionen"),
]

EUR = CurrencyInfo(
    main_unit_forms={ONE: "Euro"},
    sub_unit_forms={ONE: "Cent"},
    separator="und",
    main_gender=Gender.MASCULINE,
    sub_gender=Gender.MASCULINE,
)

PROFILE = GrammarProfile(
    code="de",
    name="Deutsch",
    zero="null",
    digit_words=(
        "null", "eins", "zwei", "drei", "vier",
        "fünf", "sechs", "sieben", "acht", "neun",
        "zehn", "elf", "zwölf", "dreizehn", "vierzehn",
        "fünfzehn", "sechzehn", "siebzehn", "achtzehn", "neunzehn",
    ),
    gendered_forms={
        Gender.MASCULINE: {1: "ein"},
        Gender.FEMININE: {1: "eine"},
        Gender.NEUTER: {1: "ein"},
    },
    combining_forms={1: "ein"},
    tens_words={
        2: "zwanzig", 3: "dreißig", 4: "vierzig", 5: "fünfzig",
        6: "sechzig", 7: "siebzig", 8: "achtzig", 9: "neunzig",
    },
    tens_joiner="und",
    units_first=True,
    hundred_word="hundert",
    hundred_digit_joiner="",
    hundreds_joiner="",
    scale_table=(
        ScaleEntry(
            magnitude=1000,
            forms={ONE: "tausend"},
            gender=Gender.NEUTER,
            joiner="",
            trailing_joiner="",
            is_noun=False,
        ),
        *(
            ScaleEntry(
                magnitude=1000 ** power,
                forms={ONE: singular, OTHER: plural},
                gender=Gender.FEMININE,
            )
            for power, (singular, plural) in enumerate(_LARGE_SCALES, start=2)
        ),
    ),
    plural_rule=ONE_OTHER,
    separator_words={DecimalSeparator.COMMA: "Komma", DecimalSeparator.POINT: "Punkt"},
    default_separator=DecimalSeparator.COMMA,
    negative_prefix="minus",
    era_bc="v. Chr.",
    era_ad="n. Chr.",
    year_readings=(YearReading(start=1100, end=1999, style=YearStyle.CENTURY),),
    century_keeps_hundred=True,
    year_pair_joiner="",
    infinity="Unendlich",
    negative_infinity="Negativ Unendlich",
    nan_literal="Keine Zahl",
    not_numeric_literal="Keine Zahl",
    too_large_literal="Zahl zu groß",
    currency=EUR,
)
