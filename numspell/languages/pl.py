"""Polish grammar profile.

Scale words and currencies follow the Polish plural: 1 tysiąc, 2-4 tysiące
(but not 12-14), everything else tysięcy, including 21, 31, ...
"""

from __future__ import annotations

from ..models import CurrencyInfo, DecimalSeparator, Gender, GrammarProfile, ScaleEntry
from ..plurals import FEW, MANY, ONE, POLISH

_SCALES = [
    ("tysiąc", "tysiące", "tysięcy"),
    ("milion", "miliony", "milionów"),
    ("miliard", "miliardy", "miliardów"),
    ("bilion", "biliony", "bilionów"),
    ("biliard", "biliardy", "biliardów"),
    ("trylion", "tryliony", "trylionów"),
    ("tryliard", "tryliardy", "tryliardów"),
    ("kwadrylion", "kwadryliony", "kwadrylionów"),
]

PLN = CurrencyInfo(
    main_unit_forms={ONE: "złoty", FEW: "złote", MANY: "złotych"},
    sub_unit_forms={ONE: "grosz", FEW: "grosze", MANY: "groszy"},
    separator="i",
    main_gender=Gender.MASCULINE,
    sub_gender=Gender.MASCULINE,
)

PROFILE = GrammarProfile(
    code="pl",
    name="Polski",
    zero="zero",
    digit_words=(
        "zero", "jeden", "dwa", "trzy", "cztery",
        "pięć", "sześć", "siedem", "osiem", "dziewięć",
        "dziesięć", "jedenaście", "dwanaście", "trzynaście", "czternaście",
        "piętnaście", "szesnaście", "siedemnaście", "osiemnaście", "dziewiętnaście",
    ),
    gendered_forms={
        Gender.FEMININE: {1: "jedna", 2: "dwie"},
        Gender.NEUTER: {1: "jedno"},
    },
    tens_words={
        2: "dwadzieścia", 3: "trzydzieści", 4: "czterdzieści", 5: "pięćdziesiąt",
        6: "sześćdziesiąt", 7: "siedemdziesiąt", 8: "osiemdziesiąt", 9: "dziewięćdziesiąt",
    },
    hundreds_words={
        1: "sto", 2: "dwieście", 3: "trzysta", 4: "czterysta", 5: "pięćset",
        6: "sześćset", 7: "siedemset", 8: "osiemset", 9: "dziewięćset",
    },
    scale_table=tuple(
        ScaleEntry(
            magnitude=1000 ** power,
            forms={ONE: one, FEW: few, MANY: many},
            gender=Gender.MASCULINE,
        )
        for power, (one, few, many) in enumerate(_SCALES, start=1)
    ),
    plural_rule=POLISH,
    default_gender=Gender.MASCULINE,
    gender_sensitive=True,
    separator_words={DecimalSeparator.COMMA: "przecinek", DecimalSeparator.POINT: "kropka"},
    default_separator=DecimalSeparator.COMMA,
    negative_prefix="minus",
    era_bc="p.n.e.",
    era_ad="n.e.",
    infinity="Nieskończoność",
    negative_infinity="Minus Nieskończoność",
    nan_literal="Nie Liczba",
    not_numeric_literal="Nie Liczba",
    too_large_literal="Liczba zbyt duża",
    currency=PLN,
)
