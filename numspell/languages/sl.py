"""Slovenian grammar profile.

Slovenian keeps a dual number: "dva milijona", "dva evra", but "trije evri"
and "pet evrov". Units come before the tens ("enaindvajset") and "tisoč"
never inflects.
"""

from __future__ import annotations

from ..models import CurrencyInfo, DecimalSeparator, Gender, GrammarProfile, ScaleEntry
from ..plurals import FEW, MANY, ONE, SLOVENIAN, TWO

_LARGE_SCALES = [
    ("milijon", "milijona", "milijoni", "milijonov", Gender.MASCULINE),
    ("milijarda", "milijardi", "milijarde", "milijard", Gender.FEMININE),
    ("bilijon", "bilijona", "bilijoni", "bilijonov", Gender.MASCULINE),
    ("bilijarda", "bilijardi", "bilijarde", "bilijard", Gender.FEMININE),
    ("trilijon", "trilijona", "trilijoni", "trilijonov", Gender.MASCULINE),
    ("trilijarda", "trilijardi", "trilijarde", "trilijard", Gender.FEMININE),
    ("kvadrilijon", "kvadrilijona", "kvadrilijoni", "kvadrilijonov", Gender.MASCULINE),
    ("kvadrilijarda", "kvadrilijardi", "kvadrilijarde", "kvadrilijard", Gender.FEMININE),
]

EUR = CurrencyInfo(
    main_unit_forms={ONE: "evro", TWO: "evra", FEW: "evri", MANY: "evrov"},
    sub_unit_forms={ONE: "cent", TWO: "centa", FEW: "centi", MANY: "centov"},
    separator="in",
    main_gender=Gender.MASCULINE,
    sub_gender=Gender.MASCULINE,
)

PROFILE = GrammarProfile(
    code="sl",
    name="Slovenščina",
    zero="nič",
    digit_words=(
        "nič", "ena", "dva", "tri", "štiri",
        "pet", "šest", "sedem", "osem", "devet",
        "deset", "enajst", "dvanajst", "trinajst", "štirinajst",
        "petnajst", "šestnajst", "sedemnajst", "osemnajst", "devetnajst",
    ),
    gendered_forms={
        Gender.MASCULINE: {1: "en", 3: "trije", 4: "štirje"},
        Gender.FEMININE: {2: "dve"},
    },
    # Inside "enaindvajset" the unit keeps its plain form whatever the gender
    combining_forms={1: "ena", 2: "dva", 3: "tri", 4: "štiri"},
    tens_words={
        2: "dvajset", 3: "trideset", 4: "štirideset", 5: "petdeset",
        6: "šestdeset", 7: "sedemdeset", 8: "osemdeset", 9: "devetdeset",
    },
    tens_joiner="in",
    units_first=True,
    hundreds_words={
        1: "sto", 2: "dvesto", 3: "tristo", 4: "štiristo", 5: "petsto",
        6: "šeststo", 7: "sedemsto", 8: "osemsto", 9: "devetsto",
    },
    scale_table=(
        ScaleEntry(magnitude=1000, forms={ONE: "tisoč"}, omit_one=True),
        *(
            ScaleEntry(
                magnitude=1000 ** power,
                forms={ONE: one, TWO: two, FEW: few, MANY: many},
                gender=gender,
            )
            for power, (one, two, few, many, gender) in enumerate(_LARGE_SCALES, start=2)
        ),
    ),
    plural_rule=SLOVENIAN,
    gender_sensitive=True,
    separator_words={DecimalSeparator.COMMA: "vejica", DecimalSeparator.POINT: "pika"},
    default_separator=DecimalSeparator.COMMA,
    negative_prefix="minus",
    era_bc="pr. n. št.",
    era_ad="n. št.",
    infinity="Neskončnost",
    negative_infinity="Minus neskončnost",
    nan_literal="Ni število",
    not_numeric_literal="Ni število",
    too_large_literal="Število je preveliko",
    currency=EUR,
)
