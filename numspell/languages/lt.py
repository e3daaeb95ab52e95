"""Lithuanian grammar profile.

Years read as ordinals in their last word: 1999 is "tūkstantis devyni šimtai
devyniasdešimt devinti", while round hundreds stay cardinal.
"""

from __future__ import annotations

from ..models import CurrencyInfo, DecimalSeparator, Gender, GrammarProfile, ScaleEntry
from ..plurals import FEW, LITHUANIAN, MANY, ONE

_DIGITS = (
    "nulis", "vienas", "du", "trys", "keturi",
    "penki", "šeši", "septyni", "aštuoni", "devyni",
    "dešimt", "vienuolika", "dvylika", "trylika", "keturiolika",
    "penkiolika", "šešiolika", "septyniolika", "aštuoniolika", "devyniolika",
)

_TENS = {
    2: "dvidešimt", 3: "trisdešimt", 4: "keturiasdešimt", 5: "penkiasdešimt",
    6: "šešiasdešimt", 7: "septyniasdešimt", 8: "aštuoniasdešimt", 9: "devyniasdešimt",
}

_SCALES = [
    ("tūkstantis", "tūkstančiai", "tūkstančių"),
    ("milijonas", "milijonai", "milijonų"),
    ("milijardas", "milijardai", "milijardų"),
    ("trilijonas", "trilijonai", "trilijonų"),
    ("kvadrilijonas", "kvadrilijonai", "kvadrilijonų"),
    ("kvintilijonas", "kvintilijonai", "kvintilijonų"),
    ("sekstilijonas", "sekstilijonai", "sekstilijonų"),
    ("septilijonas", "septilijonai", "septilijonų"),
]

# Plural ordinals ("metai" is plural) for every word that can end a year
_YEAR_ORDINALS = {
    "vienas": "pirmieji", "du": "antrieji", "trys": "treti", "keturi": "ketvirti",
    "penki": "penkti", "šeši": "šešti", "septyni": "septinti", "aštuoni": "aštunti",
    "devyni": "devinti", "dešimt": "dešimtieji", "vienuolika": "vienuoliktieji",
    "dvylika": "dvyliktieji", "trylika": "tryliktieji", "keturiolika": "keturioliktieji",
    "penkiolika": "penkioliktieji", "šešiolika": "šešioliktieji",
    "septyniolika": "septynioliktieji", "aštuoniolika": "aštuonioliktieji",
    "devyniolika": "devynioliktieji",
    **{word: f"{word}ieji" for word in _TENS.values()},
}

EUR = CurrencyInfo(
    main_unit_forms={ONE: "euras", FEW: "eurai", MANY: "eurų"},
    sub_unit_forms={ONE: "centas", FEW: "centai", MANY: "centų"},
)

PROFILE = GrammarProfile(
    code="lt",
    name="Lietuvių",
    zero="nulis",
    digit_words=_DIGITS,
    gendered_forms={
        Gender.FEMININE: {
            1: "viena", 2: "dvi", 4: "keturios", 5: "penkios",
            6: "šešios", 7: "septynios", 8: "aštuonios", 9: "devynios",
        },
    },
    tens_words=_TENS,
    hundreds_words={
        1: "šimtas",
        **{digit: f"{_DIGITS[digit]} šimtai" for digit in range(2, 10)},
    },
    scale_table=tuple(
        ScaleEntry(magnitude=1000 ** power, forms={ONE: one, FEW: few, MANY: many}, omit_one=True)
        for power, (one, few, many) in enumerate(_SCALES, start=1)
    ),
    plural_rule=LITHUANIAN,
    gender_sensitive=True,
    separator_words={DecimalSeparator.COMMA: "kablelis", DecimalSeparator.POINT: "taškas"},
    default_separator=DecimalSeparator.COMMA,
    negative_prefix="minus",
    era_bc="pr. m. e.",
    era_ad="m. e.",
    year_final_word_forms=_YEAR_ORDINALS,
    infinity="Begalybė",
    negative_infinity="Neigiama Begalybė",
    nan_literal="Ne Skaičius",
    not_numeric_literal="Ne Skaičius",
    too_large_literal="Skaičius per didelis",
    currency=EUR,
)
