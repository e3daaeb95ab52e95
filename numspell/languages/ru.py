"""Russian grammar profile.

Thousands are feminine ("одна тысяча", "две тысячи"); millions and above
are masculine. Nouns take one / few / many forms after a numeral.
"""

from __future__ import annotations

from ..models import CurrencyInfo, DecimalSeparator, Gender, GrammarProfile, ScaleEntry
from ..plurals import EAST_SLAVIC, FEW, MANY, ONE

_SCALES = [
    ("тысяча", "тысячи", "тысяч", Gender.FEMININE),
    ("миллион", "миллиона", "миллионов", Gender.MASCULINE),
    ("миллиард", "миллиарда", "миллиардов", Gender.MASCULINE),
    ("триллион", "триллиона", "триллионов", Gender.MASCULINE),
    ("квадриллион", "квадриллиона", "квадриллионов", Gender.MASCULINE),
    ("квинтиллион", "квинтиллиона", "квинтиллионов", Gender.MASCULINE),
    ("секстиллион", "секстиллиона", "секстиллионов", Gender.MASCULINE),
    ("септиллион", "септиллиона", "септиллионов", Gender.MASCULINE),
]

RUB = CurrencyInfo(
    main_unit_forms={ONE: "рубль", FEW: "рубля", MANY: "рублей"},
    sub_unit_forms={ONE: "копейка", FEW: "копейки", MANY: "копеек"},
    main_gender=Gender.MASCULINE,
    sub_gender=Gender.FEMININE,
)

PROFILE = GrammarProfile(
    code="ru",
    name="Русский",
    zero="ноль",
    digit_words=(
        "ноль", "один", "два", "три", "четыре",
        "пять", "шесть", "семь", "восемь", "девять",
        "десять", "одиннадцать", "двенадцать", "тринадцать", "четырнадцать",
        "пятнадцать", "шестнадцать", "семнадцать", "восемнадцать", "девятнадцать",
    ),
    gendered_forms={
        Gender.FEMININE: {1: "одна", 2: "две"},
        Gender.NEUTER: {1: "одно"},
    },
    tens_words={
        2: "двадцать", 3: "тридцать", 4: "сорок", 5: "пятьдесят",
        6: "шестьдесят", 7: "семьдесят", 8: "восемьдесят", 9: "девяносто",
    },
    hundreds_words={
        1: "сто", 2: "двести", 3: "триста", 4: "четыреста", 5: "пятьсот",
        6: "шестьсот", 7: "семьсот", 8: "восемьсот", 9: "девятьсот",
    },
    scale_table=tuple(
        ScaleEntry(magnitude=1000 ** power, forms={ONE: one, FEW: few, MANY: many}, gender=gender)
        for power, (one, few, many, gender) in enumerate(_SCALES, start=1)
    ),
    plural_rule=EAST_SLAVIC,
    default_gender=Gender.MASCULINE,
    gender_sensitive=True,
    separator_words={DecimalSeparator.COMMA: "запятая", DecimalSeparator.POINT: "точка"},
    default_separator=DecimalSeparator.COMMA,
    negative_prefix="минус",
    era_bc="до н. э.",
    era_ad="н. э.",
    infinity="Бесконечность",
    negative_infinity="Минус бесконечность",
    nan_literal="Не число",
    not_numeric_literal="Не число",
    too_large_literal="Слишком большое число",
    currency=RUB,
)
