"""Ukrainian grammar profile."""

from __future__ import annotations

from ..models import CurrencyInfo, DecimalSeparator, Gender, GrammarProfile, ScaleEntry
from ..plurals import EAST_SLAVIC, FEW, MANY, ONE

_SCALES = [
    ("тисяча", "тисячі", "тисяч", Gender.FEMININE),
    ("мільйон", "мільйони", "мільйонів", Gender.MASCULINE),
    ("мільярд", "мільярди", "мільярдів", Gender.MASCULINE),
    ("трильйон", "трильйони", "трильйонів", Gender.MASCULINE),
    ("квадрильйон", "квадрильйони", "квадрильйонів", Gender.MASCULINE),
    ("квінтильйон", "квінтильйони", "квінтильйонів", Gender.MASCULINE),
    ("секстильйон", "секстильйони", "секстильйонів", Gender.MASCULINE),
    ("септильйон", "септильйони", "септильйонів", Gender.MASCULINE),
]

UAH = CurrencyInfo(
    main_unit_forms={ONE: "гривня", FEW: "гривні", MANY: "гривень"},
    sub_unit_forms={ONE: "копійка", FEW: "копійки", MANY: "копійок"},
    main_gender=Gender.FEMININE,
    sub_gender=Gender.FEMININE,
)

PROFILE = GrammarProfile(
    code="uk",
    name="Українська",
    zero="нуль",
    digit_words=(
        "нуль", "один", "два", "три", "чотири",
        "п'ять", "шість", "сім", "вісім", "дев'ять",
        "десять", "одинадцять", "дванадцять", "тринадцять", "чотирнадцять",
        "п'ятнадцять", "шістнадцять", "сімнадцять", "вісімнадцять", "дев'ятнадцять",
    ),
    gendered_forms={
        Gender.FEMININE: {1: "одна", 2: "дві"},
        Gender.NEUTER: {1: "одне"},
    },
    tens_words={
        2: "двадцять", 3: "тридцять", 4: "сорок", 5: "п'ятдесят",
        6: "шістдесят", 7: "сімдесят", 8: "вісімдесят", 9: "дев'яносто",
    },
    hundreds_words={
        1: "сто", 2: "двісті", 3: "триста", 4: "чотириста", 5: "п'ятсот",
        6: "шістсот", 7: "сімсот", 8: "вісімсот", 9: "дев'ятсот",
    },
    scale_table=tuple(
        ScaleEntry(magnitude=1000 ** power, forms={ONE: one, FEW: few, MANY: many}, gender=gender)
        for power, (one, few, many, gender) in enumerate(_SCALES, start=1)
    ),
    plural_rule=EAST_SLAVIC,
    default_gender=Gender.MASCULINE,
    gender_sensitive=True,
    separator_words={DecimalSeparator.COMMA: "кома", DecimalSeparator.POINT: "крапка"},
    default_separator=DecimalSeparator.COMMA,
    negative_prefix="мінус",
    era_bc="до н.е.",
    era_ad="н.е.",
    year_drops_leading_one=True,
    infinity="Нескінченність",
    negative_infinity="Негативна Нескінченність",
    nan_literal="Не Число",
    not_numeric_literal="Не Число",
    too_large_literal="Занадто велике число",
    currency=UAH,
)
