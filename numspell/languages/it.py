"""Italian grammar profile.

Numbers below a million are written as one word ("duemilaventiquattro").
A tens word loses its final vowel before "uno" and "otto" ("ventuno",
"trentotto"), and so does "cento" ("centuno", "centotto").
"""

from __future__ import annotations

from ..models import CurrencyInfo, DecimalSeparator, Gender, GrammarProfile, ScaleEntry
from ..plurals import ONE, ONE_OTHER, OTHER

_TENS = {
    2: "venti", 3: "trenta", 4: "quaranta", 5: "cinquanta",
    6: "sessanta", 7: "settanta", 8: "ottanta", 9: "novanta",
}

_LARGE_SCALES = [
    ("milione", "milioni"),
    ("miliardo", "miliardi"),
    ("bilione", "bilioni"),
    ("biliardo", "biliardi"),
    ("trilione", "trilioni"),
    ("triliardo", "triliardi"),
    ("quadrilione", "quadrilioni"),
]


def _elided_tens() -> dict[int, str]:
    table: dict[int, str] = {}
    for tens, word in _TENS.items():
        table[tens * 10 + 1] = f"{word[:-1]}uno"
        table[tens * 10 + 8] = f"{word[:-1]}otto"
    return table


EUR = CurrencyInfo(
    main_unit_forms={ONE: "euro"},
    sub_unit_forms={ONE: "centesimo", OTHER: "centesimi"},
    separator="e",
    main_gender=Gender.MASCULINE,
    sub_gender=Gender.MASCULINE,
)

PROFILE = GrammarProfile(
    code="it",
    name="Italiano",
    zero="zero",
    digit_words=(
        "zero", "uno", "due", "tre", "quattro",
        "cinque", "sei", "sette", "otto", "nove",
        "dieci", "undici", "dodici", "tredici", "quattordici",
        "quindici", "sedici", "diciassette", "diciotto", "diciannove",
    ),
    gendered_forms={Gender.MASCULINE: {1: "un"}},
    tens_words=_TENS,
    below_hundred=_elided_tens(),
    tens_joiner="",
    hundred_word="cento",
    hundred_digit_joiner="",
    hundreds_joiner="",
    omit_one_before_hundred=True,
    special_cases={101: "centuno", 108: "centotto"},
    scale_table=(
        ScaleEntry(
            magnitude=1000,
            forms={ONE: "mille", OTHER: "mila"},
            omit_one=True,
            joiner="",
            trailing_joiner="",
            is_noun=False,
        ),
        *(
            ScaleEntry(magnitude=1000 ** power, forms={ONE: one, OTHER: other}, gender=Gender.MASCULINE)
            for power, (one, other) in enumerate(_LARGE_SCALES, start=2)
        ),
    ),
    plural_rule=ONE_OTHER,
    separator_words={DecimalSeparator.COMMA: "virgola", DecimalSeparator.POINT: "punto"},
    default_separator=DecimalSeparator.COMMA,
    negative_prefix="meno",
    era_bc="a.C.",
    era_ad="d.C.",
    infinity="Infinito",
    negative_infinity="Infinito negativo",
    nan_literal="Non un numero",
    not_numeric_literal="Non un numero",
    too_large_literal="Numero troppo grande",
    currency=EUR,
)
