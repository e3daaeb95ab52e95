"""Czech grammar profile.

Nouns after a numeral follow the last digits (22 koruny, 21 korun), but a
scale word looks at its whole count: only 2-4 take "tisíce" / "miliony",
so 22 000 is "dvacet dva tisíc". Bare numbers count in the feminine
("jedna", "dvě").
"""

from __future__ import annotations

from ..models import CurrencyInfo, DecimalSeparator, Gender, GrammarProfile, ScaleEntry
from ..plurals import CZECH_SCALE, FEW, MANY, ONE, POLISH

_SCALES = [
    ("tisíc", "tisíce", "tisíc", Gender.MASCULINE),
    ("milion", "miliony", "milionů", Gender.MASCULINE),
    ("miliarda", "miliardy", "miliard", Gender.FEMININE),
    ("bilion", "biliony", "bilionů", Gender.MASCULINE),
    ("biliarda", "biliardy", "biliard", Gender.FEMININE),
    ("trilion", "triliony", "trilionů", Gender.MASCULINE),
    ("triliarda", "triliardy", "triliard", Gender.FEMININE),
    ("kvadrilion", "kvadriliony", "kvadrilionů", Gender.MASCULINE),
]

CZK = CurrencyInfo(
    main_unit_forms={ONE: "koruna česká", FEW: "koruny české", MANY: "korun českých"},
    sub_unit_forms={ONE: "haléř", FEW: "haléře", MANY: "haléřů"},
    separator="a",
    main_gender=Gender.FEMININE,
    sub_gender=Gender.MASCULINE,
)

PROFILE = GrammarProfile(
    code="cs",
    name="Čeština",
    zero="nula",
    digit_words=(
        "nula", "jedna", "dvě", "tři", "čtyři",
        "pět", "šest", "sedm", "osm", "devět",
        "deset", "jedenáct", "dvanáct", "třináct", "čtrnáct",
        "patnáct", "šestnáct", "sedmnáct", "osmnáct", "devatenáct",
    ),
    gendered_forms={
        Gender.MASCULINE: {1: "jeden", 2: "dva"},
        Gender.NEUTER: {1: "jedno"},
    },
    tens_words={
        2: "dvacet", 3: "třicet", 4: "čtyřicet", 5: "padesát",
        6: "šedesát", 7: "sedmdesát", 8: "osmdesát", 9: "devadesát",
    },
    hundreds_words={
        1: "sto", 2: "dvě stě", 3: "tři sta", 4: "čtyři sta", 5: "pět set",
        6: "šest set", 7: "sedm set", 8: "osm set", 9: "devět set",
    },
    scale_table=tuple(
        ScaleEntry(
            magnitude=1000 ** power,
            forms={ONE: one, FEW: few, MANY: many},
            gender=gender,
            omit_one=power == 1,
        )
        for power, (one, few, many, gender) in enumerate(_SCALES, start=1)
    ),
    plural_rule=POLISH,
    scale_plural_rule=CZECH_SCALE,
    gender_sensitive=True,
    separator_words={DecimalSeparator.COMMA: "celá", DecimalSeparator.POINT: "tečka"},
    default_separator=DecimalSeparator.COMMA,
    negative_prefix="mínus",
    era_bc="př. n. l.",
    era_ad="n. l.",
    infinity="Nekonečno",
    negative_infinity="Záporné Nekonečno",
    nan_literal="Není Číslo",
    not_numeric_literal="Není Číslo",
    too_large_literal="Příliš velké číslo",
    currency=CZK,
)
