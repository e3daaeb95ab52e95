"""Spanish grammar profile (long scale: millón 10^6, billón 10^12).

"uno" shortens to "un" / "veintiún" in front of a masculine noun, which
covers every scale word and the euro: "veintiún mil", "un millón",
"un euro". Counts of millions run up to 999 999 ("mil quinientos millones").
"""

from __future__ import annotations

from ..models import (
    CurrencyInfo,
    DecimalSeparator,
    Gender,
    GrammarProfile,
    GroupingScheme,
    ScaleEntry,
)
from ..plurals import ONE, ONE_OTHER, OTHER

EUR = CurrencyInfo(
    main_unit_forms={ONE: "euro", OTHER: "euros"},
    sub_unit_forms={ONE: "céntimo", OTHER: "céntimos"},
    separator="con",
    main_gender=Gender.MASCULINE,
    sub_gender=Gender.MASCULINE,
    partitive_form="de euros",
)

PROFILE = GrammarProfile(
    code="es",
    name="Español",
    zero="cero",
    digit_words=(
        "cero", "uno", "dos", "tres", "cuatro",
        "cinco", "seis", "siete", "ocho", "nueve",
        "diez", "once", "doce", "trece", "catorce",
        "quince", "dieciséis", "diecisiete", "dieciocho", "diecinueve",
    ),
    gendered_forms={Gender.MASCULINE: {1: "un", 21: "veintiún"}},
    tens_words={
        2: "veinte", 3: "treinta", 4: "cuarenta", 5: "cincuenta",
        6: "sesenta", 7: "setenta", 8: "ochenta", 9: "noventa",
    },
    below_hundred={
        21: "veintiuno", 22: "veintidós", 23: "veintitrés", 24: "veinticuatro",
        25: "veinticinco", 26: "veintiséis", 27: "veintisiete", 28: "veintiocho",
        29: "veintinueve",
    },
    tens_joiner=" y ",
    hundreds_words={
        1: "ciento", 2: "doscientos", 3: "trescientos", 4: "cuatrocientos",
        5: "quinientos", 6: "seiscientos", 7: "setecientos", 8: "ochocientos",
        9: "novecientos",
    },
    special_cases={100: "cien"},
    grouping=GroupingScheme.CUSTOM_SCALE_LIST,
    scale_table=(
        ScaleEntry(
            magnitude=10**3,
            forms={ONE: "mil"},
            gender=Gender.MASCULINE,
            omit_one=True,
            is_noun=False,
        ),
        ScaleEntry(magnitude=10**6, forms={ONE: "millón", OTHER: "millones"}, gender=Gender.MASCULINE),
        ScaleEntry(magnitude=10**12, forms={ONE: "billón", OTHER: "billones"}, gender=Gender.MASCULINE),
        ScaleEntry(magnitude=10**18, forms={ONE: "trillón", OTHER: "trillones"}, gender=Gender.MASCULINE),
        ScaleEntry(magnitude=10**24, forms={ONE: "cuatrillón", OTHER: "cuatrillones"}, gender=Gender.MASCULINE),
    ),
    plural_rule=ONE_OTHER,
    separator_words={DecimalSeparator.COMMA: "coma", DecimalSeparator.POINT: "punto"},
    default_separator=DecimalSeparator.COMMA,
    negative_prefix="menos",
    era_bc="a.C.",
    era_ad="d.C.",
    infinity="Infinito",
    negative_infinity="Menos Infinito",
    nan_literal="No es un número",
    not_numeric_literal="No es un número",
    too_large_literal="Número demasiado grande",
    currency=EUR,
)
