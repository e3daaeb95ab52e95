"""Portuguese grammar profile (Brazilian forms: "dezesseis", "bilhão")."""

from __future__ import annotations

from ..models import (
    ConnectorPolicy,
    ConnectorRule,
    Connectors,
    CurrencyInfo,
    DecimalSeparator,
    GrammarProfile,
    ScaleEntry,
)
from ..plurals import ONE, ONE_OTHER, OTHER

_LARGE_SCALES = [
    ("milhão", "milhões"),
    ("bilhão", "bilhões"),
    ("trilhão", "trilhões"),
    ("quatrilhão", "quatrilhões"),
    ("quintilhão", "quintilhões"),
    ("sextilhão", "sextilhões"),
    ("septilhão", "septilhões"),
]

BRL = CurrencyInfo(
    main_unit_forms={ONE: "real", OTHER: "reais"},
    sub_unit_forms={ONE: "centavo", OTHER: "centavos"},
    separator="e",
    partitive_form="de reais",
)

EUR = CurrencyInfo(
    main_unit_forms={ONE: "euro", OTHER: "euros"},
    sub_unit_forms={ONE: "cêntimo", OTHER: "cêntimos"},
    separator="e",
    partitive_form="de euros",
)

PROFILE = GrammarProfile(
    code="pt",
    name="Português",
    zero="zero",
    digit_words=(
        "zero", "um", "dois", "três", "quatro",
        "cinco", "seis", "sete", "oito", "nove",
        "dez", "onze", "doze", "treze", "catorze",
        "quinze", "dezesseis", "dezessete", "dezoito", "dezenove",
    ),
    tens_words={
        2: "vinte", 3: "trinta", 4: "quarenta", 5: "cinquenta",
        6: "sessenta", 7: "setenta", 8: "oitenta", 9: "noventa",
    },
    tens_joiner=" e ",
    hundreds_words={
        1: "cento", 2: "duzentos", 3: "trezentos", 4: "quatrocentos",
        5: "quinhentos", 6: "seiscentos", 7: "setecentos", 8: "oitocentos",
        9: "novecentos",
    },
    special_cases={100: "cem"},
    scale_table=(
        ScaleEntry(magnitude=1000, forms={ONE: "mil"}, omit_one=True, is_noun=False),
        *(
            ScaleEntry(magnitude=1000 ** power, forms={ONE: one, OTHER: other})
            for power, (one, other) in enumerate(_LARGE_SCALES, start=2)
        ),
    ),
    plural_rule=ONE_OTHER,
    connectors=Connectors(
        intra_group=ConnectorRule(word="e", policy=ConnectorPolicy.ALWAYS),
        # "mil e cem", "mil e um", but "mil cento e onze"
        before_last_small_group=ConnectorRule(
            word="e", policy=ConnectorPolicy.ONLY_IF_UNDER_100, threshold=101
        ),
    ),
    separator_words={DecimalSeparator.COMMA: "vírgula", DecimalSeparator.POINT: "ponto"},
    default_separator=DecimalSeparator.COMMA,
    negative_prefix="menos",
    era_bc="a.C.",
    era_ad="d.C.",
    infinity="Infinito",
    negative_infinity="Menos Infinito",
    nan_literal="Não é um número",
    not_numeric_literal="Não é um número",
    too_large_literal="Número muito grande",
    currency=BRL,
)
