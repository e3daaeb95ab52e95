"""French grammar profile (France; "soixante-dix", "quatre-vingts")."""

from __future__ import annotations

from ..models import CurrencyInfo, DecimalSeparator, GrammarProfile, ScaleEntry
from ..plurals import ONE, OTHER, ZERO_ONE_OTHER

_DIGITS = (
    "zéro", "un", "deux", "trois", "quatre",
    "cinq", "six", "sept", "huit", "neuf",
    "dix", "onze", "douze", "treize", "quatorze",
    "quinze", "seize", "dix-sept", "dix-huit", "dix-neuf",
)


def _seventy_to_ninety_nine() -> dict[int, str]:
    """70..99 are built on 60 + 10..19 and 4 x 20 + 0..19."""
    table: dict[int, str] = {}
    for rest in range(10, 20):
        table[60 + rest] = f"soixante-{_DIGITS[rest]}"
    table[71] = "soixante et onze"
    table[80] = "quatre-vingt"
    for rest in range(1, 20):
        table[80 + rest] = f"quatre-vingt-{_DIGITS[rest]}"
    return table


_LARGE_SCALES = [
    ("million", "millions"),
    ("milliard", "milliards"),
    ("billion", "billions"),
    ("billiard", "billiards"),
    ("trillion", "trillions"),
    ("trilliard", "trilliards"),
    ("quadrillion", "quadrillions"),
]

EUR = CurrencyInfo(
    main_unit_forms={ONE: "euro", OTHER: "euros"},
    sub_unit_forms={ONE: "centime", OTHER: "centimes"},
    separator="et",
    partitive_form="d'euros",
)

PROFILE = GrammarProfile(
    code="fr",
    name="Français",
    zero="zéro",
    digit_words=_DIGITS,
    tens_words={2: "vingt", 3: "trente", 4: "quarante", 5: "cinquante", 6: "soixante"},
    below_hundred=_seventy_to_ninety_nine(),
    terminal_forms={80: "quatre-vingts"},
    tens_joiner="-",
    unit_one_joiner=" et ",
    hundred_word="cent",
    hundred_plural="cents",
    omit_one_before_hundred=True,
    scale_table=(
        # "mille" is invariable and does not pluralise "cent" / "vingt"
        ScaleEntry(magnitude=1000, forms={ONE: "mille"}, omit_one=True, is_noun=False),
        *(
            ScaleEntry(magnitude=1000 ** power, forms={ONE: singular, OTHER: plural})
            for power, (singular, plural) in enumerate(_LARGE_SCALES, start=2)
        ),
    ),
    plural_rule=ZERO_ONE_OTHER,
    separator_words={DecimalSeparator.COMMA: "virgule", DecimalSeparator.POINT: "point"},
    default_separator=DecimalSeparator.COMMA,
    negative_prefix="moins",
    era_bc="av. J.-C.",
    era_ad="ap. J.-C.",
    infinity="Infini",
    negative_infinity="Moins L'infini",
    nan_literal="N'est Pas Un Nombre",
    not_numeric_literal="N'est Pas Un Nombre",
    too_large_literal="Nombre trop grand",
    currency=EUR,
)
