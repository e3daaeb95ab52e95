"""Georgian grammar profile.

Below one hundred Georgian counts in twenties: 20 ოცი, 40 ორმოცი (2 x 20),
60 სამოცი, 80 ოთხმოცი, with the 0..19 remainder joined by "და"
(ოცდაერთი = 20 + 1, ოთხმოცდაცხრამეტი = 80 + 19).

Hundreds and the thousand drop their final -ი when something follows
(ასი → ას ერთი, ათასი → ათას ერთი). Nouns never inflect after a numeral.
"""

from __future__ import annotations

from ..models import CurrencyInfo, DecimalSeparator, GrammarProfile, GroupingScheme, ScaleEntry
from ..plurals import INVARIANT, ONE

_HUNDRED_STEMS = {
    1: "ას", 2: "ორას", 3: "სამას", 4: "ოთხას", 5: "ხუთას",
    6: "ექვსას", 7: "შვიდას", 8: "რვაას", 9: "ცხრაას",
}

_LARGE_SCALES = [
    "მილიონი",
    "მილიარდი",
    "ტრილიონი",
    "კვადრილიონი",
    "კვინტილიონი",
    "სექსტილიონი",
    "სეპტილიონი",
]

GEL = CurrencyInfo(
    main_unit_forms={ONE: "ლარი"},
    sub_unit_forms={ONE: "თეთრი"},
    separator="და",
)

PROFILE = GrammarProfile(
    code="ka",
    name="ქართული",
    zero="ნული",
    digit_words=(
        "ნული", "ერთი", "ორი", "სამი", "ოთხი",
        "ხუთი", "ექვსი", "შვიდი", "რვა", "ცხრა",
        "ათი", "თერთმეტი", "თორმეტი", "ცამეტი", "თოთხმეტი",
        "თხუთმეტი", "თექვსმეტი", "ჩვიდმეტი", "თვრამეტი", "ცხრამეტი",
    ),
    tens_words={2: "ოცი", 4: "ორმოცი", 6: "სამოცი", 8: "ოთხმოცი"},
    tens_stems={2: "ოც", 4: "ორმოც", 6: "სამოც", 8: "ოთხმოც"},
    tens_joiner="და",
    hundreds_words={digit: f"{stem}ი" for digit, stem in _HUNDRED_STEMS.items()},
    hundreds_stems=_HUNDRED_STEMS,
    grouping=GroupingScheme.VIGESIMAL,
    scale_table=(
        ScaleEntry(magnitude=1000, forms={ONE: "ათასი"}, stem="ათას", omit_one=True),
        *(
            ScaleEntry(magnitude=1000 ** power, forms={ONE: word})
            for power, word in enumerate(_LARGE_SCALES, start=2)
        ),
    ),
    plural_rule=INVARIANT,
    separator_words={DecimalSeparator.COMMA: "მძიმე", DecimalSeparator.POINT: "წერტილი"},
    default_separator=DecimalSeparator.COMMA,
    negative_prefix="მინუს",
    era_bc="ჩვ. წ.-მდე",
    era_ad="ჩვ. წ.",
    infinity="უსასრულობა",
    negative_infinity="მინუს უსასრულობა",
    nan_literal="არა რიცხვი",
    not_numeric_literal="არა რიცხვი",
    too_large_literal="ძალიან დიდი რიცხვი",
    currency=GEL,
)
