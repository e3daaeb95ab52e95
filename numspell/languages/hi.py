"""Hindi grammar profile (Indian numbering: हज़ार, लाख, करोड़, ...).

Every number from 0 to 99 has its own word, so the whole range is a lookup.
"""

from __future__ import annotations

from ..models import (
    CurrencyInfo,
    DecimalSeparator,
    GrammarProfile,
    GroupingScheme,
    ScaleEntry,
    YearReading,
    YearStyle,
)
from ..plurals import ONE, ONE_OTHER, OTHER

_UNDER_100 = (
    "शून्य", "एक", "दो", "तीन", "चार", "पाँच", "छह", "सात", "आठ", "नौ",
    "दस", "ग्यारह", "बारह", "तेरह", "चौदह", "पंद्रह", "सोलह", "सत्रह", "अठारह", "उन्नीस",
    "बीस", "इक्कीस", "बाईस", "तेईस", "चौबीस", "पच्चीस", "छब्बीस", "सत्ताईस", "अट्ठाईस", "उनतीस",
    "तीस", "इकतीस", "बत्तीस", "तैंतीस", "चौंतीस", "पैंतीस", "छत्तीस", "सैंतीस", "अड़तीस", "उनतालीस",
    "चालीस", "इकतालीस", "बयालीस", "तैंतालीस", "चौवालीस", "पैंतालीस", "छियालीस", "सैंतालीस", "अड़तालीस", "उनचास",
    "पचास", "इक्यावन", "बावन", "तिरपन", "चौवन", "पचपन", "छप्पन", "सत्तावन", "अट्ठावन", "उनसठ",
    "साठ", "इकसठ", "बासठ", "तिरसठ", "चौंसठ", "पैंसठ", "छियासठ", "सड़सठ", "अड़सठ", "उनहत्तर",
    "सत्तर", "इकहत्तर", "बहत्तर", "तिहत्तर", "चौहत्तर", "पचहत्तर", "छिहत्तर", "सतहत्तर", "अठहत्तर", "उन्यासी",
    "अस्सी", "इक्यासी", "बयासी", "तिरासी", "चौरासी", "पचासी", "छियासी", "सतासी", "अट्ठासी", "नवासी",
    "नब्बे", "इक्यानबे", "बानबे", "तिरानबे", "चौरानबे", "पंचानबे", "छियानवे", "सत्तानबे", "अठ्ठानवे", "निन्यानवे",
)

# thousand, then one word per further factor of 100
_SCALES = ["हज़ार", "लाख", "करोड़", "अरब", "खरब", "नील", "पद्म", "शंख"]

INR = CurrencyInfo(
    main_unit_forms={ONE: "रुपया", OTHER: "रुपये"},
    sub_unit_forms={ONE: "पैसा", OTHER: "पैसे"},
    separator="और",
)

PROFILE = GrammarProfile(
    code="hi",
    name="हिन्दी",
    zero=_UNDER_100[0],
    digit_words=_UNDER_100[:20],
    tens_words={tens: _UNDER_100[tens * 10] for tens in range(2, 10)},
    below_hundred={n: _UNDER_100[n] for n in range(20, 100)},
    hundred_word="सौ",
    grouping=GroupingScheme.PAIRED_AFTER_THOUSAND,
    scale_table=tuple(
        ScaleEntry(magnitude=1000 * 100**index, forms={ONE: word})
        for index, word in enumerate(_SCALES)
    ),
    plural_rule=ONE_OTHER,
    separator_words={DecimalSeparator.POINT: "दशमलव", DecimalSeparator.COMMA: "अल्पविराम"},
    negative_prefix="ऋण",
    era_bc="ईसा पूर्व",
    era_ad="ईस्वी",
    year_readings=(YearReading(start=1100, end=1999, style=YearStyle.CENTURY),),
    century_keeps_hundred=True,
    infinity="अनंत",
    negative_infinity="ऋण अनंत",
    nan_literal="अमान्य संख्या",
    not_numeric_literal="अमान्य संख्या",
    too_large_literal="संख्या बहुत बड़ी है",
    currency=INR,
)
