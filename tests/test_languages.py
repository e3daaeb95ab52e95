"""
Per-language output tests: cardinals, decimals, currency and years for every
shipped grammar profile, plus registry lookups.
"""

from __future__ import annotations

from decimal import Decimal

import pytest

from numspell.converter import NumberToWords
from numspell.exceptions import UnsupportedLanguageError
from numspell.languages import available_languages, get_profile, pt
from numspell.models import ConversionOptions, DecimalSeparator, Gender, NumberFormat

PLAIN = ConversionOptions()
YEAR = ConversionOptions(format=NumberFormat.YEAR)
YEAR_AD = ConversionOptions(format=NumberFormat.YEAR, include_era_suffix=True)
CURRENCY = ConversionOptions(currency=True)
POINT = ConversionOptions(decimal_separator=DecimalSeparator.POINT)
FEMININE = ConversionOptions(gender=Gender.FEMININE)
NEUTER = ConversionOptions(gender=Gender.NEUTER)


def _check(language: str, cases: list[tuple[object, ConversionOptions, str]]) -> None:
    converter = NumberToWords.for_language(language)
    for number, options, expected in cases:
        assert converter.convert(number, options) == expected, f"{language}: {number!r}"


# ═══════════════════════════════════════════════════════════════════════
# REGISTRY
# ═══════════════════════════════════════════════════════════════════════


class TestRegistry:
    def test_shipped_languages(self):
        assert available_languages() == [
            "cs", "de", "en", "en-gb", "es", "fr", "hi", "it", "ka", "lt", "pl", "pt", "ru", "sl", "uk",
        ]

    def test_lookup_ignores_case_and_separator(self):
        assert get_profile("EN").code == "en"
        assert get_profile("en_GB").code == "en-gb"
        assert get_profile(" En-Gb ").code == "en-gb"

    def test_regional_code_falls_back_to_base(self):
        assert get_profile("en-us").code == "en"
        assert get_profile("de_AT").code == "de"

    def test_unknown_language(self):
        with pytest.raises(UnsupportedLanguageError) as exc_info:
            get_profile("xx")
        assert exc_info.value.code == "UNSUPPORTED_LANGUAGE"
        assert "en" in exc_info.value.details["available"]


# ═══════════════════════════════════════════════════════════════════════
# ENGLISH
# ═══════════════════════════════════════════════════════════════════════


class TestEnglish:
    def test_cardinals(self):
        _check("en", [
            (0, PLAIN, "zero"),
            (13, PLAIN, "thirteen"),
            (85, PLAIN, "eighty-five"),
            (105, PLAIN, "one hundred five"),
            (1001, PLAIN, "one thousand one"),
            (1_000_000, PLAIN, "one million"),
            (-5, PLAIN, "negative five"),
            (10**33, PLAIN, "one decillion"),
        ])

    def test_decimals(self):
        _check("en", [
            (1.5, PLAIN, "one point five"),
            (Decimal("1.50"), PLAIN, "one point five"),
            ("3.1415", PLAIN, "three point one four one five"),
            (1.5, ConversionOptions(decimal_separator=DecimalSeparator.COMMA), "one comma five"),
        ])

    def test_currency(self):
        _check("en", [
            (0, CURRENCY, "zero dollars"),
            (1, CURRENCY, "one dollar"),
            (105, CURRENCY, "one hundred five dollars"),
            (0.01, CURRENCY, "one cent"),
            (1.5, CURRENCY, "one dollar and fifty cents"),
            (123.45, CURRENCY, "one hundred twenty-three dollars and forty-five cents"),
        ])

    def test_years(self):
        _check("en", [
            (1984, YEAR, "nineteen eighty-four"),
            (1900, YEAR, "nineteen hundred"),
            (2005, YEAR, "two thousand five"),
            (2024, YEAR, "twenty twenty-four"),
            (-100, YEAR, "one hundred BC"),
            (-1, YEAR, "one BC"),
            (1900, YEAR_AD, "nineteen hundred AD"),
        ])

    def test_literals(self):
        _check("en", [
            (float("nan"), PLAIN, "Not a Number"),
            (float("inf"), PLAIN, "Infinity"),
            (float("-inf"), PLAIN, "Negative Infinity"),
            ("abc", PLAIN, "Not a Number"),
            (10**36, PLAIN, "Number too large"),
        ])


class TestBritishEnglish:
    def test_and_connectors(self):
        _check("en-gb", [
            (105, PLAIN, "one hundred and five"),
            (1005, PLAIN, "one thousand and five"),
            (1100, PLAIN, "one thousand one hundred"),
            (2_000_050, PLAIN, "two million and fifty"),
            (-5, PLAIN, "minus five"),
        ])

    def test_currency(self):
        _check("en-gb", [
            (1, CURRENCY, "one pound"),
            (2.5, CURRENCY, "two pounds and fifty pence"),
            (0.01, CURRENCY, "one penny"),
        ])


# ═══════════════════════════════════════════════════════════════════════
# GERMAN
# ═══════════════════════════════════════════════════════════════════════


class TestGerman:
    def test_cardinals(self):
        _check("de", [
            (1, PLAIN, "eins"),
            (21, PLAIN, "einundzwanzig"),
            (27, PLAIN, "siebenundzwanzig"),
            (101, PLAIN, "einhunderteins"),
            (1000, PLAIN, "eintausend"),
            (1110, PLAIN, "eintausendeinhundertzehn"),
            (100_000, PLAIN, "einhunderttausend"),
            (1_000_000, PLAIN, "eine Million"),
            (1_000_001, PLAIN, "eine Million eins"),
            (2_000_000, PLAIN, "zwei Millionen"),
            (-123, PLAIN, "minus einhundertdreiundzwanzig"),
        ])

    def test_decimals(self):
        _check("de", [
            (1.5, PLAIN, "eins Komma fünf"),
            (1.05, PLAIN, "eins Komma null fünf"),
            (1.5, POINT, "eins Punkt fünf"),
        ])

    def test_currency(self):
        _check("de", [
            (0, CURRENCY, "null Euro"),
            (1, CURRENCY, "ein Euro"),
            (2, CURRENCY, "zwei Euro"),
            (1.5, CURRENCY, "ein Euro und fünfzig Cent"),
        ])

    def test_years(self):
        _check("de", [
            (1999, YEAR, "neunzehnhundertneunundneunzig"),
            (1900, YEAR, "neunzehnhundert"),
            (2025, YEAR, "zweitausendfünfundzwanzig"),
            (-1, YEAR, "eins v. Chr."),
        ])


# ═══════════════════════════════════════════════════════════════════════
# SPANISH
# ═══════════════════════════════════════════════════════════════════════


class TestSpanish:
    def test_cardinals(self):
        _check("es", [
            (21, PLAIN, "veintiuno"),
            (31, PLAIN, "treinta y uno"),
            (100, PLAIN, "cien"),
            (101, PLAIN, "ciento uno"),
            (1000, PLAIN, "mil"),
            (2000, PLAIN, "dos mil"),
            (21_000, PLAIN, "veintiún mil"),
            (1_000_000, PLAIN, "un millón"),
            (2_000_000, PLAIN, "dos millones"),
            (10**9, PLAIN, "mil millones"),
            (1_500_000_000, PLAIN, "mil quinientos millones"),
            (10**12, PLAIN, "un billón"),
            (-123, PLAIN, "menos ciento veintitrés"),
        ])

    def test_decimals(self):
        _check("es", [(1.5, PLAIN, "uno coma cinco")])

    def test_currency(self):
        _check("es", [
            (0, CURRENCY, "cero euros"),
            (1, CURRENCY, "un euro"),
            (21, CURRENCY, "veintiún euros"),
            (1.5, CURRENCY, "un euro con cincuenta céntimos"),
            (1.01, CURRENCY, "un euro con un céntimo"),
            (1_000_000, CURRENCY, "un millón de euros"),
        ])

    def test_years(self):
        _check("es", [
            (1900, YEAR, "mil novecientos"),
            (2024, YEAR, "dos mil veinticuatro"),
            (-1, YEAR, "uno a.C."),
            (-100, YEAR, "cien a.C."),
        ])


# ═══════════════════════════════════════════════════════════════════════
# FRENCH
# ═══════════════════════════════════════════════════════════════════════


class TestFrench:
    def test_cardinals(self):
        _check("fr", [
            (21, PLAIN, "vingt et un"),
            (71, PLAIN, "soixante et onze"),
            (80, PLAIN, "quatre-vingts"),
            (81, PLAIN, "quatre-vingt-un"),
            (99, PLAIN, "quatre-vingt-dix-neuf"),
            (100, PLAIN, "cent"),
            (200, PLAIN, "deux cents"),
            (201, PLAIN, "deux cent un"),
            (1000, PLAIN, "mille"),
            (2000, PLAIN, "deux mille"),
            (80_000, PLAIN, "quatre-vingt mille"),
            (200_000, PLAIN, "deux cent mille"),
            (1_000_000, PLAIN, "un million"),
            (80_000_000, PLAIN, "quatre-vingts millions"),
            (200_000_000, PLAIN, "deux cents millions"),
        ])

    def test_decimals(self):
        _check("fr", [(1.5, PLAIN, "un virgule cinq")])

    def test_currency(self):
        _check("fr", [
            (0, CURRENCY, "zéro euro"),
            (2, CURRENCY, "deux euros"),
            (1.5, CURRENCY, "un euro et cinquante centimes"),
            (1.01, CURRENCY, "un euro et un centime"),
            (10_000_000, CURRENCY, "dix millions d'euros"),
            (2000, CURRENCY, "deux mille euros"),
        ])

    def test_years(self):
        _check("fr", [
            (1900, YEAR, "mille neuf cents"),
            (1999, YEAR, "mille neuf cent quatre-vingt-dix-neuf"),
            (-1, YEAR, "un av. J.-C."),
        ])


# ═══════════════════════════════════════════════════════════════════════
# HINDI
# ═══════════════════════════════════════════════════════════════════════


class TestHindi:
    def test_cardinals(self):
        _check("hi", [
            (100, PLAIN, "एक सौ"),
            (1000, PLAIN, "एक हज़ार"),
            (100_000, PLAIN, "एक लाख"),
            (10**7, PLAIN, "एक करोड़"),
            (10**9, PLAIN, "एक अरब"),
            (12_345_678, PLAIN, "एक करोड़ तेईस लाख पैंतालीस हज़ार छह सौ अठहत्तर"),
            (-123, PLAIN, "ऋण एक सौ तेईस"),
            (10**19, PLAIN, "संख्या बहुत बड़ी है"),
        ])

    def test_decimals(self):
        _check("hi", [(1.5, PLAIN, "एक दशमलव पाँच")])

    def test_currency(self):
        _check("hi", [
            (0, CURRENCY, "शून्य रुपये"),
            (1.5, CURRENCY, "एक रुपया और पचास पैसे"),
            (10.01, CURRENCY, "दस रुपये और एक पैसा"),
        ])

    def test_years(self):
        _check("hi", [
            (1900, YEAR, "उन्नीस सौ"),
            (1984, YEAR, "उन्नीस सौ चौरासी"),
            (2024, YEAR, "दो हज़ार चौबीस"),
        ])


# ═══════════════════════════════════════════════════════════════════════
# GEORGIAN
# ═══════════════════════════════════════════════════════════════════════


class TestGeorgian:
    def test_vigesimal_tens(self):
        _check("ka", [
            (21, PLAIN, "ოცდაერთი"),
            (30, PLAIN, "ოცდაათი"),
            (40, PLAIN, "ორმოცი"),
            (99, PLAIN, "ოთხმოცდაცხრამეტი"),
        ])

    def test_hundreds_and_thousands(self):
        _check("ka", [
            (100, PLAIN, "ასი"),
            (101, PLAIN, "ას ერთი"),
            (1000, PLAIN, "ათასი"),
            (1001, PLAIN, "ათას ერთი"),
            (1110, PLAIN, "ათას ას ათი"),
            (2000, PLAIN, "ორი ათასი"),
            (2468, PLAIN, "ორი ათას ოთხას სამოცდარვა"),
            (100_000, PLAIN, "ასი ათასი"),
            (5_001_000, PLAIN, "ხუთი მილიონი ათასი"),
            (1_000_000_001, PLAIN, "ერთი მილიარდი ერთი"),
            (-123, PLAIN, "მინუს ას ოცდასამი"),
        ])

    def test_currency(self):
        _check("ka", [
            (0, CURRENCY, "ნული ლარი"),
            (0.5, CURRENCY, "ორმოცდაათი თეთრი"),
            (1.5, CURRENCY, "ერთი ლარი და ორმოცდაათი თეთრი"),
        ])

    def test_years(self):
        _check("ka", [
            (1900, YEAR, "ათას ცხრაასი"),
            (-1, YEAR, "ერთი ჩვ. წ.-მდე"),
        ])


# ═══════════════════════════════════════════════════════════════════════
# POLISH
# ═══════════════════════════════════════════════════════════════════════


class TestPolish:
    def test_cardinals(self):
        _check("pl", [
            (1000, PLAIN, "jeden tysiąc"),
            (2000, PLAIN, "dwa tysiące"),
            (5000, PLAIN, "pięć tysięcy"),
            (10_000, PLAIN, "dziesięć tysięcy"),
            (12_000, PLAIN, "dwanaście tysięcy"),
            (21_000, PLAIN, "dwadzieścia jeden tysięcy"),
            (22_000, PLAIN, "dwadzieścia dwa tysiące"),
            (2_000_000_000, PLAIN, "dwa miliardy"),
        ])

    def test_gender(self):
        _check("pl", [
            (2, FEMININE, "dwie"),
            (1, NEUTER, "jedno"),
        ])

    def test_decimals(self):
        _check("pl", [(1.5, PLAIN, "jeden przecinek pięć")])

    def test_currency(self):
        _check("pl", [
            (0, CURRENCY, "zero złotych"),
            (2, CURRENCY, "dwa złote"),
            (21.05, CURRENCY, "dwadzieścia jeden złotych i pięć groszy"),
            (123.46, CURRENCY, "sto dwadzieścia trzy złote i czterdzieści sześć groszy"),
        ])

    def test_years(self):
        _check("pl", [(-1, YEAR, "jeden p.n.e.")])


# ═══════════════════════════════════════════════════════════════════════
# RUSSIAN
# ═══════════════════════════════════════════════════════════════════════


class TestRussian:
    def test_cardinals(self):
        _check("ru", [
            (1000, PLAIN, "одна тысяча"),
            (2000, PLAIN, "две тысячи"),
            (5000, PLAIN, "пять тысяч"),
            (11_000, PLAIN, "одиннадцать тысяч"),
            (121_000, PLAIN, "сто двадцать одна тысяча"),
            (122_000, PLAIN, "сто двадцать две тысячи"),
            (1_000_000, PLAIN, "один миллион"),
            (2_000_000, PLAIN, "два миллиона"),
            (5_000_000, PLAIN, "пять миллионов"),
        ])

    def test_gender(self):
        _check("ru", [
            (1, FEMININE, "одна"),
            (21, NEUTER, "двадцать одно"),
        ])

    def test_decimals(self):
        _check("ru", [
            (1.5, PLAIN, "один запятая пять"),
            (1.5, POINT, "один точка пять"),
        ])

    def test_currency(self):
        _check("ru", [
            (0, CURRENCY, "ноль рублей"),
            (1, CURRENCY, "один рубль"),
            (0.01, CURRENCY, "одна копейка"),
            (2.5, CURRENCY, "два рубля пятьдесят копеек"),
            (5.22, CURRENCY, "пять рублей двадцать две копейки"),
            (21.05, CURRENCY, "двадцать один рубль пять копеек"),
        ])


# ═══════════════════════════════════════════════════════════════════════
# UKRAINIAN
# ═══════════════════════════════════════════════════════════════════════


class TestUkrainian:
    def test_cardinals(self):
        _check("uk", [
            (1000, PLAIN, "одна тисяча"),
            (5000, PLAIN, "п'ять тисяч"),
            (21_000, PLAIN, "двадцять одна тисяча"),
            (22_000, PLAIN, "двадцять дві тисячі"),
        ])

    def test_gender(self):
        _check("uk", [
            (21, FEMININE, "двадцять одна"),
            (101, FEMININE, "сто одна"),
            (1, NEUTER, "одне"),
        ])

    def test_decimals(self):
        _check("uk", [(1.05, PLAIN, "один кома нуль п'ять")])

    def test_currency(self):
        _check("uk", [
            (0, CURRENCY, "нуль гривень"),
            (1, CURRENCY, "одна гривня"),
            (21, CURRENCY, "двадцять одна гривня"),
        ])

    def test_years(self):
        _check("uk", [
            (123, YEAR, "сто двадцять три"),
            (1000, YEAR, "тисяча"),
            (1900, YEAR, "тисяча дев'ятсот"),
            (1999, YEAR, "тисяча дев'ятсот дев'яносто дев'ять"),
            (2000, YEAR, "дві тисячі"),
            (2025, YEAR, "дві тисячі двадцять п'ять"),
            (1900, YEAR_AD, "тисяча дев'ятсот н.е."),
            (-1, YEAR, "один до н.е."),
            (-100, YEAR, "сто до н.е."),
            (-1000, YEAR, "тисяча до н.е."),
            (-1_000_000, YEAR, "мільйон до н.е."),
            (-2_000_000, YEAR, "два мільйони до н.е."),
            (-5_000_000, YEAR, "п'ять мільйонів до н.е."),
        ])

    def test_plain_cardinal_keeps_leading_one(self):
        _check("uk", [
            (1900, PLAIN, "одна тисяча дев'ятсот"),
            (1_000_000, PLAIN, "один мільйон"),
        ])


# ═══════════════════════════════════════════════════════════════════════
# CZECH
# ═══════════════════════════════════════════════════════════════════════


class TestCzech:
    def test_cardinals(self):
        _check("cs", [
            (0, PLAIN, "nula"),
            (1, PLAIN, "jedna"),
            (15, PLAIN, "patnáct"),
            (54, PLAIN, "padesát čtyři"),
            (99, PLAIN, "devadesát devět"),
            (101, PLAIN, "sto jedna"),
            (200, PLAIN, "dvě stě"),
            (321, PLAIN, "tři sta dvacet jedna"),
            (681, PLAIN, "šest set osmdesát jedna"),
        ])

    def test_scales(self):
        _check("cs", [
            (1000, PLAIN, "tisíc"),
            (1001, PLAIN, "tisíc jedna"),
            (2000, PLAIN, "dva tisíce"),
            (2468, PLAIN, "dva tisíce čtyři sta šedesát osm"),
            (10_000, PLAIN, "deset tisíc"),
            (123_456, PLAIN, "sto dvacet tři tisíc čtyři sta padesát šest"),
            (1_000_000, PLAIN, "jeden milion"),
            (2_000_000, PLAIN, "dva miliony"),
            (5_000_000, PLAIN, "pět milionů"),
            (1_000_000_000, PLAIN, "jedna miliarda"),
            (2_000_000_000, PLAIN, "dvě miliardy"),
            (5_001_000, PLAIN, "pět milionů tisíc"),
            (1_000_000_001, PLAIN, "jedna miliarda jedna"),
            (1_000_002_000_003, PLAIN, "jeden bilion dva miliony tři"),
        ])

    def test_gender(self):
        _check("cs", [
            (1, ConversionOptions(gender=Gender.MASCULINE), "jeden"),
            (21, ConversionOptions(gender=Gender.MASCULINE), "dvacet jeden"),
            (22, FEMININE, "dvacet dvě"),
            (1, NEUTER, "jedno"),
            (2, NEUTER, "dvě"),
        ])

    def test_negative(self):
        _check("cs", [(-1, PLAIN, "mínus jedna")])

    def test_decimals(self):
        _check("cs", [
            (1.5, PLAIN, "jedna celá pět"),
            (1.05, PLAIN, "jedna celá nula pět"),
            (1.5, POINT, "jedna tečka pět"),
        ])

    def test_currency(self):
        _check("cs", [
            (0, CURRENCY, "nula korun českých"),
            (1, CURRENCY, "jedna koruna česká"),
            (2, CURRENCY, "dvě koruny české"),
            (5, CURRENCY, "pět korun českých"),
            (21, CURRENCY, "dvacet jedna korun českých"),
            (22, CURRENCY, "dvacet dvě koruny české"),
            (101, CURRENCY, "sto jedna korun českých"),
            (102, CURRENCY, "sto dvě koruny české"),
            (1.5, CURRENCY, "jedna koruna česká a padesát haléřů"),
            (123.45, CURRENCY, "sto dvacet tři koruny české a čtyřicet pět haléřů"),
            (10_000_000, CURRENCY, "deset milionů korun českých"),
            (0.01, CURRENCY, "jeden haléř"),
            (0.02, CURRENCY, "dva haléře"),
            (1.01, CURRENCY, "jedna koruna česká a jeden haléř"),
        ])

    def test_years(self):
        _check("cs", [
            (1900, YEAR, "tisíc devět set"),
            (1999, YEAR, "tisíc devět set devadesát devět"),
            (2025, YEAR, "dva tisíce dvacet pět"),
            (1900, YEAR_AD, "tisíc devět set n. l."),
            (-1, YEAR, "jedna př. n. l."),
            (-2025, YEAR, "dva tisíce dvacet pět př. n. l."),
            (-1_000_000, YEAR, "jeden milion př. n. l."),
        ])

    def test_special_literals(self):
        _check("cs", [
            (float("nan"), PLAIN, "Není Číslo"),
            (float("inf"), PLAIN, "Nekonečno"),
            (float("-inf"), PLAIN, "Záporné Nekonečno"),
            ("abc", PLAIN, "Není Číslo"),
        ])


# ═══════════════════════════════════════════════════════════════════════
# ITALIAN
# ═══════════════════════════════════════════════════════════════════════


class TestItalian:
    def test_cardinals(self):
        _check("it", [
            (0, PLAIN, "zero"),
            (1, PLAIN, "uno"),
            (11, PLAIN, "undici"),
            (21, PLAIN, "ventuno"),
            (38, PLAIN, "trentotto"),
            (99, PLAIN, "novantanove"),
            (100, PLAIN, "cento"),
            (101, PLAIN, "centuno"),
            (111, PLAIN, "centoundici"),
            (200, PLAIN, "duecento"),
            (999, PLAIN, "novecentonovantanove"),
        ])

    def test_thousands_are_one_word(self):
        _check("it", [
            (1000, PLAIN, "mille"),
            (1001, PLAIN, "milleuno"),
            (1111, PLAIN, "millecentoundici"),
            (2000, PLAIN, "duemila"),
            (10_000, PLAIN, "diecimila"),
            (100_000, PLAIN, "centomila"),
            (123_456, PLAIN, "centoventitremilaquattrocentocinquantasei"),
            (999_999, PLAIN, "novecentonovantanovemilanovecentonovantanove"),
        ])

    def test_large_scales(self):
        _check("it", [
            (10**6, PLAIN, "un milione"),
            (10**9, PLAIN, "un miliardo"),
            (2_000_000, PLAIN, "due milioni"),
            (1_002_000, PLAIN, "un milione duemila"),
        ])

    def test_negative(self):
        _check("it", [
            (-1, PLAIN, "meno uno"),
            (-123, PLAIN, "meno centoventitre"),
            (-123, ConversionOptions(negative_prefix="negativo"), "negativo centoventitre"),
        ])

    def test_decimals(self):
        _check("it", [
            (Decimal("123.456"), PLAIN, "centoventitre virgola quattro cinque sei"),
            (Decimal("1.50"), PLAIN, "uno virgola cinque"),
            (123.0, PLAIN, "centoventitre"),
            (1.5, POINT, "uno punto cinque"),
        ])

    def test_currency(self):
        _check("it", [
            (0, CURRENCY, "zero euro"),
            (1.01, CURRENCY, "un euro e un centesimo"),
            (2.5, CURRENCY, "due euro e cinquanta centesimi"),
            (123.45, CURRENCY, "centoventitre euro e quarantacinque centesimi"),
        ])

    def test_years(self):
        _check("it", [
            (1900, YEAR, "millenovecento"),
            (2024, YEAR, "duemilaventiquattro"),
            (-100, YEAR, "cento a.C."),
            (2024, YEAR_AD, "duemilaventiquattro d.C."),
        ])

    def test_special_literals(self):
        _check("it", [
            (float("inf"), PLAIN, "Infinito"),
            (float("-inf"), PLAIN, "Infinito negativo"),
            (float("nan"), PLAIN, "Non un numero"),
            (None, PLAIN, "Non un numero"),
            ("abc", ConversionOptions(fallback_on_error="Numero non valido"), "Numero non valido"),
        ])


# ═══════════════════════════════════════════════════════════════════════
# LITHUANIAN
# ═══════════════════════════════════════════════════════════════════════


class TestLithuanian:
    def test_cardinals(self):
        _check("lt", [
            (0, PLAIN, "nulis"),
            (1, PLAIN, "vienas"),
            (19, PLAIN, "devyniolika"),
            (21, PLAIN, "dvidešimt vienas"),
            (68, PLAIN, "šešiasdešimt aštuoni"),
            (100, PLAIN, "šimtas"),
            (123, PLAIN, "šimtas dvidešimt trys"),
            (200, PLAIN, "du šimtai"),
            (321, PLAIN, "trys šimtai dvidešimt vienas"),
        ])

    def test_scales(self):
        _check("lt", [
            (1000, PLAIN, "tūkstantis"),
            (1001, PLAIN, "tūkstantis vienas"),
            (2000, PLAIN, "du tūkstančiai"),
            (10_000, PLAIN, "dešimt tūkstančių"),
            (11_100, PLAIN, "vienuolika tūkstančių šimtas"),
            (21_000, PLAIN, "dvidešimt vienas tūkstantis"),
            (100_000, PLAIN, "šimtas tūkstančių"),
            (10**6, PLAIN, "milijonas"),
            (2 * 10**6, PLAIN, "du milijonai"),
            (10**9, PLAIN, "milijardas"),
            (3 * 10**12, PLAIN, "trys trilijonai"),
            (10**24, PLAIN, "septilijonas"),
            (10**12 + 2 * 10**6 + 3, PLAIN, "trilijonas du milijonai trys"),
            (5_001_000, PLAIN, "penki milijonai tūkstantis"),
            (1_001_000_000, PLAIN, "milijardas milijonas"),
        ])

    def test_negative_and_decimals(self):
        _check("lt", [
            (-123, PLAIN, "minus šimtas dvidešimt trys"),
            (Decimal("-123.456"), PLAIN, "minus šimtas dvidešimt trys kablelis keturi penki šeši"),
            (-1, ConversionOptions(negative_prefix="neigiamas"), "neigiamas vienas"),
            (1.05, PLAIN, "vienas kablelis nulis penki"),
            (1.5, POINT, "vienas taškas penki"),
        ])

    def test_currency(self):
        _check("lt", [
            (0, CURRENCY, "nulis eurų"),
            (1, CURRENCY, "vienas euras"),
            (2, CURRENCY, "du eurai"),
            (10, CURRENCY, "dešimt eurų"),
            (12, CURRENCY, "dvylika eurų"),
            (21, CURRENCY, "dvidešimt vienas euras"),
            (1.01, CURRENCY, "vienas euras vienas centas"),
            (4.11, CURRENCY, "keturi eurai vienuolika centų"),
            (6.21, CURRENCY, "šeši eurai dvidešimt vienas centas"),
            (123.45, CURRENCY, "šimtas dvidešimt trys eurai keturiasdešimt penki centai"),
            (10_000_000, CURRENCY, "dešimt milijonų eurų"),
            (0.5, CURRENCY, "penkiasdešimt centų"),
        ])

    def test_years_end_in_ordinal(self):
        _check("lt", [
            (123, YEAR, "šimtas dvidešimt treti"),
            (498, YEAR, "keturi šimtai devyniasdešimt aštunti"),
            (756, YEAR, "septyni šimtai penkiasdešimt šešti"),
            (1900, YEAR, "tūkstantis devyni šimtai"),
            (1999, YEAR, "tūkstantis devyni šimtai devyniasdešimt devinti"),
            (2025, YEAR, "du tūkstančiai dvidešimt penkti"),
            (2025, YEAR_AD, "du tūkstančiai dvidešimt penkti m. e."),
            (-1, YEAR, "pirmieji pr. m. e."),
            (-100, YEAR, "šimtas pr. m. e."),
            (-1_000_000, YEAR, "milijonas pr. m. e."),
        ])

    def test_special_literals(self):
        _check("lt", [
            (float("nan"), PLAIN, "Ne Skaičius"),
            (float("inf"), PLAIN, "Begalybė"),
            (float("-inf"), PLAIN, "Neigiama Begalybė"),
            ("abc", PLAIN, "Ne Skaičius"),
        ])


# ═══════════════════════════════════════════════════════════════════════
# PORTUGUESE
# ═══════════════════════════════════════════════════════════════════════


EUR_PT = ConversionOptions(currency=True, currency_info=pt.EUR)


class TestPortuguese:
    def test_cardinals(self):
        _check("pt", [
            (0, PLAIN, "zero"),
            (1, PLAIN, "um"),
            (16, PLAIN, "dezesseis"),
            (21, PLAIN, "vinte e um"),
            (99, PLAIN, "noventa e nove"),
            (100, PLAIN, "cem"),
            (101, PLAIN, "cento e um"),
            (123, PLAIN, "cento e vinte e três"),
            (500, PLAIN, "quinhentos"),
            (999, PLAIN, "novecentos e noventa e nove"),
        ])

    def test_scales_and_connector(self):
        _check("pt", [
            (1000, PLAIN, "mil"),
            (1001, PLAIN, "mil e um"),
            (1100, PLAIN, "mil e cem"),
            (1111, PLAIN, "mil cento e onze"),
            (2000, PLAIN, "dois mil"),
            (100_000, PLAIN, "cem mil"),
            (123_456, PLAIN, "cento e vinte e três mil quatrocentos e cinquenta e seis"),
            (10**6, PLAIN, "um milhão"),
            (2 * 10**6, PLAIN, "dois milhões"),
            (10**9, PLAIN, "um bilhão"),
            (10**12, PLAIN, "um trilhão"),
            (1_000_000_001, PLAIN, "um bilhão e um"),
            (1_000_000_100, PLAIN, "um bilhão e cem"),
            (1_001_001, PLAIN, "um milhão mil e um"),
            (2_000_123, PLAIN, "dois milhões cento e vinte e três"),
        ])

    def test_negative_and_decimals(self):
        _check("pt", [
            (-123, PLAIN, "menos cento e vinte e três"),
            (-1, ConversionOptions(negative_prefix="negativo"), "negativo um"),
            (Decimal("1.05"), PLAIN, "um vírgula zero cinco"),
            (0.5, PLAIN, "zero vírgula cinco"),
            (1.5, POINT, "um ponto cinco"),
        ])

    def test_currency(self):
        _check("pt", [
            (0, CURRENCY, "zero reais"),
            (1, CURRENCY, "um real"),
            (2, CURRENCY, "dois reais"),
            (1.5, CURRENCY, "um real e cinquenta centavos"),
            (2.05, CURRENCY, "dois reais e cinco centavos"),
            (0.75, CURRENCY, "setenta e cinco centavos"),
            (123.45, CURRENCY, "cento e vinte e três reais e quarenta e cinco centavos"),
            (1000, CURRENCY, "mil reais"),
            (10**6, CURRENCY, "um milhão de reais"),
        ])

    def test_euro(self):
        _check("pt", [
            (0, EUR_PT, "zero euros"),
            (1, EUR_PT, "um euro"),
            (1.5, EUR_PT, "um euro e cinquenta cêntimos"),
            (123.45, EUR_PT, "cento e vinte e três euros e quarenta e cinco cêntimos"),
        ])

    def test_years(self):
        _check("pt", [
            (1900, YEAR, "mil novecentos"),
            (2024, YEAR, "dois mil e vinte e quatro"),
            (1900, YEAR_AD, "mil novecentos d.C."),
            (-100, YEAR, "cem a.C."),
            (-1, YEAR, "um a.C."),
            (-2024, YEAR, "dois mil e vinte e quatro a.C."),
        ])

    def test_special_literals(self):
        _check("pt", [
            (float("nan"), PLAIN, "Não é um número"),
            (float("inf"), PLAIN, "Infinito"),
            (float("-inf"), PLAIN, "Menos Infinito"),
            (None, ConversionOptions(fallback_on_error="Número Inválido"), "Número Inválido"),
        ])


# ═══════════════════════════════════════════════════════════════════════
# SLOVENIAN
# ═══════════════════════════════════════════════════════════════════════


class TestSlovenian:
    def test_cardinals(self):
        _check("sl", [
            (0, PLAIN, "nič"),
            (1, PLAIN, "ena"),
            (21, PLAIN, "enaindvajset"),
            (56, PLAIN, "šestinpetdeset"),
            (99, PLAIN, "devetindevetdeset"),
            (101, PLAIN, "sto ena"),
            (200, PLAIN, "dvesto"),
        ])

    def test_scales(self):
        _check("sl", [
            (1000, PLAIN, "tisoč"),
            (1001, PLAIN, "tisoč ena"),
            (2000, PLAIN, "dva tisoč"),
            (3000, PLAIN, "tri tisoč"),
            (123_456, PLAIN, "sto triindvajset tisoč štiristo šestinpetdeset"),
            (10**6, PLAIN, "en milijon"),
            (2 * 10**6, PLAIN, "dva milijona"),
            (3 * 10**6, PLAIN, "trije milijoni"),
            (5 * 10**6, PLAIN, "pet milijonov"),
            (10**9, PLAIN, "ena milijarda"),
            (2 * 10**9, PLAIN, "dve milijardi"),
            (10**12, PLAIN, "en bilijon"),
        ])

    def test_gender(self):
        _check("sl", [
            (2, FEMININE, "dve"),
            (3, ConversionOptions(gender=Gender.MASCULINE), "trije"),
            (22, FEMININE, "dvaindvajset"),
        ])

    def test_negative_and_decimals(self):
        _check("sl", [
            (-123, PLAIN, "minus sto triindvajset"),
            (Decimal("1.50"), PLAIN, "ena vejica pet"),
            (1.5, POINT, "ena pika pet"),
        ])

    def test_currency_dual(self):
        _check("sl", [
            (0, CURRENCY, "nič evrov"),
            (1, CURRENCY, "en evro"),
            (1.01, CURRENCY, "en evro in en cent"),
            (2, CURRENCY, "dva evra"),
            (2.02, CURRENCY, "dva evra in dva centa"),
            (3, CURRENCY, "trije evri"),
            (4, CURRENCY, "štirje evri"),
            (5, CURRENCY, "pet evrov"),
            (102, CURRENCY, "sto dva evra"),
            (2.5, CURRENCY, "dva evra in petdeset centov"),
            (123.45, CURRENCY, "sto triindvajset evrov in petinštirideset centov"),
        ])

    def test_years(self):
        _check("sl", [
            (1900, YEAR, "tisoč devetsto"),
            (2024, YEAR, "dva tisoč štiriindvajset"),
            (2024, YEAR_AD, "dva tisoč štiriindvajset n. št."),
            (-100, YEAR, "sto pr. n. št."),
        ])

    def test_special_literals(self):
        _check("sl", [
            (float("inf"), PLAIN, "Neskončnost"),
            (float("-inf"), PLAIN, "Minus neskončnost"),
            (float("nan"), PLAIN, "Ni število"),
        ])
