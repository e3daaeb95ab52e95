"""
Pydantic models for the conversion engine: strict, frozen, shared read-only.

Grammar profiles and currency descriptions are process-wide constants; every
other model lives for a single convert() call. Nothing is mutated after
construction, so all of it is safe to read from any number of threads.
"""

from __future__ import annotations

from decimal import Decimal
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, InstanceOf, field_validator, model_validator

from .exceptions import InternalRangeViolation
from .plurals import ONE, PluralRule


# ─── Enumerations ───────────────────────────────────────────────────


class Sign(str, Enum):
    POSITIVE = "POSITIVE"
    NEGATIVE = "NEGATIVE"


class Gender(str, Enum):
    """Grammatical gender, only consulted by languages whose grammar needs it."""

    MASCULINE = "MASCULINE"
    FEMININE = "FEMININE"
    NEUTER = "NEUTER"


class GroupingScheme(str, Enum):
    """How the integer magnitude is chunked before rendering."""

    UNIFORM_1000 = "UNIFORM_1000"  # thousand, million, billion...
    PAIRED_AFTER_THOUSAND = "PAIRED_AFTER_THOUSAND"  # thousand, lakh, crore...
    VIGESIMAL = "VIGESIMAL"  # base-20 below one hundred, 1000-groups above
    CUSTOM_SCALE_LIST = "CUSTOM_SCALE_LIST"  # explicit magnitudes (long scale)


class ConnectorPolicy(str, Enum):
    ALWAYS = "ALWAYS"
    NEVER = "NEVER"
    ONLY_IF_UNDER_100 = "ONLY_IF_UNDER_100"  # Value introduced is below threshold


class DecimalSeparator(str, Enum):
    COMMA = "COMMA"
    POINT = "POINT"


class NumberFormat(str, Enum):
    PLAIN = "PLAIN"
    YEAR = "YEAR"


class YearStyle(str, Enum):
    CARDINAL = "CARDINAL"  # two thousand five
    CENTURY = "CENTURY"  # nineteen eighty-four / nineteen hundred
    PAIRED = "PAIRED"  # twenty twenty-four


# ─── Normalized Input ───────────────────────────────────────────────


class NormalizedNumber(BaseModel):
    """Canonical arbitrary-precision form of any accepted numeric input.

    Magnitudes are always non-negative; the sign is applied only at render time.
    """

    model_config = ConfigDict(frozen=True)

    sign: Sign = Sign.POSITIVE
    integer_magnitude: int = Field(default=0, ge=0)
    fractional_digits: tuple[int, ...] = ()
    magnitude: Decimal = Decimal(0)  # Exact absolute value
    is_zero: bool = False
    is_infinite: bool = False
    is_nan: bool = False

    @property
    def is_negative(self) -> bool:
        return self.sign == Sign.NEGATIVE


class Chunk(BaseModel):
    """One digit group produced by the decomposer (least-significant first)."""

    model_config = ConfigDict(frozen=True)

    value: int = Field(ge=0)
    scale_index: int = Field(ge=0)


# ─── Grammar Building Blocks ────────────────────────────────────────


class ConnectorRule(BaseModel):
    """When to insert a connector word such as "and", "et" or "und"."""

    model_config = ConfigDict(frozen=True)

    word: Optional[str] = None
    policy: ConnectorPolicy = ConnectorPolicy.NEVER
    threshold: int = 100

    def applies(self, value: int) -> bool:
        """Whether the connector goes in front of a group worth `value`."""
        if not self.word or self.policy == ConnectorPolicy.NEVER:
            return False
        if self.policy == ConnectorPolicy.ALWAYS:
            return True
        return value < self.threshold


class Connectors(BaseModel):
    model_config = ConfigDict(frozen=True)

    intra_group: ConnectorRule = ConnectorRule()  # hundreds -> tens/units
    inter_group: str = " "  # default glue between scale groups
    before_last_small_group: ConnectorRule = ConnectorRule()
    currency_unit: Optional[str] = None  # main unit -> sub unit


class ScaleEntry(BaseModel):
    """A scale word (thousand, lakh, million...) and how it behaves."""

    model_config = ConfigDict(frozen=True)

    magnitude: int = Field(gt=1)
    forms: dict[str, str]  # plural class -> word
    gender: Optional[Gender] = None  # gender the count in front must agree with
    omit_one: bool = False  # "mille", not "un mille"
    stem: Optional[str] = None  # construct form when a lower group follows
    joiner: str = " "  # between count and scale word
    trailing_joiner: Optional[str] = None  # to the next lower group; None -> inter_group
    is_noun: bool = True  # a noun lets the count take its terminal form


class YearReading(BaseModel):
    model_config = ConfigDict(frozen=True)

    start: int
    end: int  # inclusive
    style: YearStyle


class CurrencyInfo(BaseModel):
    """Unit names of a currency, keyed by plural class."""

    model_config = ConfigDict(frozen=True)

    main_unit_forms: dict[str, str]
    sub_unit_forms: Optional[dict[str, str]] = None
    subunit_divisor: int = Field(default=100, gt=1)
    separator: Optional[str] = None
    main_gender: Optional[Gender] = None
    sub_gender: Optional[Gender] = None
    # Main unit right after a bare noun scale word: "dix millions d'euros"
    partitive_form: Optional[str] = None

    @field_validator("main_unit_forms", "sub_unit_forms")
    @classmethod
    def _require_singular(cls, forms: dict[str, str] | None) -> dict[str, str] | None:
        if forms is not None and ONE not in forms:
            raise ValueError(f"Currency unit forms need a '{ONE}' form to fall back on: {forms}")
        return forms


# ─── Grammar Profile ────────────────────────────────────────────────


class GrammarProfile(BaseModel):
    """Everything the engine needs to know about one language, as data."""

    model_config = ConfigDict(frozen=True)

    code: str
    name: str
    zero: str

    # ── 0..99 ──
    digit_words: tuple[str, ...]  # 0..19, default (or masculine) forms
    gendered_forms: dict[Gender, dict[int, str]] = Field(default_factory=dict)
    combining_forms: dict[int, str] = Field(default_factory=dict)  # inside compounds
    tens_words: dict[int, str]  # 2..9 -> twenty..ninety
    tens_stems: dict[int, str] = Field(default_factory=dict)  # vigesimal construct forms
    below_hundred: dict[int, str] = Field(default_factory=dict)  # irregular 20..99
    terminal_forms: dict[int, str] = Field(default_factory=dict)  # when nothing follows
    tens_joiner: str = " "
    unit_one_joiner: Optional[str] = None  # "vingt et un"
    units_first: bool = False  # "einundzwanzig"

    # ── Hundreds ──
    hundred_word: Optional[str] = None
    hundred_plural: Optional[str] = None  # "deux cents"
    hundreds_words: dict[int, str] = Field(default_factory=dict)  # full irregular forms
    hundreds_stems: dict[int, str] = Field(default_factory=dict)  # before a remainder
    hundred_digit_joiner: str = " "
    hundreds_joiner: str = " "
    omit_one_before_hundred: bool = False
    special_cases: dict[int, str] = Field(default_factory=dict)  # exact chunk overrides

    # ── Scales ──
    grouping: GroupingScheme = GroupingScheme.UNIFORM_1000
    scale_table: tuple[ScaleEntry, ...]
    plural_rule: InstanceOf[PluralRule]
    scale_plural_rule: Optional[InstanceOf[PluralRule]] = None  # None -> plural_rule
    connectors: Connectors = Connectors()

    # ── Gender ──
    default_gender: Optional[Gender] = None
    gender_sensitive: bool = False

    # ── Fractions ──
    separator_words: dict[DecimalSeparator, str]
    default_separator: DecimalSeparator = DecimalSeparator.POINT
    keep_trailing_zeros: bool = False

    # ── Signs, years, literals ──
    negative_prefix: str
    era_bc: str
    era_ad: str
    year_readings: tuple[YearReading, ...] = ()
    century_keeps_hundred: bool = False  # "neunzehnhundertvierundachtzig"
    year_pair_joiner: str = " "
    year_drops_leading_one: bool = False  # "тисяча дев'ятсот", not "одна тисяча ..."
    # Ordinal replacement for the last word of a year not ending in 00
    year_final_word_forms: dict[str, str] = Field(default_factory=dict)
    infinity: str = "Infinity"
    negative_infinity: Optional[str] = None
    nan_literal: str = "Not a Number"
    not_numeric_literal: str = "Not a Number"
    too_large_literal: str = "Number too large"

    currency: CurrencyInfo

    @model_validator(mode="after")
    def _check_consistency(self) -> GrammarProfile:
        """Reject profiles the engine cannot render, at construction time."""
        if len(self.digit_words) != 20:
            raise ValueError(f"{self.code}: digit_words must hold 0..19, got {len(self.digit_words)}")
        if not set(self.tens_words) <= set(range(2, 10)):
            raise ValueError(f"{self.code}: tens_words keys must be within 2..9")
        if not self.scale_table:
            raise ValueError(f"{self.code}: scale_table cannot be empty")

        rule = self.scale_rule
        previous = 1
        for index, entry in enumerate(self.scale_table, start=1):
            expected = _expected_magnitude(self.grouping, index)
            if expected is not None and entry.magnitude != expected:
                raise ValueError(
                    f"{self.code}: scale {index} magnitude {entry.magnitude} "
                    f"does not match {self.grouping.value} (expected {expected})"
                )
            if entry.magnitude <= previous or entry.magnitude % previous:
                raise ValueError(f"{self.code}: scale magnitudes must be increasing multiples")
            previous = entry.magnitude
            unknown = set(entry.forms) - rule.classes
            if unknown or rule.default not in entry.forms:
                raise ValueError(
                    f"{self.code}: scale forms {sorted(entry.forms)} do not fit "
                    f"plural rule {rule.name} {sorted(rule.classes)}"
                )

        if self.grouping == GroupingScheme.VIGESIMAL:
            missing = {2, 4, 6, 8} - set(self.tens_words)
            if missing or {2, 4, 6, 8} - set(self.tens_stems):
                raise ValueError(f"{self.code}: vigesimal profiles need tens words and stems for 20/40/60/80")
        elif self.hundred_word is None and set(self.hundreds_words) != set(range(1, 10)):
            raise ValueError(f"{self.code}: need either hundred_word or all nine hundreds_words")
        return self

    @property
    def scale_rule(self) -> PluralRule:
        """Plural rule for scale words; Czech counts them differently from nouns."""
        return self.scale_plural_rule or self.plural_rule

    def scale_for(self, scale_index: int) -> ScaleEntry:
        """The scale entry for a 1-based scale index."""
        if not 1 <= scale_index <= len(self.scale_table):
            raise InternalRangeViolation(
                f"{self.code}: no scale entry for index {scale_index} "
                f"(profile defines {len(self.scale_table)})"
            )
        return self.scale_table[scale_index - 1]

    def year_style_for(self, year: int) -> YearStyle:
        for reading in self.year_readings:
            if reading.start <= year <= reading.end:
                return reading.style
        return YearStyle.CARDINAL


def _expected_magnitude(grouping: GroupingScheme, index: int) -> int | None:
    if grouping in (GroupingScheme.UNIFORM_1000, GroupingScheme.VIGESIMAL):
        return 1000**index
    if grouping == GroupingScheme.PAIRED_AFTER_THOUSAND:
        return 1000 * 100 ** (index - 1)
    return None


# ─── Per-call Options ───────────────────────────────────────────────


class ConversionOptions(BaseModel):
    """Explicit per-call configuration; there is no shared mutable default."""

    model_config = ConfigDict(frozen=True)

    currency: bool = False
    format: NumberFormat = NumberFormat.PLAIN
    decimal_separator: Optional[DecimalSeparator] = None  # None -> language default
    negative_prefix: Optional[str] = None  # None -> language default
    # currency: rounds half-up to the sub-unit by default; False truncates instead
    round: bool = True
    gender: Optional[Gender] = None
    include_era_suffix: bool = False
    currency_info: Optional[CurrencyInfo] = None  # None -> language's currency
    fallback_on_error: Optional[str] = None
