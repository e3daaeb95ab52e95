"""
Plural-class resolution: count -> grammatical bucket -> concrete word form.

The set of plural classes is declared by each language, not hardcoded here.
English gets by with {one, other}; Russian needs {one, few, many}; Georgian
never inflects a noun after a numeral at all. A PluralRule bundles that
declared set with a pure selector, usually over the count's last one or two
digits.

Supported patterns:
    ONE_OTHER        1 dollar / 2 dollars
    ZERO_ONE_OTHER   0 euro, 1 euro / 2 euros            (French)
    EAST_SLAVIC      1 рубль / 2 рубля / 5 рублей / 11 рублей / 21 рубль
    POLISH           1 złoty / 2 złote / 5 złotych / 22 złote / 21 złotych
    CZECH_SCALE      1 tisíc / 2 tisíce / 5 tisíc / 22 tisíc   (whole count)
    SLOVENIAN        1 evro / 2 evra / 3 evri / 5 evrov / 102 evra   (dual)
    LITHUANIAN       1 euras / 2 eurai / 10 eurų / 11 eurų / 21 euras
    INVARIANT        one form for every count
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass

from .exceptions import InternalRangeViolation

ONE = "one"
TWO = "two"
FEW = "few"
MANY = "many"
OTHER = "other"


# ─── Rule Container ─────────────────────────────────────────────────


@dataclass(frozen=True)
class PluralRule:
    """A language-declared plural class set plus its selector."""

    name: str
    classes: frozenset[str]
    select: Callable[[int], str]
    default: str = ONE  # Class whose form is reused when another is missing


# ─── Selectors ──────────────────────────────────────────────────────


def _one_other(n: int) -> str:
    return ONE if n == 1 else OTHER


def _zero_one_other(n: int) -> str:
    return ONE if n in (0, 1) else OTHER


def _east_slavic(n: int) -> str:
    """Russian / Ukrainian / Belarusian noun agreement after numerals."""
    last_two = n % 100
    if 11 <= last_two <= 19:
        return MANY
    last = n % 10
    if last == 1:
        return ONE
    if 2 <= last <= 4:
        return FEW
    return MANY


def _polish(n: int) -> str:
    """Polish: only exactly 1 is singular; 21, 31... take the genitive plural."""
    if n == 1:
        return ONE
    last_two = n % 100
    if 2 <= n % 10 <= 4 and not 12 <= last_two <= 14:
        return FEW
    return MANY


def _czech_scale(n: int) -> str:
    """Czech scale words: only a count of exactly 2, 3 or 4 takes the few form."""
    if n == 1:
        return ONE
    if 2 <= n <= 4:
        return FEW
    return MANY


def _slovenian(n: int) -> str:
    last_two = n % 100
    if last_two == 1:
        return ONE
    if last_two == 2:
        return TWO
    if last_two in (3, 4):
        return FEW
    return MANY


def _lithuanian(n: int) -> str:
    """Lithuanian: teens and round tens take the genitive plural."""
    last_two = n % 100
    if 10 <= last_two <= 19:
        return MANY
    last = n % 10
    if last == 0:
        return MANY
    if last == 1:
        return ONE
    return FEW


def _invariant(n: int) -> str:
    return ONE


ONE_OTHER = PluralRule("one_other", frozenset({ONE, OTHER}), _one_other)
ZERO_ONE_OTHER = PluralRule("zero_one_other", frozenset({ONE, OTHER}), _zero_one_other)
EAST_SLAVIC = PluralRule("east_slavic", frozenset({ONE, FEW, MANY}), _east_slavic)
POLISH = PluralRule("polish", frozenset({ONE, FEW, MANY}), _polish)
CZECH_SCALE = PluralRule("czech_scale", frozenset({ONE, FEW, MANY}), _czech_scale)
SLOVENIAN = PluralRule("slovenian", frozenset({ONE, TWO, FEW, MANY}), _slovenian)
LITHUANIAN = PluralRule("lithuanian", frozenset({ONE, FEW, MANY}), _lithuanian)
INVARIANT = PluralRule("invariant", frozenset({ONE}), _invariant)


# ─── Public API ──────────────────────────────────────────────────────


def classify(count: int, rule: PluralRule) -> str:
    """Return the plural class of a non-negative count under a rule.

    Raises:
        InternalRangeViolation: If the selector yields a class the rule
            never declared (a profile-authoring bug).
    """
    plural_class = rule.select(abs(count))
    if plural_class not in rule.classes:
        raise InternalRangeViolation(
            f"Plural rule {rule.name!r} produced undeclared class "
            f"{plural_class!r} for count {count}"
        )
    return plural_class


def resolve_form(count: int, forms: Mapping[str, str], rule: PluralRule) -> str:
    """Pick the word form for a count, reusing the default form if absent.

    Args:
        count: e.g. 22
        forms: e.g. {"one": "рубль", "few": "рубля", "many": "рублей"}
        rule: the language's PluralRule

    Returns:
        "рубля"
    """
    plural_class = classify(count, rule)
    form = forms.get(plural_class)
    if form is None:
        form = forms[rule.default]
    return form
