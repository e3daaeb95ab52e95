#!/usr/bin/env python3
"""
numspell: Entry Point
=====================

Spells out numbers from the command line, or prints a demo table.

Usage:
    python main.py                              # Demo table, every language
    python main.py 1984 --year                  # nineteen eighty-four
    python main.py 1.50 --currency --lang ru    # один рубль пятьдесят копеек
    python main.py -44 --year --lang fr         # quarante-quatre av. J.-C.
    NUMSPELL_LOG_LEVEL=DEBUG python main.py 12345
"""

from __future__ import annotations

import argparse
import logging
import os
import sys

from dotenv import load_dotenv

from numspell.converter import NumberToWords
from numspell.exceptions import UnsupportedLanguageError
from numspell.languages import available_languages, default_language
from numspell.models import ConversionOptions, DecimalSeparator, Gender, NumberFormat

# ─── Load .env if available ──────────────────────────────────────────
load_dotenv()


# ─── Demo Inputs (the hard cases) ───────────────────────────────────

DEMO_CASES: list[tuple[str, object, ConversionOptions]] = [
    ("zero", 0, ConversionOptions()),
    ("teen / tens", 21, ConversionOptions()),
    ("hundreds", 101, ConversionOptions()),
    ("thousands", 2001, ConversionOptions()),
    ("millions", 1_000_000, ConversionOptions()),
    ("decimal", "3.1415", ConversionOptions()),
    ("negative", -80, ConversionOptions()),
    ("year", 1984, ConversionOptions(format=NumberFormat.YEAR)),
    ("year BC", -44, ConversionOptions(format=NumberFormat.YEAR)),
    ("currency", "21.05", ConversionOptions(currency=True)),
]


# ─── ANSI Color Constants ───────────────────────────────────────────

_RED = "\033[91m"
_GREEN = "\033[92m"
_CYAN = "\033[96m"
_DIM = "\033[2m"
_BOLD = "\033[1m"
_RESET = "\033[0m"
_WIDTH = 72


# ─── Pretty Printer ─────────────────────────────────────────────────


def print_demo(languages: list[str]) -> None:
    """Print every demo case for each language."""
    for code in languages:
        converter = NumberToWords.for_language(code)
        print(f"\n{'=' * _WIDTH}")
        print(f"{_BOLD}{_CYAN}  {converter.profile.name} ({code}){_RESET}")
        print(f"{'─' * _WIDTH}")
        for label, number, options in DEMO_CASES:
            text = converter.convert(number, options)
            print(f"  {_DIM}{label:<12}{_RESET} {str(number):>10}  {_GREEN}{text}{_RESET}")
    print(f"{'=' * _WIDTH}\n")


# ─── CLI ─────────────────────────────────────────────────────────────


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Spell out numbers as words.")
    parser.add_argument("numbers", nargs="*", help="numbers to convert (omit for a demo table)")
    parser.add_argument("--lang", default=None, help=f"language code ({', '.join(available_languages())})")
    parser.add_argument("--year", action="store_true", help="read as a calendar year")
    parser.add_argument("--era", action="store_true", help="append the AD suffix to years")
    parser.add_argument("--currency", action="store_true", help="read as a money amount")
    parser.add_argument("--comma", action="store_true", help="use the comma separator word")
    parser.add_argument("--point", action="store_true", help="use the point separator word")
    parser.add_argument(
        "--gender",
        choices=[g.value.lower() for g in Gender],
        help="grammatical gender (languages that inflect numerals only)",
    )
    return parser


def _options_from_args(args: argparse.Namespace) -> ConversionOptions:
    separator = None
    if args.comma:
        separator = DecimalSeparator.COMMA
    elif args.point:
        separator = DecimalSeparator.POINT
    return ConversionOptions(
        format=NumberFormat.YEAR if args.year else NumberFormat.PLAIN,
        include_era_suffix=args.era,
        currency=args.currency,
        decimal_separator=separator,
        gender=Gender(args.gender.upper()) if args.gender else None,
    )


# ─── Main ────────────────────────────────────────────────────────────


def main(argv: list[str] | None = None) -> int:
    """Convert the numbers on the command line, or print the demo table."""
    logging.basicConfig(
        level=os.getenv("NUMSPELL_LOG_LEVEL", "WARNING").upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    args = _build_parser().parse_args(argv)

    try:
        converter = NumberToWords.for_language(args.lang or default_language())
    except UnsupportedLanguageError as exc:
        print(f"{_RED}{_BOLD}{exc}{_RESET}", file=sys.stderr)
        print(f"  Available: {', '.join(available_languages())}", file=sys.stderr)
        return 2

    if not args.numbers:
        print_demo([converter.profile.code] if args.lang else available_languages())
        return 0

    options = _options_from_args(args)
    for number in args.numbers:
        print(converter.convert(number, options))
    return 0


if __name__ == "__main__":
    sys.exit(main())
