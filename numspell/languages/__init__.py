"""
Registry of shipped grammar profiles, keyed by lower-case language code.

Lookup is forgiving about case and separators ("en_GB", "EN-gb") and falls
back from a regional code to its base language ("en-us" → "en").
"""

from __future__ import annotations

import os

from ..exceptions import UnsupportedLanguageError
from ..models import GrammarProfile
from . import cs, de, en, es, fr, hi, it, ka, lt, pl, pt, ru, sl, uk

_PROFILES: dict[str, GrammarProfile] = {
    profile.code: profile
    for profile in (
        en.PROFILE,
        en.PROFILE_GB,
        cs.PROFILE,
        de.PROFILE,
        es.PROFILE,
        fr.PROFILE,
        hi.PROFILE,
        it.PROFILE,
        ka.PROFILE,
        lt.PROFILE,
        pl.PROFILE,
        pt.PROFILE,
        ru.PROFILE,
        sl.PROFILE,
        uk.PROFILE,
    )
}


def default_language() -> str:
    """Language used when none is requested (NUMSPELL_DEFAULT_LANGUAGE)."""
    return os.getenv("NUMSPELL_DEFAULT_LANGUAGE", "en").strip().lower()


def _canonical(code: str) -> str:
    return code.strip().lower().replace("_", "-")


def get_profile(code: str) -> GrammarProfile:
    """Return the grammar profile for a language code.

    Raises:
        UnsupportedLanguageError: If no profile matches the code or its base.
    """
    key = _canonical(code)
    if key in _PROFILES:
        return _PROFILES[key]
    base = key.split("-", 1)[0]
    if base in _PROFILES:
        return _PROFILES[base]
    raise UnsupportedLanguageError(
        f"No grammar profile for language {code!r}",
        details={"language": code, "available": available_languages()},
    )


def available_languages() -> list[str]:
    return sorted(_PROFILES)
