"""
numspell: FastAPI Server
========================

RESTful API for spelling numbers out as words.

Endpoints:
    POST /convert           Convert one number
    POST /convert/batch     Convert many numbers with shared options
    GET  /languages         Shipped language profiles
    GET  /health            Health check and readiness

Run:
    uvicorn api:app --reload              # Dev (http://localhost:8000)
    uvicorn api:app --host 0.0.0.0        # Production

Docs:
    http://localhost:8000/docs             # Swagger UI (auto-generated)
    http://localhost:8000/redoc            # ReDoc (alternative)
"""

from __future__ import annotations

import asyncio
import logging
import os
from contextlib import asynccontextmanager
from typing import Optional, Union

from dotenv import load_dotenv
from fastapi import FastAPI, HTTPException
from pydantic import BaseModel, Field

from numspell import __version__
from numspell.converter import NumberToWords
from numspell.exceptions import UnsupportedLanguageError
from numspell.languages import available_languages, default_language, get_profile
from numspell.models import ConversionOptions
from numspell.normalizer import MAX_INTEGER_DIGITS

# ─── Load .env if available ──────────────────────────────────────────
load_dotenv()

logger = logging.getLogger(__name__)

NumberInput = Union[int, float, str]

# Integers past the normalizer cap are summarised rather than printed
_ECHO_MAX_BITS = (10**MAX_INTEGER_DIGITS).bit_length()


def _batch_limit() -> int:
    return int(os.getenv("NUMSPELL_BATCH_LIMIT", "1000"))


# ─── Application Lifespan (pre-warm converters) ─────────────────────

_converters: dict[str, NumberToWords] | None = None


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Build one converter per shipped language on startup."""
    global _converters  # noqa: PLW0603
    _converters = {code: NumberToWords(get_profile(code)) for code in available_languages()}
    logger.info("Loaded %d language profiles", len(_converters))
    yield
    _converters = None


# ─── FastAPI App ─────────────────────────────────────────────────────

app = FastAPI(
    title="numspell API",
    description=(
        "Data-driven number-to-words conversion. Cardinals, decimals, "
        "currency amounts and years in every shipped language, with "
        "plural, gender and scale-word agreement."
    ),
    version=__version__,
    lifespan=lifespan,
)


# ─── Request / Response Schemas ─────────────────────────────────────


class ConvertRequest(BaseModel):
    """Request body for the /convert endpoint."""

    number: NumberInput = Field(
        ...,
        description="Number to spell out. Send decimals as strings to keep every digit.",
        json_schema_extra={"example": "1984"},
    )
    language: Optional[str] = Field(
        default=None,
        description="Language code such as 'en', 'en-gb' or 'ru'. Defaults to the server default.",
        json_schema_extra={"example": "en"},
    )
    options: ConversionOptions = Field(default_factory=ConversionOptions)

    model_config = {"json_schema_extra": {"example": {
        "number": 1984,
        "language": "en",
        "options": {"format": "YEAR"},
    }}}


class BatchConvertRequest(BaseModel):
    """Request body for the /convert/batch endpoint."""

    numbers: list[NumberInput] = Field(..., min_length=1)
    language: Optional[str] = None
    options: ConversionOptions = Field(default_factory=ConversionOptions)


class ConvertResponse(BaseModel):
    language: str
    input: str = Field(description="The number as received")
    text: str

    model_config = {"json_schema_extra": {"example": {
        "language": "en",
        "input": "1984",
        "text": "nineteen eighty-four",
    }}}


class BatchConvertResponse(BaseModel):
    language: str
    count: int
    results: list[ConvertResponse]


class LanguageOut(BaseModel):
    code: str
    name: str


class LanguagesResponse(BaseModel):
    default: str
    languages: list[LanguageOut]


class HealthResponse(BaseModel):
    status: str
    version: str
    languages_loaded: int


# ─── Helpers ─────────────────────────────────────────────────────────


def _get_converters() -> dict[str, NumberToWords]:
    if _converters is None:
        raise HTTPException(status_code=503, detail="Converters not initialised")
    return _converters


def _echo(number: NumberInput) -> str:
    """Echo the input back, summarising integers too long to print."""
    if isinstance(number, int) and number.bit_length() > _ECHO_MAX_BITS:
        return f"<{number.bit_length()}-bit integer>"
    return str(number)


def _get_converter(language: str | None) -> NumberToWords:
    """Resolve a language code to its pre-built converter, or 404."""
    converters = _get_converters()
    try:
        profile = get_profile(language or default_language())
    except UnsupportedLanguageError as exc:
        raise HTTPException(
            status_code=404,
            detail={"code": exc.code, "message": str(exc), **exc.details},
        ) from exc
    return converters.get(profile.code) or NumberToWords(profile)


# ─── Endpoints ───────────────────────────────────────────────────────


@app.post(
    "/convert",
    summary="Spell out one number",
    tags=["Conversion"],
    responses={
        404: {"description": "Unknown language code"},
        503: {"description": "Converters not yet initialised"},
    },
)
def convert_number(request: ConvertRequest) -> ConvertResponse:
    """Convert a single number using the requested language and options.

    Invalid numbers do not fail the request: the response text carries the
    language's fallback literal (or `options.fallback_on_error`).
    """
    converter = _get_converter(request.language)
    text = converter.convert(request.number, request.options)
    return ConvertResponse(language=converter.profile.code, input=_echo(request.number), text=text)


@app.post(
    "/convert/batch",
    summary="Spell out many numbers",
    tags=["Conversion"],
    responses={
        404: {"description": "Unknown language code"},
        413: {"description": "Too many numbers in one request"},
        503: {"description": "Converters not yet initialised"},
    },
)
async def convert_batch(request: BatchConvertRequest) -> BatchConvertResponse:
    """Convert a list of numbers that share one language and option set.

    Order is preserved. Limited to NUMSPELL_BATCH_LIMIT numbers per call.
    """
    limit = _batch_limit()
    if len(request.numbers) > limit:
        raise HTTPException(status_code=413, detail=f"At most {limit} numbers per batch")

    converter = _get_converter(request.language)
    texts = await asyncio.to_thread(converter.convert_many, request.numbers, request.options)
    results = [
        ConvertResponse(language=converter.profile.code, input=_echo(number), text=text)
        for number, text in zip(request.numbers, texts)
    ]
    return BatchConvertResponse(language=converter.profile.code, count=len(results), results=results)


@app.get(
    "/languages",
    summary="List supported languages",
    tags=["System"],
)
def list_languages() -> LanguagesResponse:
    """Every shipped language code with its display name."""
    return LanguagesResponse(
        default=default_language(),
        languages=[
            LanguageOut(code=code, name=get_profile(code).name)
            for code in available_languages()
        ],
    )


@app.get(
    "/health",
    summary="Health check",
    tags=["System"],
    responses={503: {"description": "Converters not yet initialised"}},
)
def health_check() -> HealthResponse:
    """Returns service status and configuration info."""
    converters = _get_converters()
    return HealthResponse(
        status="healthy",
        version=__version__,
        languages_loaded=len(converters),
    )
