"""
Pydantic schemas for horoscopes.

Each horoscope pairs a zodiac sign with a prediction.  Signs are
accepted in any letter case and normalised to their capitalised name,
so ``"leo"`` and ``"LEO"`` both become ``"Leo"``.  The service allows
at most one horoscope per sign.
"""

from enum import Enum
from typing import Any, Optional

from pydantic import Field, field_validator

from .record import CamelModel, NonEmptyStr, RecordBase


class ZodiacSign(str, Enum):
    ARIES = "Aries"
    TAURUS = "Taurus"
    GEMINI = "Gemini"
    CANCER = "Cancer"
    LEO = "Leo"
    VIRGO = "Virgo"
    LIBRA = "Libra"
    SCORPIO = "Scorpio"
    SAGITTARIUS = "Sagittarius"
    CAPRICORN = "Capricorn"
    AQUARIUS = "Aquarius"
    PISCES = "Pisces"


def _normalize_sign(value: Any) -> Any:
    if isinstance(value, str):
        return value.strip().capitalize()
    return value


class HoroscopeBase(CamelModel):
    sign: ZodiacSign = Field(..., examples=["Leo"])
    prediction: NonEmptyStr = Field(..., examples=["A good week for bold decisions"])

    @field_validator("sign", mode="before")
    @classmethod
    def normalize_sign(cls, v: Any) -> Any:
        return _normalize_sign(v)


class HoroscopeCreate(HoroscopeBase):
    """Schema for creating a horoscope."""


class HoroscopeUpdate(CamelModel):
    """Schema for updating a horoscope.

    All fields are optional; only provided fields will be updated.
    """

    sign: Optional[ZodiacSign] = None
    prediction: Optional[NonEmptyStr] = None

    @field_validator("sign", mode="before")
    @classmethod
    def normalize_sign(cls, v: Any) -> Any:
        return _normalize_sign(v)


class Horoscope(HoroscopeBase, RecordBase):
    """Stored horoscope."""
