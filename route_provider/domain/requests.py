"""Request models parsed by the transport layer.

These pydantic models turn raw caller payloads (dicts from a UI or a
JSON body) into the typed parameters each query expects. Academy ids
are normalized to stripped, upper-case strings.
"""

from __future__ import annotations

import re
from typing import Any, List

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .models import normalize_academy_id

_SEPARATORS = re.compile(r"[\s,>\-]+")


def _normalize_academy(value: Any) -> str:
    if not isinstance(value, str):
        raise ValueError("academy id must be a string")
    academy = normalize_academy_id(value)
    if not academy:
        raise ValueError("academy id must not be empty")
    return academy


def parse_stops(raw: str) -> List[str]:
    """Split a stop sequence into academy ids.

    ``"ABC"`` is read one character per academy; ``"A-B-C"``,
    ``"A, B, C"`` and ``"A > B > C"`` use the separators instead, which
    allows multi-character ids.
    """
    text = raw.strip()
    if _SEPARATORS.search(text):
        return [normalize_academy_id(part) for part in _SEPARATORS.split(text) if part]
    return [normalize_academy_id(char) for char in text]


class _AcademyPairRequest(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")

    starting_academy: str
    destination_academy: str

    @field_validator("starting_academy", "destination_academy", mode="before")
    @classmethod
    def _academy(cls, value: Any) -> str:
        return _normalize_academy(value)


class RouteDistanceRequest(BaseModel):
    """Stops of a literal route, in travel order."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    stops: List[str] = Field(min_length=2)

    @field_validator("stops", mode="before")
    @classmethod
    def _stops(cls, value: Any) -> List[str]:
        if isinstance(value, str):
            return parse_stops(value)
        if isinstance(value, (list, tuple)):
            return [_normalize_academy(item) for item in value]
        raise ValueError("stops must be a string or a list of academy ids")


class ShortestRouteRequest(_AcademyPairRequest):
    pass


class StopLimitRequest(_AcademyPairRequest):
    stop_limit: int = Field(ge=0)


class ExactStopsRequest(_AcademyPairRequest):
    exact_stops: int = Field(ge=0)


class DistanceLimitRequest(_AcademyPairRequest):
    distance_limit: int = Field(ge=0)
