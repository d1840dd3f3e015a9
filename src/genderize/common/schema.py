"""Pydantic models and dataclasses for request/response types."""
from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any

from pydantic import BaseModel, field_validator

MALE = "male"
FEMALE = "female"
UNKNOWN = ""

@dataclass(frozen=True)
class Query:
    """Names to look up, with optional country and language ids."""
    names: list[str] = field(default_factory=list)
    country_id: str = ""
    language_id: str = ""

@dataclass(frozen=True)
class Response:
    """
    A name with gender and probability information attached.

    ``gender`` is MALE, FEMALE or UNKNOWN; for UNKNOWN, ``probability`` and
    ``count`` carry no meaning and should be ignored.
    """
    name: str
    gender: str = UNKNOWN
    probability: float = 0.0
    count: int = 0

@dataclass(frozen=True)
class RateLimit:
    """Quota counters reported in rate limit headers."""
    # Names allotted for the current time window.
    limit: int
    # Names left in the current time window.
    remaining: int
    # Seconds until a new time window opens.
    reset: int


class NameRecord(BaseModel):
    """One per-name record as sent by the API."""
    name: str
    gender: str | None = None
    probability: float = 0.0
    count: int | None = None

    @field_validator("probability", mode="before")
    @classmethod
    def _parse_probability(cls, value: Any) -> float:
        # Sent as a number or a decimal string depending on API version.
        try:
            return float(value)
        except (TypeError, ValueError):
            return 0.0

    def to_response(self) -> Response:
        return Response(
            name=self.name,
            gender=self.gender or UNKNOWN,
            probability=self.probability,
            count=self.count or 0,
        )
