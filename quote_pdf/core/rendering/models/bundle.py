"""
Raw data-source outcomes for one quote.

Each sub-resource lookup resolves to a typed outcome instead of raising,
so the normalizer decides which failures are fatal.

Dependencies: pydantic
System role: Contract between the data source and the normalizer
"""

from enum import Enum
from typing import Any

from pydantic import BaseModel, Field


class LookupStatus(str, Enum):
    """Outcome of a single data-source lookup."""

    FOUND = "found"
    NOT_FOUND = "not_found"
    FAILED = "failed"


class Lookup(BaseModel):
    """Typed lookup outcome: data, not found, or store-side failure."""

    status: LookupStatus
    value: Any = None
    error: str | None = None

    @classmethod
    def found(cls, value: Any) -> "Lookup":
        return cls(status=LookupStatus.FOUND, value=value)

    @classmethod
    def not_found(cls) -> "Lookup":
        return cls(status=LookupStatus.NOT_FOUND)

    @classmethod
    def failed(cls, error: str) -> "Lookup":
        return cls(status=LookupStatus.FAILED, error=error)

    @property
    def ok(self) -> bool:
        return self.status is LookupStatus.FOUND


class QuoteBundle(BaseModel):
    """Everything fetched for one quote, as returned by the data store.

    `quote` and `branding` hold a row dict; `line_items` and `sections`
    hold ordered lists of row dicts.
    """

    quote: Lookup
    line_items: Lookup
    sections: Lookup = Field(default_factory=lambda: Lookup.found([]))
    branding: Lookup = Field(default_factory=Lookup.not_found)
