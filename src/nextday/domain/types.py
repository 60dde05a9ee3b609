"""Value types for calendar arithmetic.

``Range`` is an inclusive numeric bound, validated at construction.
``Date`` is a plain day/month/year triple: construction enforces nothing,
validity is established by :mod:`nextday.domain.validation`.
"""

from __future__ import annotations

from pydantic import BaseModel, model_validator


class Range(BaseModel):
    """Inclusive integer bound ``[min, max]``."""

    model_config = {"frozen": True}

    min: int
    max: int

    @model_validator(mode="after")
    def validate_order(self) -> Range:
        if self.min > self.max:
            msg = f"min ({self.min}) must not exceed max ({self.max})"
            raise ValueError(msg)
        return self

    def contains(self, value: int) -> bool:
        """Return True if ``min <= value <= max``."""
        return self.min <= value <= self.max

    def __str__(self) -> str:
        return f"[{self.min},{self.max}]"


class Date(BaseModel):
    """A day/month/year triple with value semantics.

    Accepts any integers. ``Date(day=99, month=42, year=1)`` is a valid
    object and an invalid date.
    """

    model_config = {"frozen": True}

    day: int
    month: int
    year: int
