"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, nextday.toml only contains
overrides, e.g.::

    [bounds.year]
    min = 1583
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field, model_validator

from nextday.domain.gregorian import MONTH_LENGTHS, MONTHS_IN_YEAR
from nextday.domain.types import Range

GREGORIAN_ADOPTION_YEAR = 1538
MAX_YEAR = 2300

_MONTH_LIMIT = Range(min=1, max=MONTHS_IN_YEAR)
_DAY_LIMIT = Range(min=1, max=max(MONTH_LENGTHS.values()))


def _default_day() -> Range:
    return _DAY_LIMIT


def _default_month() -> Range:
    return _MONTH_LIMIT


def _default_year() -> Range:
    return Range(min=GREGORIAN_ADOPTION_YEAR, max=MAX_YEAR)


class CalendarBounds(BaseModel):
    """[bounds] section — accepted day, month and year ranges."""

    model_config = {"frozen": True}

    day: Range = Field(default_factory=_default_day)
    month: Range = Field(default_factory=_default_month)
    year: Range = Field(default_factory=_default_year)

    @model_validator(mode="before")
    @classmethod
    def fill_partial_ranges(cls, data: Any) -> Any:
        """Complete a range given with only ``min`` or ``max`` from the defaults."""
        if not isinstance(data, dict):
            return data
        defaults = {"day": _default_day, "month": _default_month, "year": _default_year}
        merged = dict(data)
        for name, factory in defaults.items():
            value = merged.get(name)
            if isinstance(value, dict):
                base = factory()
                merged[name] = {"min": base.min, "max": base.max, **value}
        return merged

    @model_validator(mode="after")
    def validate_within_calendar(self) -> CalendarBounds:
        # Month lengths are only defined for 1..12.
        for name, bounds, limit in (
            ("month", self.month, _MONTH_LIMIT),
            ("day", self.day, _DAY_LIMIT),
        ):
            if bounds.min < limit.min or bounds.max > limit.max:
                msg = f"{name} bounds {bounds} must lie within {limit}"
                raise ValueError(msg)
        return self
