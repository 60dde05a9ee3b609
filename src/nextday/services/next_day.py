"""NextDayService — validate a date, then compute the day after it.

Pipeline (each stage gates the next):
  1. Range validation against :class:`CalendarBounds`
  2. Calendar validation against the month's actual length
  3. Next-day computation
"""

from __future__ import annotations

import logging
import re
from typing import TYPE_CHECKING

from nextday.domain.gregorian import next_day
from nextday.domain.types import Date
from nextday.domain.validation import validate_calendar_date, validate_date
from nextday.services.result import ServiceError, ServiceResult

if TYPE_CHECKING:
    from nextday.config.models import CalendarBounds

logger = logging.getLogger(__name__)

OP = "next_day"

INVALID_INPUT = "INVALID_INPUT"
INVALID_RANGE = "INVALID_RANGE"
INVALID_CALENDAR_DATE = "INVALID_CALENDAR_DATE"

INTEGER_TOKEN = re.compile(r"[+-]?[0-9]+")


class NextDayService:
    """Runs the validate → validate → compute pipeline for one date."""

    def __init__(self, bounds: CalendarBounds) -> None:
        self._bounds = bounds

    def compute(self, date: Date) -> ServiceResult:
        """Return the day after *date*, or the first validation failure."""
        diagnostics: list[str] = []

        if not validate_date(
            date,
            self._bounds.day,
            self._bounds.month,
            self._bounds.year,
            diagnostics,
        ):
            return _failure(INVALID_RANGE, "Date fields out of range", date, diagnostics)

        if not validate_calendar_date(date, diagnostics):
            return _failure(
                INVALID_CALENDAR_DATE,
                "Day exceeds the length of its month",
                date,
                diagnostics,
            )

        result = next_day(date)
        logger.debug("next day of %s is %s", date, result)
        return ServiceResult(
            ok=True,
            op=OP,
            data={"input": date.model_dump(), "date": result.model_dump()},
        )

    def compute_from_text(self, text: str) -> ServiceResult:
        """Parse ``"DAY MONTH YEAR"`` and delegate to :meth:`compute`."""
        date = parse_date_fields(text.split())
        if date is None:
            message = f"Expected three integers DAY MONTH YEAR, got {text.strip()!r}"
            return ServiceResult(
                ok=False,
                op=OP,
                error=ServiceError(
                    code=INVALID_INPUT,
                    message=message,
                    detail={"diagnostics": [message]},
                ),
            )
        return self.compute(date)


def parse_date_fields(fields: list[str] | tuple[str, ...]) -> Date | None:
    """Build a Date from exactly three ASCII integer tokens, else return None.

    ``int()`` alone would also take ``1_0`` and non-ASCII digits.
    """
    if len(fields) != 3 or not all(INTEGER_TOKEN.fullmatch(f) for f in fields):
        return None
    day, month, year = (int(f) for f in fields)
    return Date(day=day, month=month, year=year)


def _failure(code: str, message: str, date: Date, diagnostics: list[str]) -> ServiceResult:
    return ServiceResult(
        ok=False,
        op=OP,
        error=ServiceError(
            code=code,
            message=message,
            detail={"input": date.model_dump(), "diagnostics": list(diagnostics)},
        ),
    )
