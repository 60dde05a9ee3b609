"""Two independent validation passes over a ``Date``.

1. Range validation: day, month and year each within static bounds.
2. Calendar validation: day within the actual length of its month.

Both passes return a bool and append one human-readable diagnostic per
failed check to the caller's *diagnostics* list. Both must pass before
:func:`nextday.domain.gregorian.next_day` may be called.
"""

from __future__ import annotations

import logging

from nextday.domain.gregorian import days_in_month, is_in_range
from nextday.domain.types import Date, Range

logger = logging.getLogger(__name__)


def _report(message: str, diagnostics: list[str] | None) -> None:
    logger.debug("validation failed: %s", message)
    if diagnostics is not None:
        diagnostics.append(message)


def validate_date(
    date: Date,
    day_range: Range,
    month_range: Range,
    year_range: Range,
    diagnostics: list[str] | None = None,
) -> bool:
    """Check day, month and year against their ranges.

    Every field is checked; a failing day does not hide a failing year.
    Returns True only if all three are in range.
    """
    checks = [
        ("Day", day_range, date.day),
        ("Month", month_range, date.month),
        ("Year", year_range, date.year),
    ]
    ok = True
    for field_name, bounds, value in checks:
        if not is_in_range(bounds, value):
            _report(f"{field_name} out of range {bounds}", diagnostics)
            ok = False
    return ok


def validate_calendar_date(date: Date, diagnostics: list[str] | None = None) -> bool:
    """Check that *date.day* does not exceed the length of its month.

    Assumes month and year already passed :func:`validate_date`.
    """
    max_days = days_in_month(date.month, date.year)
    if date.day <= max_days:
        return True
    _report(
        f"Given number of days is incorrect. Month {date.month} in year {date.year} "
        f"has {max_days} days",
        diagnostics,
    )
    return False
