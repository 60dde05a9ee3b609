"""Render a ServiceResult for humans or machines (--json).

Human success output is the bare ``YYYY-MM-DD`` date so it can be piped;
human failure output is one diagnostic per line.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from nextday.domain.types import Date
from nextday.output.console import render_lines
from nextday.services.next_day import INVALID_CALENDAR_DATE, INVALID_RANGE

if TYPE_CHECKING:
    from nextday.services.result import ServiceResult

# Validation failures read as per-field diagnostics; anything else is an error.
_DIAGNOSTIC_CODES = frozenset({INVALID_RANGE, INVALID_CALENDAR_DATE})


def format_date(date: Date) -> str:
    """Format *date* as ``YYYY-MM-DD``; the year is zero-padded to 4 digits."""
    return f"{date.year:04d}-{date.month:02d}-{date.day:02d}"


def format_result(
    result: ServiceResult,
    *,
    json_output: bool = False,
    no_color: bool = False,
) -> str:
    """Format a ServiceResult for display.

    Args:
        result: The service result to format.
        json_output: If True, return JSON; otherwise return human-readable text.
        no_color: Disable ANSI styling in human mode.
    """
    if json_output:
        return result.model_dump_json(indent=2)
    if result.ok:
        payload: dict[str, Any] = result.data["date"]
        return render_lines([format_date(Date(**payload))], "nextday.date", no_color=no_color)
    if result.error is None:
        return render_lines(["Unknown error"], "nextday.error", no_color=no_color)
    style = "nextday.diagnostic" if result.error.code in _DIAGNOSTIC_CODES else "nextday.error"
    return render_lines(result.error.diagnostics, style, no_color=no_color)
