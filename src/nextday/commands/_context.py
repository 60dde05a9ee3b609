"""AppContext — settings, logging setup, and result emission for the CLI.

Created once per invocation.  ``emit`` is the only place that decides
between stdout and stderr and picks the process exit code.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from nextday.config.logging import configure_logging
from nextday.output.formatters import format_result
from nextday.services.next_day import (
    INVALID_CALENDAR_DATE,
    INVALID_INPUT,
    INVALID_RANGE,
    NextDayService,
)

if TYPE_CHECKING:
    from nextday.config.settings import NextDaySettings
    from nextday.services.result import ServiceResult

EXIT_CODES: dict[str, int] = {
    INVALID_RANGE: 1,
    INVALID_INPUT: 1,
    INVALID_CALENDAR_DATE: 2,
}


class AppContext:
    """Shared state for one ``nextday`` invocation."""

    def __init__(self, settings: NextDaySettings) -> None:
        self.settings = settings
        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

    @property
    def service(self) -> NextDayService:
        return NextDayService(self.settings.bounds)

    def emit(self, result: ServiceResult) -> None:
        """Format and output a ServiceResult with correct exit semantics.

        * Success (``result.ok``): writes to stdout, returns normally.
        * Failure: writes diagnostics to stderr and exits with the code
          mapped from ``result.error.code`` (1 for range, 2 for calendar).
        """
        output = format_result(result, json_output=self.settings.json_output)
        if result.ok:
            click.echo(output)
            return
        click.echo(output, err=True)
        code = EXIT_CODES.get(result.error.code, 1) if result.error else 1
        raise SystemExit(code)
