"""Settings for one invocation — CLI flags, env vars, and TOML merged.

Priority chain (highest to lowest):
  1. Init kwargs  — CLI flags passed by Click
  2. Env vars     — ``NEXTDAY_*`` prefix, ``__`` for nesting
                    (``NEXTDAY_BOUNDS__YEAR__MIN=1583``)
  3. TOML file    — ``nextday.toml``, see :mod:`nextday.config.discovery`
  4. Code defaults — baked into :class:`CalendarBounds`
"""

from __future__ import annotations

from contextvars import ContextVar
from pathlib import Path
from typing import Any

import click
from pydantic import Field, ValidationError
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource

from nextday.config.discovery import find_config, read_config
from nextday.config.models import CalendarBounds

# Parsed TOML for the settings object under construction.
_toml_data: ContextVar[dict[str, Any] | None] = ContextVar("_toml_data", default=None)


class TomlSettingsSource(PydanticBaseSettingsSource):
    """Serve the TOML table loaded by :meth:`NextDaySettings.from_cli`."""

    def _loaded(self) -> dict[str, Any]:
        return _toml_data.get() or {}

    def get_field_value(self, field: Any, field_name: str) -> tuple[Any, str, bool]:
        data = self._loaded()
        return data.get(field_name), field_name, field_name in data

    def __call__(self) -> dict[str, Any]:
        return dict(self._loaded())


def _describe(exc: ValidationError, source: Path | None) -> str:
    where = f" ({source})" if source else ""
    problems = "; ".join(
        f"{'.'.join(str(part) for part in err['loc'])}: {err['msg']}" for err in exc.errors()
    )
    return f"Invalid configuration{where}: {problems}"


class NextDaySettings(BaseSettings):
    """Frozen settings held by :class:`~nextday.commands._context.AppContext`.

    Attributes:
        config_path: The TOML file the settings were read from, if any.
        bounds: Accepted day/month/year ranges for range validation.
    """

    model_config = {
        "frozen": True,
        "env_prefix": "NEXTDAY_",
        "env_nested_delimiter": "__",
    }

    config_path: Path | None = None

    json_output: bool = False
    verbose: bool = False
    log_json: bool = False

    bounds: CalendarBounds = Field(default_factory=CalendarBounds)

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        return init_settings, env_settings, TomlSettingsSource(settings_cls)

    @classmethod
    def from_cli(
        cls,
        *,
        config_path: str | None = None,
        start: Path | None = None,
        **cli_flags: Any,
    ) -> NextDaySettings:
        """Build settings for a CLI run.

        An explicit *config_path* wins over discovery from *start*. Bad TOML
        and out-of-calendar bounds from any source raise ClickException.
        """
        path = Path(config_path) if config_path else find_config(start)
        token = _toml_data.set(read_config(path) if path else {})
        try:
            return cls(config_path=path, **cli_flags)
        except ValidationError as exc:
            raise click.ClickException(_describe(exc, path)) from exc
        finally:
            _toml_data.reset(token)
