"""ServiceResult and ServiceError — the service contract.

INVARIANT: Service operations return ServiceResult; validation failures
are values, never exceptions. The CLI maps ``error.code`` to an exit code.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field


class ServiceError(BaseModel):
    """Structured error payload within a ServiceResult."""

    model_config = {"frozen": True}

    code: str
    message: str
    detail: dict[str, Any] = Field(default_factory=dict)

    @property
    def diagnostics(self) -> list[str]:
        """Per-check diagnostic lines, or ``[message]`` when none were recorded."""
        lines = self.detail.get("diagnostics")
        return list(lines) if lines else [self.message]


class ServiceResult(BaseModel):
    """Return type for service operations.

    Attributes:
        ok: Whether the operation succeeded.
        op: Name of the operation (e.g. ``"next_day"``).
        data: Operation-specific payload on success.
        error: Structured error if ``ok`` is False.
    """

    model_config = {"frozen": True}

    ok: bool
    op: str
    data: dict[str, Any] = Field(default_factory=dict)
    error: ServiceError | None = None
