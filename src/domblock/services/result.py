"""Return type shared by every service call.

Services never raise for bad input. They return ``ok=False`` with a
:class:`ServiceError` whose ``code`` names the input problem.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field


class ServiceError(BaseModel):
    """Why a call failed: a stable ``code``, a message and context values."""

    model_config = {"frozen": True}

    code: str
    message: str
    detail: dict[str, Any] = Field(default_factory=dict)


class ServiceResult(BaseModel):
    """Outcome of one service call.

    Attributes:
        op: Operation name, ``check``, ``classify`` or ``lookup``.
        data: Verdicts and counts on success.
        warnings: Problems that did not stop the call, printed to stderr.
        meta: Telemetry spans when ``--verbose`` is on.
    """

    model_config = {"frozen": True}

    ok: bool
    op: str
    data: dict[str, Any] = Field(default_factory=dict)
    warnings: list[str] = Field(default_factory=list)
    error: ServiceError | None = None
    meta: dict[str, Any] | None = None
