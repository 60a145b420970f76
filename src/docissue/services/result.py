"""ServiceResult — what every issuance operation hands back to the CLI.

Services never raise domain errors past their public methods: a
rejected request comes back as ``ok=False`` with a :class:`ServiceError`
whose ``code`` names the failure (``RULE_VIOLATION``, ``TEMPLATE_ERROR``...).
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field


class ServiceError(BaseModel):
    """Error code, human message and JSON-safe detail."""

    model_config = {"frozen": True}

    code: str
    message: str
    detail: dict[str, Any] = Field(default_factory=dict)


class ServiceResult(BaseModel):
    """Outcome of one service operation.

    ``data`` holds the payload on success (for ``issue_document``: type,
    label, body, stamp, issued_on, student). ``meta`` carries the
    telemetry span tree when ``--verbose`` is on.
    """

    model_config = {"frozen": True}

    ok: bool
    op: str
    data: dict[str, Any] = Field(default_factory=dict)
    error: ServiceError | None = None
    meta: dict[str, Any] | None = None

    @classmethod
    def failure(
        cls,
        op: str,
        code: str,
        message: str,
        detail: dict[str, Any] | None = None,
    ) -> ServiceResult:
        return cls(
            ok=False,
            op=op,
            error=ServiceError(code=code, message=message, detail=detail or {}),
        )
