# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from http import HTTPStatus
from typing import Any, cast


@dataclass(slots=True)
class AppError(Exception):
    code: str
    status: HTTPStatus
    message: str = ""
    details: Sequence[Mapping[str, Any]] | None = None

    def __post_init__(self) -> None:
        Exception.__init__(self, self.code)

    def to_dict(self) -> dict[str, Any]:
        if self.details:
            errors = [dict(item) for item in self.details]
        else:
            errors = [{"code": self.code, "message": self.message or self.code}]
        return {"success": False, "errors": errors}


class DomainError(AppError):
    def __init__(
        self,
        *,
        code: str | None = None,
        status: HTTPStatus | None = None,
        message: str | None = None,
    ) -> None:
        resolved_code = code or cast(str, getattr(self, "code", "domain_error"))
        resolved_status = status or cast(
            HTTPStatus, getattr(self, "status", HTTPStatus.BAD_REQUEST)
        )
        resolved_message = message or cast(str, getattr(self, "message", ""))
        super().__init__(code=resolved_code, status=resolved_status, message=resolved_message)


class ValidationError(AppError):
    def __init__(
        self,
        code: str = "validation_error",
        *,
        details: Sequence[Mapping[str, Any]] | None = None,
    ) -> None:
        super().__init__(
            code=code,
            status=HTTPStatus.BAD_REQUEST,
            message="Request validation failed.",
            details=details,
        )


class RateLimitedError(AppError):
    def __init__(self) -> None:
        super().__init__(
            code="rate_limited",
            status=HTTPStatus.TOO_MANY_REQUESTS,
            message="Too many requests, please try again later.",
        )
