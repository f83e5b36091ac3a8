# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from typing import Any, NoReturn

from pydantic import ValidationError as PydanticValidationError

from .base import ValidationError


def format_pydantic_errors(exc: PydanticValidationError) -> list[dict[str, Any]]:
    errors_list = []

    for error in exc.errors(include_url=False, include_input=False):
        loc = error.get("loc", ())
        field_path = ".".join(str(part) for part in loc if part is not None)

        error_entry: dict[str, Any] = {
            "field": field_path or "body",
            "code": error.get("type", "value_error"),
            "message": error.get("msg", "Invalid value"),
        }

        ctx = error.get("ctx")
        if ctx:
            # ctx may carry the raised exception object
            error_entry["ctx"] = {
                key: value if isinstance(value, (int, float, str, bool)) else str(value)
                for key, value in ctx.items()
            }

        errors_list.append(error_entry)

    return errors_list


def raise_validation_error(exc: PydanticValidationError) -> NoReturn:
    raise ValidationError(details=format_pydantic_errors(exc)) from exc


__all__ = [
    "format_pydantic_errors",
    "raise_validation_error",
]
