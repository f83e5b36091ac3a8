# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from enum import Enum
from typing import Any

from creative_hub.shared.logging import logger


class AuditAction(str, Enum):
    # Authentication
    REGISTER = "register"
    LOGIN_SUCCESS = "login_success"
    LOGIN_FAILED = "login_failed"

    # Forms
    CONTACT_RECEIVED = "contact_received"
    SERVICE_REQUEST_RECEIVED = "service_request_received"


_SENSITIVE_KEYS = {"password", "token", "secret", "key"}


def _sanitize_details(details: dict[str, Any]) -> dict[str, Any]:
    sanitized = {}
    for key, value in details.items():
        key_lower = key.lower()

        if any(sensitive in key_lower for sensitive in _SENSITIVE_KEYS):
            sanitized[key] = "***REDACTED***"
        else:
            sanitized[key] = value

    return sanitized


class AuditLogger:
    @staticmethod
    def log(
        action: AuditAction,
        user_id: int | None = None,
        ip_address: str | None = None,
        details: dict[str, Any] | None = None,
        success: bool = True,
    ) -> None:
        safe_details = _sanitize_details(details) if details else {}

        log_message = (
            f"AUDIT: {action.value} | "
            f"user_id={user_id} | "
            f"ip={ip_address} | "
            f"success={success}"
        )

        if safe_details:
            log_message += f" | details={safe_details}"

        if success:
            logger.info(log_message)
        else:
            logger.warning(log_message)


audit = AuditLogger()


def audit_log(
    action: AuditAction,
    user_id: int | None = None,
    ip_address: str | None = None,
    details: dict[str, Any] | None = None,
    success: bool = True,
) -> None:
    audit.log(action, user_id, ip_address, details, success)


__all__ = [
    "AuditAction",
    "AuditLogger",
    "audit",
    "audit_log",
]
