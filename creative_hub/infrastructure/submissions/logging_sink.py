# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from creative_hub.domain.submissions.entities import ContactMessage, ServiceRequest
from creative_hub.domain.submissions.repositories import SubmissionSink
from creative_hub.infrastructure.audit import AuditAction, audit_log


class LoggingSubmissionSink(SubmissionSink):
    """Writes submissions to the audit log and keeps nothing."""

    def save_contact(self, contact: ContactMessage) -> None:
        audit_log(
            AuditAction.CONTACT_RECEIVED,
            details={
                "name": contact.name,
                "email": contact.email,
                "message": contact.message,
            },
        )

    def save_service_request(self, service_request: ServiceRequest) -> None:
        audit_log(
            AuditAction.SERVICE_REQUEST_RECEIVED,
            details={
                "name": service_request.name,
                "email": service_request.email,
                "service": service_request.service,
                "details": service_request.details,
            },
        )
