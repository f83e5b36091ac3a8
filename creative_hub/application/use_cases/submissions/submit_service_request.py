# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from creative_hub.domain.submissions.entities import ServiceRequest
from creative_hub.domain.submissions.repositories import SubmissionSink


class SubmitServiceRequestUseCase:
    def __init__(self, *, sink: SubmissionSink) -> None:
        self._sink = sink

    def execute(self, name: str, email: str, service: str, details: str) -> ServiceRequest:
        service_request = ServiceRequest(
            name=name, email=email, service=service, details=details
        )
        self._sink.save_service_request(service_request)
        return service_request
