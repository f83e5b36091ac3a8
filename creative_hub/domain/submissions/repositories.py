# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from typing import Protocol

from .entities import ContactMessage, ServiceRequest


class SubmissionSink(Protocol):
    """Destination for validated form submissions."""

    def save_contact(self, contact: ContactMessage) -> None: ...
    def save_service_request(self, service_request: ServiceRequest) -> None: ...
