# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from creative_hub.domain.submissions.entities import ContactMessage
from creative_hub.domain.submissions.repositories import SubmissionSink


class SubmitContactUseCase:
    def __init__(self, *, sink: SubmissionSink) -> None:
        self._sink = sink

    def execute(self, name: str, email: str, message: str) -> ContactMessage:
        contact = ContactMessage(name=name, email=email, message=message)
        self._sink.save_contact(contact)
        return contact
