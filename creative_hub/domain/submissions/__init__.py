# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .entities import ContactMessage, ServiceRequest
from .repositories import SubmissionSink

__all__ = ["ContactMessage", "ServiceRequest", "SubmissionSink"]
