# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from dataclasses import dataclass


@dataclass(slots=True, frozen=True)
class ContactMessage:

    name: str
    email: str
    message: str


@dataclass(slots=True, frozen=True)
class ServiceRequest:

    name: str
    email: str
    service: str
    details: str
