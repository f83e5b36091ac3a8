# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from dataclasses import asdict, dataclass
from datetime import datetime
from typing import Any


@dataclass(slots=True, frozen=True)
class Post:

    id: int
    title: str
    body: str
    created_at: datetime | None = None

    def to_dict(self) -> dict[str, Any]:
        payload = asdict(self)
        if self.created_at is not None:
            payload["created_at"] = self.created_at.isoformat()
        return payload
