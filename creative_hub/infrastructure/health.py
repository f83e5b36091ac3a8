# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from creative_hub.infrastructure.db import Database


def check_database(db: Database | None) -> str:
    if db is None:
        return "disabled"
    db.ping()
    return "ok"


__all__ = ["check_database"]
