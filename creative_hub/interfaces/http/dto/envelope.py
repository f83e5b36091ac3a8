# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from typing import Any

from flask import Response, jsonify
from pydantic import BaseModel


class MessageDTO(BaseModel):
    message: str


def success(data: Any = None, status: int = 200) -> tuple[Response, int]:
    if isinstance(data, BaseModel):
        data = data.model_dump()
    return jsonify({"success": True, "data": data}), status
