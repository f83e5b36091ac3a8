# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol

from .entities import Post


class PostRepository(Protocol):
    def list_all(self) -> Sequence[Post]: ...
    def find_by_id(self, post_id: int) -> Post | None: ...
