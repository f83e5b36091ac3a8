# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from http import HTTPStatus

from creative_hub.shared.errors.base import DomainError


class PostNotFoundError(DomainError):
    code = "post_not_found"
    status = HTTPStatus.NOT_FOUND
    message = "Post not found"
