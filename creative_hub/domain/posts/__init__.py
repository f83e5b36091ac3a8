# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .entities import Post
from .exceptions import PostNotFoundError
from .repositories import PostRepository

__all__ = ["Post", "PostNotFoundError", "PostRepository"]
