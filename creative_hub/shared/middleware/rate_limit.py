# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

import threading
import time
from collections import defaultdict, deque
from collections.abc import Callable
from dataclasses import dataclass

from flask import Flask, Request, request

from creative_hub.shared.errors import RateLimitedError
from creative_hub.shared.logging import logger


@dataclass
class Bucket:
    timestamps: deque[float]


class InMemoryRateLimiter:
    def __init__(
        self,
        limit: int,
        window_seconds: float,
        *,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self._limit = max(1, int(limit))
        self._window = max(0.1, float(window_seconds))
        self._clock = clock
        self._lock = threading.Lock()
        self._buckets: dict[str, Bucket] = {}
        self._last_sweep = clock()

    def allow(self, key: str) -> bool:
        now = self._clock()
        with self._lock:
            if now - self._last_sweep >= self._window:
                self._sweep(now)
            bucket = self._buckets.get(key)
            if bucket is None:
                bucket = self._buckets[key] = Bucket(deque(maxlen=self._limit))
            self._prune(bucket, now)
            if len(bucket.timestamps) >= self._limit:
                return False
            bucket.timestamps.append(now)
            return True

    def tracked_keys(self) -> int:
        with self._lock:
            return len(self._buckets)

    def _prune(self, bucket: Bucket, now: float) -> None:
        while bucket.timestamps and (now - bucket.timestamps[0]) >= self._window:
            bucket.timestamps.popleft()

    def _sweep(self, now: float) -> None:
        # Called with the lock held; forgets clients idle for a full window
        for key in list(self._buckets):
            bucket = self._buckets[key]
            self._prune(bucket, now)
            if not bucket.timestamps:
                del self._buckets[key]
        self._last_sweep = now


def client_key(req: Request) -> str:
    forwarded = req.headers.get("X-Forwarded-For", "").split(",")[0].strip()
    return forwarded or (req.remote_addr or "unknown")


def configure_rate_limiting(app: Flask, limiter: InMemoryRateLimiter | None) -> None:
    if limiter is None:
        return

    @app.before_request
    def _enforce_rate_limit() -> None:
        key = client_key(request)
        if not limiter.allow(key):
            logger.warning(f"rate_limit: rejected {request.method} {request.path} from {key}")
            raise RateLimitedError()


__all__ = ["InMemoryRateLimiter", "client_key", "configure_rate_limiting"]
