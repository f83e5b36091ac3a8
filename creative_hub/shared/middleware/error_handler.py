# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from flask import Flask

from creative_hub.shared.errors import register_error_handler


def configure_error_handling(app: Flask, *, debug_mode: bool = False) -> None:
    register_error_handler(app, debug_mode=debug_mode)
