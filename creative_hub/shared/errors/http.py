# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from http import HTTPStatus

from flask import Response, g, jsonify, request
from werkzeug.exceptions import HTTPException

from creative_hub.shared.logging import logger

from .base import AppError


def handle_app_error(error: AppError) -> tuple[Response, HTTPStatus]:
    response = jsonify(error.to_dict())
    return response, error.status


def _client_ip() -> str:
    forwarded = request.headers.get("X-Forwarded-For")
    if forwarded:
        return forwarded.split(",")[0].strip()
    return request.remote_addr or "unknown"


def register_error_handler(
    app,
    *,
    debug_mode: bool = False,
    default_status: HTTPStatus = HTTPStatus.INTERNAL_SERVER_ERROR,
) -> None:

    @app.errorhandler(AppError)
    def _handle_app_error(exc: AppError):
        logger.warning(f"Handled application error {exc.code} on {request.method} {request.path}")
        return handle_app_error(exc)

    @app.errorhandler(HTTPException)
    def _handle_http(exc: HTTPException):
        if not request.path.startswith("/api/"):
            return exc
        code = (exc.name or "http_error").lower().replace(" ", "_")
        payload = {
            "success": False,
            "errors": [{"code": code, "message": exc.description or exc.name}],
        }
        return jsonify(payload), exc.code or default_status

    @app.errorhandler(Exception)
    def _handle_unexpected(exc: Exception):
        user_id = getattr(g, "user_id", None)

        if debug_mode:
            logger.exception(
                f"Unhandled exception: {request.method} {request.path} "
                f"from {_client_ip()}, user={user_id}, "
                f"query={dict(request.args)}, body_size={len(request.data)}"
            )
        else:
            logger.error(f"Error: {type(exc).__name__} on {request.method} {request.path}")

        payload = {
            "success": False,
            "errors": [{"code": "internal_error", "message": "Internal server error."}],
        }
        return jsonify(payload), default_status
