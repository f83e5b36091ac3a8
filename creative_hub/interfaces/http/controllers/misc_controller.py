# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from pathlib import Path

from flask import Blueprint, jsonify, send_from_directory

from creative_hub.domain.i18n import resolve_translation, supported_languages
from creative_hub.infrastructure.db import Database
from creative_hub.infrastructure.health import check_database
from creative_hub.interfaces.http.dto.envelope import MessageDTO, success

WELCOME_MESSAGE = "Welcome to Creative Services Hub API!"


class MiscController:
    def __init__(self, *, static_dir: Path, db: Database | None = None) -> None:
        self._static_dir = static_dir
        self._db = db

    def as_blueprint(self) -> Blueprint:
        bp = Blueprint("misc", __name__)
        bp.add_url_rule("/", view_func=self.index, methods=["GET"])
        bp.add_url_rule("/api/hello", view_func=self.hello, methods=["GET"])
        bp.add_url_rule("/api/health", view_func=self.health, methods=["GET"])
        bp.add_url_rule(
            "/api/i18n", view_func=self.translations, methods=["GET"], defaults={"lang": None}
        )
        bp.add_url_rule("/api/i18n/<lang>", view_func=self.translations, methods=["GET"])
        return bp

    def index(self):
        return send_from_directory(self._static_dir, "index.html")

    def hello(self):
        return success(MessageDTO(message=WELCOME_MESSAGE))

    def translations(self, lang: str | None):
        code, strings = resolve_translation(lang)
        return success(
            {"lang": code, "strings": strings, "languages": supported_languages()}
        )

    def health(self):
        status: dict[str, object] = {"ok": True}
        try:
            status["database"] = check_database(self._db)
        except Exception as exc:  # pragma: no cover
            status["ok"] = False
            status["database"] = f"error: {type(exc).__name__}"
        code = 200 if status["ok"] else 503
        return jsonify({"success": status["ok"], "data": status}), code
