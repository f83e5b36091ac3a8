# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

import atexit
import sys

from flask import Flask
from flask_cors import CORS
from pydantic import ValidationError

from creative_hub.container import Container
from creative_hub.shared.config import AppConfig, load_config
from creative_hub.shared.logging import logger, setup_logging
from creative_hub.shared.middleware.error_handler import configure_error_handling
from creative_hub.shared.middleware.rate_limit import configure_rate_limiting
from creative_hub.shared.middleware.request_logger import configure_request_logging

CONTAINER_EXTENSION = "creative_hub.container"


def get_container(app: Flask) -> Container:
    return app.extensions[CONTAINER_EXTENSION]


def create_app(config: AppConfig | None = None) -> Flask:
    config = config or load_config()
    container = Container(config)

    app = Flask(
        __name__,
        static_folder=str(config.static_dir),
        static_url_path="",
    )
    app.extensions[CONTAINER_EXTENSION] = container

    configure_error_handling(app, debug_mode=config.debug_logging)
    configure_request_logging(app, debug_mode=config.debug_logging)
    configure_rate_limiting(app, container.rate_limiter)

    CORS(
        app,
        resources={r"/api/*": {"origins": config.security.allowed_origins}},
        methods=["GET", "POST"],
        supports_credentials=False,
    )

    app.register_blueprint(container.misc_controller.as_blueprint())
    app.register_blueprint(container.forms_controller.as_blueprint())

    if config.is_persistent():
        container.require_database().init_db()
        app.register_blueprint(container.auth_controller.as_blueprint())
        app.register_blueprint(container.posts_controller.as_blueprint())

    @app.after_request
    def _add_security_headers(resp):
        resp.headers.setdefault("X-Frame-Options", "DENY")

        resp.headers.setdefault("Referrer-Policy", "no-referrer")

        resp.headers.setdefault("X-Content-Type-Options", "nosniff")

        resp.headers.setdefault("Cross-Origin-Resource-Policy", "same-origin")
        resp.headers.setdefault("Cross-Origin-Opener-Policy", "same-origin")

        resp.headers.setdefault(
            "Permissions-Policy",
            "geolocation=(), microphone=(), camera=(), payment=(), usb=(), magnetometer=(), gyroscope=()",
        )

        resp.headers.setdefault("X-Permitted-Cross-Domain-Policies", "none")

        if config.security.enable_hsts:
            resp.headers.setdefault(
                "Strict-Transport-Security",
                "max-age=31536000; includeSubDomains; preload",
            )

        return resp

    logger.info(f"Flask app initialized variant={config.variant}")
    return app


def main() -> None:
    try:
        config = load_config()
    except ValidationError as exc:
        print(f"\n❌ Refusing to start: invalid configuration\n{exc}\n", file=sys.stderr)
        sys.exit(1)

    setup_logging("DEBUG" if config.debug_logging else None)
    app = create_app(config)
    atexit.register(get_container(app).close)

    logger.info(f"Server running at http://localhost:{config.port}")
    app.run(host=config.host, port=config.port, debug=False)


if __name__ == "__main__":
    main()
