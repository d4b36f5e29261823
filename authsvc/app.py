# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

import importlib
from typing import Any, Protocol, cast

from flask import Flask

from authsvc.infrastructure.container import Container
from authsvc.infrastructure.db import init_db
from authsvc.shared.config import AppConfig, load_config
from authsvc.shared.logging import logger, setup_logging
from authsvc.shared.middleware.error_handler import configure_error_handling
from authsvc.shared.middleware.request_logger import configure_request_logging
from authsvc.shared.middleware.security_headers import configure_security_headers


class _CORSCallable(Protocol):
    def __call__(self, app: Flask, **kwargs: Any) -> Any: ...


_flask_cors = importlib.import_module("flask_cors")
CORS = cast(_CORSCallable, _flask_cors.CORS)


def create_app(config: AppConfig | None = None, *, container: Container | None = None) -> Flask:
    config = config or (container.config if container is not None else load_config())
    container = container or Container(config)

    setup_logging(config.log_level, log_file=config.log_file)
    init_db(container.engine)
    # Fail at startup, not on the first login, when the secret is missing.
    _ = container.token_service
    # Unknown-user logins compare against this hash; build it before serving.
    _ = container.password_hasher.dummy_hash

    app = Flask(__name__)
    app.extensions["authsvc.container"] = container

    configure_error_handling(app, debug_mode=config.debug_logging)
    configure_request_logging(app, debug_mode=config.debug_logging)
    configure_security_headers(app, enable_hsts=config.security.enable_hsts)

    cors_kwargs: dict[str, object] = {
        "resources": {r"/*": {"origins": config.security.allowed_origins}}
    }
    CORS(app, **cors_kwargs)

    app.register_blueprint(container.misc_controller.as_blueprint())
    app.register_blueprint(container.auth_controller.as_blueprint())
    app.register_blueprint(container.protected_controller.as_blueprint())

    logger.info(f"Flask app initialized env={config.app_env}")
    return app
