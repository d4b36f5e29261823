# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from authsvc.shared.config import AppConfig
from authsvc.shared.errors import ConfigError
from authsvc.shared.logging import logger

_DEV_SECRET = "dev_change_me"


def load_signing_secret(config: AppConfig) -> str:
    """Read the token signing secret once, at container build time."""

    secret = (config.auth.jwt_secret or "").strip()
    if not secret:
        raise ConfigError("AUTH_JWT_SECRET is empty")
    if secret == _DEV_SECRET:
        logger.warning("auth: using the development signing secret, set AUTH_JWT_SECRET")
    return secret
