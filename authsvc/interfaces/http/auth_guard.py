# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Callable
from functools import wraps
from typing import Any

from flask import g, request

from authsvc.application.use_cases.users.authorize_token import AuthorizeTokenUseCase
from authsvc.domain.users.exceptions import UnauthorizedError
from authsvc.shared.logging import logger

_BEARER_PREFIX = "Bearer "


def extract_bearer_token() -> str:
    auth = request.headers.get("Authorization", "")
    if not auth:
        logger.warning(f"No Authorization header on {request.method} {request.path}")
        raise UnauthorizedError()
    if not auth.startswith(_BEARER_PREFIX):
        logger.warning(f"Non-bearer Authorization header on {request.method} {request.path}")
        raise UnauthorizedError()
    return auth[len(_BEARER_PREFIX):].strip()


def bearer_required(authorize: AuthorizeTokenUseCase) -> Callable[[Callable[..., Any]], Callable[..., Any]]:
    """Reject the request unless it carries a valid bearer token.

    The verified subject is exposed to the view as ``g.subject``.
    """

    def decorator(f: Callable[..., Any]) -> Callable[..., Any]:
        @wraps(f)
        def inner(*args: Any, **kwargs: Any) -> Any:
            token = extract_bearer_token()
            g.subject = authorize.execute(token)
            logger.debug(f"Auth OK: subject={g.subject} {request.method} {request.path}")
            return f(*args, **kwargs)

        return inner

    return decorator
