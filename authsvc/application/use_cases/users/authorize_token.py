# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from authsvc.domain.users.exceptions import TokenError, UnauthorizedError
from authsvc.domain.users.repositories import TokenService
from authsvc.shared.logging import logger


class AuthorizeTokenUseCase:
    def __init__(self, *, tokens: TokenService) -> None:
        self._tokens = tokens

    def execute(self, token: str | None) -> str:
        """Return the subject of a valid token.

        Every verification failure surfaces as ``UnauthorizedError``; the
        concrete reason is only logged.
        """
        try:
            claims = self._tokens.verify(token or "")
        except TokenError as exc:
            reason = (exc.context or {}).get("reason", "")
            logger.warning(f"auth.authorize: rejected kind={exc.code} {reason}".rstrip())
            raise UnauthorizedError() from exc
        logger.debug(f"auth.authorize: ok subject={claims.subject}")
        return claims.subject
