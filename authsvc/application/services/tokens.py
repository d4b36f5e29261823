"""Signed, time-limited bearer tokens (compact JWS, HS256 only)."""

from __future__ import annotations

import math
from datetime import UTC, datetime, timedelta
from typing import Any

import jwt

from authsvc.domain.users.entities import IssuedToken, TokenClaims
from authsvc.domain.users.exceptions import (
    ExpiredTokenError,
    InvalidSignatureError,
    MalformedTokenError,
)
from authsvc.domain.users.repositories import Clock, TokenService
from authsvc.shared.errors import SigningError

from .clock import SystemClock

DEFAULT_TTL = timedelta(hours=24)
_JWT_ALG = "HS256"
_REQUIRED_CLAIMS = ["sub", "iat", "exp"]


def _is_timestamp(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


class JwtTokenService(TokenService):
    """Issues and verifies HS256 tokens carrying ``sub``, ``iat`` and ``exp``.

    Expiry is checked against the injected clock rather than PyJWT's own,
    so ``verify`` only asks PyJWT for parsing and the signature check.
    """

    def __init__(
        self,
        secret: str | bytes,
        *,
        clock: Clock | None = None,
        default_ttl: timedelta = DEFAULT_TTL,
    ) -> None:
        self._secret = secret
        self._clock = clock or SystemClock()
        self._default_ttl = default_ttl

    @property
    def default_ttl(self) -> timedelta:
        return self._default_ttl

    def issue(self, subject: str, ttl: timedelta | None = None) -> str:
        return self.mint(subject, ttl).token

    def mint(self, subject: str, ttl: timedelta | None = None) -> IssuedToken:
        if not self._secret:
            raise SigningError("signing secret is not set")
        if not subject:
            raise SigningError("empty subject")

        now = self._clock.now()
        lifetime = self._default_ttl if ttl is None else ttl
        issued_at = int(now.timestamp())
        # Rounded up so a token never lives shorter than its ttl.
        expires_at = math.ceil((now + lifetime).timestamp())
        payload: dict[str, Any] = {"sub": subject, "iat": issued_at, "exp": expires_at}
        try:
            token = jwt.encode(payload, self._secret, algorithm=_JWT_ALG, headers={"typ": "JWT"})
        except (jwt.PyJWTError, TypeError, ValueError) as exc:
            raise SigningError(f"{type(exc).__name__}: {exc}") from exc
        return IssuedToken(
            token=token,
            subject=subject,
            expires_at=datetime.fromtimestamp(expires_at, UTC),
        )

    def verify(self, token: str) -> TokenClaims:
        if not token:
            raise MalformedTokenError(context={"reason": "empty token"})
        if not self._secret:
            raise InvalidSignatureError(context={"reason": "no signing secret"})

        try:
            payload = jwt.decode(
                token,
                self._secret,
                algorithms=[_JWT_ALG],
                options={
                    "verify_signature": True,
                    "verify_exp": False,
                    "verify_iat": False,
                    "verify_nbf": False,
                    "require": _REQUIRED_CLAIMS,
                },
            )
        except jwt.InvalidSignatureError as exc:
            raise InvalidSignatureError(context={"reason": str(exc)}) from exc
        except jwt.InvalidAlgorithmError as exc:
            # Anything but HS256 is refused outright.
            raise InvalidSignatureError(context={"reason": str(exc)}) from exc
        except jwt.PyJWTError as exc:
            raise MalformedTokenError(context={"reason": str(exc)}) from exc

        claims = self._claims_from_payload(payload)
        if self._clock.now() >= claims.expires_at:
            raise ExpiredTokenError(context={"expired_at": claims.expires_at.isoformat()})
        return claims

    @staticmethod
    def _claims_from_payload(payload: dict[str, Any]) -> TokenClaims:
        subject = payload.get("sub")
        issued_at = payload.get("iat")
        expires_at = payload.get("exp")
        if not isinstance(subject, str) or not subject:
            raise MalformedTokenError(context={"reason": "sub must be a non-empty string"})
        if not _is_timestamp(issued_at) or not _is_timestamp(expires_at):
            raise MalformedTokenError(context={"reason": "iat/exp must be numeric"})
        try:
            return TokenClaims(
                subject=subject,
                issued_at=datetime.fromtimestamp(issued_at, UTC),
                expires_at=datetime.fromtimestamp(expires_at, UTC),
            )
        except (OverflowError, OSError, ValueError) as exc:
            raise MalformedTokenError(context={"reason": str(exc)}) from exc
