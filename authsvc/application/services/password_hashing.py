"""Password hashing strategies."""

from __future__ import annotations

import secrets

from werkzeug.security import check_password_hash, generate_password_hash

from authsvc.domain.users.repositories import PasswordHasher
from authsvc.shared.errors import HashingError, VerificationError

DEFAULT_ITERATIONS = 600_000


class WerkzeugPasswordHasher(PasswordHasher):
    """Salted PBKDF2-SHA256 via Werkzeug.

    The salt and the iteration count travel inside the returned string
    (``pbkdf2:sha256:<iterations>$<salt>$<hex digest>``), so hashes made with
    an older work factor keep verifying after the setting changes.
    """

    def __init__(self, iterations: int = DEFAULT_ITERATIONS, salt_length: int = 16) -> None:
        self._method = f"pbkdf2:sha256:{iterations}"
        self._salt_length = salt_length
        self._dummy_hash: str | None = None

    @property
    def dummy_hash(self) -> str:
        if self._dummy_hash is None:
            self._dummy_hash = self.hash(secrets.token_urlsafe(16))
        return self._dummy_hash

    def hash(self, password: str) -> str:
        if not password:
            raise HashingError("empty password")
        try:
            return str(
                generate_password_hash(
                    password, method=self._method, salt_length=self._salt_length
                )
            )
        except (ValueError, TypeError, OverflowError) as exc:
            raise HashingError(f"{self._method}: {exc}") from exc

    def verify(self, password: str, hashed: str) -> bool:
        if not hashed or hashed.count("$") != 2:
            raise VerificationError("hash is not method$salt$digest")
        if not password:
            return False
        try:
            return bool(check_password_hash(hashed, password))
        except (ValueError, TypeError, OverflowError) as exc:
            raise VerificationError(str(exc)) from exc
