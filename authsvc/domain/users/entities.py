# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime


@dataclass(slots=True, frozen=True)
class User:

    id: int
    username: str
    email: str
    password_hash: str
    created_at: datetime


@dataclass(slots=True, frozen=True)
class AuthRequest:
    """Raw credentials as submitted; ``email`` is only used by registration."""

    username: str
    password: str
    email: str | None = None

    def __repr__(self) -> str:
        return f"AuthRequest(username={self.username!r}, email={self.email!r}, password=***)"


@dataclass(slots=True, frozen=True)
class TokenClaims:

    subject: str
    issued_at: datetime
    expires_at: datetime


@dataclass(slots=True, frozen=True)
class IssuedToken:

    token: str
    subject: str
    expires_at: datetime
