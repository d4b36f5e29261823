# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from datetime import datetime, timedelta
from typing import Protocol

from .entities import IssuedToken, TokenClaims, User


class UserRepository(Protocol):
    def find_by_username(self, username: str) -> User | None: ...
    def add(self, user: User) -> User: ...


class PasswordHasher(Protocol):
    @property
    def dummy_hash(self) -> str: ...
    def hash(self, password: str) -> str: ...
    def verify(self, password: str, hashed: str) -> bool: ...


class TokenService(Protocol):
    def issue(self, subject: str, ttl: timedelta | None = None) -> str: ...
    def mint(self, subject: str, ttl: timedelta | None = None) -> IssuedToken: ...
    def verify(self, token: str) -> TokenClaims: ...


class Clock(Protocol):
    def now(self) -> datetime: ...
