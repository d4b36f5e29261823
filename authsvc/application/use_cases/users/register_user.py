# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from authsvc.domain.users.entities import AuthRequest, IssuedToken, User
from authsvc.domain.users.exceptions import DuplicateUserError
from authsvc.domain.users.repositories import (
    Clock,
    PasswordHasher,
    TokenService,
    UserRepository,
)
from authsvc.shared.logging import logger

from .validation import validate_registration


class RegisterUserUseCase:
    def __init__(
        self,
        *,
        users: UserRepository,
        password_hasher: PasswordHasher,
        tokens: TokenService,
        clock: Clock,
    ) -> None:
        self._users = users
        self._password_hasher = password_hasher
        self._tokens = tokens
        self._clock = clock

    def execute(self, request: AuthRequest) -> IssuedToken:
        valid = validate_registration(request)

        if self._users.find_by_username(valid.username) is not None:
            logger.info(f"auth.register: username taken username={valid.username}")
            raise DuplicateUserError()

        hashed = self._password_hasher.hash(valid.password)
        user = User(
            id=0,
            username=valid.username,
            email=valid.email or "",
            password_hash=hashed,
            created_at=self._clock.now(),
        )
        # The store's unique constraints decide concurrent registrations.
        persisted = self._users.add(user)

        issued = self._tokens.mint(persisted.username)
        logger.info(f"auth.register: ok user_id={persisted.id}")
        return issued
