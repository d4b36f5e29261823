# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from authsvc.domain.users.entities import AuthRequest, IssuedToken
from authsvc.domain.users.exceptions import InvalidCredentialsError
from authsvc.domain.users.repositories import PasswordHasher, TokenService, UserRepository
from authsvc.shared.errors import VerificationError
from authsvc.shared.logging import logger

from .validation import validate_login


class LoginUserUseCase:
    def __init__(
        self,
        *,
        users: UserRepository,
        password_hasher: PasswordHasher,
        tokens: TokenService,
    ) -> None:
        self._users = users
        self._password_hasher = password_hasher
        self._tokens = tokens

    def execute(self, request: AuthRequest) -> IssuedToken:
        valid = validate_login(request)

        user = self._users.find_by_username(valid.username)
        # Unknown users still pay for a full hash comparison so timing and
        # outcome match a wrong password.
        stored_hash = user.password_hash if user is not None else self._password_hasher.dummy_hash
        try:
            password_valid = self._password_hasher.verify(valid.password, stored_hash)
        except VerificationError as exc:
            logger.error(f"auth.login: unreadable password hash username={valid.username}: {exc}")
            password_valid = False

        if user is None or not password_valid:
            logger.info(f"auth.login: rejected username={valid.username}")
            raise InvalidCredentialsError()

        issued = self._tokens.mint(user.username)
        logger.info(f"auth.login: ok user_id={user.id}")
        return issued
