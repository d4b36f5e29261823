# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from datetime import timedelta
from functools import cached_property

from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker

from authsvc.application.services.clock import SystemClock
from authsvc.application.services.password_hashing import WerkzeugPasswordHasher
from authsvc.application.services.tokens import JwtTokenService
from authsvc.application.use_cases.users.authorize_token import AuthorizeTokenUseCase
from authsvc.application.use_cases.users.login_user import LoginUserUseCase
from authsvc.application.use_cases.users.register_user import RegisterUserUseCase
from authsvc.domain.users.repositories import Clock
from authsvc.infrastructure.db import (
    create_engine_from_config,
    create_session_factory,
)
from authsvc.infrastructure.repositories.users.sqlalchemy_user_repository import (
    SqlAlchemyUserRepository,
)
from authsvc.infrastructure.signing_secret import load_signing_secret
from authsvc.interfaces.http.controllers.auth_controller import AuthController
from authsvc.interfaces.http.controllers.misc_controller import MiscController
from authsvc.interfaces.http.controllers.protected_controller import ProtectedController
from authsvc.shared.config import AppConfig


class Container:
    def __init__(self, config: AppConfig, *, clock: Clock | None = None) -> None:
        self.config = config
        self._clock = clock

    @cached_property
    def engine(self) -> Engine:
        return create_engine_from_config(self.config.database)

    @cached_property
    def session_factory(self) -> sessionmaker[Session]:
        return create_session_factory(self.engine)

    @cached_property
    def clock(self) -> Clock:
        return self._clock or SystemClock()

    @cached_property
    def signing_secret(self) -> str:
        return load_signing_secret(self.config)

    @cached_property
    def password_hasher(self) -> WerkzeugPasswordHasher:
        return WerkzeugPasswordHasher(iterations=self.config.auth.password_hash_iterations)

    @cached_property
    def token_service(self) -> JwtTokenService:
        return JwtTokenService(
            self.signing_secret,
            clock=self.clock,
            default_ttl=timedelta(seconds=self.config.auth.token_ttl_seconds),
        )

    @cached_property
    def user_repository(self) -> SqlAlchemyUserRepository:
        return SqlAlchemyUserRepository(self.session_factory)

    @cached_property
    def register_user_use_case(self) -> RegisterUserUseCase:
        return RegisterUserUseCase(
            users=self.user_repository,
            password_hasher=self.password_hasher,
            tokens=self.token_service,
            clock=self.clock,
        )

    @cached_property
    def login_user_use_case(self) -> LoginUserUseCase:
        return LoginUserUseCase(
            users=self.user_repository,
            password_hasher=self.password_hasher,
            tokens=self.token_service,
        )

    @cached_property
    def authorize_token_use_case(self) -> AuthorizeTokenUseCase:
        return AuthorizeTokenUseCase(tokens=self.token_service)

    @cached_property
    def auth_controller(self) -> AuthController:
        return AuthController(
            register_use_case=self.register_user_use_case,
            login_use_case=self.login_user_use_case,
        )

    @cached_property
    def protected_controller(self) -> ProtectedController:
        return ProtectedController(authorize_use_case=self.authorize_token_use_case)

    @cached_property
    def misc_controller(self) -> MiscController:
        return MiscController(engine=self.engine)
