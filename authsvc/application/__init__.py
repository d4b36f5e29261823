# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .services.clock import SystemClock
from .services.password_hashing import WerkzeugPasswordHasher
from .services.tokens import DEFAULT_TTL, JwtTokenService
from .use_cases.users import (
    AuthorizeTokenUseCase,
    LoginUserUseCase,
    RegisterUserUseCase,
)

__all__ = [
    "DEFAULT_TTL",
    "AuthorizeTokenUseCase",
    "JwtTokenService",
    "LoginUserUseCase",
    "RegisterUserUseCase",
    "SystemClock",
    "WerkzeugPasswordHasher",
]
