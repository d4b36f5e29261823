# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .users.entities import AuthRequest, IssuedToken, TokenClaims, User
from .users.exceptions import (
    DuplicateUserError,
    ExpiredTokenError,
    InvalidCredentialsError,
    InvalidSignatureError,
    MalformedTokenError,
    TokenError,
    UnauthorizedError,
)

__all__ = [
    "AuthRequest",
    "IssuedToken",
    "TokenClaims",
    "User",
    "DuplicateUserError",
    "ExpiredTokenError",
    "InvalidCredentialsError",
    "InvalidSignatureError",
    "MalformedTokenError",
    "TokenError",
    "UnauthorizedError",
]
