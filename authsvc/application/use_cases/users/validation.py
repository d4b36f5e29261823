# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Input policy for registration and login."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, EmailStr, Field
from pydantic import ValidationError as PydanticValidationError

from authsvc.domain.users.entities import AuthRequest
from authsvc.shared.errors.validation import raise_validation_error

USERNAME_MIN_LENGTH = 3
USERNAME_MAX_LENGTH = 50
PASSWORD_MIN_LENGTH = 6
PASSWORD_MAX_LENGTH = 50


class RegistrationInput(BaseModel):
    model_config = ConfigDict(frozen=True, strict=True)

    username: str = Field(min_length=USERNAME_MIN_LENGTH, max_length=USERNAME_MAX_LENGTH)
    email: EmailStr
    password: str = Field(min_length=PASSWORD_MIN_LENGTH, max_length=PASSWORD_MAX_LENGTH)


class LoginInput(BaseModel):
    model_config = ConfigDict(frozen=True, strict=True)

    username: str = Field(min_length=1)
    password: str = Field(min_length=1)


def _strip(value: Any) -> Any:
    # Passwords are never stripped, only identifiers.
    return value.strip() if isinstance(value, str) else value


def validate_registration(request: AuthRequest) -> AuthRequest:
    try:
        parsed = RegistrationInput(
            username=_strip(request.username),
            email=_strip(request.email),
            password=request.password,
        )
    except PydanticValidationError as exc:
        raise_validation_error(exc)
    return AuthRequest(username=parsed.username, password=parsed.password, email=str(parsed.email))


def validate_login(request: AuthRequest) -> AuthRequest:
    try:
        parsed = LoginInput(username=_strip(request.username), password=request.password)
    except PydanticValidationError as exc:
        raise_validation_error(exc)
    return AuthRequest(username=parsed.username, password=parsed.password)
