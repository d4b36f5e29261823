# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from http import HTTPStatus

from authsvc.shared.errors.base import DomainError


class DuplicateUserError(DomainError):
    code = "duplicate_user"
    status = HTTPStatus.CONFLICT


class InvalidCredentialsError(DomainError):
    code = "invalid_credentials"
    status = HTTPStatus.UNAUTHORIZED


class UnauthorizedError(DomainError):
    code = "unauthorized"
    status = HTTPStatus.UNAUTHORIZED


class TokenError(DomainError):
    """Base for token verification failures.

    These never reach a client as such; callers collapse them into
    ``UnauthorizedError`` and keep the concrete reason for the logs.
    """

    code = "token_invalid"
    status = HTTPStatus.UNAUTHORIZED


class ExpiredTokenError(TokenError):
    code = "token_expired"


class InvalidSignatureError(TokenError):
    code = "token_bad_signature"


class MalformedTokenError(TokenError):
    code = "token_malformed"
