# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from http import HTTPStatus
from typing import Any, cast


@dataclass(slots=True)
class AppError(Exception):
    code: str
    status: HTTPStatus
    context: Mapping[str, Any] | None = None

    def __post_init__(self) -> None:
        Exception.__init__(self, self.code)

    def to_dict(self) -> dict[str, Any]:
        payload: dict[str, Any] = {"error": self.code}
        if self.context:
            payload["context"] = dict(self.context)
        return payload


class DomainError(AppError):
    def __init__(
        self,
        *,
        code: str | None = None,
        status: HTTPStatus | None = None,
        context: Mapping[str, Any] | None = None,
    ) -> None:
        resolved_code = code or cast(str, getattr(type(self), "code", "domain_error"))
        resolved_status = status or cast(
            HTTPStatus, getattr(type(self), "status", HTTPStatus.BAD_REQUEST)
        )
        super().__init__(code=resolved_code, status=resolved_status, context=context)


class InfrastructureError(AppError):
    """Failure of a collaborator or primitive.

    ``detail`` is kept for the logs only; ``to_dict`` never includes it.
    """

    def __init__(
        self,
        code: str = "infrastructure_error",
        *,
        status: HTTPStatus | None = None,
        detail: str | None = None,
    ) -> None:
        resolved_status = status or HTTPStatus.INTERNAL_SERVER_ERROR
        super().__init__(code=code, status=resolved_status)
        self.detail = detail or ""

    def to_dict(self) -> dict[str, Any]:
        return {"error": self.code}

    def __str__(self) -> str:
        if self.detail:
            return f"{self.code}: {self.detail}"
        return self.code


class ValidationError(AppError):
    def __init__(
        self,
        code: str = "validation_error",
        *,
        context: Mapping[str, Any] | None = None,
    ) -> None:
        super().__init__(
            code=code,
            status=HTTPStatus.UNPROCESSABLE_ENTITY,
            context=context,
        )


class StoreError(InfrastructureError):
    def __init__(self, detail: str | None = None) -> None:
        super().__init__(
            "store_unavailable",
            status=HTTPStatus.SERVICE_UNAVAILABLE,
            detail=detail,
        )


class HashingError(InfrastructureError):
    def __init__(self, detail: str | None = None) -> None:
        super().__init__("internal_error", detail=detail)


class VerificationError(InfrastructureError):
    def __init__(self, detail: str | None = None) -> None:
        super().__init__("internal_error", detail=detail)


class SigningError(InfrastructureError):
    def __init__(self, detail: str | None = None) -> None:
        super().__init__("internal_error", detail=detail)


class ConfigError(InfrastructureError):
    def __init__(self, detail: str | None = None) -> None:
        super().__init__("config_error", detail=detail)
