# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from http import HTTPStatus

from flask import Blueprint, Response, jsonify, request
from pydantic import ValidationError

from authsvc.application.use_cases.users.login_user import LoginUserUseCase
from authsvc.application.use_cases.users.register_user import RegisterUserUseCase
from authsvc.interfaces.http.dto.auth import AuthTokenDTO, LoginRequestDTO, RegisterRequestDTO
from authsvc.shared.errors.validation import raise_validation_error
from authsvc.shared.logging import logger


def _get_client_ip() -> str | None:
    ip_address = request.headers.get("X-Forwarded-For", request.remote_addr)
    if ip_address and "," in ip_address:
        ip_address = ip_address.split(",")[0].strip()
    return ip_address


class AuthController:
    def __init__(
        self,
        *,
        register_use_case: RegisterUserUseCase,
        login_use_case: LoginUserUseCase,
    ) -> None:
        self._register_use_case = register_use_case
        self._login_use_case = login_use_case

    def register(self) -> tuple[Response, int]:
        try:
            dto = RegisterRequestDTO.model_validate(request.get_json(silent=True) or {})
        except ValidationError as exc:
            raise_validation_error(exc)

        issued = self._register_use_case.execute(dto.to_request())

        payload = AuthTokenDTO.from_issued(issued, "User registered successfully")
        logger.info(f"auth.register: token issued subject={issued.subject} ip={_get_client_ip()}")
        return jsonify(payload.model_dump(mode="json")), HTTPStatus.CREATED

    def login(self) -> tuple[Response, int]:
        try:
            dto = LoginRequestDTO.model_validate(request.get_json(silent=True) or {})
        except ValidationError as exc:
            raise_validation_error(exc)

        issued = self._login_use_case.execute(dto.to_request())

        payload = AuthTokenDTO.from_issued(issued, "Login successful")
        logger.info(f"auth.login: token issued subject={issued.subject} ip={_get_client_ip()}")
        return jsonify(payload.model_dump(mode="json")), HTTPStatus.OK

    def as_blueprint(self) -> Blueprint:
        bp = Blueprint("auth", __name__, url_prefix="/auth")
        bp.add_url_rule("/register", view_func=self.register, methods=["POST"])
        bp.add_url_rule("/login", view_func=self.login, methods=["POST"])
        return bp
