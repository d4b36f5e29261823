# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from flask import Blueprint, Response, g, jsonify

from authsvc.application.use_cases.users.authorize_token import AuthorizeTokenUseCase
from authsvc.interfaces.http.auth_guard import bearer_required
from authsvc.interfaces.http.dto.auth import ProtectedResponseDTO


class ProtectedController:
    def __init__(self, *, authorize_use_case: AuthorizeTokenUseCase) -> None:
        self._authorize_use_case = authorize_use_case

    def protected(self) -> Response:
        return jsonify(ProtectedResponseDTO(user=g.subject).model_dump())

    def as_blueprint(self) -> Blueprint:
        bp = Blueprint("protected", __name__)
        guarded = bearer_required(self._authorize_use_case)(self.protected)
        bp.add_url_rule("/protected", endpoint="protected", view_func=guarded, methods=["GET"])
        return bp
