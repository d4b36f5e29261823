# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from http import HTTPStatus

from flask import Blueprint, Response
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError

from authsvc.infrastructure.health import check_database
from authsvc.shared.logging import logger


class MiscController:
    def __init__(self, *, engine: Engine) -> None:
        self._engine = engine

    def as_blueprint(self) -> Blueprint:
        bp = Blueprint("misc", __name__)
        bp.add_url_rule("/api", view_func=self.welcome, methods=["GET"])
        bp.add_url_rule("/dbstatus", view_func=self.db_status, methods=["GET"])
        return bp

    def welcome(self) -> str:
        return "Welcome to the GO-X auth API!"

    def db_status(self) -> tuple[Response | str, int]:
        try:
            check_database(self._engine)
        except SQLAlchemyError as exc:
            logger.error(f"dbstatus: database unreachable: {type(exc).__name__}")
            return "Database connection failed", HTTPStatus.SERVICE_UNAVAILABLE
        return "Successfully connected to the database!", HTTPStatus.OK
