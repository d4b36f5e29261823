# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Callable

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from authsvc.domain.users.entities import User as DomainUser
from authsvc.domain.users.exceptions import DuplicateUserError
from authsvc.domain.users.repositories import UserRepository
from authsvc.infrastructure.db.models import UserRow
from authsvc.infrastructure.unit_of_work import unit_of_work_scope
from authsvc.shared.errors import StoreError


def _to_domain(row: UserRow) -> DomainUser:
    return DomainUser(
        id=row.id,
        username=row.username,
        email=row.email,
        password_hash=row.password_hash,
        created_at=row.created_at,
    )


class SqlAlchemyUserRepository(UserRepository):
    def __init__(self, session_factory: Callable[[], Session]):
        self._session_factory = session_factory

    def find_by_username(self, username: str) -> DomainUser | None:
        try:
            with unit_of_work_scope(self._session_factory) as session:
                row = session.scalars(
                    select(UserRow).where(UserRow.username == username)
                ).first()
                return _to_domain(row) if row is not None else None
        except SQLAlchemyError as exc:
            raise StoreError(f"find_by_username failed: {type(exc).__name__}: {exc}") from exc

    def add(self, user: DomainUser) -> DomainUser:
        try:
            with unit_of_work_scope(self._session_factory) as session:
                row = UserRow(
                    username=user.username,
                    email=user.email,
                    password_hash=user.password_hash,
                    created_at=user.created_at,
                )
                session.add(row)
                session.flush()
                return _to_domain(row)
        except IntegrityError as exc:
            # username or email already present
            raise DuplicateUserError() from exc
        except SQLAlchemyError as exc:
            raise StoreError(f"add failed: {type(exc).__name__}: {exc}") from exc
