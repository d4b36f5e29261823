from __future__ import annotations

from datetime import timedelta

import pytest

from authsvc.application.services.tokens import JwtTokenService
from authsvc.application.use_cases.users.authorize_token import AuthorizeTokenUseCase
from authsvc.application.use_cases.users.login_user import LoginUserUseCase
from authsvc.application.use_cases.users.register_user import RegisterUserUseCase
from authsvc.domain.users.entities import AuthRequest, User
from authsvc.domain.users.exceptions import (
    DuplicateUserError,
    InvalidCredentialsError,
    UnauthorizedError,
)
from authsvc.domain.users.repositories import PasswordHasher, UserRepository
from authsvc.shared.errors import HashingError, StoreError, ValidationError, VerificationError


class InMemoryUserRepository(UserRepository):
    def __init__(self) -> None:
        self._users: dict[str, User] = {}
        self._seq = 1
        self.fail_with: Exception | None = None

    def find_by_username(self, username: str) -> User | None:
        if self.fail_with is not None:
            raise self.fail_with
        return self._users.get(username)

    def add(self, user: User) -> User:
        if user.username in self._users:
            raise DuplicateUserError()
        new_user = User(
            id=self._seq,
            username=user.username,
            email=user.email,
            password_hash=user.password_hash,
            created_at=user.created_at,
        )
        self._seq += 1
        self._users[new_user.username] = new_user
        return new_user


class DeterministicHasher(PasswordHasher):
    def __init__(self) -> None:
        self.verified: list[str] = []

    @property
    def dummy_hash(self) -> str:
        return "hashed:<dummy>"

    def hash(self, password: str) -> str:
        if not password:
            raise HashingError("empty password")
        return f"hashed:{password}"

    def verify(self, password: str, hashed: str) -> bool:
        if not hashed.startswith("hashed:"):
            raise VerificationError("unknown format")
        self.verified.append(hashed)
        return hashed == f"hashed:{password}"


@pytest.fixture()
def users() -> InMemoryUserRepository:
    return InMemoryUserRepository()


@pytest.fixture()
def fake_hasher() -> DeterministicHasher:
    return DeterministicHasher()


@pytest.fixture()
def register(users, fake_hasher, token_service, clock) -> RegisterUserUseCase:
    return RegisterUserUseCase(
        users=users, password_hasher=fake_hasher, tokens=token_service, clock=clock
    )


@pytest.fixture()
def login(users, fake_hasher, token_service) -> LoginUserUseCase:
    return LoginUserUseCase(users=users, password_hasher=fake_hasher, tokens=token_service)


@pytest.fixture()
def authorize(token_service) -> AuthorizeTokenUseCase:
    return AuthorizeTokenUseCase(tokens=token_service)


def _ann(**overrides: str) -> AuthRequest:
    fields = {"username": "ann", "email": "ann@x.com", "password": "secret1"}
    fields.update(overrides)
    return AuthRequest(**fields)


def test_register_user_success(register, users, authorize) -> None:
    issued = register.execute(_ann())

    stored = users.find_by_username("ann")
    assert stored is not None
    assert stored.email == "ann@x.com"
    assert stored.password_hash == "hashed:secret1"
    assert issued.subject == "ann"
    assert authorize.execute(issued.token) == "ann"


def test_register_user_duplicate_raises(register) -> None:
    register.execute(_ann())

    with pytest.raises(DuplicateUserError):
        register.execute(_ann(email="other@x.com", password="other12"))


def test_register_store_race_surfaces_as_duplicate(register, users, clock) -> None:
    # Another request inserted "ann" between the lookup and the insert.
    users.find_by_username = lambda username: None  # type: ignore[method-assign]
    users.add(
        User(id=0, username="ann", email="a@x.com", password_hash="hashed:x", created_at=clock.now())
    )

    with pytest.raises(DuplicateUserError):
        register.execute(_ann())


@pytest.mark.parametrize(
    ("overrides", "field"),
    [
        ({"username": "ab"}, "username"),
        ({"username": "a" * 51}, "username"),
        ({"username": "   "}, "username"),
        ({"password": "12345"}, "password"),
        ({"password": "p" * 51}, "password"),
        ({"email": "not-an-email"}, "email"),
        ({"email": ""}, "email"),
    ],
)
def test_register_validation_errors(register, users, overrides, field) -> None:
    with pytest.raises(ValidationError) as exc_info:
        register.execute(_ann(**overrides))

    assert field in exc_info.value.context["fields"]
    assert users.find_by_username("ann") is None


def test_register_strips_identifiers_but_not_password(register, users, login) -> None:
    register.execute(_ann(username="  ann ", email=" ann@x.com ", password=" secret1 "))

    stored = users.find_by_username("ann")
    assert stored is not None
    assert stored.email == "ann@x.com"
    assert stored.password_hash == "hashed: secret1 "
    with pytest.raises(InvalidCredentialsError):
        login.execute(AuthRequest(username="ann", password="secret1"))


def test_register_store_failure_propagates(register, users) -> None:
    users.fail_with = StoreError("connection refused")

    with pytest.raises(StoreError):
        register.execute(_ann())


def test_register_signing_failure_propagates(users, fake_hasher, clock) -> None:
    from authsvc.shared.errors import SigningError

    use_case = RegisterUserUseCase(
        users=users,
        password_hasher=fake_hasher,
        tokens=JwtTokenService("", clock=clock),
        clock=clock,
    )

    with pytest.raises(SigningError):
        use_case.execute(_ann())


def test_login_user_success(register, login, authorize) -> None:
    register.execute(_ann())

    issued = login.execute(AuthRequest(username="ann", password="secret1"))

    assert authorize.execute(issued.token) == "ann"


def test_login_wrong_password_and_unknown_user_look_the_same(register, login, fake_hasher) -> None:
    register.execute(_ann())

    with pytest.raises(InvalidCredentialsError) as wrong_password:
        login.execute(AuthRequest(username="ann", password="wrong"))
    with pytest.raises(InvalidCredentialsError) as unknown_user:
        login.execute(AuthRequest(username="doesnotexist", password="x"))

    assert wrong_password.value.to_dict() == unknown_user.value.to_dict()
    assert wrong_password.value.status == unknown_user.value.status
    # Both paths performed a hash comparison.
    assert fake_hasher.verified == ["hashed:secret1", "hashed:<dummy>"]


def test_login_with_corrupt_stored_hash_is_invalid_credentials(users, login, clock) -> None:
    users.add(
        User(id=0, username="ann", email="a@x.com", password_hash="garbage", created_at=clock.now())
    )

    with pytest.raises(InvalidCredentialsError):
        login.execute(AuthRequest(username="ann", password="secret1"))


@pytest.mark.parametrize(
    "request_", [AuthRequest(username="", password="x"), AuthRequest(username="ann", password="")]
)
def test_login_requires_both_fields(login, request_) -> None:
    with pytest.raises(ValidationError):
        login.execute(request_)


def test_login_store_failure_propagates(login, users) -> None:
    users.fail_with = StoreError("timeout")

    with pytest.raises(StoreError):
        login.execute(AuthRequest(username="ann", password="secret1"))


def test_authorize_collapses_every_failure_to_unauthorized(
    authorize, token_service, clock
) -> None:
    expired = token_service.issue("ann", timedelta(seconds=-1))
    header, payload, signature = token_service.issue("ann").split(".")
    flipped = "A" if payload[0] != "A" else "B"
    tampered = ".".join([header, flipped + payload[1:], signature])

    for token in (expired, tampered, "garbage", "", None):
        with pytest.raises(UnauthorizedError) as exc_info:
            authorize.execute(token)
        assert exc_info.value.to_dict() == {"error": "unauthorized"}


def test_end_to_end_register_login_authorize(register, login, authorize) -> None:
    token_a = register.execute(AuthRequest(username="bob", email="bob@x.com", password="password1"))
    token_b = login.execute(AuthRequest(username="bob", password="password1"))

    assert authorize.execute(token_a.token) == "bob"
    assert authorize.execute(token_b.token) == "bob"
