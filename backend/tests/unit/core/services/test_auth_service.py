"""Unit tests for AuthService (jotter/core/services/auth_service.py)."""

import uuid
from datetime import datetime, timezone

import pytest

from jotter.config import Settings
from jotter.core.exceptions import ConfigurationError, DuplicateAccount, InvalidCredentials
from jotter.core.schemas.auth import LoginRequest, RegisterRequest
from jotter.core.services import auth_service as auth_service_module
from jotter.core.services.auth_service import AuthService
from jotter.security import decode_access_token, hash_password

SECRET = "unit-secret"


class DummyUser:
    def __init__(self, **kwargs):
        self.__dict__.update(kwargs)


def make_settings(**overrides) -> Settings:
    values = {"database_url": "sqlite+aiosqlite:///:memory:", "secret_key": SECRET}
    values.update(overrides)
    return Settings(**values)


class FakeUserRepo:
    """In-memory stand-in keyed by email."""

    def __init__(self):
        self.users = {}

    async def is_email_taken(self, email):
        return email in self.users

    async def create_user(self, user_data):
        user = DummyUser(
            id=uuid.uuid4(),
            created_at=datetime.now(timezone.utc),
            updated_at=datetime.now(timezone.utc),
            **user_data,
        )
        self.users[user.email] = user
        return user

    async def get_by_email(self, email, include_secret=False):
        return self.users.get(email)


@pytest.fixture
def repo(monkeypatch):
    fake = FakeUserRepo()
    monkeypatch.setattr(auth_service_module, "UserRepository", lambda s: fake)
    return fake


@pytest.fixture
def service(repo):
    return AuthService(session=None, settings=make_settings())


async def test_register_returns_token_for_new_account(service, repo):
    res = await service.register(
        RegisterRequest(name="Alice", email="alice@example.com", password="pw")
    )

    user = repo.users["alice@example.com"]
    payload = decode_access_token(res.token, SECRET)
    assert payload["sub"] == str(user.id)
    assert res.token_type == "bearer"
    assert res.expires_in == 3600


async def test_register_stores_hash_not_plaintext(service, repo):
    await service.register(RegisterRequest(name="Alice", email="a@example.com", password="pw-123"))

    user = repo.users["a@example.com"]
    assert user.password_hash != "pw-123"
    assert "password" not in user.__dict__


async def test_register_duplicate_email(service):
    await service.register(RegisterRequest(name="A", email="dup@example.com", password="one"))

    with pytest.raises(DuplicateAccount):
        await service.register(
            RegisterRequest(name="Someone Else", email="dup@example.com", password="two")
        )


async def test_login_success(service, repo):
    await service.register(RegisterRequest(name="Bob", email="bob@example.com", password="secret"))

    res = await service.login(LoginRequest(email="bob@example.com", password="secret"))
    payload = decode_access_token(res.token, SECRET)
    assert payload["sub"] == str(repo.users["bob@example.com"].id)


async def test_login_failures_are_indistinguishable(service, repo):
    repo.users["carol@example.com"] = DummyUser(
        id=uuid.uuid4(), name="Carol", email="carol@example.com", password_hash=hash_password("right")
    )

    with pytest.raises(InvalidCredentials) as unknown_email:
        await service.login(LoginRequest(email="nobody@example.com", password="right"))
    with pytest.raises(InvalidCredentials) as wrong_password:
        await service.login(LoginRequest(email="carol@example.com", password="wrong"))

    assert type(unknown_email.value) is type(wrong_password.value)
    assert unknown_email.value.message == wrong_password.value.message == "Invalid Credentials"


async def test_missing_secret_fails_at_mint_time(repo):
    service = AuthService(session=None, settings=make_settings(secret_key=None))

    with pytest.raises(ConfigurationError):
        await service.register(RegisterRequest(name="D", email="d@example.com", password="pw"))
