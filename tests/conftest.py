from __future__ import annotations

import pytest

from user_registry import create_app
from user_registry.users.memory_user_repository import InMemoryUserRepository
from user_registry.users.model import User
from user_registry.users.service import UserService

TESTING = "user_registry.config.testing"


def user_payload(**overrides) -> dict:
    payload = {
        "firstname": "fname",
        "lastname": "lname",
        "email": "lf@email.local",
        "password": "12345678",
    }
    payload.update(overrides)
    return payload


@pytest.fixture
def app():
    return create_app(TESTING)


@pytest.fixture(params=["sql", "memory"])
def client(request):
    return create_app(TESTING, USER_STORE=request.param).test_client()


@pytest.fixture
def users_repo():
    return InMemoryUserRepository()


@pytest.fixture
def service(users_repo):
    return UserService(users_repo)


@pytest.fixture
def new_user() -> User:
    return User("fname", "lname", "lf@email.local", "12345678")
