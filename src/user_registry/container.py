from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping

from .database.extensions import db
from .users.memory_user_repository import InMemoryUserRepository
from .users.repository import UserRepository
from .users.sql_user_repository import SQLUserRepository
from .users.service import UserService


@dataclass(frozen=True)
class Container:
    users_repo: UserRepository
    user_service: UserService


def build_users_repo(store: str) -> UserRepository:
    if store == "memory":
        return InMemoryUserRepository()
    if store == "sql":
        return SQLUserRepository(db)
    raise ValueError(f"Unknown USER_STORE: {store!r} (expected 'sql' or 'memory')")


def build_container(*, settings: Mapping[str, Any]) -> Container:
    users_repo = build_users_repo(str(settings.get("USER_STORE", "sql")).lower())
    user_service = UserService(users_repo)

    return Container(
        users_repo=users_repo,
        user_service=user_service,
    )
