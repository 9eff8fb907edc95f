from __future__ import annotations

import itertools
import threading
from operator import attrgetter
from typing import Dict, Optional

from ..common.pagination import Page, PageRequest
from ..core.exceptions import DuplicateEmailError, NotFoundError
from .model import User
from .repository import UserRepository


class InMemoryUserRepository(UserRepository):
    """Dict-backed store, used for tests and ``USER_STORE=memory``.

    Stored values are copies, so callers cannot mutate records behind the store's back.
    """

    def __init__(self):
        self._users: Dict[int, User] = {}
        self._ids = itertools.count(1)
        self._lock = threading.Lock()

    def find_all(self, page_request: PageRequest) -> Page[User]:
        with self._lock:
            users = list(self._users.values())

        users.sort(key=attrgetter(page_request.sort.property), reverse=page_request.sort.descending)

        start = page_request.offset
        content = [u.with_id(u.id) for u in users[start : start + page_request.size]]
        return Page(content=content, request=page_request, total_elements=len(users))

    def find_by_id(self, user_id: int) -> Optional[User]:
        with self._lock:
            user = self._users.get(user_id)
        return user.with_id(user.id) if user else None

    def find_by_email(self, email: str) -> Optional[User]:
        with self._lock:
            for user in self._users.values():
                if user.email == email:
                    return user.with_id(user.id)
        return None

    def save(self, user: User) -> User:
        with self._lock:
            for other in self._users.values():
                if other.email == user.email and other.id != user.id:
                    raise DuplicateEmailError(user.email)

            if user.id is not None and user.id not in self._users:
                raise NotFoundError(f"User {user.id} not found")

            user_id = user.id if user.id is not None else next(self._ids)
            stored = user.with_id(user_id)
            self._users[user_id] = stored
        return stored.with_id(user_id)

    def delete_by_id(self, user_id: int) -> bool:
        with self._lock:
            return self._users.pop(user_id, None) is not None

    def delete_all(self) -> None:
        with self._lock:
            self._users.clear()

    def count(self) -> int:
        with self._lock:
            return len(self._users)
