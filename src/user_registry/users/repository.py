from __future__ import annotations

from typing import Optional, Protocol

from ..common.pagination import Page, PageRequest
from .model import User


class UserRepository(Protocol):
    """Repository interface for User.

    Note (DIP): the service layer depends on this interface, never on a concrete store.
    ``save`` inserts when ``user.id`` is None (assigning a new id) and replaces the
    stored record otherwise, raising ``NotFoundError`` if that record is gone.
    Implementations raise ``DuplicateEmailError`` when the write would make two
    users share an email.
    """

    def find_all(self, page_request: PageRequest) -> Page[User]:
        raise NotImplementedError

    def find_by_id(self, user_id: int) -> Optional[User]:
        raise NotImplementedError

    def find_by_email(self, email: str) -> Optional[User]:
        raise NotImplementedError

    def save(self, user: User) -> User:
        raise NotImplementedError

    def delete_by_id(self, user_id: int) -> bool:
        raise NotImplementedError

    def delete_all(self) -> None:
        raise NotImplementedError

    def count(self) -> int:
        raise NotImplementedError
