from __future__ import annotations

import logging
from dataclasses import replace

from ..common.pagination import Page, PageRequest
from ..common.validators import collect_violations, require_email, require_min_length, require_non_empty, require_not_null
from ..core.constants import PASSWORD_MIN_LENGTH, PASSWORD_PLACEHOLDER
from ..core.exceptions import DuplicateEmailError, NotFoundError, ValidationError
from .model import User
from .repository import UserRepository

logger = logging.getLogger("user_registry.users.service")


def validate_user(user: User) -> None:
    """Check every field of ``user`` and raise one ValidationError listing all violations."""
    violations = collect_violations(
        [
            lambda: require_non_empty(user.firstname, "firstname"),
            lambda: require_non_empty(user.lastname, "lastname"),
            lambda: require_email(require_non_empty(user.email, "email"), "email"),
            lambda: require_min_length(require_not_null(user.password, "password"), "password", PASSWORD_MIN_LENGTH),
        ]
    )
    if violations:
        violations = [
            replace(v, invalid_value=PASSWORD_PLACEHOLDER) if v.property == "password" and v.invalid_value else v
            for v in violations
        ]
        raise ValidationError("User is invalid", violations, entity="User")


class UserService:
    """Use case: CRUD over users keyed by id.

    Every write is validated before the store is touched, so a rejected
    request leaves no partial state behind.
    """

    def __init__(self, users: UserRepository):
        self._users = users

    def list_users(self, page_request: PageRequest) -> Page[User]:
        return self._users.find_all(page_request)

    def get_user(self, user_id: int) -> User:
        user = self._users.find_by_id(user_id)
        if not user:
            raise NotFoundError(f"User {user_id} not found")
        return user

    def create_user(self, payload: User) -> User:
        # The store assigns the id; a client supplied one is ignored.
        candidate = payload.with_id(None)
        validate_user(candidate)
        self._ensure_email_free(candidate)

        saved = self._users.save(candidate)
        logger.info("created %r", saved)
        return saved

    def replace_user(self, user_id: int, payload: User) -> User:
        """Full-replace update: every field of ``payload`` overwrites the stored record."""
        self.get_user(user_id)

        candidate = payload.with_id(user_id)
        validate_user(candidate)
        self._ensure_email_free(candidate)

        saved = self._users.save(candidate)
        logger.info("updated %r", saved)
        return saved

    def delete_user(self, user_id: int) -> None:
        if not self._users.delete_by_id(user_id):
            raise NotFoundError(f"User {user_id} not found")
        logger.info("deleted user id=%s", user_id)

    def _ensure_email_free(self, candidate: User) -> None:
        owner = self._users.find_by_email(candidate.email)
        if owner is not None and owner.id != candidate.id:
            raise DuplicateEmailError(candidate.email)
