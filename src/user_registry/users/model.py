from __future__ import annotations

from dataclasses import asdict, dataclass, field, replace
from typing import Any, Mapping, Optional

from ..core.constants import PASSWORD_PLACEHOLDER


@dataclass(unsafe_hash=True)
class User:
    """Domain entity: User.

    Plain data holder, no DB access. The primary key is generated by the store
    because a user may change email address; ``email`` is unique amongst all
    users. ``password`` is expected to be a base64 encoded hash, salted by the
    caller, so it is never hashed here.

    Equality and hashing use firstname, lastname, email and password only, so
    the same user compares equal before and after an id is assigned.
    """

    firstname: Optional[str] = None
    lastname: Optional[str] = None
    email: Optional[str] = None
    password: Optional[str] = None
    id: Optional[int] = field(default=None, compare=False)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "User":
        """Build a User from a request payload or a stored row (unknown keys are ignored)."""
        return cls(
            firstname=data.get("firstname"),
            lastname=data.get("lastname"),
            email=data.get("email"),
            password=data.get("password"),
            id=data.get("id"),
        )

    def to_dict(self) -> dict:
        return asdict(self)

    def with_id(self, user_id: Optional[int]) -> "User":
        return replace(self, id=user_id)

    def __repr__(self) -> str:
        password = PASSWORD_PLACEHOLDER if self.password is not None else ""
        return (
            f"User(id={self.id!r}, firstname={self.firstname!r}, lastname={self.lastname!r}, "
            f"email={self.email!r}, password={password!r})"
        )

    __str__ = __repr__
