from __future__ import annotations

import logging
from typing import Optional

from flask_sqlalchemy import SQLAlchemy
from sqlalchemy import delete, func, select
from sqlalchemy.exc import IntegrityError

from ..common.pagination import Page, PageRequest
from ..core.exceptions import DuplicateEmailError, NotFoundError
from ..database.extensions import db
from ..database.session import session_scope
from .model import User
from .repository import UserRepository

logger = logging.getLogger("user_registry.users.repository")


class UserRecord(db.Model):
    __tablename__ = "users"

    id = db.Column(db.Integer, primary_key=True, autoincrement=True)
    firstname = db.Column(db.String(255), nullable=False)
    lastname = db.Column(db.String(255), nullable=False)
    email = db.Column(db.String(255), unique=True, nullable=False)
    password = db.Column(db.String(255), nullable=False)

    def to_user(self) -> User:
        return User(
            firstname=self.firstname,
            lastname=self.lastname,
            email=self.email,
            password=self.password,
            id=self.id,
        )


class SQLUserRepository(UserRepository):
    """Flask-SQLAlchemy backed store; needs an active app context."""

    def __init__(self, database: SQLAlchemy = db):
        self._db = database

    @property
    def _session(self):
        return self._db.session

    def find_all(self, page_request: PageRequest) -> Page[User]:
        column = getattr(UserRecord, page_request.sort.property)
        order = column.desc() if page_request.sort.descending else column.asc()

        total = self._session.scalar(select(func.count()).select_from(UserRecord)) or 0
        rows = self._session.scalars(
            select(UserRecord).order_by(order).offset(page_request.offset).limit(page_request.size)
        ).all()
        return Page(content=[r.to_user() for r in rows], request=page_request, total_elements=int(total))

    def find_by_id(self, user_id: int) -> Optional[User]:
        record = self._session.get(UserRecord, user_id)
        return record.to_user() if record else None

    def find_by_email(self, email: str) -> Optional[User]:
        record = self._session.scalars(select(UserRecord).where(UserRecord.email == email)).first()
        return record.to_user() if record else None

    def save(self, user: User) -> User:
        try:
            with session_scope(self._session) as session:
                if user.id is None:
                    record = UserRecord()
                    session.add(record)
                else:
                    record = session.get(UserRecord, user.id)
                    if record is None:
                        raise NotFoundError(f"User {user.id} not found")

                record.firstname = user.firstname
                record.lastname = user.lastname
                record.email = user.email
                record.password = user.password
        except IntegrityError:
            # Concurrent writes with one email collide here, on the UNIQUE index.
            other = self.find_by_email(user.email)
            if other is not None and other.id != user.id:
                logger.info("rejected write for %r: email taken by id=%s", user, other.id)
                raise DuplicateEmailError(user.email) from None
            raise

        return record.to_user()

    def delete_by_id(self, user_id: int) -> bool:
        with session_scope(self._session) as session:
            record = session.get(UserRecord, user_id)
            if record is None:
                return False
            session.delete(record)
        return True

    def delete_all(self) -> None:
        with session_scope(self._session) as session:
            session.execute(delete(UserRecord))

    def count(self) -> int:
        return int(self._session.scalar(select(func.count()).select_from(UserRecord)) or 0)
