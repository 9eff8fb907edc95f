from __future__ import annotations

from contextlib import contextmanager
from typing import Iterator

from sqlalchemy.orm import Session


@contextmanager
def session_scope(session: Session) -> Iterator[Session]:
    """Commit on success, roll back on any error and re-raise."""
    try:
        yield session
        session.commit()
    except Exception:
        session.rollback()
        raise
