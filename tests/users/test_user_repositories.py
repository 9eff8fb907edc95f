from __future__ import annotations

import pytest

from user_registry import create_app
from user_registry.common.pagination import PageRequest, Sort
from user_registry.core.exceptions import DuplicateEmailError, NotFoundError
from user_registry.users.memory_user_repository import InMemoryUserRepository
from user_registry.users.model import User
from user_registry.users.sql_user_repository import SQLUserRepository


@pytest.fixture(params=["sql", "memory"])
def repo(request):
    if request.param == "memory":
        yield InMemoryUserRepository()
        return

    app = create_app("user_registry.config.testing")
    with app.app_context():
        yield SQLUserRepository()


def _user(n: int) -> User:
    return User(f"first{n}", f"last{n}", f"user{n}@email.local", "12345678")


def test_save_assigns_increasing_ids(repo):
    first = repo.save(_user(1))
    second = repo.save(_user(2))
    assert first.id == 1
    assert second.id == 2
    assert repo.count() == 2


def test_save_with_id_replaces_record(repo):
    saved = repo.save(_user(1))
    repo.save(User("spock", "last1", "user1@email.local", "12345678", id=saved.id))
    assert repo.find_by_id(saved.id).firstname == "spock"
    assert repo.count() == 1


def test_unique_email_enforced_by_store(repo):
    repo.save(_user(1))
    with pytest.raises(DuplicateEmailError):
        repo.save(User("other", "person", "user1@email.local", "abcdefgh"))
    assert repo.count() == 1


def test_find_by_email(repo):
    saved = repo.save(_user(1))
    assert repo.find_by_email("user1@email.local").id == saved.id
    assert repo.find_by_email("nobody@email.local") is None


def test_find_all_pages_and_sorts(repo):
    for n in (3, 1, 2):
        repo.save(_user(n))

    page = repo.find_all(PageRequest(page=0, size=2, sort=Sort("email", descending=True)))
    assert [u.email for u in page.content] == ["user3@email.local", "user2@email.local"]
    assert page.total_elements == 3
    assert page.total_pages == 2

    tail = repo.find_all(PageRequest(page=1, size=2, sort=Sort("email", descending=True)))
    assert [u.email for u in tail.content] == ["user1@email.local"]

    past_end = repo.find_all(PageRequest(page=5, size=2))
    assert past_end.content == []
    assert past_end.total_elements == 3


def test_delete_by_id_and_delete_all(repo):
    first = repo.save(_user(1))
    repo.save(_user(2))

    assert repo.delete_by_id(first.id) is True
    assert repo.delete_by_id(first.id) is False
    assert repo.find_by_id(first.id) is None

    repo.delete_all()
    assert repo.count() == 0


def test_returned_users_are_detached_copies():
    repo = InMemoryUserRepository()
    saved = repo.save(_user(1))
    saved.firstname = "mutated"
    assert repo.find_by_id(saved.id).firstname == "first1"


def test_save_with_unknown_id_does_not_insert(repo):
    with pytest.raises(NotFoundError):
        repo.save(User("spock", "lname", "lf@email.local", "12345678", id=42))
    assert repo.find_by_id(42) is None
    assert repo.count() == 0
