"""Example: drive the service layer without HTTP.

Controllers are a thin layer; the CRUD rules live in UserService.
"""

from user_registry.common.pagination import PageRequest
from user_registry.container import build_container
from user_registry.users.model import User


def main():
    container = build_container(settings={"USER_STORE": "memory"})
    users = container.user_service

    saved = users.create_user(User("fname", "lname", "lf@email.local", "12345678"))
    print(saved)
    print(users.replace_user(saved.id, User("spock", "lname", "lf@email.local", "12345678")))
    print(users.list_users(PageRequest()).total_elements)


if __name__ == "__main__":
    main()
