from __future__ import annotations

from typing import Any, Dict

from flask import url_for

from ..common import hal
from ..common.pagination import Page, PageRequest
from ..core.constants import USER_COLLECTION, USER_RELATION
from .model import User


def user_href(user_id: int) -> str:
    return url_for("get_user", user_id=user_id, _external=True)


def users_href(page_request: PageRequest) -> str:
    return url_for(
        "list_users",
        page=page_request.page,
        size=page_request.size,
        sort=str(page_request.sort),
        _external=True,
    )


def user_resource(user: User) -> Dict[str, Any]:
    href = user_href(user.id)
    return hal.resource(user.to_dict(), {"self": hal.link(href), USER_RELATION: hal.link(href)})


def user_collection(page: Page[User]) -> Dict[str, Any]:
    return hal.paged_collection(
        USER_COLLECTION,
        (user_resource(u) for u in page.content),
        page,
        users_href,
        extra_links={"profile": hal.link(url_for("profile", _external=True))},
    )


def root_document() -> Dict[str, Any]:
    base = url_for("list_users", _external=True)
    return {
        "_links": {
            USER_COLLECTION: hal.link(base + "{?page,size,sort}", templated=True),
            "profile": hal.link(url_for("profile", _external=True)),
        }
    }


def profile_document() -> Dict[str, Any]:
    """Describe the User resource's properties for clients (ALPS-style descriptor list)."""
    return {
        "alps": {
            "version": "1.0",
            "descriptor": [
                {
                    "id": "user-representation",
                    "href": url_for("profile", _external=True),
                    "descriptor": [
                        {"name": name, "type": "SEMANTIC"}
                        for name in ("id", "firstname", "lastname", "email", "password")
                    ],
                },
                {"id": "get-users", "name": USER_COLLECTION, "type": "SAFE", "rt": "#user-representation"},
                {"id": "create-users", "name": USER_COLLECTION, "type": "UNSAFE", "rt": "#user-representation"},
                {"id": "get-user", "name": USER_RELATION, "type": "SAFE", "rt": "#user-representation"},
                {"id": "update-user", "name": USER_RELATION, "type": "IDEMPOTENT", "rt": "#user-representation"},
                {"id": "delete-user", "name": USER_RELATION, "type": "IDEMPOTENT", "rt": "#user-representation"},
            ],
        }
    }
