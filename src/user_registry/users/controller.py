from __future__ import annotations

from flask import Flask, Response, jsonify, request

from ..common.pagination import PageRequest
from ..core.constants import HAL_JSON, USER_SORTABLE_FIELDS
from ..core.exceptions import FieldViolation, ValidationError
from ..container import Container
from .model import User
from .representation import profile_document, root_document, user_collection, user_href, user_resource


def _hal(body, status: int = 200, headers=None) -> Response:
    response = jsonify(body)
    response.status_code = status
    response.content_type = HAL_JSON
    if headers:
        response.headers.update(headers)
    return response


def _user_payload() -> User:
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        raise ValidationError(
            "Request body must be a JSON object",
            [FieldViolation("body", "must be a JSON object", None)],
        )
    return User.from_dict(data)


def register(app: Flask, container: Container) -> None:
    users = container.user_service

    @app.route("/", methods=["GET"], endpoint="index")
    def index():
        return _hal(root_document())

    @app.route("/profile/users", methods=["GET"], endpoint="profile")
    def profile():
        return jsonify(profile_document())

    @app.route("/health", methods=["GET"], endpoint="health")
    def health():
        return jsonify({"status": "ok"})

    @app.route("/users", methods=["GET"], endpoint="list_users")
    def list_users():
        page_request = PageRequest.from_args(
            request.args,
            sortable=USER_SORTABLE_FIELDS,
            default_size=app.config["DEFAULT_PAGE_SIZE"],
            max_size=app.config["MAX_PAGE_SIZE"],
        )
        return _hal(user_collection(users.list_users(page_request)))

    @app.route("/users", methods=["POST"], endpoint="create_user")
    def create_user():
        saved = users.create_user(_user_payload())
        return _hal(user_resource(saved), 201, {"Location": user_href(saved.id)})

    @app.route("/users/<int:user_id>", methods=["GET"], endpoint="get_user")
    def get_user(user_id: int):
        return _hal(user_resource(users.get_user(user_id)))

    @app.route("/users/<int:user_id>", methods=["PUT"], endpoint="replace_user")
    def replace_user(user_id: int):
        return _hal(user_resource(users.replace_user(user_id, _user_payload())))

    @app.route("/users/<int:user_id>", methods=["DELETE"], endpoint="delete_user")
    def delete_user(user_id: int):
        users.delete_user(user_id)
        return Response(status=204)
