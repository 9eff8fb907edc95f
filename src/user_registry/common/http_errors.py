from __future__ import annotations

import logging

from flask import Flask, jsonify
from werkzeug.exceptions import HTTPException

from ..core.exceptions import ConflictError, NotFoundError, ValidationError

logger = logging.getLogger("user_registry.http")


def _error(status: int, message: str, **extra):
    body = {"status": status, "message": message}
    body.update(extra)
    response = jsonify(body)
    response.status_code = status
    return response


def register_error_handlers(app: Flask) -> None:
    """Map domain exceptions to JSON error responses.

    Anything else propagates to Flask's default 500 handling.
    """

    @app.errorhandler(ValidationError)
    def on_validation_error(e: ValidationError):
        logger.info("validation failed: %s", e)
        errors = [
            {
                "entity": e.entity,
                "property": v.property,
                "message": v.message,
                "invalidValue": v.invalid_value,
            }
            for v in e.violations
        ]
        return _error(400, str(e), errors=errors)

    @app.errorhandler(NotFoundError)
    def on_not_found(e: NotFoundError):
        return _error(404, str(e))

    @app.errorhandler(ConflictError)
    def on_conflict(e: ConflictError):
        logger.warning("conflict: %s", e)
        return _error(409, str(e))

    @app.errorhandler(HTTPException)
    def on_http_exception(e: HTTPException):
        response = _error(e.code or 500, e.description or e.name)
        for key, value in e.get_headers():
            if key.lower() != "content-type":
                response.headers[key] = value
        return response
