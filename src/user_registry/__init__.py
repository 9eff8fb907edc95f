"""User Registry package.

A single User resource exposed as a HAL+JSON CRUD API, organized like the
other feature packages: a thin Flask controller layer over service and
repository layers.
"""

from .main import create_app

__all__ = ["create_app"]
