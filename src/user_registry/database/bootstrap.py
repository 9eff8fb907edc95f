from __future__ import annotations

import logging

import click
from flask import Flask
from sqlalchemy import inspect

from ..users.sql_user_repository import UserRecord  # noqa: F401  registers the table on db.metadata
from .extensions import db

logger = logging.getLogger("user_registry.database")


def init_schema(app: Flask) -> list[str]:
    """Create missing tables (idempotent) and return the table names now present."""
    with app.app_context():
        db.create_all()
        tables = list_tables()
    logger.info("schema ready (tables=%d)", len(tables))
    return tables


def list_tables() -> list[str]:
    return sorted(inspect(db.engine).get_table_names())


def register_cli(app: Flask) -> None:
    @app.cli.command("init-db")
    def init_db_command():
        """Create the users table in the configured database."""
        tables = init_schema(app)
        click.echo(f"OK: schema applied -> {db.engine.url.render_as_string(hide_password=True)} (tables={len(tables)})")
