import os

from . import database_uri

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "user_registry"),
}

SQLALCHEMY_DATABASE_URI = database_uri(DB_CONFIG)
SQLALCHEMY_TRACK_MODIFICATIONS = False

# 'sql' (SQLAlchemy) or 'memory' (process-local dict, lost on restart)
USER_STORE = os.getenv("USER_STORE", "sql")

DEFAULT_PAGE_SIZE = int(os.getenv("DEFAULT_PAGE_SIZE", "20"))
MAX_PAGE_SIZE = int(os.getenv("MAX_PAGE_SIZE", "1000"))

DEBUG = True
LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")

# If enabled, the app creates missing tables on startup (idempotent)
AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "1")))
