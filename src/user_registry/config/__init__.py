import os
from urllib.parse import quote_plus


def get_settings_module() -> str:
    # APP_ENV picks the settings module, default 'development'
    env = os.getenv("APP_ENV", "development").lower()

    if env in {"prod", "production"}:
        return "user_registry.config.production"

    if env in {"test", "testing"}:
        return "user_registry.config.testing"

    return "user_registry.config.development"


def database_uri(db_config: dict) -> str:
    """DATABASE_URL wins; otherwise build a mysql-connector URI from DB_CONFIG."""
    url = os.getenv("DATABASE_URL")
    if url:
        return url
    return (
        f"mysql+mysqlconnector://{db_config['user']}:{quote_plus(db_config['password'])}"
        f"@{db_config['host']}:{db_config['port']}/{db_config['database']}"
    )
