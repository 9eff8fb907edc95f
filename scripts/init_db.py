from __future__ import annotations

import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT / "src") not in sys.path:
    sys.path.insert(0, str(REPO_ROOT / "src"))

from user_registry import create_app
from user_registry.config import get_settings_module
from user_registry.database.bootstrap import init_schema


def main() -> None:
    app = create_app(get_settings_module(), AUTO_INIT_DB=False, USER_STORE="sql")
    tables = init_schema(app)
    print(f"OK: schema applied -> {app.config['SQLALCHEMY_DATABASE_URI'].split('@')[-1]} (tables={len(tables)})")


if __name__ == "__main__":
    main()
