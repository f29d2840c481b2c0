from __future__ import annotations

import importlib
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from dotenv import load_dotenv

from config import get_settings_module

from src.hours_tracker.hours_tracker.container import build_container, build_mysql_tables
from src.hours_tracker.hours_tracker.database.bootstrap import ensure_default_records


def main() -> None:
    load_dotenv(override=False)
    settings = importlib.import_module(get_settings_module())
    db_config = dict(settings.DB_CONFIG)

    container = build_container(tables=build_mysql_tables(db_config))
    container.store.load()
    added = ensure_default_records(container.store, admin_password=settings.DEFAULT_ADMIN_PASSWORD)

    print(
        ("OK: Seeded database -> " if added else "OK: Nothing to seed -> ")
        + f"{db_config.get('user')}@{db_config.get('host')}:{db_config.get('port', 3306)}/{db_config.get('database')}"
    )


if __name__ == "__main__":
    main()
