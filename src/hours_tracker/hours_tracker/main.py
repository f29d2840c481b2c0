from __future__ import annotations

import importlib
import logging
from pathlib import Path

from dotenv import load_dotenv

from config import get_settings_module

from .container import Container, build_container, build_memory_tables, build_mysql_tables
from .core.constants import DEFAULT_WEEK_START
from .database.bootstrap import apply_schema, ensure_default_records, list_tables
from .session.slot import FileSessionSlot, MemorySessionSlot

logger = logging.getLogger(__name__)

SCHEMA_PATH = Path(__file__).resolve().parents[3] / "database" / "schema.sql"


def create_app() -> Container:
    load_dotenv(override=False)

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    debug = bool(getattr(settings, "DEBUG", False))
    logging.basicConfig(
        level=getattr(settings, "LOG_LEVEL", "DEBUG" if debug else "INFO"),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )

    backend = getattr(settings, "STORAGE_BACKEND", "mysql")
    if backend == "memory":
        tables = build_memory_tables()
    else:
        db_config = getattr(settings, "DB_CONFIG")
        # Helpful startup info to avoid "connected but no tables" confusion.
        logger.info(
            "settings=%s db=%s@%s:%s/%s",
            settings_module,
            db_config.get("user"),
            db_config.get("host"),
            db_config.get("port", 3306),
            db_config.get("database"),
        )
        if getattr(settings, "AUTO_INIT_DB", False):
            apply_schema(db_config, schema_path=SCHEMA_PATH)
            logger.info("Schema ready (tables=%d)", len(list_tables(db_config)))
        tables = build_mysql_tables(db_config)

    session_file = getattr(settings, "SESSION_FILE", None)
    container = build_container(
        tables=tables,
        session_slot=FileSessionSlot(session_file) if session_file else MemorySessionSlot(),
        week_start=int(getattr(settings, "WEEK_START", DEFAULT_WEEK_START)),
    )
    container.store.load()

    if getattr(settings, "SEED_DEFAULTS", False):
        ensure_default_records(container.store, admin_password=getattr(settings, "DEFAULT_ADMIN_PASSWORD", "admin"))

    user = container.auth_service.restore()
    if user:
        logger.info("Session restored for %s", user.username)
    return container
