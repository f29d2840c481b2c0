import os

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "hours_db_test"),
}

STORAGE_BACKEND = os.getenv("STORAGE_BACKEND", "memory")
SESSION_FILE = None
WEEK_START = int(os.getenv("WEEK_START", "6"))

DEBUG = False
TESTING = True
LOG_LEVEL = os.getenv("LOG_LEVEL", "WARNING")

AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "0")))
SEED_DEFAULTS = bool(int(os.getenv("SEED_DEFAULTS", "1")))
DEFAULT_ADMIN_PASSWORD = "admin"
