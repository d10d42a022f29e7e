"""
config.py
---------
Central configuration module. Loads all environment variables
from the .env file and exposes them as typed constants.
"""

import os
from dotenv import load_dotenv
from psycopg.conninfo import make_conninfo

load_dotenv()


# ── PostgreSQL ────────────────────────────────────────────
DB_HOST: str = os.getenv("DB_HOST", "localhost")
DB_PORT: int = int(os.getenv("DB_PORT", "5432"))
DB_NAME: str = os.getenv("DB_NAME", "database_name")
DB_USER: str = os.getenv("DB_USER", "postgres")
DB_PASS: str = os.getenv("DB_PASS", "secret")

# libpq key/value form with values quoted; DATABASE_URL wins when set
DATABASE_URL: str = os.getenv("DATABASE_URL") or make_conninfo(
    host=DB_HOST, port=DB_PORT, user=DB_USER, dbname=DB_NAME, password=DB_PASS
)

# ── Connection watcher ────────────────────────────────────
DB_WATCH_INTERVAL_SECONDS: float = float(os.getenv("DB_WATCH_INTERVAL_SECONDS", "30"))

# ── Logging ───────────────────────────────────────────────
LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()
