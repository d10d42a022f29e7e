"""
db/init_db.py
-------------
Creates the `users` table if it does not already exist.
Run this module directly to bootstrap a fresh database:
    python -m db.init_db
"""

import asyncio

import psycopg
from psycopg import AsyncConnection

from db.errors import StoreFailure
from utils.logger import get_logger

logger = get_logger(__name__)

SCHEMA_SQL = """
CREATE TABLE IF NOT EXISTS users (
    id      SERIAL PRIMARY KEY,
    name    TEXT NOT NULL,
    age     INTEGER NOT NULL
);
"""


async def create_tables(conn: AsyncConnection) -> None:
    """
    Execute the schema SQL on an open connection.
    Safe to call multiple times (uses IF NOT EXISTS).
    """
    try:
        await conn.execute(SCHEMA_SQL)
        logger.info("Database schema initialized successfully.")
    except psycopg.Error as e:
        logger.error(f"Failed to initialize schema: {e}")
        raise StoreFailure(f"schema bootstrap failed: {e}") from e


async def _main() -> None:
    from db.connection import close, connect

    conn = await connect()
    try:
        await create_tables(conn)
    finally:
        await close(conn)


if __name__ == "__main__":
    asyncio.run(_main())
    print("✅ Database schema created successfully.")
