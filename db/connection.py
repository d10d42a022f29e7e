"""
db/connection.py
----------------
Manages the single PostgreSQL connection used by the repository.
Uses psycopg's AsyncConnection in autocommit mode, plus a background
watcher task that supervises the connection while it is in use.
"""

import asyncio
from contextlib import suppress
from typing import Optional

import psycopg
from psycopg import AsyncConnection

from config import DATABASE_URL, DB_WATCH_INTERVAL_SECONDS
from db.errors import StoreFailure
from utils.logger import get_logger

logger = get_logger(__name__)


async def connect(conninfo: Optional[str] = None) -> AsyncConnection:
    """
    Open the database connection.

    Args:
        conninfo: libpq connection string. Defaults to ``config.DATABASE_URL``.

    Returns:
        An open psycopg AsyncConnection with autocommit enabled.

    Raises:
        StoreFailure: If the database is unreachable or rejects the credentials.
    """
    try:
        conn = await AsyncConnection.connect(conninfo or DATABASE_URL, autocommit=True)
    except psycopg.Error as e:
        logger.error(f"Failed to connect to database: {e}")
        raise StoreFailure(f"could not connect to database: {e}") from e
    logger.info("Database connection established.")
    return conn


async def watch_connection(conn: AsyncConnection, interval: float) -> None:
    """
    Ping the connection every `interval` seconds until it is closed.

    The first failed ping is logged and ends the watch. The connection is
    not re-established; later statements on it raise StoreFailure.
    """
    while not conn.closed:
        await asyncio.sleep(interval)
        if conn.closed:
            break
        try:
            await conn.execute("SELECT 1")
        except psycopg.Error as e:
            logger.error(f"connection error: {e}")
            return
    logger.debug("Connection watcher stopped: connection closed.")


def start_watcher(conn: AsyncConnection, interval: Optional[float] = None) -> asyncio.Task:
    """Spawn `watch_connection` on the running event loop."""
    if interval is None:
        interval = DB_WATCH_INTERVAL_SECONDS
    return asyncio.create_task(watch_connection(conn, interval), name="db-connection-watcher")


async def close(conn: AsyncConnection, watcher: Optional[asyncio.Task] = None) -> None:
    """Stop the watcher (if any) and close the connection."""
    if watcher is not None:
        watcher.cancel()
        try:
            with suppress(asyncio.CancelledError):
                await watcher
        except Exception as e:
            logger.error(f"Connection watcher failed: {e!r}")
    if not conn.closed:
        await conn.close()
        logger.info("Database connection closed.")
