"""
main.py
-------
Entry point for the userstore demonstration.

Responsibilities:
    - Open the database connection and start its watcher.
    - Run create, list, fetch-by-id, update and delete in order.
    - Close the connection on the way out.
"""

import asyncio
import sys

from db.connection import close, connect, start_watcher
from db.errors import StoreFailure
from repositories.user_repo import UserRepository
from utils.logger import get_logger

logger = get_logger(__name__)

DEMO_USER_ID = 1


async def run_demo(repo: UserRepository) -> None:
    """Run each repository operation once, printing what was read."""

    # ── 1. CREATE ─────────────────────────────────────────
    await repo.create("Htet Lin Maung", 27)

    # ── 2. READ ───────────────────────────────────────────
    for user in await repo.list_all():
        print(user)

    # ── 3. FETCH BY ID ────────────────────────────────────
    user = await repo.get_by_id(DEMO_USER_ID)
    if user:
        print(f"Fetched by ID -> {user}")
    else:
        print("User not found by given ID")

    # ── 4. UPDATE ─────────────────────────────────────────
    await repo.update_age(DEMO_USER_ID, 31)

    # ── 5. DELETE ─────────────────────────────────────────
    await repo.delete_by_id(DEMO_USER_ID)


async def amain() -> None:
    """Connect, run the demo and always release the connection."""
    conn = await connect()
    watcher = start_watcher(conn)
    try:
        await run_demo(UserRepository(conn))
    finally:
        await close(conn, watcher)


def main() -> None:
    try:
        asyncio.run(amain())
    except StoreFailure as e:
        logger.error(f"Demo aborted: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
