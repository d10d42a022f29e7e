"""
repositories/user_repo.py
--------------------------
Data access layer for user records.
All SQL queries related to the `users` table live here.
"""

from typing import Optional

import psycopg
from psycopg import AsyncConnection

from db.errors import StoreFailure
from models.user import UserRecord
from utils.logger import get_logger

logger = get_logger(__name__)

INSERT_SQL = "INSERT INTO users (name, age) VALUES (%s, %s) RETURNING id;"
SELECT_ALL_SQL = "SELECT id, name, age FROM users ORDER BY id;"
SELECT_BY_ID_SQL = "SELECT id, name, age FROM users WHERE id = %s;"
UPDATE_AGE_SQL = "UPDATE users SET age = %s WHERE id = %s;"
DELETE_SQL = "DELETE FROM users WHERE id = %s;"


class UserRepository:
    """
    Repository for CRUD operations on the users table.

    Holds one open connection; every call is an independent round trip
    and nothing is cached between calls.
    """

    def __init__(self, conn: AsyncConnection):
        self.conn = conn

    # ── CREATE ────────────────────────────────────────────

    async def create(self, name: str, age: int) -> int:
        """
        Insert a new user.

        Args:
            name: Display name.
            age: Age in years.

        Returns:
            The id assigned by the store.

        Raises:
            StoreFailure: On constraint violation or lost connectivity.
        """
        try:
            async with self.conn.cursor() as cur:
                await cur.execute(INSERT_SQL, (name, age))
                row = await cur.fetchone()
        except psycopg.Error as e:
            logger.error(f"Failed to create user {name!r}: {e}")
            raise StoreFailure(f"failed to create user: {e}") from e
        logger.info(f"Created user #{row[0]} ({name})")
        return row[0]

    # ── READ ──────────────────────────────────────────────

    async def list_all(self) -> list[UserRecord]:
        """
        Fetch every user, ordered by id.

        Returns:
            List of UserRecord objects; empty when the table is empty.
        """
        try:
            async with self.conn.cursor() as cur:
                await cur.execute(SELECT_ALL_SQL)
                rows = await cur.fetchall()
        except psycopg.Error as e:
            logger.error(f"Failed to list users: {e}")
            raise StoreFailure(f"failed to list users: {e}") from e
        return [self._row_to_user(r) for r in rows]

    async def get_by_id(self, user_id: int) -> Optional[UserRecord]:
        """
        Fetch a single user by ID.

        Returns:
            A UserRecord, or None if no row matches.
        """
        try:
            async with self.conn.cursor() as cur:
                await cur.execute(SELECT_BY_ID_SQL, (user_id,))
                row = await cur.fetchone()
        except psycopg.Error as e:
            logger.error(f"Failed to fetch user #{user_id}: {e}")
            raise StoreFailure(f"failed to fetch user {user_id}: {e}") from e
        return self._row_to_user(row) if row else None

    # ── UPDATE ────────────────────────────────────────────

    async def update_age(self, user_id: int, new_age: int) -> bool:
        """
        Set the age of a user. Updating an unknown id is not an error.

        Returns:
            True if a row was updated, False otherwise.
        """
        try:
            async with self.conn.cursor() as cur:
                await cur.execute(UPDATE_AGE_SQL, (new_age, user_id))
                updated = cur.rowcount > 0
        except psycopg.Error as e:
            logger.error(f"Failed to update user #{user_id}: {e}")
            raise StoreFailure(f"failed to update user {user_id}: {e}") from e
        if updated:
            logger.info(f"Updated age of user #{user_id} to {new_age}")
        return updated

    # ── DELETE ────────────────────────────────────────────

    async def delete_by_id(self, user_id: int) -> bool:
        """
        Delete a user by ID. Deleting an unknown id is not an error.

        Returns:
            True if a row was deleted, False otherwise.
        """
        try:
            async with self.conn.cursor() as cur:
                await cur.execute(DELETE_SQL, (user_id,))
                deleted = cur.rowcount > 0
        except psycopg.Error as e:
            logger.error(f"Failed to delete user #{user_id}: {e}")
            raise StoreFailure(f"failed to delete user {user_id}: {e}") from e
        if deleted:
            logger.info(f"Deleted user #{user_id}")
        return deleted

    # ── HELPERS ───────────────────────────────────────────

    @staticmethod
    def _row_to_user(row: tuple) -> UserRecord:
        """Convert a database row tuple to a UserRecord."""
        return UserRecord(id=row[0], name=row[1], age=row[2])
