"""Pytest configuration and fixtures."""

import os

import psycopg
import pytest

# Verbose repository logs in failing test output
os.environ.setdefault("LOG_LEVEL", "DEBUG")

from repositories import user_repo  # noqa: E402


class FakeStore:
    """In-memory stand-in for the users table."""

    def __init__(self):
        self.rows: dict[int, tuple] = {}
        self.next_id = 1
        self.fail_with: Exception | None = None

    def seed(self, name: str, age: int) -> int:
        user_id = self.next_id
        self.rows[user_id] = (user_id, name, age)
        self.next_id += 1
        return user_id


class FakeCursor:
    """Understands exactly the statements issued by UserRepository."""

    def __init__(self, store: FakeStore):
        self.store = store
        self.rowcount = -1
        self._result: list[tuple] = []

    async def __aenter__(self):
        return self

    async def __aexit__(self, *exc):
        return False

    async def execute(self, sql, params=()):
        if self.store.fail_with is not None:
            raise self.store.fail_with
        rows = self.store.rows
        if sql == user_repo.INSERT_SQL:
            name, age = params
            self._result = [(self.store.seed(name, age),)]
            self.rowcount = 1
        elif sql == user_repo.SELECT_ALL_SQL:
            self._result = [rows[k] for k in sorted(rows)]
            self.rowcount = len(self._result)
        elif sql == user_repo.SELECT_BY_ID_SQL:
            (user_id,) = params
            self._result = [rows[user_id]] if user_id in rows else []
            self.rowcount = len(self._result)
        elif sql == user_repo.UPDATE_AGE_SQL:
            new_age, user_id = params
            self._result = []
            if user_id in rows:
                rows[user_id] = (user_id, rows[user_id][1], new_age)
                self.rowcount = 1
            else:
                self.rowcount = 0
        elif sql == user_repo.DELETE_SQL:
            (user_id,) = params
            self._result = []
            self.rowcount = 1 if rows.pop(user_id, None) else 0
        else:
            raise psycopg.ProgrammingError(f"unexpected statement: {sql}")

    async def fetchone(self):
        return self._result[0] if self._result else None

    async def fetchall(self):
        return list(self._result)


class FakeConnection:
    """Minimal async connection exposing what the application touches."""

    def __init__(self, store: FakeStore | None = None):
        self.store = store or FakeStore()
        self.closed = False
        self.executed: list[str] = []
        self.execute_error: Exception | None = None

    def cursor(self):
        return FakeCursor(self.store)

    async def execute(self, sql, params=None):
        if self.execute_error is not None:
            raise self.execute_error
        self.executed.append(sql)

    async def close(self):
        self.closed = True


@pytest.fixture
def store():
    """Empty in-memory users table."""
    return FakeStore()


@pytest.fixture
def conn(store):
    """Fake connection backed by `store`."""
    return FakeConnection(store)


@pytest.fixture
def repo(conn):
    """UserRepository bound to the fake connection."""
    return user_repo.UserRepository(conn)
