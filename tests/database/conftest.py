from __future__ import annotations

import threading
import time

import pytest
from mysql.connector import errors, pooling

from src.dayflow.dayflow.database.connection import DatabaseConnection, DBConfig


class RecordingCursor:
    """Dictionary cursor that logs statements and serves the pool's canned rows."""

    def __init__(self, pool: "FakePool", dictionary: bool):
        self._pool = pool
        self.dictionary = dictionary
        self.lastrowid = None
        self.rowcount = -1

    def execute(self, sql, params=None):
        self._pool.statements.append((" ".join(sql.split()), params))
        if self._pool.fail_with is not None:
            raise self._pool.fail_with
        self.lastrowid = self._pool.lastrowid
        self.rowcount = self._pool.rowcount

    def fetchall(self):
        return [dict(r) for r in self._pool.rows]

    def fetchone(self):
        rows = self.fetchall()
        return rows[0] if rows else None

    def close(self):
        self._pool.cursors_closed += 1


class FakeConnection:
    def __init__(self, pool: "FakePool"):
        self._pool = pool

    def cursor(self, dictionary=False):
        return RecordingCursor(self._pool, dictionary)

    def commit(self):
        self._pool.commits += 1

    def rollback(self):
        self._pool.rollbacks += 1

    def close(self):
        self._pool.give_back()


class FakePool:
    """Behaves like MySQLConnectionPool: never waits, raises when exhausted."""

    def __init__(self, **kwargs):
        self.kwargs = kwargs
        self.size = kwargs["pool_size"]
        self.statements = []
        self.rows = []
        self.lastrowid = None
        self.rowcount = 0
        self.fail_with = None
        self.commits = 0
        self.rollbacks = 0
        self.cursors_closed = 0
        self.out = 0
        self.peak = 0
        self._lock = threading.Lock()

    def get_connection(self):
        with self._lock:
            if self.out >= self.size:
                raise errors.PoolError(msg="Failed getting connection; pool exhausted")
            self.out += 1
            self.peak = max(self.peak, self.out)
        return FakeConnection(self)

    def give_back(self):
        with self._lock:
            self.out -= 1


class PoolLog(list):
    """Every pool built during a test; `build_delay` slows construction."""

    build_delay = 0.0


@pytest.fixture
def pools(monkeypatch):
    created = PoolLog()

    def make_pool(**kwargs):
        time.sleep(created.build_delay)
        pool = FakePool(**kwargs)
        created.append(pool)
        return pool

    monkeypatch.setattr(pooling, "MySQLConnectionPool", make_pool)
    return created


def _new_db(*, pool_size: int = 2, acquire_timeout: float = 2.0) -> DatabaseConnection:
    return DatabaseConnection(
        DBConfig(
            host="db.internal",
            port=3306,
            user="hr",
            password="s3cret",
            database="dayflow_hrms",
            pool_size=pool_size,
            acquire_timeout=acquire_timeout,
        )
    )


@pytest.fixture
def make_db(pools):
    return _new_db


@pytest.fixture
def db(pools):
    return _new_db()


@pytest.fixture
def pool(db):
    return db._get_pool()
