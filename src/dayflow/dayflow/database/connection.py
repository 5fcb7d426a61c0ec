from __future__ import annotations

import threading
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Any, Dict, Iterator, Optional

from mysql.connector import errors, pooling
from mysql.connector.constants import ClientFlag

from ..core.constants import DEFAULT_POOL_ACQUIRE_TIMEOUT, DEFAULT_POOL_SIZE


@dataclass
class DBConfig:
    host: str
    port: int
    user: str
    password: str
    database: str
    pool_size: int = DEFAULT_POOL_SIZE
    acquire_timeout: float = DEFAULT_POOL_ACQUIRE_TIMEOUT


class DatabaseConnection:
    """Data-access handle shared by every repository of one application.

    Wraps a ``MySQLConnectionPool``. The pool itself never waits: once all of
    its connections are out, ``get_connection`` raises ``PoolError``. Callers
    are therefore queued on a semaphore sized to the pool, and only time out
    after ``acquire_timeout`` seconds.
    """

    def __init__(self, config: DBConfig, *, pool_name: str = "dayflow"):
        self._config = config
        self._pool_name = pool_name
        self._pool: Optional[pooling.MySQLConnectionPool] = None
        self._pool_lock = threading.Lock()
        self._slots = threading.BoundedSemaphore(int(config.pool_size))

    @property
    def config(self) -> DBConfig:
        return self._config

    def pool_options(self) -> Dict[str, Any]:
        return {
            "pool_name": self._pool_name,
            "pool_size": int(self._config.pool_size),
            "host": self._config.host,
            "port": int(self._config.port),
            "user": self._config.user,
            "password": self._config.password,
            "database": self._config.database,
            # UPDATE reports matched rows, so an unchanged PUT still counts as a hit.
            "client_flags": [ClientFlag.FOUND_ROWS],
        }

    def _get_pool(self) -> pooling.MySQLConnectionPool:
        # Created on first use so the app can start while MySQL is still down.
        if self._pool is None:
            with self._pool_lock:
                if self._pool is None:
                    self._pool = pooling.MySQLConnectionPool(**self.pool_options())
        return self._pool

    @contextmanager
    def borrow(self) -> Iterator[Any]:
        """Check out a pooled connection, waiting for a free one if needed."""
        timeout = self._config.acquire_timeout
        if not self._slots.acquire(timeout=timeout):
            raise errors.PoolError(msg=f"No free database connection after {timeout}s")
        try:
            conn = self._get_pool().get_connection()
            try:
                yield conn
            finally:
                conn.close()
        finally:
            self._slots.release()

    @contextmanager
    def cursor(self, *, dictionary: bool = True) -> Iterator[Any]:
        """Run one unit of work: commit on success, roll back on error."""
        with self.borrow() as conn:
            cur = conn.cursor(dictionary=dictionary)
            try:
                yield cur
                conn.commit()
            except Exception:
                conn.rollback()
                raise
            finally:
                cur.close()
