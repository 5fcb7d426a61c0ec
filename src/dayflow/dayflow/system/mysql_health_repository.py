from __future__ import annotations

from datetime import datetime

from ..database.connection import DatabaseConnection
from .repository import HealthRepository


class MySQLHealthRepository(HealthRepository):
    def __init__(self, db: DatabaseConnection):
        self._db = db

    def current_time(self) -> datetime:
        with self._db.cursor() as cur:
            cur.execute("SELECT NOW() AS currentTime")
            return cur.fetchone()["currentTime"]
