from __future__ import annotations

from datetime import datetime
from typing import Protocol


class HealthRepository(Protocol):
    def current_time(self) -> datetime:
        """Round-trip to the database and return its clock."""

        raise NotImplementedError
