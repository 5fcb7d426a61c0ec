from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional


@dataclass(frozen=True)
class Employee:
    """Domain entity: Employee.

    Note: the password hash is never part of this object; reads go through
    the public column set only.
    """

    id: int
    name: str
    email: str
    position: Optional[str]
    department: Optional[str]
    date_of_joining: Optional[date]
