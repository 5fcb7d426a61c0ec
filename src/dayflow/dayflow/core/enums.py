from __future__ import annotations

from enum import Enum


class LeaveStatus(str, Enum):
    """Known leave states. The column itself is free text."""

    PENDING = "Pending"
    APPROVED = "Approved"
    REJECTED = "Rejected"


class AttendanceStatus(str, Enum):
    """Known attendance states. The column itself is free text."""

    PRESENT = "Present"
    ABSENT = "Absent"
    LATE = "Late"
