from __future__ import annotations

from enum import Enum


class SessionStatus(str, Enum):
    """Point-in-time status of a scheduled class session."""

    UPCOMING = "upcoming"
    ONGOING = "ongoing"
    EXPIRED = "expired"
    COMPLETED = "completed"
    SCHEDULED = "scheduled"


class AttendanceMark(str, Enum):
    """Per-student mark inside a roster."""

    PRESENT = "present"
    ABSENT = "absent"

    def flipped(self) -> "AttendanceMark":
        return AttendanceMark.ABSENT if self is AttendanceMark.PRESENT else AttendanceMark.PRESENT


class SelectAllState(str, Enum):
    """Label state of the bulk mark button."""

    ALL_PRESENT = "allPresent"
    ALL_ABSENT = "allAbsent"


class ScheduleDay(str, Enum):
    TODAY = "today"
    TOMORROW = "tomorrow"
