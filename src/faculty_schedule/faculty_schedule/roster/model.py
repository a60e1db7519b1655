from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Any, Optional, Sequence

from ..core.enums import AttendanceMark, SelectAllState


@dataclass(frozen=True)
class RosterEntry:
    """One student's mark within a session's roster."""

    student_number: int
    status: AttendanceMark = AttendanceMark.PRESENT
    name: Optional[str] = None

    def to_dict(self) -> dict:
        data = {"student_number": self.student_number, "status": self.status.value}
        if self.name:
            data["name"] = self.name
        return data


# A mixed roster keeps the bulk button on "mark all absent".
MIXED_SELECT_ALL_STATE = SelectAllState.ALL_PRESENT


def select_all_state_for(entries: Sequence[RosterEntry]) -> SelectAllState:
    if all(entry.status is AttendanceMark.PRESENT for entry in entries):
        return SelectAllState.ALL_PRESENT
    if all(entry.status is AttendanceMark.ABSENT for entry in entries):
        return SelectAllState.ALL_ABSENT
    return MIXED_SELECT_ALL_STATE


@dataclass(frozen=True)
class Roster:
    """Ordered, immutable roster; every operation returns a new one.

    The bulk indicator is derived from the entries, never stored.
    """

    entries: tuple[RosterEntry, ...] = ()

    def __len__(self) -> int:
        return len(self.entries)

    @property
    def is_empty(self) -> bool:
        return not self.entries

    @property
    def select_all_state(self) -> SelectAllState:
        return select_all_state_for(self.entries)

    def to_dict(self) -> dict:
        return {
            "students": [entry.to_dict() for entry in self.entries],
            "select_all_state": self.select_all_state.value,
        }


@dataclass(frozen=True)
class RosterSummary:
    present_count: int
    absent_count: int
    total: int

    def to_dict(self) -> dict:
        return {"present": self.present_count, "absent": self.absent_count, "total": self.total}


@dataclass(frozen=True)
class AttendanceSubmission:
    """Payload handed to the transport collaborator; never sent from here."""

    session_id: Any
    faculty_id: Any
    topic: str
    attendance_date: date
    roster: tuple[RosterEntry, ...]
    mark_completed: bool = True

    def to_payload(self) -> dict:
        return {
            "schedule_id": self.session_id,
            "faculty_id": self.faculty_id,
            "topic": self.topic,
            "attendance_date": self.attendance_date.strftime("%Y-%m-%d"),
            "students": [
                {"student_number": entry.student_number, "status": entry.status.value} for entry in self.roster
            ],
            "mark_class_completed": self.mark_completed,
        }


@dataclass(frozen=True)
class OpenedRoster:
    """What the attendance workflow starts from."""

    roster: Roster
    topic: Optional[str] = None
    source: str = "default"

    @property
    def previously_submitted(self) -> bool:
        return self.source == "history"
