"""Pure roster operations.

Every function takes a roster (or seed data) and returns a new value; nothing
here keeps state between calls.
"""

from __future__ import annotations

from datetime import date
from typing import Any, Iterable, Mapping, Optional

from ..common.validators import require_non_empty, require_positive_int
from ..core.enums import AttendanceMark, SelectAllState
from ..core.exceptions import ValidationError
from ..sessions.model import Session
from .model import AttendanceSubmission, Roster, RosterEntry, RosterSummary


def _field(item: Any, *names: str) -> Any:
    for name in names:
        if isinstance(item, Mapping):
            if item.get(name) is not None:
                return item[name]
        elif getattr(item, name, None) is not None:
            return getattr(item, name)
    return None


def _read_mark(value: Any) -> AttendanceMark:
    if isinstance(value, AttendanceMark):
        return value
    # Anything other than an explicit "present" counts as absent.
    if str(value or "").strip().lower() == AttendanceMark.PRESENT.value:
        return AttendanceMark.PRESENT
    return AttendanceMark.ABSENT


def _roster(entries: Iterable[RosterEntry]) -> Roster:
    return Roster(entries=tuple(entries))


def initialize(roster_size: int) -> Roster:
    size = require_positive_int(roster_size, "Roster size")
    return _roster(RosterEntry(student_number=number) for number in range(1, size + 1))


def initialize_from_roster(students: Iterable[Any]) -> Roster:
    """One present entry per student, in input order.

    Students may be mappings or objects carrying ``student_number`` (or the
    directory's ``roll_number``) and an optional ``name``.
    """

    entries = []
    seen: set[int] = set()
    for student in students:
        number = require_positive_int(_field(student, "student_number", "roll_number"), "Student number")
        if number in seen:
            raise ValidationError(f"Duplicate student number {number}")
        seen.add(number)
        name = _field(student, "name", "student_name")
        entries.append(RosterEntry(student_number=number, name=str(name) if name else None))
    return _roster(entries)


def hydrate(existing: Iterable[Any]) -> Roster:
    """Rebuild a roster from a previously submitted record, statuses verbatim.

    Recorded student numbers are kept. A record without one takes its 1-based
    position, or the smallest number no other record uses when that position
    is already taken.
    """

    records = list(existing)
    numbers: list[Optional[int]] = []
    used: set[int] = set()
    for record in records:
        raw_number = _field(record, "student_number", "roll_number")
        if raw_number is None:
            numbers.append(None)
            continue
        number = require_positive_int(raw_number, "Student number")
        if number in used:
            raise ValidationError(f"Duplicate student number {number}")
        used.add(number)
        numbers.append(number)

    spare = 1
    entries = []
    for position, (record, number) in enumerate(zip(records, numbers), start=1):
        if number is None:
            if position not in used:
                number = position
            else:
                while spare in used:
                    spare += 1
                number = spare
            used.add(number)
        name = _field(record, "name", "student_name")
        entries.append(
            RosterEntry(
                student_number=number,
                status=_read_mark(_field(record, "status")),
                name=str(name) if name else None,
            )
        )
    return _roster(entries)


def toggle(roster: Roster, index: int) -> Roster:
    if roster.is_empty:
        return roster
    if isinstance(index, bool) or not isinstance(index, int) or not 0 <= index < len(roster.entries):
        raise ValidationError(f"Roster index {index!r} is out of range")

    entries = list(roster.entries)
    current = entries[index]
    entries[index] = RosterEntry(
        student_number=current.student_number,
        status=current.status.flipped(),
        name=current.name,
    )
    return _roster(entries)


def invert_all(roster: Roster) -> Roster:
    """Set every entry to the opposite of the bulk indicator.

    This is a uniform set, not a per-entry flip: a mixed roster (indicator
    pinned to all-present) ends up entirely absent.
    """

    if roster.is_empty:
        return roster

    if roster.select_all_state is SelectAllState.ALL_PRESENT:
        mark = AttendanceMark.ABSENT
    else:
        mark = AttendanceMark.PRESENT

    entries = tuple(
        RosterEntry(student_number=entry.student_number, status=mark, name=entry.name) for entry in roster.entries
    )
    return Roster(entries=entries)


def summarize(roster: Roster) -> RosterSummary:
    present = sum(1 for entry in roster.entries if entry.status is AttendanceMark.PRESENT)
    total = len(roster.entries)
    return RosterSummary(present_count=present, absent_count=total - present, total=total)


def can_submit(topic: Optional[str], roster: Roster) -> bool:
    return bool(topic and str(topic).strip()) and not roster.is_empty


def roster_from_payload(data: Mapping[str, Any]) -> Roster:
    """Read a roster sent back by a client under ``students``.

    The bulk indicator is always recomputed from the entries; a client cannot
    pin it to a state its marks do not support.
    """

    students = data.get("students")
    if students is None:
        students = []
    if not isinstance(students, list):
        raise ValidationError("students must be a list")
    return hydrate(students)


def build_submission(
    session: Session,
    *,
    faculty_id: Any,
    topic: Optional[str],
    roster: Roster,
    submitted_on: date,
) -> AttendanceSubmission:
    if session.completed:
        raise ValidationError("Attendance has already been marked for this class")
    if roster.is_empty:
        raise ValidationError("No attendance data to submit")
    topic = require_non_empty(topic, "Session topic")

    return AttendanceSubmission(
        session_id=session.session_id,
        faculty_id=faculty_id,
        topic=topic,
        attendance_date=submitted_on,
        roster=roster.entries,
    )
