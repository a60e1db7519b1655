from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime, time
from typing import Any, Mapping, Optional

from ..common.datetime_utils import ParsedTime, parse_iso_date, parse_time_of_day
from ..core.enums import SessionStatus
from ..core.exceptions import ValidationError


def _flag(value: Any) -> bool:
    if isinstance(value, str):
        return value.strip().lower() in {"true", "1", "yes"}
    return bool(value)


@dataclass(frozen=True)
class Session:
    """Domain entity: one scheduled class meeting."""

    session_id: Any
    date: date
    start_time: ParsedTime
    end_time: ParsedTime
    completed: bool = False
    topic: Optional[str] = None
    subject_name: str = ""
    subject_code: str = ""
    year: str = ""
    department: str = ""
    section: str = ""
    venue: str = ""

    def start_at(self) -> Optional[datetime]:
        if not self.start_time.ok:
            return None
        return datetime.combine(self.date, self.start_time.value)

    def end_at(self) -> Optional[datetime]:
        if not self.end_time.ok:
            return None
        return datetime.combine(self.date, self.end_time.value)

    @classmethod
    def from_record(cls, record: Mapping[str, Any], day: Optional[date] = None) -> "Session":
        """Build a session from a schedule feed record.

        The feed carries the completion flag under ``status``; the calendar
        day comes from ``date`` when present, otherwise from ``day``.
        """

        raw_date = record.get("date")
        if isinstance(raw_date, datetime):
            session_day = raw_date.date()
        elif isinstance(raw_date, date):
            session_day = raw_date
        elif raw_date:
            try:
                session_day = parse_iso_date(str(raw_date))
            except ValueError:
                raise ValidationError(f"Invalid session date: {raw_date!r}")
        elif day is not None:
            session_day = day
        else:
            raise ValidationError("Session record has no date")

        topic = record.get("topic")
        return cls(
            session_id=record.get("id"),
            date=session_day,
            start_time=parse_time_of_day(record.get("start_time")),
            end_time=parse_time_of_day(record.get("end_time")),
            completed=_flag(record.get("status")),
            topic=str(topic) if topic else None,
            subject_name=str(record.get("subject_name") or ""),
            subject_code=str(record.get("subject_code") or ""),
            year=str(record.get("year") or ""),
            department=str(record.get("department") or ""),
            section=str(record.get("section") or ""),
            venue=str(record.get("venue") or ""),
        )


@dataclass(frozen=True)
class SessionCapabilities:
    can_mark_attendance: bool
    can_cancel: bool


CAPABILITIES = {
    SessionStatus.COMPLETED: SessionCapabilities(can_mark_attendance=False, can_cancel=False),
    SessionStatus.ONGOING: SessionCapabilities(can_mark_attendance=True, can_cancel=True),
    SessionStatus.UPCOMING: SessionCapabilities(can_mark_attendance=True, can_cancel=True),
    SessionStatus.EXPIRED: SessionCapabilities(can_mark_attendance=False, can_cancel=False),
    SessionStatus.SCHEDULED: SessionCapabilities(can_mark_attendance=False, can_cancel=True),
}


@dataclass(frozen=True)
class ClassifiedSession:
    """A session plus its status as of ``evaluated_at``. Never stored."""

    session: Session
    status: SessionStatus
    evaluated_at: datetime
    time_parse_failed: bool = False

    @property
    def capabilities(self) -> SessionCapabilities:
        return CAPABILITIES[self.status]

    @property
    def can_mark_attendance(self) -> bool:
        return self.capabilities.can_mark_attendance

    @property
    def can_cancel(self) -> bool:
        return self.capabilities.can_cancel


@dataclass(frozen=True)
class SessionDraft:
    """A class session to be created by the schedule collaborator."""

    faculty_id: Any
    date: date
    year: str
    department: str
    section: str
    start_time: time
    end_time: time
    subject_code: str
    venue: str = ""

    def to_payload(self) -> dict:
        return {
            "faculty_id": self.faculty_id,
            "date": self.date.strftime("%Y-%m-%d"),
            "year": self.year,
            "department": self.department,
            "section": self.section,
            "start_time": self.start_time.strftime("%H:%M"),
            "end_time": self.end_time.strftime("%H:%M"),
            "venue": self.venue,
            "subject_code": self.subject_code,
        }
