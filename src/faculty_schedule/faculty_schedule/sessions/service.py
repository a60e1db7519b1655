from __future__ import annotations

import logging
from datetime import date, datetime, time, timedelta
from typing import Any, Iterable, Mapping, Optional

from ..common.datetime_utils import format_clock, now_local, parse_time_of_day
from ..common.validators import require_non_empty
from ..core.enums import ScheduleDay, SessionStatus
from ..core.exceptions import ValidationError
from .classifier import SessionStatusClassifier
from .model import ClassifiedSession, Session, SessionDraft
from .ranker import SessionListRanker
from .repository import ScheduleFeed

logger = logging.getLogger(__name__)

STATUS_LABELS = {
    SessionStatus.COMPLETED: "Completed",
    SessionStatus.ONGOING: "Ongoing",
    SessionStatus.UPCOMING: "Upcoming",
    SessionStatus.EXPIRED: "Expired",
    SessionStatus.SCHEDULED: "Scheduled",
}

STATUS_MESSAGES = {
    SessionStatus.COMPLETED: "Attendance marked successfully",
    SessionStatus.ONGOING: "Class in progress - Ready for attendance",
    SessionStatus.UPCOMING: "Class is scheduled - Not started yet",
    SessionStatus.EXPIRED: "Class completed - Attendance not marked",
    SessionStatus.SCHEDULED: "Class is scheduled",
}


def resolve_day(which: ScheduleDay | str, now: datetime) -> date:
    try:
        selected = ScheduleDay(which)
    except ValueError:
        raise ValidationError(f"Unknown schedule day: {which!r}")
    if selected is ScheduleDay.TOMORROW:
        return now.date() + timedelta(days=1)
    return now.date()


class ScheduleService:
    def __init__(
        self,
        feed: ScheduleFeed,
        *,
        classifier: SessionStatusClassifier | None = None,
        ranker: SessionListRanker | None = None,
    ):
        self._feed = feed
        self._classifier = classifier or SessionStatusClassifier()
        self._ranker = ranker or SessionListRanker(self._classifier)

    def rank_records(self, records: Iterable[Mapping[str, Any]], *, day: date, now: datetime) -> list[ClassifiedSession]:
        sessions = [Session.from_record(record, day) for record in records]
        return self._ranker.rank(sessions, now)

    def daily_sessions(self, faculty_id: Any, which: ScheduleDay | str = ScheduleDay.TODAY, *, now: datetime | None = None):
        now = now or now_local()
        day = resolve_day(which, now)
        records = self._feed.list_for_day(faculty_id=faculty_id, day=day)
        ranked = self.rank_records(records, day=day, now=now)
        logger.debug("Ranked %d sessions for faculty %s on %s", len(ranked), faculty_id, day)
        return ranked

    def daily_board(self, faculty_id: Any, which: ScheduleDay | str = ScheduleDay.TODAY, *, now: datetime | None = None):
        return [self.to_ui(item) for item in self.daily_sessions(faculty_id, which, now=now)]

    def find(
        self,
        faculty_id: Any,
        session_id: Any,
        which: ScheduleDay | str = ScheduleDay.TODAY,
        *,
        now: datetime | None = None,
    ) -> Optional[ClassifiedSession]:
        return find_session(self.daily_sessions(faculty_id, which, now=now), session_id)

    def create(
        self,
        faculty_id: Any,
        *,
        which: ScheduleDay | str = ScheduleDay.TODAY,
        year: Any,
        department: Any,
        section: Any,
        start_time: Any,
        end_time: Any,
        subject_code: Any,
        venue: Any = None,
        now: datetime | None = None,
    ) -> tuple[Any, SessionDraft]:
        """Validate a new class session for today or tomorrow and hand it to the feed.

        Slot availability is the collaborator's call; a rejected create comes
        back as ``ValidationError``.
        """

        now = now or now_local()
        draft = SessionDraft(
            faculty_id=faculty_id,
            date=resolve_day(which, now),
            year=require_non_empty(year, "Year"),
            department=require_non_empty(department, "Department"),
            section=require_non_empty(section, "Section"),
            start_time=_require_clock(start_time, "Start time"),
            end_time=_require_clock(end_time, "End time"),
            subject_code=require_non_empty(subject_code, "Subject code"),
            venue=str(venue or "").strip(),
        )
        if draft.start_time >= draft.end_time:
            raise ValidationError("Start time must be before end time")

        session_id = self._feed.create(payload=draft.to_payload())
        if session_id is None or session_id is False:
            raise ValidationError("Failed to create schedule")
        logger.info("Created session %s for faculty %s on %s", session_id, faculty_id, draft.date)
        return session_id, draft

    def cancel(self, session: Session, *, now: datetime | None = None) -> None:
        now = now or now_local()
        classified = self._classifier.classify(session, now)
        if not classified.can_cancel:
            raise ValidationError(f"A {classified.status.value} class cannot be cancelled")

        if not self._feed.cancel(session_id=session.session_id):
            raise ValidationError("Failed to cancel schedule")
        logger.info("Cancelled session %s", session.session_id)

    def to_ui(self, item: ClassifiedSession) -> dict:
        session = item.session
        return {
            "id": session.session_id,
            "date": session.date.strftime("%Y-%m-%d"),
            "subject_name": session.subject_name,
            "subject_code": session.subject_code,
            "year": session.year,
            "department": session.department,
            "section": session.section,
            "venue": session.venue,
            "start_time": format_clock(session.start_time),
            "end_time": format_clock(session.end_time),
            "topic": session.topic,
            "status": item.status.value,
            "label": STATUS_LABELS[item.status],
            "message": STATUS_MESSAGES[item.status],
            "can_mark_attendance": item.can_mark_attendance,
            "can_cancel": item.can_cancel,
            "time_parse_failed": item.time_parse_failed,
        }


def find_session(sessions: Iterable[ClassifiedSession], session_id: Any) -> Optional[ClassifiedSession]:
    for item in sessions:
        if str(item.session.session_id) == str(session_id):
            return item
    return None


def _require_clock(value: Any, field_name: str) -> time:
    require_non_empty(value, field_name)
    parsed = parse_time_of_day(value)
    if not parsed.ok:
        raise ValidationError(f"{field_name} must be HH:MM")
    return parsed.value
