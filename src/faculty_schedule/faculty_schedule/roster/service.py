from __future__ import annotations

import logging
from datetime import datetime
from typing import Any, Optional

from ..common.datetime_utils import now_local
from ..core.constants import DEFAULT_ROSTER_SIZE
from ..core.exceptions import ValidationError
from ..sessions.classifier import SessionStatusClassifier
from ..sessions.model import Session
from . import operations
from .model import AttendanceSubmission, OpenedRoster, Roster
from .repository import AttendanceHistory, AttendanceTransport, StudentDirectory

logger = logging.getLogger(__name__)


class AttendanceWorkflowService:
    """Opens and submits a session's roster through the remote collaborators.

    Single-flight (one open roster per session, one submission at a time) is
    the caller's job; this service keeps no roster between calls.
    """

    def __init__(
        self,
        directory: StudentDirectory,
        history: AttendanceHistory,
        transport: AttendanceTransport,
        *,
        classifier: SessionStatusClassifier | None = None,
        default_roster_size: int = DEFAULT_ROSTER_SIZE,
    ):
        self._directory = directory
        self._history = history
        self._transport = transport
        self._classifier = classifier or SessionStatusClassifier()
        self._default_roster_size = int(default_roster_size)

    def open_roster(self, session: Session) -> OpenedRoster:
        previous = self._history.get_submitted(session_id=session.session_id)
        if previous and previous.get("attendance"):
            logger.info("Session %s already has attendance; hydrating", session.session_id)
            topic = previous.get("topic")
            return OpenedRoster(
                roster=operations.hydrate(previous["attendance"]),
                topic=str(topic) if topic else None,
                source="history",
            )

        class_key = {"year": session.year, "department": session.department, "section": session.section}

        students = self._directory.list_students(**class_key)
        if students:
            return OpenedRoster(roster=operations.initialize_from_roster(students), source="directory")

        count = self._directory.count_students(**class_key)
        if count:
            return OpenedRoster(roster=operations.initialize(count), source="count")

        logger.warning(
            "No class list for %(year)s/%(department)s/%(section)s; using %(size)d placeholder students",
            {**class_key, "size": self._default_roster_size},
        )
        return OpenedRoster(roster=operations.initialize(self._default_roster_size), source="default")

    def submit(
        self,
        session: Session,
        *,
        faculty_id: Any,
        topic: Optional[str],
        roster: Roster,
        now: datetime | None = None,
    ) -> AttendanceSubmission:
        now = now or now_local()

        classified = self._classifier.classify(session, now)
        if not classified.can_mark_attendance:
            logger.warning("Rejected submission for %s session %s", classified.status.value, session.session_id)
            raise ValidationError(f"Attendance cannot be marked for a {classified.status.value} class")

        submission = operations.build_submission(
            session,
            faculty_id=faculty_id,
            topic=topic,
            roster=roster,
            submitted_on=now.date(),
        )

        if not self._transport.submit(submission.to_payload()):
            raise ValidationError("Failed to submit attendance")

        summary = operations.summarize(roster)
        logger.info(
            "Submitted attendance for session %s: %d/%d present",
            session.session_id,
            summary.present_count,
            summary.total,
        )
        return submission
