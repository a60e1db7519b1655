from __future__ import annotations

from dataclasses import dataclass

from .core.constants import DEFAULT_GRACE_MINUTES, DEFAULT_ROSTER_SIZE
from .roster.repository import AttendanceHistory, AttendanceTransport, StudentDirectory
from .roster.service import AttendanceWorkflowService
from .sessions.classifier import SessionStatusClassifier
from .sessions.ranker import SessionListRanker
from .sessions.repository import ScheduleFeed
from .sessions.service import ScheduleService


@dataclass(frozen=True)
class Container:
    schedule_feed: ScheduleFeed
    student_directory: StudentDirectory
    attendance_history: AttendanceHistory
    attendance_transport: AttendanceTransport

    classifier: SessionStatusClassifier
    ranker: SessionListRanker

    schedule_service: ScheduleService
    attendance_service: AttendanceWorkflowService


def build_container(
    *,
    schedule_feed: ScheduleFeed,
    student_directory: StudentDirectory,
    attendance_history: AttendanceHistory,
    attendance_transport: AttendanceTransport,
    grace_minutes: int = DEFAULT_GRACE_MINUTES,
    default_roster_size: int = DEFAULT_ROSTER_SIZE,
) -> Container:
    classifier = SessionStatusClassifier(grace_minutes=int(grace_minutes))
    ranker = SessionListRanker(classifier)

    schedule_service = ScheduleService(schedule_feed, classifier=classifier, ranker=ranker)
    attendance_service = AttendanceWorkflowService(
        student_directory,
        attendance_history,
        attendance_transport,
        classifier=classifier,
        default_roster_size=default_roster_size,
    )

    return Container(
        schedule_feed=schedule_feed,
        student_directory=student_directory,
        attendance_history=attendance_history,
        attendance_transport=attendance_transport,
        classifier=classifier,
        ranker=ranker,
        schedule_service=schedule_service,
        attendance_service=attendance_service,
    )
