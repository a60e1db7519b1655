from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import datetime, timedelta
from typing import Sequence

from ..core.constants import DEFAULT_GRACE_MINUTES
from ..core.enums import SessionStatus
from ..core.exceptions import ValidationError
from .model import ClassifiedSession, Session
from .rules.base import SessionWindow, StatusRule
from .rules.completed_rule import CompletedRule
from .rules.expired_rule import ExpiredRule
from .rules.ongoing_rule import OngoingRule
from .rules.upcoming_rule import UpcomingRule

logger = logging.getLogger(__name__)

# Order is the priority: the first matching rule decides.
DEFAULT_RULES: tuple[StatusRule, ...] = (
    CompletedRule(),
    OngoingRule(),
    UpcomingRule(),
    ExpiredRule(),
)

FALLBACK_STATUS = SessionStatus.SCHEDULED


@dataclass(frozen=True)
class SessionStatusClassifier:
    """Map a session and a reference time to exactly one status.

    The classifier holds configuration only (grace period and rule order);
    ``now`` is always supplied by the caller.
    """

    grace_minutes: int = DEFAULT_GRACE_MINUTES
    rules: Sequence[StatusRule] = field(default=DEFAULT_RULES)

    def __post_init__(self) -> None:
        if isinstance(self.grace_minutes, bool):
            raise ValidationError("grace_minutes must be zero or a positive integer")
        try:
            minutes = int(self.grace_minutes)
        except (TypeError, ValueError, OverflowError):
            raise ValidationError("grace_minutes must be zero or a positive integer")
        if minutes < 0:
            raise ValidationError("grace_minutes must be zero or a positive integer")

    @property
    def grace(self) -> timedelta:
        return timedelta(minutes=int(self.grace_minutes))

    def window_for(self, session: Session, now: datetime) -> SessionWindow:
        start = session.start_at()
        end = session.end_at()
        if start is None or end is None:
            start = end_with_grace = None
        else:
            end_with_grace = end + self.grace
        return SessionWindow(
            now=now,
            session_day=session.date,
            start=start,
            end_with_grace=end_with_grace,
            completed=bool(session.completed),
        )

    def status_for(self, session: Session, now: datetime) -> SessionStatus:
        return self.classify(session, now).status

    def classify(self, session: Session, now: datetime) -> ClassifiedSession:
        window = self.window_for(session, now)
        for rule in self.rules:
            if rule.matches(window):
                return ClassifiedSession(session=session, status=rule.status, evaluated_at=now)

        if not window.times_known:
            logger.warning(
                "Unreadable time window for session %s (start=%r, end=%r); reporting %s",
                session.session_id,
                session.start_time.raw,
                session.end_time.raw,
                FALLBACK_STATUS.value,
            )
            return ClassifiedSession(
                session=session,
                status=FALLBACK_STATUS,
                evaluated_at=now,
                time_parse_failed=True,
            )

        logger.debug("No rule matched session %s at %s; reporting %s", session.session_id, now, FALLBACK_STATUS.value)
        return ClassifiedSession(session=session, status=FALLBACK_STATUS, evaluated_at=now)
