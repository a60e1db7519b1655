from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Iterable

from ..common.datetime_utils import minutes_since_midnight
from ..core.constants import MINUTES_PER_DAY
from ..core.enums import SessionStatus
from .classifier import SessionStatusClassifier
from .model import ClassifiedSession, Session

BUCKETS = {
    SessionStatus.ONGOING: 1,
    SessionStatus.UPCOMING: 2,
    SessionStatus.COMPLETED: 3,
}
OTHER_BUCKET = 4


def bucket_of(item: ClassifiedSession) -> int:
    return BUCKETS.get(item.status, OTHER_BUCKET)


def start_key(item: ClassifiedSession) -> int:
    start = item.session.start_time
    if not start.ok:
        # Unreadable start times go last within their bucket.
        return MINUTES_PER_DAY
    return minutes_since_midnight(start.value)


def _session_of(item: ClassifiedSession | Session) -> Session:
    return item.session if isinstance(item, ClassifiedSession) else item


@dataclass(frozen=True)
class SessionListRanker:
    """Order one day's sessions so the actionable ones come first."""

    classifier: SessionStatusClassifier = field(default_factory=SessionStatusClassifier)

    def rank(self, sessions: Iterable[ClassifiedSession | Session], now: datetime) -> list[ClassifiedSession]:
        """Return a new list; ``sessions`` itself is left untouched.

        Items are re-classified against ``now`` so a stale status never
        decides the order.
        """

        refreshed = [self.classifier.classify(_session_of(item), now) for item in sessions]
        # sorted() is stable, so equal keys keep their input order.
        return sorted(refreshed, key=lambda item: (bucket_of(item), start_key(item)))
