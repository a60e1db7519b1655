from __future__ import annotations

from ...core.enums import SessionStatus
from .base import SessionWindow, StatusRule


class OngoingRule(StatusRule):
    """Same calendar day, between start and the grace-adjusted end (inclusive)."""

    status = SessionStatus.ONGOING

    def matches(self, window: SessionWindow) -> bool:
        if not window.times_known:
            return False
        if window.session_day != window.today:
            return False
        return window.start <= window.now <= window.end_with_grace
