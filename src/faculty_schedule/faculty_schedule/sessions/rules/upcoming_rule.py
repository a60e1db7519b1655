from __future__ import annotations

from ...core.enums import SessionStatus
from .base import SessionWindow, StatusRule


class UpcomingRule(StatusRule):
    """A later calendar day, or today before the start time."""

    status = SessionStatus.UPCOMING

    def matches(self, window: SessionWindow) -> bool:
        if not window.times_known:
            return False
        if window.session_day > window.today:
            return True
        return window.session_day == window.today and window.now < window.start
