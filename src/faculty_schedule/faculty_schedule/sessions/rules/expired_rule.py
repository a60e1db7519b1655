from __future__ import annotations

from ...core.enums import SessionStatus
from .base import SessionWindow, StatusRule


class ExpiredRule(StatusRule):
    """An earlier calendar day, or today past the grace-adjusted end."""

    status = SessionStatus.EXPIRED

    def matches(self, window: SessionWindow) -> bool:
        if not window.times_known:
            return False
        if window.session_day < window.today:
            return True
        return window.session_day == window.today and window.now > window.end_with_grace
