from __future__ import annotations

from ...core.enums import SessionStatus
from .base import SessionWindow, StatusRule


class CompletedRule(StatusRule):
    """Attendance already recorded; dominates every time-based rule."""

    status = SessionStatus.COMPLETED

    def matches(self, window: SessionWindow) -> bool:
        return window.completed
