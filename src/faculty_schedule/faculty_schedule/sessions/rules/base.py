from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import date, datetime
from typing import Optional

from ...core.enums import SessionStatus


@dataclass(frozen=True)
class SessionWindow:
    """Everything a rule may look at, resolved once per classification.

    ``start`` and ``end_with_grace`` are ``None`` when the session's times
    could not be read; time-based rules never match such a window.
    """

    now: datetime
    session_day: date
    start: Optional[datetime]
    end_with_grace: Optional[datetime]
    completed: bool

    @property
    def today(self) -> date:
        return self.now.date()

    @property
    def times_known(self) -> bool:
        return self.start is not None and self.end_with_grace is not None


class StatusRule(ABC):
    """One entry of the priority-ordered status table."""

    status: SessionStatus

    @abstractmethod
    def matches(self, window: SessionWindow) -> bool:
        raise NotImplementedError
