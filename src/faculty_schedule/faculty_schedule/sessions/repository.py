from __future__ import annotations

from datetime import date
from typing import Any, Mapping, Optional, Protocol, Sequence


class ScheduleFeed(Protocol):
    """Remote schedule collaborator. The core never fetches on its own."""

    def list_for_day(self, *, faculty_id: Any, day: date) -> Sequence[Mapping[str, Any]]:
        """Raw session records (``start_time``/``end_time`` as ``HH:MM``)."""

        raise NotImplementedError

    def create(self, *, payload: Mapping[str, Any]) -> Optional[Any]:
        """Create a session; returns its id, or ``None`` when rejected."""

        raise NotImplementedError

    def cancel(self, *, session_id: Any) -> bool:
        raise NotImplementedError
