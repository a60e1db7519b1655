from __future__ import annotations

from typing import Any, Mapping, Optional, Protocol, Sequence


class StudentDirectory(Protocol):
    """Class-list collaborator keyed by year/department/section."""

    def list_students(self, *, year: str, department: str, section: str) -> Optional[Sequence[Mapping[str, Any]]]:
        """``[{roll_number|student_number, name}]`` or ``None`` when unavailable."""

        raise NotImplementedError

    def count_students(self, *, year: str, department: str, section: str) -> Optional[int]:
        raise NotImplementedError


class AttendanceHistory(Protocol):
    def get_submitted(self, *, session_id: Any) -> Optional[Mapping[str, Any]]:
        """Previously submitted record: ``{"topic": ..., "attendance": [{student_number?, status}]}``."""

        raise NotImplementedError


class AttendanceTransport(Protocol):
    def submit(self, payload: Mapping[str, Any]) -> bool:
        """Persist a submission and flag the session completed."""

        raise NotImplementedError
