from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime, time
from typing import Optional


@dataclass(frozen=True)
class ParsedTime:
    """Outcome of reading an ``HH:MM`` value.

    ``value`` is ``None`` when the input could not be read; callers decide the
    fallback instead of receiving a substituted time.
    """

    raw: str
    value: Optional[time]

    @property
    def ok(self) -> bool:
        return self.value is not None


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    return datetime.strptime(value, "%Y-%m-%d").date()


def parse_time_of_day(value) -> ParsedTime:
    """Read ``HH:MM`` (seconds tolerated) without raising."""
    if isinstance(value, time):
        return ParsedTime(raw=value.strftime("%H:%M"), value=value.replace(second=0, microsecond=0))

    raw = str(value or "").strip()
    for fmt in ("%H:%M", "%H:%M:%S"):
        try:
            return ParsedTime(raw=raw, value=datetime.strptime(raw, fmt).time().replace(second=0))
        except ValueError:
            continue
    return ParsedTime(raw=raw, value=None)


def minutes_since_midnight(value: time) -> int:
    return value.hour * 60 + value.minute


def format_clock(parsed: ParsedTime) -> str:
    """12-hour display form, e.g. ``9:05 AM``; raw text when unparseable."""
    if not parsed.ok:
        return parsed.raw
    hour = parsed.value.hour
    suffix = "PM" if hour >= 12 else "AM"
    return f"{hour % 12 or 12}:{parsed.value.minute:02d} {suffix}"


def now_local() -> datetime:
    """Current local time.

    Note: Only the outer service layer reads the clock; the classifier and
    ranker always receive ``now`` explicitly.
    """
    return datetime.now()
