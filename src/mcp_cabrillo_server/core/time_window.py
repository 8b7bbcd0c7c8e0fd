"""Time-window helpers for selecting contacts.

Converts user-friendly selectors into UTC ranges and filters contacts by
their QSO timestamp.
"""

from __future__ import annotations

import re
from collections.abc import Iterable, Iterator
from datetime import UTC, date, datetime, timedelta

from .models import ContactRecord

_HOUR_RE = re.compile(r"^(?P<d>\d{4}-\d{2}-\d{2})T(?P<h>\d{2})$")


def parse_iso_dt(s: str) -> datetime:
    """Parse ISO8601 datetime. If tz is missing, assume UTC."""
    dt = datetime.fromisoformat(s.replace("Z", "+00:00"))
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=UTC)
    return dt.astimezone(UTC)


def range_for_date(s: str) -> tuple[datetime, datetime]:
    """Return the UTC day window for an ISO date string."""
    d = date.fromisoformat(s)
    start = datetime(d.year, d.month, d.day, tzinfo=UTC)
    return start, start + timedelta(days=1)


def range_for_hour(s: str) -> tuple[datetime, datetime]:
    """Return the UTC hour window for a YYYY-MM-DDTHH selector."""
    m = _HOUR_RE.match(s)
    if not m:
        raise ValueError("hour must look like YYYY-MM-DDTHH (e.g., 2021-06-12T13)")
    d = date.fromisoformat(m.group("d"))
    start = datetime(d.year, d.month, d.day, int(m.group("h")), tzinfo=UTC)
    return start, start + timedelta(hours=1)


def resolve_time_window(
    *,
    since: str | None = None,
    until: str | None = None,
    date_: str | None = None,
    hour: str | None = None,
) -> tuple[datetime | None, datetime | None]:
    """Resolve a [since, until) window; date/hour selectors win over bounds."""
    if date_:
        return range_for_date(date_)
    if hour:
        return range_for_hour(hour)

    s = parse_iso_dt(since) if since else None
    u = parse_iso_dt(until) if until else None
    if s is not None and u is not None and s >= u:
        raise ValueError("since must be < until")
    return s, u


def contacts_in_window(
    contacts: Iterable[ContactRecord],
    *,
    since: datetime | None,
    until: datetime | None,
) -> Iterator[ContactRecord]:
    """Yield contacts with since <= timestamp < until, in log order."""
    for contact in contacts:
        if since is not None and contact.timestamp < since:
            continue
        if until is not None and contact.timestamp >= until:
            continue
        yield contact
