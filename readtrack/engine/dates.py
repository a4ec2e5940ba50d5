"""Timestamp parsing and calendar-day keys.

All day bucketing happens in UTC: a snapshot belongs to the calendar date of its
timestamp converted to UTC. Naive timestamps are taken to already be UTC.
"""

import logging
from datetime import UTC, date, datetime, timedelta

from readtrack.models.deadline import Deadline, ProgressSnapshot

logger = logging.getLogger(__name__)

ONE_DAY = timedelta(days=1)


def parse_timestamp(value: str | datetime | None) -> datetime | None:
    """Parse an ISO-8601 timestamp into an aware UTC datetime. None if unparseable."""
    if value is None:
        return None
    if isinstance(value, datetime):
        parsed = value
    else:
        text = value.strip()
        if not text:
            return None
        if text.endswith("Z"):
            text = text[:-1] + "+00:00"
        try:
            parsed = datetime.fromisoformat(text)
        except ValueError:
            return None
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=UTC)
    return parsed.astimezone(UTC)


def day_key(ts: datetime) -> date:
    return ts.astimezone(UTC).date()


def sorted_snapshots(deadline: Deadline) -> list[tuple[datetime, ProgressSnapshot]]:
    """Snapshots with a parseable created_at, oldest first."""
    timed: list[tuple[datetime, ProgressSnapshot]] = []
    for snap in deadline.progress:
        ts = parse_timestamp(snap.created_at)
        if ts is None:
            logger.debug(
                "Skipping snapshot %s on deadline %s: bad created_at %r",
                snap.id, deadline.id, snap.created_at,
            )
            continue
        timed.append((ts, snap))
    timed.sort(key=lambda pair: pair[0])
    return timed


def latest_snapshot_time(deadlines: list[Deadline]) -> datetime | None:
    latest: datetime | None = None
    for deadline in deadlines:
        timed = sorted_snapshots(deadline)
        if timed and (latest is None or timed[-1][0] > latest):
            latest = timed[-1][0]
    return latest
