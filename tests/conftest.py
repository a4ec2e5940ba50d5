from datetime import UTC, date, datetime, timedelta
from itertools import count

import pytest

from readtrack.kb import ACHIEVEMENT_CONFIG, ACHIEVEMENT_DEFINITIONS, PACE_CONFIG, STATUS_CONFIG
from readtrack.models.achievement import AchievementDefinition
from readtrack.models.deadline import Deadline, DeadlineStatusEntry, ProgressSnapshot
from readtrack.models.enums import BookFormat, DeadlineStatus
from readtrack.models.kb import AchievementConfig, PaceConfig, StatusConfig


NOW = datetime(2026, 3, 15, 12, 0, tzinfo=UTC)
TODAY = NOW.date()

_ids = count(1)


def at(days_ago: float, hour: int = 12) -> str:
    """ISO timestamp `days_ago` days before NOW, at the given UTC hour."""
    d = NOW - timedelta(days=days_ago)
    return d.replace(hour=hour, minute=0).isoformat()


def on(d: date, hour: int = 12) -> str:
    return datetime(d.year, d.month, d.day, hour, tzinfo=UTC).isoformat()


# ── Builders ─────────────────────────────────────────────────────────


def make_snapshot(progress: int, created_at: str | None) -> ProgressSnapshot:
    return ProgressSnapshot(id=f"p-{next(_ids)}", current_progress=progress, created_at=created_at)


def make_deadline(
    progress: list[tuple[int, str | None]] | None = None,
    format: BookFormat = BookFormat.PHYSICAL,
    total: int = 300,
    deadline_date: str | None = None,
    source: str = "personal",
    status: list[tuple[DeadlineStatus, str]] | None = None,
    **kwargs,
) -> Deadline:
    return Deadline(
        id=kwargs.pop("id", f"d-{next(_ids)}"),
        user_id=kwargs.pop("user_id", "user-test"),
        book_title=kwargs.pop("book_title", "Test Book"),
        format=format,
        source=source,
        total_quantity=total,
        deadline_date=deadline_date or at(-10),
        progress=[make_snapshot(p, ts) for p, ts in (progress or [])],
        status=[
            DeadlineStatusEntry(id=f"s-{next(_ids)}", status=s, created_at=ts)
            for s, ts in (status or [])
        ],
        **kwargs,
    )


def daily_run(start_days_ago: int, length: int, per_day: int = 10, hour: int = 12) -> list[tuple[int, str]]:
    """One snapshot per day for `length` consecutive days, progress growing by per_day."""
    return [
        ((i + 1) * per_day, at(start_days_ago - i, hour))
        for i in range(length)
    ]


# ── Config Fixtures ──────────────────────────────────────────────────


@pytest.fixture
def pace_config() -> PaceConfig:
    return PACE_CONFIG


@pytest.fixture
def status_config() -> StatusConfig:
    return STATUS_CONFIG


@pytest.fixture
def achievement_config() -> AchievementConfig:
    return ACHIEVEMENT_CONFIG


@pytest.fixture
def achievements() -> dict[str, AchievementDefinition]:
    return {a.id: a for a in ACHIEVEMENT_DEFINITIONS}


# ── Sample Deadlines ─────────────────────────────────────────────────


@pytest.fixture
def physical_deadline() -> Deadline:
    """200-page book: 50 → 100 → 150 over six days."""
    return make_deadline(
        progress=[(50, at(6)), (100, at(4)), (150, at(2))],
        total=200,
    )


@pytest.fixture
def audio_deadline() -> Deadline:
    return make_deadline(
        progress=[(30, at(3)), (90, at(2)), (150, at(1))],
        format=BookFormat.AUDIO,
        total=600,
    )
