from collections import defaultdict
from datetime import date, datetime

from readtrack.engine.dates import ONE_DAY, day_key, sorted_snapshots
from readtrack.engine.numeric import round_half_up
from readtrack.kb import PACE_CONFIG
from readtrack.models.deadline import Deadline
from readtrack.models.enums import BookFormat
from readtrack.models.kb import PaceConfig
from readtrack.models.pace import ListeningDay, ReadingDay

_PAGE_FORMATS = {BookFormat.PHYSICAL, BookFormat.EBOOK}


def _reading_units_per_page(config: PaceConfig) -> dict[BookFormat, float]:
    """Units of recorded progress that make one page-equivalent, per format."""
    return {
        BookFormat.PHYSICAL: 1.0,
        BookFormat.EBOOK: 1.0,
        BookFormat.AUDIO: config.audio_minutes_per_page,
    }


def _transitions(deadline: Deadline, since: datetime | None):
    """Yield (start, days_between, diff) for consecutive snapshots at or after `since`."""
    timed = sorted_snapshots(deadline)
    if since is not None:
        timed = [(ts, s) for ts, s in timed if ts >= since]
    for (prev_ts, prev), (curr_ts, curr) in zip(timed, timed[1:]):
        days_between = max(1, round_half_up((curr_ts - prev_ts) / ONE_DAY))
        yield prev_ts, days_between, curr.current_progress - prev.current_progress


def _spread(daily: dict[date, float], start: datetime, days_between: int, amount: float) -> None:
    share = amount / days_between
    for offset in range(days_between):
        daily[day_key(start + offset * ONE_DAY)] += share


def extract_reading_days(
    deadlines: list[Deadline],
    config: PaceConfig = PACE_CONFIG,
    since: datetime | None = None,
    include_audio: bool = False,
) -> list[ReadingDay]:
    """Bucket progress deltas of page-based deadlines into calendar days.

    Each delta between consecutive snapshots is spread evenly over the days it
    spans, starting on the earlier snapshot's date. Negative deltas (corrections)
    are kept. Audio deadlines only take part with include_audio, converted to
    page-equivalents.
    """
    units_per_page = _reading_units_per_page(config)
    daily: dict[date, float] = defaultdict(float)

    for deadline in deadlines:
        if deadline.format not in _PAGE_FORMATS and not include_audio:
            continue
        for start, days_between, diff in _transitions(deadline, since):
            if diff == 0:
                continue
            _spread(daily, start, days_between, diff / units_per_page[deadline.format])

    return [
        ReadingDay(date=d, pages_read=round(total, 2))
        for d, total in sorted(daily.items())
    ]


def extract_listening_days(
    deadlines: list[Deadline],
    config: PaceConfig = PACE_CONFIG,
    since: datetime | None = None,
) -> list[ListeningDay]:
    """Bucket listening minutes of audio deadlines into calendar days.

    Minutes stay minutes. Only forward progress counts, and a single transition
    larger than the seed threshold is treated as an imported baseline and skipped.
    """
    daily: dict[date, float] = defaultdict(float)

    for deadline in deadlines:
        if deadline.format != BookFormat.AUDIO:
            continue
        for start, days_between, diff in _transitions(deadline, since):
            if diff <= 0 or diff > config.listening_seed_threshold:
                continue
            _spread(daily, start, days_between, diff)

    return [
        ListeningDay(date=d, minutes_listened=round(total, 2))
        for d, total in sorted(daily.items())
    ]
