# -*- coding: utf-8 -*-
"""Stats — time-window filtering.

Week and Month keep records in ``[cutoff, now]``; records dated after
``now`` are dropped. The cutoff is always derived from the ``now`` passed in;
``now`` itself is never modified, so calling the filter repeatedly (or for
several periods in a row) gives the same result every time.
"""

from __future__ import annotations

from datetime import date, datetime, timedelta, tzinfo
from typing import List, Optional, Sequence, TypeVar
from zoneinfo import ZoneInfo

from dateutil.relativedelta import relativedelta

from .models import Period

from ..config import settings
from ..records.models import Record, ensure_utc

R = TypeVar("R", bound=Record)


def period_cutoff(period: Period | str, now: datetime) -> Optional[datetime]:
    """Earliest timestamp (inclusive) admitted by ``period``; ``None`` for all."""
    period = Period(period)
    now = ensure_utc(now)
    if period is Period.week:
        return now - timedelta(days=7)
    if period is Period.month:
        # Calendar-aware: Mar 31 -> Feb 28/29, not a fixed 30 days.
        return now - relativedelta(months=1)
    return None


def filter_by_period(records: Sequence[R], period: Period | str, now: datetime) -> Sequence[R]:
    cutoff = period_cutoff(period, now)
    if cutoff is None:
        return records
    now = ensure_utc(now)
    return [r for r in records if cutoff <= r.timestamp <= now]


def local_day(timestamp: datetime, tz: tzinfo | None = None) -> date:
    """Calendar day of ``timestamp``, in ``tz`` or else in its own offset."""
    if tz is not None:
        return timestamp.astimezone(tz).date()
    return timestamp.date()


def filter_same_day(
    records: Sequence[R],
    day: date | None = None,
    tz: tzinfo | None = None,
) -> List[R]:
    """Records falling on ``day`` (default: today in the configured timezone)."""
    zone = tz or ZoneInfo(settings.timezone)
    if day is None:
        day = datetime.now(zone).date()
    return [r for r in records if local_day(r.timestamp, zone) == day]
