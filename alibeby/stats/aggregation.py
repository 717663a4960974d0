# -*- coding: utf-8 -*-
"""Stats — feeding and growth aggregation.

Computes, from an already-filtered snapshot:
- per-day feeding counts and formula volume
- feeding-type distribution
- weight/height evolution series
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from datetime import tzinfo
from typing import Dict, Iterable, List, Optional

from .models import DailyFeedingStat, GrowthField, GrowthPoint, TypeDistribution
from .period import local_day

from ..records.models import FeedingEvent, FeedingType, GrowthRecord


@dataclass
class _DayAgg:
    count: int = 0
    formula_ml: float = 0.0


def _formula_ml(event: FeedingEvent) -> float:
    if event.type is FeedingType.formula and event.amount_ml is not None:
        return event.amount_ml
    return 0.0


def daily_feeding_stats(events: Iterable[FeedingEvent], tz: tzinfo | None = None) -> List[DailyFeedingStat]:
    per_day: Dict[str, _DayAgg] = {}
    for event in events:
        day = local_day(event.occurred_at, tz).isoformat()
        agg = per_day.setdefault(day, _DayAgg())
        agg.count += 1
        agg.formula_ml += _formula_ml(event)

    return [
        DailyFeedingStat(date=day, count=per_day[day].count, total_formula_ml=per_day[day].formula_ml)
        for day in sorted(per_day.keys())
    ]


def type_distribution(events: Iterable[FeedingEvent]) -> TypeDistribution:
    counts: Dict[FeedingType, int] = {feeding_type: 0 for feeding_type in FeedingType}
    total = 0.0
    for event in events:
        counts[event.type] += 1
        total += _formula_ml(event)
    return TypeDistribution(counts=counts, total_formula_ml=total)


def growth_evolution(records: Iterable[GrowthRecord], field: GrowthField | str) -> List[GrowthPoint]:
    """Ascending series of weight (kg) or height (cm); missing heights are skipped."""
    field = GrowthField(field)
    points: List[GrowthPoint] = []
    for record in sorted(records, key=lambda r: r.recorded_at):
        value = record.weight_kg if field is GrowthField.weight else record.height_cm
        if value is None:
            continue
        points.append(GrowthPoint(date=record.recorded_at, value=value))
    return points


def average_per_day(total: float, num_days: int) -> Optional[int]:
    if num_days == 0:
        return None
    # Half-up, so 2.5 -> 3 rather than Python's banker's rounding.
    return int(math.floor(total / num_days + 0.5))
