# -*- coding: utf-8 -*-
"""Stats — one-call view for the statistics screen."""

from __future__ import annotations

from datetime import datetime, tzinfo
from typing import Sequence

from .aggregation import average_per_day, daily_feeding_stats, growth_evolution, type_distribution
from .charts import feeding_type_slices, growth_slices
from .models import GrowthField, Period, StatsView
from .period import filter_by_period

from ..records.models import FeedingEvent, GrowthRecord, ensure_utc
from ..records.storage import latest_record


def build_stats_view(
    growth: Sequence[GrowthRecord],
    feedings: Sequence[FeedingEvent],
    period: Period | str,
    now: datetime,
    tz: tzinfo | None = None,
) -> StatsView:
    period = Period(period)
    now = ensure_utc(now)

    # The name comes from the latest record overall, not just the window.
    latest = latest_record(growth)

    growth_window = filter_by_period(growth, period, now)
    feedings_window = filter_by_period(feedings, period, now)

    weight_series = growth_evolution(growth_window, GrowthField.weight)
    height_series = growth_evolution(growth_window, GrowthField.height)
    daily = daily_feeding_stats(feedings_window, tz)
    distribution = type_distribution(feedings_window)

    return StatsView(
        period=period,
        generated_at=now,
        baby_name=latest.name if latest is not None else None,
        weight_series=weight_series,
        weight_slices=growth_slices(weight_series, GrowthField.weight),
        height_series=height_series,
        height_slices=growth_slices(height_series, GrowthField.height),
        daily_feedings=daily,
        type_distribution=distribution,
        type_slices=feeding_type_slices(distribution),
        total_formula_ml=distribution.total_formula_ml,
        average_formula_ml_per_day=average_per_day(distribution.total_formula_ml, len(daily)),
    )
