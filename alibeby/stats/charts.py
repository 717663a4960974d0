# -*- coding: utf-8 -*-
"""Stats — pie chart geometry, independent of any renderer."""

from __future__ import annotations

from typing import Callable, Dict, Iterable, List, Tuple

import numpy as np

from .models import ChartItem, GrowthField, GrowthPoint, PieSlice, TypeDistribution

from ..records.models import FeedingType

# (index, total, item) -> CSS color string
ColorStrategy = Callable[[int, int, ChartItem], str]

FEEDING_TYPE_COLORS: Dict[str, str] = {
    FeedingType.breast_milk.value: "#4CAF50",
    FeedingType.formula.value: "#2196F3",
    FeedingType.solid_food.value: "#FF9800",
}

WEIGHT_HUE_RANGE: Tuple[float, float] = (120.0, 240.0)  # green -> blue
HEIGHT_HUE_RANGE: Tuple[float, float] = (30.0, 270.0)  # orange -> purple


def hue_color(index: int, total: int, hue_start: float, hue_end: float) -> str:
    hue = hue_start + index * (hue_end - hue_start) / total
    return f"hsl({hue:g}, 70%, 50%)"


def hue_colors(hue_start: float, hue_end: float) -> ColorStrategy:
    def _color(index: int, total: int, item: ChartItem) -> str:
        return hue_color(index, total, hue_start, hue_end)

    return _color


def palette_colors(palette: Dict[str, str]) -> ColorStrategy:
    def _color(index: int, total: int, item: ChartItem) -> str:
        return palette[item.key or item.label]

    return _color


def build_pie_slices(items: Iterable[ChartItem], colors: ColorStrategy) -> List[PieSlice]:
    """Turn weighted items into consecutive slices, in the order given.

    Returns ``[]`` for an empty input or a zero total; callers should show a
    "no data" state instead of a chart.
    """
    items = list(items)
    if not items:
        return []
    values = np.asarray([item.value for item in items], dtype=float)
    total = float(values.sum())
    if total <= 0:
        return []

    percentages = values / total * 100.0
    sweeps = percentages * 3.6
    starts = np.concatenate(([0.0], np.cumsum(sweeps)[:-1]))

    return [
        PieSlice(
            start_angle_deg=float(starts[i]),
            sweep_angle_deg=float(sweeps[i]),
            color=colors(i, len(items), item),
            label=item.label,
            value=item.value,
            percentage=float(percentages[i]),
        )
        for i, item in enumerate(items)
    ]


def growth_pie_items(points: Iterable[GrowthPoint]) -> List[ChartItem]:
    """Growth points as chart items, smallest value first."""
    ordered = sorted(points, key=lambda p: p.value)
    return [ChartItem(value=p.value, label=f"{p.date.day}/{p.date.month}") for p in ordered]


def growth_slices(points: Iterable[GrowthPoint], field: GrowthField | str) -> List[PieSlice]:
    field = GrowthField(field)
    hue_range = WEIGHT_HUE_RANGE if field is GrowthField.weight else HEIGHT_HUE_RANGE
    return build_pie_slices(growth_pie_items(points), hue_colors(*hue_range))


def feeding_type_slices(distribution: TypeDistribution) -> List[PieSlice]:
    return build_pie_slices(distribution.chart_items(), palette_colors(FEEDING_TYPE_COLORS))
