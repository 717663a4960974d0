# -*- coding: utf-8 -*-
"""Stats — Pydantic models for derived views."""

from __future__ import annotations

from datetime import datetime
from enum import Enum
from typing import Dict, List, Optional

from pydantic import BaseModel, Field

from ..records.models import FeedingType


class Period(str, Enum):
    week = "week"
    month = "month"
    all = "all"


class GrowthField(str, Enum):
    weight = "weight"
    height = "height"


class DailyFeedingStat(BaseModel):
    date: str = Field(..., description="YYYY-MM-DD")
    count: int = Field(0, ge=0)
    total_formula_ml: float = Field(0.0, ge=0)


class ChartItem(BaseModel):
    value: float = Field(..., ge=0)
    label: str
    key: Optional[str] = Field(None, description="Category key for palette lookups")


class TypeDistribution(BaseModel):
    counts: Dict[FeedingType, int] = Field(
        default_factory=lambda: {feeding_type: 0 for feeding_type in FeedingType}
    )
    total_formula_ml: float = Field(0.0, ge=0)

    def chart_items(self) -> List[ChartItem]:
        """Categorical items for the pie chart; zero-count types are left out."""
        return [
            ChartItem(value=self.counts.get(t, 0), label=t.chart_label, key=t.value)
            for t in FeedingType
            if self.counts.get(t, 0) > 0
        ]


class GrowthPoint(BaseModel):
    date: datetime
    value: float = Field(..., gt=0)


class PieSlice(BaseModel):
    start_angle_deg: float
    sweep_angle_deg: float
    color: str
    label: str
    value: float
    percentage: float


class StatsView(BaseModel):
    period: Period
    generated_at: datetime
    baby_name: Optional[str] = None
    weight_series: List[GrowthPoint] = []
    weight_slices: List[PieSlice] = []
    height_series: List[GrowthPoint] = []
    height_slices: List[PieSlice] = []
    daily_feedings: List[DailyFeedingStat] = []
    type_distribution: TypeDistribution = TypeDistribution()
    type_slices: List[PieSlice] = []
    total_formula_ml: float = 0.0
    average_formula_ml_per_day: Optional[int] = None
