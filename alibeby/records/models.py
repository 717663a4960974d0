# -*- coding: utf-8 -*-
"""Records — Pydantic models for growth measurements and feeding events."""

from __future__ import annotations

from datetime import datetime, timezone
from enum import Enum
from typing import Annotated, Any, Optional, Type, Union
from uuid import uuid4

from pydantic import AfterValidator, BaseModel, ConfigDict, Field, model_validator
from pydantic import ValidationError as PydanticValidationError

from ..errors import ValidationError


def ensure_utc(value: datetime) -> datetime:
    # Naive timestamps are read as UTC.
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


AwareDatetime = Annotated[datetime, AfterValidator(ensure_utc)]


class FeedingType(str, Enum):
    breast_milk = "leite_materno"
    formula = "formula"
    solid_food = "alimento"

    @property
    def label(self) -> str:
        """Name used in feeding lists and history."""
        return _FEEDING_TYPE_LABELS[self]

    @property
    def chart_label(self) -> str:
        """Shorter name used in the stats chart legend."""
        return _FEEDING_TYPE_CHART_LABELS[self]


_FEEDING_TYPE_LABELS = {
    FeedingType.breast_milk: "Leite Materno",
    FeedingType.formula: "Fórmula",
    FeedingType.solid_food: "Alimento Sólido",
}

_FEEDING_TYPE_CHART_LABELS = {
    FeedingType.breast_milk: "Leite Materno",
    FeedingType.formula: "Fórmula",
    FeedingType.solid_food: "Alimento",
}


class GrowthRecord(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str = Field(..., min_length=1)
    name: str = ""
    age_months: int = Field(..., ge=0)
    weight_kg: float = Field(..., gt=0)
    height_cm: Optional[float] = Field(None, gt=0)
    recorded_at: AwareDatetime = Field(..., description="When the measurement was taken")

    @property
    def timestamp(self) -> datetime:
        return self.recorded_at


class FeedingEvent(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str = Field(..., min_length=1)
    type: FeedingType
    amount_ml: Optional[float] = Field(None, ge=0, description="Only kept for formula feedings")
    notes: Optional[str] = Field(None, max_length=2000)
    occurred_at: AwareDatetime

    @model_validator(mode="before")
    @classmethod
    def _drop_amount_unless_formula(cls, data: Any) -> Any:
        if not isinstance(data, dict):
            return data
        try:
            feeding_type = FeedingType(data.get("type"))
        except ValueError:
            # Let field validation report the bad type.
            return data
        if feeding_type is not FeedingType.formula and data.get("amount_ml") is not None:
            data = dict(data)
            data["amount_ml"] = None
        return data

    @property
    def timestamp(self) -> datetime:
        return self.occurred_at


Record = Union[GrowthRecord, FeedingEvent]


class Collection(str, Enum):
    """Named collections held by the record store; values are the storage keys."""

    growth = "userRecords"
    feedings = "feedingRecords"

    @property
    def model(self) -> Type[BaseModel]:
        if self is Collection.growth:
            return GrowthRecord
        return FeedingEvent


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


def create_growth_record(
    *,
    name: str,
    age_months: int,
    weight_kg: float,
    height_cm: Optional[float] = None,
    recorded_at: Optional[datetime] = None,
) -> GrowthRecord:
    try:
        return GrowthRecord(
            id=str(uuid4()),
            name=name,
            age_months=age_months,
            weight_kg=weight_kg,
            height_cm=height_cm,
            recorded_at=recorded_at or _utc_now(),
        )
    except PydanticValidationError as exc:
        raise ValidationError(f"Invalid growth record: {exc}", errors=exc.errors()) from exc


def create_feeding_event(
    *,
    type: FeedingType | str,
    amount_ml: Optional[float] = None,
    notes: Optional[str] = None,
    occurred_at: Optional[datetime] = None,
) -> FeedingEvent:
    try:
        feeding_type = FeedingType(type)
    except ValueError as exc:
        raise ValidationError(f"Unknown feeding type: {type!r}") from exc
    if feeding_type is FeedingType.formula and amount_ml is None:
        raise ValidationError("Formula feedings require amount_ml")

    try:
        return FeedingEvent(
            id=str(uuid4()),
            type=feeding_type,
            amount_ml=amount_ml,
            notes=notes,
            occurred_at=occurred_at or _utc_now(),
        )
    except PydanticValidationError as exc:
        raise ValidationError(f"Invalid feeding event: {exc}", errors=exc.errors()) from exc
