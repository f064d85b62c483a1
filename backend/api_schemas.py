from __future__ import annotations
from datetime import date
from typing import List, Optional

from pydantic import BaseModel, Field

from modules.wizard.controller import WizardSnapshot


class DestinationUpdate(BaseModel):
    destination: str = ""


class DestinationSelection(BaseModel):
    suggestion: str


class DatesUpdate(BaseModel):
    start_date: Optional[date] = None
    end_date: Optional[date] = None


class ActivityCreate(BaseModel):
    activity: str


class ForecastDayView(BaseModel):
    date: date
    high_f: int
    low_f: int
    conditions: str


class PackingItemView(BaseModel):
    name: str
    quantity: int = Field(ge=1)


class PackingGroupView(BaseModel):
    category: str
    items: List[PackingItemView]


class SessionView(BaseModel):
    id: str
    step: int
    step_title: str
    destination: str
    start_date: Optional[date] = None
    end_date: Optional[date] = None
    duration_label: str = ""
    activities: List[str] = []
    forecast: Optional[List[ForecastDayView]] = None
    packing_list: Optional[List[PackingGroupView]] = None
    is_generating: bool = False
    suggestions: List[str] = []
    suggestions_visible: bool = False
    suggestions_loading: bool = False
    last_error: str = ""
    forecast_is_stale: bool = False
    packing_is_stale: bool = False

    @classmethod
    def from_snapshot(cls, session_id: str, snap: WizardSnapshot) -> "SessionView":
        forecast = None
        if snap.forecast_set is not None:
            forecast = [
                ForecastDayView(
                    date=d.date, high_f=d.high_f, low_f=d.low_f, conditions=d.conditions.value,
                )
                for d in snap.forecast_set
            ]
        packing = None
        if snap.packing_list is not None:
            packing = [
                PackingGroupView(
                    category=category.value,
                    items=[PackingItemView(name=i.name, quantity=i.quantity) for i in items],
                )
                for category, items in snap.packing_list.by_category().items()
            ]
        return cls(
            id=session_id,
            step=int(snap.step),
            step_title=snap.step.title,
            destination=snap.destination,
            start_date=snap.start_date,
            end_date=snap.end_date,
            duration_label=snap.duration_label,
            activities=list(snap.activities),
            forecast=forecast,
            packing_list=packing,
            is_generating=snap.is_generating,
            suggestions=list(snap.suggestions),
            suggestions_visible=snap.suggestions_visible,
            suggestions_loading=snap.suggestions_loading,
            last_error=snap.last_error,
            forecast_is_stale=snap.forecast_is_stale,
            packing_is_stale=snap.packing_is_stale,
        )
