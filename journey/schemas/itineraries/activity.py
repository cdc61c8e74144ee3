from pydantic import BaseModel, Field
from datetime import datetime, date as dt
from typing import List
from uuid import UUID


class ActivityCreate(BaseModel):
    title: str = Field(..., min_length=1)
    occurs_at: datetime


class ActivityRecord(BaseModel):
    id: UUID
    trip_id: UUID
    title: str
    occurs_at: datetime

    class Config:
        from_attributes = True


class ActivityOut(BaseModel):
    id: UUID
    title: str
    occurs_at: datetime


# One calendar day of the itinerary
class ActivityDayGroup(BaseModel):
    date: dt
    activities: List[ActivityOut]


class TripActivitiesResponse(BaseModel):
    activities: List[ActivityDayGroup]


class CreateActivityResponse(BaseModel):
    activity_id: UUID
