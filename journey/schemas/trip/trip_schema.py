from pydantic import BaseModel, EmailStr, Field
from typing import List
from datetime import datetime
from uuid import UUID

class TripBase(BaseModel):
    destination: str = Field(..., min_length=4)
    starts_at: datetime
    ends_at: datetime

class TripCreate(TripBase):
    owner_name: str = Field(..., min_length=1)
    owner_email: EmailStr
    emails_to_invite: List[EmailStr] = []

class TripUpdate(TripBase):
    pass

class TripRecord(BaseModel):
    id: UUID
    destination: str
    starts_at: datetime
    ends_at: datetime
    owner_name: str
    owner_email: str
    is_confirmed: bool = False

    class Config:
        from_attributes = True

class CreateTripResponse(BaseModel):
    trip_id: UUID

class TripDetails(BaseModel):
    id: UUID
    destination: str
    starts_at: datetime
    ends_at: datetime
    is_confirmed: bool

class TripDetailsResponse(BaseModel):
    trip: TripDetails
