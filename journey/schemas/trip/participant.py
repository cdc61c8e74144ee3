from pydantic import BaseModel
from typing import List, Optional
from uuid import UUID

class ParticipantRecord(BaseModel):
    id: UUID
    trip_id: UUID
    email: str
    is_confirmed: bool = False
    is_owner: bool = False

    class Config:
        from_attributes = True

class ParticipantOut(BaseModel):
    id: UUID
    name: Optional[str] = None
    email: str
    is_confirmed: bool

class ParticipantsResponse(BaseModel):
    participants: List[ParticipantOut]
