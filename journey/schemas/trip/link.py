from pydantic import BaseModel, Field
from typing import List
from uuid import UUID

class LinkCreate(BaseModel):
    title: str = Field(..., min_length=1)
    url: str

class LinkRecord(BaseModel):
    id: UUID
    trip_id: UUID
    title: str
    url: str

    class Config:
        from_attributes = True

class LinkOut(BaseModel):
    id: UUID
    title: str
    url: str

class LinksResponse(BaseModel):
    links: List[LinkOut]

class CreateLinkResponse(BaseModel):
    link_id: UUID
