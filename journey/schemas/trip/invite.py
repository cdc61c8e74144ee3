from pydantic import BaseModel, EmailStr
from typing import List, Optional
from uuid import UUID

# A single address, a batch, or both
class TripInviteCreate(BaseModel):
    email: Optional[EmailStr] = None
    emails: List[EmailStr] = []

    def all_emails(self) -> List[str]:
        collected = [str(e) for e in self.emails]
        if self.email is not None:
            collected.insert(0, str(self.email))
        return collected

class TripInviteResponse(BaseModel):
    participant_ids: List[UUID]
