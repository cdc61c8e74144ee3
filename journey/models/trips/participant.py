from sqlalchemy import Column, String, Boolean, DateTime, ForeignKey, Uuid, UniqueConstraint, func
from sqlalchemy.orm import relationship
from journey.core.database import Base
import uuid

class Participant(Base):
    __tablename__ = "participants"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    trip_id = Column(Uuid, ForeignKey("trips.id", ondelete="CASCADE"), nullable=False, index=True)
    email = Column(String, nullable=False)
    is_confirmed = Column(Boolean, nullable=False, default=False)
    is_owner = Column(Boolean, nullable=False, default=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now())

    # An e-mail is invited to a trip at most once
    __table_args__ = (
        UniqueConstraint("trip_id", "email", name="uq_participant_trip_email"),
    )

    trip = relationship("Trip", back_populates="participants")
