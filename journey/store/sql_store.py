from datetime import datetime
from typing import List, Optional, Sequence
from uuid import UUID, uuid4

from sqlalchemy import or_, update
from sqlalchemy.ext.asyncio import AsyncSession, AsyncSessionTransaction
from sqlalchemy.future import select

from journey.core.errors import ErrorCode, NotFoundError
from journey.models.itinerary.activity import Activity
from journey.models.trips.link import Link
from journey.models.trips.participant import Participant
from journey.models.trips.trip_model import Trip
from journey.schemas.itineraries.activity import ActivityRecord
from journey.schemas.trip.link import LinkRecord
from journey.schemas.trip.participant import ParticipantRecord
from journey.schemas.trip.trip_schema import TripRecord
from journey.store.interface import PersistenceGateway


class SqlStore(PersistenceGateway):
    """PersistenceGateway over one AsyncSession, usually the request's."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def get_trip(self, trip_id: UUID) -> TripRecord:
        trip = await self.db.get(Trip, trip_id)
        if trip is None:
            raise NotFoundError(f"trip {trip_id} not found", code=ErrorCode.TRIP_NOT_FOUND)
        return TripRecord.model_validate(trip)

    async def create_trip(
        self,
        handle: AsyncSessionTransaction,
        owner_name: str,
        owner_email: str,
        destination: str,
        starts_at: datetime,
        ends_at: datetime,
    ) -> UUID:
        session = handle.session
        trip = Trip(
            id=uuid4(),
            destination=destination,
            owner_name=owner_name,
            owner_email=owner_email,
            starts_at=starts_at,
            ends_at=ends_at,
            is_confirmed=False,
        )
        session.add(trip)
        await session.flush()
        return trip.id

    async def update_trip(
        self,
        trip_id: UUID,
        destination: Optional[str],
        starts_at: Optional[datetime],
        ends_at: Optional[datetime],
        is_confirmed: bool,
    ) -> None:
        values = {
            column: value
            for column, value in (
                ("destination", destination),
                ("starts_at", starts_at),
                ("ends_at", ends_at),
            )
            if value is not None
        }
        # Evaluated in the UPDATE itself so a confirmation committed by
        # another request in the meantime is never overwritten
        values["is_confirmed"] = or_(Trip.is_confirmed, is_confirmed)

        result = await self.db.execute(
            update(Trip).where(Trip.id == trip_id).values(**values)
        )
        if result.rowcount == 0:
            await self.db.rollback()
            raise NotFoundError(f"trip {trip_id} not found", code=ErrorCode.TRIP_NOT_FOUND)
        await self.db.commit()

    async def get_participant(self, participant_id: UUID) -> ParticipantRecord:
        participant = await self.db.get(Participant, participant_id)
        if participant is None:
            raise NotFoundError(
                f"participant {participant_id} not found",
                code=ErrorCode.PARTICIPANT_NOT_FOUND,
            )
        return ParticipantRecord.model_validate(participant)

    async def confirm_participant(self, participant_id: UUID) -> bool:
        # Guarded update: of two racing confirmations only one changes the row
        result = await self.db.execute(
            update(Participant)
            .where(Participant.id == participant_id, Participant.is_confirmed.is_(False))
            .values(is_confirmed=True)
        )
        await self.db.commit()
        return result.rowcount == 1

    async def get_participants(self, trip_id: UUID) -> List[ParticipantRecord]:
        result = await self.db.execute(
            select(Participant)
            .where(Participant.trip_id == trip_id)
            .order_by(Participant.is_owner.desc(), Participant.email)
        )
        return [ParticipantRecord.model_validate(p) for p in result.scalars().all()]

    async def begin_unit_of_work(self) -> AsyncSessionTransaction:
        # Close the read-only transaction autobegun by earlier lookups
        if self.db.in_transaction():
            await self.db.commit()
        return await self.db.begin()

    async def invite(
        self,
        handle: AsyncSessionTransaction,
        trip_id: UUID,
        emails: Sequence[str],
        is_owner: bool = False,
        is_confirmed: bool = False,
    ) -> List[UUID]:
        session = handle.session
        participants = [
            Participant(
                id=uuid4(),
                trip_id=trip_id,
                email=email,
                is_owner=is_owner,
                is_confirmed=is_confirmed,
            )
            for email in emails
        ]
        session.add_all(participants)
        await session.flush()
        return [p.id for p in participants]

    async def commit(self, handle: AsyncSessionTransaction) -> None:
        await handle.commit()

    async def rollback(self, handle: AsyncSessionTransaction) -> None:
        # Also clears a transaction deactivated by a failed flush
        if handle.session.in_transaction():
            await handle.session.rollback()

    async def get_trip_activities(self, trip_id: UUID) -> List[ActivityRecord]:
        result = await self.db.execute(
            select(Activity).where(Activity.trip_id == trip_id)
        )
        return [ActivityRecord.model_validate(a) for a in result.scalars().all()]

    async def create_activity(self, trip_id: UUID, title: str, occurs_at: datetime) -> UUID:
        activity = Activity(id=uuid4(), trip_id=trip_id, title=title, occurs_at=occurs_at)
        self.db.add(activity)
        await self.db.commit()
        return activity.id

    async def get_trip_links(self, trip_id: UUID) -> List[LinkRecord]:
        result = await self.db.execute(
            select(Link).where(Link.trip_id == trip_id).order_by(Link.title)
        )
        return [LinkRecord.model_validate(link) for link in result.scalars().all()]

    async def create_link(self, trip_id: UUID, title: str, url: str) -> UUID:
        link = Link(id=uuid4(), trip_id=trip_id, title=title, url=url)
        self.db.add(link)
        await self.db.commit()
        return link.id
