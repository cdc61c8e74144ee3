"""
Persistence contract used by the trip services.

Services depend on ``PersistenceGateway`` only; ``SqlStore`` is the SQLAlchemy
implementation wired in by the routers, and tests substitute an in-memory one.
Cancellation is the caller's asyncio task: implementations must not shield
their awaits so a cancelled request stops where it is.
"""

from abc import ABC, abstractmethod
from datetime import datetime
from typing import Any, List, Optional, Sequence
from uuid import UUID

from journey.schemas.itineraries.activity import ActivityRecord
from journey.schemas.trip.link import LinkRecord
from journey.schemas.trip.participant import ParticipantRecord
from journey.schemas.trip.trip_schema import TripRecord

# Opaque transaction handle returned by begin_unit_of_work
UnitOfWorkHandle = Any


class PersistenceGateway(ABC):
    # Trips

    @abstractmethod
    async def get_trip(self, trip_id: UUID) -> TripRecord:
        """Raises NotFoundError when the trip does not exist."""

    @abstractmethod
    async def create_trip(
        self,
        handle: UnitOfWorkHandle,
        owner_name: str,
        owner_email: str,
        destination: str,
        starts_at: datetime,
        ends_at: datetime,
    ) -> UUID: ...

    @abstractmethod
    async def update_trip(
        self,
        trip_id: UUID,
        destination: Optional[str],
        starts_at: Optional[datetime],
        ends_at: Optional[datetime],
        is_confirmed: bool,
    ) -> None:
        """
        None leaves a column as stored. is_confirmed only ever moves
        false -> true: passing False never unconfirms a trip.
        """

    # Participants

    @abstractmethod
    async def get_participant(self, participant_id: UUID) -> ParticipantRecord:
        """Raises NotFoundError when the participant does not exist."""

    @abstractmethod
    async def confirm_participant(self, participant_id: UUID) -> bool:
        """Returns False when the row was already confirmed."""

    @abstractmethod
    async def get_participants(self, trip_id: UUID) -> List[ParticipantRecord]: ...

    # Unit of work

    @abstractmethod
    async def begin_unit_of_work(self) -> UnitOfWorkHandle: ...

    @abstractmethod
    async def invite(
        self,
        handle: UnitOfWorkHandle,
        trip_id: UUID,
        emails: Sequence[str],
        is_owner: bool = False,
        is_confirmed: bool = False,
    ) -> List[UUID]: ...

    @abstractmethod
    async def commit(self, handle: UnitOfWorkHandle) -> None: ...

    @abstractmethod
    async def rollback(self, handle: UnitOfWorkHandle) -> None: ...

    # Activities and links

    @abstractmethod
    async def get_trip_activities(self, trip_id: UUID) -> List[ActivityRecord]:
        """No ordering is promised."""

    @abstractmethod
    async def create_activity(self, trip_id: UUID, title: str, occurs_at: datetime) -> UUID: ...

    @abstractmethod
    async def get_trip_links(self, trip_id: UUID) -> List[LinkRecord]: ...

    @abstractmethod
    async def create_link(self, trip_id: UUID, title: str, url: str) -> UUID: ...
