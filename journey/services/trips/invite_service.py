from typing import Iterable, List
from uuid import UUID

from journey.core.logger import logger
from journey.services.trips.unit_of_work import unit_of_work
from journey.store.interface import PersistenceGateway
from journey.utils.validators import validate_emails


class InviteService:
    def __init__(self, gateway: PersistenceGateway):
        self.gateway = gateway

    async def invite_participants(self, trip_id: UUID, emails: Iterable[str]) -> List[UUID]:
        """
        Adds every address to the trip or none of them.

        Raises NotFoundError for an unknown trip, ValidationFailedError when
        any address is malformed (nothing is written), and
        TransactionFailedError when the batch could not be committed.
        """
        await self.gateway.get_trip(trip_id)
        addresses = validate_emails(emails)

        async with unit_of_work(self.gateway, "invite participants") as handle:
            participant_ids = await self.gateway.invite(handle, trip_id, addresses)

        logger.info(f"Invited {len(participant_ids)} participant(s) to trip {trip_id}")
        return participant_ids
