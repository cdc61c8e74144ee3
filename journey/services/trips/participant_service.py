from typing import List
from uuid import UUID

from journey.core.errors import AlreadyConfirmedError
from journey.core.logger import logger
from journey.schemas.trip.participant import ParticipantRecord
from journey.store.interface import PersistenceGateway


class ParticipantService:
    def __init__(self, gateway: PersistenceGateway):
        self.gateway = gateway

    async def confirm_participant(self, participant_id: UUID) -> None:
        participant = await self.gateway.get_participant(participant_id)

        if participant.is_confirmed:
            raise AlreadyConfirmedError(f"participant {participant_id} already confirmed")

        # A concurrent confirmation may have won between the read and the write
        if not await self.gateway.confirm_participant(participant_id):
            raise AlreadyConfirmedError(f"participant {participant_id} already confirmed")

        logger.info(f"Participant {participant_id} confirmed for trip {participant.trip_id}")

    async def get_participants(self, trip_id: UUID) -> List[ParticipantRecord]:
        await self.gateway.get_trip(trip_id)
        return await self.gateway.get_participants(trip_id)
