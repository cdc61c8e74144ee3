from typing import List
from uuid import UUID

from journey.core.logger import logger
from journey.schemas.trip.link import LinkCreate, LinkRecord
from journey.store.interface import PersistenceGateway
from journey.utils.validators import validate_url


class LinkService:
    def __init__(self, gateway: PersistenceGateway):
        self.gateway = gateway

    async def create_link(self, trip_id: UUID, link_data: LinkCreate) -> UUID:
        url = validate_url(link_data.url)
        await self.gateway.get_trip(trip_id)

        link_id = await self.gateway.create_link(trip_id, link_data.title, url)
        logger.info(f"Link {link_id} added to trip {trip_id}")
        return link_id

    async def get_trip_links(self, trip_id: UUID) -> List[LinkRecord]:
        await self.gateway.get_trip(trip_id)
        return await self.gateway.get_trip_links(trip_id)
