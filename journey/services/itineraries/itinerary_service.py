from typing import List
from uuid import UUID

from journey.core.config import settings
from journey.core.logger import logger
from journey.schemas.itineraries.activity import ActivityCreate, ActivityDayGroup
from journey.services.itineraries.aggregator import group_activities_by_day
from journey.store.interface import PersistenceGateway
from journey.utils.validators import to_naive_utc, validate_within_window


class ItineraryService:
    def __init__(self, gateway: PersistenceGateway, sort_by_date: bool = settings.ITINERARY_SORT_BY_DATE):
        self.gateway = gateway
        self.sort_by_date = sort_by_date

    async def create_activity(self, trip_id: UUID, activity_data: ActivityCreate) -> UUID:
        trip = await self.gateway.get_trip(trip_id)

        occurs_at = to_naive_utc(activity_data.occurs_at)
        validate_within_window(occurs_at, trip.starts_at, trip.ends_at)

        activity_id = await self.gateway.create_activity(trip_id, activity_data.title, occurs_at)
        logger.info(f"Activity {activity_id} scheduled on trip {trip_id} at {occurs_at.isoformat()}")
        return activity_id

    async def get_trip_activities(self, trip_id: UUID) -> List[ActivityDayGroup]:
        await self.gateway.get_trip(trip_id)

        activities = await self.gateway.get_trip_activities(trip_id)
        return group_activities_by_day(activities, sort_by_date=self.sort_by_date)
