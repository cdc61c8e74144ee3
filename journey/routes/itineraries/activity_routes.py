from uuid import UUID
from fastapi import APIRouter, Depends, status
from journey.core.config import settings
from journey.schemas.itineraries.activity import (
    ActivityCreate, CreateActivityResponse, TripActivitiesResponse
)
from journey.dependencies.store import get_gateway
from journey.services.itineraries.itinerary_service import ItineraryService

router = APIRouter(prefix="/trips", tags=["Activities"])

async def get_itinerary_service(
    gateway=Depends(get_gateway)
) -> ItineraryService:
    return ItineraryService(gateway, sort_by_date=settings.ITINERARY_SORT_BY_DATE)

# 🔹 Activities grouped by day
@router.get("/{trip_id}/activities", response_model=TripActivitiesResponse)
async def get_trip_activities(
    trip_id: UUID,
    itinerary_service: ItineraryService = Depends(get_itinerary_service)
):
    groups = await itinerary_service.get_trip_activities(trip_id)
    return TripActivitiesResponse(activities=groups)

@router.post("/{trip_id}/activities", response_model=CreateActivityResponse, status_code=status.HTTP_201_CREATED)
async def create_trip_activity(
    trip_id: UUID,
    activity_data: ActivityCreate,
    itinerary_service: ItineraryService = Depends(get_itinerary_service)
):
    activity_id = await itinerary_service.create_activity(trip_id, activity_data)
    return CreateActivityResponse(activity_id=activity_id)
