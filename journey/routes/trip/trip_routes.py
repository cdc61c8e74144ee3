from uuid import UUID
from fastapi import APIRouter, Depends, Response, status
from journey.schemas.trip.trip_schema import (
    TripCreate, TripUpdate, CreateTripResponse, TripDetails, TripDetailsResponse
)
from journey.core.redis_lifecycle import get_cache
from journey.dependencies.store import get_gateway, get_dispatcher
from journey.services.trips.trip_service import TripService

router = APIRouter(prefix="/trips", tags=["Trips"])

async def get_trip_service(
    gateway=Depends(get_gateway),
    dispatcher=Depends(get_dispatcher),
    cache=Depends(get_cache)
) -> TripService:
    return TripService(gateway, dispatcher, cache)

@router.post("", response_model=CreateTripResponse, status_code=status.HTTP_201_CREATED)
async def create_trip_route(
    trip: TripCreate,
    trip_service: TripService = Depends(get_trip_service)
):
    trip_id = await trip_service.create_trip(trip)
    return CreateTripResponse(trip_id=trip_id)

@router.get("/{trip_id}", response_model=TripDetailsResponse)
async def get_trip(
    trip_id: UUID,
    trip_service: TripService = Depends(get_trip_service)
):
    trip = await trip_service.get_trip(trip_id)
    return TripDetailsResponse(
        trip=TripDetails(
            id=trip.id,
            destination=trip.destination,
            starts_at=trip.starts_at,
            ends_at=trip.ends_at,
            is_confirmed=trip.is_confirmed,
        )
    )

@router.put("/{trip_id}", status_code=status.HTTP_204_NO_CONTENT, response_class=Response)
async def update_trip_route(
    trip_id: UUID,
    trip_update: TripUpdate,
    trip_service: TripService = Depends(get_trip_service)
):
    await trip_service.update_trip(trip_id, trip_update)
    return Response(status_code=status.HTTP_204_NO_CONTENT)

# Confirm a trip and send e-mail invitations
@router.get("/{trip_id}/confirm", status_code=status.HTTP_204_NO_CONTENT, response_class=Response)
async def confirm_trip_route(
    trip_id: UUID,
    trip_service: TripService = Depends(get_trip_service)
):
    await trip_service.confirm_trip(trip_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
