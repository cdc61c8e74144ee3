from uuid import UUID
from fastapi import APIRouter, Depends, status
from journey.schemas.trip.invite import TripInviteCreate, TripInviteResponse
from journey.dependencies.store import get_gateway
from journey.services.trips.invite_service import InviteService

router = APIRouter(prefix="/trips", tags=["Trip Invites"])

@router.post("/{trip_id}/invites", response_model=TripInviteResponse, status_code=status.HTTP_201_CREATED)
async def invite_participants(
    trip_id: UUID,
    invite_data: TripInviteCreate,
    gateway=Depends(get_gateway)
):
    participant_ids = await InviteService(gateway).invite_participants(trip_id, invite_data.all_emails())
    return TripInviteResponse(participant_ids=participant_ids)
