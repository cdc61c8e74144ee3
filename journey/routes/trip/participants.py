from uuid import UUID
from fastapi import APIRouter, Depends, Response, status
from journey.schemas.trip.participant import ParticipantOut, ParticipantsResponse
from journey.dependencies.store import get_gateway
from journey.services.trips.participant_service import ParticipantService

router = APIRouter(tags=["Participants"])

@router.get("/trips/{trip_id}/participants", response_model=ParticipantsResponse)
async def list_trip_participants(
    trip_id: UUID,
    gateway=Depends(get_gateway)
):
    participants = await ParticipantService(gateway).get_participants(trip_id)
    return ParticipantsResponse(
        participants=[
            ParticipantOut(id=p.id, name=p.email, email=p.email, is_confirmed=p.is_confirmed)
            for p in participants
        ]
    )

@router.patch(
    "/participants/{participant_id}/confirm",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response
)
async def confirm_participant(
    participant_id: UUID,
    gateway=Depends(get_gateway)
):
    await ParticipantService(gateway).confirm_participant(participant_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
