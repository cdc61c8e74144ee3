from uuid import UUID
from fastapi import APIRouter, Depends, status
from journey.schemas.trip.link import LinkCreate, LinkOut, LinksResponse, CreateLinkResponse
from journey.dependencies.store import get_gateway
from journey.services.trips.link_service import LinkService

router = APIRouter(prefix="/trips", tags=["Links"])

@router.get("/{trip_id}/links", response_model=LinksResponse)
async def list_trip_links(
    trip_id: UUID,
    gateway=Depends(get_gateway)
):
    links = await LinkService(gateway).get_trip_links(trip_id)
    return LinksResponse(links=[LinkOut(id=l.id, title=l.title, url=l.url) for l in links])

@router.post("/{trip_id}/links", response_model=CreateLinkResponse, status_code=status.HTTP_201_CREATED)
async def create_trip_link(
    trip_id: UUID,
    link_data: LinkCreate,
    gateway=Depends(get_gateway)
):
    link_id = await LinkService(gateway).create_link(trip_id, link_data)
    return CreateLinkResponse(link_id=link_id)
