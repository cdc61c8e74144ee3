# journey/routes/__init__.py
from fastapi import APIRouter
from journey.routes.trip import trip_routes, invitation, participants, links
from journey.routes.itineraries import activity_routes


api_router = APIRouter()

# Trip routes
api_router.include_router(trip_routes.router)
api_router.include_router(invitation.router)
api_router.include_router(participants.router)
api_router.include_router(links.router)

# Itinerary routes
api_router.include_router(activity_routes.router)
