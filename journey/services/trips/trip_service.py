from uuid import UUID

from journey.core.cache import RedisCache
from journey.core.config import settings
from journey.core.logger import logger
from journey.schemas.trip.trip_schema import TripCreate, TripRecord, TripUpdate
from journey.services.notifications.dispatcher import NotificationDispatcher
from journey.services.trips.unit_of_work import unit_of_work
from journey.store.interface import PersistenceGateway
from journey.utils.validators import (
    to_naive_utc,
    validate_date_range,
    validate_email_address,
    validate_emails,
)


class TripService:
    def __init__(
        self,
        gateway: PersistenceGateway,
        dispatcher: NotificationDispatcher,
        cache: RedisCache,
    ):
        self.gateway = gateway
        self.dispatcher = dispatcher
        self.cache = cache

    async def _invalidate_trip_cache(self, trip_id: UUID):
        await self.cache.delete(self.cache.build_key("trips", "id", trip_id))

    async def create_trip(self, trip_data: TripCreate) -> UUID:
        """
        Writes the trip, its owner and the first invitees in one unit of work,
        then asks the owner to confirm by e-mail in the background.
        """
        validate_date_range(trip_data.starts_at, trip_data.ends_at)
        owner_email = validate_email_address(str(trip_data.owner_email))
        invitees = []
        if trip_data.emails_to_invite:
            invitees = [
                email for email in validate_emails(str(e) for e in trip_data.emails_to_invite)
                if email != owner_email
            ]

        async with unit_of_work(self.gateway, "create trip") as handle:
            trip_id = await self.gateway.create_trip(
                handle,
                owner_name=trip_data.owner_name,
                owner_email=owner_email,
                destination=trip_data.destination,
                starts_at=to_naive_utc(trip_data.starts_at),
                ends_at=to_naive_utc(trip_data.ends_at),
            )
            await self.gateway.invite(handle, trip_id, [owner_email], is_owner=True, is_confirmed=True)
            if invitees:
                await self.gateway.invite(handle, trip_id, invitees)

        logger.info(f"Trip {trip_id} created by {owner_email} with {len(invitees)} invitee(s)")
        self.dispatcher.dispatch_owner_confirmation(trip_id)
        return trip_id

    async def get_trip(self, trip_id: UUID) -> TripRecord:
        cache_key = self.cache.build_key("trips", "id", trip_id)
        cached_trip = await self.cache.get(cache_key)

        if cached_trip:
            logger.info(f"Trip {trip_id} retrieved from cache")
            return TripRecord.model_validate(cached_trip)

        trip = await self.gateway.get_trip(trip_id)

        await self.cache.set(
            cache_key,
            trip.model_dump(mode="json"),
            expire=settings.TRIP_CACHE_TTL_SECONDS
        )

        logger.info(f"Trip {trip_id} retrieved from database")
        return trip

    async def update_trip(self, trip_id: UUID, trip_data: TripUpdate) -> None:
        # Rejected before the store is touched
        validate_date_range(trip_data.starts_at, trip_data.ends_at)

        await self.gateway.get_trip(trip_id)

        # is_confirmed=False keeps whatever is stored, including a confirmation
        # that lands between the read above and this write
        await self.gateway.update_trip(
            trip_id,
            destination=trip_data.destination,
            starts_at=to_naive_utc(trip_data.starts_at),
            ends_at=to_naive_utc(trip_data.ends_at),
            is_confirmed=False,
        )
        await self._invalidate_trip_cache(trip_id)

        logger.info(f"Trip {trip_id} updated")

    async def confirm_trip(self, trip_id: UUID) -> None:
        """
        Unconfirmed -> Confirmed, then one background invitation e-mail run.
        Confirming again is harmless and sends the invitations again.
        """
        trip = await self.gateway.get_trip(trip_id)

        if trip.is_confirmed:
            logger.info(f"Trip {trip_id} already confirmed, re-sending invitations")
        else:
            logger.info(f"Trip {trip_id} confirmed")

        # Only the flag is written; a concurrent PUT's fields are left alone
        await self.gateway.update_trip(
            trip_id,
            destination=None,
            starts_at=None,
            ends_at=None,
            is_confirmed=True,
        )
        await self._invalidate_trip_cache(trip_id)

        self.dispatcher.dispatch_participants_invited(trip_id)
