"""Tests for trip creation, update and confirmation."""
import logging
from datetime import datetime, timezone
from uuid import uuid4

import pytest

from journey.core.errors import (
    ErrorCode,
    NotFoundError,
    TransactionFailedError,
    ValidationFailedError,
)
from journey.schemas.trip.trip_schema import TripCreate, TripUpdate
from journey.services.notifications.dispatcher import NotificationDispatcher
from journey.services.trips.trip_service import TripService
from tests.fakes import InMemoryGateway, RecordingNotifier


def _create_payload(**overrides):
    data = {
        "destination": "Florianópolis",
        "starts_at": datetime(2024, 7, 1, 9, 0),
        "ends_at": datetime(2024, 7, 10, 18, 0),
        "owner_name": "Ana Souza",
        "owner_email": "ana@example.com",
        "emails_to_invite": ["bia@example.com", "caio@example.com"],
    }
    data.update(overrides)
    return TripCreate(**data)


@pytest.fixture
def service(gateway, dispatcher, cache):
    return TripService(gateway, dispatcher, cache)


class TestCreateTrip:
    async def test_creates_trip_owner_and_invitees_together(self, service, gateway, dispatcher, notifier):
        trip_id = await service.create_trip(_create_payload())
        await dispatcher.drain()

        assert trip_id in gateway.trips
        assert gateway.emails_for(trip_id) == ["ana@example.com", "bia@example.com", "caio@example.com"]
        owner = next(p for p in gateway.participants.values() if p.is_owner)
        assert owner.email == "ana@example.com"
        assert owner.is_confirmed is True
        assert gateway.commits == 1
        assert notifier.owner_confirmations == [trip_id]

    async def test_owner_not_invited_twice(self, service, gateway):
        trip_id = await service.create_trip(_create_payload(emails_to_invite=["ana@example.com"]))
        assert gateway.emails_for(trip_id) == ["ana@example.com"]

    async def test_inverted_dates_rejected(self, service, gateway):
        with pytest.raises(ValidationFailedError) as exc_info:
            await service.create_trip(_create_payload(ends_at=datetime(2024, 6, 30)))
        assert exc_info.value.code == ErrorCode.INVALID_DATE_RANGE
        assert gateway.calls == []

    async def test_failed_invitee_insert_rolls_back_the_trip(self, cache):
        gateway = InMemoryGateway(fail_invite_at=2)
        notifier = RecordingNotifier()
        service = TripService(gateway, NotificationDispatcher(notifier), cache)

        with pytest.raises(TransactionFailedError):
            await service.create_trip(_create_payload())

        assert gateway.trips == {}
        assert gateway.participants == {}
        assert notifier.owner_confirmations == []

    async def test_aware_datetimes_stored_as_naive_utc(self, service, gateway):
        trip_id = await service.create_trip(_create_payload(
            starts_at=datetime(2024, 7, 1, 9, 0, tzinfo=timezone.utc),
            ends_at=datetime(2024, 7, 10, 18, 0, tzinfo=timezone.utc),
        ))
        assert gateway.trips[trip_id].starts_at == datetime(2024, 7, 1, 9, 0)


class TestUpdateTrip:
    async def test_ends_before_starts_never_reaches_the_store(self, service, gateway):
        trip = gateway.add_trip()

        with pytest.raises(ValidationFailedError):
            await service.update_trip(trip.id, TripUpdate(
                destination="Recife",
                starts_at=datetime(2024, 8, 10),
                ends_at=datetime(2024, 8, 1),
            ))

        assert gateway.calls == []

    async def test_update_keeps_confirmation(self, service, gateway):
        trip = gateway.add_trip(is_confirmed=True)

        await service.update_trip(trip.id, TripUpdate(
            destination="Recife",
            starts_at=datetime(2024, 8, 1),
            ends_at=datetime(2024, 8, 10),
        ))

        updated = gateway.trips[trip.id]
        assert updated.destination == "Recife"
        assert updated.is_confirmed is True

    async def test_unknown_trip_is_not_found(self, service):
        with pytest.raises(NotFoundError):
            await service.update_trip(uuid4(), TripUpdate(
                destination="Recife",
                starts_at=datetime(2024, 8, 1),
                ends_at=datetime(2024, 8, 10),
            ))

    async def test_update_invalidates_cached_details(self, service, gateway, cache):
        trip = gateway.add_trip()
        await service.get_trip(trip.id)

        await service.update_trip(trip.id, TripUpdate(
            destination="Recife",
            starts_at=datetime(2024, 8, 1),
            ends_at=datetime(2024, 8, 10),
        ))

        assert (await service.get_trip(trip.id)).destination == "Recife"


class TestGetTrip:
    async def test_second_read_served_from_cache(self, service, gateway):
        trip = gateway.add_trip()

        first = await service.get_trip(trip.id)
        second = await service.get_trip(trip.id)

        assert first == second
        assert gateway.calls.count("get_trip") == 1

    async def test_unknown_trip_is_not_found(self, service):
        with pytest.raises(NotFoundError):
            await service.get_trip(uuid4())


class TestConfirmTrip:
    async def test_confirm_marks_trip_and_dispatches_once(self, service, gateway, dispatcher, notifier):
        trip = gateway.add_trip()
        for n in range(5):
            gateway.add_participant(trip.id, f"guest{n}@example.com")

        await service.confirm_trip(trip.id)
        await dispatcher.drain()

        assert gateway.trips[trip.id].is_confirmed is True
        assert notifier.invitations == [trip.id]

    async def test_reconfirming_dispatches_again(self, service, gateway, dispatcher, notifier):
        trip = gateway.add_trip(is_confirmed=True)

        await service.confirm_trip(trip.id)
        await service.confirm_trip(trip.id)
        await dispatcher.drain()

        assert gateway.trips[trip.id].is_confirmed is True
        assert notifier.invitations == [trip.id, trip.id]

    async def test_unknown_trip_is_not_found_and_sends_nothing(self, service, dispatcher, notifier):
        with pytest.raises(NotFoundError):
            await service.confirm_trip(uuid4())
        await dispatcher.drain()
        assert notifier.invitations == []

    async def test_mail_failure_does_not_fail_confirmation(self, gateway, cache, caplog):
        notifier = RecordingNotifier(fail=True)
        dispatcher = NotificationDispatcher(notifier)
        service = TripService(gateway, dispatcher, cache)
        trip = gateway.add_trip()

        result = await service.confirm_trip(trip.id)
        with caplog.at_level(logging.ERROR, logger="journey"):
            await dispatcher.drain()

        assert result is None
        assert gateway.trips[trip.id].is_confirmed is True
        assert notifier.invitations == [trip.id]
        assert "smtp server unreachable" in caplog.text
