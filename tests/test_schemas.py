"""Tests for the read models loaded from ORM rows."""
from datetime import datetime
from types import SimpleNamespace
from uuid import uuid4

from journey.schemas.trip.participant import ParticipantRecord
from journey.schemas.trip.trip_schema import TripRecord


def test_participant_record_from_attributes():
    row = SimpleNamespace(id=uuid4(), trip_id=uuid4(), email="bia@example.com", is_confirmed=True, is_owner=False)

    record = ParticipantRecord.model_validate(row)

    assert record.id == row.id
    assert record.email == "bia@example.com"
    assert record.is_confirmed is True


def test_trip_record_from_attributes():
    row = SimpleNamespace(
        id=uuid4(),
        destination="Rio",
        owner_name="Ana Souza",
        owner_email="ana@example.com",
        starts_at=datetime(2024, 7, 1),
        ends_at=datetime(2024, 7, 2),
        is_confirmed=False,
    )

    record = TripRecord.model_validate(row)

    # Stored records skip the request-side length rule on destination
    assert record.destination == "Rio"
