"""Unit tests for the payload validators."""

from datetime import datetime, timedelta, timezone

from conference_api.app.schemas.agenda_item import AgendaItemPayload
from conference_api.app.schemas.attendee import AttendeeUpdate, AttendeeCreate
from conference_api.app.schemas.event import EventCreate, EventUpdate
from conference_api.app.schemas.speaker import SpeakerCreate
from conference_api.app.schemas.sponsor import SponsorUpdate
from conference_api.app.services.validation import (
    validate_agenda_item,
    validate_attendee,
    validate_event,
    validate_speaker,
    validate_sponsor,
)

START = datetime(2025, 9, 1, 9, 0, tzinfo=timezone.utc)


def agenda_payload(**overrides) -> AgendaItemPayload:
    data = {
        "eventId": "evt-1",
        "title": "Opening keynote",
        "startTime": START.isoformat(),
        "endTime": (START + timedelta(hours=1)).isoformat(),
        "type": "keynote",
    }
    data.update(overrides)
    return AgendaItemPayload.model_validate(data)


class TestAgendaItemValidation:
    def test_valid_payload_has_no_errors(self):
        assert validate_agenda_item(agenda_payload()) == []

    def test_empty_payload_reports_every_required_field_in_order(self):
        errors = validate_agenda_item(AgendaItemPayload())
        assert errors == [
            "Title is required",
            "Start time is required",
            "End time is required",
            "Type is required",
            "Event ID is required",
        ]

    def test_missing_title_and_type(self):
        errors = validate_agenda_item(agenda_payload(title=None, type=None))
        assert "Title is required" in errors
        assert "Type is required" in errors
        assert len(errors) == 2

    def test_end_before_start(self):
        payload = agenda_payload(endTime=(START - timedelta(minutes=5)).isoformat())
        assert validate_agenda_item(payload) == ["End time must be after start time"]

    def test_end_equal_to_start_is_rejected(self):
        payload = agenda_payload(endTime=START.isoformat())
        assert validate_agenda_item(payload) == ["End time must be after start time"]

    def test_time_order_error_alongside_others(self):
        payload = agenda_payload(endTime=START.isoformat(), title="", eventId=None)
        errors = validate_agenda_item(payload)
        assert errors.count("End time must be after start time") == 1
        assert errors == [
            "Title is required",
            "End time must be after start time",
            "Event ID is required",
        ]

    def test_naive_and_aware_times_compare(self):
        payload = agenda_payload(startTime="2025-09-01T09:00:00", endTime="2025-09-01T10:00:00+00:00")
        assert validate_agenda_item(payload) == []

    def test_invalid_type(self):
        assert validate_agenda_item(agenda_payload(type="party")) == ["Invalid type"]

    def test_every_known_type_is_accepted(self):
        for item_type in ("keynote", "session", "workshop", "break", "networking"):
            assert validate_agenda_item(agenda_payload(type=item_type)) == []

    def test_partial_payload_is_held_to_full_rules(self):
        errors = validate_agenda_item(AgendaItemPayload.model_validate({"title": "Renamed"}))
        assert "Title is required" not in errors
        assert "Event ID is required" in errors


class TestOtherValidators:
    def test_event_requires_title(self):
        assert validate_event(EventCreate()) == ["Title is required"]

    def test_event_dates_must_be_ordered(self):
        event = EventCreate(title="Conf", start_date=START, end_date=START - timedelta(days=1))
        assert validate_event(event) == ["End date must be after start date"]

    def test_partial_event_update_skips_absent_fields(self):
        assert validate_event(EventUpdate(location="Berlin"), partial=True) == []

    def test_partial_event_update_still_rejects_blank_title(self):
        assert validate_event(EventUpdate(title=""), partial=True) == ["Title is required"]

    def test_speaker_and_sponsor_require_name(self):
        assert validate_speaker(SpeakerCreate()) == ["Name is required"]
        assert validate_sponsor(SponsorUpdate(tier="gold"), partial=True) == []

    def test_attendee_rules(self):
        errors = validate_attendee(AttendeeCreate(email="not-an-email"))
        assert errors == ["Name is required", "Invalid email", "Event ID is required"]
        assert validate_attendee(AttendeeUpdate(company="Acme"), partial=True) == []
