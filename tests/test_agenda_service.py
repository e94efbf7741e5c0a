"""Unit tests for AgendaService: pagination, speaker enrichment and references."""

import math
from datetime import datetime, timedelta, timezone

import pytest

from conference_api.app.core.exceptions import InvalidReferenceError, NotFoundError, ValidationError
from conference_api.app.schemas.agenda_item import AgendaItemPayload
from conference_api.app.services.agenda_service import AgendaService

START = datetime(2025, 9, 1, 9, 0, tzinfo=timezone.utc)


def payload(event_id, offset_hours=0, speaker_ids=None, **overrides) -> AgendaItemPayload:
    start = START + timedelta(hours=offset_hours)
    data = {
        "eventId": event_id,
        "title": f"Slot {offset_hours}",
        "startTime": start.isoformat(),
        "endTime": (start + timedelta(minutes=45)).isoformat(),
        "type": "session",
        "speakerIds": speaker_ids or [],
    }
    data.update(overrides)
    return AgendaItemPayload.model_validate(data)


@pytest.fixture
def service(store) -> AgendaService:
    return AgendaService(store)


@pytest.fixture
def event_id(store, run) -> str:
    return run(store.collection("events").add({"title": "Conf"}))


@pytest.fixture
def speaker_ids(store, run):
    speakers = store.collection("speakers")
    return [run(speakers.add({"name": name})) for name in ("Ada", "Grace", "Linus")]


def count_speaker_fetches(service, monkeypatch):
    calls = []
    original_get = service._speakers.get

    async def counting_get(doc_id):
        calls.append(doc_id)
        return await original_get(doc_id)

    monkeypatch.setattr(service._speakers, "get", counting_get)
    return calls


class TestPagination:
    @pytest.mark.parametrize("total,limit", [(0, 10), (7, 3), (9, 3), (10, 10), (11, 10)])
    def test_total_pages_and_page_slices(self, service, event_id, run, total, limit):
        for hour in range(total):
            run(service.create(payload(event_id, offset_hours=hour)))

        pages = math.ceil(total / limit)
        seen = []
        for page in range(1, pages + 2):
            result = run(service.list_agenda_items(event_id=event_id, page=page, limit=limit))
            assert result.pagination.total == total
            assert result.pagination.total_pages == pages
            assert result.pagination.page == page
            assert result.pagination.limit == limit
            expected = list(range((page - 1) * limit, min(page * limit, total)))
            assert [item.title for item in result.items] == [f"Slot {hour}" for hour in expected]
            seen.extend(result.items)
        assert len(seen) == total

    def test_page_beyond_range_is_empty(self, service, event_id, run):
        run(service.create(payload(event_id)))
        result = run(service.list_agenda_items(event_id=event_id, page=5, limit=10))
        assert result.items == []
        assert result.pagination.total == 1

    def test_huge_page_and_limit(self, service, event_id, run):
        run(service.create(payload(event_id)))
        far_page = run(service.list_agenda_items(page=10 ** 18, limit=10))
        assert far_page.items == []
        assert far_page.pagination.total_pages == 1

        one_page = run(service.list_agenda_items(limit=10 ** 20))
        assert len(one_page.items) == 1
        assert one_page.pagination.limit == 10 ** 20
        assert one_page.pagination.total_pages == 1

    def test_sort_by_start_time_compares_instants(self, service, event_id, run):
        run(service.create(payload(
            event_id, title="nine utc",
            startTime="2025-09-01T09:00:00Z", endTime="2025-09-01T09:30:00Z",
        )))
        run(service.create(payload(
            event_id, title="eight utc",
            startTime="2025-09-01T10:00:00+02:00", endTime="2025-09-01T10:30:00+02:00",
        )))
        run(service.create(payload(
            event_id, title="half past eight utc",
            startTime="2025-09-01T08:30:00.250000", endTime="2025-09-01T08:45:00",
        )))

        result = run(service.list_agenda_items(event_id=event_id))
        assert [item.title for item in result.items] == ["eight utc", "half past eight utc", "nine utc"]
        assert result.items[0].start_time == datetime(2025, 9, 1, 8, 0, tzinfo=timezone.utc)

    def test_event_filter(self, service, event_id, store, run):
        other_event = run(store.collection("events").add({"title": "Other"}))
        run(service.create(payload(event_id)))
        run(service.create(payload(other_event, offset_hours=1)))
        run(service.create(payload(other_event, offset_hours=2)))

        assert run(service.list_agenda_items(event_id=event_id)).pagination.total == 1
        assert run(service.list_agenda_items(event_id=other_event)).pagination.total == 2
        assert run(service.list_agenda_items()).pagination.total == 3

    def test_sort_descending_and_by_other_field(self, service, event_id, run):
        for hour, title in [(0, "b"), (1, "c"), (2, "a")]:
            run(service.create(payload(event_id, offset_hours=hour, title=title)))

        descending = run(service.list_agenda_items(event_id=event_id, sort_order="desc"))
        assert [item.title for item in descending.items] == ["a", "c", "b"]
        by_title = run(service.list_agenda_items(event_id=event_id, sort_by="title"))
        assert [item.title for item in by_title.items] == ["a", "b", "c"]

    def test_unknown_sort_field_does_not_fail(self, service, event_id, run):
        run(service.create(payload(event_id)))
        result = run(service.list_agenda_items(event_id=event_id, sort_by="doesNotExist"))
        assert len(result.items) == 1

    def test_invalid_paging_arguments(self, service, run):
        with pytest.raises(ValidationError) as excinfo:
            run(service.list_agenda_items(page=0, limit=0, sort_order="up"))
        assert len(excinfo.value.errors) == 3


class TestSpeakerEnrichment:
    def test_speakers_follow_each_items_own_order(self, service, event_id, speaker_ids, run):
        ada, grace, linus = speaker_ids
        run(service.create(payload(event_id, 0, [grace, ada])))
        run(service.create(payload(event_id, 1, [ada, linus, grace])))

        items = run(service.list_agenda_items(event_id=event_id)).items
        assert [s.name for s in items[0].speakers] == ["Grace", "Ada"]
        assert [s.name for s in items[1].speakers] == ["Ada", "Linus", "Grace"]

    def test_shared_speakers_are_fetched_once(self, service, event_id, speaker_ids, run, monkeypatch):
        ada, grace, _ = speaker_ids
        run(service.create(payload(event_id, 0, [ada, grace])))
        run(service.create(payload(event_id, 1, [grace, ada])))
        run(service.create(payload(event_id, 2, [ada])))

        calls = count_speaker_fetches(service, monkeypatch)
        items = run(service.list_agenda_items(event_id=event_id)).items

        assert sorted(calls) == sorted([ada, grace])
        assert [s.id for s in items[0].speakers] == [ada, grace]
        assert [s.id for s in items[1].speakers] == [grace, ada]
        assert items[1].speakers[0].name == "Grace"

    def test_deleted_speaker_is_omitted(self, service, event_id, speaker_ids, store, run):
        ada, grace, _ = speaker_ids
        created = run(service.create(payload(event_id, 0, [ada, grace])))
        run(store.collection("speakers").delete(ada))

        fetched = run(service.get(created.id))
        assert fetched.speaker_ids == [ada, grace]
        assert [s.id for s in fetched.speakers] == [grace]
        listed = run(service.list_agenda_items(event_id=event_id)).items
        assert [s.id for s in listed[0].speakers] == [grace]

    def test_items_without_speakers_get_empty_list(self, service, event_id, run):
        created = run(service.create(payload(event_id)))
        assert run(service.get(created.id)).speakers == []


class TestWrites:
    def test_create_then_get_round_trips(self, service, event_id, speaker_ids, run):
        created = run(service.create(payload(event_id, 0, speaker_ids[:2], location="Hall A")))
        fetched = run(service.get(created.id))
        assert fetched == created
        assert fetched.location == "Hall A"

    def test_missing_event_rejected_without_writing(self, service, store, run):
        with pytest.raises(NotFoundError) as excinfo:
            run(service.create(payload("no-such-event")))
        assert excinfo.value.message == "Event not found"
        assert run(store.collection("agendaItems").query().count()) == 0

    def test_missing_speaker_rejected(self, service, event_id, speaker_ids, store, run):
        with pytest.raises(InvalidReferenceError):
            run(service.create(payload(event_id, 0, [speaker_ids[0], "ghost"])))
        assert run(store.collection("agendaItems").query().count()) == 0

    def test_update_requires_full_payload(self, service, event_id, run):
        created = run(service.create(payload(event_id)))
        with pytest.raises(ValidationError):
            run(service.update(created.id, AgendaItemPayload.model_validate({"title": "New"})))

    def test_update_merges_and_returns_enriched_item(self, service, event_id, speaker_ids, run):
        created = run(service.create(payload(event_id)))
        updated = run(service.update(created.id, payload(event_id, 0, [speaker_ids[2]], title="Renamed")))
        assert updated.title == "Renamed"
        assert [s.name for s in updated.speakers] == ["Linus"]

    def test_update_missing_item(self, service, event_id, run):
        with pytest.raises(NotFoundError) as excinfo:
            run(service.update("missing", payload(event_id)))
        assert excinfo.value.message == "Agenda item not found"

    def test_delete(self, service, event_id, run):
        created = run(service.create(payload(event_id)))
        assert run(service.delete(created.id)) == "Agenda item deleted successfully"
        with pytest.raises(NotFoundError):
            run(service.get(created.id))
        with pytest.raises(NotFoundError):
            run(service.delete(created.id))
