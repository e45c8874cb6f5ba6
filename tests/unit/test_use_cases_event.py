"""
Unit tests for event use cases (create, list, get, status update).
"""
from datetime import datetime, timezone

import pytest

from guardwatch.application.dto.event_dto import EventCreateRequest
from guardwatch.application.use_cases.event import (
    CreateEventUseCase,
    GetEventUseCase,
    ListEventsUseCase,
    UpdateEventStatusUseCase,
)
from guardwatch.domain.exceptions import MissingAccountError, NotFoundError, ValidationError
from guardwatch.domain.models.event import EventStatus


class TestCreateEventUseCase:

    @pytest.mark.asyncio
    async def test_create_defaults_status_to_active(self, event_repository):
        use_case = CreateEventUseCase(event_repository)
        result = await use_case.execute("U1", EventCreateRequest(type="fire", location="Lobby"))

        assert result.id
        assert result.user_id == "U1"
        assert result.status == "Active"
        assert result.type == "fire"
        assert len(event_repository.events) == 1

    @pytest.mark.asyncio
    async def test_create_defaults_timestamp(self, event_repository):
        before = datetime.now(timezone.utc)
        result = await CreateEventUseCase(event_repository).execute("U1", EventCreateRequest())
        assert result.timestamp >= before

    @pytest.mark.asyncio
    async def test_create_keeps_given_status(self, event_repository):
        result = await CreateEventUseCase(event_repository).execute(
            "U1", EventCreateRequest(status="Dismissed")
        )
        assert result.status == "Dismissed"

    @pytest.mark.asyncio
    @pytest.mark.parametrize("account_id", ["", "   ", None])
    async def test_missing_account_is_rejected(self, event_repository, account_id):
        with pytest.raises(MissingAccountError):
            await CreateEventUseCase(event_repository).execute(account_id, EventCreateRequest())
        assert event_repository.events == []

    @pytest.mark.asyncio
    async def test_invalid_status_is_rejected(self, event_repository):
        with pytest.raises(ValidationError, match="Invalid status"):
            await CreateEventUseCase(event_repository).execute("U1", EventCreateRequest(status="Open"))
        assert event_repository.events == []

    def test_request_accepts_account_id_alias(self):
        assert EventCreateRequest.model_validate({"accountId": "U9"}).user_id == "U9"
        assert EventCreateRequest.model_validate({"userId": "U8"}).user_id == "U8"


class TestListEventsUseCase:

    @pytest.mark.asyncio
    async def test_lists_only_owned_events_newest_first(self, event_repository, make_event):
        await event_repository.create(make_event("A", minute=1, type="first"))
        await event_repository.create(make_event("B", minute=2, type="other"))
        await event_repository.create(make_event("A", minute=3, type="third"))

        result = await ListEventsUseCase(event_repository).execute("A")

        assert [e.type for e in result] == ["third", "first"]
        assert all(e.user_id == "A" for e in result)

    @pytest.mark.asyncio
    async def test_equal_timestamps_keep_insertion_order(self, event_repository, make_event):
        for label in ("one", "two", "three"):
            await event_repository.create(make_event("A", minute=5, type=label))

        result = await ListEventsUseCase(event_repository).execute("A")
        assert [e.type for e in result] == ["one", "two", "three"]

    @pytest.mark.asyncio
    async def test_unknown_account_gets_empty_list(self, event_repository, make_event):
        await event_repository.create(make_event("A"))
        assert await ListEventsUseCase(event_repository).execute("nobody") == []

    @pytest.mark.asyncio
    async def test_missing_account_is_rejected(self, event_repository):
        with pytest.raises(MissingAccountError):
            await ListEventsUseCase(event_repository).execute("")


class TestGetEventUseCase:

    @pytest.mark.asyncio
    async def test_get_existing(self, event_repository, make_event):
        stored = await event_repository.create(make_event("A", type="smoke"))
        result = await GetEventUseCase(event_repository).execute(stored.id)
        assert result.id == stored.id
        assert result.type == "smoke"

    @pytest.mark.asyncio
    async def test_get_unknown_raises(self, event_repository):
        with pytest.raises(NotFoundError):
            await GetEventUseCase(event_repository).execute("does-not-exist")


class TestUpdateEventStatusUseCase:

    @pytest.mark.asyncio
    async def test_update_status(self, event_repository, make_event):
        stored = await event_repository.create(make_event("A"))
        result = await UpdateEventStatusUseCase(event_repository).execute(stored.id, "Resolved")
        assert result.status == "Resolved"
        assert result.user_id == "A"
        assert (await event_repository.get_by_id(stored.id)).status == EventStatus.RESOLVED

    @pytest.mark.asyncio
    async def test_invalid_status_leaves_event_unchanged(self, event_repository, make_event):
        stored = await event_repository.create(make_event("A", status=EventStatus.RESOLVED))
        use_case = UpdateEventStatusUseCase(event_repository)

        with pytest.raises(ValidationError):
            await use_case.execute(stored.id, "Bogus")
        with pytest.raises(ValidationError):
            await use_case.execute(stored.id, "resolved")

        assert (await event_repository.get_by_id(stored.id)).status == EventStatus.RESOLVED

    @pytest.mark.asyncio
    async def test_missing_status_is_rejected(self, event_repository, make_event):
        stored = await event_repository.create(make_event("A"))
        with pytest.raises(ValidationError, match="status is required"):
            await UpdateEventStatusUseCase(event_repository).execute(stored.id, None)

    @pytest.mark.asyncio
    async def test_unknown_event_raises(self, event_repository):
        with pytest.raises(NotFoundError):
            await UpdateEventStatusUseCase(event_repository).execute("missing", "Dismissed")
