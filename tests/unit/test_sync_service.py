from __future__ import annotations

import asyncio

import pytest

from chat_client.application.exceptions import ApiError, PayloadDecodeError
from chat_client.domain.entities.subscription import Subscription
from chat_client.services import sync_service


def _rooms_body(*room_ids: str, removed: tuple[str, ...] = ()) -> dict:
    return {
        "update": [{"_id": rid, "t": "c", "name": rid.lower()} for rid in room_ids],
        "remove": [{"_id": rid} for rid in removed],
        "success": True,
    }


def _subscriptions_body(*room_ids: str, removed: tuple[str, ...] = ()) -> dict:
    return {
        "update": [
            {"_id": f"s-{rid}", "rid": rid, "t": "c", "name": rid.lower()} for rid in room_ids
        ],
        "remove": [{"_id": rid} for rid in removed],
        "success": True,
    }


@pytest.mark.asyncio
async def test_list_rooms_sends_updated_since(client, transport):
    transport.responses["rooms.get"] = _rooms_body("A")

    result = await sync_service.list_rooms(1522091510711, client)

    call = transport.call("rooms.get")
    assert call["method"] == "GET"
    assert call["path"] == "/api/v1/rooms.get"
    assert call["params"] == {"updatedSince": "2018-03-26T19:11:50.711Z"}
    assert [r.id for r in result.update] == ["A"]


@pytest.mark.asyncio
async def test_list_rooms_from_the_beginning(client, transport):
    transport.responses["rooms.get"] = _rooms_body()

    await sync_service.list_rooms(0, client)

    assert transport.call("rooms.get")["params"]["updatedSince"] == "1970-01-01T00:00:00.000Z"


@pytest.mark.asyncio
async def test_list_subscriptions_normalizes_names(client, transport):
    transport.responses["subscriptions.get"] = {
        "update": [
            {"_id": "s1", "rid": "A", "t": "l", "fname": "Visitor"},
            {"_id": "s2", "rid": "B", "t": "c"},
            {"_id": "s3", "rid": "C", "t": "c", "name": ""},
            {"_id": "s4", "rid": "D", "t": "c", "name": "dee", "fname": "Dee"},
        ],
        "remove": [{"_id": "E"}],
    }

    result = await sync_service.list_subscriptions(0, client)

    assert [(s.room_id, s.name) for s in result.update] == [("A", "Visitor"), ("D", "dee")]
    assert [r.id for r in result.remove] == ["E"]


def test_normalize_keeps_order():
    subscriptions = [
        Subscription.model_validate({"_id": "s2", "rid": "B", "t": "c", "name": "b"}),
        Subscription.model_validate({"_id": "s1", "rid": "A", "t": "c", "fname": "A"}),
    ]

    assert [s.name for s in sync_service.normalize_subscriptions(subscriptions)] == ["b", "A"]


@pytest.mark.asyncio
async def test_chat_rooms_merges_both_fetches(client, transport):
    transport.responses["rooms.get"] = _rooms_body("A", "B", removed=("X",))
    transport.responses["subscriptions.get"] = _subscriptions_body("B", "C", removed=("X",))

    result = await sync_service.chat_rooms(client)

    assert [c.id for c in result.update] == ["B"]
    assert [r.id for r in result.remove] == ["X"]


@pytest.mark.asyncio
async def test_chat_rooms_filters_custom_by_default(client, transport):
    transport.responses["rooms.get"] = {"update": [{"_id": "A", "t": "x"}], "remove": []}
    transport.responses["subscriptions.get"] = {
        "update": [{"_id": "s", "rid": "A", "t": "x", "name": "a"}], "remove": [],
    }

    assert (await sync_service.chat_rooms(client)).update == []
    assert len((await sync_service.chat_rooms(client, filter_custom=False)).update) == 1


@pytest.mark.asyncio
async def test_chat_rooms_fetches_concurrently(client, transport):
    subscriptions_started = asyncio.Event()

    async def rooms():
        await subscriptions_started.wait()
        return _rooms_body("A")

    async def subscriptions():
        subscriptions_started.set()
        return _subscriptions_body("A")

    transport.responses["rooms.get"] = rooms
    transport.responses["subscriptions.get"] = subscriptions

    result = await asyncio.wait_for(sync_service.chat_rooms(client, 0), timeout=1)

    assert [c.id for c in result.update] == ["A"]


@pytest.mark.asyncio
async def test_failed_fetch_cancels_the_other(client, transport):
    subscriptions_started = asyncio.Event()
    cancelled = asyncio.Event()
    error = ApiError(401, "You must be logged in to do this.")

    async def rooms():
        await subscriptions_started.wait()
        return error

    async def subscriptions():
        subscriptions_started.set()
        try:
            await asyncio.Event().wait()
        except asyncio.CancelledError:
            cancelled.set()
            raise

    transport.responses["rooms.get"] = rooms
    transport.responses["subscriptions.get"] = subscriptions

    with pytest.raises(ApiError) as exc_info:
        await sync_service.chat_rooms(client)

    assert exc_info.value is error
    await asyncio.wait_for(cancelled.wait(), timeout=1)


@pytest.mark.asyncio
async def test_decode_error_propagates(client, transport):
    transport.responses["rooms.get"] = {"update": [{"t": "c"}], "remove": []}
    transport.responses["subscriptions.get"] = _subscriptions_body()

    with pytest.raises(PayloadDecodeError):
        await sync_service.chat_rooms(client)


@pytest.mark.asyncio
async def test_list_channels(client, transport):
    transport.responses["channels.list.joined"] = {
        "channels": [{"_id": "A", "t": "c"}], "offset": 0, "count": 1, "total": 1,
    }
    transport.responses["channels.list"] = {"channels": []}

    joined = await sync_service.list_channels(client, count=10)
    everything = await sync_service.list_channels(client, joined_only=False)

    assert [r.id for r in joined] == ["A"]
    assert transport.call("channels.list.joined")["params"] == {"offset": "0", "count": "10"}
    assert everything == []


@pytest.mark.asyncio
async def test_list_groups_and_ims(client, transport):
    transport.responses["groups.listAll"] = {"groups": [{"_id": "G", "t": "p"}]}
    transport.responses["im.list"] = {"ims": [{"_id": "D", "t": "d"}]}

    groups = await sync_service.list_groups(client)
    ims = await sync_service.list_ims(client)

    assert groups[0].room_type == "p"
    assert ims[0].id == "D"
