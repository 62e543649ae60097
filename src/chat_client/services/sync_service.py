"""Incremental room/subscription sync and room listings."""
from __future__ import annotations

import asyncio
import logging
from collections.abc import Iterable

from chat_client.client import ChatClient
from chat_client.domain.entities.chat_room import ChatRoom
from chat_client.domain.entities.room import Removed, Room
from chat_client.domain.entities.subscription import Subscription
from chat_client.domain.value_objects.timestamps import to_iso8601
from chat_client.infrastructure.codec.envelope import MultiEnvelope, decode_multi
from chat_client.services import _rest
from chat_client.services.reconciler import reconcile

logger = logging.getLogger(__name__)


async def list_rooms(
    timestamp: int, client: ChatClient,
) -> MultiEnvelope[list[Room], list[Removed]]:
    """Rooms updated or removed since ``timestamp`` (epoch ms, 0 for all)."""
    raw = await _rest.get(client, "rooms.get", updatedSince=to_iso8601(timestamp))
    return decode_multi(raw, list[Room], list[Removed])


async def list_subscriptions(
    timestamp: int, client: ChatClient,
) -> MultiEnvelope[list[Subscription], list[Removed]]:
    """Subscriptions updated or removed since ``timestamp``.

    Updates without a usable name are left out, see normalize_subscriptions.
    """
    raw = await _rest.get(client, "subscriptions.get", updatedSince=to_iso8601(timestamp))
    envelope = decode_multi(raw, list[Subscription], list[Removed])
    return MultiEnvelope(
        update=normalize_subscriptions(envelope.update), remove=envelope.remove,
    )


def normalize_subscriptions(subscriptions: Iterable[Subscription]) -> list[Subscription]:
    """Fill a missing name from the full name, then drop still-unnamed entries.

    Some livechat subscriptions only carry ``fname``.
    """
    named = (
        s.model_copy(update={"name": s.full_name})
        if s.name is None and s.full_name is not None
        else s
        for s in subscriptions
    )
    return [s for s in named if s.name]


async def chat_rooms(
    client: ChatClient,
    timestamp: int = 0,
    filter_custom: bool | None = None,
) -> MultiEnvelope[list[ChatRoom], list[Removed]]:
    """Chat rooms (room + subscription) changed since ``timestamp``.

    Both collections are fetched concurrently. If either request fails the
    other one is cancelled and the error propagates unchanged.
    """
    logger.debug("Syncing chat rooms since %d", timestamp)
    if filter_custom is None:
        filter_custom = client.filter_custom_rooms

    rooms_task = asyncio.ensure_future(list_rooms(timestamp, client))
    subscriptions_task = asyncio.ensure_future(list_subscriptions(timestamp, client))
    try:
        rooms, subscriptions = await asyncio.gather(rooms_task, subscriptions_task)
    except BaseException:
        rooms_task.cancel()
        subscriptions_task.cancel()
        raise

    return reconcile(rooms, subscriptions, filter_custom)


async def list_channels(
    client: ChatClient, joined_only: bool = True, offset: int = 0, count: int = 0,
) -> list[Room]:
    method = "channels.list.joined" if joined_only else "channels.list"
    return await _rest.get_result(client, method, list[Room], offset=offset, count=count)


async def list_groups(client: ChatClient, offset: int = 0, count: int = 0) -> list[Room]:
    return await _rest.get_result(
        client, "groups.listAll", list[Room], offset=offset, count=count,
    )


async def list_ims(client: ChatClient, offset: int = 0, count: int = 0) -> list[Room]:
    return await _rest.get_result(client, "im.list", list[Room], offset=offset, count=count)
