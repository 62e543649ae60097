"""Joins the rooms and subscriptions sync collections into chat rooms."""
from __future__ import annotations

import logging
from collections.abc import Sequence

from chat_client.domain.entities.chat_room import ChatRoom
from chat_client.domain.entities.room import Removed, Room
from chat_client.domain.entities.subscription import Subscription
from chat_client.domain.value_objects.enums import RoomType
from chat_client.infrastructure.codec.envelope import MultiEnvelope

logger = logging.getLogger(__name__)


def reconcile(
    rooms: MultiEnvelope[Sequence[Room] | None, Sequence[Removed] | None],
    subscriptions: MultiEnvelope[Sequence[Subscription] | None, Sequence[Removed] | None],
    exclude_custom_type: bool,
) -> MultiEnvelope[list[ChatRoom], list[Removed]]:
    """Merge both sync results; entries present on one side only are dropped.

    A mismatch between the two lists happens when the user joins or leaves a
    room between the two fetches, so it is not treated as an error.
    """
    update = combine_updates(rooms.update, subscriptions.update, exclude_custom_type)
    remove = combine_removed(rooms.remove, subscriptions.remove)

    logger.debug(
        "Rooms: update(%d), remove(%d)", len(rooms.update or ()), len(rooms.remove or ()),
    )
    logger.debug(
        "Subscriptions: update(%d), remove(%d)",
        len(subscriptions.update or ()), len(subscriptions.remove or ()),
    )
    logger.debug("Combined: update(%d), remove(%d)", len(update), len(remove))
    return MultiEnvelope(update=update, remove=remove)


def combine_updates(
    rooms: Sequence[Room] | None,
    subscriptions: Sequence[Subscription] | None,
    exclude_custom_type: bool,
) -> list[ChatRoom]:
    by_id = {room.id: room for room in rooms or ()}

    chat_rooms: list[ChatRoom] = []
    dropped = 0
    for subscription in subscriptions or ():
        room = by_id.get(subscription.room_id)
        if room is None:
            dropped += 1
            continue
        chat_rooms.append(ChatRoom.create(room, subscription))

    if dropped:
        logger.debug("%d subscriptions dropped for missing room", dropped)

    if exclude_custom_type:
        return [c for c in chat_rooms if c.room_type is not RoomType.CUSTOM]
    return chat_rooms


def combine_removed(
    rooms: Sequence[Removed] | None,
    subscriptions: Sequence[Removed] | None,
) -> list[Removed]:
    by_id = {removed.id: removed for removed in rooms or ()}

    removed: list[Removed] = []
    for marker in subscriptions or ():
        match = by_id.get(marker.id)
        if match is not None:
            removed.append(match)

    dropped = len(subscriptions or ()) - len(removed)
    if dropped:
        logger.debug("%d removed subscriptions dropped for missing room", dropped)
    return removed
