from __future__ import annotations

from chat_client.application.dto.payloads import CreateChannelPayload, UserNamePayload
from chat_client.client import ChatClient
from chat_client.domain.entities.room import Room
from chat_client.domain.value_objects.enums import RoomType
from chat_client.services import _rest


async def create_channel(
    room_type: RoomType | str,
    name: str,
    members: list[str] | None,
    client: ChatClient,
    read_only: bool | None = False,
) -> Room:
    """Create a channel or private group and invite ``members`` to it."""
    payload = CreateChannelPayload(name=name, members=members, read_only=read_only)
    method = client.urls.method_for_room_type(room_type, "create")
    return await _rest.post_result(client, method, payload, Room)


async def create_direct_message_room(username: str, client: ChatClient) -> Room:
    return await _rest.post_result(
        client, "im.create", UserNamePayload(username=username), Room,
    )
