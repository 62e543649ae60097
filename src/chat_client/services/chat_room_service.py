from __future__ import annotations

import json

from chat_client.application.dto.payloads import (
    AnnouncementPayload,
    DescriptionPayload,
    FavoritePayload,
    JoinCodePayload,
    NotificationsPayload,
    ReadOnlyPayload,
    ReadPayload,
    RenamePayload,
    RoomIdPayload,
    SaveNotificationPayload,
    TopicPayload,
    TypePayload,
    UserIdRoomIdPayload,
)
from chat_client.client import ChatClient
from chat_client.domain.entities.message import GenericAttachment, Message
from chat_client.domain.entities.results import PagedResult
from chat_client.domain.entities.room import Room
from chat_client.domain.entities.user import ChatRoomRole, User
from chat_client.domain.value_objects.enums import RoomType
from chat_client.infrastructure.codec import force_string
from chat_client.services import _rest


def _by_type(client: ChatClient, room_type: RoomType | str, method: str) -> str:
    return client.urls.method_for_room_type(room_type, method)


async def get_members(
    room_id: str,
    room_type: RoomType | str,
    offset: int,
    count: int,
    client: ChatClient,
) -> PagedResult[list[User]]:
    return await _rest.get_paged(
        client, _by_type(client, room_type, "members"), list[User],
        roomId=room_id, offset=offset, count=count,
    )


async def get_mentions(
    room_id: str, offset: int, count: int, client: ChatClient,
) -> PagedResult[list[Message]]:
    """Messages in the room that mention the authenticated user, newest first."""
    return await _rest.get_paged(
        client, "channels.getAllUserMentionsByChannel", list[Message],
        roomId=room_id, offset=offset, count=count, sort=json.dumps({"ts": -1}),
    )


async def get_favorite_messages(
    room_id: str, room_type: RoomType | str, offset: int, client: ChatClient,
) -> PagedResult[list[Message]]:
    """Messages in the room starred by the authenticated user."""
    token = client.tokens.get(client.server_url)
    user_id = token.user_id if token is not None else None
    query = {"starred._id": {"$in": [user_id]}}
    return await _rest.get_paged(
        client, _by_type(client, room_type, "messages"), list[Message],
        roomId=room_id, offset=offset, query=json.dumps(query),
    )


async def get_pinned_messages(
    room_id: str, room_type: RoomType | str, client: ChatClient, offset: int = 0,
) -> PagedResult[list[Message]]:
    return await _rest.get_paged(
        client, _by_type(client, room_type, "messages"), list[Message],
        roomId=room_id, offset=offset, query=json.dumps({"pinned": True}),
    )


async def get_files(
    room_id: str, room_type: RoomType | str, client: ChatClient, offset: int = 0,
) -> PagedResult[list[GenericAttachment]]:
    return await _rest.get_paged(
        client, _by_type(client, room_type, "files"), list[GenericAttachment],
        roomId=room_id, offset=offset, sort=json.dumps({"uploadedAt": -1}),
    )


async def get_info(
    room_id: str, room_name: str | None, room_type: RoomType | str, client: ChatClient,
) -> Room:
    return await _rest.get_result(
        client, _by_type(client, room_type, "info"), Room,
        roomId=room_id, roomName=room_name,
    )


async def mark_as_read(room_id: str, client: ChatClient) -> None:
    await _rest.post(client, "subscriptions.read", ReadPayload(room_id=room_id))


async def join_chat(room_id: str, client: ChatClient) -> bool:
    return await _rest.post_success(client, "channels.join", RoomIdPayload(room_id=room_id))


async def leave_chat(room_id: str, room_type: RoomType | str, client: ChatClient) -> bool:
    return await _rest.post_success(
        client, _by_type(client, room_type, "leave"), RoomIdPayload(room_id=room_id),
    )


async def rename(
    room_id: str, room_type: RoomType | str, new_name: str, client: ChatClient,
) -> bool:
    return await _rest.post_success(
        client, _by_type(client, room_type, "rename"),
        RenamePayload(room_id=room_id, name=new_name),
    )


async def set_read_only(
    room_id: str, room_type: RoomType | str, read_only: bool, client: ChatClient,
) -> bool:
    return await _rest.post_success(
        client, _by_type(client, room_type, "setReadOnly"),
        ReadOnlyPayload(room_id=room_id, read_only=read_only),
    )


async def set_type(
    room_id: str, room_type: RoomType | str, new_type: str, client: ChatClient,
) -> bool:
    return await _rest.post_success(
        client, _by_type(client, room_type, "setType"),
        TypePayload(room_id=room_id, type=new_type),
    )


async def set_join_code(
    room_id: str, room_type: RoomType | str, join_code: str, client: ChatClient,
) -> bool:
    return await _rest.post_success(
        client, _by_type(client, room_type, "setJoinCode"),
        JoinCodePayload(room_id=room_id, join_code=join_code),
    )


async def set_topic(
    room_id: str, room_type: RoomType | str, topic: str | None, client: ChatClient,
) -> bool:
    return await _rest.post_success(
        client, _by_type(client, room_type, "setTopic"),
        TopicPayload(room_id=room_id, topic=topic),
    )


async def set_description(
    room_id: str, room_type: RoomType | str, description: str | None, client: ChatClient,
) -> bool:
    return await _rest.post_success(
        client, _by_type(client, room_type, "setDescription"),
        DescriptionPayload(room_id=room_id, description=description),
    )


async def set_announcement(
    room_id: str, room_type: RoomType | str, announcement: str | None, client: ChatClient,
) -> bool:
    return await _rest.post_success(
        client, _by_type(client, room_type, "setAnnouncement"),
        AnnouncementPayload(room_id=room_id, announcement=announcement),
    )


async def archive(
    room_id: str, room_type: RoomType | str, archive_room: bool, client: ChatClient,
) -> bool:
    method = "archive" if archive_room else "unarchive"
    return await _rest.post_success(
        client, _by_type(client, room_type, method), RoomIdPayload(room_id=room_id),
    )


async def hide(
    room_id: str, room_type: RoomType | str, client: ChatClient, hide_room: bool = True,
) -> bool:
    method = "close" if hide_room else "open"
    return await _rest.post_success(
        client, _by_type(client, room_type, method), RoomIdPayload(room_id=room_id),
    )


async def show(room_id: str, room_type: RoomType | str, client: ChatClient) -> bool:
    return await hide(room_id, room_type, client, hide_room=False)


async def favorite(room_id: str, is_favorite: bool, client: ChatClient) -> bool:
    return await _rest.post_success(
        client, "rooms.favorite", FavoritePayload(room_id=room_id, favorite=is_favorite),
    )


async def search_messages(
    room_id: str, search_text: str, client: ChatClient,
) -> PagedResult[list[Message]]:
    return await _rest.get_paged(
        client, "chat.search", list[Message], roomId=room_id, searchText=search_text,
    )


async def chat_room_roles(
    room_type: RoomType | str, room_name: str, client: ChatClient,
) -> list[ChatRoomRole]:
    """Users of the room holding a role other than plain ``user``."""
    return await _rest.get_result(
        client, _by_type(client, room_type, "roles"), list[ChatRoomRole],
        roomName=room_name,
    )


async def save_notification(room_id: str, disable: bool, client: ChatClient) -> bool:
    payload = SaveNotificationPayload(
        room_id=room_id,
        notifications=NotificationsPayload(disable_notifications=disable),
    )
    return await _rest.post_success(
        client, "rooms.saveNotification", payload,
        force_string.encode_fields("notifications.disableNotifications"),
    )


async def kick_user(
    room_id: str, room_type: RoomType | str, user_id: str, client: ChatClient,
) -> bool:
    return await _rest.post_success(
        client, _by_type(client, room_type, "kick"),
        UserIdRoomIdPayload(room_id=room_id, user_id=user_id),
    )


async def close_direct_messages(room_id: str, client: ChatClient) -> bool:
    return await _rest.post_success(client, "im.close", RoomIdPayload(room_id=room_id))
