from __future__ import annotations

from pydantic import Field

from chat_client.domain.entities.base import Entity
from chat_client.domain.entities.message import Message
from chat_client.domain.entities.room import Room
from chat_client.domain.entities.subscription import Subscription
from chat_client.domain.entities.user import SimpleUser
from chat_client.domain.value_objects.enums import RoomType


class ChatRoom(Entity):
    """A room joined with the current user's subscription to it."""

    id: str
    type: str
    user: SimpleUser | None = None
    name: str | None = None
    full_name: str | None = None
    read_only: bool = False
    updated_at: int | None = None
    timestamp: int | None = None
    last_seen: int | None = None
    topic: str | None = None
    description: str | None = None
    announcement: str | None = None
    is_default: bool = False
    is_favorite: bool = False
    open: bool = False
    alert: bool = False
    archived: bool = False
    unread: int = 0
    user_mentions: int = 0
    group_mentions: int = 0
    last_message: Message | None = None
    broadcast: bool = False
    muted_users: list[str] | None = None
    roles: list[str] | None = None
    # Kept so callers can reach fields the composite does not surface.
    room: Room = Field(repr=False)
    subscription: Subscription = Field(repr=False)

    @property
    def room_type(self) -> RoomType:
        return RoomType(self.type)

    @classmethod
    def create(cls, room: Room, subscription: Subscription) -> ChatRoom:
        return cls(
            id=room.id,
            type=room.type,
            user=room.user or subscription.user,
            name=subscription.name or room.name,
            full_name=subscription.full_name or room.full_name,
            read_only=room.read_only,
            updated_at=room.updated_at or subscription.updated_at,
            timestamp=subscription.timestamp,
            last_seen=subscription.last_seen,
            topic=room.topic,
            description=room.description,
            announcement=room.announcement,
            is_default=subscription.is_default,
            is_favorite=subscription.is_favorite,
            open=subscription.open,
            alert=subscription.alert,
            archived=subscription.archived,
            unread=subscription.unread,
            user_mentions=subscription.user_mentions,
            group_mentions=subscription.group_mentions,
            last_message=room.last_message,
            broadcast=room.broadcast,
            muted_users=room.muted_users,
            roles=subscription.roles,
            room=room,
            subscription=subscription,
        )
