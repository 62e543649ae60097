from __future__ import annotations

from pydantic import Field

from chat_client.domain.entities.base import Entity
from chat_client.domain.entities.message import Message
from chat_client.domain.entities.user import SimpleUser
from chat_client.domain.value_objects.enums import RoomType
from chat_client.domain.value_objects.timestamps import Timestamp


class Room(Entity):
    id: str = Field(alias="_id")
    type: str = Field(alias="t")
    user: SimpleUser | None = Field(default=None, alias="u")
    name: str | None = None
    full_name: str | None = Field(default=None, alias="fname")
    read_only: bool = Field(default=False, alias="ro")
    updated_at: Timestamp = Field(default=None, alias="_updatedAt")
    topic: str | None = None
    description: str | None = None
    announcement: str | None = None
    last_message: Message | None = Field(default=None, alias="lastMessage")
    muted_users: list[str] | None = Field(default=None, alias="muted")
    broadcast: bool = False

    @property
    def room_type(self) -> RoomType:
        return RoomType(self.type)


class Removed(Entity):
    """Marker for an entity deleted since the requested timestamp."""

    id: str = Field(alias="_id")
