from __future__ import annotations

from pydantic import Field

from chat_client.domain.entities.base import Entity
from chat_client.domain.entities.user import SimpleUser
from chat_client.domain.value_objects.enums import RoomType
from chat_client.domain.value_objects.timestamps import Timestamp


class Subscription(Entity):
    """The current user's relationship to a room."""

    id: str = Field(alias="_id")
    room_id: str = Field(alias="rid")
    type: str = Field(alias="t")
    user: SimpleUser | None = Field(default=None, alias="u")
    name: str | None = None
    full_name: str | None = Field(default=None, alias="fname")
    read_only: bool = Field(default=False, alias="ro")
    timestamp: Timestamp = Field(default=None, alias="ts")
    last_seen: Timestamp = Field(default=None, alias="ls")
    updated_at: Timestamp = Field(default=None, alias="_updatedAt")
    roles: list[str] | None = None
    is_default: bool = Field(default=False, alias="default")
    is_favorite: bool = Field(default=False, alias="f")
    open: bool = False
    alert: bool = False
    archived: bool = False
    unread: int = 0
    user_mentions: int = Field(default=0, alias="userMentions")
    group_mentions: int = Field(default=0, alias="groupMentions")

    @property
    def room_type(self) -> RoomType:
        return RoomType(self.type)
