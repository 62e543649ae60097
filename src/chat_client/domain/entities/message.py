from __future__ import annotations

from pydantic import Field

from chat_client.domain.entities.base import OpaqueEntity
from chat_client.domain.entities.user import SimpleUser
from chat_client.domain.value_objects.timestamps import Timestamp


class Message(OpaqueEntity):
    id: str = Field(alias="_id")
    room_id: str | None = Field(default=None, alias="rid")
    message: str = Field(default="", alias="msg")
    sender: SimpleUser | None = Field(default=None, alias="u")
    timestamp: Timestamp = Field(default=None, alias="ts")
    updated_at: Timestamp = Field(default=None, alias="_updatedAt")
    edited_at: Timestamp = Field(default=None, alias="editedAt")
    pinned: bool = False


class GenericAttachment(OpaqueEntity):
    title: str | None = None
    type: str | None = None
    description: str | None = None
    title_link: str | None = Field(default=None, alias="titleLink")
