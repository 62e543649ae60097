from __future__ import annotations

from pydantic import Field

from chat_client.domain.entities.base import Entity


class SimpleUser(Entity):
    id: str | None = Field(default=None, alias="_id")
    username: str | None = None
    name: str | None = None


class Email(Entity):
    address: str
    verified: bool = False


class User(Entity):
    id: str = Field(alias="_id")
    username: str | None = None
    name: str | None = None
    status: str | None = None
    utc_offset: float | None = Field(default=None, alias="utcOffset")
    emails: list[Email] | None = None
    roles: list[str] | None = None


class Myself(User):
    active: bool = False


class UserRole(Entity):
    id: str | None = Field(default=None, alias="_id")
    username: str | None = None
    roles: list[str] = Field(default_factory=list)


class ChatRoomRole(Entity):
    id: str = Field(alias="_id")
    room_id: str = Field(alias="rid")
    user: SimpleUser = Field(alias="u")
    roles: list[str] = Field(default_factory=list)
