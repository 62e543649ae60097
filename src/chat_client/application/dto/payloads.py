"""Request bodies sent to the REST API, named by their wire fields."""
from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class Payload(BaseModel):
    model_config = ConfigDict(populate_by_name=True, frozen=True)


class RoomIdPayload(Payload):
    room_id: str = Field(alias="roomId")


class ReadPayload(Payload):
    room_id: str = Field(alias="rid")


class UserNamePayload(Payload):
    username: str


class CreateChannelPayload(Payload):
    name: str
    members: list[str] | None = None
    read_only: bool | None = Field(default=None, alias="readOnly")


class RenamePayload(RoomIdPayload):
    name: str


class ReadOnlyPayload(RoomIdPayload):
    read_only: bool = Field(alias="readOnly")


class TypePayload(RoomIdPayload):
    type: str


class JoinCodePayload(RoomIdPayload):
    join_code: str = Field(alias="joinCode")


class TopicPayload(RoomIdPayload):
    topic: str | None = None


class DescriptionPayload(RoomIdPayload):
    description: str | None = None


class AnnouncementPayload(RoomIdPayload):
    announcement: str | None = None


class FavoritePayload(RoomIdPayload):
    favorite: bool


class UserIdRoomIdPayload(RoomIdPayload):
    user_id: str = Field(alias="userId")


class NotificationsPayload(Payload):
    # Sent as "1"/"0"; see infrastructure.codec.force_string.
    disable_notifications: bool = Field(default=False, alias="disableNotifications")


class SaveNotificationPayload(RoomIdPayload):
    notifications: NotificationsPayload


class UserPayloadData(Payload):
    name: str | None = None
    password: str | None = None
    username: str | None = None
    email: str | None = None


class UserPayload(Payload):
    user_id: str | None = Field(default=None, alias="userId")
    data: UserPayloadData | None = None
    avatar_url: str | None = Field(default=None, alias="avatarUrl")


class OwnBasicInformationData(Payload):
    email: str | None = None
    current_password: str | None = Field(default=None, alias="currentPassword")
    new_password: str | None = Field(default=None, alias="newPassword")
    username: str | None = None
    name: str | None = None


class OwnBasicInformationPayload(Payload):
    data: OwnBasicInformationData
