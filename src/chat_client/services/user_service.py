from __future__ import annotations

import logging
from typing import BinaryIO

from chat_client.application.dto.payloads import (
    OwnBasicInformationData,
    OwnBasicInformationPayload,
    UserPayload,
    UserPayloadData,
)
from chat_client.application.exceptions import InvalidImageTypeError
from chat_client.application.ports.transport import MultipartBody, MultipartFile
from chat_client.client import ChatClient
from chat_client.domain.entities.results import BaseResult, PagedResult
from chat_client.domain.entities.subscription import Subscription
from chat_client.domain.entities.user import Myself, User, UserRole
from chat_client.domain.value_objects.enums import AvatarMimeType
from chat_client.infrastructure.codec.envelope import decode_object
from chat_client.services import _rest

logger = logging.getLogger(__name__)


async def me(client: ChatClient) -> Myself:
    """Return the authenticated user; fails with ApiError once the token is stale."""
    return decode_object(await _rest.get(client, "me"), Myself)


async def update_profile(
    user_id: str,
    client: ChatClient,
    *,
    email: str | None = None,
    name: str | None = None,
    password: str | None = None,
    username: str | None = None,
) -> User:
    payload = UserPayload(
        user_id=user_id,
        data=UserPayloadData(name=name, password=password, username=username, email=email),
    )
    return await _rest.post_result(client, "users.update", payload, User)


async def users(offset: int, count: int, client: ChatClient) -> PagedResult[list[User]]:
    return await _rest.get_paged(
        client, "users.list", list[User], offset=offset, count=count,
    )


async def get_profile_by_user_id(user_id: str, client: ChatClient) -> User:
    return await _rest.get_result(client, "users.info", User, userId=user_id)


async def get_profile_by_username(username: str, client: ChatClient) -> User:
    return await _rest.get_result(client, "users.info", User, username=username)


async def update_own_basic_information(
    client: ChatClient,
    *,
    email: str | None = None,
    current_password: str | None = None,
    new_password: str | None = None,
    username: str | None = None,
    name: str | None = None,
) -> User:
    """Update the authenticated user's own profile.

    ``current_password`` must be the SHA-256 hex digest of the password.
    """
    payload = OwnBasicInformationPayload(
        data=OwnBasicInformationData(
            email=email,
            current_password=current_password,
            new_password=new_password,
            username=username,
            name=name,
        )
    )
    return await _rest.post_result(client, "users.updateOwnBasicInfo", payload, User)


async def reset_avatar(user_id: str, client: ChatClient) -> bool:
    return await _rest.post_success(client, "users.resetAvatar", UserPayload(user_id=user_id))


async def set_avatar(
    file_name: str,
    mime_type: str,
    content: bytes | BinaryIO,
    client: ChatClient,
) -> bool:
    """Upload an image as the authenticated user's avatar.

    Only gif, png, jpeg, bmp and webp images are accepted.
    """
    if mime_type not in {m.value for m in AvatarMimeType}:
        raise InvalidImageTypeError(f"Invalid image type {mime_type}")

    data = content if isinstance(content, bytes) else content.read()
    body = MultipartBody(files=(MultipartFile("image", file_name, data, mime_type),))
    logger.debug("Uploading avatar %s (%d bytes)", file_name, len(data))
    raw = await client.transport.send("POST", client.urls.build("users.setAvatar"), body)
    return decode_object(raw, BaseResult).success


async def set_avatar_url(avatar_url: str, client: ChatClient) -> bool:
    return await _rest.post_success(
        client, "users.setAvatar", UserPayload(avatar_url=avatar_url),
    )


async def get_avatar(user_id: str, client: ChatClient) -> str:
    raw = await _rest.get(client, "users.getAvatar", userId=user_id)
    return raw.decode()


async def get_subscription(room_id: str, client: ChatClient) -> Subscription | None:
    return await _rest.get_result(
        client, "subscriptions.getOne", Subscription, roomId=room_id,
    )


async def roles(client: ChatClient) -> UserRole:
    return decode_object(await _rest.get(client, "user.roles"), UserRole)
