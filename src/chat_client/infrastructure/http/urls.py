from __future__ import annotations

import httpx

from chat_client.domain.value_objects.enums import RoomType

_PREFIX_BY_ROOM_TYPE = {
    RoomType.CHANNEL: "channels",
    RoomType.PRIVATE_GROUP: "groups",
    RoomType.DIRECT_MESSAGE: "im",
}


class UrlBuilder:
    """Builds REST method URLs below the server's API prefix."""

    def __init__(self, rest_url: str) -> None:
        self._rest_url = rest_url.rstrip("/")

    @property
    def rest_url(self) -> str:
        return self._rest_url

    def build(self, method: str, **query: object) -> str:
        url = httpx.URL(f"{self._rest_url}/{method}")
        params = {key: str(value) for key, value in query.items() if value is not None}
        if params:
            url = url.copy_merge_params(params)
        return str(url)

    @staticmethod
    def method_for_room_type(room_type: RoomType | str, method: str) -> str:
        prefix = _PREFIX_BY_ROOM_TYPE.get(RoomType(room_type), "channels")
        return f"{prefix}.{method}"
