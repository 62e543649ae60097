from __future__ import annotations

from enum import StrEnum


class RoomType(StrEnum):
    CHANNEL = "c"
    PRIVATE_GROUP = "p"
    DIRECT_MESSAGE = "d"
    LIVECHAT = "l"
    CUSTOM = "custom"

    @classmethod
    def _missing_(cls, value: object) -> RoomType:
        # Any type the client does not know about is a custom room type.
        return cls.CUSTOM


class AvatarMimeType(StrEnum):
    GIF = "image/gif"
    PNG = "image/png"
    JPEG = "image/jpeg"
    BMP = "image/bmp"
    WEBP = "image/webp"
