from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol


@dataclass(frozen=True, slots=True)
class MultipartFile:
    field: str
    file_name: str
    content: bytes
    content_type: str


@dataclass(frozen=True, slots=True)
class MultipartBody:
    files: tuple[MultipartFile, ...]


class Transport(Protocol):
    async def send(
        self, method: str, url: str, body: bytes | MultipartBody | None = None,
    ) -> bytes:
        """Issue the request and return the raw response body.

        Raises ApiError for non-2xx responses.
        """
        ...

    async def aclose(self) -> None: ...
