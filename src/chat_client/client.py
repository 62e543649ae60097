from __future__ import annotations

from dataclasses import dataclass
from types import TracebackType

import httpx

from chat_client.application.ports.tokens import TokenRepository
from chat_client.application.ports.transport import Transport
from chat_client.config import Settings, settings
from chat_client.infrastructure.auth.token_repository import InMemoryTokenRepository
from chat_client.infrastructure.http.transport import HttpxTransport
from chat_client.infrastructure.http.urls import UrlBuilder


@dataclass(frozen=True, slots=True)
class ChatClient:
    """Collaborators every endpoint function is called with."""

    server_url: str
    transport: Transport
    urls: UrlBuilder
    tokens: TokenRepository
    filter_custom_rooms: bool = True

    async def aclose(self) -> None:
        await self.transport.aclose()

    async def __aenter__(self) -> ChatClient:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.aclose()


def create_client(
    config: Settings = settings,
    *,
    tokens: TokenRepository | None = None,
    http_client: httpx.AsyncClient | None = None,
) -> ChatClient:
    tokens = tokens or InMemoryTokenRepository()
    transport = HttpxTransport(
        config.SERVER_URL,
        tokens,
        timeout=config.REQUEST_TIMEOUT,
        user_agent=config.USER_AGENT,
        client=http_client,
    )
    return ChatClient(
        server_url=config.SERVER_URL,
        transport=transport,
        urls=UrlBuilder(config.rest_url),
        tokens=tokens,
        filter_custom_rooms=config.FILTER_CUSTOM_ROOMS,
    )
