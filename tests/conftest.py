"""Shared test fixtures."""
from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any

import httpx
import pytest

from chat_client.application.ports.transport import MultipartBody
from chat_client.client import ChatClient
from chat_client.domain.entities.results import Token
from chat_client.domain.entities.room import Removed, Room
from chat_client.domain.entities.subscription import Subscription
from chat_client.infrastructure.auth.token_repository import InMemoryTokenRepository
from chat_client.infrastructure.codec.envelope import MultiEnvelope
from chat_client.infrastructure.http.urls import UrlBuilder

SERVER_URL = "http://chat.test"


def make_room(room_id: str = "GENERAL", *, room_type: str = "c", **fields: Any) -> Room:
    return Room.model_validate({"_id": room_id, "t": room_type, "name": room_id.lower(), **fields})


def make_subscription(
    room_id: str = "GENERAL",
    *,
    room_type: str = "c",
    name: str | None = None,
    **fields: Any,
) -> Subscription:
    data = {"_id": f"sub-{room_id}", "rid": room_id, "t": room_type, **fields}
    data["name"] = name if name is not None else room_id.lower()
    return Subscription.model_validate(data)


def make_removed(entity_id: str) -> Removed:
    return Removed.model_validate({"_id": entity_id})


def rooms_envelope(
    update: list[Room] | None = None, remove: list[Removed] | None = None,
) -> MultiEnvelope[list[Room], list[Removed]]:
    return MultiEnvelope(update=update or [], remove=remove or [])


def subscriptions_envelope(
    update: list[Subscription] | None = None, remove: list[Removed] | None = None,
) -> MultiEnvelope[list[Subscription], list[Removed]]:
    return MultiEnvelope(update=update or [], remove=remove or [])


@dataclass
class FakeTransport:
    """Answers by REST method name (last path segment).

    A response is a JSON-able object, raw bytes, an exception to raise, or an
    async callable producing one of those.
    """

    responses: dict[str, Any] = field(default_factory=dict)
    calls: list[dict[str, Any]] = field(default_factory=list)
    closed: bool = False

    async def send(
        self, method: str, url: str, body: bytes | MultipartBody | None = None,
    ) -> bytes:
        parsed = httpx.URL(url)
        name = parsed.path.rsplit("/", 1)[-1]
        self.calls.append({
            "method": method,
            "url": url,
            "path": parsed.path,
            "name": name,
            "params": dict(parsed.params),
            "body": json.loads(body) if isinstance(body, bytes) else body,
        })
        response = self.responses[name]
        if callable(response):
            response = await response()
        if isinstance(response, BaseException):
            raise response
        if isinstance(response, bytes):
            return response
        return json.dumps(response).encode()

    async def aclose(self) -> None:
        self.closed = True

    def call(self, name: str) -> dict[str, Any]:
        return next(c for c in self.calls if c["name"] == name)


@pytest.fixture
def transport() -> FakeTransport:
    return FakeTransport()


@pytest.fixture
def tokens() -> InMemoryTokenRepository:
    repository = InMemoryTokenRepository()
    repository.save(SERVER_URL, Token(user_id="user-1", auth_token="secret"))
    return repository


@pytest.fixture
def client(transport: FakeTransport, tokens: InMemoryTokenRepository) -> ChatClient:
    return ChatClient(
        server_url=SERVER_URL,
        transport=transport,
        urls=UrlBuilder(f"{SERVER_URL}/api/v1"),
        tokens=tokens,
    )
