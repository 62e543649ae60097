"""Request helpers shared by the endpoint services."""
from __future__ import annotations

from typing import TypeVar

from pydantic import BaseModel

from chat_client.client import ChatClient
from chat_client.domain.entities.results import BaseResult, PagedResult
from chat_client.infrastructure.codec.envelope import decode, decode_object
from chat_client.infrastructure.codec.serializer import Transform, encode_payload

T = TypeVar("T")


async def get(client: ChatClient, method: str, **query: object) -> bytes:
    return await client.transport.send("GET", client.urls.build(method, **query))


async def post(
    client: ChatClient,
    method: str,
    payload: BaseModel,
    transform: Transform | None = None,
) -> bytes:
    body = encode_payload(payload, transform)
    return await client.transport.send("POST", client.urls.build(method), body)


async def get_result(
    client: ChatClient, method: str, payload_type: type[T], **query: object,
) -> T | None:
    return decode(await get(client, method, **query), payload_type).result


async def get_paged(
    client: ChatClient, method: str, payload_type: type[T], **query: object,
) -> PagedResult[T | None]:
    envelope = decode(await get(client, method, **query), payload_type)
    return PagedResult(envelope.result, envelope.total or 0, envelope.offset or 0)


async def post_result(
    client: ChatClient, method: str, payload: BaseModel, payload_type: type[T],
) -> T | None:
    return decode(await post(client, method, payload), payload_type).result


async def post_success(
    client: ChatClient,
    method: str,
    payload: BaseModel,
    transform: Transform | None = None,
) -> bool:
    raw = await post(client, method, payload, transform)
    return decode_object(raw, BaseResult).success
