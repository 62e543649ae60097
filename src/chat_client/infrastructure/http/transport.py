from __future__ import annotations

import logging
from typing import Any

import httpx

from chat_client.application.exceptions import ApiError, TransportError
from chat_client.application.ports.tokens import TokenRepository
from chat_client.application.ports.transport import MultipartBody
from chat_client.infrastructure.http.request_id import HEADER, current_request_id

logger = logging.getLogger(__name__)

CONTENT_TYPE_JSON = "application/json; charset=utf-8"


class HttpxTransport:
    """Transport backed by a shared ``httpx.AsyncClient``."""

    def __init__(
        self,
        server_url: str,
        tokens: TokenRepository,
        *,
        timeout: float = 30.0,
        user_agent: str | None = None,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        self._server_url = server_url
        self._tokens = tokens
        self._user_agent = user_agent
        self._client = client or httpx.AsyncClient(timeout=timeout)

    async def send(
        self, method: str, url: str, body: bytes | MultipartBody | None = None,
    ) -> bytes:
        request_id = current_request_id()
        headers = self._headers(request_id)
        kwargs: dict[str, Any] = {}
        if isinstance(body, MultipartBody):
            kwargs["files"] = {
                part.field: (part.file_name, part.content, part.content_type)
                for part in body.files
            }
        elif body is not None:
            headers["Content-Type"] = CONTENT_TYPE_JSON
            kwargs["content"] = body

        try:
            response = await self._client.request(method, url, headers=headers, **kwargs)
        except httpx.HTTPError as exc:
            logger.warning("%s %s failed [%s]: %s", method, url, request_id, exc)
            raise TransportError(str(exc)) from exc

        logger.debug("%s %s -> %d [%s]", method, url, response.status_code, request_id)
        if response.is_error:
            error = _api_error(response)
            logger.warning(
                "%s %s returned %d [%s]: %s",
                method, url, response.status_code, request_id, error.detail,
            )
            raise error
        return response.content

    async def aclose(self) -> None:
        await self._client.aclose()

    def _headers(self, request_id: str) -> dict[str, str]:
        headers = {HEADER: request_id}
        if self._user_agent:
            headers["User-Agent"] = self._user_agent
        token = self._tokens.get(self._server_url)
        if token is not None:
            headers["X-Auth-Token"] = token.auth_token
            headers["X-User-Id"] = token.user_id
        return headers


def _api_error(response: httpx.Response) -> ApiError:
    try:
        body = response.json()
    except ValueError:
        body = None
    if isinstance(body, dict):
        detail = body.get("error") or body.get("message") or response.reason_phrase
        return ApiError(response.status_code, str(detail), body.get("errorType"))
    return ApiError(response.status_code, response.text or response.reason_phrase)
