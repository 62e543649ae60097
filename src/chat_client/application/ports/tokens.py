from __future__ import annotations

from typing import Protocol

from chat_client.domain.entities.results import Token


class TokenRepository(Protocol):
    def get(self, url: str) -> Token | None: ...

    def save(self, url: str, token: Token) -> None: ...
