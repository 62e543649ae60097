from __future__ import annotations

from chat_client.domain.entities.results import Token


class InMemoryTokenRepository:
    """Tokens keyed by server URL, kept for the life of the process."""

    def __init__(self) -> None:
        self._tokens: dict[str, Token] = {}

    def get(self, url: str) -> Token | None:
        return self._tokens.get(url)

    def save(self, url: str, token: Token) -> None:
        self._tokens[url] = token
