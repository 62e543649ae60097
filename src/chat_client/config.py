from __future__ import annotations

from pydantic import ConfigDict
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    SERVER_URL: str = "http://localhost:3000"
    API_PREFIX: str = "/api/v1"

    REQUEST_TIMEOUT: float = 30.0
    USER_AGENT: str = "chat-client/0.1.0"

    FILTER_CUSTOM_ROOMS: bool = True

    @property
    def rest_url(self) -> str:
        return f"{self.SERVER_URL.rstrip('/')}{self.API_PREFIX}"

    model_config = ConfigDict(
        env_prefix="CHAT_",
        env_file=".env",
        extra="ignore",
    )


settings = Settings()
