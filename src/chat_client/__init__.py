"""Async client for the team-chat REST API."""
from __future__ import annotations

from chat_client.client import ChatClient, create_client

__all__ = ["ChatClient", "create_client"]
