from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar

from pydantic import BaseModel

T = TypeVar("T")


class BaseResult(BaseModel):
    success: bool = False


@dataclass(frozen=True, slots=True)
class PagedResult(Generic[T]):
    result: T
    total: int = 0
    offset: int = 0


@dataclass(frozen=True, slots=True)
class Token:
    user_id: str
    auth_token: str
