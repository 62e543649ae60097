from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class Entity(BaseModel):
    """Read-only server entity; unknown fields are ignored."""

    model_config = ConfigDict(populate_by_name=True, frozen=True, extra="ignore")


class OpaqueEntity(BaseModel):
    """Server entity whose full shape the client does not pin down."""

    model_config = ConfigDict(populate_by_name=True, frozen=True, extra="allow")
