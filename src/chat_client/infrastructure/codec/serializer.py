from __future__ import annotations

import json
from datetime import datetime
from enum import Enum
from typing import Any, Callable

from pydantic import BaseModel

Transform = Callable[[dict[str, Any]], dict[str, Any]]


class _Encoder(json.JSONEncoder):
    def default(self, o: object) -> Any:
        if isinstance(o, datetime):
            return o.isoformat()
        if isinstance(o, Enum):
            return o.value
        return super().default(o)


def encode_payload(payload: BaseModel, transform: Transform | None = None) -> bytes:
    """Serialize a request payload by alias, leaving out unset optional fields."""
    data = payload.model_dump(by_alias=True, exclude_none=True)
    if transform is not None:
        data = transform(data)
    return json.dumps(data, cls=_Encoder).encode()
