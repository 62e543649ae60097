from __future__ import annotations

from datetime import datetime, timedelta, timezone
from typing import Annotated, Any

from pydantic import BeforeValidator

EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)
_MILLISECOND = timedelta(milliseconds=1)


def to_epoch_millis(value: Any) -> int | None:
    """Normalize the server's timestamp encodings to epoch milliseconds.

    Accepts integers, ISO-8601 strings and the ``{"$date": ms}`` form.
    """
    if value is None:
        return None
    if isinstance(value, dict):
        value = value.get("$date")
        if value is None:
            return None
    if isinstance(value, bool):
        raise ValueError("boolean is not a timestamp")
    if isinstance(value, (int, float)):
        return int(value)
    if isinstance(value, datetime):
        return _datetime_millis(value)
    if isinstance(value, str):
        return _datetime_millis(datetime.fromisoformat(value.replace("Z", "+00:00")))
    raise ValueError(f"unsupported timestamp value {value!r}")


def to_iso8601(timestamp: int) -> str:
    """Format epoch milliseconds as ``YYYY-MM-DDTHH:MM:SS.mmmZ`` (UTC)."""
    moment = EPOCH + timestamp * _MILLISECOND
    return moment.strftime("%Y-%m-%dT%H:%M:%S.") + f"{moment.microsecond // 1000:03d}Z"


def _datetime_millis(moment: datetime) -> int:
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)
    return (moment - EPOCH) // _MILLISECOND


Timestamp = Annotated[int | None, BeforeValidator(to_epoch_millis)]
