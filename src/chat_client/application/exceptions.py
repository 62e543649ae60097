from __future__ import annotations


class ChatClientError(Exception):
    """Base client error."""

    def __init__(self, detail: str = "") -> None:
        self.detail = detail
        super().__init__(detail)


class MalformedEnvelopeError(ChatClientError):
    """The response body is not a JSON object."""


class MalformedMetadataFieldError(ChatClientError):
    """A pagination field (total/offset/count) holds a non-numeric value."""

    def __init__(self, field: str, value: object) -> None:
        self.field = field
        self.value = value
        super().__init__(f"Expected an integer for {field!r}, got {value!r}")


class PayloadDecodeError(ChatClientError):
    """The payload could not be validated against the requested type.

    The original validation error is kept on ``__cause__``.
    """


class ApiError(ChatClientError):
    """The server answered with a non-2xx status."""

    def __init__(
        self, status_code: int, detail: str = "", error_type: str | None = None,
    ) -> None:
        self.status_code = status_code
        self.error_type = error_type
        super().__init__(detail)


class TransportError(ChatClientError):
    pass


class InvalidImageTypeError(ChatClientError):
    pass
