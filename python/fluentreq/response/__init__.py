"""Response classes."""

from email.message import Message
from typing import Any, Self

import orjson


class Response:
    """HTTP response populated by a transport.

    Builders fill a pooled instance while a request is executed. Use copy() to keep the data after the
    builder has released it.
    """

    def __init__(self) -> None:
        self.status: int = 0
        self.version: str = ""
        self.headers: list[tuple[str, str]] = []
        self.body: bytes = b""

    def header(self, name: str) -> str | None:
        """First value of a header, case-insensitive."""
        values = self.get_all(name)
        return values[0] if values else None

    def get_all(self, name: str) -> list[str]:
        """All values of a header in received order, case-insensitive."""
        name = name.lower()
        return [v for k, v in self.headers if k.lower() == name]

    @property
    def charset(self) -> str | None:
        """Charset parameter of the Content-Type header."""
        if (content_type := self.header("content-type")) is None:
            return None
        msg = Message()
        msg["content-type"] = content_type
        return msg.get_content_charset()

    def text(self, encoding: str | None = None) -> str:
        """Body decoded with the given encoding, the response charset, or UTF-8."""
        encoding = encoding or self.charset or "utf-8"
        try:
            return self.body.decode(encoding, errors="replace")
        except LookupError:
            return self.body.decode("utf-8", errors="replace")

    def json(self) -> Any:
        return orjson.loads(self.body)

    def copy(self) -> Self:
        """Independent copy of this response."""
        resp = type(self)()
        resp.status = self.status
        resp.version = self.version
        resp.headers = [(k, v) for k, v in self.headers]
        resp.body = bytes(self.body)
        return resp

    def reset(self) -> None:
        self.status = 0
        self.version = ""
        self.headers = []
        self.body = b""

    def __repr__(self) -> str:
        return f"Response(status={self.status}, version={self.version!r}, body_len={len(self.body)})"


__all__ = ["Response"]
