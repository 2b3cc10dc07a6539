"""Exception classes."""

from collections.abc import Mapping
from typing import Any


class FluentReqError(Exception):
    """Base class for all fluentreq errors."""

    def __init__(self, message: str, details: Mapping[str, Any] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.details: dict[str, Any] = dict(details or {})


class BuilderError(FluentReqError, ValueError):
    """Request could not be configured (bad method, bad HTTP/2 host, unencodable JSON body)."""


class RequestConsumedError(FluentReqError, RuntimeError):
    """Request builder was already executed and its resources released."""
