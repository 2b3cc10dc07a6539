"""Transports and request dispatching."""

from fluentreq.client.dispatch import dispatch, resolve_timeout
from fluentreq.client.transport import (
    Http1Transport,
    Http2Transport,
    Transport,
    close_default_transports,
    default_http1_transport,
    default_http2_transport,
)

__all__ = [
    "Http1Transport",
    "Http2Transport",
    "Transport",
    "close_default_transports",
    "default_http1_transport",
    "default_http2_transport",
    "dispatch",
    "resolve_timeout",
]
