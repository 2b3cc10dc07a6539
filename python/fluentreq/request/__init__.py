"""Request builder and request state."""

from fluentreq.request.prepared import PreparedRequest
from fluentreq.request.builder import (
    RequestBuilder,
    TransportMode,
    get,
    get_h2,
    new_request,
    post,
    post_h2,
)

__all__ = [
    "PreparedRequest",
    "RequestBuilder",
    "TransportMode",
    "get",
    "get_h2",
    "new_request",
    "post",
    "post_h2",
]
