"""fluentreq - Fluent HTTP request builder over pyreqwest transports.

Build a request with chained calls and execute it with a single terminal call:

    body = fluentreq.get("https://example.com/search?lang=en").param("q", "fluent").text()

Features:
- HTTP/1.1 and HTTP/2 (over TLS, fixed host) transports backed by [pyreqwest](https://github.com/MarkusSintonen/pyreqwest)
- Query parameters merged into the URL's existing query string
- Cookie header lines parsed into individual cookies
- Text, bytes, JSON and response terminal calls
- Pooled request and response objects, released after execution
- Pytest plugin with mock transports
"""

from fluentreq.http import Method
from fluentreq.request import RequestBuilder, get, get_h2, new_request, post, post_h2
from fluentreq.response import Response

__all__ = [
    "Method",
    "RequestBuilder",
    "Response",
    "get",
    "get_h2",
    "new_request",
    "post",
    "post_h2",
]
