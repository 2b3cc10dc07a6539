import logging
from collections.abc import Callable, Mapping
from datetime import timedelta
from enum import Enum
from typing import Any, Self, TypeVar

import orjson

from fluentreq._pool import request_pool, response_pool
from fluentreq.client import Transport, default_http1_transport, default_http2_transport, dispatch
from fluentreq.client.transport import validate_h2_host
from fluentreq.exceptions import BuilderError, RequestConsumedError
from fluentreq.http import Method, Url
from fluentreq.http.cookie import Cookie
from fluentreq.request.prepared import PreparedRequest
from fluentreq.response import Response
from fluentreq.types import Body, HeadersType, QueryParams

logger = logging.getLogger(__name__)

JSON_CONTENT_TYPE = "application/json"

T = TypeVar("T")


class TransportMode(Enum):
    HTTP1 = "HTTP/1.1"
    HTTP2 = "HTTP/2"


class RequestBuilder:
    """Fluent builder for a single HTTP request.

    Configuration methods mutate the builder and return it, so calls can be chained. No I/O happens until one of
    the terminal methods (text, bytes, response, json) is called. A builder can be executed only once: the terminal
    call releases the pooled request and response objects, after which any further use raises RequestConsumedError.
    """

    def __init__(self, method: Method | str, transport: Transport, mode: TransportMode = TransportMode.HTTP1) -> None:
        """Do not use directly. Instead, use new_request() or one of the shortcuts (get, post, get_h2, post_h2)."""
        self._method = Method.parse(method)
        self._transport = transport
        self._mode = mode
        self._url = Url()
        self._params: dict[str, list[str]] = {}
        self._timeout: timedelta | None = None
        self._request: PreparedRequest | None = request_pool.acquire()
        self._response: Response | None = response_pool.acquire()

    @property
    def method(self) -> Method:
        return self._method

    @property
    def mode(self) -> TransportMode:
        return self._mode

    @property
    def transport(self) -> Transport:
        return self._transport

    @property
    def consumed(self) -> bool:
        """Whether a terminal method was already called."""
        return self._request is None

    @property
    def request(self) -> PreparedRequest:
        """Request state accumulated so far."""
        self._check_not_consumed()
        assert self._request is not None
        return self._request

    def url(self, url: str) -> Self:
        """Set the request URL. An invalid URL is logged and the previous URL is kept."""
        self._check_not_consumed()
        try:
            self._url = Url.parse(url)
        except ValueError as e:
            logger.warning("Invalid raw url %r: %s", url, e)
        return self

    def scheme(self, scheme: str) -> Self:
        self._check_not_consumed()
        self._url.scheme = scheme
        return self

    def header(self, name: str, value: str) -> Self:
        """Add a header. Previous values of the same header are kept, except Content-Type which is replaced."""
        if name.lower() == "content-type":
            return self.content_type(value)
        self.request.headers.append((name, value))
        return self

    def headers(self, headers: HeadersType) -> Self:
        items = headers.items() if isinstance(headers, Mapping) else headers
        for name, value in items:
            self.header(name, value)
        return self

    def cookie(self, name: str, value: str) -> Self:
        """Set a cookie. Setting the same name again replaces its value."""
        self.request.cookies[name] = value
        return self

    def cookies_from_line(self, line: str) -> Self:
        """Set cookies from a Cookie header line like `a=1; b=2`."""
        for cookie in Cookie.split_parse(line):
            self.cookie(cookie.name, cookie.value)
        return self

    def param(self, name: str, value: Any) -> Self:
        """Add a query parameter. Repeated names are sent in the order they were added."""
        self._check_not_consumed()
        self._params.setdefault(name, []).append(str(value))
        return self

    def params(self, params: QueryParams) -> Self:
        items = params.items() if isinstance(params, Mapping) else params
        for name, value in items:
            self.param(name, value)
        return self

    def body(self, body: Body) -> Self:
        """Set the request body from text or bytes. Other types are logged and ignored."""
        request = self.request
        match body:
            case str():
                data = body.encode()
            case bytes() | bytearray() | memoryview():
                data = bytes(body)
            case _:
                logger.warning("Unsupported body data type: %s", type(body).__name__)
                return self
        request.body = data
        request.content_length = len(data)
        return self

    def body_json(self, body: Any) -> Self:
        """Set the request body as JSON. Raises BuilderError if the object can not be encoded."""
        request = self.request
        if body is None:
            return self
        try:
            data = orjson.dumps(body)
        except orjson.JSONEncodeError as e:
            raise BuilderError("Object could not be converted to JSON body", {"type": type(body).__name__}) from e
        request.body = data
        request.content_length = len(data)
        request.content_type = JSON_CONTENT_TYPE
        return self

    def content_type(self, content_type: str) -> Self:
        """Set the Content-Type header, replacing any previous value."""
        self.request.content_type = content_type
        return self

    def timeout(self, timeout: timedelta) -> Self:
        """Set the request timeout. A non-positive timeout means the configured default (60 seconds)."""
        self._check_not_consumed()
        self._timeout = timeout
        return self

    def text(self) -> str:
        """Execute the request and return the response body as text."""
        return self._execute(lambda resp: resp.text())

    def bytes(self) -> bytes:
        """Execute the request and return the raw response body."""
        return self._execute(lambda resp: resp.body)

    def response(self) -> Response:
        """Execute the request and return a copy of the response that stays valid after release."""
        return self._execute(lambda resp: resp.copy())

    def json(self) -> Any:
        """Execute the request and decode the response body as JSON."""
        return self._execute(lambda resp: resp.json())

    def _execute(self, extract: Callable[[Response], T]) -> T:
        request = self.request
        response = self._response
        assert response is not None
        try:
            dispatch(
                self._transport,
                request,
                response,
                method=self._method,
                url=self._url,
                params=self._params,
                timeout=self._timeout,
            )
            return extract(response)
        finally:
            self._release()

    def _release(self) -> None:
        request, response = self._request, self._response
        self._request = self._response = None
        if response is not None:
            response_pool.release(response)
        if request is not None:
            request_pool.release(request)

    def _check_not_consumed(self) -> None:
        if self._request is None:
            raise RequestConsumedError("Request was already executed", {"method": self._method})

    def __repr__(self) -> str:
        return f"RequestBuilder({self._method} {self._url}, mode={self._mode.value})"


def new_request(method: Method | str, host: str | None = None, *, transport: Transport | None = None) -> RequestBuilder:
    """Create a request builder.

    Without a host the request goes over HTTP/1.1. With a `host:port` host it goes over HTTP/2 with TLS, only the
    TLS port is supported. An explicit transport replaces the shared default one.
    """
    if host is None:
        if transport is None:
            transport = default_http1_transport()
        return RequestBuilder(method, transport, TransportMode.HTTP1)
    validate_h2_host(host)
    if transport is None:
        transport = default_http2_transport(host)
    return RequestBuilder(method, transport, TransportMode.HTTP2)


def get(url: str, *, transport: Transport | None = None) -> RequestBuilder:
    return new_request(Method.GET, transport=transport).url(url)


def post(url: str, *, transport: Transport | None = None) -> RequestBuilder:
    return new_request(Method.POST, transport=transport).url(url)


def get_h2(url: str, host: str, *, transport: Transport | None = None) -> RequestBuilder:
    """HTTP/2 GET. The host must be `name:443`."""
    return new_request(Method.GET, host, transport=transport).url(url)


def post_h2(url: str, host: str, *, transport: Transport | None = None) -> RequestBuilder:
    """HTTP/2 POST. The host must be `name:443`."""
    return new_request(Method.POST, host, transport=transport).url(url)
