"""Transports executing prepared requests with pyreqwest clients."""

import logging
import threading
from datetime import timedelta
from typing import Protocol, Self

from pyreqwest.client import SyncClient, SyncClientBuilder
from pyreqwest.request import SyncRequestBuilder
from pyreqwest.response import SyncResponse

from fluentreq.config import get_config
from fluentreq.exceptions import BuilderError
from fluentreq.request.prepared import PreparedRequest
from fluentreq.response import Response

logger = logging.getLogger(__name__)


class Transport(Protocol):
    """Executes a prepared request and fills the response holder."""

    def execute(self, request: PreparedRequest, response: Response, timeout: timedelta) -> None:
        """Send the request and populate response. Transport errors are raised as is."""
        ...

    def close(self) -> None: ...


class _PyreqwestTransport:
    def __init__(self, client: SyncClient | None) -> None:
        self._client = client
        self._lock = threading.Lock()

    @property
    def client(self) -> SyncClient:
        if self._client is None:
            with self._lock:
                if self._client is None:
                    self._client = self._client_builder().build()
        return self._client

    def _client_builder(self) -> SyncClientBuilder:
        return SyncClientBuilder()

    def _target(self, request: PreparedRequest) -> tuple[str, list[tuple[str, str]]]:
        return str(request.url), request.header_items()

    def execute(self, request: PreparedRequest, response: Response, timeout: timedelta) -> None:
        url, headers = self._target(request)
        logger.debug("Executing %s %s (timeout=%s)", request.method, url, timeout)

        builder: SyncRequestBuilder = self.client.request(str(request.method), url).timeout(timeout)
        for name, value in headers:
            builder = builder.header(name, value)
        if request.body is not None:
            builder = builder.body_bytes(request.body)

        resp = builder.build().send()
        _fill_response(response, resp)
        logger.debug("Received %s %s for %s %s", resp.version, resp.status, request.method, url)

    def close(self) -> None:
        with self._lock:
            client, self._client = self._client, None
        if client is not None:
            client.close()

    def __enter__(self) -> Self:
        return self

    def __exit__(self, *args: object) -> None:
        self.close()


class Http1Transport(_PyreqwestTransport):
    """General purpose transport sending each request to its own absolute URL."""

    def __init__(self, client: SyncClient | None = None) -> None:
        super().__init__(client)

    def __repr__(self) -> str:
        return "Http1Transport()"


class Http2Transport(_PyreqwestTransport):
    """Fixed host transport speaking HTTP/2 over TLS, without falling back to HTTP/1.1.

    Every request is sent to https://{host} with the request's own path and query. When the request URL names
    a different host, that host is sent in the Host header. Only the TLS port (443 by default) is accepted.
    """

    def __init__(self, host: str, client: SyncClient | None = None) -> None:
        self.host = validate_h2_host(host)
        super().__init__(client)

    def _client_builder(self) -> SyncClientBuilder:
        return SyncClientBuilder().https_only(True).http2_prior_knowledge()

    def _target(self, request: PreparedRequest) -> tuple[str, list[tuple[str, str]]]:
        headers = request.header_items()
        url_host = request.url.host
        has_host = any(k.lower() == "host" for k, _ in headers)
        if url_host and _strip_tls_port(url_host) != _strip_tls_port(self.host) and not has_host:
            headers.insert(0, ("Host", url_host))
        return f"https://{self.host}{request.url.request_uri}", headers

    def __repr__(self) -> str:
        return f"Http2Transport({self.host!r})"


def validate_h2_host(host: str) -> str:
    """Check that an HTTP/2 host is `name:port` with the TLS port."""
    port = get_config().http2_port
    name, sep, port_str = host.rpartition(":")
    if not sep or not name or not port_str.isdigit():
        raise BuilderError(f"HTTP/2 host must be 'host:{port}', got {host!r}", {"host": host})
    if int(port_str) != port:
        raise BuilderError(f"HTTP/2 is only supported on port {port}, got {host!r}", {"host": host, "port": port})
    return host


def _strip_tls_port(host: str) -> str:
    return host.removesuffix(f":{get_config().http2_port}")


def _fill_response(response: Response, resp: SyncResponse) -> None:
    response.status = resp.status
    response.version = resp.version
    response.headers = [(str(k), str(v)) for k, v in resp.headers.items()]
    response.body = resp.bytes().to_bytes()


_default_lock = threading.Lock()
_default_http1: Http1Transport | None = None
_default_http2: dict[str, Http2Transport] = {}


def default_http1_transport() -> Http1Transport:
    """Shared HTTP/1.1 transport used by builders created without an explicit transport."""
    global _default_http1
    with _default_lock:
        if _default_http1 is None:
            _default_http1 = Http1Transport()
        return _default_http1


def default_http2_transport(host: str) -> Http2Transport:
    """Shared HTTP/2 transport for a host."""
    with _default_lock:
        if (transport := _default_http2.get(host)) is None:
            transport = _default_http2[host] = Http2Transport(host)
        return transport


def close_default_transports() -> None:
    """Close and forget the shared transports."""
    global _default_http1
    with _default_lock:
        transports: list[_PyreqwestTransport] = [*_default_http2.values()]
        if _default_http1 is not None:
            transports.append(_default_http1)
        _default_http1 = None
        _default_http2.clear()
    for transport in transports:
        transport.close()
