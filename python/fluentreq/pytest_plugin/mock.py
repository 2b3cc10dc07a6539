"""Module providing mock transports for testing code built on fluentreq request builders."""

from datetime import timedelta
from typing import Any, Self

import orjson
import pytest

from fluentreq.client.transport import validate_h2_host
from fluentreq.pytest_plugin.types import CustomHandler
from fluentreq.request import PreparedRequest
from fluentreq.response import Response


class RecordedRequest:
    """Snapshot of a request executed by a MockTransport. Stays valid after the builder released its request."""

    def __init__(self, request: PreparedRequest, timeout: timedelta) -> None:
        self.method = str(request.method)
        self.url = str(request.url)
        self.query_string = request.url.query_string
        self.headers = request.header_items()
        self.body = request.body
        self.content_length = request.content_length
        self.timeout = timeout

    def header(self, name: str) -> str | None:
        name = name.lower()
        return next((v for k, v in self.headers if k.lower() == name), None)

    def __repr__(self) -> str:
        return f"{self.method} {self.url}"


class MockTransport:
    """Transport answering every request with a configured response, handler result or error."""

    def __init__(self, name: str = "mock") -> None:
        """Do not use directly. Instead, use TransportMocker.http1() or TransportMocker.http2()."""
        self.name = name
        self.closed = False
        self._status = 200
        self._version = "HTTP/1.1"
        self._headers: list[tuple[str, str]] = []
        self._body = b""
        self._handler: CustomHandler | None = None
        self._error: BaseException | None = None
        self._requests: list[RecordedRequest] = []

    def assert_called(
        self,
        *,
        count: int | None = None,
        min_count: int | None = None,
        max_count: int | None = None,
    ) -> None:
        """Assert that this transport executed the expected number of requests. By default, exactly once."""
        if count is None and min_count is None and max_count is None:
            count = 1

        if self._assertion_passes(count, min_count, max_count):
            return

        from fluentreq.pytest_plugin.internal import format_assert_called_error

        raise AssertionError(format_assert_called_error(self, count=count, min_count=min_count, max_count=max_count))

    def _assertion_passes(self, count: int | None, min_count: int | None, max_count: int | None) -> bool:
        actual_count = len(self._requests)
        if count is not None:
            return actual_count == count

        min_satisfied = min_count is None or actual_count >= min_count
        max_satisfied = max_count is None or actual_count <= max_count
        return min_satisfied and max_satisfied

    def get_requests(self) -> list[RecordedRequest]:
        """Get all requests executed by this transport."""
        return [*self._requests]

    def get_call_count(self) -> int:
        return len(self._requests)

    def reset_requests(self) -> None:
        self._requests.clear()

    def with_status(self, status: int) -> Self:
        """Set the mocked response status code."""
        self._status = status
        return self

    def with_header(self, name: str, value: str) -> Self:
        """Add a header to the mocked response."""
        self._headers.append((name, value))
        return self

    def with_body_bytes(self, body: bytes | bytearray | memoryview) -> Self:
        self._body = bytes(body)
        return self

    def with_body_text(self, body: str) -> Self:
        self._body = body.encode()
        return self

    def with_body_json(self, json_body: Any) -> Self:
        """Set the mocked response body to the given JSON-serializable object."""
        self._body = orjson.dumps(json_body)
        return self.with_header("content-type", "application/json")

    def with_version(self, version: str) -> Self:
        self._version = version
        return self

    def with_handler(self, handler: CustomHandler) -> Self:
        """Build the response with a callback instead of the configured values."""
        self._handler = handler
        return self

    def with_error(self, error: BaseException) -> Self:
        """Raise the given error from execute, like a failing transport would."""
        self._error = error
        return self

    def execute(self, request: PreparedRequest, response: Response, timeout: timedelta) -> None:
        self._requests.append(RecordedRequest(request, timeout))
        if self._error is not None:
            raise self._error

        if self._handler is not None:
            result = self._handler(request)
            response.status = result.status
            response.version = result.version
            response.headers = list(result.headers)
            response.body = result.body
        else:
            response.status = self._status
            response.version = self._version
            response.headers = list(self._headers)
            response.body = self._body

    def close(self) -> None:
        self.closed = True

    def __repr__(self) -> str:
        return f"MockTransport({self.name!r})"


class TransportMocker:
    """Creates mock transports and routes builders created without an explicit transport to them."""

    def __init__(self) -> None:
        self._http1: MockTransport | None = None
        self._http2: dict[str, MockTransport] = {}

    def http1(self) -> MockTransport:
        """The mock used for HTTP/1.1 builders."""
        if self._http1 is None:
            self._http1 = MockTransport("http1")
        return self._http1

    def http2(self, host: str = "localhost:443") -> MockTransport:
        """The mock used for HTTP/2 builders of the given host."""
        if (mock := self._http2.get(host)) is None:
            validate_h2_host(host)
            mock = self._http2[host] = MockTransport(f"http2 {host}").with_version("HTTP/2.0")
        return mock

    def get_requests(self) -> list[RecordedRequest]:
        """Get all requests executed by all mocks."""
        mocks = [self._http1, *self._http2.values()] if self._http1 else [*self._http2.values()]
        return [request for mock in mocks for request in mock.get_requests()]

    def get_call_count(self) -> int:
        return len(self.get_requests())


@pytest.fixture
def transport_mocker(monkeypatch: pytest.MonkeyPatch) -> TransportMocker:
    """Fixture that routes builders created without an explicit transport to mock transports."""
    mocker = TransportMocker()
    monkeypatch.setattr("fluentreq.request.builder.default_http1_transport", mocker.http1)
    monkeypatch.setattr("fluentreq.request.builder.default_http2_transport", mocker.http2)
    return mocker
