import os
from collections.abc import Generator

import pytest

from fluentreq.config import ENV_PREFIX, get_config
from fluentreq.pytest_plugin import MockTransport
from fluentreq.request import PreparedRequest
from fluentreq.response import Response


@pytest.fixture(autouse=True)
def clean_config(monkeypatch: pytest.MonkeyPatch) -> Generator[None, None, None]:
    for name in list(os.environ):
        if name.startswith(ENV_PREFIX):
            monkeypatch.delenv(name)
    get_config.cache_clear()
    yield
    get_config.cache_clear()


@pytest.fixture
def mock_transport() -> MockTransport:
    return MockTransport().with_body_text("ok")


def echo_query(request: PreparedRequest) -> Response:
    resp = Response()
    resp.status = 200
    resp.version = "HTTP/1.1"
    resp.headers = [("content-type", "text/plain; charset=utf-8")]
    resp.body = request.url.query_string.encode()
    return resp


@pytest.fixture
def echo_query_transport() -> MockTransport:
    """Transport answering with the query string it received."""
    return MockTransport("echo").with_handler(echo_query)
