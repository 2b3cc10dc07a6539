import pytest

from .mock import transport_mocker  # noqa: F401 load the transport_mocker fixture


def pytest_configure(config: pytest.Config) -> None:
    """Configure the pytest plugin."""
    config.addinivalue_line(
        "markers",
        "fluentreq: mark test to use fluentreq transport mocking"
    )
