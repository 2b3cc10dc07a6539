"""fluentreq pytest plugin for transport mocking."""

from .mock import MockTransport, RecordedRequest, TransportMocker, transport_mocker

__all__ = [  # noqa: RUF022
    "transport_mocker",
    "MockTransport",
    "RecordedRequest",
    "TransportMocker",
]
