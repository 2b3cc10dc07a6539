import logging
from collections.abc import Mapping, Sequence
from datetime import timedelta

from fluentreq.client.transport import Transport
from fluentreq.config import get_config
from fluentreq.http import Method, Url, merge_query
from fluentreq.request.prepared import PreparedRequest
from fluentreq.response import Response

logger = logging.getLogger(__name__)


def resolve_timeout(timeout: timedelta | None) -> timedelta:
    """Timeout to execute with. Missing and non-positive timeouts fall back to the configured default."""
    if timeout is None or timeout <= timedelta(0):
        return get_config().default_timeout
    return timeout


def dispatch(
    transport: Transport,
    request: PreparedRequest,
    response: Response,
    *,
    method: Method,
    url: Url,
    params: Mapping[str, Sequence[str]],
    timeout: timedelta | None,
) -> None:
    """Finalize the request and execute it over the transport.

    Params are merged into the URL query string, the URL and method are set on the request and the response
    holder is filled by the transport. Transport errors propagate unchanged.
    """
    url.query_string = merge_query(url.query_string, params)
    request.url = url.copy()
    request.method = method

    effective_timeout = resolve_timeout(timeout)
    logger.debug("Dispatching %s %s via %r", method, request.url, transport)
    transport.execute(request, response, effective_timeout)
