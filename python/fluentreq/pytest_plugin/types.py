"""Types used in the pytest plugin."""

from collections.abc import Callable

from fluentreq.request import PreparedRequest
from fluentreq.response import Response

CustomHandler = Callable[[PreparedRequest], Response]
