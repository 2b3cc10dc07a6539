from enum import StrEnum

from fluentreq.exceptions import BuilderError


class Method(StrEnum):
    """HTTP request methods."""

    GET = "GET"
    HEAD = "HEAD"
    POST = "POST"
    PUT = "PUT"
    PATCH = "PATCH"
    DELETE = "DELETE"
    CONNECT = "CONNECT"
    OPTIONS = "OPTIONS"
    TRACE = "TRACE"

    @classmethod
    def parse(cls, method: "Method | str") -> "Method":
        """Return the Method for a name, ignoring case."""
        if isinstance(method, Method):
            return method
        try:
            return cls(method.upper())
        except (ValueError, AttributeError) as e:
            raise BuilderError(f"Unsupported HTTP method: {method!r}", {"method": method}) from e
