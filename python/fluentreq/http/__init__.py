"""HTTP utils classes and types."""

from fluentreq.http.method import Method
from fluentreq.http.query import merge_query
from fluentreq.http.url import Url

__all__ = [
    "Method",
    "Url",
    "merge_query",
]
