from collections.abc import Mapping, Sequence
from urllib.parse import quote_plus


def merge_query(query_string: str, params: Mapping[str, Sequence[str]]) -> str:
    """Append escaped params to an already encoded query string.

    The existing query string is kept as is. Params follow it in the mapping's key order, and values of a single
    key keep the order they were added in. With no params the query string is returned unchanged.
    """
    if not params:
        return query_string

    pairs = [f"{quote_plus(key)}={quote_plus(value)}" for key, values in params.items() for value in values]
    if query_string:
        pairs.insert(0, query_string)
    return "&".join(pairs)
