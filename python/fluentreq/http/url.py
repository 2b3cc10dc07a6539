from typing import Self
from urllib.parse import urlsplit, urlunsplit


class Url:
    """Mutable parsed URL.

    Unlike a plain string the components can be changed in place, which is what the request builder does when
    the scheme is overwritten or when extra query parameters are merged right before sending.
    An empty Url() is valid and has every component empty.
    """

    __slots__ = ("scheme", "netloc", "path", "query_string", "fragment")

    def __init__(self, url: str = "") -> None:
        """Parse a URL from a string. Raises ValueError if the string is not a valid URL."""
        self.scheme = ""
        self.netloc = ""
        self.path = ""
        self.query_string = ""
        self.fragment = ""
        if url:
            self._parse_into(url)

    @classmethod
    def parse(cls, url: str) -> Self:
        """Parse a URL from a string. Same as Url(url)."""
        return cls(url)

    def _parse_into(self, url: str) -> None:
        if any(ch <= " " or ch == "\x7f" for ch in url):
            raise ValueError(f"invalid character in url: {url!r}")

        parts = urlsplit(url)
        parts.port  # noqa: B018 raises ValueError on a bad port

        self.scheme = parts.scheme
        self.netloc = parts.netloc
        self.path = parts.path
        self.query_string = parts.query
        self.fragment = parts.fragment

    @property
    def host(self) -> str:
        """Host with optional port, without user info."""
        return self.netloc.rpartition("@")[2]

    @property
    def request_uri(self) -> str:
        """Path and query as sent on the request line."""
        path = self.path or "/"
        return f"{path}?{self.query_string}" if self.query_string else path

    def copy(self) -> Self:
        url = type(self)()
        for name in self.__slots__:
            setattr(url, name, getattr(self, name))
        return url

    def __str__(self) -> str:
        return urlunsplit((self.scheme, self.netloc, self.path, self.query_string, self.fragment))

    def __repr__(self) -> str:
        return f"Url({str(self)!r})"

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Url):
            return str(self) == str(other)
        if isinstance(other, str):
            return str(self) == other
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]
