from fluentreq.http import Method, Url
from fluentreq.http.cookie import cookie_header


class PreparedRequest:
    """Request state accumulated by a RequestBuilder and handed to a transport."""

    def __init__(self) -> None:
        self.method: Method = Method.GET
        self.url: Url = Url()
        self.headers: list[tuple[str, str]] = []
        self.cookies: dict[str, str] = {}
        self.body: bytes | None = None
        self.content_length: int = 0
        self.content_type: str | None = None

    def header_items(self) -> list[tuple[str, str]]:
        """Headers as sent on the wire: explicit headers, then Content-Type and Cookie.

        A set content_type replaces any explicit Content-Type header.
        """
        items = list(self.headers)
        if self.content_type is not None:
            items = [(k, v) for k, v in items if k.lower() != "content-type"]
            items.append(("Content-Type", self.content_type))
        if self.cookies:
            items.append(("Cookie", cookie_header(self.cookies)))
        return items

    def reset(self) -> None:
        self.__init__()  # type: ignore[misc]

    def __repr__(self) -> str:
        return f"PreparedRequest({self.method} {self.url})"
