"""Cookie related classes."""

from typing import NamedTuple

_OWS = " \t"


class Cookie(NamedTuple):
    """A request cookie (name and value, no attributes)."""

    name: str
    value: str

    @staticmethod
    def split_parse(cookie: str) -> list["Cookie"]:
        """Parse a Cookie header line, a series of `name=value` pairs separated by `;`.

        Whitespace around each pair is trimmed and empty pairs are skipped. Only the first `=` separates the name
        from the value, a pair without `=` gets an empty value. Repeated names are all returned in order.
        """
        cookies: list[Cookie] = []
        for part in cookie.strip(_OWS).split(";"):
            part = part.strip(_OWS)
            if not part:
                continue
            name, _, value = part.partition("=")
            cookies.append(Cookie(name.strip(_OWS), value.strip(_OWS)))
        return cookies

    def __str__(self) -> str:
        return f"{self.name}={self.value}"


def cookie_header(cookies: dict[str, str]) -> str:
    """Render cookies as a Cookie header value."""
    return "; ".join(str(Cookie(name, value)) for name, value in cookies.items())


__all__ = ["Cookie", "cookie_header"]
