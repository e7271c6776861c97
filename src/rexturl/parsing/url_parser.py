"""
URL component parser.

Splits a raw URL-like string into scheme, userinfo, host, port, path, query
and fragment by slicing the input, peeling delimiters in a fixed order:
fragment, query, scheme, path boundary, userinfo, host/port. Each delimiter is
searched in a substring already stripped of the later-occurring ones.

Targets common real-world URLs. No IDNA handling and no percent-decoding.
"""

import string
from dataclasses import dataclass
from typing import Optional, Tuple

from rexturl.errors import (
    EmptyInputError,
    InvalidPortError,
    InvalidSchemeError,
    MalformedAuthorityError,
    MissingHostError,
)

SCHEME_CHARS = frozenset(string.ascii_letters + string.digits + "+-.")
MAX_PORT = 65535


@dataclass(frozen=True)
class ParsedURL:
    """
    Raw URL components.

    Attributes:
        scheme: Lower-cased scheme (default scheme if the input had none)
        username: Userinfo before the first ':' (None if absent or empty)
        password: Userinfo after the first ':' (None if absent or empty)
        host: Lower-cased host, IPv6 brackets stripped
        port: Port number (None if not given)
        path: Path starting with '/', never empty
        query: Query string without '?', not decoded
        fragment: Fragment without '#', not decoded
        is_ipv6: True if the host was a bracketed IPv6 literal
    """

    scheme: str
    host: str
    path: str = "/"
    username: Optional[str] = None
    password: Optional[str] = None
    port: Optional[int] = None
    query: Optional[str] = None
    fragment: Optional[str] = None
    is_ipv6: bool = False


class URLParser:
    """
    Slice-based URL parser.

    Usage:
        parser = URLParser()
        parsed = parser.parse("https://user@blog.example.co.uk:8080/posts?q=1#top")
        print(parsed.host)  # blog.example.co.uk
        print(parsed.port)  # 8080

    Inputs without '://' are parsed leniently: the default scheme is assumed
    and the whole remainder is treated as authority+path, so
    ``example.com/path`` and even bare words like ``localhost`` parse.
    """

    def __init__(self, default_scheme: str = "https", require_scheme: bool = False):
        """
        Initialize parser.

        Args:
            default_scheme: Scheme assumed when the input has no '://'
            require_scheme: Reject inputs without '://' instead of defaulting

        Raises:
            ValueError: If default_scheme is not a valid scheme
        """
        if not default_scheme or not set(default_scheme) <= SCHEME_CHARS:
            raise ValueError(f"Invalid default scheme: {default_scheme!r}")
        self.default_scheme = default_scheme.lower()
        self.require_scheme = require_scheme

    def parse(self, raw: str) -> ParsedURL:
        """
        Parse a raw URL string into its components.

        Args:
            raw: URL-like string; surrounding whitespace is ignored

        Returns:
            ParsedURL with all components split out

        Raises:
            EmptyInputError: Input is empty or whitespace
            InvalidSchemeError: Scheme is empty or has illegal characters
            MalformedAuthorityError: Unterminated IPv6 bracket or whitespace
                in the host
            InvalidPortError: Port is not an integer in [0, 65535]
            MissingHostError: No host could be found
        """
        if raw is None:
            raise EmptyInputError(raw)
        text = raw.strip()
        if not text:
            raise EmptyInputError(raw)

        text, fragment = self._split_suffix(text, "#")
        text, query = self._split_suffix(text, "?")
        scheme, remainder = self._split_scheme(raw, text)

        slash = remainder.find("/")
        if slash == -1:
            authority, path = remainder, "/"
        else:
            authority, path = remainder[:slash], remainder[slash:]

        username, password, hostport = self._split_userinfo(authority)
        host, port_text, is_ipv6 = self._split_host_port(raw, hostport)
        port = self._parse_port(raw, port_text)

        if not host:
            raise MissingHostError(raw)
        if any(ch.isspace() for ch in host):
            raise MalformedAuthorityError(raw, f"whitespace in host {host!r}")

        return ParsedURL(
            scheme=scheme,
            host=host.lower(),
            path=path or "/",
            username=username,
            password=password,
            port=port,
            query=query,
            fragment=fragment,
            is_ipv6=is_ipv6,
        )

    @staticmethod
    def _split_suffix(text: str, delimiter: str) -> Tuple[str, Optional[str]]:
        """Split at the first delimiter; an empty suffix counts as absent."""
        head, found, tail = text.partition(delimiter)
        if not found:
            return text, None
        return head, tail or None

    def _split_scheme(self, raw: str, text: str) -> Tuple[str, str]:
        """Return (scheme, authority+path)."""
        marker = text.find("://")
        if marker == -1:
            if self.require_scheme:
                raise InvalidSchemeError(raw, "missing '://'")
            remainder = text[2:] if text.startswith("//") else text
            return self.default_scheme, remainder

        scheme = text[:marker]
        if not scheme:
            raise InvalidSchemeError(raw, "empty scheme")
        if not set(scheme) <= SCHEME_CHARS:
            raise InvalidSchemeError(raw, repr(scheme))
        return scheme.lower(), text[marker + 3 :]

    @staticmethod
    def _split_userinfo(
        authority: str,
    ) -> Tuple[Optional[str], Optional[str], str]:
        """Return (username, password, host:port) using the last '@'."""
        at = authority.rfind("@")
        if at == -1:
            return None, None, authority

        userinfo = authority[:at]
        username, _, password = userinfo.partition(":")
        return username or None, password or None, authority[at + 1 :]

    @staticmethod
    def _split_host_port(raw: str, hostport: str) -> Tuple[str, Optional[str], bool]:
        """Return (host, port text, is_ipv6)."""
        if hostport.startswith("["):
            close = hostport.find("]")
            if close == -1:
                raise MalformedAuthorityError(raw, "unterminated IPv6 literal")
            host = hostport[1:close]
            trailer = hostport[close + 1 :]
            if not trailer:
                return host, None, True
            if not trailer.startswith(":"):
                raise MalformedAuthorityError(raw, f"unexpected {trailer!r} after IPv6 literal")
            return host, trailer[1:], True

        colon = hostport.rfind(":")
        if colon == -1:
            return hostport, None, False
        return hostport[:colon], hostport[colon + 1 :], False

    @staticmethod
    def _parse_port(raw: str, port_text: Optional[str]) -> Optional[int]:
        """Validate and convert the port; None when no ':' was present."""
        if port_text is None:
            return None

        # str.isdigit() also accepts non-ASCII digits
        if not (0 < len(port_text) <= 5) or not all("0" <= ch <= "9" for ch in port_text):
            raise InvalidPortError(raw, repr(port_text))

        port = int(port_text)
        if port > MAX_PORT:
            raise InvalidPortError(raw, f"{port} out of range")
        return port


_default_parser = URLParser()


def parse_url(raw: str) -> ParsedURL:
    """Parse ``raw`` with the default lenient parser."""
    return _default_parser.parse(raw)
