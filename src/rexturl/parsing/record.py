"""
Unified URL record handed to output writers and templates.
"""

from dataclasses import dataclass
from typing import Dict, Iterable, Optional

from .domain import resolve_domain
from .url_parser import ParsedURL, URLParser, parse_url

# Names addressable from templates and --fields, in canonical output order
FIELD_NAMES = (
    "url",
    "scheme",
    "username",
    "host",
    "hostname",
    "subdomain",
    "domain",
    "port",
    "path",
    "query",
    "fragment",
)


@dataclass(frozen=True)
class URLRecord:
    """
    Parsed and domain-resolved URL.

    Attributes:
        url: Original input, surrounding whitespace removed
        scheme: Lower-cased scheme
        host: Lower-cased host (IPv6 without brackets)
        path: Path, '/' when the input had none
        domain: Registrable domain (equals host for IPs and short hosts)
        subdomain: Labels in front of the registrable domain
        username: User name from userinfo
        password: Password from userinfo (never exposed as a field)
        port: Explicit port
        query: Raw query string
        fragment: Raw fragment
        is_ipv6: Host came from a bracketed IPv6 literal
    """

    url: str
    scheme: str
    host: str
    path: str
    domain: str
    subdomain: Optional[str] = None
    username: Optional[str] = None
    password: Optional[str] = None
    port: Optional[int] = None
    query: Optional[str] = None
    fragment: Optional[str] = None
    is_ipv6: bool = False

    @property
    def hostname(self) -> str:
        return self.host

    @classmethod
    def from_parsed(cls, raw: str, parsed: ParsedURL) -> "URLRecord":
        """Build a record from parser output, resolving domain fields."""
        domain, subdomain = resolve_domain(parsed.host)
        return cls(
            url=raw.strip(),
            scheme=parsed.scheme,
            host=parsed.host,
            path=parsed.path,
            domain=domain,
            subdomain=subdomain,
            username=parsed.username,
            password=parsed.password,
            port=parsed.port,
            query=parsed.query,
            fragment=parsed.fragment,
            is_ipv6=parsed.is_ipv6,
        )

    def get_field(self, name: str) -> Optional[str]:
        """
        Look up a field by its template name.

        Unknown names resolve to None, as do absent optional components.
        The port is returned in decimal form.
        """
        if name not in FIELD_NAMES:
            return None
        if name == "port":
            return None if self.port is None else str(self.port)
        return getattr(self, name)

    def to_dict(self, fields: Iterable[str] = FIELD_NAMES) -> Dict[str, str]:
        """Map each requested field to its value, omitting absent ones."""
        result = {}
        for name in fields:
            value = self.get_field(name)
            if value is not None:
                result[name] = value
        return result


def build_record(raw: str, parser: Optional[URLParser] = None) -> URLRecord:
    """
    Parse a raw URL and resolve its domain fields.

    Args:
        raw: URL-like string
        parser: Parser to use (default lenient parser if None)

    Returns:
        URLRecord for the input

    Raises:
        URLParseError: If the input cannot be parsed
    """
    parsed = parser.parse(raw) if parser is not None else parse_url(raw)
    return URLRecord.from_parsed(raw, parsed)
