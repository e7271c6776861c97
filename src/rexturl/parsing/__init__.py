"""
URL parsing and domain resolution.

Turns raw URL strings into immutable records with registrable domain and
subdomain fields.
"""

from .domain import MULTI_PART_TLDS, is_multi_part_tld, resolve_domain
from .record import FIELD_NAMES, URLRecord, build_record
from .url_parser import ParsedURL, URLParser, parse_url

__all__ = [
    "FIELD_NAMES",
    "MULTI_PART_TLDS",
    "ParsedURL",
    "URLParser",
    "URLRecord",
    "build_record",
    "is_multi_part_tld",
    "parse_url",
    "resolve_domain",
]
