"""
Registrable domain and subdomain resolution.

Uses a fixed table of two-label public suffixes instead of the full Public
Suffix List. Hosts under three-label suffixes are not recognised.
"""

import ipaddress
from typing import Optional, Tuple

MULTI_PART_TLDS = frozenset(
    {
        "co.uk",
        "org.uk",
        "ac.uk",
        "gov.uk",
        "me.uk",
        "net.uk",
        "sch.uk",
        "com.au",
        "net.au",
        "org.au",
        "edu.au",
        "gov.au",
        "co.nz",
        "net.nz",
        "org.nz",
        "govt.nz",
        "co.za",
        "org.za",
        "com.br",
        "net.br",
        "org.br",
        "co.jp",
        "com.mx",
        "com.ar",
        "com.sg",
        "com.my",
        "co.id",
        "com.hk",
        "co.th",
        "in.th",
    }
)


def is_multi_part_tld(suffix: str) -> bool:
    """Return True if ``suffix`` is a known two-label public suffix."""
    return suffix in MULTI_PART_TLDS


def is_ip_literal(host: str) -> bool:
    """Return True for IPv4 and (unbracketed) IPv6 addresses."""
    try:
        ipaddress.ip_address(host)
    except ValueError:
        return False
    return True


def resolve_domain(host: str) -> Tuple[str, Optional[str]]:
    """
    Split a host into its registrable domain and subdomain.

    Args:
        host: Lower-cased hostname without brackets or port

    Returns:
        (domain, subdomain) where subdomain is None when nothing precedes
        the registrable domain

    Example:
        >>> resolve_domain("blog.example.co.uk")
        ('example.co.uk', 'blog')
    """
    if not host or is_ip_literal(host):
        return host, None

    labels = host.split(".")
    if any(not label for label in labels):
        return host, None

    count = len(labels)
    if count <= 2:
        return host, None

    if is_multi_part_tld(".".join(labels[-2:])):
        if count == 3:
            return host, None
        boundary = count - 3
    else:
        boundary = count - 2

    domain = ".".join(labels[boundary:])
    subdomain = ".".join(labels[:boundary]) or None
    return domain, subdomain
