"""Format predicates over a single string.

Each predicate answers ``False`` for blank input and never raises.
"""

from __future__ import annotations

import ipaddress
import re
import unicodedata
from urllib.parse import urlsplit

from primext.text.blank import is_blank

# ── regexes ───────────────────────────────────────────────────────────

_EMAIL = re.compile(r"^[a-zA-Z0-9_+.-]+@([a-zA-Z0-9-]+\.)+[a-zA-Z0-9]{2,4}$")
# Mainland China mobile prefixes: 13x, 145/147, 15x (no 154), 170/176/177/178, 18x
_MOBILE = re.compile(r"^1(3[0-9]|4[57]|5[0-35-9]|7[0678]|8[0-9])\d{8}$")
_HANS = re.compile("[\u4e00-\u9fa5]")
# RFC 3986 reg-name (unreserved, sub-delims, percent escapes) plus non-ASCII
# for internationalized names. Dotted-quad IPv4 is a subset of it.
_REG_NAME = re.compile(r"(?:[A-Za-z0-9\-._~!$&'()*+,;=]|%[0-9A-Fa-f]{2}|[^\x00-\x7f])+")


def is_email(value: str | None) -> bool:
    if is_blank(value):
        return False
    return _EMAIL.match(value) is not None


def is_mobile(value: str | None) -> bool:
    """True for an 11-digit mainland China mobile number."""
    if is_blank(value):
        return False
    return _MOBILE.match(value) is not None


def is_hans(value: str | None) -> bool:
    """True if *value* contains at least one CJK unified ideograph (U+4E00..U+9FA5)."""
    if is_blank(value):
        return False
    return _HANS.search(value) is not None


def is_url(value: str | None) -> bool:
    """True for an absolute URL whose scheme is ``http``.

    ``https`` URLs are rejected. That is the long-standing behavior callers
    depend on; use :func:`urllib.parse.urlsplit` directly for other schemes.
    Surrounding whitespace is ignored, but whitespace or control characters
    inside the URL fail it, as does a host that is not a registered name,
    an IPv4 address or a bracketed IPv6 address.
    """
    if is_blank(value):
        return False
    value = value.strip()
    if any(ch.isspace() or unicodedata.category(ch) == "Cc" for ch in value):
        return False
    try:
        parts = urlsplit(value)
        # .port raises ValueError for a non-numeric or out-of-range port
        port = parts.port
    except ValueError:
        return False
    if parts.scheme != "http" or (port is not None and port > 65535):
        return False
    return _is_valid_host(parts.netloc.rpartition("@")[2])


def _is_valid_host(hostport: str) -> bool:
    if hostport.startswith("["):
        literal, _, rest = hostport[1:].partition("]")
        if rest and not rest.startswith(":"):
            return False
        try:
            ipaddress.IPv6Address(literal)
        except ValueError:
            return False
        return True
    host = hostport.partition(":")[0]
    return _REG_NAME.fullmatch(host) is not None
