from __future__ import annotations

import ipaddress
import re

_LABEL_RE = re.compile(r"^[a-z0-9](?:[a-z0-9-]{0,61}[a-z0-9])?$")
_PORT_RE = re.compile(r"^[0-9]{1,5}$")


def is_ipv4(value: str) -> bool:
    try:
        ipaddress.IPv4Address(value)
    except ValueError:
        return False
    return True


def is_ipv6(value: str) -> bool:
    """
    Match a colon-hex IPv6 literal.

    Supported:
      - "2001:cdba:0000:0000:0000:0000:3257:9652"
      - "2001:cdba::3257:9652", "::1", "::"
      - "::ffff:192.0.2.1"

    Scoped addresses ("fe80::1%eth0") are not host literals.
    """
    if "%" in value:
        return False
    try:
        ipaddress.IPv6Address(value)
    except ValueError:
        return False
    return True


def is_hostname(value: str) -> bool:
    if not value or len(value) > 253:
        return False

    parts = value.split(".")
    # Single-label names ("localhost") are not accepted as hosts.
    if len(parts) < 2:
        return False
    for part in parts:
        if not _LABEL_RE.fullmatch(part):
            return False
    # An all-numeric TLD is a malformed IPv4 literal, not a hostname.
    return not parts[-1].isdigit()


def parse_port(value: str) -> int | None:
    if not _PORT_RE.fullmatch(value):
        return None
    port = int(value)
    if port < 1 or port > 65535:
        return None
    return port
