from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from enum import Enum
from typing import Any

from .validation import is_hostname, is_ipv4, is_ipv6, parse_port

logger = logging.getLogger(__name__)

_SCHEME_RE = re.compile(r"^[a-z][a-z0-9+.-]*://")
_PATH_RE = re.compile(r"[/?#]")


class InputType(str, Enum):
    IP = "ip"
    HOSTNAME = "hostname"
    INVALID = "invalid"


@dataclass(frozen=True)
class ClassificationResult:
    original: str
    evaluated: str
    parsed: str | None
    type: InputType

    @property
    def is_valid(self) -> bool:
        return self.type is not InputType.INVALID

    @property
    def is_ip(self) -> bool:
        return self.type is InputType.IP

    @property
    def is_hostname(self) -> bool:
        return self.type is InputType.HOSTNAME

    def to_dict(self) -> dict[str, Any]:
        return {
            "original": self.original,
            "evaluated": self.evaluated,
            "parsed": self.parsed,
            "type": self.type.value,
        }


def classify(raw: str) -> ClassificationResult:
    """
    Classify a free-form host identifier as an IP literal, a hostname or invalid.

    Input is trimmed and lowercased into `evaluated`. A URL wrapper (scheme, path,
    IPv6 brackets, port) is then removed best-effort and the remaining candidate is
    tried as IPv4, IPv6 and hostname, in that order. Never raises for str input.
    """
    original = raw
    evaluated = str(raw).strip().lower()
    candidate = strip_wrapper(evaluated)

    # No host grammar allows blanks or control characters, even in a discarded path.
    if _has_blank_or_control(evaluated):
        kind = InputType.INVALID
    elif is_ipv4(candidate) or is_ipv6(candidate):
        kind = InputType.IP
    elif is_hostname(candidate):
        kind = InputType.HOSTNAME
    else:
        kind = InputType.INVALID

    parsed = None if kind is InputType.INVALID else candidate
    logger.debug("classified %r as %s (candidate=%r)", original, kind.value, candidate)
    return ClassificationResult(original=original, evaluated=evaluated, parsed=parsed, type=kind)


def strip_wrapper(value: str) -> str:
    """
    Remove URL decoration around a host, returning the candidate host token.

    Supported:
      - "http://host.example.com:80/path" -> "host.example.com"
      - "http://[2001:db8::1]:8080/" -> "2001:db8::1"
      - "192.168.10.1:80" -> "192.168.10.1"
      - "2001:cdba::3257:9652" (unbracketed IPv6 is never cut at its last colon)
      - "http://host.example.com?q=1#top" -> "host.example.com"

    Anything that cannot be resolved is returned unchanged so that it fails the
    host grammars later.
    """
    host = value
    m = _SCHEME_RE.match(host)
    if m:
        host = _PATH_RE.split(host[m.end() :], 1)[0]

    if host.startswith("["):
        end = host.find("]")
        if end == -1:
            return host
        inner = host[1:end]
        rest = host[end + 1 :]
        if not is_ipv6(inner):
            return host
        if rest and not (rest.startswith(":") and parse_port(rest[1:]) is not None):
            return host
        return inner

    if ":" in host:
        # Only a port when what precedes it is a host on its own; raw IPv6
        # literals keep every group.
        head, port = host.rsplit(":", 1)
        if parse_port(port) is not None and (is_ipv4(head) or is_hostname(head)):
            return head
    return host


def _has_blank_or_control(value: str) -> bool:
    return any(c.isspace() or not c.isprintable() for c in value)
