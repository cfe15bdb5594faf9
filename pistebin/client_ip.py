"""
Client network address lookup, honouring common reverse-proxy headers.
"""
import ipaddress
from typing import Optional

from fastapi import Request

UNKNOWN_ADDRESS = "unknown"

# Checked in order; the first usable value wins.
FORWARDING_HEADERS = (
    "x-client-ip",
    "x-forwarded-for",
    "cf-connecting-ip",
    "fastly-client-ip",
    "true-client-ip",
    "x-real-ip",
    "x-cluster-client-ip",
    "x-forwarded",
    "forwarded-for",
    "forwarded",
)


def _valid_ip(value: str) -> Optional[str]:
    try:
        ipaddress.ip_address(value)
    except ValueError:
        return None
    return value


def _clean(value: str) -> Optional[str]:
    value = value.strip().strip('"')
    if not value:
        return None
    # [::1]:8080 -> ::1
    if value.startswith("["):
        end = value.find("]")
        return _valid_ip(value[1:end]) if end > 0 else None
    # 1.2.3.4:8080 -> 1.2.3.4 (bare IPv6 has more than one colon)
    if value.count(":") == 1:
        value = value.split(":", 1)[0]
    return _valid_ip(value)


def _from_header(name: str, value: str) -> Optional[str]:
    for part in value.split(","):
        part = part.strip()
        if name in ("forwarded", "x-forwarded", "forwarded-for"):
            # RFC 7239: for=1.2.3.4;proto=http
            for pair in part.split(";"):
                key, _, val = pair.partition("=")
                if val and key.strip().lower() == "for":
                    part = val
                    break
        address = _clean(part)
        if address:
            return address
    return None


def get_client_ip(request: Request) -> str:
    """Best guess at the originating client address; header values must be valid IPs."""
    for name in FORWARDING_HEADERS:
        value = request.headers.get(name)
        if value:
            address = _from_header(name, value)
            if address:
                return address

    if request.client and request.client.host:
        return request.client.host
    return UNKNOWN_ADDRESS
