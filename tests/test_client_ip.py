import pytest
from starlette.requests import Request

from pistebin.client_ip import UNKNOWN_ADDRESS, get_client_ip


def make_request(headers=None, client=("192.0.2.10", 51000)):
    scope = {
        "type": "http",
        "method": "GET",
        "path": "/",
        "headers": [(name.lower().encode(), value.encode()) for name, value in (headers or {}).items()],
        "client": client,
    }
    return Request(scope)


def test_falls_back_to_socket_address():
    assert get_client_ip(make_request()) == "192.0.2.10"


def test_unknown_without_any_source():
    assert get_client_ip(make_request(client=None)) == UNKNOWN_ADDRESS


def test_first_forwarded_for_entry_wins():
    request = make_request({"X-Forwarded-For": "203.0.113.5, 10.0.0.1"})
    assert get_client_ip(request) == "203.0.113.5"


def test_forwarded_for_skips_unknown_entries():
    request = make_request({"X-Forwarded-For": "unknown, 203.0.113.6"})
    assert get_client_ip(request) == "203.0.113.6"


def test_client_ip_header_takes_precedence():
    request = make_request({"X-Client-IP": "198.51.100.1", "X-Forwarded-For": "203.0.113.5"})
    assert get_client_ip(request) == "198.51.100.1"


def test_real_ip_header():
    assert get_client_ip(make_request({"X-Real-IP": "198.51.100.2"})) == "198.51.100.2"


@pytest.mark.parametrize("value, expected", [
    ("for=198.51.100.3;proto=https", "198.51.100.3"),
    ('for="[2001:db8::1]:4711"', "2001:db8::1"),
    ("for=198.51.100.4:8080, for=10.0.0.1", "198.51.100.4"),
])
def test_forwarded_header(value, expected):
    assert get_client_ip(make_request({"Forwarded": value})) == expected


def test_bare_ipv6_is_kept_whole():
    assert get_client_ip(make_request({"X-Real-IP": "2001:db8::2"})) == "2001:db8::2"


def test_invalid_address_falls_through_to_next_header():
    request = make_request({"X-Forwarded-For": "not-an-ip", "X-Real-IP": "198.51.100.7"})
    assert get_client_ip(request) == "198.51.100.7"


def test_invalid_entries_in_one_header_are_skipped():
    request = make_request({"X-Forwarded-For": "bogus, 203.0.113.8"})
    assert get_client_ip(request) == "203.0.113.8"


def test_only_invalid_headers_fall_back_to_socket_address():
    request = make_request({"X-Client-IP": "evil.example", "Forwarded": "for=[not-ip]:80"})
    assert get_client_ip(request) == "192.0.2.10"
