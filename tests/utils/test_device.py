"""Tests for device description."""

import pytest

from auth_sessions.utils.device import UNKNOWN_DEVICE, describe_device

CHROME_WINDOWS = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36"
)
EDGE_WINDOWS = CHROME_WINDOWS + " Edg/120.0.0.0"
SAFARI_IPHONE = (
    "Mozilla/5.0 (iPhone; CPU iPhone OS 17_0 like Mac OS X) AppleWebKit/605.1.15 "
    "(KHTML, like Gecko) Version/17.0 Mobile/15E148 Safari/604.1"
)
FIREFOX_LINUX = "Mozilla/5.0 (X11; Linux x86_64; rv:121.0) Gecko/20100101 Firefox/121.0"


@pytest.mark.parametrize("user_agent,expected", [
    (CHROME_WINDOWS, "Chrome on Windows"),
    (EDGE_WINDOWS, "Edge on Windows"),
    (SAFARI_IPHONE, "Safari on iOS"),
    (FIREFOX_LINUX, "Firefox on Linux"),
    ("curl/8.4.0", "Unknown Browser"),
    (None, UNKNOWN_DEVICE),
    ("", UNKNOWN_DEVICE),
])
def test_describe_device(user_agent, expected):
    assert describe_device(user_agent) == expected


def test_forwarded_for_first_hop_wins():
    description = describe_device(CHROME_WINDOWS, "203.0.113.7, 10.0.0.1", "10.0.0.2")

    assert description == "Chrome on Windows (203.0.113.7)"


def test_remote_addr_used_without_proxy():
    assert describe_device(None, None, "10.0.0.2") == "Unknown Device (10.0.0.2)"
