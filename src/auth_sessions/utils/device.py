"""Client device description from request headers."""

from typing import Optional

UNKNOWN_DEVICE = "Unknown Device"

# Checked in order; Chrome user agents also mention Safari, Edge ones mention Chrome.
_BROWSERS = (
    ("Edg", "Edge"),
    ("Firefox", "Firefox"),
    ("Chrome", "Chrome"),
    ("Safari", "Safari"),
)

_PLATFORMS = (
    ("Windows", "Windows"),
    ("Android", "Android"),
    ("iPhone", "iOS"),
    ("iPad", "iOS"),
    ("Mac", "macOS"),
    ("Linux", "Linux"),
)


def describe_device(
    user_agent: Optional[str],
    forwarded_for: Optional[str] = None,
    remote_addr: Optional[str] = None,
) -> str:
    """Build a short device descriptor such as ``Chrome on Windows (10.0.0.1)``.

    Args:
        user_agent: Value of the User-Agent header
        forwarded_for: Value of the X-Forwarded-For header, first hop wins
        remote_addr: Peer address of the connection

    Returns:
        Human readable device descriptor
    """
    if user_agent:
        browser = next((name for marker, name in _BROWSERS if marker in user_agent), "Unknown Browser")
        platform = next((name for marker, name in _PLATFORMS if marker in user_agent), None)
        description = f"{browser} on {platform}" if platform else browser
    else:
        description = UNKNOWN_DEVICE

    client_ip = forwarded_for.split(",")[0].strip() if forwarded_for else remote_addr
    if client_ip:
        description += f" ({client_ip})"

    return description
