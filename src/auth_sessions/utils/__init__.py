"""Shared utilities."""

from .datetime import Clock, utc_now, to_utc, parse_iso
from .device import describe_device, UNKNOWN_DEVICE

__all__ = [
    "Clock",
    "utc_now",
    "to_utc",
    "parse_iso",
    "describe_device",
    "UNKNOWN_DEVICE",
]
