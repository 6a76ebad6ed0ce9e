"""Session expiry policy value object."""

from enum import Enum


class ExpiryPolicy(str, Enum):
    """How a session's time-to-live reacts to writes after creation.

    SLIDING: every ``touch`` re-arms the full time-to-live.
    ABSOLUTE: the countdown runs from creation and writes keep the remaining time.
    """

    SLIDING = "sliding"
    ABSOLUTE = "absolute"

    @property
    def resets_on_touch(self) -> bool:
        return self is ExpiryPolicy.SLIDING
