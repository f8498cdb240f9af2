"""Channel validation shared by every converter."""

from numbers import Integral
from typing import Any

from palette_engine.core.errors import InvalidColorChannel

CHANNEL_MIN = 0
CHANNEL_MAX = 255


def _is_int(value: Any) -> bool:
    # bool is an Integral but never a channel value
    return isinstance(value, Integral) and not isinstance(value, bool)


def validate_channel(value: Any) -> bool:
    """True iff value is an integer in [0, 255]."""
    return _is_int(value) and CHANNEL_MIN <= value <= CHANNEL_MAX


def check_channels(**channels: Any) -> None:
    """Raise InvalidColorChannel for the first channel that fails validate_channel.

    Channels are checked in keyword order, so check_channels(r=.., g=.., b=..)
    reports red before green before blue.
    """
    for name, value in channels.items():
        if not validate_channel(value):
            raise InvalidColorChannel(name, value)


def check_range(name: str, value: Any, low: int, high: int) -> None:
    """Like check_channels, for HSL components with their own bounds."""
    if not (_is_int(value) and low <= value <= high):
        raise InvalidColorChannel(name, value, low, high)


def check_hue(value: Any) -> None:
    """Hue may be any integer (it wraps modulo 360); anything else is rejected."""
    if not _is_int(value):
        raise InvalidColorChannel('h', value, 0, 359)
