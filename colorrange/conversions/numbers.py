import math
import re
from typing import Optional

from ..types.color_types import Scalar
from ..utils import is_close_to_int

_LEADING_INT = re.compile(r"^\s*([+-]?\d+)", re.ASCII)


def round_half_up(value: float) -> int:
    """Round to the nearest integer, ties going up (198.5 -> 199)."""
    return int(math.floor(value + 0.5))


def blend_channel(channel1: Scalar, channel2: Scalar, ratio: float) -> float:
    """
    Mix two channel values, ``ratio`` being the weight of ``channel1``.

    The ratio is used as given; clamping it is up to the caller.
    """
    return channel2 * (1 - ratio) + channel1 * ratio


def channel_to_hex(channel: int) -> str:
    return format(int(channel), "02x")


def hex_to_channel(hex_pair: str) -> int:
    return int(hex_pair, 16)


def parse_leading_int(text: str) -> Optional[int]:
    """Parse the integer a numeric string starts with, or None if it has none."""
    match = _LEADING_INT.match(text)
    if match is None:
        return None
    return int(match.group(1))


def format_number(value: Scalar) -> str:
    """Render a number the short way: 1.0 -> "1", 0.4 -> "0.4"."""
    value = float(value)
    if is_close_to_int(value, tol=0.0):
        return str(int(value))
    return repr(value)
