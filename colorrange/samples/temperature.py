"""Default temperature table (degrees Celsius) and its color range."""
from typing import Optional, Sequence

from ..color_range import ColorRange
from ..types.color_types import ColorInput, Scalar

DEFAULT_COLORS = [
    [255, 0, 255],
    [217, 130, 181],
    [128, 0, 128],
    [0, 0, 255],
    [135, 206, 235],
    [0, 255, 0],
    [27, 142, 45],
    [255, 255, 0],
    [255, 215, 0],
    [255, 36, 0],
    [255, 0, 0],
    [139, 0, 0],
]

DEFAULT_TEMPERATURES = [-23, -18, -12, -7, -1, 4, 10, 16, 21, 27, 32, 38]


def temperature_color_range(
    colors: Optional[Sequence[ColorInput]] = None,
    temperatures: Optional[Sequence[Scalar]] = None,
) -> ColorRange:
    """Color range over the default table, or over the given one."""
    if colors is None:
        colors = DEFAULT_COLORS
    if temperatures is None:
        temperatures = DEFAULT_TEMPERATURES
    return ColorRange(colors, temperatures)
