"""Converters from each accepted input form to ``ColorRGB``.

Each converter is strict: it validates the whole input and raises
``ValidationError`` or ``ChannelRangeError`` before building a color.
"""
from typing import Any, List, Optional

import numpy as np

from .detectors import (
    COLOR_STRING_PATTERN,
    HEX_STRING_PATTERN,
    is_color_string,
    is_hex_string,
    is_structured_color,
)
from .numbers import hex_to_channel, parse_leading_int
from ..colors.color import ColorRGB, validate_alpha, validate_channel
from ..errors import ValidationError, rgb_out_of_range, alpha_out_of_range
from ..types.color_types import ColorArray, RGBMapping, Scalar
from ..types.format_type import ALPHA_MAX, CHANNEL_MAX, RGB_CHANNELS
from ..utils import get_dimension, is_real_number


def string_to_color(value: str) -> ColorRGB:
    if not is_color_string(value):
        raise ValidationError(f"Input values must be a valid rgb string value: {value!r}.")
    match = COLOR_STRING_PATTERN.fullmatch(value)
    r, g, b, alpha = match.groups()  # type: ignore[union-attr]
    rgb = [int(c) for c in (r, g, b)]
    for channel in rgb:
        if not 0 <= channel <= CHANNEL_MAX:
            raise rgb_out_of_range(channel)
    if alpha is None:
        return ColorRGB(*rgb)
    a = float(alpha)
    if not 0 <= a <= ALPHA_MAX:
        raise alpha_out_of_range(alpha)
    return ColorRGB(*rgb, a=a)


def hex_to_color(value: str) -> ColorRGB:
    if not is_hex_string(value):
        raise ValidationError(f"Input values must be a valid Color Hex value: {value!r}.")
    digits = HEX_STRING_PATTERN.fullmatch(value).group(1)  # type: ignore[union-attr]
    channels = [hex_to_channel(digits[i:i + 2]) for i in range(0, len(digits), 2)]
    for channel in channels[:3]:
        if not 0 <= channel <= CHANNEL_MAX:
            raise rgb_out_of_range(channel)
    if len(channels) == 3:
        return ColorRGB(*channels)
    a = channels[3] / CHANNEL_MAX
    if not 0 <= a <= ALPHA_MAX:
        raise alpha_out_of_range(a)
    return ColorRGB(*channels[:3], a=a)


def _coerce_element(element: Any, is_alpha: bool) -> Scalar:
    if isinstance(element, str):
        if is_alpha:
            try:
                return float(element)
            except ValueError:
                raise ValidationError(f"Invalid value: {element}.") from None
        parsed: Optional[int] = parse_leading_int(element)
        if parsed is None:
            raise ValidationError(f"Invalid value: {element}.")
        return parsed
    if not is_real_number(element):
        raise ValidationError(f"Invalid value: {element}.")
    return element


def array_to_color(values: ColorArray) -> ColorRGB:
    """
    Build a color from 3 (rgb) or 4 (rgba) numbers or numeric strings.

    Strings are parsed as leading integers for r, g, b ("12px" -> 12) and
    as floats for alpha.
    """
    if isinstance(values, np.ndarray):
        if values.ndim != 1:
            raise ValidationError(f"Input array must be 1-dimensional, got shape {values.shape}.")
        values = values.tolist()
    if not isinstance(values, (list, tuple)) or get_dimension(values) not in (3, 4):
        raise ValidationError(f"Input values must be an array of length 3 or 4: {values!r}.")

    coerced: List[Scalar] = [
        _coerce_element(element, is_alpha=index == 3) for index, element in enumerate(values)
    ]
    for channel in coerced[:3]:
        if not 0 <= channel <= CHANNEL_MAX:
            raise rgb_out_of_range(channel)
    if len(coerced) == 4 and not 0 <= coerced[3] <= ALPHA_MAX:
        raise alpha_out_of_range(coerced[3])
    return ColorRGB(*coerced)


def mapping_to_color(value: RGBMapping) -> ColorRGB:
    """Build a color from a mapping with r, g, b and an optional a."""
    if not is_structured_color(value):
        raise ValidationError(f"Input values must be a mapping with numeric r, g and b: {value!r}.")
    rgb = [validate_channel(value[key]) for key in RGB_CHANNELS]
    alpha = value.get("a")
    if alpha is None:
        return ColorRGB(*rgb)
    return ColorRGB(*rgb, a=validate_alpha(alpha))
