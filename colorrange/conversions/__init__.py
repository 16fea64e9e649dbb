"""
Colorrange Color Parsing
========================

Detection and conversion of raw color input into ``ColorRGB``.

Accepted Forms
--------------
structured:
    ``{"r": 255, "g": 0, "b": 255}`` with an optional ``"a"`` in [0, 1]
rgb string:
    ``"rgb(255, 0, 255)"``, ``"rgba(255, 0, 255, 0.4)"``, ``"255/0/255"``,
    ``"(255 - 0 - 255)"``; any non-word run separates channels
hex string:
    ``"#ff00ff"`` or ``"#ff00ff66"`` (alpha byte / 255)
array:
    ``[255, 0, 255]``, ``("255", "0", "255", "0.4")``, 1-d numpy arrays

Functions
---------
Codec:
    blend_channel, channel_to_hex, hex_to_channel, round_half_up
Detectors:
    is_structured_color, is_color_string, is_hex_string, is_color_array,
    detect_form
Converters (strict):
    string_to_color, hex_to_color, array_to_color, mapping_to_color
Dispatcher (lenient by default):
    to_color(value, strict=False)
"""

from .numbers import (
    blend_channel,
    channel_to_hex,
    hex_to_channel,
    round_half_up,
    parse_leading_int,
    format_number,
)
from .detectors import (
    is_structured_color,
    is_color_string,
    is_hex_string,
    is_color_array,
    detect_form,
)
from .parsers import string_to_color, hex_to_color, array_to_color, mapping_to_color
from .wrapper import to_color, CONVERTERS

from ..types.format_type import InputForm

__all__ = [
    # Codec
    'blend_channel',
    'channel_to_hex',
    'hex_to_channel',
    'round_half_up',
    'parse_leading_int',
    'format_number',

    # Detectors
    'is_structured_color',
    'is_color_string',
    'is_hex_string',
    'is_color_array',
    'detect_form',

    # Converters
    'string_to_color',
    'hex_to_color',
    'array_to_color',
    'mapping_to_color',
    'to_color',
    'CONVERTERS',

    # Types
    'InputForm',
]
