"""
Colorrange - Color Parsing and Ranged Interpolation
===================================================

A small library that reads colors written in several loose notations,
normalizes them into one immutable record, and interpolates between colors
placed on a numeric scale (for example mapping a temperature to a color).

Key Features
------------
- Structured, rgb/rgba string, hex (#rrggbb / #rrggbbaa) and array input
- Strict converters raising typed errors, plus a lenient dispatcher
- Ratio blending with half-up rounding
- Range maps resolving scalar or vectorized (numpy) queries
- Immutable colors and range maps, safe to share between threads

Quick Start
-----------
>>> from colorrange import ColorRange, to_color, blend
>>>
>>> to_color("rgb(255, 0, 255)").to_hex_string()
'#ff00ff'
>>> blend(to_color("#ff00ff"), to_color([217, 0, 255])).value
(236, 0, 255)
>>>
>>> temps = ColorRange([[0, 0, 255], [255, 0, 0]], [0, 30])
>>> str(temps.get_color(15, alpha=0.4))
'rgb(128, 0, 128, 0.4)'

Modules
-------
- conversions: codec helpers, form detectors, converters, to_color
- colors: ColorRGB and blend
- range_map: RangeMap, build_range_map, resolve, resolve_many
- color_range: ColorRange facade
- samples: default temperature table
- errors: ValidationError, ChannelRangeError
"""

# conversions must load before colors
from .conversions import (
    blend_channel, channel_to_hex, hex_to_channel, round_half_up,
    is_structured_color, is_color_string, is_hex_string, is_color_array, detect_form,
    string_to_color, hex_to_color, array_to_color, mapping_to_color, to_color,
    InputForm,
)
from .colors import ColorRGB, blend, to_display_string, to_hex_string
from .range_map import RangeMap, build_range_map, resolve, resolve_many
from .color_range import ColorRange
from .samples import DEFAULT_COLORS, DEFAULT_TEMPERATURES, temperature_color_range
from .errors import ColorError, ValidationError, ChannelRangeError, RangeError

__version__ = "1.0.0"

__all__ = [
    # Codec
    "blend_channel", "channel_to_hex", "hex_to_channel", "round_half_up",

    # Detectors
    "is_structured_color", "is_color_string", "is_hex_string", "is_color_array",
    "detect_form", "InputForm",

    # Converters
    "string_to_color", "hex_to_color", "array_to_color", "mapping_to_color",
    "to_color",

    # Colors
    "ColorRGB", "blend", "to_display_string", "to_hex_string",

    # Range maps
    "RangeMap", "build_range_map", "resolve", "resolve_many", "ColorRange",

    # Defaults
    "DEFAULT_COLORS", "DEFAULT_TEMPERATURES", "temperature_color_range",

    # Errors
    "ColorError", "ValidationError", "ChannelRangeError", "RangeError",

    # Version
    "__version__",
]
