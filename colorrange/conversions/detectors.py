"""
Predicates classifying raw color input.

None of these raise: anything that is not recognised simply yields False
(or None for ``detect_form``).
"""
import re
from collections.abc import Mapping
from typing import Any, Optional

import numpy as np

from ..types.format_type import InputForm, RGB_CHANNELS
from ..utils import is_real_number

_CHANNEL = r"(?:[01]?\d\d?|2[0-4]\d|25[0-5])"
_ALPHA = r"(?:\d*\.\d+|\d+)"

# Separators between groups are any run of non-word characters, so
# "255,0,0", "rgb(0/0/0)" and "(255 - 255 - 255)" are all accepted.
COLOR_STRING_PATTERN = re.compile(
    rf"(?:rgba?)?\(?\W?({_CHANNEL})\W+({_CHANNEL})\W+({_CHANNEL})(?:[^\w.]+({_ALPHA}))?\W?\)?",
    re.ASCII,
)
HEX_STRING_PATTERN = re.compile(r"#((?:[0-9a-fA-F]{2}){3,4})")


def is_structured_color(value: Any) -> bool:
    if not isinstance(value, Mapping):
        return False
    return all(key in value and is_real_number(value[key]) for key in RGB_CHANNELS)


def is_color_string(value: Any) -> bool:
    return isinstance(value, str) and COLOR_STRING_PATTERN.fullmatch(value) is not None


def is_hex_string(value: Any) -> bool:
    return isinstance(value, str) and HEX_STRING_PATTERN.fullmatch(value) is not None


def is_color_array(value: Any) -> bool:
    if isinstance(value, np.ndarray):
        return value.ndim == 1
    return isinstance(value, (list, tuple))


def detect_form(value: Any) -> Optional[InputForm]:
    """
    Decide which input form ``value`` has.

    Forms are probed in priority order: structured, color string, hex
    string, array.
    """
    from ..colors.color import ColorRGB  # local import to avoid cycles

    if isinstance(value, ColorRGB) or is_structured_color(value):
        return InputForm.STRUCTURED
    if is_color_string(value):
        return InputForm.STRING
    if is_hex_string(value):
        return InputForm.HEX
    if is_color_array(value):
        return InputForm.ARRAY
    return None
