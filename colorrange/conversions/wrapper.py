import warnings
from typing import Any, Callable, Dict

from .detectors import detect_form
from .parsers import array_to_color, hex_to_color, mapping_to_color, string_to_color
from ..colors.color import ColorRGB
from ..errors import ValidationError
from ..types.format_type import FALLBACK_RGB, InputForm


def _structured_to_color(value: Any) -> ColorRGB:
    if isinstance(value, ColorRGB):
        return value
    return mapping_to_color(value)


CONVERTERS: Dict[InputForm, Callable[[Any], ColorRGB]] = {
    InputForm.STRUCTURED: _structured_to_color,
    InputForm.STRING: string_to_color,
    InputForm.HEX: hex_to_color,
    InputForm.ARRAY: array_to_color,
}


def to_color(value: Any, strict: bool = False) -> ColorRGB:
    """
    Convert any accepted color input to a ``ColorRGB``.

    The form is decided once by ``detect_form`` and the matching strict
    converter does the work, so malformed input of a recognised form still
    raises. Input of no recognised form becomes black with a warning, or
    raises ``ValidationError`` when ``strict`` is set.
    """
    form = detect_form(value)
    if form is None:
        if strict:
            raise ValidationError(f"Unrecognised color input: {value!r}.")
        warnings.warn(f"Unrecognised color input {value!r}, defaulting to black")
        return ColorRGB(*FALLBACK_RGB)
    return CONVERTERS[form](value)
