from .format_type import InputForm, CHANNEL_MAX, ALPHA_MAX, RGB_CHANNELS, DEFAULT_RATIO, FALLBACK_RGB
from .color_types import Scalar, RGBTuple, RGBATuple, ColorValue, RGBMapping, ColorArray, ColorInput

__all__ = [
    "InputForm",
    "CHANNEL_MAX", "ALPHA_MAX", "RGB_CHANNELS", "DEFAULT_RATIO", "FALLBACK_RGB",
    "Scalar", "RGBTuple", "RGBATuple", "ColorValue", "RGBMapping", "ColorArray", "ColorInput",
]
