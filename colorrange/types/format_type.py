# No dependencies
from enum import Enum


class InputForm(str, Enum):
    STRUCTURED = "structured"
    STRING = "string"
    HEX = "hex"
    ARRAY = "array"


CHANNEL_MAX = 255
ALPHA_MAX = 1.0

RGB_CHANNELS = ("r", "g", "b")

DEFAULT_RATIO = 0.5
FALLBACK_RGB = (0, 0, 0)
