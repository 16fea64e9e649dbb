import math

from boundednumbers import clamp01

from .color import ColorRGB
from ..conversions.numbers import blend_channel, round_half_up
from ..errors import ValidationError
from ..types.format_type import DEFAULT_RATIO


def blend(color1: ColorRGB, color2: ColorRGB, ratio: float = DEFAULT_RATIO) -> ColorRGB:
    """
    Mix two colors channel by channel.

    ``ratio`` is the closeness to ``color1``: 1 gives ``color1``, 0 gives
    ``color2``. It is clamped to [0, 1] first. Blended channels are rounded
    half up. Alpha is not blended; the result never carries one.
    """
    if math.isnan(ratio):
        raise ValidationError(f"Blend ratio must be a number: {ratio}.")
    ratio = clamp01(ratio)
    return ColorRGB(*(
        round_half_up(blend_channel(c1, c2, ratio))
        for c1, c2 in zip(color1.rgb, color2.rgb)
    ))


ColorRGB.blend = blend
