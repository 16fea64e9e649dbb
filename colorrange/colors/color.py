from __future__ import annotations
from typing import Any, Callable, ClassVar, Dict, Optional, Tuple
import numpy as np

from ..conversions.numbers import channel_to_hex, format_number, round_half_up
from ..errors import ValidationError, rgb_out_of_range, alpha_out_of_range
from ..types.color_types import ColorValue, Scalar
from ..types.format_type import ALPHA_MAX, CHANNEL_MAX, RGB_CHANNELS
from ..utils import is_real_number


def validate_channel(value: Any) -> int:
    """Check an r/g/b value and return it as an int."""
    if not is_real_number(value):
        raise ValidationError(f"Invalid value: {value}.")
    if not 0 <= value <= CHANNEL_MAX:
        raise rgb_out_of_range(value)
    if value != int(value):
        raise ValidationError(f"RGB values must be integers: {value}.")
    return int(value)


def validate_alpha(value: Any) -> float:
    if not is_real_number(value):
        raise ValidationError(f"Invalid alpha value: {value}.")
    if not 0 <= value <= ALPHA_MAX:
        raise alpha_out_of_range(value)
    if isinstance(value, np.floating):
        # shortest repr for the dtype, so float32(0.4) stays 0.4
        return float(np.format_float_positional(value))
    return float(value)


class ColorRGB:
    """
    Canonical color record: integer r, g, b in [0, 255] and an optional
    alpha in [0, 1].

    Out-of-range values are rejected, never clamped. Instances are frozen
    after ``__init__``; every derived color is a new instance.
    """
    __slots__ = ('_value', '_is_frozen')

    channels: ClassVar[Tuple[str, ...]] = RGB_CHANNELS
    maxima: ClassVar[Tuple[int, int, int]] = (CHANNEL_MAX, CHANNEL_MAX, CHANNEL_MAX)
    # attached in colors/blend.py
    blend: Callable[[ColorRGB, ColorRGB, float], ColorRGB]

    def __setattr__(self, name, value):
        """Block attribute changes after __init__ finishes."""
        if getattr(self, '_is_frozen', False):
            raise AttributeError(f"{self.__class__.__name__} is immutable; cannot assign to {name}")
        super().__setattr__(name, value)

    def __init__(self, r: Scalar, g: Scalar, b: Scalar, a: Optional[Scalar] = None) -> None:
        rgb = tuple(validate_channel(v) for v in (r, g, b))
        if a is None:
            self._value = rgb
        else:
            self._value = rgb + (validate_alpha(a),)
        super().__setattr__('_is_frozen', True)

    @classmethod
    def from_value(cls, value: ColorValue) -> ColorRGB:
        return cls(*value)

    # ------------------ READ-ONLY PROPERTIES ------------------
    @property
    def value(self) -> ColorValue:
        return self._value  # type: ignore

    @property
    def r(self) -> int:
        return self._value[0]

    @property
    def g(self) -> int:
        return self._value[1]

    @property
    def b(self) -> int:
        return self._value[2]

    @property
    def a(self) -> Optional[float]:
        return self._value[3] if len(self._value) == 4 else None

    @property
    def rgb(self) -> Tuple[int, int, int]:
        return self._value[:3]  # type: ignore

    @property
    def has_alpha(self) -> bool:
        return len(self._value) == 4

    # ------------------ DERIVED COLORS ------------------
    def with_alpha(self, alpha: Scalar) -> ColorRGB:
        """Return a copy whose alpha is replaced by ``alpha``."""
        return self.__class__(*self.rgb, a=alpha)

    def without_alpha(self) -> ColorRGB:
        if not self.has_alpha:
            return self
        return self.__class__(*self.rgb)

    # ------------------ RENDERING ------------------
    def to_display_string(self) -> str:
        parts = [str(c) for c in self.rgb]
        if self.has_alpha:
            parts.append(format_number(self.a))  # type: ignore
        return f"rgb({', '.join(parts)})"

    def to_hex_string(self) -> str:
        digits = "".join(channel_to_hex(c) for c in self.rgb)
        if self.has_alpha:
            digits += channel_to_hex(round_half_up(self.a * CHANNEL_MAX))  # type: ignore
        return f"#{digits}"

    def as_dict(self) -> Dict[str, Scalar]:
        result: Dict[str, Scalar] = dict(zip(self.channels, self.rgb))
        if self.has_alpha:
            result["a"] = self.a  # type: ignore
        return result

    def to_array(self) -> np.ndarray:
        if self.has_alpha:
            return np.array(self._value, dtype=np.float64)
        return np.array(self._value, dtype=np.int64)

    # ------------------ PROTOCOLS ------------------
    def __str__(self) -> str:
        return self.to_display_string()

    def __repr__(self) -> str:
        args = ", ".join(f"{k}={v!r}" for k, v in self.as_dict().items())
        return f"{self.__class__.__name__}({args})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ColorRGB):
            return NotImplemented
        return self._value == other._value

    def __hash__(self) -> int:
        return hash(self._value)


def to_display_string(color: ColorRGB) -> str:
    """``"rgb(r, g, b)"``, or ``"rgb(r, g, b, a)"`` with the raw alpha value."""
    return color.to_display_string()


def to_hex_string(color: ColorRGB) -> str:
    """``"#rrggbb"``, plus a trailing alpha byte (round(a * 255)) when alpha is set."""
    return color.to_hex_string()
