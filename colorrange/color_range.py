from __future__ import annotations
from typing import List, Optional, Sequence, Union
import numpy as np

from .colors.color import ColorRGB
from .range_map import RangeMap, build_range_map, resolve, resolve_many
from .types.color_types import ColorInput, Scalar


class ColorRange:
    """
    A range map together with its lookup.

    >>> cr = ColorRange(["#0000ff", "#ff0000"], [0, 100])
    >>> cr.get_color(50).to_hex_string()
    '#800080'
    """

    def __init__(
        self,
        colors: Sequence[ColorInput],
        ranges: Sequence[Scalar],
        *,
        paired: bool = False,
    ) -> None:
        self._map = build_range_map(colors, ranges, paired=paired)

    @classmethod
    def from_map(cls, range_map: RangeMap) -> ColorRange:
        instance = cls.__new__(cls)
        instance._map = range_map
        return instance

    @property
    def map(self) -> RangeMap:
        return self._map

    def get_color(self, value: Scalar, alpha: Optional[Scalar] = None) -> ColorRGB:
        return resolve(self._map, value, alpha)

    __call__ = get_color

    def get_colors(
        self,
        values: Union[Sequence[Scalar], np.ndarray],
        alpha: Optional[Scalar] = None,
    ) -> List[ColorRGB]:
        """Resolve many values at once, returning one ``ColorRGB`` per value."""
        resolved = resolve_many(self._map, values, alpha)
        if alpha:
            return [ColorRGB(int(r), int(g), int(b), a=float(a)) for r, g, b, a in resolved]
        return [ColorRGB(*(int(c) for c in row)) for row in resolved]

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self._map!r})"
