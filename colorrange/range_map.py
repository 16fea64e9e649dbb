from __future__ import annotations
from typing import Optional, Sequence, Tuple, Union
import numpy as np

from .colors.blend import blend
from .colors.color import ColorRGB
from .conversions.wrapper import to_color
from .errors import ValidationError, alpha_out_of_range
from .types.color_types import ColorInput, Scalar
from .utils import get_dimension


class RangeMap:
    """
    Sorted breakpoints paired positionally with colors.

    ``ranges[i]`` is the exact anchor of ``colors[i]``. Both sequences are
    tuples and the instance is frozen once built.
    """
    __slots__ = ('_colors', '_ranges', '_is_frozen')

    def __setattr__(self, name, value):
        if getattr(self, '_is_frozen', False):
            raise AttributeError(f"{self.__class__.__name__} is immutable; cannot assign to {name}")
        super().__setattr__(name, value)

    def __init__(self, colors: Sequence[ColorRGB], ranges: Sequence[Scalar]) -> None:
        if len(colors) != len(ranges):
            raise ValidationError(
                f"colors and ranges must have the same length, got {len(colors)} and {len(ranges)}."
            )
        if not colors:
            raise ValidationError("A range map needs at least one color.")
        for color in colors:
            if not isinstance(color, ColorRGB):
                raise ValidationError(f"Range map colors must be ColorRGB instances: {color!r}.")
        if any(low > high for low, high in zip(ranges, ranges[1:])):
            raise ValidationError(f"Range map breakpoints must be sorted ascending: {list(ranges)!r}.")
        self._colors: Tuple[ColorRGB, ...] = tuple(colors)
        self._ranges: Tuple[Scalar, ...] = tuple(ranges)
        super().__setattr__('_is_frozen', True)

    @property
    def colors(self) -> Tuple[ColorRGB, ...]:
        return self._colors

    @property
    def ranges(self) -> Tuple[Scalar, ...]:
        return self._ranges

    def __len__(self) -> int:
        return len(self._ranges)

    def __repr__(self) -> str:
        return f"RangeMap(ranges={list(self._ranges)!r}, colors={[str(c) for c in self._colors]!r})"

    def resolve(self, query: Scalar, alpha: Optional[Scalar] = None) -> ColorRGB:
        return resolve(self, query, alpha)

    def resolve_many(self, queries: Union[Sequence[Scalar], np.ndarray], alpha: Optional[Scalar] = None) -> np.ndarray:
        return resolve_many(self, queries, alpha)


def build_range_map(
    colors: Sequence[ColorInput],
    ranges: Sequence[Scalar],
    *,
    paired: bool = False,
) -> RangeMap:
    """
    Normalize ``colors`` and sort ``ranges`` ascending into a ``RangeMap``.

    By default only the ranges are sorted and colors keep their input
    order, so both sequences must already be ordered by range for the
    pairing to hold. With ``paired=True`` each color travels with its
    range through the (stable) sort.
    """
    if get_dimension(colors) != get_dimension(ranges):
        raise ValidationError(
            f"colors and ranges must have the same length, got {len(colors)} and {len(ranges)}."
        )
    normalized = [to_color(c) for c in colors]
    if paired:
        order = sorted(range(len(ranges)), key=lambda i: ranges[i])
        return RangeMap([normalized[i] for i in order], [ranges[i] for i in order])
    return RangeMap(normalized, sorted(ranges))


def _with_alpha(color: ColorRGB, alpha: Optional[Scalar]) -> ColorRGB:
    # a falsy alpha (None or 0) leaves the color untouched
    return color.with_alpha(alpha) if alpha else color


def resolve(range_map: RangeMap, query: Scalar, alpha: Optional[Scalar] = None) -> ColorRGB:
    """
    Color for ``query``, interpolated between the bracketing breakpoints.

    Queries at or beyond either end return the end color. Inside, every
    adjacent pair is examined and the last one that matches wins: an exact
    hit on ``ranges[i]`` gives ``colors[i]``, a strict interior hit blends
    the pair. A truthy ``alpha`` replaces the alpha of the result.
    """
    ranges, colors = range_map.ranges, range_map.colors

    if query <= ranges[0]:
        return _with_alpha(colors[0], alpha)
    if query >= ranges[-1]:
        return _with_alpha(colors[-1], alpha)

    color = colors[0]
    for index in range(len(ranges) - 1):
        low, high = ranges[index], ranges[index + 1]
        if low < query < high:
            ratio = (query - low) / (high - low)
            color = blend(colors[index], colors[index + 1], ratio)
        elif query == low:
            color = colors[index]
    return _with_alpha(color, alpha)


def resolve_many(
    range_map: RangeMap,
    queries: Union[Sequence[Scalar], np.ndarray],
    alpha: Optional[Scalar] = None,
) -> np.ndarray:
    """
    Vectorized ``resolve`` over an array of queries.

    Returns an ``(n, 3)`` int array, or an ``(n, 4)`` float array when a
    truthy ``alpha`` is given. Precedence matches ``resolve``.
    """
    q = np.asarray(queries, dtype=np.float64).ravel()
    ranges = np.asarray(range_map.ranges, dtype=np.float64)
    rgb = np.array([c.rgb for c in range_map.colors], dtype=np.float64)

    out = np.broadcast_to(rgb[0], (q.size, 3)).copy()
    for index in range(len(ranges) - 1):
        low, high = ranges[index], ranges[index + 1]
        interior = (q > low) & (q < high)
        if interior.any():
            ratio = ((q[interior] - low) / (high - low))[:, None]
            mixed = rgb[index] * ratio + rgb[index + 1] * (1 - ratio)
            out[interior] = np.floor(mixed + 0.5)
        out[q == low] = rgb[index]

    # end checks run first in resolve, so they are applied last here
    out[q >= ranges[-1]] = rgb[-1]
    out[q <= ranges[0]] = rgb[0]

    if alpha:
        if not 0 <= alpha <= 1:
            raise alpha_out_of_range(alpha)
        return np.concatenate([out, np.full((q.size, 1), float(alpha))], axis=-1)
    return out.astype(np.int64)
