from __future__ import annotations
from typing import Any, Mapping, Sequence, Tuple, Union
from numpy import ndarray

Scalar = int | float
RGBTuple = Tuple[int, int, int]
RGBATuple = Tuple[int, int, int, float]
ColorValue = Union[RGBTuple, RGBATuple]
RGBMapping = Mapping[str, Any]
ArrayElement = Union[Scalar, str]
ColorArray = Union[Sequence[ArrayElement], ndarray]
ColorInput = Union[RGBMapping, str, ColorArray]
