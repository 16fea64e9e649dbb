from typing import Any
from collections.abc import Sized
import numpy as np


def get_dimension(element: Any) -> int:
    if element is None:
        return 0
    if isinstance(element, np.ndarray):
        return element.shape[0] if element.ndim else 1
    if isinstance(element, Sized):
        return len(element)
    return 1
