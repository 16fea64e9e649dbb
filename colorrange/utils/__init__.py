from .dimension import get_dimension
from .num_utils import is_close_to_int, is_real_number

__all__ = ["get_dimension", "is_close_to_int", "is_real_number"]
