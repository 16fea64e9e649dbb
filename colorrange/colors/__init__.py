"""
Colorrange Color Classes
========================

The canonical color record and the operations producing new colors from it.

Usage
-----
>>> from colorrange.colors import ColorRGB, blend
>>> magenta = ColorRGB(255, 0, 255)
>>> str(magenta)
'rgb(255, 0, 255)'
>>> magenta.with_alpha(0.4).to_hex_string()
'#ff00ff66'
>>> blend(magenta, ColorRGB(217, 0, 255)).value
(236, 0, 255)

Notes
-----
- Channels are validated, not clamped: out-of-range values raise
  ``ChannelRangeError``.
- ``blend`` drops alpha; use ``with_alpha`` to put one back.
"""

from .color import ColorRGB, to_display_string, to_hex_string, validate_channel, validate_alpha
from .blend import blend

__all__ = [
    "ColorRGB",
    "to_display_string",
    "to_hex_string",
    "validate_channel",
    "validate_alpha",
    "blend",
]
