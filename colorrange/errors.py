"""Errors raised while parsing and validating colors."""


class ColorError(ValueError):
    """Base class for every error raised by colorrange."""


class ValidationError(ColorError):
    """Input does not have an accepted color shape or cannot be parsed."""


class ChannelRangeError(ColorError):
    """A channel or alpha value lies outside its legal bound."""


RangeError = ChannelRangeError


def rgb_out_of_range(value) -> ChannelRangeError:
    return ChannelRangeError(f"Value out of range for an RGB value (0-255): {value}.")


def alpha_out_of_range(value) -> ChannelRangeError:
    return ChannelRangeError(f"Value out of range for an alpha value (0-1): {value}.")
