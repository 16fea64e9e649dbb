from .temperature import DEFAULT_COLORS, DEFAULT_TEMPERATURES, temperature_color_range

__all__ = ["DEFAULT_COLORS", "DEFAULT_TEMPERATURES", "temperature_color_range"]
