import numpy as np
import pytest

from colorrange.colors.color import ColorRGB
from colorrange.conversions.parsers import (
    string_to_color,
    hex_to_color,
    array_to_color,
    mapping_to_color,
)
from colorrange.errors import ValidationError, ChannelRangeError, RangeError
from ..samples import samples_rgb_hex


def test_string_to_color():
    assert string_to_color("rgb(255, 0, 128)") == ColorRGB(255, 0, 128)
    assert string_to_color("rgb(0/0/0)") == ColorRGB(0, 0, 0)
    assert string_to_color("(255 - 255 - 255)") == ColorRGB(255, 255, 255)
    assert string_to_color("rgb255 - 0/255") == ColorRGB(255, 0, 255)


def test_string_to_color_keeps_channel_order():
    color = string_to_color("10, 20, 30")
    assert (color.r, color.g, color.b) == (10, 20, 30)


def test_string_to_color_alpha():
    color = string_to_color("rgba(255, 0, 255, 0.4)")
    assert color.rgb == (255, 0, 255)
    assert color.a == pytest.approx(0.4)
    assert string_to_color("rgba(1, 2, 3, .45)").a == pytest.approx(0.45)
    assert string_to_color("1, 2, 3, 1").a == 1.0
    assert string_to_color("1, 2, 3, 0").a == 0.0


def test_string_to_color_alpha_out_of_range():
    with pytest.raises(ChannelRangeError, match="alpha.*1.5"):
        string_to_color("rgba(255, 0, 255, 1.5)")


def test_string_to_color_invalid():
    with pytest.raises(ValidationError, match="Hello World"):
        string_to_color("Hello World")
    with pytest.raises(ValidationError):
        string_to_color(123)  # type: ignore


def test_hex_to_color():
    for rgb, hex_value in samples_rgb_hex.items():
        assert hex_to_color(hex_value) == ColorRGB(*rgb)
    assert hex_to_color("#ABCDEF") == ColorRGB(171, 205, 239)


def test_hex_to_color_alpha_byte():
    color = hex_to_color("#ff00ff66")
    assert color.rgb == (255, 0, 255)
    assert color.a == pytest.approx(102 / 255)
    assert hex_to_color("#000000ff").a == 1.0
    assert hex_to_color("#00000000").a == 0.0


def test_hex_to_color_invalid():
    with pytest.raises(ValidationError, match="#abdxyz"):
        hex_to_color("#abdxyz")
    with pytest.raises(ValidationError):
        hex_to_color("rgb(1, 2, 3)")


def test_array_to_color():
    assert array_to_color([255, 0, 255]) == ColorRGB(255, 0, 255)
    assert array_to_color(("255", "0", "255")) == ColorRGB(255, 0, 255)
    assert array_to_color(["12px", 0, 0]) == ColorRGB(12, 0, 0)
    assert array_to_color(np.array([1, 2, 3], dtype=np.uint8)) == ColorRGB(1, 2, 3)
    assert array_to_color([1.0, 2.0, 3.0]) == ColorRGB(1, 2, 3)


def test_array_to_color_alpha():
    color = array_to_color([255, 0, 255, 0.4])
    assert color.a == pytest.approx(0.4)
    assert array_to_color(["255", "0", "255", "0.5"]).a == 0.5


def test_array_to_color_out_of_range():
    with pytest.raises(RangeError, match="1255"):
        array_to_color([1255, 255, 255])
    with pytest.raises(ChannelRangeError, match="-1"):
        array_to_color([0, -1, 0])
    # four elements are accepted, the fourth one being alpha
    with pytest.raises(ChannelRangeError, match="alpha.*34"):
        array_to_color([255, 255, 255, 34])


def test_array_to_color_invalid_element():
    with pytest.raises(ValidationError, match="Hello"):
        array_to_color(["Hello", "255", "255"])
    with pytest.raises(ValidationError, match="None"):
        array_to_color([None, 0, 0])
    with pytest.raises(ValidationError, match="abc"):
        array_to_color([0, 0, 0, "abc"])
    with pytest.raises(ValidationError, match="integers"):
        array_to_color([12.5, 0, 0])


def test_array_to_color_wrong_length():
    with pytest.raises(ValidationError, match="length 3 or 4"):
        array_to_color([255, 255])
    with pytest.raises(ValidationError, match="length 3 or 4"):
        array_to_color([255, 255, 255, 1, 1])
    with pytest.raises(ValidationError, match="1-dimensional"):
        array_to_color(np.zeros((2, 3)))


def test_mapping_to_color():
    assert mapping_to_color({"r": 1, "g": 2, "b": 3}) == ColorRGB(1, 2, 3)
    assert mapping_to_color({"r": 1, "g": 2, "b": 3, "a": 0.5}).a == 0.5
    with pytest.raises(ChannelRangeError, match="alpha"):
        mapping_to_color({"r": 1, "g": 2, "b": 3, "a": 2})
    with pytest.raises(ChannelRangeError, match="300"):
        mapping_to_color({"r": 300, "g": 2, "b": 3})


def test_mapping_to_color_wrong_shape():
    with pytest.raises(ValidationError, match="'r': 1"):
        mapping_to_color({"r": 1})
    with pytest.raises(ValidationError, match="mapping"):
        mapping_to_color([1, 2, 3])  # type: ignore
    with pytest.raises(ValidationError, match="mapping"):
        mapping_to_color({"r": "1", "g": "2", "b": "3"})


def test_mapping_to_color_float32_alpha():
    color = mapping_to_color({"r": 1, "g": 2, "b": 3, "a": np.float32(0.4)})
    assert color.a == 0.4
    assert str(color) == "rgb(1, 2, 3, 0.4)"
