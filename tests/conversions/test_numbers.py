from colorrange.conversions.numbers import (
    blend_channel,
    channel_to_hex,
    hex_to_channel,
    round_half_up,
    parse_leading_int,
    format_number,
)


def test_blend_channel_weights_first_channel():
    assert blend_channel(255, 217, 0.5) == 236.0
    assert blend_channel(200, 100, 1) == 200
    assert blend_channel(200, 100, 0) == 100
    assert blend_channel(200, 100, 0.25) == 125.0


def test_blend_channel_does_not_clamp_ratio():
    assert blend_channel(200, 100, 2) == 300
    assert blend_channel(200, 100, -1) == 0


def test_channel_to_hex():
    assert channel_to_hex(255) == "ff"
    assert channel_to_hex(0) == "00"
    assert channel_to_hex(10) == "0a"
    assert channel_to_hex(171) == "ab"


def test_hex_to_channel():
    assert hex_to_channel("ff") == 255
    assert hex_to_channel("FF") == 255
    assert hex_to_channel("0a") == 10
    for channel in (0, 1, 15, 16, 128, 254, 255):
        assert hex_to_channel(channel_to_hex(channel)) == channel


def test_round_half_up():
    assert round_half_up(198.5) == 199
    assert round_half_up(22.5) == 23
    assert round_half_up(0.5) == 1
    assert round_half_up(236.0) == 236
    assert round_half_up(127.49) == 127


def test_parse_leading_int():
    assert parse_leading_int("255") == 255
    assert parse_leading_int(" 7") == 7
    assert parse_leading_int("12px") == 12
    assert parse_leading_int("-3") == -3
    assert parse_leading_int("Hello") is None
    assert parse_leading_int("") is None


def test_format_number():
    assert format_number(0.4) == "0.4"
    assert format_number(1.0) == "1"
    assert format_number(0) == "0"
    assert format_number(0.25) == "0.25"
