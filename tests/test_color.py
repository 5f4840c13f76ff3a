import dataclasses

import pytest
from hypothesis import given, strategies as st

from perceptual import Color, InvalidFormatError, OutOfRangeError, PerceptualError
from perceptual.color import LINEAR_LUT, linear_to_srgb, srgb_to_linear

channels = st.integers(min_value=0, max_value=255)


def test_from_hex_long_form():
    assert Color.from_hex("#3B82F6") == Color(59, 130, 246)


def test_from_hex_short_form_duplicates_digits():
    assert Color.from_hex("#abc") == Color(0xAA, 0xBB, 0xCC)
    assert Color.from_hex("ABC") == Color(0xAA, 0xBB, 0xCC)


def test_to_hex_is_lowercase():
    assert Color(59, 130, 246).to_hex() == "#3b82f6"
    assert str(Color(255, 0, 0)) == "#ff0000"


@pytest.mark.parametrize(
    "text",
    ["", "#", "#12", "#1234", "#12345", "#1234567", "#ggg", "##fff", " #fff", "#fff\n", "blue"],
)
def test_from_hex_rejects_malformed(text):
    with pytest.raises(InvalidFormatError):
        Color.from_hex(text)


def test_from_hex_rejects_non_string():
    with pytest.raises(InvalidFormatError):
        Color.from_hex(0xFFFFFF)  # type: ignore[arg-type]


@pytest.mark.parametrize("channels_", [(256, 0, 0), (0, -1, 0), (0, 0, 1.5), (True, 0, 0)])
def test_channel_validation(channels_):
    with pytest.raises(OutOfRangeError):
        Color(*channels_)


def test_errors_are_value_errors():
    # callers guarding hex parsing with ValueError keep working
    with pytest.raises(ValueError):
        Color.from_hex("nope")
    assert issubclass(OutOfRangeError, PerceptualError)


def test_color_is_frozen():
    c = Color(1, 2, 3)
    with pytest.raises(dataclasses.FrozenInstanceError):
        c.r = 4  # type: ignore[misc]


def test_as_color_accepts_common_inputs():
    expected = Color(255, 255, 255)
    assert Color.as_color(expected) is expected
    assert Color.as_color("#fff") == expected
    assert Color.as_color((255, 255, 255)) == expected
    assert Color.as_color([255, 255, 255]) == expected
    with pytest.raises(InvalidFormatError):
        Color.as_color((1, 2))  # type: ignore[arg-type]


@given(channels, channels, channels)
def test_hex_round_trip(r, g, b):
    c = Color(r, g, b)
    assert Color.from_hex(c.to_hex()) == c


def test_transfer_endpoints():
    assert srgb_to_linear(0.0) == 0.0
    assert srgb_to_linear(1.0) == pytest.approx(1.0)
    assert linear_to_srgb(1.0) == pytest.approx(1.0)
    assert LINEAR_LUT[0] == 0.0
    assert len(LINEAR_LUT) == 256


@given(st.floats(min_value=0.0, max_value=1.0))
def test_transfer_functions_invert(v):
    assert linear_to_srgb(srgb_to_linear(v)) == pytest.approx(v, abs=1e-6)


def test_linear_uses_lookup_table():
    c = Color(10, 128, 250)
    assert c.linear() == (LINEAR_LUT[10], LINEAR_LUT[128], LINEAR_LUT[250])
    assert c.to_tuple() == (10, 128, 250)
