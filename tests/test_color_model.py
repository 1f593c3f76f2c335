import pytest

from color_model import BLACK, HSL, RED, RGB, RGBA, WHITE, hsl_to_rgb, rgb_to_hsl


def test_rgb_to_hsl_deep_purple():
    hsl = rgb_to_hsl(RGB.from_hex('#311B92'))
    assert hsl.hue == pytest.approx(251.09 / 360, abs=0.005)
    assert hsl.saturation == pytest.approx(0.687, abs=0.005)
    assert hsl.luminance == pytest.approx(0.339, abs=0.005)


def test_rgb_to_hsl_achromatic_has_zero_hue_and_saturation():
    for color in (BLACK, WHITE, RGB(0.5, 0.5, 0.5)):
        hsl = rgb_to_hsl(color)
        assert hsl.hue == 0.0
        assert hsl.saturation == 0.0
        assert hsl.luminance == color.red


def test_rgb_to_hsl_primary_red():
    assert rgb_to_hsl(RED) == HSL(0.0, 1.0, 0.5)


def test_hsl_to_rgb_zero_saturation_is_gray():
    assert hsl_to_rgb(HSL(0.7, 0.0, 0.4)) == RGB(0.4, 0.4, 0.4)


def test_hsl_round_trip():
    for color in (RGB(0.2, 0.4, 0.6), RGB(0.9, 0.1, 0.3), RGB(0.05, 0.7, 0.2), RGB.from_hex('#311B92')):
        back = hsl_to_rgb(rgb_to_hsl(color))
        assert back.as_tuple() == pytest.approx(color.as_tuple(), abs=1e-9)


def test_rgb_equality_and_hash_use_exact_channels():
    assert RGB(0.1, 0.2, 0.3) == RGB(0.1, 0.2, 0.3)
    assert hash(RGB(0.1, 0.2, 0.3)) == hash(RGB(0.1, 0.2, 0.3))
    assert RGB(0.1, 0.2, 0.3) != RGB(0.1, 0.2, 0.3000001)
    assert len({RGB.from_bytes(10, 20, 30), RGB.from_bytes(10, 20, 30)}) == 1


def test_hex_formatting():
    assert RGB.from_hex('#311b92').to_hex() == '#311b92'
    assert WHITE.to_hex() == '#ffffff'
    assert RGBA(0.0, 0.0, 0.0, 0.5).to_hex() == '#00000080'


def test_from_hex_rejects_bad_length():
    with pytest.raises(ValueError):
        RGB.from_hex('#fff')


def test_rgba_opacity():
    assert RGBA.from_rgb(RED).is_opaque
    assert not RGBA.from_rgb(RED, 0.5).is_opaque
    assert RGBA.from_rgb(RED).with_alpha(0.25).alpha == 0.25
