from color_model import BLACK, RGB, WHITE, rgb_to_hsl
from samples import ColorInformation, Sample
from text_contrast import BLACK_TEXT, WHITE_TEXT


def test_color_information_caches_hsl():
    info = ColorInformation(RGB(0.2, 0.4, 0.6), 12)
    assert info.hsl == rgb_to_hsl(RGB(0.2, 0.4, 0.6))


def test_color_information_equality_includes_population():
    assert ColorInformation(WHITE, 5) == ColorInformation(WHITE, 5)
    assert ColorInformation(WHITE, 5) != ColorInformation(WHITE, 6)


def test_sample_equality_uses_color_and_population():
    assert Sample.create(RGB(0.3, 0.5, 0.1), 10) == Sample.create(RGB(0.3, 0.5, 0.1), 10)
    assert Sample.create(RGB(0.3, 0.5, 0.1), 10) != Sample.create(RGB(0.3, 0.5, 0.1), 11)
    assert Sample.create(RGB(0.3, 0.5, 0.1), 10) != Sample.create(RGB(0.3, 0.5, 0.2), 10)


def test_sample_text_colors():
    on_black = Sample.create(BLACK, 1)
    assert on_black.title_text_color.rgb == WHITE_TEXT.rgb
    assert on_black.body_text_color == WHITE_TEXT.with_alpha(0.15625)

    on_white = Sample.create(WHITE, 1)
    assert on_white.body_text_color == BLACK_TEXT.with_alpha(0.75)


def test_sample_to_dict():
    data = Sample.create(WHITE, 3).to_dict()
    assert data['hex'] == '#ffffff'
    assert data['rgb'] == [1.0, 1.0, 1.0]
    assert data['population'] == 3
    assert data['body_text'] == '#000000bf'
