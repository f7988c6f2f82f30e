import pytest

from pigmentpoet.color import (
    BLACK,
    HSL,
    RGB,
    WHITE,
    contrast_text_color,
    format_hex,
    hsl_to_rgb,
    lab_distance,
    parse_hex,
    relative_luminance,
    rgb_to_hsl,
    rgb_to_lab,
    rotate_hue,
)
from pigmentpoet.errors import BadHex


def test_parse_hex_with_and_without_prefix():
    assert parse_hex("#336699") == RGB(0x33, 0x66, 0x99)
    assert parse_hex("336699") == RGB(0x33, 0x66, 0x99)
    assert parse_hex("#abcdef") == RGB(0xAB, 0xCD, 0xEF)


@pytest.mark.parametrize("bad", ["", "#", "#12345", "1234567", "#GG0000", "##123456", " 123456"])
def test_parse_hex_rejects_malformed(bad):
    with pytest.raises(BadHex):
        parse_hex(bad)


def test_parse_hex_rejects_non_string():
    with pytest.raises(BadHex):
        parse_hex(0x336699)


def test_format_hex_is_uppercase_with_prefix():
    assert format_hex((10, 171, 255)) == "#0AABFF"
    for c in [(0, 0, 0), (255, 255, 255), (1, 128, 254)]:
        assert parse_hex(format_hex(c)) == c


def test_rgb_to_hsl_primaries_and_gray():
    assert rgb_to_hsl((255, 0, 0)) == HSL(0.0, 100.0, 50.0)
    h, s, l = rgb_to_hsl((0, 255, 0))
    assert h == pytest.approx(120)
    h, s, l = rgb_to_hsl((0, 0, 255))
    assert h == pytest.approx(240)
    h, s, l = rgb_to_hsl((128, 128, 128))
    assert (h, s) == (0.0, 0.0)
    assert l == pytest.approx(50.196, abs=0.01)


def test_rgb_to_hsl_dark_saturated_color():
    # l < 50 uses d / (max + min)
    h, s, l = rgb_to_hsl((0x33, 0x66, 0x99))
    assert h == pytest.approx(210)
    assert s == pytest.approx(50)
    assert l == pytest.approx(40)


def test_hue_stays_below_360():
    h, _, _ = rgb_to_hsl((255, 0, 1))
    assert 0 <= h < 360


@pytest.mark.parametrize(
    "hsl",
    [HSL(0, 100, 50), HSL(210, 50, 40), HSL(359, 80, 30), HSL(45, 80, 60), HSL(300, 65, 30)],
)
def test_hsl_round_trip_within_tolerance(hsl):
    h, s, l = rgb_to_hsl(hsl_to_rgb(hsl))
    assert abs(s - hsl.s) <= 1
    assert abs(l - hsl.l) <= 1
    hue_diff = abs(h - hsl.h) % 360
    assert min(hue_diff, 360 - hue_diff) <= 1


def test_rgb_round_trip_is_stable_after_one_cycle():
    for rgb in [(12, 200, 99), (255, 254, 0), (3, 3, 4), (130, 60, 200)]:
        once = hsl_to_rgb(rgb_to_hsl(rgb))
        assert all(abs(a - b) <= 1 for a, b in zip(once, rgb))
        assert hsl_to_rgb(rgb_to_hsl(once)) == once


def test_hsl_to_rgb_saturates_out_of_range_lightness():
    assert hsl_to_rgb(HSL(200, 60, 126)) == WHITE
    assert hsl_to_rgb(HSL(0, 0, 140)) == WHITE


def test_rotate_hue_wraps_both_directions():
    assert rotate_hue(HSL(10, 50, 50), -30).h == pytest.approx(340)
    assert rotate_hue(HSL(350, 50, 50), 30).h == pytest.approx(20)
    assert rotate_hue(HSL(180, 50, 50), 180).h == pytest.approx(0)


def test_rgb_to_lab_extremes():
    white = rgb_to_lab(WHITE)
    assert white.l == pytest.approx(100, abs=0.01)
    assert abs(white.a) < 0.05 and abs(white.b) < 0.05
    assert rgb_to_lab(BLACK).l == pytest.approx(0, abs=1e-9)
    for c in [(255, 0, 0), (0, 255, 0), (0, 0, 255), (17, 99, 201)]:
        assert 0 <= rgb_to_lab(c).l <= 100


def test_lab_distance_is_euclidean():
    assert lab_distance((0, 0, 0), (3, 4, 0)) == pytest.approx(5)


def test_relative_luminance_bounds():
    assert relative_luminance(WHITE) == pytest.approx(1.0)
    assert relative_luminance(BLACK) == 0


def test_contrast_text_color():
    assert contrast_text_color(WHITE) == BLACK
    assert contrast_text_color((255, 255, 0)) == BLACK
    assert contrast_text_color(BLACK) == WHITE
    assert contrast_text_color((0, 0, 255)) == WHITE
    assert contrast_text_color((128, 128, 128)) == WHITE


def test_light_color_and_combined_overshoot():
    h, s, l = rgb_to_hsl((0xCC, 0xE0, 0xFF))
    assert h == pytest.approx(216.5, abs=0.5)
    assert s == pytest.approx(100)
    assert l == pytest.approx(90)
    assert hsl_to_rgb(HSL(216, 60, 126)) == WHITE
    assert hsl_to_rgb(HSL(0, 100, 50)) == (255, 0, 0)
