import threading
from itertools import combinations

import pytest
from PIL import Image

from pigmentpoet.color import RGB, rgb_distance
from pigmentpoet.errors import Cancelled
from pigmentpoet.palette.extract import (
    MIN_DISTANCE,
    clamp_count,
    extract_palette,
    extract_palette_kmeans,
    filter_similar,
)

from conftest import halves_image, solid_image

STRIPES = [
    (230, 25, 75),
    (60, 180, 75),
    (255, 225, 25),
    (0, 130, 200),
    (245, 130, 48),
    (145, 30, 180),
    (70, 240, 240),
    (240, 50, 230),
]


def stripes_image(colors, stripe_width=8, height=32):
    img = Image.new("RGB", (stripe_width * len(colors), height))
    for i, color in enumerate(colors):
        img.paste(Image.new("RGB", (stripe_width, height), color), (i * stripe_width, 0))
    return img


def test_solid_image_yields_single_color():
    assert extract_palette(solid_image((0x80, 0x80, 0x80)), 5) == [RGB(0x80, 0x80, 0x80)]


def test_two_halves_yield_two_colors():
    colors = extract_palette(halves_image((255, 0, 0), (0, 0, 255)), 5)
    assert len(colors) == 2
    assert any(rgb_distance(c, (255, 0, 0)) <= 10 for c in colors)
    assert any(rgb_distance(c, (0, 0, 255)) <= 10 for c in colors)


def test_fully_transparent_image_is_empty():
    img = solid_image((255, 0, 0, 0), mode="RGBA")
    assert extract_palette(img, 5) == []


def test_transparent_pixels_are_ignored():
    img = Image.new("RGBA", (16, 16), (255, 0, 0, 0))
    img.paste(Image.new("RGBA", (8, 16), (0, 0, 255, 255)), (8, 0))
    assert extract_palette(img, 5) == [RGB(0, 0, 255)]


def test_result_respects_count_and_spacing():
    colors = extract_palette(stripes_image(STRIPES), 3)
    assert 1 <= len(colors) <= 3
    for a, b in combinations(colors, 2):
        assert rgb_distance(a, b) >= MIN_DISTANCE


def test_many_regions_fill_requested_count():
    colors = extract_palette(stripes_image(STRIPES), 8)
    assert len(colors) >= 5
    for a, b in combinations(colors, 2):
        assert rgb_distance(a, b) >= MIN_DISTANCE


def test_fewer_samples_than_requested_is_not_padded():
    img = Image.new("RGB", (2, 1))
    img.putpixel((0, 0), (255, 255, 255))
    img.putpixel((1, 0), (0, 0, 0))
    colors = extract_palette(img, 10)
    assert sorted(colors) == [RGB(0, 0, 0), RGB(255, 255, 255)]


def test_extraction_is_deterministic():
    img = stripes_image(STRIPES)
    assert extract_palette(img, 5) == extract_palette(img, 5)


def test_count_is_clamped():
    assert clamp_count(0) == 2
    assert clamp_count(1000) == 256
    assert clamp_count(7) == 7


def test_filter_similar_keeps_first_of_close_pair():
    kept = filter_similar([(0, 0, 0), (10, 10, 10), (200, 200, 200)])
    assert kept == [(0, 0, 0), (200, 200, 200)]


def test_cancelled_extraction_raises():
    cancel = threading.Event()
    cancel.set()
    with pytest.raises(Cancelled):
        extract_palette(stripes_image(STRIPES), 5, cancel=cancel)


def test_kmeans_finds_both_halves():
    colors = extract_palette_kmeans(halves_image((255, 0, 0), (0, 0, 255), size=(40, 40)), 2)
    assert sorted(colors) == [RGB(0, 0, 255), RGB(255, 0, 0)]


def test_kmeans_is_repeatable_with_seed():
    img = stripes_image(STRIPES)
    assert extract_palette_kmeans(img, 4, seed=7) == extract_palette_kmeans(img, 4, seed=7)


def test_kmeans_caps_clusters_at_distinct_colors():
    assert extract_palette_kmeans(solid_image((10, 20, 30)), 5) == [RGB(10, 20, 30)]


def test_kmeans_empty_image():
    assert extract_palette_kmeans(solid_image((0, 0, 0, 0), mode="RGBA"), 5) == []
