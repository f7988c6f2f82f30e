import io
import json

import pytest
from PIL import Image

from pigmentpoet.matcher import new_matcher

SMALL_DICTIONARY = [
    {"hex": "#FF0000", "name": "Red"},
    {"hex": "#00FF00", "name": "Green"},
    {"hex": "#0000FF", "name": "Blue"},
    {"hex": "#000000", "name": "Black"},
    {"hex": "#FFFFFF", "name": "White"},
    {"hex": "#808080", "name": "Gray"},
]


@pytest.fixture
def small_matcher():
    return new_matcher(json.dumps(SMALL_DICTIONARY).encode())


def solid_image(color, size=(16, 16), mode="RGB"):
    return Image.new(mode, size, color)


def halves_image(left, right, size=(16, 16)):
    """Left half ``left``, right half ``right``."""
    w, h = size
    img = Image.new("RGB", size, left)
    img.paste(Image.new("RGB", (w // 2, h), right), (w // 2, 0))
    return img


def encode(image, fmt="PNG"):
    buf = io.BytesIO()
    image.save(buf, format=fmt)
    return buf.getvalue()


@pytest.fixture
def red_blue_png():
    return encode(halves_image((255, 0, 0), (0, 0, 255), size=(64, 64)))
