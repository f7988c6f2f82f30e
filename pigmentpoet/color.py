import colorsys
import math
import re
from collections import namedtuple

import numpy as np

from .errors import BadHex

RGB = namedtuple("RGB", ["r", "g", "b"])
HSL = namedtuple("HSL", ["h", "s", "l"])
LAB = namedtuple("LAB", ["l", "a", "b"])

BLACK = RGB(0, 0, 0)
WHITE = RGB(255, 255, 255)

# D65 reference white
XN, YN, ZN = 0.95047, 1.0, 1.08883
LAB_EPSILON = 0.008856
LAB_KAPPA = 903.3

_HEX_RE = re.compile(r"^[0-9A-Fa-f]{6}$")


def parse_hex(hex_color):
    """Parse ``RRGGBB`` or ``#RRGGBB`` into an RGB tuple."""
    if not isinstance(hex_color, str):
        raise BadHex(f"parse hex: expected a string, got {type(hex_color).__name__}")
    digits = hex_color[1:] if hex_color.startswith("#") else hex_color
    if not _HEX_RE.match(digits):
        raise BadHex(f"parse hex: {hex_color!r} is not six hex digits")
    return RGB(int(digits[0:2], 16), int(digits[2:4], 16), int(digits[4:6], 16))


def format_hex(rgb):
    r, g, b = rgb
    return f"#{r:02X}{g:02X}{b:02X}"


def clamp_channel(value):
    return max(0, min(255, value))


def rgb_to_hsl(rgb):
    """Convert RGB (0-255) to HSL with H in degrees and S/L in percent."""
    r, g, b = (c / 255 for c in rgb)
    h, l, s = colorsys.rgb_to_hls(r, g, b)
    return HSL(h * 360, s * 100, l * 100)


def _to_byte(value):
    # Round half up, then saturate; out-of-range S/L land here on purpose.
    return clamp_channel(int(math.floor(value * 255 + 0.5)))


def hsl_to_rgb(hsl):
    """Convert HSL back to RGB, rounding each channel to the nearest integer.

    S and L are not clamped first, so values above 100 produce saturated
    channels rather than an error.
    """
    h, s, l = hsl[0] / 360, hsl[1] / 100, hsl[2] / 100
    r, g, b = colorsys.hls_to_rgb(h, l, s)
    return RGB(_to_byte(r), _to_byte(g), _to_byte(b))


def rotate_hue(hsl, degrees):
    h = (hsl[0] + degrees) % 360
    if h < 0:
        h += 360
    if h >= 360:
        h -= 360
    return HSL(h, hsl[1], hsl[2])


def rgb_array_to_lab(rgb):
    """Convert an (N, 3) RGB array (0-255) to L*a*b* under D65."""
    rgb_norm = np.asarray(rgb, dtype=np.float64).reshape(-1, 3) / 255.0

    # sRGB gamma decode
    mask = rgb_norm > 0.04045
    linear = np.where(mask, ((rgb_norm + 0.055) / 1.055) ** 2.4, rgb_norm / 12.92)

    r, g, b = linear[:, 0], linear[:, 1], linear[:, 2]
    x = (r * 0.4124564 + g * 0.3575761 + b * 0.1804375) / XN
    y = (r * 0.2126729 + g * 0.7151522 + b * 0.0721750) / YN
    z = (r * 0.0193339 + g * 0.1191920 + b * 0.9503041) / ZN

    fx = np.where(x > LAB_EPSILON, np.cbrt(x), (LAB_KAPPA * x + 16) / 116)
    fy = np.where(y > LAB_EPSILON, np.cbrt(y), (LAB_KAPPA * y + 16) / 116)
    fz = np.where(z > LAB_EPSILON, np.cbrt(z), (LAB_KAPPA * z + 16) / 116)

    return np.column_stack([116 * fy - 16, 500 * (fx - fy), 200 * (fy - fz)])


def rgb_to_lab(rgb):
    L, a, b = rgb_array_to_lab([tuple(rgb)])[0]
    return LAB(float(L), float(a), float(b))


def lab_distance(lab1, lab2):
    return math.sqrt(sum((x - y) ** 2 for x, y in zip(lab1, lab2)))


def rgb_distance(c1, c2):
    return math.sqrt(sum((int(x) - int(y)) ** 2 for x, y in zip(c1, c2)))


def relative_luminance(rgb):
    """Approximate luminance with a flat 2.2 gamma.

    Only used to pick label text color; deliberately not the WCAG formula.
    """
    r, g, b = (c / 255 for c in rgb)
    return 0.2126 * r**2.2 + 0.7152 * g**2.2 + 0.0722 * b**2.2


def contrast_text_color(rgb):
    """Black text on light swatches, white text on dark ones."""
    return BLACK if relative_luminance(rgb) > 0.5 else WHITE
