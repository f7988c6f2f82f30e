from __future__ import annotations

import enum
import random

from ..color import HSL, format_hex, hsl_to_rgb, parse_hex, rgb_to_hsl, rotate_hue

PALETTE_SIZE = 5


class RuleKind(enum.Enum):
    COMPLEMENTARY = "Complementary"
    TRIADIC = "Triadic"
    ANALOGOUS = "Analogous"
    SPLIT_COMPLEMENTARY = "Split Complementary"
    TETRADIC = "Tetradic"
    MONOCHROMATIC = "Monochromatic"

    @property
    def label(self) -> str:
        return self.value

    @classmethod
    def parse(cls, name: str) -> "RuleKind":
        """Accept ``split-complementary``, ``Split Complementary`` or ``SPLIT_COMPLEMENTARY``."""
        key = name.strip().upper().replace("-", "_").replace(" ", "_")
        try:
            return cls[key]
        except KeyError:
            choices = ", ".join(rule.name.lower().replace("_", "-") for rule in cls)
            raise ValueError(f"unknown palette rule {name!r} (choose from {choices})") from None


def palette_label(rule: RuleKind) -> str:
    return rule.label


def _scaled(hsl: HSL, s: float = 1.0, l: float = 1.0) -> HSL:
    # No clamping: hsl_to_rgb saturates overshoots into pale tints
    return HSL(hsl.h, hsl.s * s, hsl.l * l)


def _complementary(base: HSL) -> list[HSL]:
    complement = rotate_hue(base, 180)
    return [
        _scaled(base, 0.8, 1.2),
        _scaled(complement, 0.8, 1.2),
        _scaled(base, 0.6, 1.4),
        complement,
    ]


def _triadic(base: HSL) -> list[HSL]:
    return [rotate_hue(base, deg) for deg in (60, 120, 180, 240)]


def _analogous(base: HSL) -> list[HSL]:
    return [rotate_hue(base, deg) for deg in (-15, -30, 15, 30)]


def _split_complementary(base: HSL) -> list[HSL]:
    complement = rotate_hue(base, 180)
    return [
        _scaled(base, 0.8, 1.2),
        rotate_hue(complement, -30),
        rotate_hue(complement, 30),
        _scaled(complement, 0.8, 1.2),
    ]


def _tetradic(base: HSL) -> list[HSL]:
    return [
        rotate_hue(base, 90),
        rotate_hue(base, 180),
        rotate_hue(base, 270),
        _scaled(base, 0.8, 1.2),
    ]


def _monochromatic(base: HSL) -> list[HSL]:
    h, s, l = base
    return [
        HSL(h, s * 0.8, min(100, l * 1.2)),
        HSL(h, s * 0.6, min(100, l * 1.4)),
        HSL(h, min(100, s * 1.2), max(0, l * 0.8)),
        HSL(h, min(100, s * 1.4), max(0, l * 0.6)),
    ]


_RULES = {
    RuleKind.COMPLEMENTARY: _complementary,
    RuleKind.TRIADIC: _triadic,
    RuleKind.ANALOGOUS: _analogous,
    RuleKind.SPLIT_COMPLEMENTARY: _split_complementary,
    RuleKind.TETRADIC: _tetradic,
    RuleKind.MONOCHROMATIC: _monochromatic,
}


def generate_palette(base_hex: str, rule: RuleKind, variations: int = PALETTE_SIZE):
    """Build a five-color harmonic palette around ``base_hex``.

    The base color itself is always first, exactly as parsed. ``variations``
    is accepted for call-site compatibility; every rule yields five colors.
    """
    base_rgb = parse_hex(base_hex)
    base_hsl = rgb_to_hsl(base_rgb)
    return [base_rgb] + [hsl_to_rgb(hsl) for hsl in _RULES[rule](base_hsl)]


def random_base_color(rng: random.Random) -> str:
    return format_hex((rng.randrange(256), rng.randrange(256), rng.randrange(256)))


def random_rule(rng: random.Random) -> RuleKind:
    return rng.choice(list(RuleKind))
