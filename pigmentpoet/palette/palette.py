from __future__ import annotations

import random
from dataclasses import dataclass
from typing import Optional

from ..color import RGB, format_hex
from ..errors import BadHex
from ..imaging import to_jpeg
from ..render import PaletteImageConfig, PaletteRenderer, render
from .extract import extract_palette
from .harmony import RuleKind, generate_palette, random_base_color, random_rule

UNKNOWN_NAME = "Unknown"
EXTRACTED_TITLE = "Generated palette from image"


@dataclass(frozen=True)
class Palette:
    """Colors plus the presentation data that travels with them."""

    colors: tuple[RGB, ...]
    names: tuple[str, ...]
    hex_codes: tuple[str, ...]
    rule: Optional[RuleKind] = None

    @property
    def label(self) -> Optional[str]:
        return self.rule.label if self.rule is not None else None

    @classmethod
    def from_colors(cls, colors, matcher, rule: Optional[RuleKind] = None) -> "Palette":
        colors = tuple(RGB(*c) for c in colors)
        hex_codes = tuple(format_hex(c) for c in colors)
        return cls(
            colors=colors,
            names=tuple(_name_for(matcher, h) for h in hex_codes),
            hex_codes=hex_codes,
            rule=rule,
        )

    def to_image(
        self,
        show_hex: bool = True,
        show_names: bool = True,
        source=None,
        renderer: PaletteRenderer | None = None,
        cancel=None,
    ) -> bytes:
        """Render the palette and encode it as JPEG (quality 85)."""
        config = PaletteImageConfig(
            colors=self.colors,
            hex_codes=self.hex_codes,
            names=self.names,
            source=source,
            show_hex=show_hex,
            show_names=show_names,
        )
        return to_jpeg(render(config, renderer=renderer, cancel=cancel))

    def caption(self, title: str | None = None) -> str:
        heading = title or self.label or EXTRACTED_TITLE
        lines = [f"🎨 {heading}", ""]
        lines += [f"{name} ({hex_code})" for name, hex_code in zip(self.names, self.hex_codes)]
        return "\n".join(lines) + "\n"

    def to_dict(self) -> dict:
        return {
            "colors": list(self.hex_codes),
            "names": list(self.names),
            "rule": self.rule.name if self.rule is not None else None,
            "label": self.label,
        }


def _name_for(matcher, hex_code: str) -> str:
    try:
        return matcher.nearest(hex_code).name
    except BadHex:
        return UNKNOWN_NAME


def palette_from_image(image, matcher, n: int = 5, cancel=None) -> Palette:
    return Palette.from_colors(extract_palette(image, n, cancel=cancel), matcher)


def palette_from_rule(base_hex: str, rule: RuleKind, matcher) -> Palette:
    return Palette.from_colors(generate_palette(base_hex, rule), matcher, rule=rule)


def random_palette(matcher, rng: random.Random | None = None) -> Palette:
    rng = rng or random.Random()
    return palette_from_rule(random_base_color(rng), random_rule(rng), matcher)
