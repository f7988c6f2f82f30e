"""
Palette image composition.

Layout: a 1400x1400 white canvas. With a source photo the photo covers the top
three quarters and the swatches fill the bottom quarter; otherwise swatches
span the full height. Each swatch may carry its hex code (bold) and the
wrapped color name (regular), in black or white depending on the swatch.
"""
from __future__ import annotations

import io
from dataclasses import dataclass, field
from functools import lru_cache
from typing import Any, Sequence

from PIL import Image, ImageDraw, ImageFont, ImageOps

from . import assets
from .color import contrast_text_color, format_hex
from .errors import AssetError, EmptyPalette, check_cancelled
from .imaging import open_image

CANVAS_SIZE = 1400
SOURCE_FRACTION = 0.75
BASE_FONT_SIZE = 42
MIN_FONT_SIZE = 24
HEX_POSITION = 0.33  # baseline, as a fraction of swatch height
NAME_GAP = 1.4  # hex baseline to first name line, in font sizes
LINE_HEIGHT = 1.2
NAME_WIDTH = 0.9  # of the swatch width
SPACE_SCALE = 0.8


@dataclass(frozen=True)
class FontPair:
    regular: bytes
    bold: bytes


@dataclass
class PaletteImageConfig:
    colors: Sequence[Any]
    hex_codes: Sequence[str] = field(default_factory=list)
    names: Sequence[str] = field(default_factory=list)
    source: Any = None  # PIL image, encoded bytes or a path
    show_hex: bool = True
    show_names: bool = True


def swatch_font_size(n_colors: int) -> int:
    if n_colors <= 5:
        return BASE_FONT_SIZE
    return max(MIN_FONT_SIZE, BASE_FONT_SIZE * 5 // n_colors)


def _load_face(data: bytes, size: int, label: str) -> ImageFont.FreeTypeFont:
    if not data:
        raise AssetError(f"load {label} font: no font data")
    try:
        return ImageFont.truetype(io.BytesIO(data), size)
    except OSError as exc:
        raise AssetError(f"load {label} font: {exc}") from exc


def wrap_text(text: str, font: ImageFont.FreeTypeFont, max_width: float) -> list[str]:
    """Greedy word wrap, measuring spaces at 80% width for tighter lines."""
    words = text.split()
    if not words:
        return []

    space_width = font.getlength(" ") * SPACE_SCALE
    lines = []
    current = [words[0]]
    current_width = font.getlength(words[0])

    for word in words[1:]:
        word_width = font.getlength(word)
        new_width = current_width + space_width + word_width
        if new_width <= max_width:
            current.append(word)
            current_width = new_width
        else:
            lines.append(" ".join(current))
            current = [word]
            current_width = word_width

    lines.append(" ".join(current))
    return lines


class PaletteRenderer:
    """Draws palette images with one regular/bold font pair.

    Font data is checked on construction; faces are created per call, so a
    renderer can be shared by concurrent callers.
    """

    def __init__(self, fonts: FontPair) -> None:
        _load_face(fonts.regular, BASE_FONT_SIZE, "regular")
        _load_face(fonts.bold, BASE_FONT_SIZE, "bold")
        self.fonts = fonts

    def render(self, config: PaletteImageConfig, cancel=None) -> Image.Image:
        colors = [tuple(c) for c in config.colors]
        if not colors:
            raise EmptyPalette("render palette: no colors provided")
        hex_codes = list(config.hex_codes) or [format_hex(c) for c in colors]
        if len(hex_codes) != len(colors):
            raise ValueError(
                f"render palette: {len(hex_codes)} hex codes for {len(colors)} colors"
            )

        font_size = swatch_font_size(len(colors))
        regular = _load_face(self.fonts.regular, font_size, "regular")
        bold = _load_face(self.fonts.bold, font_size, "bold")
        check_cancelled(cancel, "font loading")

        canvas = Image.new("RGB", (CANVAS_SIZE, CANVAS_SIZE), "white")
        draw = ImageDraw.Draw(canvas)

        if config.source is not None:
            self._draw_source(canvas, config.source)
            check_cancelled(cancel, "source drawing")
            bar_height = CANVAS_SIZE * (1 - SOURCE_FRACTION)
        else:
            bar_height = float(CANVAS_SIZE)
        start_y = CANVAS_SIZE - bar_height
        bar_width = CANVAS_SIZE / len(colors)

        for i, color in enumerate(colors):
            check_cancelled(cancel, "swatch drawing")
            x = i * bar_width
            # Sub-pixel swatches still cover one column
            x0 = round(x)
            x1 = max(x0, round(x + bar_width) - 1)
            draw.rectangle(
                [x0, round(start_y), x1, CANVAS_SIZE - 1],
                fill=color,
            )
            fill = tuple(contrast_text_color(color))

            hex_y = start_y + bar_height * HEX_POSITION
            if config.show_hex:
                text = hex_codes[i].removeprefix("#").upper()
                width = bold.getlength(text)
                draw.text((x + (bar_width - width) / 2, hex_y), text, font=bold, fill=fill, anchor="ls")

            if config.show_names and i < len(config.names):
                y = hex_y + font_size * NAME_GAP
                for line in wrap_text(config.names[i], regular, bar_width * NAME_WIDTH):
                    width = regular.getlength(line)
                    draw.text((x + (bar_width - width) / 2, y), line, font=regular, fill=fill, anchor="ls")
                    y += font_size * LINE_HEIGHT

        return canvas

    def _draw_source(self, canvas: Image.Image, source) -> None:
        # Cover fit: scale to fill the photo area, crop the centered overflow
        image = open_image(source)
        area = (CANVAS_SIZE, int(CANVAS_SIZE * SOURCE_FRACTION))
        canvas.paste(ImageOps.fit(image, area, method=Image.LANCZOS, centering=(0.5, 0.5)), (0, 0))


@lru_cache(maxsize=1)
def load_default_fonts() -> FontPair:
    regular, bold = assets.font_bytes()
    return FontPair(regular=regular, bold=bold)


@lru_cache(maxsize=1)
def default_renderer() -> PaletteRenderer:
    return PaletteRenderer(load_default_fonts())


def render(config: PaletteImageConfig, renderer: PaletteRenderer | None = None, cancel=None) -> Image.Image:
    return (renderer or default_renderer()).render(config, cancel=cancel)
