"""Color palette engine: extraction, harmonic rules, naming and rendering."""
from .color import HSL, LAB, RGB, format_hex, parse_hex
from .errors import (
    AssetError,
    BadDictionary,
    BadHex,
    BadPaletteFile,
    BadSource,
    Cancelled,
    EmptyPalette,
    PigmentError,
)
from .matcher import ColorMatcher, NamedColor, load_default_matcher, new_matcher
from .palette import (
    Palette,
    RuleKind,
    extract_palette,
    generate_palette,
    palette_from_image,
    palette_from_rule,
    palette_label,
    random_palette,
)
from .render import FontPair, PaletteImageConfig, PaletteRenderer, load_default_fonts, render

__version__ = "0.1.0"

__all__ = [
    "RGB",
    "HSL",
    "LAB",
    "parse_hex",
    "format_hex",
    "PigmentError",
    "BadHex",
    "BadPaletteFile",
    "BadDictionary",
    "EmptyPalette",
    "AssetError",
    "BadSource",
    "Cancelled",
    "ColorMatcher",
    "NamedColor",
    "new_matcher",
    "load_default_matcher",
    "Palette",
    "RuleKind",
    "extract_palette",
    "generate_palette",
    "palette_from_image",
    "palette_from_rule",
    "palette_label",
    "random_palette",
    "FontPair",
    "PaletteImageConfig",
    "PaletteRenderer",
    "load_default_fonts",
    "render",
]
