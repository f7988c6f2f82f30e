from .extract import extract_palette, extract_palette_kmeans
from .harmony import RuleKind, generate_palette, palette_label
from .loader import load_palette_from_json
from .palette import Palette, palette_from_image, palette_from_rule, random_palette

__all__ = [
    "extract_palette",
    "extract_palette_kmeans",
    "RuleKind",
    "generate_palette",
    "palette_label",
    "load_palette_from_json",
    "Palette",
    "palette_from_image",
    "palette_from_rule",
    "random_palette",
]
