"""Embedded package data: the color-name dictionary and the label fonts."""
from __future__ import annotations

from importlib import resources

from .errors import AssetError

COLORS_FILE = "colors.json"
REGULAR_FONT_FILE = "DejaVuSans.ttf"
BOLD_FONT_FILE = "DejaVuSans-Bold.ttf"


def _read(*parts: str) -> bytes:
    path = resources.files("pigmentpoet") / "data"
    for part in parts:
        path = path / part
    try:
        return path.read_bytes()
    except OSError as exc:
        raise AssetError(f"read {'/'.join(parts)}: {exc}") from exc


def color_dictionary_bytes() -> bytes:
    return _read(COLORS_FILE)


def font_bytes() -> tuple[bytes, bytes]:
    """Return (regular, bold) TrueType data."""
    return _read("fonts", REGULAR_FONT_FILE), _read("fonts", BOLD_FONT_FILE)
