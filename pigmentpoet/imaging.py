from __future__ import annotations

import io
from pathlib import Path

from PIL import Image, ImageOps

from .errors import BadSource

JPEG_QUALITY = 85


def open_image(source) -> Image.Image:
    """Decode ``source`` (Image, bytes or path) into a fully loaded RGB image."""
    if isinstance(source, Image.Image):
        return source.convert("RGB")
    try:
        if isinstance(source, (bytes, bytearray)):
            fp = io.BytesIO(source)
        elif isinstance(source, (str, Path)):
            fp = Path(source)
        else:
            raise BadSource(f"decode source image: unsupported source type {type(source).__name__}")
        with Image.open(fp) as im:
            im.load()
            im = ImageOps.exif_transpose(im)
            return im.convert("RGB")
    except (OSError, ValueError, Image.DecompressionBombError) as exc:
        raise BadSource(f"decode source image: {exc}") from exc


def fit_within(image: Image.Image, max_px: int) -> Image.Image:
    """Shrink so neither side exceeds ``max_px``; smaller images come back as-is."""
    w, h = image.size
    if w <= max_px and h <= max_px:
        return image
    scale = min(max_px / w, max_px / h)
    return image.resize((max(1, int(w * scale)), max(1, int(h * scale))), Image.LANCZOS)


def to_jpeg(image: Image.Image, quality: int = JPEG_QUALITY) -> bytes:
    buf = io.BytesIO()
    image.convert("RGB").save(buf, format="JPEG", quality=quality)
    return buf.getvalue()
