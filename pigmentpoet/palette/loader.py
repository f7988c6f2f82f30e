import json

from ..color import format_hex, parse_hex
from ..errors import BadPaletteFile
from .harmony import RuleKind
from .palette import Palette


def load_palette_from_json(json_path, matcher):
    """Load a palette written by ``export_json``.

    Args:
        json_path: Path to palette JSON file
        matcher: ColorMatcher used when the file carries no usable names

    Returns:
        tuple: (Palette, source filename or None)

    Raises:
        BadPaletteFile: unreadable file, malformed JSON or unknown rule
        BadHex: a color entry is not #RRGGBB
    """
    try:
        with open(json_path, encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, ValueError) as exc:
        raise BadPaletteFile(f"load palette: {exc}") from exc
    if not isinstance(data, dict):
        raise BadPaletteFile("load palette: expected a JSON object")

    # Re-parse so corrupt entries fail with BadHex instead of rendering garbage
    colors = [parse_hex(value) for value in data.get("colors", [])]

    rule = None
    if data.get("rule"):
        try:
            rule = RuleKind[data["rule"]]
        except (KeyError, TypeError):
            raise BadPaletteFile(f"load palette: unknown rule {data['rule']!r}") from None

    names = data.get("names") or []
    if len(names) != len(colors):
        palette = Palette.from_colors(colors, matcher, rule=rule)
    else:
        palette = Palette(
            colors=tuple(colors),
            names=tuple(str(n) for n in names),
            hex_codes=tuple(format_hex(c) for c in colors),
            rule=rule,
        )

    return palette, data.get("_source")
