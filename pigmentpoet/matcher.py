from __future__ import annotations

import json
from dataclasses import dataclass
from functools import lru_cache

from . import assets
from .color import HSL, RGB, parse_hex, rgb_to_hsl
from .errors import BadDictionary, BadHex

# HSL distance counts double against raw RGB distance
HSL_WEIGHT = 2


@dataclass(frozen=True)
class NamedColor:
    hex: str
    name: str


@dataclass(frozen=True)
class _Entry:
    color: NamedColor
    rgb: RGB
    hsl: HSL


def _sq_sum(a, b) -> float:
    return sum((float(x) - float(y)) ** 2 for x, y in zip(a, b))


class ColorMatcher:
    """Nearest-name lookup over a fixed, ordered color dictionary.

    Built once from the JSON bytes; read-only afterwards, so a single instance
    can be shared between threads.
    """

    def __init__(self, entries: list[NamedColor]) -> None:
        if not entries:
            raise BadDictionary("parse color data: dictionary is empty")
        prepared = []
        for entry in entries:
            try:
                rgb = parse_hex(entry.hex)
            except BadHex as exc:
                raise BadDictionary(f"parse color data: entry {entry.name!r}: {exc}") from exc
            prepared.append(_Entry(color=entry, rgb=rgb, hsl=rgb_to_hsl(rgb)))
        self._entries = tuple(prepared)

    @classmethod
    def from_json(cls, data: bytes | str) -> "ColorMatcher":
        try:
            raw = json.loads(data)
        except ValueError as exc:
            raise BadDictionary(f"parse color data: {exc}") from exc
        if not isinstance(raw, list):
            raise BadDictionary("parse color data: expected a JSON array")
        try:
            entries = [NamedColor(hex=str(item["hex"]), name=str(item["name"])) for item in raw]
        except (KeyError, TypeError) as exc:
            raise BadDictionary(f"parse color data: malformed entry: {exc!r}") from exc
        return cls(entries)

    def __len__(self) -> int:
        return len(self._entries)

    @property
    def colors(self) -> list[NamedColor]:
        return [e.color for e in self._entries]

    def nearest(self, hex_color: str) -> NamedColor:
        """Return the dictionary entry closest to ``hex_color``.

        Score is the squared RGB distance plus twice the squared HSL distance
        (degrees and percents, unnormalized). Ties keep the earliest entry.
        """
        rgb = parse_hex(hex_color)
        hsl = rgb_to_hsl(rgb)

        best = None
        best_score = float("inf")
        for entry in self._entries:
            score = _sq_sum(rgb, entry.rgb) + HSL_WEIGHT * _sq_sum(hsl, entry.hsl)
            if score < best_score:
                best_score = score
                best = entry
        return best.color


def new_matcher(dictionary_bytes: bytes | str) -> ColorMatcher:
    return ColorMatcher.from_json(dictionary_bytes)


@lru_cache(maxsize=1)
def load_default_matcher() -> ColorMatcher:
    """Matcher over the embedded dictionary, built on first use."""
    return new_matcher(assets.color_dictionary_bytes())
