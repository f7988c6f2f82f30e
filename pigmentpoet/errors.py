from __future__ import annotations


class PigmentError(Exception):
    code = "E_PIGMENT"

    def __init__(self, message: str = "") -> None:
        super().__init__(message)


class BadHex(PigmentError, ValueError):
    code = "E_BAD_HEX"


class BadDictionary(PigmentError):
    code = "E_BAD_DICTIONARY"


class EmptyPalette(PigmentError):
    code = "E_EMPTY_PALETTE"


class AssetError(PigmentError):
    code = "E_ASSET"


class BadSource(PigmentError):
    code = "E_BAD_SOURCE"


class BadPaletteFile(PigmentError):
    code = "E_BAD_PALETTE_FILE"


class Cancelled(PigmentError):
    code = "E_CANCELLED"


def check_cancelled(cancel, stage: str) -> None:
    """Raise Cancelled if the caller's signal (anything with ``is_set()``) fired."""
    if cancel is not None and cancel.is_set():
        raise Cancelled(f"cancelled during {stage}")
