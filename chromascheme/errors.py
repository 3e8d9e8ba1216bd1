"""Exceptions and warning categories raised by chromascheme."""
from __future__ import annotations
from typing import Any


class ChromaSchemeError(Exception):
    """Base class for every error raised by chromascheme."""


class UnsupportedRangeMode(ChromaSchemeError, ValueError):
    def __init__(self, mode: Any) -> None:
        self.mode = mode
        super().__init__(
            f"rangescale ({mode!r}) not supported, should be 'clamp', 'extrema' or a tuple (lo, hi)"
        )


class InsufficientPaletteLength(ChromaSchemeError, ValueError):
    def __init__(self, length: int) -> None:
        self.length = length
        super().__init__(f"Palette of length {length} is not long enough, at least 2 colors are required")


class EmptyPaletteError(ChromaSchemeError, ValueError):
    def __init__(self) -> None:
        super().__init__("Palette requires at least one color")


class UnsupportedConversion(ChromaSchemeError, ValueError):
    pass


class SchemeOverwriteWarning(UserWarning):
    """Emitted when a named scheme replaces an existing registry entry."""
