"""
Named palettes.

A ``SchemeRegistry`` is an ordinary mutable mapping from names to palettes,
owned by whoever builds it; there is no process-wide instance. Loaders fill
it once at startup with ``load_scheme`` and callers look palettes up by
name or search them with ``find_schemes``.

>>> schemes = SchemeRegistry()
>>> _ = load_scheme(schemes, "twotone", [(0, 0, 0), (1, 1, 1)], "custom", "black and white")
>>> [m.name for m in find_schemes(schemes, "white")]
['twotone']
"""
from __future__ import annotations

import re
import threading
import warnings
from collections.abc import MutableMapping
from dataclasses import dataclass
from typing import Dict, Iterator, List, Literal, Optional

from .errors import SchemeOverwriteWarning
from .palette import Palette, PaletteColors
from .types.color_types import ColorSpace

MatchField = Literal["name", "category", "notes"]

NOTES_PREVIEW = 30


class SchemeRegistry(MutableMapping):
    """Mapping of scheme names to palettes. Writes are serialized by a lock."""

    def __init__(self, schemes: Optional[Dict[str, Palette]] = None) -> None:
        self._schemes: Dict[str, Palette] = {}
        self._lock = threading.Lock()
        for name, palette in (schemes or {}).items():
            self.register(name, palette)

    def register(self, name: str, palette: Palette) -> bool:
        """
        Store ``palette`` under ``name``.

        Returns:
            True when an existing entry was overwritten.
        """
        if not isinstance(palette, Palette):
            raise TypeError(f"registry values must be Palette instances, got {type(palette).__name__}")
        with self._lock:
            overwritten = name in self._schemes
            self._schemes[name] = palette
        return overwritten

    def __setitem__(self, name: str, palette: Palette) -> None:
        self.register(name, palette)

    def __getitem__(self, name: str) -> Palette:
        return self._schemes[name]

    def __delitem__(self, name: str) -> None:
        with self._lock:
            del self._schemes[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._schemes)

    def __len__(self) -> int:
        return len(self._schemes)

    def __repr__(self) -> str:
        return f"SchemeRegistry({len(self)} schemes)"


def load_scheme(
    registry: SchemeRegistry,
    name: str,
    colors: PaletteColors,
    category: str = "",
    notes: str = "",
    space: Optional[ColorSpace | str] = None,
) -> Palette:
    """
    Build a palette from ``colors`` and register it under ``name``.

    Replacing an existing name is allowed and reported with a
    ``SchemeOverwriteWarning``.
    """
    palette = Palette(colors, category, notes, space)
    if registry.register(name, palette):
        warnings.warn(f"{name} overwritten", SchemeOverwriteWarning, stacklevel=2)
    return palette


@dataclass(frozen=True)
class SchemeMatch:
    name: str
    field: MatchField
    text: str


def find_schemes(registry: SchemeRegistry, pattern: str) -> List[SchemeMatch]:
    """
    Find schemes whose name, category or notes match ``pattern``.

    ``pattern`` is a case-insensitive regular expression. A name match hides
    a category match for the same scheme; a notes match is reported on its
    own, so one scheme can appear twice. Notes are previewed to their first
    30 characters.
    """
    regex = re.compile(pattern, re.IGNORECASE)
    matches: List[SchemeMatch] = []
    for name, palette in registry.items():
        if regex.search(name):
            matches.append(SchemeMatch(name, "name", name))
        elif regex.search(palette.category):
            matches.append(SchemeMatch(name, "category", palette.category))
        if regex.search(palette.notes):
            matches.append(SchemeMatch(name, "notes", palette.notes[:NOTES_PREVIEW]))
    return matches
