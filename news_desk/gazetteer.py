"""Fixed place-name lookup used to geotag articles.

Matching is whole-word and case-insensitive, and the table is scanned in
declaration order: when a text names several places, the earliest entry in
the table wins.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Iterable, List, Optional, Tuple

from .models import Location


@dataclass(frozen=True, slots=True)
class GazetteerEntry:
    key: str
    latitude: float
    longitude: float
    aliases: Tuple[str, ...] = ()

    @property
    def display_name(self) -> str:
        return self.key[:1].upper() + self.key[1:]


_US = (37.0902, -95.7129)
_UK = (54.5, -4.0)
_NYC = (40.7128, -74.0060)

# Alternate spellings matched on behalf of an existing key.
_ALIASES = {"us": ("u.s.",)}

DEFAULT_ENTRIES: Tuple[GazetteerEntry, ...] = tuple(
    GazetteerEntry(key, lat, lng, _ALIASES.get(key, ()))
    for key, (lat, lng) in (
        ("bermuda", (32.3078, -64.7505)),
        ("london", (51.5074, -0.1278)),
        ("uk", _UK),
        ("u.k.", _UK),
        ("united kingdom", _UK),
        ("lloyd's", (51.5130, -0.0822)),
        ("new york", _NYC),
        ("nyc", _NYC),
        ("florida", (27.6648, -81.5158)),
        ("california", (36.7783, -119.4179)),
        ("texas", (31.9686, -99.9018)),
        ("louisiana", (30.9843, -91.9623)),
        ("zurich", (47.3769, 8.5417)),
        ("swiss", (46.8182, 8.2275)),
        ("munich", (48.1351, 11.5820)),
        ("hannover", (52.3759, 9.7320)),
        ("paris", (48.8566, 2.3522)),
        ("singapore", (1.3521, 103.8198)),
        ("hong kong", (22.3193, 114.1694)),
        ("tokyo", (35.6762, 139.6503)),
        ("japan", (36.2048, 138.2529)),
        ("australia", (-25.2744, 133.7751)),
        ("sydney", (-33.8688, 151.2093)),
        ("canada", (56.1304, -106.3468)),
        ("germany", (51.1657, 10.4515)),
        ("france", (46.2276, 2.2137)),
        ("italy", (41.8719, 12.5674)),
        ("spain", (40.4637, -3.7492)),
        ("china", (35.8617, 104.1954)),
        ("india", (20.5937, 78.9629)),
        ("dubai", (25.2048, 55.2708)),
        ("uae", (23.4241, 53.8478)),
        ("usa", _US),
        ("us", _US),
        ("america", _US),
        ("caribbean", (15.3275, -61.3726)),
        ("vietnam", (14.0583, 108.2772)),
        ("jamaica", (18.1096, -77.2975)),
        ("basel", (47.5596, 7.5886)),
        ("seattle", (47.6062, -122.3321)),
    )
)


def _whole_word(*names: str) -> re.Pattern[str]:
    # Lookarounds instead of \b so names ending in punctuation ("u.k.") still match.
    alternation = "|".join(re.escape(name) for name in names)
    return re.compile(rf"(?<!\w)(?:{alternation})(?!\w)", re.IGNORECASE)


class Gazetteer:
    """Ordered, read-only mapping of place names to coordinates."""

    def __init__(self, entries: Iterable[GazetteerEntry] = DEFAULT_ENTRIES) -> None:
        self._entries: List[Tuple[GazetteerEntry, re.Pattern[str]]] = []
        seen: set[str] = set()
        for entry in entries:
            key = entry.key.strip().lower()
            if not key:
                raise ValueError("Gazetteer keys must be non-empty")
            if key in seen:
                raise ValueError(f"Duplicate gazetteer key: {key!r}")
            seen.add(key)
            aliases = tuple(alias.strip().lower() for alias in entry.aliases if alias.strip())
            normalized = GazetteerEntry(key, entry.latitude, entry.longitude, aliases)
            self._entries.append((normalized, _whole_word(key, *aliases)))

    def keys(self) -> List[str]:
        return [entry.key for entry, _ in self._entries]

    def resolve(self, text: Optional[str]) -> Optional[Location]:
        if not text:
            return None
        for entry, pattern in self._entries:
            if pattern.search(text):
                return Location(entry.latitude, entry.longitude, entry.display_name)
        return None

    def locate(self, title: Optional[str], summary: Optional[str]) -> Optional[Location]:
        """Resolve against the title first, falling back to the summary."""
        return self.resolve(title) or self.resolve(summary)
