"""City name normalization and labelling."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Dict, Iterable, List

import ftfy
from unidecode import unidecode


_NON_WORD_PATTERN = re.compile(r"[^\w\s-]")
_SEPARATOR_PATTERN = re.compile(r"[_\s]+")


def normalize_city(name: object) -> str:
    """Return a normalized key for `name` so spelling variants map to one city."""

    raw = str(name if name is not None else "").strip()
    if not raw:
        return ""

    fixed = ftfy.fix_text(raw)
    ascii_friendly = unidecode(fixed).lower()
    ascii_friendly = ascii_friendly.replace(".", " ")
    ascii_friendly = _NON_WORD_PATTERN.sub("", ascii_friendly)
    collapsed = _SEPARATOR_PATTERN.sub(" ", ascii_friendly)
    return collapsed.strip()


@dataclass
class CityIndex:
    """1-based labels for normalized city names, in order of first appearance."""

    labels: Dict[str, int] = field(default_factory=dict)
    display_names: List[str] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.display_names)

    def add(self, name: object) -> int:
        key = normalize_city(name)
        if not key:
            raise ValueError(f"city name {name!r} is empty after normalization")
        label = self.labels.get(key)
        if label is None:
            self.display_names.append(str(name).strip())
            label = len(self.display_names)
            self.labels[key] = label
        return label

    def label(self, name: object) -> int:
        return self.labels[normalize_city(name)]


def index_cities(names: Iterable[object]) -> CityIndex:
    index = CityIndex()
    for name in names:
        index.add(name)
    return index
