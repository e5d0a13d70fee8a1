"""Moons: categories, generated objects and the factory that draws them."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Dict, List, Optional, Union

from stellargen.catalog import (
    CatalogError,
    SubtypeData,
    _category_table,
    _format_number,
    _subtype_table,
    load_categories,
    load_subtypes,
)
from stellargen.lehmer import Lehmer32
from stellargen.logger import Logger, get_logger
from stellargen.weighted import WeightedEntry, pick_weighted

DEFAULT_CATEGORY_PATH = "res/data/moon_category.csv"
DEFAULT_SUBTYPE_PATH = "res/data/moon_subtype.csv"


class MoonCategory(Enum):
    ROCK = "Rock"
    ICE = "Ice"
    VOLCANIC = "Volcanic"
    OCEANIC = "Oceanic"
    CAPTURED = "Captured"
    ARTIFICIAL = "Artificial"
    EXOTIC = "Exotic"

    def __str__(self) -> str:
        return self.value


def moon_category_from_string(text: str) -> MoonCategory:
    """Parse a moon category name; raises ValueError for unknown names."""
    try:
        return MoonCategory(text)
    except ValueError:
        raise ValueError(
            f"WARNING::StellarObjectFactory: Unknown stellar category: {text}"
        ) from None


@dataclass
class MoonObject:
    """A generated moon."""

    category: MoonCategory
    subtype: str
    mass: float
    radius: float
    temperature: float
    name: str = ""
    seed: int = 0
    orbital_radius: float = 0.0
    modifiers: List[str] = field(default_factory=list)

    def info_str(self, indent: int = 0) -> str:
        """Describe the moon, each line indented by ``indent`` spaces."""
        pad = " " * indent
        return (
            f"{pad}===== Moon Object =====\n"
            f"{pad}Name: {self.name}\n"
            f"{pad}Category: {self.category.value}\n"
            f"{pad}Subtype: {self.subtype}\n"
            f"{pad}Mass: {_format_number(self.mass)} earth masses\n"
            f"{pad}Radius: {_format_number(self.radius)} km\n"
            f"{pad}Temperature: {_format_number(self.temperature)} K\n"
        )


class MoonObjectFactory:
    """Draws moons from weighted category and subtype tables."""

    def __init__(
        self,
        category_path: Union[str, Path] = DEFAULT_CATEGORY_PATH,
        subtype_path: Union[str, Path] = DEFAULT_SUBTYPE_PATH,
        logger: Optional[Logger] = None,
    ) -> None:
        self._logger = logger if logger is not None else get_logger()
        self._category_entries: List[WeightedEntry[MoonCategory]] = load_categories(
            category_path, moon_category_from_string, self._logger
        )
        subtype_entries, database = load_subtypes(
            subtype_path, moon_category_from_string, self._logger
        )
        self._subtype_entries: Dict[MoonCategory, List[WeightedEntry[str]]] = subtype_entries
        self._subtype_database: Dict[str, SubtypeData] = database

    def generate(self, rng: Lehmer32) -> MoonObject:
        """Draw a category, then a subtype of it, then its physical properties."""
        if not self._category_entries:
            raise CatalogError("MoonFactory: No moon category is available")
        category = pick_weighted(self._category_entries, rng)

        choices = self._subtype_entries.get(category)
        if not choices:
            raise CatalogError(f"MoonFactory: No subtype for category: {category.value}")
        subtype = pick_weighted(choices, rng)

        bounds = self._subtype_database[subtype].data
        mass = rng.uniform_float(bounds.get("MinMassEarth", 0.0), bounds.get("MaxMassEarth", 0.0))
        radius = rng.uniform_float(bounds.get("MinRadiusKm", 0.0), bounds.get("MaxRadiusKm", 0.0))
        temperature = rng.uniform_float(
            bounds.get("MinTemperatureK", 0.0), bounds.get("MaxTemperatureK", 0.0)
        )
        return MoonObject(category, subtype, mass, radius, temperature)

    def info_category_str(self) -> str:
        return _category_table("Moon", self._category_entries, lambda c: c.value)

    def info_subtype_str(self) -> str:
        return _subtype_table("Moon", self._subtype_database, lambda c: c.value)