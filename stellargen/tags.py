"""Named tags grouped by category, loaded from CSV."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Dict, Iterable, Optional, Union

from stellargen.logger import LogLevel, Logger, get_logger


class TagCategory(Enum):
    ENVIRONMENTAL = "Environmental"
    BIOLOGICAL = "Biological"
    GEOLOGICAL = "Geological"
    HAZARD = "Hazard"
    CIVILIZATION = "Civilization"
    GENERATION = "Generation"
    GAMEPLAY = "Gameplay"

    def __str__(self) -> str:
        return self.value


def tag_category_from_string(text: str) -> TagCategory:
    """Parse a category name; raises ValueError for unknown names."""
    try:
        return TagCategory(text)
    except ValueError:
        raise ValueError(f"TagCategory: Unknown tag category: {text}") from None


@dataclass(frozen=True, eq=False)
class Tag:
    """A tag; two tags are equal when their ids are."""

    id: int
    category: TagCategory

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Tag):
            return self.id == other.id
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self.id)


def has_tag(tags: Iterable[Tag], tag: Union[Tag, int]) -> bool:
    """True if a tag with the same id as ``tag`` is in ``tags``."""
    tag_id = tag.id if isinstance(tag, Tag) else tag
    return any(t.id == tag_id for t in tags)


class TagManager:
    """Registry of tags by name, handing out sequential ids."""

    def __init__(self, logger: Optional[Logger] = None) -> None:
        self._logger = logger if logger is not None else get_logger()
        self._next_id = 0
        self._tags: Dict[str, Tag] = {}

    def exists(self, name: str) -> bool:
        return name in self._tags

    def create(self, name: str, category: TagCategory) -> bool:
        """Register a new tag; returns False if the name is taken."""
        if self.exists(name):
            self._logger.log(
                LogLevel.WARNING,
                f"TagManager: Try to create an already existing tag. Tag: {name}",
            )
            return False
        self._tags[name] = Tag(self._next_id, category)
        self._next_id += 1
        return True

    def get(self, name: str) -> Tag:
        """Return the tag called ``name``; raises KeyError if unknown."""
        try:
            return self._tags[name]
        except KeyError:
            raise KeyError(f"TagManager: Unknown tag: {name}") from None

    def info_tag_str(self) -> str:
        lines = ["===== Tags =====\n"]
        for name, tag in self._tags.items():
            lines.append(
                f"    Tag: {name:>16}, Category:{tag.category.value:>16}, ID: {tag.id:>4}\n"
            )
        return "".join(lines)

    def load_tag_csv(self, file_path: Union[str, Path]) -> None:
        """Create tags from a CSV of ``name,category`` rows after a header line."""
        try:
            handle = open(file_path, encoding="utf-8")
        except OSError:
            self._logger.log(LogLevel.ERROR, f"TagManager: Can not open tag file: {file_path}")
            return

        with handle:
            rows = iter(handle)
            next(rows, None)
            for raw in rows:
                fields = raw.rstrip("\n").split(",")
                name = fields[0].strip(" \t")
                category_text = fields[1].strip(" \t") if len(fields) > 1 else ""
                try:
                    category = tag_category_from_string(category_text)
                except ValueError:
                    self._logger.log(
                        LogLevel.ERROR,
                        f"TagManager: Invalid tag category: {category_text}",
                    )
                    continue
                self.create(name, category)