"""Loading of weighted category and subtype tables from CSV files."""

from __future__ import annotations

import math
import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import IO, Any, Callable, Dict, Iterable, Iterator, List, Optional, Tuple, Union

import numpy as np

from stellargen.logger import LogLevel, Logger, get_logger
from stellargen.weighted import WeightedEntry

_FLOAT_PREFIX = re.compile(
    r"[+-]?(?:(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?|inf(?:inity)?|nan)",
    re.IGNORECASE,
)
_FLOAT32_MAX = float(np.finfo(np.float32).max)
_SUBTYPE_HEADER = ["Subtype", "Category", "Weight"]

PathLike = Union[str, Path]
CategoryParser = Callable[[str], Any]


class CatalogError(Exception):
    """A catalog file is missing or malformed beyond recovery."""


@dataclass
class SubtypeData:
    """A subtype, its category, its weight and its named physical bounds."""

    category: Any
    subtype: str
    weight: float
    data: Dict[str, float] = field(default_factory=dict)


def _parse_float(text: str) -> float:
    """Parse the leading number of ``text`` as a single-precision float."""
    match = _FLOAT_PREFIX.match(text.lstrip(" \t\n\r\f\v"))
    if match is None:
        raise ValueError(f"not a number: {text!r}")
    value = float(match.group(0))
    if math.isfinite(value) and abs(value) > _FLOAT32_MAX:
        raise ValueError(f"number out of range: {text!r}")
    return float(np.float32(value))


def _split_fields(line: str) -> List[str]:
    fields = line.split(",")
    if fields and fields[-1] == "":
        fields.pop()
    return fields


def _trim(text: str) -> str:
    return text.strip(" \t")


def _lines(handle: IO[str]) -> Iterator[str]:
    for raw in handle:
        line = raw.rstrip("\n")
        if line:
            yield line


def _fatal(logger: Logger, message: str) -> CatalogError:
    logger.log(LogLevel.FATAL, message)
    return CatalogError(message)


def _open(path: PathLike, kind: str, logger: Logger) -> IO[str]:
    try:
        return open(path, encoding="utf-8")
    except OSError:
        raise _fatal(logger, f"Catalog: Can not open {kind} file: {path}") from None


def load_categories(
    path: PathLike, parse_category: CategoryParser, logger: Optional[Logger] = None
) -> List[WeightedEntry[Any]]:
    """Read ``category,weight`` rows after a header; bad rows are logged and skipped."""
    logger = logger if logger is not None else get_logger()
    entries: List[WeightedEntry[Any]] = []

    with _open(path, "category", logger) as handle:
        rows = _lines(handle)
        next(rows, None)
        for line in rows:
            fields = _split_fields(line)
            category_text = fields[0] if fields else ""
            weight_text = fields[1] if len(fields) > 1 else ""
            failed = False
            category = None
            weight = 0.0

            try:
                category = parse_category(category_text)
            except ValueError as error:
                failed = True
                logger.log(LogLevel.WARNING, str(error))

            try:
                weight = _parse_float(weight_text)
            except ValueError:
                failed = True
                logger.log(
                    LogLevel.WARNING,
                    f"Catalog: Failed to parse probability for {category_text}: {weight_text}",
                )

            if not failed:
                entries.append(WeightedEntry(category, weight))

    return entries


def load_subtypes(
    path: PathLike, parse_category: CategoryParser, logger: Optional[Logger] = None
) -> Tuple[Dict[Any, List[WeightedEntry[str]]], Dict[str, SubtypeData]]:
    """Read a subtype table.

    The header must start with ``Subtype,Category,Weight``; further columns are
    named numeric parameters. Returns the weighted subtypes of each category and
    the data of each subtype by name.
    """
    logger = logger if logger is not None else get_logger()
    header: Optional[List[str]] = None
    entries: Dict[Any, List[WeightedEntry[str]]] = {}
    database: Dict[str, SubtypeData] = {}

    with _open(path, "subtype", logger) as handle:
        for line in _lines(handle):
            values = [_trim(text) for text in _split_fields(line)]

            if header is None:
                header = values
                if header[:3] != _SUBTYPE_HEADER:
                    raise _fatal(
                        logger,
                        "Catalog: Subtype file do not have a correct layout. Column one must be "
                        "'Subtype', column two must be 'Category', column three must be 'Weight'",
                    )
                continue

            subtype = values[0] if values else ""
            category_text = values[1] if len(values) > 1 else ""
            weight_text = values[2] if len(values) > 2 else ""

            try:
                category = parse_category(category_text)
            except ValueError:
                raise _fatal(
                    logger, f"Catalog: Unknown category during load subtype: {category_text}"
                ) from None

            failed = False
            weight = 0.0
            try:
                weight = _parse_float(weight_text)
            except ValueError:
                failed = True
                logger.log(LogLevel.ERROR, f"Catalog: Can not read weight of subtype: {subtype}")

            data: Dict[str, float] = {}
            for column, text in enumerate(values[3:], start=3):
                if column >= len(header):
                    failed = True
                    logger.log(
                        LogLevel.ERROR,
                        f"Catalog: Subtype {subtype} has more values than the header has columns",
                    )
                    break
                try:
                    data[header[column]] = _parse_float(text)
                except ValueError:
                    failed = True
                    logger.log(
                        LogLevel.ERROR,
                        f"Catalog: Can not read subtype parameter: {header[column]} = {text}",
                    )

            if not failed:
                entries.setdefault(category, []).append(WeightedEntry(subtype, weight))
                database[subtype] = SubtypeData(category, subtype, weight, data)

    for subtype, record in database.items():
        for name in (header or [])[3:]:
            if name not in record.data:
                raise _fatal(
                    logger,
                    "Catalog: Element is missing in at least on subtype. "
                    f"Subtype={subtype}, element={name}",
                )

    return entries, database


def _format_number(value: float) -> str:
    """Format a number the way a default output stream does (six significant digits)."""
    return f"{value:.6g}"


def _category_table(
    title: str, entries: Iterable[WeightedEntry[Any]], name_of: Callable[[Any], str]
) -> str:
    lines = [f"===== {title} Categories =====\n"]
    for entry in entries:
        lines.append(
            f"Category: {name_of(entry.value):>16}, "
            f"probability: {_format_number(entry.weight):>4}\n"
        )
    return "".join(lines)


def _subtype_table(
    title: str, database: Dict[str, SubtypeData], name_of: Callable[[Any], str]
) -> str:
    lines = [f"===== {title} Subtypes =====\n"]
    for record in database.values():
        lines.append(
            f"Category: {name_of(record.category):>16}, subtype: {record.subtype:>16}, "
            f"weight: {_format_number(record.weight):>4}\n    Data ({len(record.data)}): \n"
        )
        for name, value in record.data.items():
            lines.append(f"     - {name} = {_format_number(value)}\n")
    return "".join(lines)