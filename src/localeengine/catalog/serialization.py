"""JSON table format for locale catalogs.

The offline catalog generator writes, and the engine reads, one JSON
document of the form::

    {
      "source": "babel 2.18.0 / CLDR 47",
      "locales": {
        "en": {"decimal_separator": ".", "grouping_sizes": [3], ...},
        ...
      }
    }

Loading a table never imports Babel, so deployments can ship a pre-built
catalog and drop the CLDR dependency at runtime.

Python 3.11+.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from localeengine.diagnostics import CatalogError, ErrorTemplate

from .catalog import LocaleCatalog
from .record import LocaleData

__all__ = [
    "catalog_from_dict",
    "catalog_to_dict",
    "dump_catalog",
    "load_catalog",
]

logger = logging.getLogger(__name__)


def catalog_to_dict(catalog: LocaleCatalog) -> dict[str, Any]:
    """Convert a catalog to a JSON-compatible dict (locales in tag order)."""
    return {
        "source": catalog.source,
        "locales": {
            locale_id.tag: data.to_mapping() for locale_id, data in catalog.items()
        },
    }


def catalog_from_dict(data: Mapping[str, Any], *, origin: str = "<dict>") -> LocaleCatalog:
    """Build a catalog from the JSON table structure.

    Args:
        data: Decoded table with "locales" (required) and "source" (optional)
        origin: Where the data came from, for error messages

    Returns:
        Validated LocaleCatalog

    Raises:
        CatalogError: If the structure or any record is invalid
    """
    if not isinstance(data, Mapping):
        raise CatalogError(ErrorTemplate.catalog_file_invalid(origin, "top level must be an object"))

    locales = data.get("locales")
    if not isinstance(locales, Mapping):
        raise CatalogError(
            ErrorTemplate.catalog_file_invalid(origin, "'locales' must be an object")
        )

    source = data.get("source", "")
    if not isinstance(source, str):
        raise CatalogError(ErrorTemplate.catalog_file_invalid(origin, "'source' must be a string"))

    records: list[tuple[str, LocaleData]] = []
    for tag, values in locales.items():
        if not isinstance(values, Mapping):
            raise CatalogError(
                ErrorTemplate.invalid_field(tag, "record", "expected an object"),
                tag=tag,
            )
        records.append((tag, LocaleData.from_mapping(tag, values)))

    return LocaleCatalog(records, source=source)


def load_catalog(path: str | Path) -> LocaleCatalog:
    """Load a catalog from a JSON table file.

    Args:
        path: File written by dump_catalog() or scripts/generate_catalog.py

    Returns:
        Validated LocaleCatalog

    Raises:
        CatalogError: If the file is not valid JSON or violates the contract
        OSError: If the file cannot be read
    """
    file_path = Path(path)
    try:
        with file_path.open(encoding="utf-8") as handle:
            data = json.load(handle)
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        raise CatalogError(ErrorTemplate.catalog_file_invalid(str(file_path), str(exc))) from exc

    catalog = catalog_from_dict(data, origin=str(file_path))
    logger.info("Loaded %d locales from %s", len(catalog), file_path)
    return catalog


def dump_catalog(catalog: LocaleCatalog, path: str | Path) -> None:
    """Write a catalog as a UTF-8 JSON table file."""
    file_path = Path(path)
    with file_path.open("w", encoding="utf-8") as handle:
        json.dump(catalog_to_dict(catalog), handle, ensure_ascii=False, indent=1)
        handle.write("\n")
    logger.info("Wrote %d locales to %s", len(catalog), file_path)
