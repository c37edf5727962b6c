"""Locale catalog: identifiers, metadata records and their data sources.

The catalog is the only data the runtime formatters read. It can be built
from Babel's CLDR data, loaded from a JSON table, or assembled by hand for
tests; formatting behavior depends only on the records, never on the source.

Python 3.11+.
"""

from .catalog import LocaleCatalog
from .cldr import build_cldr_catalog, build_cldr_record, default_catalog
from .record import RECORD_FIELDS, LocaleData, LocaleId
from .serialization import catalog_from_dict, catalog_to_dict, dump_catalog, load_catalog

__all__ = [
    "RECORD_FIELDS",
    "LocaleCatalog",
    "LocaleData",
    "LocaleId",
    "build_cldr_catalog",
    "build_cldr_record",
    "catalog_from_dict",
    "catalog_to_dict",
    "default_catalog",
    "dump_catalog",
    "load_catalog",
]
