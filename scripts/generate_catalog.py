#!/usr/bin/env python3
"""Generate a JSON locale catalog from Babel CLDR data.

Builds one LocaleData record per locale Babel ships (or per requested
locale) and writes the JSON table that load_catalog() and the
LOCALEENGINE_CATALOG environment variable consume. Deployments that ship
the generated file do not need Babel's CLDR data at runtime.

Checks:
    1. Every requested locale builds a valid record (skips are reported).
    2. The written file loads back into an identical catalog.

Exit codes:
    0: Catalog written and verified.
    1: Babel missing, no locales built, or the round-trip check failed.

Usage:
    generate_catalog.py OUTPUT [--locale en_GB --locale de ...] [--verbose]

Python 3.11+. Requires Babel.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path


def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        description="Generate a JSON locale catalog from Babel CLDR data.",
    )
    parser.add_argument(
        "output",
        type=Path,
        help="Path of the JSON catalog file to write.",
    )
    parser.add_argument(
        "--locale", "-l",
        action="append",
        dest="locales",
        metavar="IDENTIFIER",
        help="Babel locale identifier to include (repeatable; default: all).",
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Log skipped locales and build progress.",
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    """Build, write and verify the catalog."""
    args = _parse_args(argv)
    logging.basicConfig(
        level=logging.INFO if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    from localeengine.core import BabelImportError  # noqa: PLC0415

    try:
        from localeengine.catalog import (  # noqa: PLC0415
            build_cldr_catalog,
            dump_catalog,
            load_catalog,
        )

        catalog = build_cldr_catalog(args.locales)
    except BabelImportError as exc:
        print(f"[ERROR] {exc}")
        print("[EXIT-CODE] 1")
        return 1

    if not len(catalog):
        print("[FAIL] No locales could be built.")
        print("[EXIT-CODE] 1")
        return 1

    dump_catalog(catalog, args.output)
    reloaded = load_catalog(args.output)
    if list(reloaded.items()) != list(catalog.items()) or reloaded.source != catalog.source:
        print(f"[FAIL] {args.output} does not load back into the same catalog.")
        print("[EXIT-CODE] 1")
        return 1

    print(f"[PASS] Wrote {len(catalog)} locales ({catalog.source}) to {args.output}")
    print("[EXIT-CODE] 0")
    return 0


if __name__ == "__main__":
    sys.exit(main())
