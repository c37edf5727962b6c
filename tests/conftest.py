"""Shared pytest configuration for the LocaleEngine suite.

Hypothesis profiles (selected once per session):
- dev: 500 examples, the default for local runs
- ci: 50 derandomized examples, chosen when CI=true
- verbose: 100 examples with Hypothesis progress output

HYPOTHESIS_PROFILE=<name> overrides the automatic choice.

Tests marked ``fuzz`` are long-running property checks. They are skipped
unless the run selects them with ``pytest -m fuzz``.

Most tests format against the hand-written records in
tests/helpers/records.py, so expected strings never move with CLDR
releases. Only tests/test_cldr_catalog.py reads Babel's data.
"""

import os
from collections.abc import Iterator

import pytest
from hypothesis import Phase, Verbosity, settings

from localeengine.catalog import LocaleCatalog, LocaleData
from localeengine.runtime import LocaleContext
from tests.helpers.records import (
    arabic_record,
    english_record,
    german_record,
    hindi_record,
    synthetic_catalog,
    ungrouped_record,
)

# =============================================================================
# HYPOTHESIS PROFILES
# =============================================================================

_PHASES = (Phase.explicit, Phase.reuse, Phase.generate, Phase.shrink)

_PROFILES: dict[str, dict[str, object]] = {
    "dev": {"max_examples": 500},
    "ci": {"max_examples": 50, "derandomize": True, "print_blob": True},
    "verbose": {"max_examples": 100, "verbosity": Verbosity.verbose},
}

for _name, _options in _PROFILES.items():
    settings.register_profile(_name, phases=_PHASES, **_options)  # type: ignore[arg-type]


def _selected_profile() -> str:
    """HYPOTHESIS_PROFILE if it names a profile, else "ci" under CI, else "dev"."""
    requested = os.environ.get("HYPOTHESIS_PROFILE", "")
    if requested in _PROFILES:
        return requested
    return "ci" if os.environ.get("CI") == "true" else "dev"


settings.load_profile(_selected_profile())


# =============================================================================
# FUZZ MARKER
# =============================================================================


def pytest_configure(config: pytest.Config) -> None:
    config.addinivalue_line(
        "markers",
        "fuzz: long-running property checks (run with: pytest -m fuzz)",
    )


def pytest_collection_modifyitems(config: pytest.Config, items: list[pytest.Item]) -> None:
    """Skip fuzz tests unless the -m expression asks for them."""
    if "fuzz" in str(config.getoption("-m", default="")):
        return
    skip = pytest.mark.skip(reason="fuzz test; run with: pytest -m fuzz")
    for item in items:
        if item.get_closest_marker("fuzz") is not None:
            item.add_marker(skip)


# =============================================================================
# SYNTHETIC LOCALE DATA
# =============================================================================


@pytest.fixture
def en_data() -> LocaleData:
    return english_record()


@pytest.fixture
def de_data() -> LocaleData:
    return german_record()


@pytest.fixture
def hi_data() -> LocaleData:
    return hindi_record()


@pytest.fixture
def arab_data() -> LocaleData:
    return arabic_record()


@pytest.fixture
def ungrouped_data() -> LocaleData:
    return ungrouped_record()


@pytest.fixture(scope="session")
def catalog() -> LocaleCatalog:
    return synthetic_catalog()


@pytest.fixture
def clean_context_cache() -> Iterator[None]:
    """Empty the LocaleContext cache before and after the test."""
    LocaleContext.clear_cache()
    yield
    LocaleContext.clear_cache()
