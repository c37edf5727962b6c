"""Tests for the Babel-built catalog (catalog/cldr.py).

Only assertions that have been stable across CLDR releases are made here:
separators, grouping and digits of major locales, month and weekday
order, and territory currencies. Exact patterns and symbols are covered
by the synthetic-record tests instead.

Python 3.11+.
"""

import importlib.util
import logging
from pathlib import Path
from types import ModuleType

import pytest

from localeengine.catalog import (
    LocaleCatalog,
    LocaleId,
    build_cldr_catalog,
    build_cldr_record,
    default_catalog,
    dump_catalog,
)
from localeengine.catalog.cldr import grouping_sizes_from, native_digits_for
from localeengine.localization import fallback, parse_locale
from localeengine.runtime import currency_format, format_number, number_format

_IDENTIFIERS = ("ar_EG", "de", "de_AT", "en", "en_GB", "hi", "zh", "zh_Hans", "zh_Hans_HK")


@pytest.fixture(scope="module")
def cldr_catalog() -> LocaleCatalog:
    return build_cldr_catalog(_IDENTIFIERS)


class TestHelpers:
    """Test the Babel-to-record conversion helpers."""

    @pytest.mark.parametrize(
        ("grouping", "expected"),
        [
            ((3, 3), (3,)),
            ((3, 2), (3, 2)),
            ((4, 4), (4,)),
            ((1000, 1000), (0,)),
            ((0, 0), (0,)),
            ((3, 1000), (3,)),
        ],
    )
    def test_grouping_sizes_from(self, grouping: tuple[int, int], expected: tuple[int, ...]) -> None:
        """Babel (primary, secondary) pairs map to grouping_sizes."""
        assert grouping_sizes_from(grouping) == expected

    def test_native_digits_for_known_system(self) -> None:
        """Devanagari digits run from U+0966."""
        digits = native_digits_for("deva")
        assert digits is not None
        assert digits[0] == "०"
        assert digits[9] == "९"

    @pytest.mark.parametrize("system", ["latn", "hanidec", "nonexistent"])
    def test_native_digits_for_ascii_or_unknown(self, system: str) -> None:
        """Latin and unsupported systems give None."""
        assert native_digits_for(system) is None


class TestBuildRecord:
    """Test build_cldr_record for individual locales."""

    def test_english(self) -> None:
        """English basics."""
        record = build_cldr_record("en")
        assert record.decimal_separator == "."
        assert record.grouping_separator == ","
        assert record.grouping_sizes == (3,)
        assert record.native_digits is None
        assert record.months_wide[0] == "January"
        assert record.months_abbreviated[11] == "Dec"
        assert record.days_wide[0] == "Sunday"
        assert record.days_wide[1] == "Monday"
        assert record.am_marker == "AM"
        assert record.currency_code == "USD"
        assert record.currency_symbol == "$"
        assert "\xa4" in record.currency_pattern

    def test_german(self) -> None:
        """German separators and Euro via likely subtags."""
        record = build_cldr_record("de")
        assert record.decimal_separator == ","
        assert record.grouping_separator == "."
        assert record.days_wide[1] == "Montag"
        assert record.currency_code == "EUR"

    @pytest.mark.parametrize(
        ("identifier", "am_marker", "pm_marker"),
        [("ja", "午前", "午後"), ("zh_Hans_HK", "上午", "下午")],
    )
    def test_day_period_markers_not_defaulted(
        self, identifier: str, am_marker: str, pm_marker: str
    ) -> None:
        """Locales whose wide periods are aliased still get native markers."""
        record = build_cldr_record(identifier)
        assert record.am_marker == am_marker
        assert record.pm_marker == pm_marker

    def test_hindi_grouping(self) -> None:
        """Indian grouping comes from the decimal pattern."""
        assert build_cldr_record("hi").grouping_sizes == (3, 2)

    def test_arabic_egypt_native_digits(self) -> None:
        """ar_EG uses Arabic-Indic digits by default."""
        record = build_cldr_record("ar_EG")
        assert record.native_digits == tuple(chr(0x0660 + offset) for offset in range(10))
        assert record.currency_code == "EGP"

    def test_unknown_identifier(self) -> None:
        """Identifiers without CLDR data raise Babel's error."""
        from babel.core import UnknownLocaleError as BabelUnknownLocaleError  # noqa: PLC0415

        with pytest.raises(BabelUnknownLocaleError):
            build_cldr_record("xx_YY")


class TestBuildCatalog:
    """Test build_cldr_catalog."""

    def test_tags_are_hyphenated(self, cldr_catalog: LocaleCatalog) -> None:
        """Identifiers become hyphenated tags."""
        assert cldr_catalog.tags == tuple(
            sorted(identifier.replace("_", "-") for identifier in _IDENTIFIERS)
        )

    def test_source_names_versions(self, cldr_catalog: LocaleCatalog) -> None:
        """The source records Babel and CLDR versions."""
        assert cldr_catalog.source.startswith("babel ")
        assert "/ CLDR " in cldr_catalog.source

    def test_unknown_identifiers_skipped(self, caplog: pytest.LogCaptureFixture) -> None:
        """Failing locales are logged and left out."""
        with caplog.at_level(logging.WARNING, logger="localeengine.catalog.cldr"):
            table = build_cldr_catalog(["en", "xx_YY"])
        assert table.tags == ("en",)
        assert "Skipping locale xx-YY" in caplog.text

    def test_fallback_relation(self, cldr_catalog: LocaleCatalog) -> None:
        """Chains follow the tag hierarchy."""
        assert fallback(LocaleId("en-GB"), catalog=cldr_catalog) == LocaleId("en")
        assert fallback(LocaleId("zh-Hans-HK"), catalog=cldr_catalog) == LocaleId("zh-Hans")
        assert fallback(LocaleId("ar-EG"), catalog=cldr_catalog) is None

    def test_formatting(self, cldr_catalog: LocaleCatalog) -> None:
        """End-to-end formatting against CLDR data."""
        assert format_number(1000000, cldr_catalog["en"]) == "1,000,000"
        assert format_number(10000000, cldr_catalog["hi"]) == "1,00,00,000"
        assert format_number(0, cldr_catalog["ar-EG"]) == "٠"
        assert number_format(-1234567, "de", catalog=cldr_catalog).endswith("1.234.567")
        assert currency_format(100, "en", catalog=cldr_catalog) == "$100,-"
        assert currency_format(1234567.89, "en", catalog=cldr_catalog) == "$1,234,567.89"


class TestDefaultCatalog:
    """Test default_catalog configuration."""

    def test_env_var_loads_file(
        self,
        cldr_catalog: LocaleCatalog,
        tmp_path: Path,
        monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        """LOCALEENGINE_CATALOG points default_catalog at a JSON table."""
        path = tmp_path / "catalog.json"
        dump_catalog(cldr_catalog, path)
        monkeypatch.setenv("LOCALEENGINE_CATALOG", str(path))
        default_catalog.cache_clear()
        try:
            table = default_catalog()
            assert table.tags == cldr_catalog.tags
            assert default_catalog() is table
        finally:
            default_catalog.cache_clear()

    def test_full_catalog(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Every Babel locale builds and parses back to itself."""
        monkeypatch.delenv("LOCALEENGINE_CATALOG", raising=False)
        default_catalog.cache_clear()
        table = default_catalog()
        assert len(table) > 100
        for locale_id in table:
            assert parse_locale(locale_id.tag.lower(), catalog=table) == locale_id
        assert parse_locale("en_GB") == LocaleId("en-GB")


def _load_script(name: str) -> ModuleType:
    path = Path(__file__).resolve().parents[1] / "scripts" / f"{name}.py"
    spec = importlib.util.spec_from_file_location(name, path)
    assert spec is not None
    assert spec.loader is not None
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


class TestGenerateCatalogScript:
    """Test scripts/generate_catalog.py end to end."""

    def test_writes_and_verifies(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        """The script writes a loadable file and reports success."""
        script = _load_script("generate_catalog")
        output = tmp_path / "catalog.json"
        assert script.main([str(output), "--locale", "en", "-l", "de"]) == 0
        captured = capsys.readouterr().out
        assert "[PASS] Wrote 2 locales" in captured
        assert "[EXIT-CODE] 0" in captured
        assert output.exists()

    def test_fails_when_nothing_builds(
        self, tmp_path: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        """Only unknown identifiers is a failure."""
        script = _load_script("generate_catalog")
        assert script.main([str(tmp_path / "empty.json"), "--locale", "xx_YY"]) == 1
        assert "[FAIL] No locales could be built." in capsys.readouterr().out
