"""Tests for locale resolution: parsing, fallback, negotiation, suggestion.

All tests resolve against the synthetic catalog, whose fallback chains are
zh-Hans-HK > zh-Hans > zh, en-GB > en, de-AT > de, and ar-EG (orphan).

Python 3.11+.
"""

import logging

import pytest
from hypothesis import event, given
from hypothesis import strategies as st

from localeengine.catalog import LocaleCatalog, LocaleId
from localeengine.diagnostics import DiagnosticCode, UnknownLocaleError
from localeengine.localization import (
    fallback,
    fallback_chain,
    levenshtein_distance,
    negotiate,
    negotiate_many,
    parse_locale,
    suggest,
)
from tests.helpers.records import SYNTHETIC_TAGS, synthetic_catalog

_CATALOG = synthetic_catalog()

catalog_tags = st.sampled_from(SYNTHETIC_TAGS)


def _id(tag: str) -> LocaleId:
    return LocaleId(tag)


class TestParseLocale:
    """Test parse_locale normalization and errors."""

    @pytest.mark.parametrize(
        ("code", "expected"),
        [
            ("en", "en"),
            ("en_GB", "en-GB"),
            ("en-gb", "en-GB"),
            ("ZH_hans_hk", "zh-Hans-HK"),
            (" de-AT ", "de-AT"),
        ],
    )
    def test_known_locales(self, catalog: LocaleCatalog, code: str, expected: str) -> None:
        """Spelling variants resolve to the canonical id."""
        assert parse_locale(code, catalog=catalog) == _id(expected)

    def test_unknown_locale_raises(self, catalog: LocaleCatalog) -> None:
        """Unknown codes raise UnknownLocaleError with the original input."""
        with pytest.raises(UnknownLocaleError) as exc_info:
            parse_locale("en_AU", catalog=catalog)
        assert exc_info.value.original_input == "en_AU"
        diagnostic = exc_info.value.diagnostic
        assert diagnostic is not None
        assert diagnostic.code is DiagnosticCode.UNKNOWN_LOCALE

    def test_unknown_locale_suggests(self, catalog: LocaleCatalog) -> None:
        """Close catalog tags appear in the hint."""
        with pytest.raises(UnknownLocaleError, match="Did you mean: en-GB") as exc_info:
            parse_locale("en-GBB", catalog=catalog)
        assert exc_info.value.diagnostic is not None
        assert exc_info.value.diagnostic.hint is not None
        assert exc_info.value.diagnostic.hint.startswith("Did you mean: en-GB")

    def test_unknown_locale_without_suggestions(self, catalog: LocaleCatalog) -> None:
        """Far-off input gets generic guidance."""
        with pytest.raises(UnknownLocaleError) as exc_info:
            parse_locale("qqq-Wxyz-QQ-variant", catalog=catalog)
        assert exc_info.value.diagnostic is not None
        assert "Did you mean" not in (exc_info.value.diagnostic.hint or "")

    def test_empty_string(self, catalog: LocaleCatalog) -> None:
        """Empty input is an unknown locale, not a crash."""
        with pytest.raises(UnknownLocaleError):
            parse_locale("", catalog=catalog)

    def test_unknown_locale_logged(
        self, catalog: LocaleCatalog, caplog: pytest.LogCaptureFixture
    ) -> None:
        """Failures are logged at DEBUG."""
        with (
            caplog.at_level(logging.DEBUG, logger="localeengine.localization.resolver"),
            pytest.raises(UnknownLocaleError),
        ):
            parse_locale("xx", catalog=catalog)
        assert "Unknown locale 'xx'" in caplog.text

    @given(tag=catalog_tags, upper=st.booleans(), posix=st.booleans())
    def test_round_trip(self, tag: str, upper: bool, posix: bool) -> None:
        """Every catalog tag parses back to itself in any spelling."""
        code = tag.upper() if upper else tag.lower()
        if posix:
            code = code.replace("-", "_")
        event(f"spelling={'upper' if upper else 'lower'}/{'posix' if posix else 'bcp47'}")
        assert parse_locale(code, catalog=_CATALOG) == _id(tag)


class TestFallback:
    """Test the fallback relation."""

    @pytest.mark.parametrize(
        ("tag", "expected"),
        [
            ("zh-Hans-HK", "zh-Hans"),
            ("zh-Hans", "zh"),
            ("en-GB", "en"),
            ("de-AT", "de"),
        ],
    )
    def test_parent(self, catalog: LocaleCatalog, tag: str, expected: str) -> None:
        """Dropping the last subtag yields the parent."""
        assert fallback(_id(tag), catalog=catalog) == _id(expected)

    @pytest.mark.parametrize("tag", ["en", "zh", "hi", "ar-EG"])
    def test_roots(self, catalog: LocaleCatalog, tag: str) -> None:
        """Language-only tags and orphans have no fallback."""
        assert fallback(_id(tag), catalog=catalog) is None

    def test_chain(self, catalog: LocaleCatalog) -> None:
        """The chain runs most specific first and includes the start."""
        assert fallback_chain(_id("zh-Hans-HK"), catalog=catalog) == (
            _id("zh-Hans-HK"),
            _id("zh-Hans"),
            _id("zh"),
        )

    def test_chain_of_root(self, catalog: LocaleCatalog) -> None:
        """A root's chain is just itself."""
        assert fallback_chain(_id("ar-EG"), catalog=catalog) == (_id("ar-EG"),)

    def test_chain_skips_missing_intermediate(self) -> None:
        """A gap in the tag hierarchy ends the chain."""
        table = LocaleCatalog({"zh": _CATALOG["zh"], "zh-Hans-HK": _CATALOG["zh-Hans-HK"]})
        assert fallback_chain(_id("zh-Hans-HK"), catalog=table) == (_id("zh-Hans-HK"),)

    @given(tag=catalog_tags)
    def test_chain_strictly_shortens(self, tag: str) -> None:
        """Each fallback is a proper prefix of its child and in the catalog."""
        chain = fallback_chain(_id(tag), catalog=_CATALOG)
        event(f"chain_length={len(chain)}")
        for child, parent in zip(chain, chain[1:], strict=False):
            assert child.tag.startswith(parent.tag + "-")
            assert parent in _CATALOG


class TestNegotiate:
    """Test negotiate and negotiate_many."""

    def test_exact_match(self, catalog: LocaleCatalog) -> None:
        """A requested id that is a candidate wins."""
        candidates = [_id("en"), _id("en-GB")]
        assert negotiate(_id("en-GB"), candidates, catalog=catalog) == _id("en-GB")

    def test_falls_back(self, catalog: LocaleCatalog) -> None:
        """The nearest candidate in the fallback chain is chosen."""
        candidates = [_id("de"), _id("zh")]
        assert negotiate(_id("zh-Hans-HK"), candidates, catalog=catalog) == _id("zh")

    def test_prefers_more_specific_parent(self, catalog: LocaleCatalog) -> None:
        """zh-Hans beats zh for zh-Hans-HK."""
        candidates = [_id("zh"), _id("zh-Hans")]
        assert negotiate(_id("zh-Hans-HK"), candidates, catalog=catalog) == _id("zh-Hans")

    def test_no_match(self, catalog: LocaleCatalog) -> None:
        """None when no chain member is available."""
        assert negotiate(_id("ar-EG"), [_id("en")], catalog=catalog) is None

    def test_empty_candidates(self, catalog: LocaleCatalog) -> None:
        """No candidates, no match."""
        assert negotiate(_id("en"), [], catalog=catalog) is None

    def test_negotiate_many_first_success_wins(self, catalog: LocaleCatalog) -> None:
        """Earlier preferences win even through fallback."""
        requested = [_id("ar-EG"), _id("de-AT"), _id("en")]
        candidates = [_id("en"), _id("de")]
        assert negotiate_many(requested, candidates, catalog=catalog) == _id("de")

    def test_negotiate_many_accepts_generators(self, catalog: LocaleCatalog) -> None:
        """Candidates may be a one-shot iterator."""
        requested = [_id("fr"), _id("en-GB")]
        candidates = (locale_id for locale_id in [_id("en")])
        assert negotiate_many(requested, candidates, catalog=catalog) == _id("en")

    def test_negotiate_many_none(self, catalog: LocaleCatalog) -> None:
        """None when nothing negotiates."""
        assert negotiate_many([_id("hi")], [_id("fr")], catalog=catalog) is None

    @given(tag=catalog_tags)
    def test_self_negotiates(self, tag: str) -> None:
        """Every id negotiates to itself when offered."""
        assert negotiate(_id(tag), [_id(tag)], catalog=_CATALOG) == _id(tag)

    @given(tag=catalog_tags, candidates=st.sets(catalog_tags))
    def test_result_is_candidate_in_chain(self, tag: str, candidates: set[str]) -> None:
        """A negotiated result is always an offered member of the chain."""
        offered = [_id(candidate) for candidate in candidates]
        result = negotiate(_id(tag), offered, catalog=_CATALOG)
        event(f"matched={result is not None}")
        if result is not None:
            assert result in offered
            assert result in fallback_chain(_id(tag), catalog=_CATALOG)


class TestSuggest:
    """Test fuzzy suggestions."""

    def test_closest_first(self, catalog: LocaleCatalog) -> None:
        """The nearest tag leads the results."""
        assert suggest("en-gbb", catalog=catalog)[0] == _id("en-GB")

    def test_case_insensitive(self, catalog: LocaleCatalog) -> None:
        """Exact matches in another case have distance zero."""
        assert suggest("ZH_HANS", catalog=catalog)[0] == _id("zh-Hans")

    def test_ties_broken_by_tag(self, catalog: LocaleCatalog) -> None:
        """Equal distances are ordered by tag."""
        results = suggest("xx", catalog=catalog, max_distance=2)
        distances = [levenshtein_distance("xx", r.tag.lower()) for r in results]
        assert distances == sorted(distances)
        for (left, d_left), (right, d_right) in zip(
            zip(results, distances, strict=True),
            zip(results[1:], distances[1:], strict=True),
            strict=False,
        ):
            if d_left == d_right:
                assert left.tag < right.tag

    def test_limit(self, catalog: LocaleCatalog) -> None:
        """At most ``limit`` results are returned."""
        assert len(suggest("de", catalog=catalog, limit=2)) == 2

    def test_nothing_close(self, catalog: LocaleCatalog) -> None:
        """Distant input yields no suggestions."""
        assert suggest("qqqqqqqqqqqqqqqqqqqq", catalog=catalog) == ()

    @given(code=st.text(alphabet="abcdehnrz-_GH", max_size=12))
    def test_results_within_distance(self, code: str) -> None:
        """Every suggestion is within max_distance and results are bounded."""
        results = suggest(code, catalog=_CATALOG, limit=4, max_distance=2)
        event(f"suggestions={len(results)}")
        assert len(results) <= 4
        key = code.strip().replace("_", "-").lower()
        for locale_id in results:
            assert levenshtein_distance(key, locale_id.tag.lower()) <= 2


class TestLevenshtein:
    """Test the edit distance helper."""

    @pytest.mark.parametrize(
        ("first", "second", "expected"),
        [
            ("", "", 0),
            ("", "abc", 3),
            ("abc", "", 3),
            ("kitten", "sitting", 3),
            ("en-gb", "en-gbb", 1),
            ("flaw", "lawn", 2),
            ("same", "same", 0),
        ],
    )
    def test_known_distances(self, first: str, second: str, expected: int) -> None:
        """Textbook examples."""
        assert levenshtein_distance(first, second) == expected

    @given(first=st.text(max_size=10), second=st.text(max_size=10))
    def test_symmetric(self, first: str, second: str) -> None:
        """d(a, b) == d(b, a)."""
        assert levenshtein_distance(first, second) == levenshtein_distance(second, first)

    @given(first=st.text(max_size=10), second=st.text(max_size=10))
    def test_bounds(self, first: str, second: str) -> None:
        """Length difference <= d(a, b) <= longer length."""
        distance = levenshtein_distance(first, second)
        assert abs(len(first) - len(second)) <= distance <= max(len(first), len(second))

    @given(a=st.text(max_size=6), b=st.text(max_size=6), c=st.text(max_size=6))
    def test_triangle_inequality(self, a: str, b: str, c: str) -> None:
        """d(a, c) <= d(a, b) + d(b, c)."""
        assert levenshtein_distance(a, c) <= levenshtein_distance(a, b) + levenshtein_distance(b, c)
