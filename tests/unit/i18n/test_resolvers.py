"""Tests for pagelocale.i18n.resolvers module."""

import pytest

from pagelocale.i18n import (
    DEFAULT_LOCALES,
    LanguageNegotiator,
    LocaleDescriptor,
    LocaleCandidates,
    LocaleResolver,
    detect_environment_language,
    normalize_tag,
)
from tests.factories.i18n import make_locale_registry


@pytest.fixture
def resolver(registry):
    return LocaleResolver(registry)


class TestLocaleResolver:
    @pytest.mark.parametrize("code", [d.code for d in DEFAULT_LOCALES])
    def test_registered_default_candidate_wins(self, resolver, code):
        assert resolver.resolve([None, None, None, code], "anything") == code

    def test_precedence_requested_first(self, resolver):
        assert resolver.resolve(["fa", "ru", "en", "vi"], "zh-CN") == "fa"

    def test_precedence_persisted_before_environment(self, resolver):
        assert resolver.resolve([None, "ru", "en", "vi"], "zh-CN") == "ru"

    def test_precedence_environment_before_default(self, resolver):
        assert resolver.resolve([None, None, "en", "vi"], "zh-CN") == "en"

    def test_unsupported_candidates_are_skipped(self, resolver):
        assert resolver.resolve(["xx", "yy", None, "my"], "zh-CN") == "my"

    def test_traditional_chinese_environment(self, resolver, registry):
        result = resolver.resolve([None, None, "zh-TW", registry.default_code], "zh-CN")
        assert result == "zh-TW"

    def test_simplified_chinese_environment(self, resolver):
        assert resolver.resolve([None, None, "zh-Hans", None], "en") == "zh-CN"

    def test_environment_matching_beats_registered_default(self, resolver):
        """A region-tagged environment language is matched before the default."""
        assert resolver.resolve([None, None, "ru-RU", "en"], "zh-CN") == "ru"

    def test_simplified_chinese_environment_with_other_default(self, resolver):
        assert resolver.resolve([None, None, "zh-Hans", "en"], "en") == "zh-CN"

    def test_registered_default_when_environment_unmatched(self, resolver):
        assert resolver.resolve([None, None, "de-DE", "vi"], "zh-CN") == "vi"

    def test_environment_matching_when_no_candidate_is_registered(self, resolver):
        assert resolver.resolve([None, None, "ru-RU", "xx"], "zh-CN") == "ru"

    def test_fallback_returned_verbatim(self, resolver):
        assert resolver.resolve([None, None, "de-DE", None], "not-a-locale") == "not-a-locale"

    def test_all_empty_returns_fallback(self, resolver):
        assert resolver.resolve([], "zh-CN") == "zh-CN"

    def test_accepts_candidates_object(self, resolver):
        candidates = LocaleCandidates(persisted="vi", environment="en-US")
        assert resolver.resolve(candidates, "zh-CN") == "vi"

    def test_extra_candidates_ignored(self, resolver):
        assert resolver.resolve(["xx", None, None, "vi", "en"], "zh-CN") == "vi"

    def test_accepts_generator(self, resolver):
        candidates = (c for c in [None, "ru", None, "en", "fa"])
        assert resolver.resolve(candidates, "zh-CN") == "ru"


class TestLanguageNegotiator:
    @pytest.fixture
    def negotiator(self, registry):
        return LanguageNegotiator(registry)

    def test_exact_match(self, negotiator):
        assert negotiator.match("zh-TW") == "zh-TW"

    @pytest.mark.parametrize(
        "tag",
        ["zh-TW", "zh-HK", "zh-Hant", "zh-Hant-TW", "zh-hant-hk", "zh_TW.UTF-8"],
    )
    def test_traditional_chinese_markers(self, negotiator, tag):
        assert negotiator.match(tag) == "zh-TW"

    @pytest.mark.parametrize("tag", ["zh", "zh-SG", "zh-Hans", "zh-Hans-CN", "ZH-cn"])
    def test_simplified_chinese_default(self, negotiator, tag):
        assert negotiator.match(tag) == "zh-CN"

    @pytest.mark.parametrize(
        "tag, expected",
        [("en-US", "en"), ("en-GB", "en"), ("ru-RU", "ru"), ("fa-IR", "fa"), ("VI", "vi")],
    )
    def test_primary_subtag_match(self, negotiator, tag, expected):
        assert negotiator.match(tag) == expected

    def test_primary_subtag_match_uses_registry_order(self):
        registry = make_locale_registry(
            locales=[
                LocaleDescriptor("en", "English"),
                LocaleDescriptor("pt-BR", "Português (Brasil)"),
                LocaleDescriptor("pt-PT", "Português (Portugal)"),
            ],
        )
        negotiator = LanguageNegotiator(registry)
        assert negotiator.match("pt") == "pt-BR"
        assert negotiator.match("pt-AO") == "pt-BR"
        assert negotiator.match("pt-PT") == "pt-PT"

    def test_primary_subtag_is_not_a_prefix_match(self, negotiator):
        """"m" is not the primary subtag of "my"."""
        assert negotiator.match("m") is None

    def test_no_match(self, negotiator):
        assert negotiator.match("de-DE") is None

    @pytest.mark.parametrize("tag", [None, "", "C", "POSIX"])
    def test_empty_tags(self, negotiator, tag):
        assert negotiator.match(tag) is None

    def test_chinese_without_chinese_locales(self):
        negotiator = LanguageNegotiator(make_locale_registry())
        assert negotiator.match("zh-TW") is None


class TestNormalizeTag:
    @pytest.mark.parametrize(
        "raw, expected",
        [
            ("zh_TW.UTF-8", "zh-TW"),
            ("fa_IR@calendar=persian", "fa-IR"),
            ("  en-US ", "en-US"),
            ("ru", "ru"),
            ("C.UTF-8", None),
            ("POSIX", None),
            ("", None),
            (None, None),
        ],
    )
    def test_normalize(self, raw, expected):
        assert normalize_tag(raw) == expected


class TestDetectEnvironmentLanguage:
    def test_lc_all_wins(self):
        environ = {"LC_ALL": "fa_IR.UTF-8", "LANG": "en_US.UTF-8"}
        assert detect_environment_language(environ) == "fa-IR"

    def test_lang(self):
        assert detect_environment_language({"LANG": "zh_TW.UTF-8"}) == "zh-TW"

    def test_language_list_uses_first_entry(self):
        assert detect_environment_language({"LANGUAGE": "ru:en"}) == "ru"

    def test_c_locale_is_skipped(self):
        environ = {"LC_ALL": "C", "LANG": "vi_VN.UTF-8"}
        assert detect_environment_language(environ) == "vi-VN"

    def test_nothing_set(self):
        assert detect_environment_language({}) is None

    def test_reads_os_environ_by_default(self, monkeypatch):
        for name in ("LC_ALL", "LC_MESSAGES", "LANGUAGE"):
            monkeypatch.delenv(name, raising=False)
        monkeypatch.setenv("LANG", "my_MM.UTF-8")
        assert detect_environment_language() == "my-MM"
