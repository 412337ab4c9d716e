"""Tests for localization."""

import pytest
from ss_switch.lang import FALLBACK_LOCALE
from ss_switch.lang import FSI
from ss_switch.lang import PDI
from ss_switch.lang import Localizer
from ss_switch.lang import available_locales
from ss_switch.lang import load_catalog
from ss_switch.lang import negotiate
from ss_switch.lang import normalize_locale
from ss_switch.lang import requested_languages

MESSAGE_IDS = {
    "request-root",
    "select-config",
    "help-msg",
    "old-config",
    "no-config",
    "new-link",
    "no-candidates",
    "config-dir-error",
    "link-error",
    "prompt-cancelled",
    "command-failed",
    "command-launch-failed",
    "link-read-error",
}


class TestCatalogs:
    """Test shipped message catalogs."""

    def test_fallback_locale_shipped(self):
        assert FALLBACK_LOCALE in available_locales()

    @pytest.mark.parametrize("locale", ["en-US", "zh-CN"])
    def test_catalog_complete(self, locale):
        """Test every shipped catalog defines every message."""
        assert set(load_catalog(locale)) == MESSAGE_IDS

    def test_missing_catalog(self):
        with pytest.raises(FileNotFoundError):
            load_catalog("xx-XX")


class TestLocaleSelection:
    """Test locale normalization and negotiation."""

    @pytest.mark.parametrize(
        "value,expected",
        [
            ("zh_CN.UTF-8", "zh-CN"),
            ("en_US", "en-US"),
            ("de_DE@euro", "de-DE"),
            ("fr", "fr"),
            ("C", None),
            ("POSIX", None),
            ("", None),
        ],
    )
    def test_normalize_locale(self, value, expected):
        assert normalize_locale(value) == expected

    def test_requested_languages_priority(self):
        """Test LANGUAGE entries come before LC_ALL/LANG."""
        env = {"LANGUAGE": "zh_CN:en_US", "LANG": "de_DE.UTF-8"}
        assert requested_languages(env) == ["zh-CN", "en-US", "de-DE"]

    def test_requested_languages_first_set_variable_wins(self):
        env = {"LC_ALL": "zh_CN.UTF-8", "LANG": "de_DE.UTF-8"}
        assert requested_languages(env) == ["zh-CN"]

    def test_requested_languages_empty(self):
        assert requested_languages({}) == []

    def test_negotiate_exact(self):
        assert negotiate(["zh-CN"], ["en-US", "zh-CN"]) == "zh-CN"

    def test_negotiate_language_only(self):
        assert negotiate(["zh"], ["en-US", "zh-CN"]) == "zh-CN"

    def test_negotiate_fallback(self):
        assert negotiate(["fr-FR"], ["en-US", "zh-CN"]) == FALLBACK_LOCALE
        assert negotiate([], ["en-US", "zh-CN"]) == FALLBACK_LOCALE


class TestLocalizer:
    """Test Localizer lookups."""

    def test_default_locale(self):
        assert Localizer().locale == FALLBACK_LOCALE

    def test_simple_message(self):
        localizer = Localizer(["en-US"])
        assert localizer.get("request-root") == "Please run this program as root."

    def test_translated_message(self):
        localizer = Localizer(["zh-CN"], use_isolating=False)
        assert localizer.get("old-config", old="a.json") == "旧配置：a.json"

    def test_interpolation_without_isolation(self):
        localizer = Localizer(["en-US"], use_isolating=False)
        assert localizer.get("old-config", old="a.json") == "Old config: a.json"

    def test_interpolation_with_isolation(self):
        """Test arguments are wrapped in isolation marks when enabled."""
        localizer = Localizer(["en-US"])
        assert localizer.get("old-config", old="a.json") == f"Old config: {FSI}a.json{PDI}"

    def test_set_use_isolating(self):
        localizer = Localizer(["en-US"])
        localizer.set_use_isolating(False)
        assert FSI not in localizer.get("new-link", new="b.json", link="config.json")

    def test_missing_key_falls_back_to_fallback_catalog(self):
        localizer = Localizer(["zh-CN"])
        del localizer.messages["help-msg"]
        assert localizer.get("help-msg") == localizer.fallback["help-msg"]

    def test_unknown_key_returns_key(self, caplog):
        localizer = Localizer(["en-US"])
        assert localizer.get("no-such-message") == "no-such-message"
        assert "no-such-message" in caplog.text
