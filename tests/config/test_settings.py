"""Tests for RangeSettings — unified settings with TOML source."""

from pathlib import Path

import pytest
from pydantic import ValidationError

from rangectl.config.settings import ConfigError, RangeSettings

GERMAN = """\
[locales.de]
month = ["Jan", "Feb", "Mär", "Apr", "Mai", "Jun", "Jul", "Aug", "Sep", "Okt", "Nov", "Dez"]
format = ["Date", ". ", "LocaleMonth", " ", "FullYear"]
init = "Datum wählen..."

[locales.de.rules]
"+1m" = "Monatlich"
"""


@pytest.fixture(autouse=True)
def _no_config_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("RANGECTL_CONFIG", raising=False)


class TestRangeSettingsDefaults:
    def test_all_defaults(self, tmp_path: Path) -> None:
        """With no TOML and no env vars, all fields use code defaults."""
        settings = RangeSettings.from_cli(start_dir=tmp_path)
        assert settings.config_path is None
        assert settings.json_output is False
        assert settings.quiet is False
        assert settings.lang is None
        assert settings.selector.initial_rule == "+1m"
        assert settings.state.rule_field == "__daterange"
        assert settings.locales == {}
        assert settings.effective_lang == "en"

    def test_frozen(self, tmp_path: Path) -> None:
        settings = RangeSettings.from_cli(start_dir=tmp_path)
        with pytest.raises(ValidationError):
            settings.quiet = True  # type: ignore[misc]


class TestTomlSource:
    def test_loads_from_toml(self, tmp_path: Path) -> None:
        toml = tmp_path / "rangectl.toml"
        toml.write_text('[selector]\nranges = ["+7d", "+1m", "+0"]\ninit_range = 0\nlang = "fr"\n')
        settings = RangeSettings.from_cli(start_dir=tmp_path)
        assert settings.config_path == toml
        assert settings.selector.ranges == ["+7d", "+1m", "+0"]
        assert settings.selector.initial_rule == "+7d"
        assert settings.effective_lang == "fr"
        assert settings.state.from_field == "from"  # default preserved

    def test_found_from_subdirectory(self, tmp_path: Path) -> None:
        (tmp_path / "rangectl.toml").write_text("[selector]\nprevious = true\n")
        child = tmp_path / "a" / "b"
        child.mkdir(parents=True)
        assert RangeSettings.from_cli(start_dir=child).selector.previous is True

    def test_empty_toml_uses_defaults(self, tmp_path: Path) -> None:
        (tmp_path / "rangectl.toml").write_text("")
        settings = RangeSettings.from_cli(start_dir=tmp_path)
        assert settings.selector.init_range == 4

    def test_explicit_config_path(self, tmp_path: Path) -> None:
        custom = tmp_path / "custom" / "picker.toml"
        custom.parent.mkdir(parents=True)
        custom.write_text('[state]\nrule_field = "period"\n')
        settings = RangeSettings.from_cli(config_path=str(custom), start_dir=tmp_path)
        assert settings.state.rule_field == "period"
        assert settings.config_path == custom

    def test_missing_explicit_path_ignored(self, tmp_path: Path) -> None:
        (tmp_path / "rangectl.toml").write_text("[selector]\nprevious = true\n")
        settings = RangeSettings.from_cli(config_path=str(tmp_path / "nope.toml"), start_dir=tmp_path)
        assert settings.config_path is None
        assert settings.selector.previous is False

    def test_invalid_toml(self, tmp_path: Path) -> None:
        (tmp_path / "rangectl.toml").write_text("[selector\n")
        with pytest.raises(ConfigError, match="Invalid TOML"):
            RangeSettings.from_cli(start_dir=tmp_path)

    def test_invalid_values(self, tmp_path: Path) -> None:
        (tmp_path / "rangectl.toml").write_text('[selector]\nranges = ["+1m", "monthly"]\n')
        with pytest.raises(ValidationError):
            RangeSettings.from_cli(start_dir=tmp_path)


class TestLocales:
    def test_config_locale_registered(self, tmp_path: Path) -> None:
        (tmp_path / "rangectl.toml").write_text(GERMAN)
        settings = RangeSettings.from_cli(start_dir=tmp_path, lang="de")
        registry = settings.locale_registry()
        assert registry.languages() == ["de", "en", "fr"]
        assert registry.rule_label("de", "+1m") == "Monatlich"
        assert registry.month_label("de", 2) == "Mär"

    def test_config_locale_replaces_shipped(self, tmp_path: Path) -> None:
        (tmp_path / "rangectl.toml").write_text('[locales.en]\ninit = "Pick..."\n')
        registry = RangeSettings.from_cli(start_dir=tmp_path).locale_registry()
        assert registry.get("en").init == "Pick..."
        assert registry.get("en").month == []

    def test_invalid_locale(self, tmp_path: Path) -> None:
        (tmp_path / "rangectl.toml").write_text('[locales.de]\nmonth = ["Jan"]\n')
        with pytest.raises(ValidationError):
            RangeSettings.from_cli(start_dir=tmp_path)


class TestCliFlags:
    def test_cli_flags_override(self, tmp_path: Path) -> None:
        settings = RangeSettings.from_cli(
            start_dir=tmp_path,
            json_output=True,
            quiet=True,
            verbose=True,
            lang="fr",
        )
        assert settings.json_output is True
        assert settings.quiet is True
        assert settings.verbose is True
        assert settings.effective_lang == "fr"

    def test_lang_flag_beats_toml(self, tmp_path: Path) -> None:
        (tmp_path / "rangectl.toml").write_text('[selector]\nlang = "fr"\n')
        settings = RangeSettings.from_cli(start_dir=tmp_path, lang="en")
        assert settings.effective_lang == "en"
        assert settings.selector.lang == "fr"


class TestEnvVars:
    def test_env_var_override(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("RANGECTL_QUIET", "true")
        assert RangeSettings.from_cli(start_dir=tmp_path).quiet is True

    def test_nested_env_var_beats_toml(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        (tmp_path / "rangectl.toml").write_text('[selector]\nlang = "fr"\n')
        monkeypatch.setenv("RANGECTL_SELECTOR__LANG", "en")
        settings = RangeSettings.from_cli(start_dir=tmp_path)
        assert settings.selector.lang == "en"

    def test_config_env_var(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        custom = tmp_path / "elsewhere.toml"
        custom.write_text("[selector]\ninit_range = 8\n")
        monkeypatch.setenv("RANGECTL_CONFIG", str(custom))
        settings = RangeSettings.from_cli(start_dir=tmp_path)
        assert settings.selector.initial_rule == "+1y"
